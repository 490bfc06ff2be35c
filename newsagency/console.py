"""Console output for subscription notices, broadcasts and notifications."""

import sys
from typing import Optional, TextIO


def emit(line: str = "", stream: Optional[TextIO] = None) -> None:
    """Write one line to stream, or to the current sys.stdout when stream is None."""
    out = stream if stream is not None else sys.stdout
    out.write(line + "\n")
    out.flush()
