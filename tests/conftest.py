from __future__ import annotations

import pytest

from newsagency import NewsAgency


@pytest.fixture
def agency() -> NewsAgency:
    return NewsAgency("GNN")
