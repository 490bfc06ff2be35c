"""Mobile push subscriber: category interests only, no priority filter."""

from typing import Any, Dict, Iterable, Optional, TextIO

from newsagency.console import emit
from newsagency.news import News
from newsagency.subscriber import NewsSubscriber

TOKEN_PREVIEW_LENGTH = 8


class MobileAppSubscriber(NewsSubscriber):
    """Receives every item in its interests regardless of priority."""

    def __init__(
        self,
        user_id: str,
        device_token: str,
        interests: Optional[Iterable[str]] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        super().__init__(interests, stream)
        self._user_id = user_id
        self._device_token = device_token

    @property
    def subscriber_id(self) -> str:
        return f"mobile:{self._user_id}"

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def token_preview(self) -> str:
        # Slicing returns the whole token when it is shorter than the preview.
        return self._device_token[:TOKEN_PREVIEW_LENGTH]

    def render(self, news: News) -> None:
        emit(f"PUSH User {self._user_id} (Device: {self.token_preview}...)", self._stream)
        emit(f"     {news}", self._stream)
        emit("", self._stream)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update(user_id=self._user_id, device=self.token_preview)
        return d

    def __str__(self) -> str:
        return f"MobileAppSubscriber[{self._user_id}]"
