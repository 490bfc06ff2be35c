"""Email subscriber: category interests plus a minimum priority threshold."""

from typing import Any, Dict, Iterable, Optional, TextIO

from newsagency.console import emit
from newsagency.news import News, Priority
from newsagency.subscriber import NewsSubscriber


class EmailSubscriber(NewsSubscriber):
    """Receives items in its categories that are at least as severe as min_priority."""

    def __init__(
        self,
        name: str,
        email: str,
        categories: Optional[Iterable[str]] = None,
        min_priority: Optional[Priority] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        super().__init__(categories, stream)
        self._name = name
        self._email = email
        self._min_priority = min_priority if min_priority is not None else Priority.NORMAL

    @property
    def subscriber_id(self) -> str:
        return f"email:{self._email}"

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def min_priority(self) -> Priority:
        return self._min_priority

    def accepts(self, news: News) -> bool:
        return super().accepts(news) and news.priority.at_least_as_severe_as(self._min_priority)

    def render(self, news: News) -> None:
        emit(f"EMAIL To: {self._name} <{self._email}>", self._stream)
        emit(f"      Subject: {news.priority.name}: {news.title}", self._stream)
        emit(f"      {news}", self._stream)
        emit("", self._stream)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update(name=self._name, email=self._email, min_priority=self._min_priority.name)
        return d

    def __str__(self) -> str:
        return f"EmailSubscriber[{self._name}]"
