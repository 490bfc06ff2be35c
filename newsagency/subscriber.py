"""Abstract NewsSubscriber with interest filtering and observability hooks."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Iterable, Optional, TextIO

from newsagency.observability import get_logger

if TYPE_CHECKING:
    from newsagency.news import News

WILDCARD_CATEGORY = "general"

logger = get_logger("newsagency.subscriber")


def normalize_interests(categories: Optional[Iterable[str]]) -> FrozenSet[str]:
    """Lowercase the interest set; missing or empty means the wildcard only."""
    interests = frozenset(c.lower() for c in (categories or ()))
    return interests or frozenset({WILDCARD_CATEGORY})


class NewsSubscriber(ABC):
    """Abstract base class for subscribers that receive news from an agency."""

    def __init__(
        self,
        categories: Optional[Iterable[str]] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._interests = normalize_interests(categories)
        self._stream = stream

    @property
    @abstractmethod
    def subscriber_id(self) -> str:
        """Stable identity within an agency, derived from the subscriber's own fields."""

    @property
    def interests(self) -> FrozenSet[str]:
        return self._interests

    def interested_in(self, category: str) -> bool:
        return WILDCARD_CATEGORY in self._interests or category in self._interests

    def accepts(self, news: "News") -> bool:
        """Category filter; subclasses narrow it further."""
        return self.interested_in(news.category)

    @abstractmethod
    def render(self, news: "News") -> None:
        """Write the notification for an accepted item."""

    def update(self, news: "News") -> None:
        """Called by NewsAgency on every publish; renders only when the filter accepts."""
        if self.accepts(news):
            self.render(news)

    def on_subscribe(self, agency_name: str) -> None:
        """Called when this subscriber is added to an agency (for observability)."""
        logger.info(
            "subscribed",
            extra={"agency": agency_name, "subscriber_id": self.subscriber_id},
        )

    def on_unsubscribe(self, agency_name: str) -> None:
        """Called when this subscriber is removed from an agency (for observability)."""
        logger.info(
            "unsubscribed",
            extra={"agency": agency_name, "subscriber_id": self.subscriber_id},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subscriber_id": self.subscriber_id,
            "kind": self.__class__.__name__,
            "interests": sorted(self._interests),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.subscriber_id!r})"
