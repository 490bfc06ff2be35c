"""NewsAgency: identity-keyed subscriber registry and synchronous broadcaster (in-memory only)."""

import threading
from typing import Dict, List, Optional, TextIO

from newsagency import config
from newsagency.console import emit
from newsagency.news import News, Priority
from newsagency.observability import Metrics, get_logger
from newsagency.subscriber import NewsSubscriber

logger = get_logger("newsagency.agency")


class NewsAgency:
    """Holds the live subscriber set and broadcasts each published item to every subscriber."""

    def __init__(
        self,
        name: str,
        metrics: Optional[Metrics] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._name = name
        self._subscribers: Dict[str, NewsSubscriber] = {}
        self._lock = threading.Lock()
        self._metrics = metrics if metrics is not None else Metrics()
        self._stream = stream
        self._separator = "-" * config.separator_width()

    @property
    def name(self) -> str:
        return self._name

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscribe(self, subscriber: NewsSubscriber) -> bool:
        """Register subscriber unless its identity is already present. Returns True if added."""
        sid = subscriber.subscriber_id
        with self._lock:
            if sid in self._subscribers:
                return False
            self._subscribers[sid] = subscriber
            count = len(self._subscribers)
        self._metrics.set_gauge("subscribers", count)
        emit(f"[SUBSCRIBED] {subscriber} to {self._name}", self._stream)
        subscriber.on_subscribe(self._name)
        return True

    def unsubscribe(self, subscriber: NewsSubscriber) -> bool:
        """Remove the entry with subscriber's identity. Returns True if one was removed."""
        with self._lock:
            removed = self._subscribers.pop(subscriber.subscriber_id, None)
            count = len(self._subscribers)
        if removed is None:
            return False
        self._metrics.set_gauge("subscribers", count)
        emit(f"[UNSUBSCRIBED] {subscriber} left {self._name}", self._stream)
        emit("", self._stream)
        subscriber.on_unsubscribe(self._name)
        return True

    def get_subscriber(self, subscriber_id: str) -> Optional[NewsSubscriber]:
        """Return subscriber by identity or None."""
        with self._lock:
            return self._subscribers.get(subscriber_id)

    def get_subscribers(self) -> List[NewsSubscriber]:
        """Return a copy of the subscriber list in registration order (under lock)."""
        with self._lock:
            return list(self._subscribers.values())

    def publish(
        self,
        title: str,
        content: str,
        category: str = "general",
        priority: Priority = Priority.NORMAL,
    ) -> News:
        """Create a News item and broadcast it; returns once every subscriber has been updated."""
        news = News(title=title, content=content, category=category, priority=priority)
        self._broadcast(news)
        return news

    def _broadcast(self, news: News) -> None:
        # Snapshot under lock, then deliver without holding it.
        subscribers = self.get_subscribers()
        logger.info(
            "publishing",
            extra={
                "agency": self._name,
                "news_id": news.news_id,
                "subscriber_count": len(subscribers),
            },
        )
        self._metrics.increment("news_published")
        emit("", self._stream)
        emit(f"{self._name} PUBLISHING {news}", self._stream)
        emit(self._separator, self._stream)
        for subscriber in subscribers:
            try:
                accepted = subscriber.accepts(news)
                subscriber.update(news)
                self._metrics.increment("updates")
                if accepted:
                    self._metrics.increment("notifications")
            except Exception as e:
                self._metrics.increment("delivery_failed")
                logger.exception(
                    "delivery_failed",
                    extra={
                        "subscriber_id": subscriber.subscriber_id,
                        "news_id": news.news_id,
                        "error": str(e),
                    },
                )
        emit(self._separator, self._stream)

    def __repr__(self) -> str:
        return f"NewsAgency(name={self._name!r}, subscribers={len(self._subscribers)})"
