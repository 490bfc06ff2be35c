"""News value and priority ordering."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Union


class Priority(Enum):
    """Severity of a news item. Lower value is more severe: BREAKING > URGENT > NORMAL."""

    BREAKING = 0
    URGENT = 1
    NORMAL = 2

    @property
    def rank(self) -> int:
        return self.value

    def at_least_as_severe_as(self, threshold: "Priority") -> bool:
        return self.rank <= threshold.rank

    @classmethod
    def parse(cls, value: Union["Priority", str]) -> "Priority":
        """Accept a Priority or a case-insensitive name ("urgent", "BREAKING")."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"unknown priority: {value!r}") from None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class News:
    """Represents one published news item. Immutable once created."""

    title: str
    content: str
    category: str = "general"
    priority: Priority = Priority.NORMAL
    news_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    published_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", self.category.lower())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize news for logging or transport."""
        return {
            "news_id": self.news_id,
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "priority": self.priority.name,
            "published_at": self.published_at.isoformat(),
        }

    def __str__(self) -> str:
        return (
            f"[{self.priority.name}] {self.title} ({self.category}) - "
            f"{self.published_at.strftime('%H:%M:%S')}"
        )
