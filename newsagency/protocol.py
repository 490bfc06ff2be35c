"""Protocol message shapes for the HTTP surface (health, subscribe, unsubscribe, errors)."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---- Health ----

@dataclass
class HealthResponse:
    """Response for GET /health."""
    uptime_sec: float
    agency: str
    subscribers: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "uptime_sec": int(self.uptime_sec),
            "agency": self.agency,
            "subscribers": self.subscribers,
        }


# ---- Subscribe ----

@dataclass
class SubscribeResponse:
    """Server response after subscribe. created is False when the identity was already registered."""
    ok: bool
    subscriber_id: str
    created: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class UnsubscribeResponse:
    """Response for DELETE /subscribers/{subscriber_id} (200 OK)."""
    status: str = "unsubscribed"
    subscriber_id: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def subscribers_list_response(subscribers: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Response for GET /subscribers."""
    return {"subscribers": subscribers}


def stats_response(snapshot: Dict[str, Dict[str, int]]) -> Dict[str, Any]:
    """Response for GET /stats."""
    return {"metrics": snapshot}


# ---- Errors ----

ERROR_BAD_REQUEST = "BAD_REQUEST"
ERROR_SUBSCRIBER_NOT_FOUND = "SUBSCRIBER_NOT_FOUND"


def error_body(code: str, message: str, subscriber_id: Optional[str] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"error": code, "message": message}
    if subscriber_id is not None:
        out["subscriber_id"] = subscriber_id
    return out
