"""HTTP server: health, stats, subscriber management and news publishing over one in-process agency."""

from dotenv import load_dotenv
load_dotenv()

import time
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.middleware.base import BaseHTTPMiddleware

from newsagency import EmailSubscriber, MobileAppSubscriber, NewsAgency, Priority, config
from newsagency.observability import get_logger
from newsagency.protocol import (
    HealthResponse,
    SubscribeResponse,
    UnsubscribeResponse,
    subscribers_list_response,
    stats_response,
    error_body,
    ERROR_BAD_REQUEST,
    ERROR_SUBSCRIBER_NOT_FOUND,
)

agency = NewsAgency(config.agency_name())
_start_time: float = 0.0
logger = get_logger("newsagency.server")


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log method, path and status of every request."""
    async def dispatch(self, request: Request, call_next):
        started = time.time()
        response = await call_next(request)
        logger.info(
            "request_handled",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": int((time.time() - started) * 1000),
            },
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    global _start_time
    _start_time = time.time()
    yield


app = FastAPI(title="News Agency API", lifespan=lifespan)
app.add_middleware(RequestLogMiddleware)

router = APIRouter(prefix="/api/v1")


def _parse_priority(value: Optional[str], default: Priority) -> Priority:
    if value is None:
        return default
    return Priority.parse(value)


# ---- Health ----

@router.get("/health")
def health() -> JSONResponse:
    """GET /health → { uptime_sec, agency, subscribers }."""
    uptime = time.time() - _start_time if _start_time else 0.0
    body = HealthResponse(
        uptime_sec=uptime,
        agency=agency.name,
        subscribers=agency.subscriber_count,
    ).to_dict()
    return JSONResponse(content=body, status_code=200)


# ---- Stats ----

@router.get("/stats")
def stats() -> JSONResponse:
    """GET /stats → { metrics: { counters, gauges } }."""
    body = stats_response(agency.metrics.snapshot())
    return JSONResponse(content=body, status_code=200)


# ---- Subscribers ----

class EmailSubscribeBody(BaseModel):
    name: str
    email: str
    categories: List[str] = []
    min_priority: Optional[str] = None


class MobileSubscribeBody(BaseModel):
    user_id: str
    device_token: str
    interests: List[str] = []


@router.get("/subscribers")
def list_subscribers() -> JSONResponse:
    """GET /subscribers → { subscribers: [ ... ] } in registration order."""
    body = subscribers_list_response([s.to_dict() for s in agency.get_subscribers()])
    return JSONResponse(content=body, status_code=200)


@router.post("/subscribers/email")
def subscribe_email(body: EmailSubscribeBody) -> JSONResponse:
    """POST /subscribers/email → 201 { ok, subscriber_id, created }."""
    email = body.email.strip()
    if not email:
        return JSONResponse(content=error_body(ERROR_BAD_REQUEST, "email is required"), status_code=400)
    try:
        min_priority = _parse_priority(body.min_priority, Priority.NORMAL)
    except ValueError as e:
        return JSONResponse(content=error_body(ERROR_BAD_REQUEST, str(e)), status_code=400)
    subscriber = EmailSubscriber(body.name, email, body.categories, min_priority)
    created = agency.subscribe(subscriber)
    resp = SubscribeResponse(ok=True, subscriber_id=subscriber.subscriber_id, created=created)
    return JSONResponse(content=resp.to_dict(), status_code=201)


@router.post("/subscribers/mobile")
def subscribe_mobile(body: MobileSubscribeBody) -> JSONResponse:
    """POST /subscribers/mobile → 201 { ok, subscriber_id, created }."""
    user_id = body.user_id.strip()
    if not user_id:
        return JSONResponse(content=error_body(ERROR_BAD_REQUEST, "user_id is required"), status_code=400)
    subscriber = MobileAppSubscriber(user_id, body.device_token, body.interests)
    created = agency.subscribe(subscriber)
    resp = SubscribeResponse(ok=True, subscriber_id=subscriber.subscriber_id, created=created)
    return JSONResponse(content=resp.to_dict(), status_code=201)


@router.delete("/subscribers/{subscriber_id}")
def unsubscribe(subscriber_id: str) -> JSONResponse:
    """DELETE /subscribers/{subscriber_id} → 200 { status: unsubscribed } or 404."""
    subscriber = agency.get_subscriber(subscriber_id)
    if subscriber is None or not agency.unsubscribe(subscriber):
        return JSONResponse(
            content=error_body(ERROR_SUBSCRIBER_NOT_FOUND, "subscriber not found", subscriber_id),
            status_code=404,
        )
    return JSONResponse(
        content=UnsubscribeResponse(subscriber_id=subscriber_id).to_dict(),
        status_code=200,
    )


# ---- News ----

class PublishBody(BaseModel):
    title: str
    content: str
    category: str = "general"
    priority: Optional[str] = None


@router.post("/news")
def publish(body: PublishBody) -> JSONResponse:
    """POST /news → 201 news dict, after every subscriber has been updated."""
    try:
        priority = _parse_priority(body.priority, Priority.NORMAL)
    except ValueError as e:
        return JSONResponse(content=error_body(ERROR_BAD_REQUEST, str(e)), status_code=400)
    news = agency.publish(body.title, body.content, body.category or "general", priority)
    return JSONResponse(content=news.to_dict(), status_code=201)


app.include_router(router)
