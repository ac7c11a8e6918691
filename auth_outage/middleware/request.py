"""
Middleware for API endpoints - acting user and request logging
"""
from fastapi import Request
from typing import Callable
import logging
import time

from ..actor import set_current_actor, reset_current_actor

logger = logging.getLogger(__name__)

ACTOR_HEADER = "X-User-Id"


def parse_actor_id(value: str | None) -> int | None:
    """Return the user id carried by the header, or None if absent or malformed"""
    if not value:
        return None
    try:
        actor_id = int(value)
    except ValueError:
        logger.warning(f"⚠️ Ignoring malformed {ACTOR_HEADER} header: {value!r}")
        return None
    return actor_id if actor_id > 0 else None


async def actor_middleware(request: Request, call_next: Callable):
    """
    Middleware to record which user the request runs for.
    The id is used to stamp createdby/modifiedby on saved outages.
    """
    actor_id = parse_actor_id(request.headers.get(ACTOR_HEADER))
    request.state.actor_id = actor_id

    token = set_current_actor(actor_id)
    try:
        return await call_next(request)
    finally:
        reset_current_actor(token)


async def logging_middleware(request: Request, call_next: Callable):
    """
    Middleware to log all requests and responses.
    Logs timing, status, and details.
    """
    start_time = time.time()

    client_ip = request.client.host if request.client else "unknown"
    actor_id = getattr(request.state, "actor_id", None)

    logger.info(f"📥 {request.method} {request.url.path} from {client_ip} (user {actor_id or 'anonymous'})")

    try:
        response = await call_next(request)

        duration = (time.time() - start_time) * 1000  # ms

        status_emoji = "✅" if response.status_code < 400 else "❌"
        logger.info(
            f"{status_emoji} {request.method} {request.url.path} "
            f"→ {response.status_code} ({duration:.0f}ms)"
        )

        response.headers["X-Process-Time"] = f"{duration:.2f}ms"

        return response

    except Exception as e:
        duration = (time.time() - start_time) * 1000
        logger.error(f"❌ {request.method} {request.url.path} → ERROR ({duration:.0f}ms): {str(e)}")
        raise
