"""
Middleware package for the acting user and request logging
"""
from .request import (
    actor_middleware,
    logging_middleware,
    parse_actor_id,
    ACTOR_HEADER,
)

__all__ = [
    "actor_middleware",
    "logging_middleware",
    "parse_actor_id",
    "ACTOR_HEADER",
]
