"""
Who is performing a write. The repository stamps createdby/modifiedby with
the id returned by an ActorProvider.
"""
from contextvars import ContextVar, Token
from typing import Optional, Protocol

from .config import settings

_current_actor: ContextVar[Optional[int]] = ContextVar("current_actor", default=None)


class ActorProvider(Protocol):
    @property
    def id(self) -> int: ...


class StaticActor:
    """Always the same actor, for scripts and tests"""

    def __init__(self, actor_id: int):
        self._id = actor_id

    @property
    def id(self) -> int:
        return self._id


class RequestActor:
    """The user the current request runs for, as set by actor_middleware"""

    def __init__(self, default_id: Optional[int] = None):
        self._default_id = default_id

    @property
    def id(self) -> int:
        actor_id = _current_actor.get()
        if actor_id is not None:
            return actor_id
        if self._default_id is not None:
            return self._default_id
        return settings.DEFAULT_ACTOR_ID


def set_current_actor(actor_id: Optional[int]) -> Token:
    return _current_actor.set(actor_id)


def reset_current_actor(token: Token):
    _current_actor.reset(token)
