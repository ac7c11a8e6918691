from typing import Optional

from .actor import RequestActor
from .database import SessionLocal
from .repositories.outage import OutageRepository
from .store import RecordStore

# Shared repository, built on first use and kept for the life of the process.
_outage_repository: Optional[OutageRepository] = None


def get_outage_repository() -> OutageRepository:
    global _outage_repository
    if _outage_repository is None:
        _outage_repository = OutageRepository(RecordStore(SessionLocal), RequestActor())
    return _outage_repository


def reset_outage_repository():
    """Forget the shared repository (used by tests)"""
    global _outage_repository
    _outage_repository = None
