"""
Data access for outages (scheduled maintenance windows).
"""
import logging
import time
from typing import Callable, Optional

from ..actor import ActorProvider
from ..exceptions import InvalidArgument
from ..models.outage import OutageRecord
from ..schemas.outage import Outage, OutageUpdateRecord
from ..store import RecordStore

logger = logging.getLogger(__name__)

TABLE = OutageRecord.__tablename__
ORDER_BY = ("starttime", "stoptime", "title")


def _check_id(outage_id) -> int:
    # bool is an int subclass but never a valid id
    if not isinstance(outage_id, int) or isinstance(outage_id, bool):
        raise InvalidArgument("outage id must be an int")
    if outage_id <= 0:
        raise InvalidArgument("outage id must be positive")
    return outage_id


class OutageRepository:
    """Creates, reads and deletes outages in the auth_outage table.

    The application shares a single instance (see dependencies.get_outage_repository).
    Instances cannot be copied or pickled.
    """

    def __init__(self, store: RecordStore, actor: ActorProvider, clock: Optional[Callable[[], int]] = None):
        self._store = store
        self._actor = actor
        self._clock = clock or (lambda: int(time.time()))

    def __copy__(self):
        raise TypeError("OutageRepository cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("OutageRepository cannot be copied")

    def __reduce__(self):
        raise TypeError("OutageRepository cannot be pickled")

    def get_all(self) -> list[Outage]:
        """All outages ordered by starttime, stoptime and title."""
        with self._store.get_recordset(TABLE, order_by=ORDER_BY) as rs:
            return [Outage.model_validate(row) for row in rs]

    def get_by_id(self, outage_id: int) -> Optional[Outage]:
        """Return the outage with the given id, or None if there is none.

        Raises InvalidArgument if outage_id is not a positive int.
        """
        _check_id(outage_id)
        row = self._store.get_record(TABLE, {"id": outage_id})
        if row is None:
            return None
        return Outage.model_validate(row)

    def save(self, outage: Outage) -> int:
        """Insert or update an outage and return its id.

        The given object is not modified; audit fields are stamped on a copy.
        Raises pydantic.ValidationError if the outage breaks its own rules.
        """
        # Re-validate into a fresh copy.
        outage = Outage.model_validate(outage.model_dump())
        actor_id = self._actor.id

        # New outage, set its creator.
        if outage.id is None:
            outage.createdby = actor_id

        outage.modifiedby = actor_id
        outage.lastmodified = self._clock()

        if outage.id is None:
            new_id = self._store.insert_record(TABLE, outage.model_dump(exclude={"id"}))
            logger.info(f"Outage #{new_id} '{outage.title}' created by user {actor_id}")
            return new_id

        # createdby is not part of the update record, so the creator is never overwritten.
        record = OutageUpdateRecord(**outage.model_dump(exclude={"createdby"}))
        self._store.update_record(TABLE, record.model_dump())
        logger.info(f"Outage #{outage.id} '{outage.title}' updated by user {actor_id}")
        return outage.id

    def delete(self, outage_id: int):
        """Delete an outage. Deleting an id that does not exist does nothing.

        Raises InvalidArgument if outage_id is not a positive int.
        """
        _check_id(outage_id)
        self._store.delete_records(TABLE, {"id": outage_id})
        logger.info(f"Outage #{outage_id} deleted")
