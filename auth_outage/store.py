"""
Generic record store on top of SQLAlchemy.

Tables are addressed by name and rows travel as plain dicts, so callers never
deal with sessions or ORM instances. Each call runs in its own session and
commits before returning.
"""
import logging
from typing import Any, Iterator, Optional, Sequence

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.orm import Session, sessionmaker

from .database import Base

logger = logging.getLogger(__name__)


class RecordSet:
    """Streaming cursor over the rows of a query. Must be closed once drained."""

    def __init__(self, session: Session, result):
        self._session = session
        self._result = result
        self.closed = False

    def __iter__(self) -> Iterator[dict]:
        for row in self._result.mappings():
            yield dict(row)

    def close(self):
        if self.closed:
            return
        self.closed = True
        try:
            self._result.close()
        finally:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class RecordStore:
    def __init__(self, session_factory: sessionmaker, metadata=Base.metadata):
        self._session_factory = session_factory
        self._metadata = metadata

    def _table(self, name: str) -> Table:
        try:
            return self._metadata.tables[name]
        except KeyError:
            raise KeyError(f"Unknown table: {name}") from None

    @staticmethod
    def _where(table: Table, filters: Optional[dict]):
        return [table.c[column] == value for column, value in (filters or {}).items()]

    def get_recordset(
        self,
        table: str,
        filters: Optional[dict] = None,
        order_by: Sequence[str] = (),
    ) -> RecordSet:
        """Open a cursor over the rows of `table` matching `filters`, sorted by `order_by` columns."""
        t = self._table(table)
        stmt = select(t).where(*self._where(t, filters)).order_by(*(t.c[column] for column in order_by))
        session = self._session_factory()
        try:
            result = session.execute(stmt, execution_options={"yield_per": 500})
        except Exception:
            session.close()
            raise
        return RecordSet(session, result)

    def get_record(self, table: str, filters: dict) -> Optional[dict]:
        """Return the single row matching `filters`, or None."""
        t = self._table(table)
        with self._session_factory() as session:
            row = session.execute(select(t).where(*self._where(t, filters))).mappings().one_or_none()
        return dict(row) if row is not None else None

    def insert_record(self, table: str, row: dict[str, Any]) -> int:
        """Insert a row and return the id assigned by the database."""
        t = self._table(table)
        values = {k: v for k, v in row.items() if not (k == "id" and v is None)}
        with self._session_factory() as session, session.begin():
            result = session.execute(insert(t).values(**values))
            new_id = result.inserted_primary_key[0]
        logger.debug(f"Inserted {table} #{new_id}")
        return new_id

    def update_record(self, table: str, row: dict[str, Any]):
        """Update the row identified by row["id"] with the remaining values."""
        t = self._table(table)
        values = dict(row)
        record_id = values.pop("id")
        with self._session_factory() as session, session.begin():
            session.execute(update(t).where(t.c.id == record_id).values(**values))
        logger.debug(f"Updated {table} #{record_id}")

    def delete_records(self, table: str, filters: dict):
        """Delete every row matching `filters`. Matching nothing is not an error."""
        t = self._table(table)
        with self._session_factory() as session, session.begin():
            result = session.execute(delete(t).where(*self._where(t, filters)))
        logger.debug(f"Deleted {result.rowcount} row(s) from {table}")
