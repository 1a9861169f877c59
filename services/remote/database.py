"""Remote document database client.

Wraps a SQLAlchemy session factory behind a small collection API. Every call
returns a :class:`RemoteResult`; database errors (including an unreachable
server) come back as failures instead of exceptions so callers can fall back
to the mock store.
"""

from decimal import Decimal
from typing import Any, Callable, Dict, Optional
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from common.db import Base, make_engine, make_session_factory
from common.enums import EntityKind
from common.ids import utc_now
from common.result import RemoteResult
from services.remote.models import DenialRecord, AppealRecord, DocumentRecord
import logging

logger = logging.getLogger(__name__)


def _as_dict(row: Base) -> Dict[str, Any]:
    data = {}
    for column in inspect(row).mapper.column_attrs:
        value = getattr(row, column.key)
        data[column.key] = float(value) if isinstance(value, Decimal) else value
    return data


class RemoteDatabase:
    """Collection-style access to denials, appeals and documents."""

    MODELS = {
        EntityKind.DENIALS: DenialRecord,
        EntityKind.APPEALS: AppealRecord,
        EntityKind.DOCUMENTS: DocumentRecord,
    }

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @classmethod
    def from_url(cls, url: str) -> "RemoteDatabase":
        return cls(make_session_factory(make_engine(url)))

    def create_tables(self) -> RemoteResult:
        """Create missing tables; a failure here just means the database is down."""
        session = self._session_factory()
        try:
            Base.metadata.create_all(bind=session.get_bind())
            return RemoteResult.success()
        except SQLAlchemyError as e:
            logger.warning(f"Database table creation note: {e}")
            return RemoteResult.failure(str(e))
        finally:
            session.close()

    def list(
        self,
        kind: EntityKind,
        where: Optional[Dict[str, Any]] = None,
        order_by: Optional[Dict[str, str]] = None,
    ) -> RemoteResult:
        """Rows matching every ``where`` equality, sorted by ``order_by`` ({field: "asc"|"desc"})."""
        model = self.MODELS[kind]

        def query(db: Session):
            q = db.query(model)
            for field, value in (where or {}).items():
                q = q.filter(getattr(model, field) == value)
            for field, direction in (order_by or {}).items():
                column = getattr(model, field)
                q = q.order_by(column.desc() if direction == "desc" else column.asc())
            return [_as_dict(row) for row in q.all()]

        return self._run(kind, "list", query)

    def create(self, kind: EntityKind, record: Dict[str, Any]) -> RemoteResult:
        model = self.MODELS[kind]

        def insert(db: Session):
            row = model(**record)
            db.add(row)
            db.commit()
            db.refresh(row)
            return _as_dict(row)

        return self._run(kind, "create", insert)

    def update(self, kind: EntityKind, record_id: str, changes: Dict[str, Any]) -> RemoteResult:
        """Shallow update; succeeds with ``None`` when the id is unknown."""
        model = self.MODELS[kind]

        def apply(db: Session):
            row = db.query(model).filter(model.id == record_id).first()
            if row is None:
                return None
            for field, value in changes.items():
                if hasattr(row, field):
                    setattr(row, field, value)
            if hasattr(row, "updated_at"):
                row.updated_at = utc_now()
            db.commit()
            db.refresh(row)
            return _as_dict(row)

        return self._run(kind, "update", apply)

    def delete(self, kind: EntityKind, record_id: str) -> RemoteResult:
        model = self.MODELS[kind]

        def remove(db: Session):
            row = db.query(model).filter(model.id == record_id).first()
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True

        return self._run(kind, "delete", remove)

    def _run(self, kind: EntityKind, operation: str, fn: Callable[[Session], Any]) -> RemoteResult:
        db = self._session_factory()
        try:
            return RemoteResult.success(fn(db))
        except SQLAlchemyError as e:
            db.rollback()
            logger.warning(f"Remote {operation} on {kind.value} failed: {e}")
            return RemoteResult.failure(str(e))
        finally:
            db.close()
