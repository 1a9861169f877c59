"""Data access with remote-first reads and writes and a mock store fallback.

Each call asks the remote database first. A failed :class:`RemoteResult`
sends the same request to the mock store instead. Results are never cached
between calls.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Type
from pydantic import BaseModel
from common.config import FALLBACK_USER_ID
from common.enums import EntityKind, DataSource, DenialStatus, AppealStatus
from common.ids import generate_id, utc_now
from common.result import RemoteResult
from services.auth.client import AuthClient
from services.remote.database import RemoteDatabase
from services.store.mock_store import MockStore
from services.store.stats import compute_stats
from services.denials.schemas import Denial, DenialCreate, DenialUpdate
from services.appeals.schemas import Appeal, AppealCreate, AppealUpdate
from services.dashboard.schemas import DashboardStats
import logging

logger = logging.getLogger(__name__)


class LoadResult(NamedTuple):
    """Records for one owner and where they came from."""

    records: List[Any]
    source: DataSource
    error: Optional[str] = None


class WriteResult(NamedTuple):
    """Outcome of a create/update/delete.

    ``value`` is the stored record, ``None`` for an unknown id on update, or a
    bool for delete.
    """

    value: Any
    source: DataSource
    error: Optional[str] = None


def _to_row(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value.value if isinstance(value, Enum) else value for key, value in data.items()}


def _changes(changes: BaseModel) -> Dict[str, Any]:
    return changes.model_dump(exclude_unset=True)


class EntityAccess(ABC):
    """Remote-first access for one entity kind."""

    kind: EntityKind
    schema: Type[BaseModel]
    id_prefix: str
    initial_status: Enum

    def __init__(
        self,
        remote: RemoteDatabase,
        store: MockStore,
        auth: AuthClient,
        fallback_user_id: str = FALLBACK_USER_ID,
    ):
        self.remote = remote
        self.store = store
        self.auth = auth
        self.fallback_user_id = fallback_user_id

    def owner_id(self) -> str:
        """Signed-in user's id, or the fallback id when auth cannot supply one."""
        result = self.auth.get_current_user()
        if result.ok:
            return result.value.id
        logger.info(f"Auth not available ({result.error}), using default user")
        return self.fallback_user_id

    def load(self, owner_id: Optional[str] = None) -> LoadResult:
        owner_id = owner_id or self.owner_id()
        result = self.fetch(owner_id)
        if result.ok:
            return LoadResult(
                records=[self.schema.model_validate(row) for row in result.value],
                source=DataSource.REMOTE,
            )

        logger.info(f"Database not available, using mock {self.kind.value}")
        return LoadResult(
            records=self._store_list(owner_id), source=DataSource.MOCK, error=result.error
        )

    def fetch(self, owner_id: str) -> RemoteResult:
        """Raw remote rows for ``owner_id``, newest first."""
        return self.remote.list(
            self.kind, where={"user_id": owner_id}, order_by={"created_at": "desc"}
        )

    def create(self, owner_id: str, fields: BaseModel) -> WriteResult:
        now = utc_now()
        record = self.schema(
            **fields.model_dump(),
            id=generate_id(self.id_prefix),
            status=self.initial_status,
            user_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        result = self.remote.create(self.kind, _to_row(record.model_dump()))
        if result.ok:
            return WriteResult(self.schema.model_validate(result.value), DataSource.REMOTE)

        logger.info(f"Database not available, creating {self.id_prefix} in mock store")
        return WriteResult(self._store_create(owner_id, fields), DataSource.MOCK, result.error)

    def update(self, record_id: str, changes: BaseModel) -> WriteResult:
        result = self.remote.update(self.kind, record_id, _to_row(_changes(changes)))
        if result.ok:
            value = self.schema.model_validate(result.value) if result.value is not None else None
            return WriteResult(value, DataSource.REMOTE)

        logger.info(f"Database not available, updating {record_id} in mock store")
        return WriteResult(self._store_update(record_id, changes), DataSource.MOCK, result.error)

    def delete(self, record_id: str) -> WriteResult:
        result = self.remote.delete(self.kind, record_id)
        if result.ok:
            return WriteResult(result.value, DataSource.REMOTE)

        logger.info(f"Database not available, deleting {record_id} from mock store")
        return WriteResult(self._store_delete(record_id), DataSource.MOCK, result.error)

    # mock store hooks

    @abstractmethod
    def _store_list(self, owner_id: str) -> list:
        pass

    @abstractmethod
    def _store_create(self, owner_id: str, fields: BaseModel):
        pass

    @abstractmethod
    def _store_update(self, record_id: str, changes: BaseModel):
        pass

    @abstractmethod
    def _store_delete(self, record_id: str) -> bool:
        pass


class DenialAccess(EntityAccess):
    kind = EntityKind.DENIALS
    schema = Denial
    id_prefix = "denial"
    initial_status = DenialStatus.PENDING

    def _store_list(self, owner_id: str) -> List[Denial]:
        return self.store.list_denials(owner_id)

    def _store_create(self, owner_id: str, fields: DenialCreate) -> Denial:
        return self.store.create_denial(owner_id, fields)

    def _store_update(self, record_id: str, changes: DenialUpdate) -> Optional[Denial]:
        return self.store.update_denial(record_id, changes)

    def _store_delete(self, record_id: str) -> bool:
        return self.store.delete_denial(record_id)


class AppealAccess(EntityAccess):
    kind = EntityKind.APPEALS
    schema = Appeal
    id_prefix = "appeal"
    initial_status = AppealStatus.DRAFT

    def _store_list(self, owner_id: str) -> List[Appeal]:
        return self.store.list_appeals(owner_id)

    def _store_create(self, owner_id: str, fields: AppealCreate) -> Appeal:
        return self.store.create_appeal(owner_id, fields)

    def _store_update(self, record_id: str, changes: AppealUpdate) -> Optional[Appeal]:
        return self.store.update_appeal(record_id, changes)

    def _store_delete(self, record_id: str) -> bool:
        return self.store.delete_appeal(record_id)


class DataAccess:
    """Entry point handed to the routers by the application factory."""

    def __init__(
        self,
        remote: RemoteDatabase,
        store: MockStore,
        auth: AuthClient,
        fallback_user_id: str = FALLBACK_USER_ID,
    ):
        self.remote = remote
        self.store = store
        self.auth = auth
        self.denials = DenialAccess(remote, store, auth, fallback_user_id)
        self.appeals = AppealAccess(remote, store, auth, fallback_user_id)

    def owner_id(self) -> str:
        return self.denials.owner_id()

    def stats(self, owner_id: Optional[str] = None) -> Tuple[DashboardStats, DataSource]:
        owner_id = owner_id or self.owner_id()
        denials = self.denials.fetch(owner_id)
        appeals = self.appeals.fetch(owner_id)
        if denials.ok and appeals.ok:
            stats = compute_stats(
                [Denial.model_validate(row) for row in denials.value],
                [Appeal.model_validate(row) for row in appeals.value],
            )
            return stats, DataSource.REMOTE

        logger.info("Database not available, using mock stats")
        return self.store.get_stats(owner_id), DataSource.MOCK
