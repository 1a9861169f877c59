"""In-memory stand-in for the remote database.

Holds two ordered collections, denials and appeals, scoped by owning user.
One instance is created by the application factory and lives as long as the
process; tests build their own. Nothing is persisted. Sync routes run in a
threadpool, so every mutation holds the store lock.
"""

import threading
from datetime import datetime, timedelta
from typing import Any, List, Mapping, Optional, Union
from pydantic import BaseModel
from common.enums import DenialStatus, AppealStatus
from common.ids import generate_id, utc_now
from services.denials.schemas import Denial, DenialCreate, DenialUpdate
from services.appeals.schemas import Appeal, AppealCreate, AppealUpdate
from services.dashboard.schemas import DashboardStats
from services.store.seed import seed_denials, seed_appeals
from services.store.stats import compute_stats
import logging

logger = logging.getLogger(__name__)

Changes = Union[Mapping[str, Any], BaseModel]


def _changes_to_dict(changes: Changes) -> dict:
    """Only the fields the caller actually provided."""
    if isinstance(changes, BaseModel):
        return changes.model_dump(exclude_unset=True)
    return dict(changes)


def _stamp_after(previous: datetime) -> datetime:
    """Current time, nudged forward so it always sorts after ``previous``."""
    now = utc_now()
    if now <= previous:
        now = previous + timedelta(microseconds=1)
    return now


class MockStore:
    """Owner-scoped CRUD over seeded denials and appeals."""

    def __init__(self, seed: bool = True):
        self.denials: List[Denial] = seed_denials() if seed else []
        self.appeals: List[Appeal] = seed_appeals() if seed else []
        self._lock = threading.Lock()
        logger.info(
            f"Mock store ready with {len(self.denials)} denials and {len(self.appeals)} appeals"
        )

    # Denial methods

    def list_denials(self, owner_id: str) -> List[Denial]:
        return [denial for denial in self.denials if denial.user_id == owner_id]

    def create_denial(self, owner_id: str, fields: DenialCreate) -> Denial:
        now = utc_now()
        denial = Denial(
            **fields.model_dump(),
            id=generate_id("denial"),
            status=DenialStatus.PENDING,
            user_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self.denials.append(denial)
        return denial

    def update_denial(self, denial_id: str, changes: Union[DenialUpdate, Changes]) -> Optional[Denial]:
        with self._lock:
            index = self._find(self.denials, denial_id)
            if index is None:
                return None

            current = self.denials[index]
            updated = Denial.model_validate(
                {
                    **current.model_dump(),
                    **_changes_to_dict(changes),
                    "updated_at": _stamp_after(current.updated_at),
                }
            )
            self.denials[index] = updated
            return updated

    def delete_denial(self, denial_id: str) -> bool:
        with self._lock:
            index = self._find(self.denials, denial_id)
            if index is None:
                return False
            del self.denials[index]
            return True

    # Appeal methods

    def list_appeals(self, owner_id: str) -> List[Appeal]:
        return [appeal for appeal in self.appeals if appeal.user_id == owner_id]

    def create_appeal(self, owner_id: str, fields: AppealCreate) -> Appeal:
        now = utc_now()
        appeal = Appeal(
            **fields.model_dump(),
            id=generate_id("appeal"),
            status=AppealStatus.DRAFT,
            user_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self.appeals.append(appeal)
        return appeal

    def update_appeal(self, appeal_id: str, changes: Union[AppealUpdate, Changes]) -> Optional[Appeal]:
        with self._lock:
            index = self._find(self.appeals, appeal_id)
            if index is None:
                return None

            current = self.appeals[index]
            updated = Appeal.model_validate(
                {
                    **current.model_dump(),
                    **_changes_to_dict(changes),
                    "updated_at": _stamp_after(current.updated_at),
                }
            )
            self.appeals[index] = updated
            return updated

    def delete_appeal(self, appeal_id: str) -> bool:
        with self._lock:
            index = self._find(self.appeals, appeal_id)
            if index is None:
                return False
            del self.appeals[index]
            return True

    # Analytics

    def get_stats(self, owner_id: str) -> DashboardStats:
        return compute_stats(self.list_denials(owner_id), self.list_appeals(owner_id))

    @staticmethod
    def _find(records: list, record_id: str) -> Optional[int]:
        for index, record in enumerate(records):
            if record.id == record_id:
                return index
        return None
