"""Dashboard statistics over owner-scoped denials and appeals."""

from typing import Sequence
from common.enums import DenialStatus
from services.denials.schemas import Denial
from services.appeals.schemas import Appeal
from services.dashboard.schemas import DashboardStats


def compute_stats(denials: Sequence[Denial], appeals: Sequence[Appeal]) -> DashboardStats:
    """Counts by status and the claim amount total, regardless of status."""
    return DashboardStats(
        total_denials=len(denials),
        pending_denials=sum(1 for d in denials if d.status == DenialStatus.PENDING),
        appealing_denials=sum(1 for d in denials if d.status == DenialStatus.APPEALING),
        resolved_denials=sum(1 for d in denials if d.status == DenialStatus.RESOLVED),
        total_appeals=len(appeals),
        total_amount=sum(d.claim_amount for d in denials),
    )
