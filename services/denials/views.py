"""Transient filtering and presentation values for denial lists."""

from datetime import date
from typing import Iterable, List, Optional
from common.enums import DenialStatus, DenialPriority
from common.formatting import format_currency, today_utc
from services.denials.schemas import Denial, DenialRow, DenialListSummary

STATUS_LABELS = {
    DenialStatus.PENDING: "Pending",
    DenialStatus.APPEALING: "Appealing",
    DenialStatus.RESOLVED: "Resolved",
    DenialStatus.REJECTED: "Rejected",
}

PRIORITY_LABELS = {
    DenialPriority.LOW: "Low",
    DenialPriority.MEDIUM: "Medium",
    DenialPriority.HIGH: "High",
    DenialPriority.URGENT: "Urgent",
}

# "all" is what the list filters send when nothing is selected
ALL = "all"


def _active(value: Optional[str]) -> bool:
    return bool(value) and value != ALL


def filter_denials(
    denials: Iterable[Denial],
    search: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
) -> List[Denial]:
    """Case-insensitive search over patient, claim number, insurer and reason, then exact status/priority."""
    filtered = list(denials)

    if search:
        term = search.lower()
        filtered = [
            d
            for d in filtered
            if term in d.patient_name.lower()
            or term in d.claim_number.lower()
            or term in d.insurance_company.lower()
            or term in d.denial_reason.lower()
        ]

    if _active(status):
        filtered = [d for d in filtered if d.status == status]

    if _active(priority):
        filtered = [d for d in filtered if d.priority == priority]

    return filtered


def days_open(denial_date: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """Whole days between the denial date and today."""
    if denial_date is None:
        return None
    today = today or today_utc()
    return abs((today - denial_date).days)


def to_row(denial: Denial, today: Optional[date] = None) -> DenialRow:
    return DenialRow(
        **denial.model_dump(),
        days_open=days_open(denial.denial_date, today),
        status_label=STATUS_LABELS.get(denial.status, str(denial.status)),
        priority_label=PRIORITY_LABELS.get(denial.priority, str(denial.priority)),
        formatted_amount=format_currency(denial.claim_amount),
    )


def summarize(loaded: List[Denial], shown: List[Denial]) -> DenialListSummary:
    """Header counts over everything loaded; the amount covers only what is shown."""
    return DenialListSummary(
        total=len(loaded),
        shown=len(shown),
        pending=sum(1 for d in loaded if d.status == DenialStatus.PENDING),
        resolved=sum(1 for d in loaded if d.status == DenialStatus.RESOLVED),
        total_amount=sum(d.claim_amount for d in shown),
    )
