"""Transient filtering and presentation values for appeal lists."""

from datetime import date, datetime, time, timezone
from typing import Dict, Iterable, List, Optional
from common.enums import AppealStatus, AppealType
from common.formatting import format_date
from services.appeals.schemas import Appeal, AppealRow, AppealListSummary
from services.denials.schemas import Denial
from services.denials.views import ALL

STATUS_LABELS = {
    AppealStatus.DRAFT: "Draft",
    AppealStatus.SUBMITTED: "Submitted",
    AppealStatus.UNDER_REVIEW: "Under Review",
    AppealStatus.APPROVED: "Approved",
    AppealStatus.DENIED: "Denied",
    AppealStatus.PENDING_RESPONSE: "Pending Response",
}

TYPE_LABELS = {
    AppealType.FIRST_LEVEL: "First Level",
    AppealType.SECOND_LEVEL: "Second Level",
    AppealType.EXTERNAL_REVIEW: "External Review",
    AppealType.PEER_TO_PEER: "Peer-to-Peer",
}

ACTIVE_STATUSES = (
    AppealStatus.SUBMITTED,
    AppealStatus.UNDER_REVIEW,
    AppealStatus.PENDING_RESPONSE,
)

MISSING = "N/A"


def is_overdue(deadline_date: Optional[date], now: Optional[datetime] = None) -> bool:
    """True when a deadline exists and its start (UTC midnight) is already past."""
    if deadline_date is None:
        return False
    now = now or datetime.now(timezone.utc)
    deadline = datetime.combine(deadline_date, time.min, tzinfo=timezone.utc)
    return deadline < now


def filter_appeals(
    appeals: Iterable[Appeal],
    denials_by_id: Dict[str, Denial],
    search: Optional[str] = None,
    status: Optional[str] = None,
    appeal_type: Optional[str] = None,
) -> List[Appeal]:
    """Search covers submitter, reason and the referenced denial's claim number and patient."""
    filtered = list(appeals)

    if search:
        term = search.lower()

        def matches(appeal: Appeal) -> bool:
            denial = denials_by_id.get(appeal.denial_id)
            return (
                term in appeal.submitted_by.lower()
                or term in appeal.appeal_reason.lower()
                or (denial is not None and term in denial.claim_number.lower())
                or (denial is not None and term in denial.patient_name.lower())
            )

        filtered = [a for a in filtered if matches(a)]

    if status and status != ALL:
        filtered = [a for a in filtered if a.status == status]

    if appeal_type and appeal_type != ALL:
        filtered = [a for a in filtered if a.appeal_type == appeal_type]

    return filtered


def to_row(appeal: Appeal, denials_by_id: Dict[str, Denial], now: Optional[datetime] = None) -> AppealRow:
    # dangling denial references render as placeholders
    denial = denials_by_id.get(appeal.denial_id)
    return AppealRow(
        **appeal.model_dump(),
        claim_number=denial.claim_number if denial else MISSING,
        patient_name=denial.patient_name if denial else MISSING,
        insurance_company=denial.insurance_company if denial else MISSING,
        status_label=STATUS_LABELS.get(appeal.status, str(appeal.status)),
        type_label=TYPE_LABELS.get(appeal.appeal_type, str(appeal.appeal_type)),
        is_overdue=is_overdue(appeal.deadline_date, now),
    )


def summarize(loaded: List[Appeal], shown: List[Appeal], now: Optional[datetime] = None) -> AppealListSummary:
    return AppealListSummary(
        total=len(loaded),
        shown=len(shown),
        active=sum(1 for a in loaded if a.status in ACTIVE_STATUSES),
        approved=sum(1 for a in loaded if a.status == AppealStatus.APPROVED),
        overdue=sum(1 for a in loaded if is_overdue(a.deadline_date, now)),
    )


def build_appeal_letter(
    denial: Denial,
    appeal_date: date,
    appeal_reason: str,
    submitted_by: str,
) -> str:
    """Starter appeal letter addressed to the denial's insurer."""
    return f"""APPEAL LETTER TEMPLATE

Date: {appeal_date.strftime("%B %d, %Y")}

To: {denial.insurance_company}
Re: Appeal for Claim #{denial.claim_number}
Patient: {denial.patient_name}

Dear Claims Review Team,

I am writing to formally appeal the denial of claim #{denial.claim_number} for patient {denial.patient_name}.

Original Denial Reason: {denial.denial_reason}
Claim Amount: ${denial.claim_amount:.2f}
Denial Date: {format_date(denial.denial_date)}

APPEAL JUSTIFICATION:
{appeal_reason}

We respectfully request that you reconsider this claim and approve payment for the services rendered. The medical necessity and appropriateness of the treatment provided is well-documented and meets all coverage criteria.

Please find attached supporting documentation for your review.

Sincerely,
{submitted_by}

---
This template can be customized based on your specific appeal requirements."""
