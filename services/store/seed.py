"""Sample records the mock store starts with."""

from datetime import date, datetime, timezone
from typing import List
from common.enums import DenialStatus, DenialPriority, AppealType, AppealStatus
from services.denials.schemas import Denial
from services.appeals.schemas import Appeal

SEED_USER_ID = "user_123"


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def seed_denials() -> List[Denial]:
    """Fresh copies of the sample denials."""
    return [
        Denial(
            id="denial_001",
            claim_number="CLM-2024-001",
            patient_name="Sarah Johnson",
            patient_id="PAT-001",
            insurance_company="Blue Cross Blue Shield",
            denial_date=date(2024, 1, 15),
            service_date=date(2024, 1, 10),
            denial_reason="Prior Authorization Required - The submitted procedure requires prior authorization which was not obtained before service.",
            denial_code="PA001",
            claim_amount=2450.00,
            status=DenialStatus.PENDING,
            priority=DenialPriority.HIGH,
            assigned_to="Dr. Smith",
            notes="Patient requires urgent follow-up. Prior auth was submitted but not approved in time.",
            created_at=_ts("2024-01-15T10:30:00"),
            updated_at=_ts("2024-01-15T10:30:00"),
            user_id=SEED_USER_ID,
        ),
        Denial(
            id="denial_002",
            claim_number="CLM-2024-002",
            patient_name="Michael Chen",
            patient_id="PAT-002",
            insurance_company="Aetna Healthcare",
            denial_date=date(2024, 1, 14),
            service_date=date(2024, 1, 8),
            denial_reason="Medical Necessity Documentation - Additional documentation required to establish medical necessity.",
            denial_code="MN002",
            claim_amount=1890.00,
            status=DenialStatus.APPEALING,
            priority=DenialPriority.MEDIUM,
            assigned_to="Dr. Johnson",
            notes="Appeal submitted with additional clinical notes and test results.",
            created_at=_ts("2024-01-14T14:20:00"),
            updated_at=_ts("2024-01-16T09:15:00"),
            user_id=SEED_USER_ID,
        ),
        Denial(
            id="denial_003",
            claim_number="CLM-2024-003",
            patient_name="Emily Davis",
            patient_id="PAT-003",
            insurance_company="Cigna Health",
            denial_date=date(2024, 1, 13),
            service_date=date(2024, 1, 5),
            denial_reason="Duplicate Claim Submission - This claim appears to be a duplicate of a previously processed claim.",
            denial_code="DUP001",
            claim_amount=3200.00,
            status=DenialStatus.RESOLVED,
            priority=DenialPriority.LOW,
            assigned_to="Dr. Wilson",
            notes="Resolved - Found original claim was processed under different member ID.",
            created_at=_ts("2024-01-13T11:45:00"),
            updated_at=_ts("2024-01-18T16:30:00"),
            user_id=SEED_USER_ID,
        ),
        Denial(
            id="denial_004",
            claim_number="CLM-2024-004",
            patient_name="Robert Wilson",
            patient_id="PAT-004",
            insurance_company="UnitedHealthcare",
            denial_date=date(2024, 1, 12),
            service_date=date(2024, 1, 3),
            denial_reason="Experimental Treatment - The procedure is considered experimental and not covered under current policy.",
            denial_code="EXP001",
            claim_amount=4750.00,
            status=DenialStatus.PENDING,
            priority=DenialPriority.URGENT,
            assigned_to="Dr. Brown",
            notes="Researching recent FDA approvals and clinical trial data for appeal.",
            created_at=_ts("2024-01-12T08:15:00"),
            updated_at=_ts("2024-01-12T08:15:00"),
            user_id=SEED_USER_ID,
        ),
        Denial(
            id="denial_005",
            claim_number="CLM-2024-005",
            patient_name="Lisa Anderson",
            patient_id="PAT-005",
            insurance_company="Humana",
            denial_date=date(2024, 1, 11),
            service_date=date(2024, 1, 2),
            denial_reason="Incorrect Procedure Code - The submitted procedure code does not match the documented service.",
            denial_code="IPC001",
            claim_amount=1250.00,
            status=DenialStatus.APPEALING,
            priority=DenialPriority.MEDIUM,
            assigned_to="Dr. Davis",
            notes="Corrected procedure code submitted with appeal documentation.",
            created_at=_ts("2024-01-11T13:20:00"),
            updated_at=_ts("2024-01-15T10:45:00"),
            user_id=SEED_USER_ID,
        ),
        Denial(
            id="denial_006",
            claim_number="CLM-2024-006",
            patient_name="James Rodriguez",
            patient_id="PAT-006",
            insurance_company="Kaiser Permanente",
            denial_date=date(2024, 1, 10),
            service_date=date(2023, 12, 28),
            denial_reason="Timely Filing Limit Exceeded - Claim was submitted after the timely filing deadline.",
            denial_code="TFL001",
            claim_amount=890.00,
            status=DenialStatus.REJECTED,
            priority=DenialPriority.LOW,
            assigned_to="Dr. Martinez",
            notes="Unable to appeal due to timely filing limits. Process improvement needed.",
            created_at=_ts("2024-01-10T16:00:00"),
            updated_at=_ts("2024-01-10T16:00:00"),
            user_id=SEED_USER_ID,
        ),
    ]


def seed_appeals() -> List[Appeal]:
    """Fresh copies of the sample appeals."""
    return [
        Appeal(
            id="appeal_001",
            denial_id="denial_002",
            appeal_type=AppealType.FIRST_LEVEL,
            appeal_date=date(2024, 1, 16),
            deadline_date=date(2024, 1, 30),
            status=AppealStatus.SUBMITTED,
            appeal_reason="Submitting additional clinical documentation to support medical necessity including lab results, imaging studies, and physician notes.",
            submitted_by="Dr. Johnson",
            created_at=_ts("2024-01-16T09:15:00"),
            updated_at=_ts("2024-01-16T09:15:00"),
            user_id=SEED_USER_ID,
        ),
        Appeal(
            id="appeal_002",
            denial_id="denial_005",
            appeal_type=AppealType.FIRST_LEVEL,
            appeal_date=date(2024, 1, 15),
            deadline_date=date(2024, 1, 29),
            status=AppealStatus.UNDER_REVIEW,
            appeal_reason="Correcting procedure code from 99213 to 99214 based on documentation review and time spent with patient.",
            submitted_by="Dr. Davis",
            created_at=_ts("2024-01-15T10:45:00"),
            updated_at=_ts("2024-01-15T10:45:00"),
            user_id=SEED_USER_ID,
        ),
    ]
