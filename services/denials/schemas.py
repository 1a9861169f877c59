"""Pydantic schemas for denials API."""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import date, datetime
from typing import List, Optional
from common.enums import DenialStatus, DenialPriority, DataSource


class DenialBase(BaseModel):
    """Fields captured by the denial form."""

    claim_number: str = Field(..., min_length=1, max_length=50)
    patient_name: str = Field(..., min_length=1)
    patient_id: str = ""
    insurance_company: str = Field(..., min_length=1)
    denial_date: Optional[date] = None
    service_date: Optional[date] = None
    denial_reason: str = ""
    denial_code: str = ""
    claim_amount: float = Field(0.0, ge=0)
    priority: DenialPriority = DenialPriority.MEDIUM
    assigned_to: str = ""
    notes: str = ""


class DenialCreate(DenialBase):
    """Schema for creating a new denial; status is always pending."""

    model_config = ConfigDict(from_attributes=True)


class DenialUpdate(BaseModel):
    """Schema for partial denial updates.

    Only the fields present in the request are applied. An explicit null clears
    ``denial_date`` or ``service_date`` and is rejected everywhere else.
    """

    claim_number: Optional[str] = Field(None, min_length=1, max_length=50)
    patient_name: Optional[str] = Field(None, min_length=1)
    patient_id: Optional[str] = None
    insurance_company: Optional[str] = Field(None, min_length=1)
    denial_date: Optional[date] = None
    service_date: Optional[date] = None
    denial_reason: Optional[str] = None
    denial_code: Optional[str] = None
    claim_amount: Optional[float] = Field(None, ge=0)
    status: Optional[DenialStatus] = None
    priority: Optional[DenialPriority] = None
    assigned_to: Optional[str] = None
    notes: Optional[str] = None

    @field_validator(
        "claim_number", "patient_name", "patient_id", "insurance_company", "denial_reason",
        "denial_code", "claim_amount", "status", "priority", "assigned_to", "notes",
        mode="before",
    )
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class Denial(DenialBase):
    """A stored denial."""

    id: str
    status: DenialStatus = DenialStatus.PENDING
    user_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DenialRow(Denial):
    """Denial as shown in list views."""

    days_open: Optional[int] = None
    status_label: str
    priority_label: str
    formatted_amount: str


class DenialListSummary(BaseModel):
    total: int
    shown: int
    pending: int
    resolved: int
    total_amount: float


class DenialListResponse(BaseModel):
    source: DataSource
    summary: DenialListSummary
    denials: List[DenialRow]
