"""Pydantic schemas for appeals API."""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import date, datetime
from typing import List, Optional
from common.enums import AppealType, AppealStatus, DataSource


class AppealCreate(BaseModel):
    """Schema for creating a new appeal; status is always draft.

    ``denial_id`` is not checked against existing denials.
    """

    denial_id: str = Field(..., min_length=1)
    appeal_type: AppealType
    appeal_date: date = Field(default_factory=date.today)
    deadline_date: Optional[date] = None
    appeal_reason: str = ""
    supporting_documents: str = ""
    submitted_by: str = ""

    model_config = ConfigDict(from_attributes=True)


class AppealUpdate(BaseModel):
    """Schema for partial appeal updates; an explicit null only clears ``deadline_date``."""

    denial_id: Optional[str] = Field(None, min_length=1)
    appeal_type: Optional[AppealType] = None
    appeal_date: Optional[date] = None
    deadline_date: Optional[date] = None
    status: Optional[AppealStatus] = None
    appeal_reason: Optional[str] = None
    supporting_documents: Optional[str] = None
    submitted_by: Optional[str] = None

    @field_validator(
        "denial_id", "appeal_type", "appeal_date", "status", "appeal_reason",
        "supporting_documents", "submitted_by",
        mode="before",
    )
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class Appeal(AppealCreate):
    """A stored appeal."""

    id: str
    status: AppealStatus = AppealStatus.DRAFT
    user_id: str
    created_at: datetime
    updated_at: datetime


class AppealRow(Appeal):
    """Appeal as shown in list views, joined with its denial when present."""

    claim_number: str
    patient_name: str
    insurance_company: str
    status_label: str
    type_label: str
    is_overdue: bool


class AppealListSummary(BaseModel):
    total: int
    shown: int
    active: int
    approved: int
    overdue: int


class AppealListResponse(BaseModel):
    source: DataSource
    summary: AppealListSummary
    appeals: List[AppealRow]


class AppealLetterRequest(BaseModel):
    denial_id: str
    appeal_date: date = Field(default_factory=date.today)
    appeal_reason: str = ""
    submitted_by: str = ""


class AppealLetterResponse(BaseModel):
    denial_id: str
    letter: str
