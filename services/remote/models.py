"""SQLAlchemy models for the remote document collections."""

from sqlalchemy import Column, String, Numeric, Date, DateTime, Integer, Text
from common.db import Base
from common.enums import DenialStatus, DenialPriority, AppealStatus

# owner scoping is a plain indexed column, no foreign keys anywhere
class DenialRecord(Base):
    """Denied claim being worked."""

    __tablename__ = "denials"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(100), nullable=False, index=True)

    claim_number = Column(String(50), nullable=False, index=True)
    patient_name = Column(String(200), nullable=False)
    patient_id = Column(String(50), nullable=False, default="")
    insurance_company = Column(String(200), nullable=False)

    denial_date = Column(Date, nullable=True)
    service_date = Column(Date, nullable=True)
    denial_reason = Column(Text, nullable=False, default="")
    denial_code = Column(String(20), nullable=False, default="")
    claim_amount = Column(Numeric(10, 2), nullable=False, default=0)

    status = Column(String(20), default=DenialStatus.PENDING.value, nullable=False, index=True)
    priority = Column(String(20), default=DenialPriority.MEDIUM.value, nullable=False)
    assigned_to = Column(String(100), nullable=False, default="")
    notes = Column(Text, nullable=False, default="")

    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)


class AppealRecord(Base):
    """Appeal filed against a denial; denial_id is a soft reference."""

    __tablename__ = "appeals"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(100), nullable=False, index=True)
    denial_id = Column(String(64), nullable=False, index=True)

    appeal_type = Column(String(30), nullable=False)
    appeal_date = Column(Date, nullable=False)
    deadline_date = Column(Date, nullable=True)
    status = Column(String(30), default=AppealStatus.DRAFT.value, nullable=False, index=True)
    appeal_reason = Column(Text, nullable=False, default="")
    supporting_documents = Column(Text, nullable=False, default="")
    submitted_by = Column(String(100), nullable=False, default="")

    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)


class DocumentRecord(Base):
    """Metadata for a file uploaded to storage."""

    __tablename__ = "documents"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(100), nullable=False, index=True)
    denial_id = Column(String(64), nullable=True, index=True)
    appeal_id = Column(String(64), nullable=True, index=True)

    file_name = Column(String(255), nullable=False)
    file_url = Column(Text, nullable=False)
    file_type = Column(String(100), nullable=True)
    file_size = Column(Integer, nullable=False, default=0)
    uploaded_at = Column(DateTime(timezone=True), nullable=False)
