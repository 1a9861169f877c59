"""Pydantic schemas for supporting documents."""

from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional


class DocumentResponse(BaseModel):
    """Metadata of an uploaded supporting document."""

    id: str
    denial_id: Optional[str] = None
    appeal_id: Optional[str] = None
    user_id: str
    file_name: str
    file_url: str
    file_type: Optional[str] = None
    file_size: int
    uploaded_at: datetime
    stored: bool = True  # False when the metadata could not be written remotely

    model_config = ConfigDict(from_attributes=True)
