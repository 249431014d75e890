"""Pydantic schemas for Resume API."""

from datetime import datetime

from api.v1.schemas.common import CamelModel


class ResumeResponse(CamelModel):
    """Schema for Resume response."""

    id: str
    filename: str
    original_name: str
    file_url: str
    parsed_content: str | None = None
    is_active: bool = False
    uploaded_at: datetime
