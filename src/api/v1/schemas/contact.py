"""Pydantic schemas for ContactSubmission API."""

from datetime import datetime

from pydantic import EmailStr, Field

from api.v1.schemas.common import CamelModel

# Names end up in the notification's Subject header.
SINGLE_LINE = r"^[^\r\n]*$"


class ContactSubmissionCreate(CamelModel):
    """Schema for the public contact form."""

    first_name: str = Field(..., min_length=1, max_length=100, pattern=SINGLE_LINE)
    last_name: str = Field(..., min_length=1, max_length=100, pattern=SINGLE_LINE)
    email: EmailStr
    company: str | None = Field(None, max_length=200)
    project_type: str | None = Field(None, max_length=100)
    message: str = Field(..., min_length=1, max_length=10000)


class ContactSubmissionResponse(CamelModel):
    """Schema for ContactSubmission response."""

    id: str
    first_name: str
    last_name: str
    email: str
    company: str | None = None
    project_type: str | None = None
    message: str
    created_at: datetime
