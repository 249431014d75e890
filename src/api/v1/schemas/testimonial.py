"""Pydantic schemas for Testimonial API."""

from datetime import datetime

from pydantic import Field

from api.v1.schemas.common import CamelModel


class TestimonialCreate(CamelModel):
    """Schema for creating a Testimonial."""

    name: str = Field(..., min_length=1, max_length=200)
    role: str = Field(..., min_length=1, max_length=200)
    company: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    avatar_url: str | None = None
    rating: str = "5"
    featured: bool = False


class TestimonialUpdate(CamelModel):
    """Schema for updating a Testimonial."""

    name: str | None = Field(None, min_length=1, max_length=200)
    role: str | None = Field(None, min_length=1, max_length=200)
    company: str | None = Field(None, min_length=1, max_length=200)
    content: str | None = Field(None, min_length=1)
    avatar_url: str | None = None
    rating: str | None = None
    featured: bool | None = None


class TestimonialResponse(CamelModel):
    """Schema for Testimonial response."""

    id: str
    name: str
    role: str
    company: str
    content: str
    avatar_url: str | None = None
    rating: str
    featured: bool = False
    created_at: datetime
