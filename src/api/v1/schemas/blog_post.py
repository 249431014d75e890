"""Pydantic schemas for BlogPost API."""

from datetime import datetime

from pydantic import Field

from api.v1.schemas.common import CamelModel


class BlogPostCreate(CamelModel):
    """Schema for creating a BlogPost. ``content`` is markdown."""

    title: str = Field(..., min_length=1, max_length=300)
    excerpt: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    image_url: str | None = None
    read_time: str | None = None
    published: bool = False


class BlogPostUpdate(CamelModel):
    """Schema for updating a BlogPost. Only supplied fields change."""

    title: str | None = Field(None, min_length=1, max_length=300)
    excerpt: str | None = Field(None, min_length=1)
    content: str | None = Field(None, min_length=1)
    category: str | None = Field(None, min_length=1, max_length=100)
    image_url: str | None = None
    read_time: str | None = None
    published: bool | None = None


class BlogPostResponse(CamelModel):
    """Schema for BlogPost response."""

    id: str
    title: str
    excerpt: str
    content: str
    category: str
    image_url: str | None = None
    read_time: str | None = None
    published: bool = False
    created_at: datetime
    updated_at: datetime


class BlogImageUploadResponse(CamelModel):
    """Result of a blog image upload."""

    success: bool = True
    filename: str
    original_name: str
    url: str
    mimetype: str
