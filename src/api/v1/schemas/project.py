"""Pydantic schemas for Project API."""

from datetime import datetime

from pydantic import ConfigDict, Field

from api.v1.schemas.common import CamelModel


class ProjectCreate(CamelModel):
    """Schema for creating a Project."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    long_description: str | None = None
    tools: list[str] = Field(default_factory=list)
    image_url: str | None = None
    case_study_url: str | None = None
    scorm_url: str | None = None
    demo_url: str | None = None
    featured: bool = False
    challenge: str | None = None
    solution: str | None = None
    process: str | None = None
    results: str | None = None


class ProjectUpdate(CamelModel):
    """Schema for updating a Project. Only supplied fields change."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1)
    category: str | None = Field(None, min_length=1, max_length=100)
    long_description: str | None = None
    tools: list[str] | None = None
    image_url: str | None = None
    case_study_url: str | None = None
    scorm_url: str | None = None
    demo_url: str | None = None
    featured: bool | None = None
    challenge: str | None = None
    solution: str | None = None
    process: str | None = None
    results: str | None = None


class ProjectResponse(CamelModel):
    """Schema for Project response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Compliance Training Module",
                "description": "Interactive SCORM course",
                "category": "eLearning",
                "tools": ["Articulate Storyline", "Vyond"],
                "featured": True,
                "createdAt": "2026-01-28T10:00:00",
            }
        },
    )

    id: str
    title: str
    description: str
    long_description: str | None = None
    category: str
    tools: list[str] = Field(default_factory=list)
    image_url: str | None = None
    case_study_url: str | None = None
    scorm_url: str | None = None
    demo_url: str | None = None
    featured: bool = False
    challenge: str | None = None
    solution: str | None = None
    process: str | None = None
    results: str | None = None
    created_at: datetime
