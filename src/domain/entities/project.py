"""Project domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from domain.entities.ids import new_id


@dataclass
class Project:
    """Domain entity for a portfolio Project."""

    title: str
    description: str
    category: str
    id: str = field(default_factory=new_id)
    long_description: Optional[str] = None
    tools: list[str] = field(default_factory=list)
    image_url: Optional[str] = None
    case_study_url: Optional[str] = None
    scorm_url: Optional[str] = None
    demo_url: Optional[str] = None
    featured: bool = False
    challenge: Optional[str] = None
    solution: Optional[str] = None
    process: Optional[str] = None
    results: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
