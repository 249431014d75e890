"""Testimonial domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from domain.entities.ids import new_id

DEFAULT_RATING = "5"


@dataclass
class Testimonial:
    """Domain entity for a client Testimonial."""

    name: str
    role: str
    company: str
    content: str
    id: str = field(default_factory=new_id)
    avatar_url: Optional[str] = None
    rating: str = DEFAULT_RATING
    featured: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
