"""BlogPost domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from domain.entities.ids import new_id


@dataclass
class BlogPost:
    """Domain entity for a BlogPost. ``content`` is markdown text."""

    title: str
    excerpt: str
    content: str
    category: str
    id: str = field(default_factory=new_id)
    image_url: Optional[str] = None
    read_time: Optional[str] = None
    published: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def matches(self, search: str) -> bool:
        """Case-insensitive substring match over title, content and excerpt."""
        term = search.lower()
        return (
            term in self.title.lower()
            or term in self.content.lower()
            or term in (self.excerpt or "").lower()
        )
