"""Resume domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from domain.entities.ids import new_id


@dataclass
class Resume:
    """Domain entity for an uploaded Resume.

    At most one resume is active at a time; activation goes through
    ``ResumeService.set_active`` rather than flipping ``is_active`` here.
    """

    filename: str
    original_name: str
    file_url: str
    id: str = field(default_factory=new_id)
    parsed_content: Optional[str] = None
    is_active: bool = False
    uploaded_at: datetime = field(default_factory=datetime.utcnow)
