"""ContactSubmission domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from domain.entities.ids import new_id


@dataclass(frozen=True)
class ContactSubmission:
    """A message sent through the public contact form. Immutable once stored."""

    first_name: str
    last_name: str
    email: str
    message: str
    id: str = field(default_factory=new_id)
    company: Optional[str] = None
    project_type: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
