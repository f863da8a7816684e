"""Tag model"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Tag:
    """Named classification label with a usage counter"""

    id: int
    name: str
    color: str
    category: str  # e.g. 'method', 'domain', 'technique', 'application'
    created_at: datetime
    description: str | None = None
    usage_count: int = 0

    def __repr__(self):
        return f"<Tag {self.id} name={self.name}>"
