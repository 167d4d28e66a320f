"""Domain models for project reviews."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Review:
    """A buyer's review of a project."""

    id: UUID
    project_id: UUID
    user_id: UUID
    user_name: str | None
    rating: int
    title: str
    comment: str
    helpful_count: int
    created_at: datetime | None
