"""Services for project reviews."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from carbon_market.domain.errors import NotFoundError, ValidationError
from carbon_market.domain.reviews import Review

MIN_RATING = 1
MAX_RATING = 10
REVIEW_SORTS = frozenset({"newest", "oldest", "highest", "lowest", "helpful"})


class ReviewRepository(Protocol):
    """Persistence interface for reviews."""

    def list_reviews(self, project_id: UUID, sort: str) -> list[Review]:
        """Return a project's reviews in the requested order."""

    def find_user_review(self, project_id: UUID, user_id: UUID) -> Review | None:
        """Return the user's review of a project, if any."""

    def create_review(  # noqa: PLR0913
        self,
        project_id: UUID,
        user_id: UUID,
        rating: int,
        title: str,
        comment: str,
    ) -> Review:
        """Create a review and return it."""

    def increment_helpful(self, review_id: UUID) -> Review | None:
        """Add one helpful vote and return the review, if present."""


class ProjectLookup(Protocol):
    """Minimal project existence check."""

    def get_project(self, project_id: UUID) -> object | None:
        """Return a project by id, if present."""


@dataclass
class ReviewService:
    """Application service for reading and writing reviews."""

    repository: ReviewRepository
    projects: ProjectLookup

    def list_reviews(self, project_id: UUID, sort: str = "newest") -> list[Review]:
        """Return reviews, falling back to newest first for unknown sorts."""
        if sort not in REVIEW_SORTS:
            sort = "newest"
        return self.repository.list_reviews(project_id, sort)

    def create_review(  # noqa: PLR0913
        self,
        project_id: UUID,
        user_id: UUID,
        rating: int,
        title: str = "",
        comment: str = "",
    ) -> Review:
        """Create a user's single review of a project."""
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}"
            )
        if self.projects.get_project(project_id) is None:
            raise NotFoundError("Project not found")
        if self.repository.find_user_review(project_id, user_id):
            raise ValidationError("You have already reviewed this project")
        return self.repository.create_review(
            project_id=project_id,
            user_id=user_id,
            rating=rating,
            title=title,
            comment=comment,
        )

    def mark_helpful(self, review_id: UUID) -> Review:
        """Record a helpful vote."""
        review = self.repository.increment_helpful(review_id)
        if review is None:
            raise NotFoundError("Review not found")
        return review
