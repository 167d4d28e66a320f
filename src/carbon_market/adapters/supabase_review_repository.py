"""Supabase repository for project reviews."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from carbon_market.adapters.supabase_rows import parse_timestamp
from carbon_market.domain.reviews import Review
from carbon_market.services.reviews import ReviewRepository

_REVIEW_COLUMNS = (
    "id, project_id, user_id, rating, title, comment, helpful_count, created_at, "
    "users(name)"
)
INCREMENT_HELPFUL_FUNCTION = "increment_review_helpful"
_SORT_COLUMNS = {
    "newest": ("created_at", True),
    "oldest": ("created_at", False),
    "highest": ("rating", True),
    "lowest": ("rating", False),
    "helpful": ("helpful_count", True),
}


@dataclass
class SupabaseReviewRepository(ReviewRepository):
    """Supabase-backed review repository."""

    client: Client

    def list_reviews(self, project_id: UUID, sort: str) -> list[Review]:
        """Return a project's reviews in the requested order."""
        column, desc = _SORT_COLUMNS.get(sort, _SORT_COLUMNS["newest"])
        response = (
            self.client.table("reviews")
            .select(_REVIEW_COLUMNS)
            .eq("project_id", str(project_id))
            .order(column, desc=desc)
            .execute()
        )
        return [_parse_review(row) for row in response.data or []]

    def find_user_review(self, project_id: UUID, user_id: UUID) -> Review | None:
        """Return the user's review of a project, if any."""
        response = (
            self.client.table("reviews")
            .select(_REVIEW_COLUMNS)
            .eq("project_id", str(project_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_review(response.data[0])

    def create_review(  # noqa: PLR0913
        self,
        project_id: UUID,
        user_id: UUID,
        rating: int,
        title: str,
        comment: str,
    ) -> Review:
        """Create a review and return it."""
        response = (
            self.client.table("reviews")
            .insert(
                {
                    "project_id": str(project_id),
                    "user_id": str(user_id),
                    "rating": rating,
                    "title": title,
                    "comment": comment,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create review")
        return _parse_review(response.data[0])

    def increment_helpful(self, review_id: UUID) -> Review | None:
        """Add one helpful vote and return the review, if present."""
        # Incremented in a single UPDATE inside the database.
        updated = self.client.rpc(
            INCREMENT_HELPFUL_FUNCTION, {"review_id": str(review_id)}
        ).execute()
        if not updated.data:
            return None
        response = (
            self.client.table("reviews")
            .select(_REVIEW_COLUMNS)
            .eq("id", str(review_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_review(response.data[0])


def _parse_review(row: dict[str, object]) -> Review:
    user = row.get("users") or {}
    return Review(
        id=UUID(str(row["id"])),
        project_id=UUID(str(row["project_id"])),
        user_id=UUID(str(row["user_id"])),
        user_name=user.get("name") if isinstance(user, dict) else None,
        rating=int(row.get("rating", 0)),
        title=str(row.get("title") or ""),
        comment=str(row.get("comment") or ""),
        helpful_count=int(row.get("helpful_count") or 0),
        created_at=parse_timestamp(row.get("created_at")),
    )
