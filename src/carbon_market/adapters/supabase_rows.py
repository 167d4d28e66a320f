"""Row parsing shared by the Supabase repositories."""

from datetime import UTC, date, datetime
from uuid import UUID

from carbon_market.domain.orders import OrderProject
from carbon_market.domain.projects import Project

PROJECT_COLUMNS = (
    "id, seller_id, title, description, category, price_per_credit, location, "
    "country, latitude, longitude, standard, sdg_goals, image_url, images, "
    "available_credits, total_credits, created_at, reviews(rating)"
)


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column as an aware datetime, assuming UTC."""
    if isinstance(raw, str) and raw:
        parsed = datetime.fromisoformat(raw)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=UTC)
        return parsed
    return None


def parse_date(raw: object) -> date | None:
    """Parse a date or timestamp column into a date."""
    if isinstance(raw, str) and raw:
        return date.fromisoformat(raw[:10])
    return None


def parse_uuid(raw: object) -> UUID | None:
    """Parse an optional uuid column."""
    if raw is None or raw == "":
        return None
    return UUID(str(raw))


def _optional_float(raw: object) -> float | None:
    return float(raw) if raw is not None else None


def parse_project(row: dict[str, object]) -> Project:
    """Parse a project row with embedded review ratings."""
    reviews = row.get("reviews") or []
    return Project(
        id=UUID(str(row["id"])),
        seller_id=parse_uuid(row.get("seller_id")),
        title=str(row.get("title", "")),
        description=str(row.get("description") or ""),
        category=str(row.get("category", "")),
        price_per_credit=float(row.get("price_per_credit", 0.0)),
        location=str(row.get("location") or ""),
        country=str(row.get("country") or ""),
        latitude=_optional_float(row.get("latitude")),
        longitude=_optional_float(row.get("longitude")),
        standard=row.get("standard"),
        sdg_goals=[int(goal) for goal in row.get("sdg_goals") or []],
        image_url=row.get("image_url"),
        available_credits=int(row.get("available_credits", 0)),
        total_credits=int(row.get("total_credits", 0)),
        created_at=parse_timestamp(row.get("created_at")),
        ratings=[int(review["rating"]) for review in reviews],
        images=[str(image) for image in row.get("images") or []],
    )


def parse_order_project(row: dict[str, object]) -> OrderProject:
    """Parse the project snapshot embedded in an order item."""
    return OrderProject(
        id=UUID(str(row["id"])),
        title=str(row.get("title", "")),
        category=str(row.get("category", "")),
        image_url=row.get("image_url"),
        location=row.get("location"),
        country=row.get("country"),
        price_per_credit=float(row.get("price_per_credit", 0.0)),
    )
