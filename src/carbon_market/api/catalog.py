"""Project catalog and review endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from carbon_market.api.dependencies import require_user_id
from carbon_market.api.models import ReviewRequest
from carbon_market.api.serializers import (
    serialize_map_marker,
    serialize_project_detail,
    serialize_project_page,
    serialize_review,
)
from carbon_market.containers import AppContainer
from carbon_market.domain.projects import ProjectFilters

router = APIRouter(tags=["catalog"])


@router.get("/projects")
async def list_projects(  # noqa: PLR0913
    request: Request,
    category: str | None = None,
    min_price: float | None = Query(default=None, alias="minPrice"),
    max_price: float | None = Query(default=None, alias="maxPrice"),
    certified: bool = False,
    country: str | None = None,
    search: str | None = None,
    sdg_goals: str | None = Query(default=None, alias="sdgGoals"),
    sort: str = "newest",
    page: int = 1,
    limit: int = 12,
) -> dict[str, object]:
    """Return a filtered page of projects."""
    container: AppContainer = request.app.state.container
    filters = ProjectFilters(
        category=category if category and category != "all" else None,
        min_price=min_price,
        max_price=max_price,
        certified=certified,
        country=country if country and country != "all" else None,
        search=search or None,
        sdg_goals=_parse_sdg_goals(sdg_goals),
        sort=sort,
        page=page,
        limit=limit,
    )
    return serialize_project_page(container.project_service.list_projects(filters))


@router.get("/projects/{project_id}")
async def project_detail(project_id: UUID, request: Request) -> dict[str, object]:
    """Return a single project."""
    container: AppContainer = request.app.state.container
    return serialize_project_detail(container.project_service.get_detail(project_id))


@router.get("/map/projects")
async def map_projects(request: Request) -> dict[str, object]:
    """Return map markers for projects with coordinates."""
    container: AppContainer = request.app.state.container
    projects = container.project_service.map_markers()
    return {"projects": [serialize_map_marker(project) for project in projects]}


@router.get("/projects/{project_id}/reviews")
async def list_reviews(
    project_id: UUID, request: Request, sort: str = "newest"
) -> dict[str, object]:
    """Return a project's reviews."""
    container: AppContainer = request.app.state.container
    reviews = container.review_service.list_reviews(project_id, sort)
    return {"reviews": [serialize_review(review) for review in reviews]}


@router.post("/projects/{project_id}/reviews", status_code=status.HTTP_201_CREATED)
async def create_review(
    project_id: UUID,
    payload: ReviewRequest,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> dict[str, object]:
    """Leave the caller's review of a project."""
    container: AppContainer = request.app.state.container
    review = container.review_service.create_review(
        project_id=project_id,
        user_id=user_id,
        rating=payload.rating,
        title=payload.title,
        comment=payload.comment,
    )
    return serialize_review(review)


@router.post("/reviews/{review_id}/helpful")
async def mark_review_helpful(review_id: UUID, request: Request) -> dict[str, object]:
    """Add a helpful vote to a review."""
    container: AppContainer = request.app.state.container
    return serialize_review(container.review_service.mark_helpful(review_id))


def _parse_sdg_goals(raw: str | None) -> list[int] | None:
    """Parse a comma-separated goal list, ignoring blanks and non-numbers."""
    if not raw:
        return None
    goals = [int(part) for part in raw.split(",") if part.strip().isdigit()]
    return goals or None
