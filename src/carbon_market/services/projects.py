"""Services for browsing the offset project catalog."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from carbon_market.domain.errors import NotFoundError
from carbon_market.domain.projects import (
    PricePoint,
    Project,
    ProjectDetail,
    ProjectFilters,
    ProjectPage,
    SellerSummary,
)
from carbon_market.services.reviews import ReviewRepository

PRICE_HISTORY_POINTS = 12


class ProjectRepository(Protocol):
    """Persistence interface for catalog projects."""

    def search_projects(self, filters: ProjectFilters) -> list[Project]:
        """Return projects matching the column filters, ordered by the sort."""

    def list_countries(self) -> list[str]:
        """Return the distinct project countries."""

    def get_project(self, project_id: UUID) -> Project | None:
        """Return a project by id, if present."""

    def get_seller(self, seller_id: UUID) -> SellerSummary | None:
        """Return the public seller summary, if present."""

    def list_price_history(self, project_id: UUID, limit: int) -> list[PricePoint]:
        """Return the oldest price points for a project."""

    def list_cheapest_active(self, limit: int) -> list[Project]:
        """Return active projects ordered by ascending credit price."""


@dataclass
class ProjectService:
    """Application service for catalog reads."""

    repository: ProjectRepository
    review_repository: ReviewRepository

    def list_projects(self, filters: ProjectFilters) -> ProjectPage:
        """Return a filtered, sorted page of the catalog."""
        page = max(filters.page, 1)
        limit = max(filters.limit, 1)
        projects = self.repository.search_projects(filters)
        if filters.sdg_goals:
            wanted = set(filters.sdg_goals)
            projects = [p for p in projects if wanted.intersection(p.sdg_goals)]
        if filters.sort == "rating":
            projects = sorted(projects, key=lambda p: p.average_rating, reverse=True)

        start = (page - 1) * limit
        return ProjectPage(
            projects=projects[start : start + limit],
            page=page,
            limit=limit,
            total=len(projects),
            countries=self.repository.list_countries(),
        )

    def get_detail(self, project_id: UUID) -> ProjectDetail:
        """Return a project with its seller, reviews and price history."""
        project = self.repository.get_project(project_id)
        if project is None:
            raise NotFoundError("Project not found")
        seller = (
            self.repository.get_seller(project.seller_id)
            if project.seller_id
            else None
        )
        return ProjectDetail(
            project=project,
            seller=seller,
            reviews=self.review_repository.list_reviews(project_id, sort="newest"),
            price_history=self.repository.list_price_history(
                project_id, PRICE_HISTORY_POINTS
            ),
        )

    def map_markers(self) -> list[Project]:
        """Return every project that can be placed on a map."""
        return [
            project
            for project in self.repository.search_projects(ProjectFilters())
            if project.latitude is not None and project.longitude is not None
        ]
