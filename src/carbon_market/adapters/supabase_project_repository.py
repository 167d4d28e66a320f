"""Supabase repository for the project catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from carbon_market.adapters.supabase_rows import (
    PROJECT_COLUMNS,
    parse_date,
    parse_project,
)
from carbon_market.domain.projects import (
    CERTIFIED_STANDARDS,
    PricePoint,
    Project,
    ProjectFilters,
    SellerSummary,
)
from carbon_market.services.projects import ProjectRepository

_SORT_COLUMNS = {
    "newest": ("created_at", True),
    "price-asc": ("price_per_credit", False),
    "price-desc": ("price_per_credit", True),
    "credits": ("available_credits", True),
}
_SEARCH_COLUMNS = ("title", "description", "location", "country")
_SEARCH_RESERVED = str.maketrans("", "", ",()*%")


@dataclass
class SupabaseProjectRepository(ProjectRepository):
    """Supabase implementation for catalog queries."""

    client: Client

    def search_projects(self, filters: ProjectFilters) -> list[Project]:
        """Return projects matching the column filters, ordered by the sort."""
        query = self.client.table("projects").select(PROJECT_COLUMNS)
        if filters.category:
            query = query.eq("category", filters.category)
        if filters.min_price is not None:
            query = query.gte("price_per_credit", filters.min_price)
        if filters.max_price is not None:
            query = query.lte("price_per_credit", filters.max_price)
        if filters.certified:
            query = query.in_("standard", sorted(CERTIFIED_STANDARDS))
        if filters.country:
            query = query.eq("country", filters.country)
        search = (filters.search or "").translate(_SEARCH_RESERVED).strip()
        if search:
            query = query.or_(
                ",".join(f"{column}.ilike.*{search}*" for column in _SEARCH_COLUMNS)
            )
        column, desc = _SORT_COLUMNS.get(filters.sort, _SORT_COLUMNS["newest"])
        response = query.order(column, desc=desc).execute()
        return [parse_project(row) for row in response.data or []]

    def list_countries(self) -> list[str]:
        """Return the distinct project countries."""
        response = self.client.table("projects").select("country").execute()
        countries = {row.get("country") for row in response.data or []}
        return sorted(country for country in countries if country)

    def get_project(self, project_id: UUID) -> Project | None:
        """Return a project by id, if present."""
        response = (
            self.client.table("projects")
            .select(PROJECT_COLUMNS)
            .eq("id", str(project_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_project(response.data[0])

    def get_seller(self, seller_id: UUID) -> SellerSummary | None:
        """Return the public seller summary, if present."""
        response = (
            self.client.table("users")
            .select("id, name, email")
            .eq("id", str(seller_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return SellerSummary(
            id=UUID(str(row["id"])), name=row.get("name"), email=row.get("email")
        )

    def list_price_history(self, project_id: UUID, limit: int) -> list[PricePoint]:
        """Return the oldest price points for a project."""
        response = (
            self.client.table("price_history")
            .select("date, price")
            .eq("project_id", str(project_id))
            .order("date", desc=False)
            .limit(limit)
            .execute()
        )
        points = []
        for row in response.data or []:
            day = parse_date(row.get("date"))
            if day is not None:
                points.append(PricePoint(day=day, price=float(row.get("price", 0.0))))
        return points

    def list_cheapest_active(self, limit: int) -> list[Project]:
        """Return active projects ordered by ascending credit price."""
        response = (
            self.client.table("projects")
            .select(PROJECT_COLUMNS)
            .gt("available_credits", 0)
            .order("price_per_credit", desc=False)
            .limit(limit)
            .execute()
        )
        return [parse_project(row) for row in response.data or []]
