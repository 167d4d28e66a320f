"""Sales statistics for project sellers."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from carbon_market.domain.projects import Project
from carbon_market.domain.sales import SoldItem
from carbon_market.rounding import round_half_up

REVENUE_MONTHS = 6
RECENT_SALES = 10
SHORT_NAME_LIMIT = 20
SHORT_NAME_KEEP = 17
MONTHS_PER_YEAR = 12


class SellerRepository(Protocol):
    """Persistence interface for seller reporting."""

    def list_seller_projects(self, seller_id: UUID) -> list[Project]:
        """Return the seller's projects with review ratings."""

    def list_sold_items(self, seller_id: UUID) -> list[SoldItem]:
        """Return completed order items for the seller's projects, newest first."""


@dataclass
class MonthlyRevenue:
    """Revenue and credits sold in a calendar month."""

    month: str
    revenue: float
    credits: int


@dataclass
class ProjectPerformance:
    """Sales figures for one of the seller's projects."""

    project: Project
    credits_sold: int
    revenue: float

    @property
    def short_name(self) -> str:
        """Title trimmed for chart labels."""
        title = self.project.title
        if len(title) > SHORT_NAME_LIMIT:
            return title[:SHORT_NAME_KEEP] + "..."
        return title


@dataclass
class SellerStats:
    """Dashboard figures for a seller."""

    total_revenue: float
    total_credits_sold: int
    active_projects: int
    avg_rating: float
    total_reviews: int
    total_projects: int
    revenue_data: list[MonthlyRevenue]
    performance: list[ProjectPerformance]
    recent_sales: list[SoldItem]


@dataclass
class SellerStatsService:
    """Application service for seller dashboards."""

    repository: SellerRepository

    def get_stats(self, seller_id: UUID, now: datetime | None = None) -> SellerStats:
        """Aggregate the seller's projects, reviews and completed sales."""
        projects = self.repository.list_seller_projects(seller_id)
        sold_items = self.repository.list_sold_items(seller_id)
        now = now or datetime.now(tz=UTC)

        months = _recent_months(now, REVENUE_MONTHS)
        monthly = {key: MonthlyRevenue(label, 0.0, 0) for key, label in months}
        by_project: dict[UUID, list[SoldItem]] = {}
        total_revenue = 0.0
        total_credits = 0
        for item in sold_items:
            total_revenue += item.revenue
            total_credits += item.quantity
            by_project.setdefault(item.project_id, []).append(item)
            bucket = monthly.get((item.ordered_at.year, item.ordered_at.month))
            if bucket is not None:
                bucket.revenue += item.revenue
                bucket.credits += item.quantity

        ratings = [rating for project in projects for rating in project.ratings]
        avg_rating = sum(ratings) / len(ratings) if ratings else 0.0

        performance = [
            ProjectPerformance(
                project=project,
                credits_sold=sum(i.quantity for i in by_project.get(project.id, [])),
                revenue=sum(i.revenue for i in by_project.get(project.id, [])),
            )
            for project in projects
        ]

        return SellerStats(
            total_revenue=round_half_up(total_revenue, 2),
            total_credits_sold=total_credits,
            active_projects=sum(1 for project in projects if project.is_active),
            avg_rating=round_half_up(avg_rating, 1),
            total_reviews=len(ratings),
            total_projects=len(projects),
            revenue_data=[
                MonthlyRevenue(
                    month=entry.month,
                    revenue=round_half_up(entry.revenue, 2),
                    credits=entry.credits,
                )
                for entry in monthly.values()
            ],
            performance=performance,
            recent_sales=sold_items[:RECENT_SALES],
        )


def _recent_months(now: datetime, count: int) -> list[tuple[tuple[int, int], str]]:
    """Return (year, month) keys and short labels, oldest first."""
    months = []
    for offset in range(count - 1, -1, -1):
        index = now.year * MONTHS_PER_YEAR + (now.month - 1) - offset
        year, month = divmod(index, MONTHS_PER_YEAR)
        label = datetime(year, month + 1, 1, tzinfo=UTC).strftime("%b")
        months.append(((year, month + 1), label))
    return months
