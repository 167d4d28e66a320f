"""Admin service for marketplace reporting."""

from dataclasses import dataclass
from typing import Protocol

from carbon_market.domain.admin import ProjectSales, RecentOrder, RoleCount

RECENT_ORDERS = 10
TOP_PROJECTS = 5


class AdminRepository(Protocol):
    """Persistence interface for admin data."""

    def count_users(self) -> int:
        """Return the number of registered users."""

    def list_role_counts(self) -> list[RoleCount]:
        """Return user counts grouped by role."""

    def count_projects(self) -> int:
        """Return the number of listed projects."""

    def list_completed_order_amounts(self) -> list[float]:
        """Return the total amount of every completed order."""

    def list_project_sales(self) -> list[ProjectSales]:
        """Return every project with its completed sale lines."""

    def list_recent_orders(self, limit: int) -> list[RecentOrder]:
        """Return the newest orders of any status."""


@dataclass
class AdminStats:
    """Marketplace-wide figures."""

    total_users: int
    users_by_role: list[RoleCount]
    total_projects: int
    total_orders: int
    total_revenue: float
    total_credits_traded: int
    recent_orders: list[RecentOrder]
    top_projects: list[ProjectSales]


@dataclass
class AdminService:
    """Service for admin dashboards."""

    repository: AdminRepository

    def get_stats(self) -> AdminStats:
        """Return marketplace totals and leaders."""
        order_amounts = self.repository.list_completed_order_amounts()
        project_sales = self.repository.list_project_sales()
        top_projects = sorted(
            project_sales, key=lambda project: project.revenue, reverse=True
        )[:TOP_PROJECTS]
        return AdminStats(
            total_users=self.repository.count_users(),
            users_by_role=self.repository.list_role_counts(),
            total_projects=self.repository.count_projects(),
            total_orders=len(order_amounts),
            total_revenue=sum(order_amounts),
            total_credits_traded=sum(p.credits_sold for p in project_sales),
            recent_orders=self.repository.list_recent_orders(RECENT_ORDERS),
            top_projects=top_projects,
        )
