"""Supabase admin data access."""

from collections import Counter
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from carbon_market.adapters.supabase_rows import parse_timestamp
from carbon_market.domain.admin import ProjectSales, RecentOrder, RoleCount, SaleLine
from carbon_market.domain.orders import COMPLETED
from carbon_market.services.admin import AdminRepository


@dataclass
class SupabaseAdminRepository(AdminRepository):
    """Supabase implementation for admin queries."""

    client: Client

    def count_users(self) -> int:
        """Return the number of registered users."""
        response = self.client.table("users").select("id", count="exact").execute()
        return response.count or 0

    def list_role_counts(self) -> list[RoleCount]:
        """Return user counts grouped by role."""
        response = self.client.table("users").select("role").execute()
        counts = Counter(str(row.get("role", "")) for row in response.data or [])
        return [RoleCount(role=role, count=count) for role, count in counts.items()]

    def count_projects(self) -> int:
        """Return the number of listed projects."""
        response = self.client.table("projects").select("id", count="exact").execute()
        return response.count or 0

    def list_completed_order_amounts(self) -> list[float]:
        """Return the total amount of every completed order."""
        response = (
            self.client.table("orders")
            .select("total_amount")
            .eq("status", COMPLETED)
            .execute()
        )
        return [float(row.get("total_amount", 0.0)) for row in response.data or []]

    def list_project_sales(self) -> list[ProjectSales]:
        """Return every project with its completed sale lines."""
        projects = (
            self.client.table("projects")
            .select("id, title, country, price_per_credit")
            .execute()
        )
        items = (
            self.client.table("order_items")
            .select("project_id, quantity, price_per_credit, orders!inner(status)")
            .eq("orders.status", COMPLETED)
            .execute()
        )
        lines: dict[str, list[SaleLine]] = {}
        for row in items.data or []:
            lines.setdefault(str(row["project_id"]), []).append(
                SaleLine(
                    quantity=int(row.get("quantity", 0)),
                    price_per_credit=float(row.get("price_per_credit", 0.0)),
                )
            )
        return [
            ProjectSales(
                id=UUID(str(row["id"])),
                title=str(row.get("title", "")),
                country=str(row.get("country") or ""),
                price_per_credit=float(row.get("price_per_credit", 0.0)),
                sales=lines.get(str(row["id"]), []),
            )
            for row in projects.data or []
        ]

    def list_recent_orders(self, limit: int) -> list[RecentOrder]:
        """Return the newest orders of any status."""
        response = (
            self.client.table("orders")
            .select("id, total_amount, status, created_at, users(name)")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        orders = []
        for row in response.data or []:
            user = row.get("users") or {}
            orders.append(
                RecentOrder(
                    id=UUID(str(row["id"])),
                    user_name=user.get("name"),
                    total_amount=float(row.get("total_amount", 0.0)),
                    status=str(row.get("status", "")),
                    created_at=parse_timestamp(row.get("created_at")),
                )
            )
        return orders
