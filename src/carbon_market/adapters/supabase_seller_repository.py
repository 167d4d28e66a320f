"""Supabase repository for seller reporting."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from carbon_market.adapters.supabase_rows import (
    PROJECT_COLUMNS,
    parse_project,
    parse_timestamp,
)
from carbon_market.domain.orders import COMPLETED
from carbon_market.domain.projects import Project
from carbon_market.domain.sales import SoldItem
from carbon_market.services.seller import SellerRepository

_SOLD_ITEM_COLUMNS = (
    "id, project_id, quantity, price_per_credit, "
    "projects!inner(title, seller_id), "
    "orders!inner(created_at, status, users(name, email))"
)


@dataclass
class SupabaseSellerRepository(SellerRepository):
    """Supabase implementation for seller statistics."""

    client: Client

    def list_seller_projects(self, seller_id: UUID) -> list[Project]:
        """Return the seller's projects with review ratings."""
        response = (
            self.client.table("projects")
            .select(PROJECT_COLUMNS)
            .eq("seller_id", str(seller_id))
            .execute()
        )
        return [parse_project(row) for row in response.data or []]

    def list_sold_items(self, seller_id: UUID) -> list[SoldItem]:
        """Return completed order items for the seller's projects, newest first."""
        response = (
            self.client.table("order_items")
            .select(_SOLD_ITEM_COLUMNS)
            .eq("projects.seller_id", str(seller_id))
            .eq("orders.status", COMPLETED)
            .execute()
        )
        items = [_parse_sold_item(row) for row in response.data or []]
        return sorted(items, key=lambda item: item.ordered_at, reverse=True)


def _parse_sold_item(row: dict[str, object]) -> SoldItem:
    project = row.get("projects") or {}
    order = row.get("orders") or {}
    buyer = order.get("users") or {}
    return SoldItem(
        id=UUID(str(row["id"])),
        project_id=UUID(str(row["project_id"])),
        project_title=str(project.get("title", "")),
        quantity=int(row.get("quantity", 0)),
        price_per_credit=float(row.get("price_per_credit", 0.0)),
        ordered_at=parse_timestamp(order.get("created_at"))
        or datetime.min.replace(tzinfo=UTC),
        buyer_name=buyer.get("name"),
        buyer_email=buyer.get("email"),
    )
