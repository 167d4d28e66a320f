"""Supabase repository for orders."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from carbon_market.adapters.supabase_rows import (
    parse_order_project,
    parse_timestamp,
)
from carbon_market.domain.orders import Order, OrderItem
from carbon_market.services.orders import OrderRepository

_ORDER_COLUMNS = (
    "id, user_id, total_amount, status, payment_method, created_at, "
    "order_items(id, project_id, quantity, price_per_credit, "
    "projects(id, title, category, image_url, location, country, price_per_credit))"
)


@dataclass
class SupabaseOrderRepository(OrderRepository):
    """Supabase implementation for order reads."""

    client: Client

    def list_orders(self, user_id: UUID, status: str | None = None) -> list[Order]:
        """Return a user's orders with items, newest first."""
        query = (
            self.client.table("orders")
            .select(_ORDER_COLUMNS)
            .eq("user_id", str(user_id))
        )
        if status:
            query = query.eq("status", status)
        response = query.order("created_at", desc=True).execute()
        return [_parse_order(row) for row in response.data or []]

    def get_order(self, order_id: UUID) -> Order | None:
        """Return an order with items, if present."""
        response = (
            self.client.table("orders")
            .select(_ORDER_COLUMNS)
            .eq("id", str(order_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_order(response.data[0])


def _parse_order(row: dict[str, object]) -> Order:
    items = [
        OrderItem(
            id=UUID(str(item["id"])),
            project_id=UUID(str(item["project_id"])),
            quantity=int(item.get("quantity", 0)),
            price_per_credit=float(item.get("price_per_credit", 0.0)),
            project=parse_order_project(item["projects"]),
        )
        for item in row.get("order_items") or []
    ]
    return Order(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        total_amount=float(row.get("total_amount", 0.0)),
        status=str(row.get("status", "")),
        payment_method=row.get("payment_method"),
        created_at=parse_timestamp(row.get("created_at"))
        or datetime.min.replace(tzinfo=UTC),
        items=items,
    )
