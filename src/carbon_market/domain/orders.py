"""Domain models for purchase orders."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class OrderProject:
    """Project snapshot attached to an order item."""

    id: UUID
    title: str
    category: str
    image_url: str | None
    location: str | None
    country: str | None
    price_per_credit: float


@dataclass(frozen=True)
class OrderItem:
    """A line of an order."""

    id: UUID
    project_id: UUID
    quantity: int
    price_per_credit: float
    project: OrderProject


@dataclass(frozen=True)
class Order:
    """A purchase of one or more project credits."""

    id: UUID
    user_id: UUID
    total_amount: float
    status: str
    payment_method: str | None
    created_at: datetime
    items: list[OrderItem]

    @property
    def credit_count(self) -> int:
        """Total credits across all items."""
        return sum(item.quantity for item in self.items)
