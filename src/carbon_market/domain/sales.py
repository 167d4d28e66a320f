"""Domain models for seller-side sales data."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class SoldItem:
    """A completed order item for one of a seller's projects."""

    id: UUID
    project_id: UUID
    project_title: str
    quantity: int
    price_per_credit: float
    ordered_at: datetime
    buyer_name: str | None = None
    buyer_email: str | None = None

    @property
    def revenue(self) -> float:
        """Amount paid for this item."""
        return self.quantity * self.price_per_credit
