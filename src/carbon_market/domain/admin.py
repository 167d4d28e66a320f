"""Admin domain models."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class RoleCount:
    """Number of users holding a role."""

    role: str
    count: int


@dataclass(frozen=True)
class RecentOrder:
    """Order row for the admin activity feed."""

    id: UUID
    user_name: str | None
    total_amount: float
    status: str
    created_at: datetime | None


@dataclass(frozen=True)
class SaleLine:
    """Quantity and unit price of a completed order item."""

    quantity: int
    price_per_credit: float


@dataclass(frozen=True)
class ProjectSales:
    """A project with its completed sales."""

    id: UUID
    title: str
    country: str
    price_per_credit: float
    sales: list[SaleLine]

    @property
    def revenue(self) -> float:
        """Total completed revenue."""
        return sum(line.quantity * line.price_per_credit for line in self.sales)

    @property
    def credits_sold(self) -> int:
        """Total completed credits."""
        return sum(line.quantity for line in self.sales)
