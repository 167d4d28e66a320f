"""Portfolio aggregation over completed orders."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from carbon_market.domain.footprint import ImpactEquivalents
from carbon_market.domain.orders import COMPLETED, Order, OrderProject
from carbon_market.services.footprint import impact_equivalents
from carbon_market.services.orders import OrderRepository

RECENT_ORDERS = 5


@dataclass
class Purchase:
    """A single purchase of a project's credits."""

    purchased_at: datetime
    quantity: int
    price: float


@dataclass
class Holding:
    """Credits held in one project."""

    project: OrderProject
    total_credits: int = 0
    total_value: float = 0.0
    purchases: list[Purchase] = field(default_factory=list)

    @property
    def current_value(self) -> float:
        """Holding valued at the project's current price."""
        return self.total_credits * self.project.price_per_credit

    @property
    def avg_purchase_price(self) -> float:
        """Average price paid per credit."""
        if not self.total_credits:
            return 0.0
        return self.total_value / self.total_credits

    @property
    def first_purchase(self) -> datetime | None:
        """Oldest purchase; purchases are recorded newest first."""
        return self.purchases[-1].purchased_at if self.purchases else None


@dataclass
class PortfolioEntry:
    """Credits and spend of one order."""

    day: date
    credits: int
    amount: float


@dataclass
class Portfolio:
    """A buyer's completed offset holdings."""

    total_credits: int
    total_spent: float
    total_orders: int
    holdings: list[Holding]
    category_breakdown: dict[str, int]
    timeline: list[PortfolioEntry]
    impact: ImpactEquivalents
    recent_orders: list[Order]


@dataclass
class PortfolioService:
    """Application service for the buyer portfolio."""

    repository: OrderRepository

    def get_portfolio(self, user_id: UUID) -> Portfolio:
        """Aggregate the user's completed orders into holdings."""
        orders = self.repository.list_orders(user_id, status=COMPLETED)
        total_credits = 0
        total_spent = 0.0
        categories: dict[str, int] = {}
        holdings: dict[UUID, Holding] = {}
        timeline = []

        for order in orders:
            total_credits += order.credit_count
            total_spent += order.total_amount
            for item in order.items:
                category = item.project.category
                categories[category] = categories.get(category, 0) + item.quantity
                holding = holdings.setdefault(
                    item.project_id, Holding(project=item.project)
                )
                holding.total_credits += item.quantity
                holding.total_value += item.quantity * item.price_per_credit
                holding.purchases.append(
                    Purchase(
                        purchased_at=order.created_at,
                        quantity=item.quantity,
                        price=item.price_per_credit,
                    )
                )
            timeline.append(
                PortfolioEntry(
                    day=order.created_at.date(),
                    credits=order.credit_count,
                    amount=order.total_amount,
                )
            )

        timeline.reverse()
        return Portfolio(
            total_credits=total_credits,
            total_spent=total_spent,
            total_orders=len(orders),
            holdings=list(holdings.values()),
            category_breakdown=categories,
            timeline=timeline,
            impact=impact_equivalents(total_credits),
            recent_orders=orders[:RECENT_ORDERS],
        )
