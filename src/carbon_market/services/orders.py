"""Order history and buyer dashboard."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from carbon_market.domain.errors import NotFoundError
from carbon_market.domain.footprint import ImpactEquivalents
from carbon_market.domain.orders import Order
from carbon_market.services.footprint import impact_equivalents


class OrderRepository(Protocol):
    """Persistence interface for orders."""

    def list_orders(self, user_id: UUID, status: str | None = None) -> list[Order]:
        """Return a user's orders with items, newest first."""

    def get_order(self, order_id: UUID) -> Order | None:
        """Return an order with items, if present."""


@dataclass
class TimelinePoint:
    """Credits bought on an order and the running total."""

    day: date
    credits: int
    cumulative: int


@dataclass
class DashboardSummary:
    """Headline figures for the buyer dashboard."""

    total_credits: int
    total_spent: float
    project_count: int
    yearly_goal: float
    goal_progress_percent: float
    tons_remaining: float
    timeline: list[TimelinePoint]
    impact: ImpactEquivalents

    @property
    def total_co2(self) -> int:
        """Tons offset; one credit is one ton."""
        return self.total_credits


@dataclass
class OrderService:
    """Application service for a buyer's orders."""

    repository: OrderRepository
    yearly_goal_tons: float = 20.0

    def list_orders(self, user_id: UUID) -> list[Order]:
        """Return the user's orders, newest first."""
        return self.repository.list_orders(user_id)

    def get_order(self, user_id: UUID, order_id: UUID) -> Order:
        """Return one of the user's orders."""
        order = self.repository.get_order(order_id)
        if order is None or order.user_id != user_id:
            raise NotFoundError("Order not found")
        return order

    def dashboard(self, user_id: UUID) -> DashboardSummary:
        """Summarise the user's offsetting against the yearly goal."""
        orders = self.repository.list_orders(user_id)
        total_credits = sum(order.credit_count for order in orders)
        total_spent = sum(order.total_amount for order in orders)
        project_ids = {item.project_id for order in orders for item in order.items}

        timeline = []
        cumulative = 0
        for order in reversed(orders):
            cumulative += order.credit_count
            timeline.append(
                TimelinePoint(
                    day=order.created_at.date(),
                    credits=order.credit_count,
                    cumulative=cumulative,
                )
            )

        goal = self.yearly_goal_tons
        progress = total_credits / goal * 100 if goal > 0 else 0.0
        return DashboardSummary(
            total_credits=total_credits,
            total_spent=total_spent,
            project_count=len(project_ids),
            yearly_goal=goal,
            goal_progress_percent=min(progress, 100.0),
            tons_remaining=max(goal - total_credits, 0.0),
            timeline=timeline,
            impact=impact_equivalents(total_credits),
        )
