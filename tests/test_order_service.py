"""Tests for orders and the buyer dashboard."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from carbon_market.domain.errors import NotFoundError
from carbon_market.services.orders import OrderService
from tests.conftest import InMemoryOrderRepository, make_order, make_project


def test_get_order_only_for_owner() -> None:
    owner = uuid4()
    order = make_order(owner, make_project(), 3, datetime(2026, 1, 5, tzinfo=UTC))
    service = OrderService(InMemoryOrderRepository(orders=[order]))

    assert service.get_order(owner, order.id) == order
    with pytest.raises(NotFoundError):
        service.get_order(uuid4(), order.id)
    with pytest.raises(NotFoundError):
        service.get_order(owner, uuid4())


def test_list_orders_newest_first() -> None:
    user_id = uuid4()
    project = make_project()
    older = make_order(user_id, project, 1, datetime(2026, 1, 1, tzinfo=UTC))
    newer = make_order(user_id, project, 2, datetime(2026, 2, 1, tzinfo=UTC))
    service = OrderService(InMemoryOrderRepository(orders=[older, newer]))

    assert service.list_orders(user_id) == [newer, older]


def test_dashboard_summary() -> None:
    user_id = uuid4()
    forest = make_project("Forest", price=10.0)
    wind = make_project("Wind", price=20.0)
    repository = InMemoryOrderRepository(
        orders=[
            make_order(user_id, forest, 5, datetime(2026, 1, 1, tzinfo=UTC)),
            make_order(user_id, wind, 3, datetime(2026, 2, 1, tzinfo=UTC)),
            make_order(uuid4(), wind, 50, datetime(2026, 2, 2, tzinfo=UTC)),
        ]
    )

    summary = OrderService(repository, yearly_goal_tons=20.0).dashboard(user_id)

    assert summary.total_credits == 8
    assert summary.total_co2 == 8
    assert summary.total_spent == 110.0
    assert summary.project_count == 2
    assert summary.goal_progress_percent == 40.0
    assert summary.tons_remaining == 12.0
    assert [(p.credits, p.cumulative) for p in summary.timeline] == [(5, 5), (3, 8)]
    assert summary.impact.trees_planted == 360
    assert summary.impact.homes_powered_years == 1.1
    assert summary.impact.flights_offset == 9


def test_dashboard_caps_goal_progress() -> None:
    user_id = uuid4()
    repository = InMemoryOrderRepository(
        orders=[make_order(user_id, make_project(), 25, datetime.now(tz=UTC))]
    )

    summary = OrderService(repository, yearly_goal_tons=20.0).dashboard(user_id)

    assert summary.goal_progress_percent == 100.0
    assert summary.tons_remaining == 0


def test_dashboard_without_orders() -> None:
    summary = OrderService(InMemoryOrderRepository()).dashboard(uuid4())

    assert summary.total_credits == 0
    assert summary.timeline == []
    assert summary.impact.trees_planted == 0
