"""Buyer and seller account endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from carbon_market.api.dependencies import require_user_id
from carbon_market.api.serializers import (
    serialize_dashboard,
    serialize_order,
    serialize_portfolio,
    serialize_seller_stats,
)
from carbon_market.containers import AppContainer

router = APIRouter(tags=["account"])


@router.get("/orders")
async def list_orders(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> dict[str, object]:
    """Return the caller's orders."""
    container: AppContainer = request.app.state.container
    orders = container.order_service.list_orders(user_id)
    return {"orders": [serialize_order(order) for order in orders]}


@router.get("/orders/{order_id}")
async def order_detail(
    order_id: UUID, request: Request, user_id: UUID = Depends(require_user_id)
) -> dict[str, object]:
    """Return one of the caller's orders."""
    container: AppContainer = request.app.state.container
    return serialize_order(container.order_service.get_order(user_id, order_id))


@router.get("/dashboard")
async def dashboard(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> dict[str, object]:
    """Return the caller's offsetting progress."""
    container: AppContainer = request.app.state.container
    return serialize_dashboard(container.order_service.dashboard(user_id))


@router.get("/portfolio")
async def portfolio(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> dict[str, object]:
    """Return the caller's completed holdings."""
    container: AppContainer = request.app.state.container
    return serialize_portfolio(container.portfolio_service.get_portfolio(user_id))


@router.get("/seller/stats")
async def seller_stats(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> dict[str, object]:
    """Return sales figures for the caller's projects."""
    container: AppContainer = request.app.state.container
    return serialize_seller_stats(container.seller_stats_service.get_stats(user_id))
