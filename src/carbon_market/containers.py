"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from carbon_market.adapters.supabase_admin_repository import SupabaseAdminRepository
from carbon_market.adapters.supabase_calculation_repository import (
    SupabaseCalculationRepository,
)
from carbon_market.adapters.supabase_order_repository import SupabaseOrderRepository
from carbon_market.adapters.supabase_project_repository import (
    SupabaseProjectRepository,
)
from carbon_market.adapters.supabase_review_repository import (
    SupabaseReviewRepository,
)
from carbon_market.adapters.supabase_seller_repository import (
    SupabaseSellerRepository,
)
from carbon_market.config import Settings
from carbon_market.services.admin import AdminService
from carbon_market.services.calculator import CalculatorService
from carbon_market.services.orders import OrderService
from carbon_market.services.portfolio import PortfolioService
from carbon_market.services.projects import ProjectService
from carbon_market.services.reviews import ReviewService
from carbon_market.services.seller import SellerStatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    calculator_service: CalculatorService
    project_service: ProjectService
    review_service: ReviewService
    order_service: OrderService
    portfolio_service: PortfolioService
    seller_stats_service: SellerStatsService
    admin_service: AdminService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    project_repository = SupabaseProjectRepository(supabase_client)
    review_repository = SupabaseReviewRepository(supabase_client)
    order_repository = SupabaseOrderRepository(supabase_client)
    calculation_repository = SupabaseCalculationRepository(supabase_client)
    seller_repository = SupabaseSellerRepository(supabase_client)
    admin_repository = SupabaseAdminRepository(supabase_client)

    calculator_service = CalculatorService(
        repository=calculation_repository,
        catalog=project_repository,
        recommended_limit=resolved_settings.recommended_project_limit,
    )
    project_service = ProjectService(
        repository=project_repository,
        review_repository=review_repository,
    )
    review_service = ReviewService(
        repository=review_repository,
        projects=project_repository,
    )
    order_service = OrderService(
        repository=order_repository,
        yearly_goal_tons=resolved_settings.yearly_goal_tons,
    )

    return AppContainer(
        settings=resolved_settings,
        calculator_service=calculator_service,
        project_service=project_service,
        review_service=review_service,
        order_service=order_service,
        portfolio_service=PortfolioService(order_repository),
        seller_stats_service=SellerStatsService(seller_repository),
        admin_service=AdminService(admin_repository),
    )
