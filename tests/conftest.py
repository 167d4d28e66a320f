"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from carbon_market.config import Settings
from carbon_market.containers import AppContainer
from carbon_market.domain.admin import ProjectSales, RecentOrder, RoleCount
from carbon_market.domain.calculations import CalculationRecord
from carbon_market.domain.footprint import FootprintEstimate
from carbon_market.domain.orders import Order, OrderItem, OrderProject
from carbon_market.domain.projects import (
    PricePoint,
    Project,
    ProjectFilters,
    SellerSummary,
)
from carbon_market.domain.reviews import Review
from carbon_market.domain.sales import SoldItem
from carbon_market.services.admin import AdminRepository, AdminService
from carbon_market.services.calculator import CalculationRepository, CalculatorService
from carbon_market.services.orders import OrderRepository, OrderService
from carbon_market.services.portfolio import PortfolioService
from carbon_market.services.projects import ProjectRepository, ProjectService
from carbon_market.services.reviews import ReviewRepository, ReviewService
from carbon_market.services.seller import SellerRepository, SellerStatsService

PROFILE_A = {
    "vehicleClass": "gas",
    "weeklyDistanceMiles": 200,
    "weeklyTransitHours": 0,
    "homeAreaSqFt": 1500,
    "energySource": "mixed",
    "heatingType": "gas",
    "dietClass": "average",
    "shortFlightsPerYear": 2,
    "mediumFlightsPerYear": 1,
    "longFlightsPerYear": 0,
}


def make_project(  # noqa: PLR0913
    title: str = "Rainforest Guardians",
    price: float = 10.0,
    category: str = "Forestry",
    country: str = "Brazil",
    standard: str | None = "VCS",
    available_credits: int = 100,
    ratings: list[int] | None = None,
    sdg_goals: list[int] | None = None,
    seller_id: UUID | None = None,
    created_at: datetime | None = None,
    latitude: float | None = -3.4,
    longitude: float | None = -62.2,
) -> Project:
    return Project(
        id=uuid4(),
        seller_id=seller_id,
        title=title,
        description=f"{title} protects ecosystems.",
        category=category,
        price_per_credit=price,
        location="Amazonas",
        country=country,
        latitude=latitude,
        longitude=longitude,
        standard=standard,
        sdg_goals=sdg_goals if sdg_goals is not None else [13, 15],
        image_url=f"https://img.example/{title.lower().replace(' ', '-')}.jpg",
        available_credits=available_credits,
        total_credits=max(available_credits, 100),
        created_at=created_at or datetime(2024, 1, 1, tzinfo=UTC),
        ratings=ratings or [],
    )


def make_order(  # noqa: PLR0913
    user_id: UUID,
    project: Project,
    quantity: int,
    created_at: datetime,
    status: str = "COMPLETED",
    price: float | None = None,
) -> Order:
    unit_price = project.price_per_credit if price is None else price
    return Order(
        id=uuid4(),
        user_id=user_id,
        total_amount=quantity * unit_price,
        status=status,
        payment_method="card",
        created_at=created_at,
        items=[
            OrderItem(
                id=uuid4(),
                project_id=project.id,
                quantity=quantity,
                price_per_credit=unit_price,
                project=OrderProject(
                    id=project.id,
                    title=project.title,
                    category=project.category,
                    image_url=project.image_url,
                    location=project.location,
                    country=project.country,
                    price_per_credit=project.price_per_credit,
                ),
            )
        ],
    )


@dataclass
class InMemoryCalculationRepository(CalculationRepository):
    """In-memory calculation history for tests."""

    records: list[CalculationRecord] = field(default_factory=list)
    fail: bool = False

    def create_calculation(
        self,
        user_id: UUID,
        estimate: FootprintEstimate,
        input_data: dict[str, object],
    ) -> CalculationRecord:
        if self.fail:
            raise RuntimeError("database unavailable")
        record = CalculationRecord(
            id=uuid4(),
            user_id=user_id,
            total_emissions=estimate.total_tons_per_year,
            transportation=estimate.breakdown.transportation,
            home_energy=estimate.breakdown.home_energy,
            diet=estimate.breakdown.diet,
            travel=estimate.breakdown.travel,
            input_data=input_data,
            created_at=datetime.now(tz=UTC),
        )
        self.records.append(record)
        return record

    def list_calculations(self, user_id: UUID, limit: int) -> list[CalculationRecord]:
        mine = [record for record in self.records if record.user_id == user_id]
        return list(reversed(mine))[:limit]


@dataclass
class InMemoryProjectRepository(ProjectRepository):
    """In-memory catalog for tests."""

    projects: list[Project] = field(default_factory=list)
    sellers: dict[UUID, SellerSummary] = field(default_factory=dict)
    price_history: dict[UUID, list[PricePoint]] = field(default_factory=dict)
    fail: bool = False

    def search_projects(self, filters: ProjectFilters) -> list[Project]:
        results = list(self.projects)
        if filters.category:
            results = [p for p in results if p.category == filters.category]
        if filters.min_price is not None:
            results = [p for p in results if p.price_per_credit >= filters.min_price]
        if filters.max_price is not None:
            results = [p for p in results if p.price_per_credit <= filters.max_price]
        if filters.certified:
            results = [p for p in results if p.is_certified]
        if filters.country:
            results = [p for p in results if p.country == filters.country]
        if filters.search:
            needle = filters.search.lower()
            results = [
                p
                for p in results
                if any(
                    needle in value.lower()
                    for value in (p.title, p.description, p.location, p.country)
                )
            ]
        if filters.sort == "price-asc":
            results.sort(key=lambda p: p.price_per_credit)
        elif filters.sort == "price-desc":
            results.sort(key=lambda p: p.price_per_credit, reverse=True)
        elif filters.sort == "credits":
            results.sort(key=lambda p: p.available_credits, reverse=True)
        else:
            results.sort(key=lambda p: p.created_at, reverse=True)
        return results

    def list_countries(self) -> list[str]:
        return sorted({p.country for p in self.projects if p.country})

    def get_project(self, project_id: UUID) -> Project | None:
        return next((p for p in self.projects if p.id == project_id), None)

    def get_seller(self, seller_id: UUID) -> SellerSummary | None:
        return self.sellers.get(seller_id)

    def list_price_history(self, project_id: UUID, limit: int) -> list[PricePoint]:
        points = sorted(self.price_history.get(project_id, []), key=lambda p: p.day)
        return points[:limit]

    def list_cheapest_active(self, limit: int) -> list[Project]:
        if self.fail:
            raise RuntimeError("catalog unavailable")
        active = [p for p in self.projects if p.is_active]
        return sorted(active, key=lambda p: p.price_per_credit)[:limit]


@dataclass
class InMemoryReviewRepository(ReviewRepository):
    """In-memory review store for tests."""

    reviews: list[Review] = field(default_factory=list)

    def list_reviews(self, project_id: UUID, sort: str) -> list[Review]:
        reviews = [r for r in self.reviews if r.project_id == project_id]
        if sort == "oldest":
            return sorted(reviews, key=lambda r: r.created_at)
        if sort == "highest":
            return sorted(reviews, key=lambda r: r.rating, reverse=True)
        if sort == "lowest":
            return sorted(reviews, key=lambda r: r.rating)
        if sort == "helpful":
            return sorted(reviews, key=lambda r: r.helpful_count, reverse=True)
        return sorted(reviews, key=lambda r: r.created_at, reverse=True)

    def find_user_review(self, project_id: UUID, user_id: UUID) -> Review | None:
        return next(
            (
                r
                for r in self.reviews
                if r.project_id == project_id and r.user_id == user_id
            ),
            None,
        )

    def create_review(  # noqa: PLR0913
        self,
        project_id: UUID,
        user_id: UUID,
        rating: int,
        title: str,
        comment: str,
    ) -> Review:
        review = Review(
            id=uuid4(),
            project_id=project_id,
            user_id=user_id,
            user_name="Test Buyer",
            rating=rating,
            title=title,
            comment=comment,
            helpful_count=0,
            created_at=datetime.now(tz=UTC),
        )
        self.reviews.append(review)
        return review

    def increment_helpful(self, review_id: UUID) -> Review | None:
        for index, review in enumerate(self.reviews):
            if review.id == review_id:
                updated = Review(
                    id=review.id,
                    project_id=review.project_id,
                    user_id=review.user_id,
                    user_name=review.user_name,
                    rating=review.rating,
                    title=review.title,
                    comment=review.comment,
                    helpful_count=review.helpful_count + 1,
                    created_at=review.created_at,
                )
                self.reviews[index] = updated
                return updated
        return None


@dataclass
class InMemoryOrderRepository(OrderRepository):
    """In-memory order store for tests."""

    orders: list[Order] = field(default_factory=list)

    def list_orders(self, user_id: UUID, status: str | None = None) -> list[Order]:
        orders = [
            order
            for order in self.orders
            if order.user_id == user_id and (status is None or order.status == status)
        ]
        return sorted(orders, key=lambda order: order.created_at, reverse=True)

    def get_order(self, order_id: UUID) -> Order | None:
        return next((order for order in self.orders if order.id == order_id), None)


@dataclass
class InMemorySellerRepository(SellerRepository):
    """In-memory seller reporting data for tests."""

    projects: list[Project] = field(default_factory=list)
    sold_items: list[SoldItem] = field(default_factory=list)

    def list_seller_projects(self, seller_id: UUID) -> list[Project]:
        return [p for p in self.projects if p.seller_id == seller_id]

    def list_sold_items(self, seller_id: UUID) -> list[SoldItem]:
        owned = {p.id for p in self.list_seller_projects(seller_id)}
        items = [item for item in self.sold_items if item.project_id in owned]
        return sorted(items, key=lambda item: item.ordered_at, reverse=True)


@dataclass
class InMemoryAdminRepository(AdminRepository):
    """In-memory admin data for tests."""

    roles: list[RoleCount] = field(default_factory=list)
    projects: int = 0
    order_amounts: list[float] = field(default_factory=list)
    project_sales: list[ProjectSales] = field(default_factory=list)
    recent_orders: list[RecentOrder] = field(default_factory=list)

    def count_users(self) -> int:
        return sum(role.count for role in self.roles)

    def list_role_counts(self) -> list[RoleCount]:
        return self.roles

    def count_projects(self) -> int:
        return self.projects

    def list_completed_order_amounts(self) -> list[float]:
        return self.order_amounts

    def list_project_sales(self) -> list[ProjectSales]:
        return self.project_sales

    def list_recent_orders(self, limit: int) -> list[RecentOrder]:
        return self.recent_orders[:limit]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="eyJhbGciOiJIUzI1NiJ9.eyJyb2xlIjoic2VydmljZSJ9.c2ln",
        admin_token="admin-token",
    )


@pytest.fixture
def project_repository() -> InMemoryProjectRepository:
    return InMemoryProjectRepository()


@pytest.fixture
def calculation_repository() -> InMemoryCalculationRepository:
    return InMemoryCalculationRepository()


@pytest.fixture
def review_repository() -> InMemoryReviewRepository:
    return InMemoryReviewRepository()


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def seller_repository() -> InMemorySellerRepository:
    return InMemorySellerRepository()


@pytest.fixture
def admin_repository() -> InMemoryAdminRepository:
    return InMemoryAdminRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    project_repository: InMemoryProjectRepository,
    calculation_repository: InMemoryCalculationRepository,
    review_repository: InMemoryReviewRepository,
    order_repository: InMemoryOrderRepository,
    seller_repository: InMemorySellerRepository,
    admin_repository: InMemoryAdminRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        calculator_service=CalculatorService(
            repository=calculation_repository,
            catalog=project_repository,
            recommended_limit=settings.recommended_project_limit,
        ),
        project_service=ProjectService(
            repository=project_repository, review_repository=review_repository
        ),
        review_service=ReviewService(
            repository=review_repository, projects=project_repository
        ),
        order_service=OrderService(
            repository=order_repository, yearly_goal_tons=settings.yearly_goal_tons
        ),
        portfolio_service=PortfolioService(order_repository),
        seller_stats_service=SellerStatsService(seller_repository),
        admin_service=AdminService(admin_repository),
    )
