"""Domain models for the offset project catalog."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from carbon_market.domain.reviews import Review

CERTIFIED_STANDARDS = frozenset({"VCS", "Gold Standard"})


@dataclass(frozen=True)
class Project:
    """An offset project listed on the marketplace."""

    id: UUID
    seller_id: UUID | None
    title: str
    description: str
    category: str
    price_per_credit: float
    location: str
    country: str
    latitude: float | None
    longitude: float | None
    standard: str | None
    sdg_goals: list[int]
    image_url: str | None
    available_credits: int
    total_credits: int
    created_at: datetime | None
    ratings: list[int] = field(default_factory=list)
    images: list[str] = field(default_factory=list)

    @property
    def review_count(self) -> int:
        """Number of reviews left for the project."""
        return len(self.ratings)

    @property
    def average_rating(self) -> float:
        """Mean review rating, 0 when unreviewed."""
        if not self.ratings:
            return 0.0
        return sum(self.ratings) / len(self.ratings)

    @property
    def is_active(self) -> bool:
        """Projects stay active while they have credits to sell."""
        return self.available_credits > 0

    @property
    def is_certified(self) -> bool:
        """Return True for projects verified under a recognised standard."""
        return self.standard in CERTIFIED_STANDARDS


@dataclass(frozen=True)
class PricePoint:
    """A historical credit price."""

    day: date
    price: float


@dataclass(frozen=True)
class SellerSummary:
    """Public details of the seller behind a project."""

    id: UUID
    name: str | None
    email: str | None


@dataclass(frozen=True)
class ProjectFilters:
    """Catalog query parameters."""

    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    certified: bool = False
    country: str | None = None
    search: str | None = None
    sdg_goals: list[int] | None = None
    sort: str = "newest"
    page: int = 1
    limit: int = 12


@dataclass(frozen=True)
class ProjectPage:
    """A page of catalog results."""

    projects: list[Project]
    page: int
    limit: int
    total: int
    countries: list[str]

    @property
    def total_pages(self) -> int:
        """Number of pages at the current page size."""
        if self.limit <= 0:
            return 0
        return -(-self.total // self.limit)


@dataclass(frozen=True)
class ProjectDetail:
    """A project with its seller, reviews and price history."""

    project: Project
    seller: SellerSummary | None
    reviews: list[Review]
    price_history: list[PricePoint]
