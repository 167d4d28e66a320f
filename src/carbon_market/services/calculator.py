"""Footprint calculator with offset recommendations."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from carbon_market.domain.calculations import CalculationRecord
from carbon_market.domain.errors import CatalogUnavailableError
from carbon_market.domain.footprint import (
    FootprintEstimate,
    ImpactEquivalents,
    LifestyleProfile,
)
from carbon_market.domain.projects import Project
from carbon_market.rounding import round_half_up, to_decimal
from carbon_market.services.footprint import estimate, impact_equivalents

_logger = logging.getLogger(__name__)


class CalculationRepository(Protocol):
    """Persistence interface for saved footprint calculations."""

    def create_calculation(
        self,
        user_id: UUID,
        estimate: FootprintEstimate,
        input_data: dict[str, object],
    ) -> CalculationRecord:
        """Store a calculation and return it."""

    def list_calculations(self, user_id: UUID, limit: int) -> list[CalculationRecord]:
        """Return a user's calculations, newest first."""


class OffsetCatalog(Protocol):
    """Catalog lookups used to price an offset."""

    def list_cheapest_active(self, limit: int) -> list[Project]:
        """Return active projects ordered by ascending credit price."""


@dataclass(frozen=True)
class CalculationResult:
    """Estimate plus what it would take to offset it."""

    estimate: FootprintEstimate
    recommended_projects: list[Project]
    offset_cost: float
    credits_needed: int
    impact: ImpactEquivalents


@dataclass
class CalculatorService:
    """Application service behind the footprint calculator."""

    repository: CalculationRepository
    catalog: OffsetCatalog
    recommended_limit: int = 4

    def calculate(
        self, profile: LifestyleProfile, user_id: UUID | None = None
    ) -> CalculationResult:
        """Estimate a footprint, save it for known users and price the offset."""
        result = estimate(profile)
        if user_id is not None:
            self._save(user_id, result, profile)

        try:
            projects = self.catalog.list_cheapest_active(self.recommended_limit)
        except Exception as exc:
            raise CatalogUnavailableError("Project catalog unavailable") from exc

        credits_needed = math.ceil(result.total_tons_per_year)
        return CalculationResult(
            estimate=result,
            recommended_projects=projects,
            offset_cost=_offset_cost(result.total_tons_per_year, projects),
            credits_needed=credits_needed,
            impact=impact_equivalents(credits_needed),
        )

    def history(self, user_id: UUID, limit: int = 10) -> list[CalculationRecord]:
        """Return the user's saved calculations."""
        return self.repository.list_calculations(user_id, limit)

    def _save(
        self, user_id: UUID, result: FootprintEstimate, profile: LifestyleProfile
    ) -> None:
        try:
            self.repository.create_calculation(user_id, result, profile.snapshot())
        except Exception:
            _logger.exception(
                "Failed to save footprint calculation", extra={"user_id": user_id}
            )


def _offset_cost(total_tons: float, projects: list[Project]) -> float:
    """Price the total at the average credit price of the recommendations."""
    if not projects:
        return 0.0
    prices = [to_decimal(project.price_per_credit) for project in projects]
    average_price = sum(prices) / len(prices)
    return round_half_up(to_decimal(total_tons) * average_price, 2)
