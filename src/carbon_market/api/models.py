"""Request and response models for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from carbon_market.domain.footprint import (
    DietClass,
    EnergySource,
    HeatingType,
    LifestyleProfile,
    VehicleClass,
)
from carbon_market.domain.projects import Project
from carbon_market.rounding import round_half_up
from carbon_market.services.calculator import CalculationResult


class CalculateRequest(BaseModel):
    """Lifestyle answers submitted to the footprint calculator."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    vehicle_class: VehicleClass = Field(alias="vehicleClass")
    weekly_distance_miles: float = Field(
        alias="weeklyDistanceMiles", ge=0, strict=True
    )
    weekly_transit_hours: float = Field(
        alias="weeklyTransitHours", ge=0, strict=True
    )
    home_area_sq_ft: float = Field(alias="homeAreaSqFt", gt=0, strict=True)
    energy_source: EnergySource = Field(alias="energySource")
    heating_type: HeatingType = Field(alias="heatingType")
    diet_class: DietClass = Field(alias="dietClass")
    short_flights_per_year: int = Field(
        alias="shortFlightsPerYear", ge=0, strict=True
    )
    medium_flights_per_year: int = Field(
        alias="mediumFlightsPerYear", ge=0, strict=True
    )
    long_flights_per_year: int = Field(
        alias="longFlightsPerYear", ge=0, strict=True
    )

    def to_profile(self) -> LifestyleProfile:
        """Build the domain profile."""
        return LifestyleProfile(
            vehicle_class=self.vehicle_class,
            weekly_distance_miles=self.weekly_distance_miles,
            weekly_transit_hours=self.weekly_transit_hours,
            home_area_sq_ft=self.home_area_sq_ft,
            energy_source=self.energy_source,
            heating_type=self.heating_type,
            diet_class=self.diet_class,
            short_flights_per_year=self.short_flights_per_year,
            medium_flights_per_year=self.medium_flights_per_year,
            long_flights_per_year=self.long_flights_per_year,
        )


class ReviewRequest(BaseModel):
    """A new review of a project."""

    rating: int
    title: str = ""
    comment: str = ""


class _ResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class BreakdownOut(_ResponseModel):
    """Per-category tons."""

    transportation: float
    home_energy: float = Field(alias="homeEnergy")
    diet: float
    travel: float


class ComparisonOut(_ResponseModel):
    """Footprint against reference averages."""

    us_average_tons: float = Field(alias="usAverageTons")
    world_average_tons: float = Field(alias="worldAverageTons")
    percent_of_us: int = Field(alias="percentOfUS")
    percent_of_world: int = Field(alias="percentOfWorld")


class RecommendationOut(_ResponseModel):
    """Suggested reduction."""

    category: str
    suggestion: str
    potential_savings_tons: float = Field(alias="potentialSavingsTons")


class RecommendedProjectOut(_ResponseModel):
    """Catalog entry offered to offset the footprint."""

    id: str
    title: str
    category: str
    price_per_credit: float = Field(alias="pricePerCredit")
    image_url: str | None = Field(alias="imageUrl")
    rating: float
    sdg_goals: list[int] = Field(alias="sdgGoals")

    @classmethod
    def from_project(cls, project: Project) -> "RecommendedProjectOut":
        """Build the card from a catalog project."""
        return cls(
            id=str(project.id),
            title=project.title,
            category=project.category,
            price_per_credit=project.price_per_credit,
            image_url=project.image_url,
            rating=round_half_up(project.average_rating, 1),
            sdg_goals=project.sdg_goals,
        )


class ImpactOut(_ResponseModel):
    """Everyday equivalents of a credit quantity."""

    trees_planted: int = Field(alias="treesPlanted")
    miles_driven_offset: int = Field(alias="milesDrivenOffset")
    homes_powered_years: float = Field(alias="homesPoweredYears")
    flights_offset: int = Field(alias="flightsOffset")


class CalculateResponse(_ResponseModel):
    """Footprint estimate with offset pricing."""

    total_tons_per_year: float = Field(alias="totalTonsPerYear")
    breakdown: BreakdownOut
    comparison: ComparisonOut
    recommendations: list[RecommendationOut]
    recommended_projects: list[RecommendedProjectOut] = Field(
        alias="recommendedProjects"
    )
    offset_cost: float = Field(alias="offsetCost")
    credits_needed: int = Field(alias="creditsNeeded")
    impact_equivalents: ImpactOut = Field(alias="impactEquivalents")

    @classmethod
    def from_result(cls, result: CalculationResult) -> "CalculateResponse":
        """Flatten a calculation result into the response shape."""
        estimate = result.estimate
        return cls(
            total_tons_per_year=estimate.total_tons_per_year,
            breakdown=BreakdownOut(
                transportation=estimate.breakdown.transportation,
                home_energy=estimate.breakdown.home_energy,
                diet=estimate.breakdown.diet,
                travel=estimate.breakdown.travel,
            ),
            comparison=ComparisonOut(
                us_average_tons=estimate.comparison.us_average_tons,
                world_average_tons=estimate.comparison.world_average_tons,
                percent_of_us=estimate.comparison.percent_of_us,
                percent_of_world=estimate.comparison.percent_of_world,
            ),
            recommendations=[
                RecommendationOut(
                    category=item.category,
                    suggestion=item.suggestion,
                    potential_savings_tons=item.potential_savings_tons,
                )
                for item in estimate.recommendations
            ],
            recommended_projects=[
                RecommendedProjectOut.from_project(project)
                for project in result.recommended_projects
            ],
            offset_cost=result.offset_cost,
            credits_needed=result.credits_needed,
            impact_equivalents=ImpactOut(
                trees_planted=result.impact.trees_planted,
                miles_driven_offset=result.impact.miles_driven_offset,
                homes_powered_years=result.impact.homes_powered_years,
                flights_offset=result.impact.flights_offset,
            ),
        )
