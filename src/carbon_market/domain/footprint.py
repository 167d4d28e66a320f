"""Domain models for carbon footprint estimation."""

from dataclasses import dataclass
from typing import Literal

VehicleClass = Literal["electric", "hybrid", "gas", "diesel"]
EnergySource = Literal["renewable", "mixed", "fossil"]
HeatingType = Literal["heatPump", "electric", "gas", "oil"]
DietClass = Literal["vegan", "vegetarian", "lowMeat", "average", "highMeat"]


@dataclass(frozen=True)
class LifestyleProfile:
    """Lifestyle answers used to estimate an annual footprint."""

    vehicle_class: VehicleClass
    weekly_distance_miles: float
    weekly_transit_hours: float
    home_area_sq_ft: float
    energy_source: EnergySource
    heating_type: HeatingType
    diet_class: DietClass
    short_flights_per_year: int
    medium_flights_per_year: int
    long_flights_per_year: int

    def snapshot(self) -> dict[str, object]:
        """Return the profile keyed the way clients submit it."""
        return {
            "vehicleClass": self.vehicle_class,
            "weeklyDistanceMiles": self.weekly_distance_miles,
            "weeklyTransitHours": self.weekly_transit_hours,
            "homeAreaSqFt": self.home_area_sq_ft,
            "energySource": self.energy_source,
            "heatingType": self.heating_type,
            "dietClass": self.diet_class,
            "shortFlightsPerYear": self.short_flights_per_year,
            "mediumFlightsPerYear": self.medium_flights_per_year,
            "longFlightsPerYear": self.long_flights_per_year,
        }


@dataclass(frozen=True)
class FootprintBreakdown:
    """Annual tons of CO2e per category."""

    transportation: float
    home_energy: float
    diet: float
    travel: float


@dataclass(frozen=True)
class FootprintComparison:
    """Footprint relative to reference averages."""

    us_average_tons: float
    world_average_tons: float
    percent_of_us: int
    percent_of_world: int


@dataclass(frozen=True)
class Recommendation:
    """A suggested change and its estimated annual savings."""

    category: str
    suggestion: str
    potential_savings_tons: float


@dataclass(frozen=True)
class FootprintEstimate:
    """Result of a footprint estimation."""

    total_tons_per_year: float
    breakdown: FootprintBreakdown
    comparison: FootprintComparison
    recommendations: list[Recommendation]


@dataclass(frozen=True)
class ImpactEquivalents:
    """Everyday equivalents of a quantity of offset credits."""

    trees_planted: int
    miles_driven_offset: int
    homes_powered_years: float
    flights_offset: int
