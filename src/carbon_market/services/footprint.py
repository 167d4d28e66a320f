"""Carbon footprint estimation and impact equivalents.

All arithmetic runs on exact decimals so that reported tenths follow
round-half-up on the true value rather than on binary float artefacts:
a raw total of 11.85 tons is reported as 11.9.
"""

from decimal import Decimal

from carbon_market.domain.footprint import (
    FootprintBreakdown,
    FootprintComparison,
    FootprintEstimate,
    ImpactEquivalents,
    LifestyleProfile,
    Recommendation,
)
from carbon_market.rounding import round_half_up, round_half_up_int, to_decimal

# Tons CO2e per year when driving the reference distance each week.
VEHICLE_EMISSIONS = {
    "electric": Decimal("0.5"),
    "hybrid": Decimal("1.5"),
    "gas": Decimal("4.6"),
    "diesel": Decimal("5.2"),
}
REFERENCE_WEEKLY_MILES = Decimal(200)
TRANSIT_SAVINGS_PER_HOUR = Decimal("0.05")

ENERGY_MULTIPLIERS = {
    "renewable": Decimal("0.2"),
    "mixed": Decimal("0.6"),
    "fossil": Decimal("1.0"),
}
HEATING_MULTIPLIERS = {
    "heatPump": Decimal("0.5"),
    "electric": Decimal("0.8"),
    "gas": Decimal("1.0"),
    "oil": Decimal("1.3"),
}
HOME_TONS_PER_1000_SQ_FT = Decimal(3)
RENEWABLE_SWITCH_DELTA = Decimal("0.8")

DIET_EMISSIONS = {
    "vegan": Decimal("1.5"),
    "vegetarian": Decimal("1.7"),
    "lowMeat": Decimal("2.5"),
    "average": Decimal("3.3"),
    "highMeat": Decimal("4.5"),
}

SHORT_FLIGHT_TONS = Decimal("0.25")
MEDIUM_FLIGHT_TONS = Decimal("0.75")
LONG_FLIGHT_TONS = Decimal("2.0")
LONG_FLIGHT_ALLOWANCE = 2

US_AVERAGE_TONS = 16
WORLD_AVERAGE_TONS = 4

# 1 credit offsets 1 ton. A tree absorbs ~22 kg a year, an average car emits
# a ton every ~2600 miles, a home ~7.5 tons a year, a flight ~0.9 tons.
TREES_PER_TON = Decimal(45)
MILES_PER_TON = Decimal(2600)
HOME_TONS_PER_YEAR = Decimal("7.5")
TONS_PER_FLIGHT = Decimal("0.9")


def estimate(profile: LifestyleProfile) -> FootprintEstimate:
    """Estimate the annual footprint for a lifestyle profile."""
    miles = to_decimal(profile.weekly_distance_miles)
    distance_ratio = miles / REFERENCE_WEEKLY_MILES
    transit_hours = to_decimal(profile.weekly_transit_hours)
    transportation = VEHICLE_EMISSIONS[profile.vehicle_class] * distance_ratio
    transportation -= transit_hours * TRANSIT_SAVINGS_PER_HOUR
    transportation = max(Decimal(0), transportation)

    home_base = to_decimal(profile.home_area_sq_ft) / 1000
    home_energy = (
        home_base
        * ENERGY_MULTIPLIERS[profile.energy_source]
        * HEATING_MULTIPLIERS[profile.heating_type]
        * HOME_TONS_PER_1000_SQ_FT
    )

    diet = DIET_EMISSIONS[profile.diet_class]

    travel = (
        to_decimal(profile.short_flights_per_year) * SHORT_FLIGHT_TONS
        + to_decimal(profile.medium_flights_per_year) * MEDIUM_FLIGHT_TONS
        + to_decimal(profile.long_flights_per_year) * LONG_FLIGHT_TONS
    )

    total = round_half_up(transportation + home_energy + diet + travel, 1)

    return FootprintEstimate(
        total_tons_per_year=total,
        breakdown=FootprintBreakdown(
            transportation=round_half_up(transportation, 1),
            home_energy=round_half_up(home_energy, 1),
            diet=round_half_up(diet, 1),
            travel=round_half_up(travel, 1),
        ),
        comparison=compare(total),
        recommendations=_recommendations(profile, distance_ratio, home_base),
    )


def compare(total_tons: float) -> FootprintComparison:
    """Compare an annual total against the US and world averages."""
    total = to_decimal(total_tons)
    return FootprintComparison(
        us_average_tons=US_AVERAGE_TONS,
        world_average_tons=WORLD_AVERAGE_TONS,
        percent_of_us=round_half_up_int(total / US_AVERAGE_TONS * 100),
        percent_of_world=round_half_up_int(total / WORLD_AVERAGE_TONS * 100),
    )


def impact_equivalents(credit_count: float) -> ImpactEquivalents:
    """Convert a credit quantity into everyday equivalents."""
    credits = to_decimal(credit_count)
    return ImpactEquivalents(
        trees_planted=round_half_up_int(credits * TREES_PER_TON),
        miles_driven_offset=round_half_up_int(credits * MILES_PER_TON),
        homes_powered_years=round_half_up(credits / HOME_TONS_PER_YEAR, 1),
        flights_offset=round_half_up_int(credits / TONS_PER_FLIGHT),
    )


def _recommendations(
    profile: LifestyleProfile, distance_ratio: Decimal, home_base: Decimal
) -> list[Recommendation]:
    recommendations = []

    if profile.vehicle_class in {"gas", "diesel"}:
        savings = (
            VEHICLE_EMISSIONS[profile.vehicle_class] - VEHICLE_EMISSIONS["hybrid"]
        ) * distance_ratio
        recommendations.append(
            Recommendation(
                category="Transportation",
                suggestion="Consider switching to an electric or hybrid vehicle",
                potential_savings_tons=round_half_up(savings, 1),
            )
        )

    if profile.energy_source == "fossil":
        savings = home_base * RENEWABLE_SWITCH_DELTA * HOME_TONS_PER_1000_SQ_FT
        recommendations.append(
            Recommendation(
                category="Home Energy",
                suggestion="Switch to a renewable energy provider",
                potential_savings_tons=round_half_up(savings, 1),
            )
        )

    if profile.diet_class in {"highMeat", "average"}:
        savings = DIET_EMISSIONS[profile.diet_class] - DIET_EMISSIONS["lowMeat"]
        recommendations.append(
            Recommendation(
                category="Diet",
                suggestion="Reduce meat consumption to lower your carbon footprint",
                potential_savings_tons=round_half_up(savings, 1),
            )
        )

    if profile.long_flights_per_year > LONG_FLIGHT_ALLOWANCE:
        extra_flights = profile.long_flights_per_year - LONG_FLIGHT_ALLOWANCE
        savings = to_decimal(extra_flights) * LONG_FLIGHT_TONS
        recommendations.append(
            Recommendation(
                category="Travel",
                suggestion="Consider alternatives to long-haul flights when possible",
                potential_savings_tons=round_half_up(savings, 1),
            )
        )

    return recommendations
