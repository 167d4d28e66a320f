"""Supabase repository for saved footprint calculations."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from carbon_market.adapters.supabase_rows import parse_timestamp
from carbon_market.domain.calculations import CalculationRecord
from carbon_market.domain.footprint import FootprintEstimate
from carbon_market.services.calculator import CalculationRepository


@dataclass
class SupabaseCalculationRepository(CalculationRepository):
    """Supabase-backed calculation history."""

    client: Client

    def create_calculation(
        self,
        user_id: UUID,
        estimate: FootprintEstimate,
        input_data: dict[str, object],
    ) -> CalculationRecord:
        """Store a calculation and return it."""
        response = (
            self.client.table("footprint_calculations")
            .insert(
                {
                    "user_id": str(user_id),
                    "total_emissions": estimate.total_tons_per_year,
                    "transportation": estimate.breakdown.transportation,
                    "home_energy": estimate.breakdown.home_energy,
                    "diet": estimate.breakdown.diet,
                    "travel": estimate.breakdown.travel,
                    "input_data": input_data,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save footprint calculation")
        return _parse_calculation(response.data[0])

    def list_calculations(self, user_id: UUID, limit: int) -> list[CalculationRecord]:
        """Return a user's calculations, newest first."""
        response = (
            self.client.table("footprint_calculations")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_calculation(row) for row in response.data or []]


def _parse_calculation(row: dict[str, object]) -> CalculationRecord:
    input_data = row.get("input_data")
    return CalculationRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        total_emissions=float(row.get("total_emissions", 0.0)),
        transportation=float(row.get("transportation", 0.0)),
        home_energy=float(row.get("home_energy", 0.0)),
        diet=float(row.get("diet", 0.0)),
        travel=float(row.get("travel", 0.0)),
        input_data=input_data if isinstance(input_data, dict) else {},
        created_at=parse_timestamp(row.get("created_at")),
    )
