"""Domain models for saved footprint calculations."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CalculationRecord:
    """A footprint calculation stored for a user."""

    id: UUID
    user_id: UUID
    total_emissions: float
    transportation: float
    home_energy: float
    diet: float
    travel: float
    input_data: dict[str, object]
    created_at: datetime | None
