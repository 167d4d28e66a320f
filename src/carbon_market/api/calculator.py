"""Footprint calculator endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from carbon_market.api.dependencies import optional_user_id, require_user_id
from carbon_market.api.models import CalculateRequest, CalculateResponse
from carbon_market.api.serializers import serialize_calculation
from carbon_market.containers import AppContainer
from carbon_market.domain.errors import CatalogUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculator"])


@router.post("/calculate", response_model=CalculateResponse)
async def calculate(
    payload: CalculateRequest,
    request: Request,
    user_id: UUID | None = Depends(optional_user_id),
) -> CalculateResponse | JSONResponse:
    """Estimate a footprint and price its offset."""
    container: AppContainer = request.app.state.container
    try:
        result = container.calculator_service.calculate(
            payload.to_profile(), user_id=user_id
        )
    except CatalogUnavailableError as exc:
        logger.exception("Footprint calculation failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc)},
        )
    return CalculateResponse.from_result(result)


@router.get("/calculations")
async def list_calculations(
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> dict[str, object]:
    """Return the caller's saved calculations."""
    container: AppContainer = request.app.state.container
    records = container.calculator_service.history(
        user_id, limit=container.settings.history_limit
    )
    return {"calculations": [serialize_calculation(record) for record in records]}
