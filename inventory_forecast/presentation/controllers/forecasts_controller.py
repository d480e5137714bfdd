"""
Presentation Layer - Forecasts Controller

Exposes endpoints to generate a demand forecast for a product and to read
back the latest stored one.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from inventory_forecast.application.dtos.forecast_dto import (
    ForecastCreatedResponseDTO,
    ForecastRecordDTO,
    ForecastRequestDTO,
    LatestForecastResponseDTO,
)
from inventory_forecast.application.use_cases.forecast_use_cases import (
    CreateForecastUseCase,
    ForecastDependencyError,
    GetLatestForecastUseCase,
)
from inventory_forecast.domain.entities.errors import (
    ComputationError,
    ForecastNotFoundError,
    InsufficientDataError,
    InvalidInputError,
)
from inventory_forecast.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/forecasts", tags=["Forecasts"])


@router.post(
    "",
    response_model=ForecastCreatedResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Generate a demand forecast for a product",
    description="""
    Build a forecast from the product's last 60 days of sales. At least 7 days
    of history are required. The stored record replaces any forecast made for
    the same product on the same day.
    """,
)
@inject
async def create_forecast(
    payload: ForecastRequestDTO,
    create_forecast_use_case: CreateForecastUseCase = Depends(
        Provide[AppContainer.create_forecast_use_case]
    ),
) -> ForecastCreatedResponseDTO:
    try:
        record = await create_forecast_use_case.execute(
            payload.product_id, payload.to_config()
        )
    except (InvalidInputError, InsufficientDataError) as exc:
        raise HTTPException(status_code=400, detail=exc.message)
    except ForecastDependencyError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    except ComputationError as exc:
        logger.error(
            "forecast.computation_error",
            product_id=payload.product_id,
            error=exc.message,
            details=exc.details,
        )
        raise HTTPException(status_code=500, detail=exc.message)
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.error(
            "forecast.unexpected_error",
            product_id=payload.product_id,
            error=str(exc),
            exc_info=exc,
        )
        raise HTTPException(status_code=500, detail="Internal server error")

    return ForecastCreatedResponseDTO(forecast=ForecastRecordDTO.from_entity(record))


@router.get(
    "/{product_id}",
    response_model=LatestForecastResponseDTO,
    summary="Get the latest forecast for a product",
)
@inject
async def get_latest_forecast(
    product_id: str,
    get_latest_forecast_use_case: GetLatestForecastUseCase = Depends(
        Provide[AppContainer.get_latest_forecast_use_case]
    ),
) -> LatestForecastResponseDTO:
    try:
        return await get_latest_forecast_use_case.execute(product_id)
    except ForecastNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.message)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=exc.message)
    except ForecastDependencyError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    except ComputationError as exc:
        logger.error(
            "forecast.latest_computation_error",
            product_id=product_id,
            error=exc.message,
            details=exc.details,
        )
        raise HTTPException(status_code=500, detail=exc.message)
