"""
요금 계산 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, Query
import logging

from app.api.deps import get_pathfinding_service, to_http_exception
from app.core.exceptions import MetroRouteException
from app.models.requests import FareRequest
from app.models.responses import (
    ErrorResponse,
    FareBandsResponse,
    FareEstimateResponse,
    FareResponse,
)
from app.services.pathfinding_service import PathfindingService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/calculate", response_model=FareResponse)
def calculate_fare(
    request: FareRequest,
    service: PathfindingService = Depends(get_pathfinding_service),
):
    """
    거리(km) 기반 요금 계산

    Example:
        POST /api/v1/fares/calculate
        {"distance": 12.5}
    """
    fare = service.calculate_fare(request.distance)
    logger.info(f"요금 계산: {request.distance}km → {fare}")
    return {"distance": request.distance, "fare": fare}


@router.get(
    "/estimate",
    response_model=FareEstimateResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def estimate_fare(
    source_id: int = Query(..., description="출발역 ID"),
    destination_id: int = Query(..., description="도착역 ID"),
    service: PathfindingService = Depends(get_pathfinding_service),
):
    """두 역 사이 최단 거리 경로 기준 예상 요금"""
    try:
        source = service.dataset.get_station(source_id)
        destination = service.dataset.get_station(destination_id)
        distance, fare = service.estimate_fare(source_id, destination_id)

        return {
            "source": source.name,
            "destination": destination.name,
            "distance": distance,
            "fare": fare,
        }

    except MetroRouteException as e:
        logger.error(f"요금 예상 실패: {e.message}")
        raise to_http_exception(e)


@router.get("/bands", response_model=FareBandsResponse)
def get_fare_bands(service: PathfindingService = Depends(get_pathfinding_service)):
    """거리 구간별 요금표"""
    return {"bands": service.fare_calculator.bands()}
