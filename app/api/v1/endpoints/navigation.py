"""
REST API 경로 계산 엔드포인트
"""

from fastapi import APIRouter, Depends
import logging

from app.api.deps import get_pathfinding_service, to_http_exception
from app.core.exceptions import MetroRouteException
from app.models.requests import RouteRequest
from app.models.responses import ErrorResponse, RouteCalculatedResponse
from app.services.pathfinding_service import PathfindingService


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/calculate",
    response_model=RouteCalculatedResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def calculate_route(
    request: RouteRequest,
    service: PathfindingService = Depends(get_pathfinding_service),
):
    """
    경로 계산 (REST API)

    - **source_id**: 출발역 ID
    - **destination_id**: 도착역 ID
    - **route_type**: 경로 기준 (distance: 최단 거리 / time: 최소 시간)

    Returns:
        거리, 시간, 요금, 경로 및 단계별 안내

    Example:
        POST /api/v1/navigation/calculate
        {
            "source_id": 1,
            "destination_id": 16,
            "route_type": "time"
        }
    """
    try:
        logger.info(
            f"REST 경로 계산: {request.source_id} → {request.destination_id}, "
            f"기준={request.route_type}"
        )

        result = service.calculate_route(
            source_id=request.source_id,
            destination_id=request.destination_id,
            route_type=request.route_type,
        )
        steps = service.narrate_route(result)

        return {
            "source": result.source_name,
            "destination": result.destination_name,
            "route_type": result.route_type,
            "distance": result.distance,
            "time": result.time,
            "fare": result.fare,
            "path": list(result.path),
            "station_count": result.station_count,
            "line_changes": service.count_line_changes(result),
            "steps": [
                {
                    "kind": step.kind,
                    "line": step.line.value,
                    "line_name": step.line.display_name,
                    "message": step.message,
                    "station_id": step.station_id,
                    "station_name": step.station_name,
                }
                for step in steps
            ],
        }

    except MetroRouteException as e:
        logger.error(f"경로 계산 실패: {e.message}")
        raise to_http_exception(e)
