from fastapi import HTTPException, Request, status

from app.core.exceptions import MetroRouteException
from app.models.domain import MetroDataset
from app.services.pathfinding_service import PathfindingService
from app.services.station_service import StationService

# 도메인 예외 코드 -> HTTP 상태 코드
ERROR_STATUS_CODES = {
    "INVALID_SELECTION": status.HTTP_400_BAD_REQUEST,
    "STATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ROUTE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DATA_INTEGRITY_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


# lifespan에서 app.state에 올려둔 인스턴스를 주입
def get_dataset(request: Request) -> MetroDataset:
    return request.app.state.dataset


def get_pathfinding_service(request: Request) -> PathfindingService:
    return request.app.state.pathfinding_service


def get_station_service(request: Request) -> StationService:
    return request.app.state.station_service


def to_http_exception(exc: MetroRouteException) -> HTTPException:
    return HTTPException(
        status_code=ERROR_STATUS_CODES.get(
            exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        ),
        detail={"message": exc.message, "code": exc.code},
    )
