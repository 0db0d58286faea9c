"""
역 조회 / 검색 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, Query
import logging

from app.api.deps import get_station_service, to_http_exception
from app.core.exceptions import MetroRouteException
from app.models.domain import Station
from app.models.responses import (
    ErrorResponse,
    StationListResponse,
    StationResponse,
    StationSearchResponse,
)
from app.services.station_service import StationService

router = APIRouter()
logger = logging.getLogger(__name__)


def _station_to_dict(station: Station) -> dict:
    return {
        "id": station.id,
        "name": station.name,
        "line": station.line.value,
        "line_name": station.line.display_name,
    }


@router.get("", response_model=StationListResponse)
def list_stations(service: StationService = Depends(get_station_service)):
    """전체 역 목록 (드롭다운 구성용)"""
    stations = [_station_to_dict(s) for s in service.list_stations()]
    return {"count": len(stations), "stations": stations}


@router.get("/search", response_model=StationSearchResponse)
def search_stations(
    q: str = Query(..., description="검색 키워드", min_length=1, max_length=50),
    limit: int = Query(10, ge=1, le=50, description="최대 결과 수"),
    service: StationService = Depends(get_station_service),
):
    """
    역 검색 (자동완성용)

    - **q**: 검색 키워드 (1-50자)
    - **limit**: 최대 결과 수 (1-50, 기본값 10)

    Example:
        GET /api/v1/stations/search?q=term&limit=5
    """
    logger.info(f"역 검색: keyword={q}, limit={limit}")
    results = [_station_to_dict(s) for s in service.search(q, limit)]

    return {"keyword": q, "count": len(results), "results": results}


@router.get("/lines")
def get_all_lines(service: StationService = Depends(get_station_service)):
    """
    노선별 역 ID 목록

    Returns:
        {
            "lines": {"R": [1, 2, ...], "B": [10, 11, ...], ...},
            "total_lines": 4
        }
    """
    lines = service.lines()
    return {"lines": lines, "total_lines": len(lines)}


@router.get(
    "/{station_id}",
    response_model=StationResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_station(
    station_id: int, service: StationService = Depends(get_station_service)
):
    try:
        return _station_to_dict(service.get_station(station_id))
    except MetroRouteException as e:
        logger.error(f"역 조회 실패: {e.message}")
        raise to_http_exception(e)
