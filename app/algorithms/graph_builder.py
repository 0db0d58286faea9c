# 역/구간 데이터 -> 인접 리스트 그래프
import logging
import math
from dataclasses import dataclass
from typing import Dict, List

from app.core.config import ROUTE_TYPES
from app.core.exceptions import DataIntegrityException, InvalidSelectionException
from app.models.domain import MetroDataset

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Edge:
    to_id: int
    weight: float


Graph = Dict[int, List[Edge]]


def build_graph(dataset: MetroDataset, route_type: str) -> Graph:
    """
    선택한 기준(distance/time)의 가중치로 양방향 그래프 생성

    Args:
        dataset: 역/구간 데이터
        route_type: 간선 가중치 기준

    Returns:
        {station_id: [Edge, ...]} => 연결이 없는 역도 빈 리스트로 포함

    Raises:
        InvalidSelectionException: 지원하지 않는 경로 기준
        DataIntegrityException: 존재하지 않는 역을 참조하는 구간, 양수가 아닌 가중치
    """
    if route_type not in ROUTE_TYPES:
        raise InvalidSelectionException(f"지원하지 않는 경로 기준입니다: {route_type}")

    graph: Graph = {station.id: [] for station in dataset.stations}

    for conn in dataset.connections:
        # dangling reference => 건너뛰지 않고 즉시 실패
        for station_id in (conn.from_id, conn.to_id):
            if station_id not in graph:
                raise DataIntegrityException(
                    f"구간 {conn.from_id}-{conn.to_id}이(가) 존재하지 않는 역을 참조합니다: {station_id}"
                )

        weight = conn.weight(route_type)
        if not _is_positive_number(weight):
            raise DataIntegrityException(
                f"구간 {conn.from_id}-{conn.to_id}의 {route_type} 가중치가 올바르지 않습니다: {weight}"
            )

        graph[conn.from_id].append(Edge(conn.to_id, weight))
        graph[conn.to_id].append(Edge(conn.from_id, weight))

    logger.debug(
        f"그래프 생성: 기준={route_type}, 역 {len(graph)}개, 구간 {len(dataset.connections)}개"
    )
    return graph


def _is_positive_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0
