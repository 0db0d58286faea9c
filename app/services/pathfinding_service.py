# 경로 찾기 서비스

import logging
import time
import json
from typing import Dict, List, Optional, Tuple

from app.algorithms.dijkstra import DijkstraEngine
from app.algorithms.fare_calculator import FareCalculator
from app.algorithms.graph_builder import Graph, build_graph
from app.core.config import ROUTE_TYPES, settings
from app.core.exceptions import (
    InvalidSelectionException,
    MetroRouteException,
    StationNotFoundException,
)
from app.models.domain import MetroDataset, NarrationStep, RouteResult, Station
from app.services.narration_service import NarrationService
from app.services.route_summarizer import RouteSummarizer

logger = logging.getLogger(__name__)


class PathfindingService:

    def __init__(
        self,
        dataset: MetroDataset,
        fare_calculator: Optional[FareCalculator] = None,
    ):
        self.dataset = dataset
        self.engine = DijkstraEngine()
        self.fare_calculator = fare_calculator or FareCalculator()
        self.summarizer = RouteSummarizer(self.fare_calculator)
        self.narrator = NarrationService(dataset)

        # 기준별 그래프는 한 번만 생성 => 데이터 오류는 여기서 바로 드러남
        self.graphs: Dict[str, Graph] = {
            route_type: build_graph(dataset, route_type) for route_type in ROUTE_TYPES
        }
        logger.info(
            f"PathfindingService 초기화 완료: 역 {len(dataset.stations)}개, "
            f"구간 {len(dataset.connections)}개"
        )

    def calculate_route(
        self,
        source_id: Optional[int],
        destination_id: Optional[int],
        route_type: str = "distance",
    ) -> RouteResult:
        """
        최단 경로 계산

        Args:
            source_id: 출발역 ID
            destination_id: 도착역 ID
            route_type: 탐색 기준 (distance/time)

        Returns:
            RouteResult (거리, 시간, 요금, 경로)

        Raises:
            InvalidSelectionException: 역 미선택, 출발역 == 도착역, 잘못된 기준
            StationNotFoundException: 데이터에 없는 역
            RouteNotFoundException: 두 역이 연결되어 있지 않음
        """
        start_time = time.time()

        try:
            if source_id is None or destination_id is None:
                raise InvalidSelectionException("출발역과 도착역을 모두 선택해주세요")

            if source_id == destination_id:
                raise InvalidSelectionException("출발역과 도착역이 같습니다")

            if route_type not in ROUTE_TYPES:
                raise InvalidSelectionException(
                    f"지원하지 않는 경로 기준입니다: {route_type}"
                )

            source = self._get_station(source_id, "출발역")
            destination = self._get_station(destination_id, "도착역")

            logger.info(
                f"경로 계산 요청: {source.name}({source_id}) → "
                f"{destination.name}({destination_id}), 기준={route_type}"
            )

            path, total_weight = self.engine.shortest_path(
                self.graphs[route_type], source_id, destination_id
            )
            result = self.summarizer.summarize(
                path, total_weight, source, destination, route_type
            )

            elapsed_time = time.time() - start_time
            logger.info(
                f"경로 계산 완료: {source.name} → {destination.name}, "
                f"역 {result.station_count}개, 응답시간={elapsed_time*1000:.1f}ms"
            )
            self._log_route_metrics(
                route_type=route_type,
                source_id=source_id,
                destination_id=destination_id,
                response_time_ms=elapsed_time * 1000,
                station_count=result.station_count,
            )
            return result

        except MetroRouteException as e:
            logger.error(f"경로 계산 실패: {e.message}")
            raise
        except Exception as e:
            logger.error(f"경로 계산 오류: {e}", exc_info=True)
            raise

    def calculate_fare(self, distance: float) -> int:
        return self.fare_calculator.calculate(distance)

    def estimate_fare(self, source_id: int, destination_id: int) -> Tuple[float, int]:
        """
        두 역 사이 예상 요금 => 최단 거리 경로 기준

        Returns:
            (거리 km, 요금)
        """
        result = self.calculate_route(source_id, destination_id, "distance")
        return result.distance, result.fare

    def narrate_route(self, result: RouteResult) -> List[NarrationStep]:
        return self.narrator.narrate(result.path)

    def count_line_changes(self, result: RouteResult) -> int:
        return self.narrator.count_line_changes(result.path)

    def _get_station(self, station_id: int, label: str) -> Station:
        station = self.dataset.get_station(station_id)
        if station is None:
            raise StationNotFoundException(f"{label}을 찾을 수 없습니다: {station_id}")
        return station

    def _log_route_metrics(
        self,
        route_type: str,
        source_id: int,
        destination_id: int,
        response_time_ms: float,
        station_count: int,
    ) -> None:
        """
        경로 계산 메트릭 로깅 => 로그 수집기에서 JSON 한 줄로 분석
        """
        if not settings.ENABLE_ROUTE_METRICS:
            return

        metrics = {
            "event": "route_calculation",
            "route_type": route_type,
            "source_id": source_id,
            "destination_id": destination_id,
            "response_time_ms": round(response_time_ms, 2),
            "station_count": station_count,
        }

        logger.info(f"METRICS: {json.dumps(metrics, ensure_ascii=False)}")
