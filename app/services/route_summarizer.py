# 경로 -> RouteResult (거리/시간/요금 요약)

import math
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from app.algorithms.fare_calculator import FareCalculator
from app.core.config import KM_PER_STATION, MINUTES_PER_STATION, ROUTE_TYPES
from app.core.exceptions import InvalidSelectionException
from app.models.domain import RouteResult, Station

logger = logging.getLogger(__name__)


class RouteSummarizer:
    """
    탐색 결과 요약

    선택한 기준만 탐색으로 정확히 계산하고, 나머지 지표는 역 개수 기반 추정치 사용
    - distance 기준: 거리 = 총 가중치, 시간 = 역 수 * 2분
    - time 기준: 시간 = 총 가중치, 거리 = 역 수 * 1.5km
    요금은 항상 위에서 정해진 거리로 계산
    """

    def __init__(self, fare_calculator: FareCalculator = None):
        self.fare_calculator = fare_calculator or FareCalculator()

    def summarize(
        self,
        path: Sequence[int],
        total_weight: float,
        source: Station,
        destination: Station,
        route_type: str,
    ) -> RouteResult:
        if route_type not in ROUTE_TYPES:
            raise InvalidSelectionException(f"지원하지 않는 경로 기준입니다: {route_type}")

        station_count = len(path)
        if route_type == "distance":
            distance = total_weight
            time = station_count * MINUTES_PER_STATION
        else:
            distance = station_count * KM_PER_STATION
            time = total_weight

        # 요금은 반올림 전 거리 기준
        fare = self.fare_calculator.calculate(distance)

        return RouteResult(
            source_name=source.name,
            destination_name=destination.name,
            distance=round_distance(distance),
            time=round_minutes(time),
            fare=fare,
            path=tuple(path),
            route_type=route_type,
        )


def round_distance(distance: float) -> float:
    """소수점 1자리, 0.05는 올림 (round()의 banker's rounding 사용 X)"""
    return float(Decimal(distance).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def round_minutes(minutes: float) -> int:
    # x.5분은 올림
    return int(math.floor(minutes + 0.5))
