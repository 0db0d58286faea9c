import math
from typing import Dict, List, Optional, Sequence, Tuple

from app.core.config import FARE_BANDS, MAX_FARE


class FareCalculator:
    """거리 구간별 요금 계산 (구간 상한 포함, 보간 없음)"""

    def __init__(
        self,
        bands: Sequence[Tuple[float, int]] = FARE_BANDS,
        max_fare: int = MAX_FARE,
    ):
        self.fare_bands = sorted(bands)
        self.max_fare = max_fare

    def calculate(self, distance: float) -> int:
        """
        거리(km) -> 요금

        0 이하의 거리도 첫 구간 요금을 반환함
        """
        if math.isnan(distance):
            raise ValueError("거리 값이 숫자가 아닙니다")

        for upper, fare in self.fare_bands:
            if distance <= upper:
                return fare
        return self.max_fare

    def bands(self) -> List[Dict[str, Optional[float]]]:
        """요금표 (마지막 구간의 상한은 None)"""
        table = [
            {"max_distance": upper, "fare": fare} for upper, fare in self.fare_bands
        ]
        table.append({"max_distance": None, "fare": self.max_fare})
        return table


_default_calculator = FareCalculator()


def calculate_fare(distance: float) -> int:
    return _default_calculator.calculate(distance)
