"""
요금 계산 테스트
"""

import math

import pytest

from app.algorithms.fare_calculator import FareCalculator, calculate_fare


class TestFareCalculator:
    """FareCalculator 테스트 클래스"""

    @pytest.mark.parametrize(
        "distance, expected",
        [
            (2, 10),
            (2.1, 15),
            (4, 15),
            (6, 25),
            (8, 30),
            (10, 35),
            (14, 40),
            (18, 45),
            (22, 50),
            (26, 55),
            (30, 60),
            (34, 65),
            (34.01, 70),
            (50, 70),
        ],
    )
    def test_band_boundaries(self, distance, expected):
        """구간 상한 포함"""
        assert calculate_fare(distance) == expected

    def test_monotonic(self):
        """거리가 늘어나면 요금은 줄지 않음"""
        fares = [calculate_fare(d / 10) for d in range(0, 500)]
        assert fares == sorted(fares)

    def test_zero_and_negative(self):
        """0 이하 거리는 첫 구간 요금"""
        assert calculate_fare(0) == 10
        assert calculate_fare(-5) == 10

    def test_infinity(self):
        assert calculate_fare(math.inf) == 70

    def test_nan(self):
        """NaN은 구간을 정할 수 없음"""
        with pytest.raises(ValueError):
            calculate_fare(float("nan"))

    def test_bands_table(self):
        """요금표 마지막 구간은 상한 없음"""
        bands = FareCalculator().bands()

        assert len(bands) == 12
        assert bands[0] == {"max_distance": 2, "fare": 10}
        assert bands[-2] == {"max_distance": 34, "fare": 65}
        assert bands[-1] == {"max_distance": None, "fare": 70}

    def test_custom_bands(self):
        """구간표 주입"""
        calculator = FareCalculator(bands=[(5, 100), (1, 50)], max_fare=200)

        assert calculator.calculate(1) == 50
        assert calculator.calculate(3) == 100
        assert calculator.calculate(6) == 200
