"""
경로 요약 (거리/시간/요금) 테스트
"""

import pytest

from app.core.exceptions import InvalidSelectionException
from app.models.domain import LineCode, Station
from app.services.route_summarizer import RouteSummarizer, round_distance, round_minutes


class TestRouteSummarizer:
    """RouteSummarizer 테스트 클래스"""

    @pytest.fixture
    def summarizer(self):
        return RouteSummarizer()

    @pytest.fixture
    def endpoints(self):
        return Station(1, "Alpha", LineCode.RED), Station(5, "Echo", LineCode.BLUE)

    def test_distance_route_estimates_time(self, summarizer, endpoints):
        """distance 기준: 시간 = 역 수 * 2분"""
        source, destination = endpoints

        result = summarizer.summarize([1, 2, 3, 4, 5], 5.5, source, destination, "distance")

        assert result.distance == 5.5
        assert result.time == 10
        assert result.fare == 25
        assert result.path == (1, 2, 3, 4, 5)
        assert result.station_count == 5
        assert result.route_type == "distance"
        assert result.source_name == "Alpha"
        assert result.destination_name == "Echo"

    def test_time_route_estimates_distance(self, summarizer, endpoints):
        """time 기준: 거리 = 역 수 * 1.5km, 요금도 추정 거리로 계산"""
        source, destination = endpoints

        result = summarizer.summarize([1, 2, 3, 4, 5], 9, source, destination, "time")

        assert result.time == 9
        assert result.distance == 7.5
        assert result.fare == 30

    def test_fare_uses_unrounded_distance(self, summarizer, endpoints):
        """2.04km => 표시 거리는 2.0이지만 요금은 2km 초과 구간"""
        source, destination = endpoints

        result = summarizer.summarize([1, 2], 2.04, source, destination, "distance")

        assert result.distance == 2.0
        assert result.fare == 15

    def test_unknown_route_type(self, summarizer, endpoints):
        source, destination = endpoints

        with pytest.raises(InvalidSelectionException):
            summarizer.summarize([1, 5], 1.0, source, destination, "fare")

    def test_custom_fare_calculator(self, mocker, endpoints):
        """요금 계산기 주입"""
        source, destination = endpoints
        calculator = mocker.MagicMock()
        calculator.calculate.return_value = 999

        result = RouteSummarizer(calculator).summarize(
            [1, 2, 3], 3.33, source, destination, "distance"
        )

        calculator.calculate.assert_called_once_with(3.33)
        assert result.fare == 999


class TestRounding:
    """반올림 규칙 테스트"""

    @pytest.mark.parametrize(
        "value, expected",
        [(2.25, 2.3), (0.05, 0.1), (4.800000000000001, 4.8), (11.7, 11.7), (3, 3.0)],
    )
    def test_round_distance_half_up(self, value, expected):
        assert round_distance(value) == expected

    @pytest.mark.parametrize("value, expected", [(2.5, 3), (3.5, 4), (2.49, 2), (10, 10)])
    def test_round_minutes_half_up(self, value, expected):
        assert round_minutes(value) == expected
