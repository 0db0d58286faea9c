import logging
from typing import List, Sequence

from app.core.exceptions import StationNotFoundException
from app.models.domain import MetroDataset, NarrationStep, Station

logger = logging.getLogger(__name__)


class NarrationService:
    """경로 안내 문구 생성 (출발 / 경유 / 환승 / 도착)"""

    def __init__(self, dataset: MetroDataset):
        self.dataset = dataset

    def narrate(self, path: Sequence[int]) -> List[NarrationStep]:
        """
        경로 -> 안내 단계 리스트

        - 첫 역: start, 마지막 역: arrive, 나머지: waypoint
        - 이전 역과 노선이 다르면 해당 단계 바로 앞에 line-change 추가
          (첫 역은 비교 대상이 없으므로 환승 없음)

        Args:
            path: 역 ID 순서

        Returns:
            NarrationStep 리스트

        Raises:
            StationNotFoundException: 경로에 데이터에 없는 역이 포함된 경우
        """
        steps: List[NarrationStep] = []
        last_index = len(path) - 1
        previous: Station = None

        for index, station_id in enumerate(path):
            station = self._get_station(station_id)

            if previous is not None and previous.line != station.line:
                steps.append(
                    NarrationStep(
                        kind="line-change",
                        line=station.line,
                        message=f"Change to {station.line.display_name} Line",
                    )
                )

            if index == 0:
                kind, message = "start", f"Start at {station.name}"
            elif index == last_index:
                kind, message = "arrive", f"Arrive at {station.name}"
            else:
                kind, message = "waypoint", station.name

            steps.append(
                NarrationStep(
                    kind=kind,
                    line=station.line,
                    message=message,
                    station_id=station.id,
                    station_name=station.name,
                )
            )
            previous = station

        logger.debug(f"경로 안내 생성: 역 {len(path)}개, 단계 {len(steps)}개")
        return steps

    def count_line_changes(self, path: Sequence[int]) -> int:
        """연속한 두 역의 노선이 다른 횟수"""
        lines = [self._get_station(station_id).line for station_id in path]
        return sum(1 for prev, cur in zip(lines, lines[1:]) if prev != cur)

    def _get_station(self, station_id: int) -> Station:
        station = self.dataset.get_station(station_id)
        if station is None:
            raise StationNotFoundException(f"역을 찾을 수 없습니다: {station_id}")
        return station
