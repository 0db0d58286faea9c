import logging
from typing import Dict, List

from app.core.exceptions import StationNotFoundException
from app.models.domain import MetroDataset, Station

logger = logging.getLogger(__name__)


class StationService:
    """역 목록 / 검색 / 노선별 조회"""

    def __init__(self, dataset: MetroDataset):
        self.dataset = dataset

    def list_stations(self) -> List[Station]:
        return sorted(self.dataset.stations, key=lambda s: s.id)

    def get_station(self, station_id: int) -> Station:
        station = self.dataset.get_station(station_id)
        if station is None:
            raise StationNotFoundException(f"역을 찾을 수 없습니다: {station_id}")
        return station

    def search(self, keyword: str, limit: int = 10) -> List[Station]:
        """
        역 이름 검색 (자동완성용)

        우선순위: 정확히 일치 > 앞부분 일치 > 포함, 같은 순위는 짧은 이름 우선
        """
        keyword = keyword.strip().lower()
        if not keyword:
            return []

        matches = []
        for station in self.dataset.stations:
            name_lower = station.name.lower()
            if keyword not in name_lower:
                continue
            if name_lower == keyword:
                priority = 1
            elif name_lower.startswith(keyword):
                priority = 2
            else:
                priority = 3
            matches.append((priority, len(station.name), station.name, station))

        matches.sort(key=lambda m: m[:3])
        return [m[3] for m in matches[:limit]]

    def lines(self) -> Dict[str, List[int]]:
        return self.dataset.stations_by_line()
