from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple
from dataclasses import dataclass, field

from app.core.config import LINE_NAMES

# domain 정의


class LineCode(str, Enum):
    RED = "R"
    BLUE = "B"
    GREEN = "G"
    INTERCHANGE = "I"

    @property
    def display_name(self) -> str:
        return LINE_NAMES[self.value]

    @classmethod
    def parse(cls, value: str) -> "LineCode":
        """노선 코드("R") 또는 노선 이름("Red") 모두 허용"""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for code in cls:
            if text.upper() == code.value or text.lower() == code.display_name.lower():
                return code
        raise ValueError(f"알 수 없는 노선 코드: {value}")


@dataclass(frozen=True)
class Station:
    id: int
    name: str
    line: LineCode


@dataclass(frozen=True)
class Connection:
    # 무방향 간선 1개 => 그래프에서는 양방향으로 펼침
    from_id: int
    to_id: int
    distance: float
    time: float

    def weight(self, route_type: str) -> float:
        return self.distance if route_type == "distance" else self.time


@dataclass(frozen=True)
class MetroDataset:
    """역/구간 정적 데이터 (세션 동안 불변)"""

    stations: Tuple[Station, ...]
    connections: Tuple[Connection, ...]
    station_index: Mapping[int, Station] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        object.__setattr__(self, "stations", tuple(self.stations))
        object.__setattr__(self, "connections", tuple(self.connections))
        object.__setattr__(
            self,
            "station_index",
            MappingProxyType({s.id: s for s in self.stations}),
        )

    def get_station(self, station_id: int) -> Optional[Station]:
        return self.station_index.get(station_id)

    def has_station(self, station_id: int) -> bool:
        return station_id in self.station_index

    def stations_by_line(self) -> Dict[str, List[int]]:
        lines: Dict[str, List[int]] = {}
        for station in self.stations:
            lines.setdefault(station.line.value, []).append(station.id)
        return lines


@dataclass(frozen=True)
class RouteResult:
    source_name: str
    destination_name: str
    distance: float  # km, 소수점 1자리
    time: int  # 분
    fare: int
    path: Tuple[int, ...]
    route_type: str = "distance"

    @property
    def station_count(self) -> int:
        return len(self.path)


@dataclass(frozen=True)
class NarrationStep:
    kind: str  # start / waypoint / line-change / arrive
    line: LineCode
    message: str
    station_id: Optional[int] = None  # line-change 단계는 역 정보 없음
    station_name: Optional[str] = None
