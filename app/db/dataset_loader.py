"""
노선 데이터(JSON) 로드

{
    "stations": [{"id": 1, "name": "Airport", "line": "R"}, ...],
    "connections": [{"from": 1, "to": 2, "distance": 1.4, "time": 3}, ...]
}

구간 끝점이 존재하는 역인지는 그래프 생성 시 검사함
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from app.core.exceptions import DataIntegrityException
from app.models.domain import Connection, LineCode, MetroDataset, Station

logger = logging.getLogger(__name__)


def load_dataset(path: Union[str, Path]) -> MetroDataset:
    """JSON 파일 -> MetroDataset"""
    path = Path(path)

    if not path.exists():
        raise DataIntegrityException(f"노선 데이터 파일이 없습니다: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"노선 데이터 JSON 형식 오류 {path}: {e}")
        raise DataIntegrityException(f"노선 데이터 JSON 형식 오류: {e}") from e

    dataset = parse_dataset(raw)
    logger.info(
        f"✓ 노선 데이터 로드 완료: 역 {len(dataset.stations)}개, "
        f"구간 {len(dataset.connections)}개 ({path})"
    )
    return dataset


def parse_dataset(raw: Dict[str, Any]) -> MetroDataset:
    if not isinstance(raw, dict):
        raise DataIntegrityException("노선 데이터는 객체 형식이어야 합니다")

    stations = _parse_stations(raw.get("stations"))
    connections = _parse_connections(raw.get("connections"))
    return MetroDataset(stations=tuple(stations), connections=tuple(connections))


def _parse_stations(items: Any) -> List[Station]:
    if not isinstance(items, list):
        raise DataIntegrityException("stations 항목이 리스트가 아닙니다")

    stations = []
    seen_ids = set()
    for item in items:
        try:
            station_id = _as_id(item["id"])
            name = str(item["name"]).strip()
            line = LineCode.parse(item["line"])
        except (KeyError, TypeError, ValueError) as e:
            raise DataIntegrityException(f"잘못된 역 데이터: {item} ({e})") from e

        if not name:
            raise DataIntegrityException(f"역 이름이 비어 있습니다: {station_id}")
        if station_id in seen_ids:
            raise DataIntegrityException(f"중복된 역 ID: {station_id}")

        seen_ids.add(station_id)
        stations.append(Station(id=station_id, name=name, line=line))

    return stations


def _parse_connections(items: Any) -> List[Connection]:
    if not isinstance(items, list):
        raise DataIntegrityException("connections 항목이 리스트가 아닙니다")

    connections = []
    for item in items:
        try:
            connections.append(
                Connection(
                    from_id=_as_id(item["from"]),
                    to_id=_as_id(item["to"]),
                    distance=item["distance"],
                    time=item["time"],
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            raise DataIntegrityException(f"잘못된 구간 데이터: {item} ({e})") from e

    return connections


def _as_id(value: Any) -> int:
    # bool은 int의 하위 타입이라 따로 거름
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"역 ID는 정수여야 합니다: {value!r}")
    return value
