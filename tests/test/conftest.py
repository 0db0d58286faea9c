"""
Pytest 설정 및 공통 Fixture
"""

import pytest
import sys
from pathlib import Path


# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from app.core.config import DEFAULT_METRO_DATA_PATH  # noqa: E402
from app.db.dataset_loader import load_dataset  # noqa: E402
from app.models.domain import Connection, LineCode, MetroDataset, Station  # noqa: E402


@pytest.fixture
def small_dataset():
    """
    Red/Blue 5개 역 테스트 네트워크

    1 - 2 - 3 - 4 - 5   (3-4, 2-4 구간에서 Blue로 환승)
         \\_______/
    - 거리 기준 1→4: 1-2-3-4 (4.0km)
    - 시간 기준 1→4: 1-2-4 (4분)
    """
    stations = (
        Station(1, "Alpha", LineCode.RED),
        Station(2, "Bravo", LineCode.RED),
        Station(3, "Charlie", LineCode.RED),
        Station(4, "Delta", LineCode.BLUE),
        Station(5, "Echo", LineCode.BLUE),
    )
    connections = (
        Connection(1, 2, distance=1.0, time=3),
        Connection(2, 3, distance=1.0, time=3),
        Connection(3, 4, distance=2.0, time=2),
        Connection(2, 4, distance=5.0, time=1),
        Connection(4, 5, distance=1.5, time=2),
    )
    return MetroDataset(stations=stations, connections=connections)


@pytest.fixture
def partitioned_dataset():
    """서로 연결되지 않은 두 구역 + 고립된 역 1개"""
    stations = (
        Station(1, "Alpha", LineCode.RED),
        Station(2, "Bravo", LineCode.RED),
        Station(3, "Charlie", LineCode.BLUE),
        Station(4, "Delta", LineCode.BLUE),
        Station(5, "Island", LineCode.GREEN),
    )
    connections = (
        Connection(1, 2, distance=1.0, time=2),
        Connection(3, 4, distance=1.0, time=2),
    )
    return MetroDataset(stations=stations, connections=connections)


@pytest.fixture(scope="session")
def metro_dataset():
    """패키지에 포함된 샘플 노선 데이터"""
    return load_dataset(DEFAULT_METRO_DATA_PATH)


@pytest.fixture
def sample_raw_data():
    """JSON 로드 직후 형태의 노선 데이터"""
    return {
        "stations": [
            {"id": 1, "name": "Alpha", "line": "R"},
            {"id": 2, "name": "Bravo", "line": "Red"},
            {"id": 3, "name": "Charlie", "line": "b"},
        ],
        "connections": [
            {"from": 1, "to": 2, "distance": 1.2, "time": 3},
            {"from": 2, "to": 3, "distance": 0.8, "time": 2},
        ],
    }
