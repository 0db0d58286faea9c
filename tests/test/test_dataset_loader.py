"""
노선 데이터 로드 테스트
"""

import json

import pytest

from app.core.exceptions import DataIntegrityException
from app.db.dataset_loader import load_dataset, parse_dataset
from app.models.domain import LineCode


class TestParseDataset:
    """parse_dataset 테스트 클래스"""

    def test_parse_success(self, sample_raw_data):
        dataset = parse_dataset(sample_raw_data)

        assert len(dataset.stations) == 3
        assert len(dataset.connections) == 2
        assert dataset.get_station(1).name == "Alpha"
        assert dataset.connections[0].distance == 1.2

    def test_line_code_or_name(self, sample_raw_data):
        """노선은 코드("R")와 이름("Red") 모두 허용, 대소문자 무시"""
        dataset = parse_dataset(sample_raw_data)

        assert dataset.get_station(1).line == LineCode.RED
        assert dataset.get_station(2).line == LineCode.RED
        assert dataset.get_station(3).line == LineCode.BLUE

    def test_duplicate_station_id(self, sample_raw_data):
        sample_raw_data["stations"].append({"id": 1, "name": "Again", "line": "G"})

        with pytest.raises(DataIntegrityException):
            parse_dataset(sample_raw_data)

    @pytest.mark.parametrize(
        "station",
        [
            {"id": 9, "name": "Nowhere", "line": "X"},
            {"id": "9", "name": "Text Id", "line": "R"},
            {"id": True, "name": "Bool Id", "line": "R"},
            {"id": 9, "name": "  ", "line": "R"},
            {"name": "No Id", "line": "R"},
        ],
    )
    def test_invalid_station(self, sample_raw_data, station):
        sample_raw_data["stations"].append(station)

        with pytest.raises(DataIntegrityException) as exc_info:
            parse_dataset(sample_raw_data)

        assert exc_info.value.code == "DATA_INTEGRITY_ERROR"

    def test_invalid_connection(self, sample_raw_data):
        sample_raw_data["connections"].append({"from": 1, "distance": 1.0, "time": 2})

        with pytest.raises(DataIntegrityException):
            parse_dataset(sample_raw_data)

    @pytest.mark.parametrize("raw", [[], {"stations": {}}, {"stations": [], "connections": None}])
    def test_invalid_shape(self, raw):
        with pytest.raises(DataIntegrityException):
            parse_dataset(raw)

    def test_dataset_is_immutable(self, sample_raw_data):
        """역 인덱스는 읽기 전용"""
        dataset = parse_dataset(sample_raw_data)

        with pytest.raises(TypeError):
            dataset.station_index[99] = None


class TestLoadDataset:
    """load_dataset 테스트 클래스"""

    def test_bundled_dataset(self, metro_dataset):
        """패키지에 포함된 샘플 노선"""
        assert len(metro_dataset.stations) == 21
        assert len(metro_dataset.connections) == 21
        assert metro_dataset.get_station(4).line == LineCode.INTERCHANGE
        assert set(metro_dataset.stations_by_line().keys()) == {"R", "B", "G", "I"}

    def test_load_from_file(self, tmp_path, sample_raw_data):
        path = tmp_path / "metro.json"
        path.write_text(json.dumps(sample_raw_data), encoding="utf-8")

        dataset = load_dataset(path)

        assert [s.id for s in dataset.stations] == [1, 2, 3]

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataIntegrityException):
            load_dataset(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DataIntegrityException):
            load_dataset(path)
