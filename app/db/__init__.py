"""
노선 데이터 로드
"""

from app.db.dataset_loader import load_dataset, parse_dataset

__all__ = [
    "load_dataset",
    "parse_dataset",
]
