"""
Core 설정 및 utilities, 커스텀 예외
"""

from app.core.config import settings

from app.core.exceptions import (
    MetroRouteException,
    InvalidSelectionException,
    StationNotFoundException,
    DataIntegrityException,
    RouteNotFoundException,
)

__all__ = [
    "settings",
    "MetroRouteException",
    "InvalidSelectionException",
    "StationNotFoundException",
    "DataIntegrityException",
    "RouteNotFoundException",
]
