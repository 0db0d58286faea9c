"""
Business logic services
"""

from app.services.pathfinding_service import PathfindingService
from app.services.narration_service import NarrationService
from app.services.route_summarizer import RouteSummarizer
from app.services.station_service import StationService

__all__ = [
    "PathfindingService",
    "NarrationService",
    "RouteSummarizer",
    "StationService",
]
