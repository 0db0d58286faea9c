"""
pydantic models for 요청, 응답, 도메인 객체
"""


from app.models.requests import RouteRequest, FareRequest
from app.models.responses import (
    RouteCalculatedResponse,
    PathStepResponse,
    StationResponse,
    StationListResponse,
    StationSearchResponse,
    FareResponse,
    FareEstimateResponse,
    FareBandsResponse,
    ErrorDetail,
    ErrorResponse,
)
from app.models.domain import (
    LineCode,
    Station,
    Connection,
    MetroDataset,
    RouteResult,
    NarrationStep,
)

__all__ = [
    "RouteRequest",
    "FareRequest",
    "RouteCalculatedResponse",
    "PathStepResponse",
    "StationResponse",
    "StationListResponse",
    "StationSearchResponse",
    "FareResponse",
    "FareEstimateResponse",
    "FareBandsResponse",
    "ErrorDetail",
    "ErrorResponse",
    "LineCode",
    "Station",
    "Connection",
    "MetroDataset",
    "RouteResult",
    "NarrationStep",
]
