from typing import List, Optional
from pydantic import BaseModel, Field

# service 별 응답 구조 정의


# 경로 안내 단계
class PathStepResponse(BaseModel):
    kind: str = Field(..., description="start / waypoint / line-change / arrive")
    line: str = Field(..., description="노선 코드")
    line_name: str = Field(..., description="노선 이름")
    message: str = Field(..., description="안내 문구")
    station_id: Optional[int] = Field(None, description="역 ID (환승 단계는 없음)")
    station_name: Optional[str] = Field(None, description="역 이름")


# 경로 계산 응답
class RouteCalculatedResponse(BaseModel):
    source: str = Field(..., description="출발역 이름")
    destination: str = Field(..., description="도착역 이름")
    route_type: str = Field(..., description="경로 기준")
    distance: float = Field(..., description="거리 (km, 소수점 1자리)")
    time: int = Field(..., description="예상 소요시간 (분)")
    fare: int = Field(..., description="요금")
    path: List[int] = Field(..., description="역 ID 순서")
    station_count: int = Field(..., description="경유 역 수")
    line_changes: int = Field(..., description="환승 횟수")
    steps: List[PathStepResponse] = Field(default_factory=list, description="경로 안내")


class StationResponse(BaseModel):
    id: int
    name: str
    line: str
    line_name: str


class StationListResponse(BaseModel):
    count: int = Field(..., description="역 수")
    stations: List[StationResponse] = Field(default_factory=list)


# 역 검색 응답 (자동완성)
class StationSearchResponse(BaseModel):
    keyword: str = Field(..., description="검색 키워드")
    count: int = Field(..., description="검색 결과 수")
    results: List[StationResponse] = Field(default_factory=list)


class FareResponse(BaseModel):
    distance: float = Field(..., description="거리 (km)")
    fare: int = Field(..., description="요금")


class FareEstimateResponse(BaseModel):
    source: str = Field(..., description="출발역 이름")
    destination: str = Field(..., description="도착역 이름")
    distance: float = Field(..., description="최단 거리 (km)")
    fare: int = Field(..., description="요금")


class FareBand(BaseModel):
    max_distance: Optional[float] = Field(None, description="구간 상한 (km, 마지막 구간은 없음)")
    fare: int


class FareBandsResponse(BaseModel):
    bands: List[FareBand] = Field(..., description="요금 구간표")


# 에러 응답 => {"detail": {"message": ..., "code": ...}}
class ErrorDetail(BaseModel):
    message: str = Field(..., description="에러 메시지")
    code: str = Field(..., description="에러 코드")


class ErrorResponse(BaseModel):
    detail: ErrorDetail
