from typing import Optional
from pydantic import BaseModel, Field

# service별 requests 구조 정의


# 경로 계산 요청
# route_type 검증은 서비스에서 => 잘못된 값도 400 INVALID_SELECTION으로 응답
class RouteRequest(BaseModel):
    source_id: Optional[int] = Field(None, description="출발역 ID")
    destination_id: Optional[int] = Field(None, description="도착역 ID")
    route_type: str = Field(default="distance", description="경로 기준 (distance/time)")


# 거리 기반 요금 계산 요청
class FareRequest(BaseModel):
    distance: float = Field(..., allow_inf_nan=False, description="이동 거리 (km)")
