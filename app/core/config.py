import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기

# 기본 노선 데이터 => 패키지에 포함된 샘플 네트워크
DEFAULT_METRO_DATA_PATH = str(
    Path(__file__).resolve().parent.parent / "data" / "metro_data.json"
)


class Settings:
    PROJECT_NAME: str = "Metro Route Planner"
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    PORT: int = int(os.getenv("PORT", 8000))
    API_V1_STR: str = "/api/v1"

    # 역/구간 데이터 파일 경로
    METRO_DATA_PATH: str = os.getenv("METRO_DATA_PATH", DEFAULT_METRO_DATA_PATH)

    # 경로 계산 메트릭 로깅 플래그
    ENABLE_ROUTE_METRICS: bool = (
        os.getenv("ENABLE_ROUTE_METRICS", "true").lower() == "true"
    )

    # CORS 설정
    ALLOWED_ORIGINS: list[str] = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    ).split(",")


settings = Settings()  # 모듈화


# 경로 탐색 기준 (간선 가중치)
ROUTE_TYPES = ("distance", "time")

# 선택하지 않은 지표는 경로의 역 개수로 추정함
MINUTES_PER_STATION = 2  # 역 1개당 2분
KM_PER_STATION = 1.5  # 역 1개당 1.5km

# 거리 구간별 요금 (상한 포함, km -> 요금)
FARE_BANDS = [
    (2, 10),
    (4, 15),
    (6, 25),
    (8, 30),
    (10, 35),
    (14, 40),
    (18, 45),
    (22, 50),
    (26, 55),
    (30, 60),
    (34, 65),
]
MAX_FARE = 70  # 34km 초과

LINE_NAMES = {
    "R": "Red",
    "B": "Blue",
    "G": "Green",
    "I": "Interchange",
}
