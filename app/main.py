"""
Metro Route Planner - FastAPI Application

지하철 노선도 기반 경로 안내 시스템
최단 거리 / 최소 시간 경로, 요금, 환승 안내
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.db.dataset_loader import load_dataset
from app.api.v1.router import api_router
from app.services.pathfinding_service import PathfindingService
from app.services.station_service import StationService

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    서버 시작 시 실행:
    - 노선 데이터 로드 (역, 구간)
    - 경로 탐색 서비스 초기화 (기준별 그래프 생성)

    데이터 오류가 있으면 서버가 뜨지 않음
    """
    # ========== Startup ==========
    logger.info("=" * 60)
    logger.info("Metro Route Planner 시작 중...")
    logger.info("=" * 60)

    try:
        logger.info(f"1/2 노선 데이터 로드 중... ({settings.METRO_DATA_PATH})")
        dataset = load_dataset(settings.METRO_DATA_PATH)

        logger.info("2/2 경로 탐색 서비스 초기화 중...")
        app.state.dataset = dataset
        app.state.pathfinding_service = PathfindingService(dataset)
        app.state.station_service = StationService(dataset)

        logger.info("Metro Route Planner 시작 완료!")

    except Exception as e:
        logger.error(f"❌ 초기화 실패: {e}", exc_info=True)
        raise

    # application 실행 <- yield로 제어 반환
    yield

    # ========== Shutdown ==========
    logger.info("✓ Metro Route Planner 종료 완료")


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## 지하철 경로 안내 API

    ### 주요 기능
    - 🚇 최단 거리 / 최소 시간 경로 탐색 (Dijkstra)
    - 💳 거리 구간별 요금 계산
    - 🔄 환승 안내
    - 🚉 역 검색
    """,
    lifespan=lifespan,  # 생명주기 관리자 등록
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS 설정
# allow_credentials=True일 때는 allow_origins에 ["*"]를 사용할 수 없음
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API 라우터 등록
app.include_router(api_router, prefix=settings.API_V1_STR)


# ========== Health Check Endpoints ==========


@app.get("/")
async def root():
    """
    루트 엔드포인트

    서비스 기본 정보 반환
    """
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "features": [
            "최단 거리 경로",
            "최소 시간 경로",
            "요금 계산",
            "환승 안내",
        ],
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """
    헬스 체크 엔드포인트

    노선 데이터가 로드되어 있는지 확인
    """
    dataset = getattr(app.state, "dataset", None)

    if dataset is None:
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "version": settings.VERSION},
        )

    return {
        "status": "healthy",
        "version": settings.VERSION,
        "components": {
            "stations": len(dataset.stations),
            "connections": len(dataset.connections),
        },
    }


# ========== Exception Handlers ==========


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    전역 예외 핸들러

    예상치 못한 오류 처리
    """
    logger.error(f"예상치 못한 오류: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "detail": {
                "message": str(exc) if settings.DEBUG else "서버 내부 오류가 발생했습니다",
                "code": "INTERNAL_ERROR",
            }
        },
    )


# ========== Development Server ==========

if __name__ == "__main__":
    import uvicorn

    logger.info("개발 서버 시작...")

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True,
    )
