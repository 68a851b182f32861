"""Waste API - FastAPI application entry point.

- POST /classify: 폐기물 이미지 분류 + 배출 안내
- GET /recycling-centers: 주변 재활용 센터 조회
- GET /health, /ready: 헬스/준비 상태 체크

분류 모델은 lifespan에서 백그라운드로 로드되며, 로드 완료 전
분류 요청은 503으로 응답합니다.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from waste.infrastructure.observability import (
    instrument_fastapi,
    setup_tracing,
    shutdown_tracing,
)
from waste.presentation.http.controllers import centers_router, classify_router, health_router
from waste.presentation.http.errors import register_exception_handlers
from waste.setup.config import get_settings
from waste.setup.dependencies import get_engine
from waste.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging(settings.log_level)
    logger.info(f"Starting {settings.service_name}", extra={"port": settings.port})

    setup_tracing(settings.service_name)

    # 모델 로드는 서버 기동을 막지 않음
    engine = get_engine()
    app.state.engine = engine
    load_task = asyncio.create_task(engine.load())

    yield

    logger.info(f"Shutting down {settings.service_name}")
    # 진행 중인 모델 로드 취소
    load_task.cancel()
    try:
        await load_task
    except asyncio.CancelledError:
        logger.info("Model load cancelled")
    engine.unload()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title="Waste API",
        description="Waste image classification and recycling center lookup",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # CORS 미들웨어 추가
    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    instrument_fastapi(app)
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(classify_router)
    app.include_router(centers_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "waste.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
    )
