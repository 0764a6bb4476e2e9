"""Ecosort API Main Application."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecosort.application.classify.commands import ClassifyTypeCommand, ClassifyUploadCommand
from ecosort.metrics import register_metrics
from ecosort.presentation.http.controllers import classify_router, health_router
from ecosort.presentation.http.errors import register_exception_handlers
from ecosort.setup.config import Settings, get_settings
from ecosort.setup.constants import WARNING_HEADER
from ecosort.setup.dependencies import get_prompt_repository
from ecosort.setup.logging import configure_logging

settings = get_settings()

# 구조화된 로깅 설정 (ECS JSON 포맷)
configure_logging(settings)

logger = logging.getLogger(__name__)


def _warm_prompts(settings: Settings) -> None:
    """설정된 변형의 프롬프트를 미리 로딩 (누락 시 기동 실패)."""
    prompts = get_prompt_repository()
    for command_cls in (ClassifyUploadCommand, ClassifyTypeCommand):
        prompts.get_prompt(f"{command_cls.prompt_prefix}_{settings.prompt_variant.value}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    _warm_prompts(settings)
    logger.info(
        "Ecosort API starting",
        extra={
            "version": settings.service_version,
            "storage_backend": settings.storage_backend,
            "bucket": settings.bucket_name,
            "model": f"{settings.inference_model}:{settings.inference_provider}",
            "prompt_variant": settings.prompt_variant.value,
            "strict_cleanup": settings.strict_cleanup,
            "cleanup_on_failure": settings.cleanup_on_failure,
        },
    )
    yield
    logger.info("Ecosort API stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Ecosort API",
        description="Waste image classification: upload, classify, extract",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # 정확히 일치하는 origin만 허용, 경고 헤더는 브라우저에 노출
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[WARNING_HEADER],
    )

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(classify_router)
    register_metrics(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=3000)
