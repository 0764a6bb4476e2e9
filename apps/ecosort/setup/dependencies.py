"""Ecosort Dependencies - FastAPI Dependency Injection."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ecosort.application.classify.commands import ClassifyTypeCommand, ClassifyUploadCommand
from ecosort.application.classify.ports import (
    BlobStorePort,
    PromptRepositoryPort,
    ReplyExtractorPort,
    VisionModelPort,
)
from ecosort.infrastructure.asset_loader import FilePromptRepository
from ecosort.infrastructure.llm import HFRouterVisionAdapter
from ecosort.infrastructure.parsing import FencedJsonReplyExtractor
from ecosort.infrastructure.storage import GcsBlobStore, S3BlobStore
from ecosort.setup.config import Settings, get_settings

# ─────────────────────────────────────────────────────────────────────────────
# Infrastructure Dependencies
# ─────────────────────────────────────────────────────────────────────────────


@lru_cache
def get_blob_store() -> BlobStorePort:
    """Blob Store 인스턴스 반환 (storage_backend 기준)."""
    settings = get_settings()
    if settings.storage_backend == "s3":
        return S3BlobStore(
            settings.bucket_name,
            region=settings.aws_region,
            public_base_url=settings.public_base_url,
        )
    return GcsBlobStore(
        settings.bucket_name,
        credentials_info=settings.gcs_credentials_info(),
    )


@lru_cache
def get_vision_model() -> VisionModelPort:
    """Vision 모델 인스턴스 반환."""
    settings = get_settings()
    if settings.hf_token is None:
        raise RuntimeError("HF_TOKEN 환경 변수가 설정되지 않았습니다.")
    return HFRouterVisionAdapter(
        settings.hf_token.get_secret_value(),
        model=settings.inference_model,
        provider=settings.inference_provider,
        base_url=settings.inference_base_url,
    )


@lru_cache
def get_reply_extractor() -> ReplyExtractorPort:
    """Reply Extractor 인스턴스 반환."""
    settings = get_settings()
    return FencedJsonReplyExtractor(
        settings.prompt_variant,
        schema_validation=settings.schema_validation,
        type_label_validation=settings.type_label_validation,
    )


@lru_cache
def get_prompt_repository() -> PromptRepositoryPort:
    """Prompt Repository 인스턴스 반환."""
    return FilePromptRepository()


# ─────────────────────────────────────────────────────────────────────────────
# Application Dependencies (Commands)
# ─────────────────────────────────────────────────────────────────────────────


def get_classify_upload_command(
    settings: Annotated[Settings, Depends(get_settings)],
    blob_store: Annotated[BlobStorePort, Depends(get_blob_store)],
    vision_model: Annotated[VisionModelPort, Depends(get_vision_model)],
    reply_extractor: Annotated[ReplyExtractorPort, Depends(get_reply_extractor)],
    prompt_repository: Annotated[PromptRepositoryPort, Depends(get_prompt_repository)],
) -> ClassifyUploadCommand:
    """Classify Upload Command 인스턴스 반환."""
    return ClassifyUploadCommand(
        blob_store=blob_store,
        vision_model=vision_model,
        reply_extractor=reply_extractor,
        prompt_repository=prompt_repository,
        prompt_variant=settings.prompt_variant,
        max_output_tokens=settings.upload_max_output_tokens,
        storage_timeout=settings.storage_timeout_seconds,
        inference_timeout=settings.inference_timeout_seconds,
        strict_cleanup=settings.strict_cleanup,
        cleanup_on_failure=settings.cleanup_on_failure,
    )


def get_classify_type_command(
    settings: Annotated[Settings, Depends(get_settings)],
    vision_model: Annotated[VisionModelPort, Depends(get_vision_model)],
    reply_extractor: Annotated[ReplyExtractorPort, Depends(get_reply_extractor)],
    prompt_repository: Annotated[PromptRepositoryPort, Depends(get_prompt_repository)],
) -> ClassifyTypeCommand:
    """Classify Type Command 인스턴스 반환."""
    return ClassifyTypeCommand(
        vision_model=vision_model,
        reply_extractor=reply_extractor,
        prompt_repository=prompt_repository,
        prompt_variant=settings.prompt_variant,
        max_output_tokens=settings.type_max_output_tokens,
        inference_timeout=settings.inference_timeout_seconds,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Type Aliases for Dependency Injection
# ─────────────────────────────────────────────────────────────────────────────


SettingsDep = Annotated[Settings, Depends(get_settings)]
ClassifyUploadCommandDep = Annotated[ClassifyUploadCommand, Depends(get_classify_upload_command)]
ClassifyTypeCommandDep = Annotated[ClassifyTypeCommand, Depends(get_classify_type_command)]
