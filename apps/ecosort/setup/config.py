"""Ecosort Service Configuration.

외부화 원칙:
- 버킷/모델/프롬프트 변형 → env
- 자격 증명 → SecretStr (로깅 마스킹), 디스크에 쓰지 않음
"""

from __future__ import annotations

import base64
import binascii
import json
from functools import lru_cache
from typing import Any, Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ecosort.domain.enums import PromptVariant
from ecosort.setup.constants import SERVICE_NAME, SERVICE_VERSION

DEFAULT_CORS_ORIGINS = "http://localhost:5173"
DEFAULT_BUCKET_NAME = "waste-management-photos"


class Settings(BaseSettings):
    """Ecosort Service 설정."""

    # === Service Identity ===
    service_name: str = Field(SERVICE_NAME, description="Service name")
    service_version: str = Field(SERVICE_VERSION, description="Service version")
    environment: str = Field("dev", description="Environment (dev, staging, prod)")

    # === Logging ===
    log_level: str = Field("INFO", description="Root log level")
    log_format: Literal["json", "text"] = Field("json", description="ECS JSON or plain text")

    # === Blob Store ===
    storage_backend: Literal["gcs", "s3"] = Field("gcs", description="Blob store backend")
    bucket_name: str = Field(DEFAULT_BUCKET_NAME, description="Object store bucket")
    gcloud_key_base64: SecretStr | None = Field(
        None,
        validation_alias=AliasChoices("GCLOUD_KEY_BASE64", "ECOSORT_GCLOUD_KEY_BASE64"),
        description="Base64 encoded GCS service account JSON (None이면 ADC)",
    )
    aws_region: str = Field(
        "us-east-1",
        validation_alias=AliasChoices("ECOSORT_AWS_REGION", "AWS_REGION"),
    )
    public_base_url: str | None = Field(
        None,
        description="Public URL prefix for stored objects (S3 전용, CDN 등)",
    )
    storage_timeout_seconds: float = Field(15.0, gt=0, le=300)
    max_upload_bytes: int = Field(10 * 1024 * 1024, ge=1)

    # === Inference ===
    hf_token: SecretStr | None = Field(
        None,
        validation_alias=AliasChoices("HF_TOKEN", "ECOSORT_HF_TOKEN"),
        description="Inference provider access token",
    )
    inference_base_url: str = Field("https://router.huggingface.co/v1")
    inference_provider: str = Field("nebius", description="Relay provider name")
    inference_model: str = Field("google/gemma-3-27b-it", description="Multimodal model id")
    inference_timeout_seconds: float = Field(60.0, gt=0, le=600)
    upload_max_output_tokens: int = Field(500, ge=100, le=500)
    type_max_output_tokens: int = Field(100, ge=100, le=500)

    # === Prompt / Extraction 정책 ===
    prompt_variant: PromptVariant = Field(
        PromptVariant.THREE_CLASS,
        description="three_class (기본) | four_class",
    )
    schema_validation: bool = Field(True, description="Validate extracted JSON shape")
    type_label_validation: bool = Field(False, description="Validate /type label set")

    # === Cleanup 정책 ===
    strict_cleanup: bool = Field(
        False,
        description="삭제 실패 시 분류 결과를 버리고 500 반환",
    )
    cleanup_on_failure: bool = Field(
        False,
        description="classify/extract 실패 시 저장 객체 삭제 시도",
    )

    # === CORS (env 외부화) ===
    cors_origins_str: str = Field(
        DEFAULT_CORS_ORIGINS,
        description="Allowed CORS origins (콤마 구분, exact match)",
    )

    @property
    def cors_origins(self) -> list[str]:
        """CORS origins 파싱."""
        return [o.strip() for o in self.cors_origins_str.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_prefix="ECOSORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================
    # Public Methods
    # ==========================================

    def gcs_credentials_info(self) -> dict[str, Any] | None:
        """GCS 서비스 계정 JSON 디코딩 (메모리에서만).

        Raises:
            ValueError: base64 또는 JSON 형식 오류
        """
        if self.gcloud_key_base64 is None:
            return None
        raw = self.gcloud_key_base64.get_secret_value()
        try:
            decoded = base64.b64decode(raw, validate=True).decode("utf-8")
            return json.loads(decoded)
        except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ValueError("GCLOUD_KEY_BASE64 is not a valid base64 encoded JSON key") from exc


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
