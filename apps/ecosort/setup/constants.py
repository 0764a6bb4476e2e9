"""Service Constants."""

import logging

SERVICE_NAME = "ecosort-api"
SERVICE_VERSION = "1.0.0"

# ==========================================
# Logging (ECS)
# ==========================================

ECS_VERSION = "8.11.0"

# PipelineRun.log_context() 키 → ECS event.* 필드
PIPELINE_EVENT_FIELDS = {
    "run_id": "event.id",
    "pipeline": "event.dataset",
    "stage": "event.action",
}

# 부분 일치 (hf_token, gcloud_key_base64 등). object key 로그 필드 "key"는 제외
SENSITIVE_KEY_FRAGMENTS = (
    "token",
    "secret",
    "password",
    "credential",
    "authorization",
    "api_key",
    "key_base64",
)
REDACTED = "***REDACTED***"
REDACT_KEEP_CHARS = 4

# SDK/서버 로거는 WARNING 이상만
QUIET_LOGGERS = (
    "uvicorn.access",
    "httpx",
    "httpcore",
    "openai",
    "google",
    "google.auth",
    "botocore",
    "boto3",
    "urllib3",
    "asyncio",
)

# LogRecord 기본 속성 (extra가 아님)
LOG_RECORD_BUILTINS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "asctime"}

# ==========================================
# HTTP
# ==========================================

WARNING_HEADER = "X-Ecosort-Warning"
