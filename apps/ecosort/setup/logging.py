"""
Structured Logging Configuration (ECS-based)

stdout JSON 로그 → 수집기 (Fluent Bit 등)

PipelineRun 컨텍스트(run_id, pipeline, stage)는 event.* 필드로 승격되어
요청 1건의 단계 로그를 event.id 하나로 묶어 조회할 수 있다.
나머지 extra 필드는 labels에 담긴다.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from ecosort.setup.constants import (
    ECS_VERSION,
    LOG_RECORD_BUILTINS,
    PIPELINE_EVENT_FIELDS,
    QUIET_LOGGERS,
    REDACT_KEEP_CHARS,
    REDACTED,
    SENSITIVE_KEY_FRAGMENTS,
    SERVICE_NAME,
    SERVICE_VERSION,
)

if TYPE_CHECKING:
    from ecosort.setup.config import Settings

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _redact(value: Any) -> str:
    text = "" if value is None else str(value)
    # 짧은 값은 앞뒤 일부만 남겨도 원문 추정이 가능
    if len(text) <= REDACT_KEEP_CHARS * 2 + 2:
        return REDACTED
    return f"{text[:REDACT_KEEP_CHARS]}...{text[-REDACT_KEEP_CHARS:]}"


def mask_sensitive_data(data: Any) -> Any:
    """자격 증명 류 키의 값을 재귀적으로 마스킹."""
    if isinstance(data, dict):
        return {
            key: _redact(value)
            if any(fragment in str(key).lower() for fragment in SENSITIVE_KEY_FRAGMENTS)
            else mask_sensitive_data(value)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [mask_sensitive_data(item) for item in data]
    return data


class ECSJsonFormatter(logging.Formatter):
    """Elastic Common Schema (ECS) 기반 JSON 포매터"""

    def __init__(
        self,
        service_name: str = SERVICE_NAME,
        service_version: str = SERVICE_VERSION,
        environment: str = "dev",
    ):
        super().__init__()
        self._service = {
            "service.name": service_name,
            "service.version": service_version,
            "service.environment": environment,
        }

    def format(self, record: logging.LogRecord) -> str:
        document: dict[str, Any] = {
            "@timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "message": record.getMessage(),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "ecs.version": ECS_VERSION,
            **self._service,
        }

        extras = {k: v for k, v in vars(record).items() if k not in LOG_RECORD_BUILTINS}
        document.update(self._event_fields(extras))

        if record.exc_info and record.exc_info[0] is not None:
            document["error.type"] = record.exc_info[0].__name__
            document["error.message"] = str(record.exc_info[1])
            document["error.stack_trace"] = self.formatException(record.exc_info)

        if extras:
            document["labels"] = mask_sensitive_data(extras)

        return json.dumps(document, ensure_ascii=False, default=str)

    @staticmethod
    def _event_fields(extras: dict[str, Any]) -> dict[str, Any]:
        """파이프라인 컨텍스트를 extras에서 꺼내 event.* 필드로 변환."""
        fields: dict[str, Any] = {}
        for key, ecs_field in PIPELINE_EVENT_FIELDS.items():
            if key in extras:
                fields[ecs_field] = extras.pop(key)
        if "event.dataset" in fields:
            fields["event.dataset"] = f"ecosort.{fields['event.dataset']}"
        if "failed_stage" in extras:
            fields["event.outcome"] = "failure"
        elif fields.get("event.action") == "done":
            fields["event.outcome"] = "success"
        return fields


def configure_logging(settings: Settings | None = None) -> None:
    """루트 로거에 stdout 핸들러 1개 설정.

    Args:
        settings: 로깅 설정 출처 (None이면 get_settings())
    """
    if settings is None:
        from ecosort.setup.config import get_settings

        settings = get_settings()

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "json":
        handler.setFormatter(
            ECSJsonFormatter(
                service_name=settings.service_name,
                service_version=settings.service_version,
                environment=settings.environment,
            )
        )
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
