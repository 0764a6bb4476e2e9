"""Fenced JSON Reply Extractor - ReplyExtractorPort 구현체.

LLM 출력 편차를 허용하는 정규식 기반 1차 추출 전략.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from ecosort.application.classify.ports import ReplyExtractorPort
from ecosort.domain.enums import PromptVariant
from ecosort.domain.exceptions import (
    EmptyReplyError,
    MalformedJsonError,
    NoJsonBlockError,
    SchemaMismatchError,
)
from ecosort.domain.value_objects import ClassificationResult
from ecosort.infrastructure.parsing.schema import ClassificationDocument

logger = logging.getLogger(__name__)

# ```json <공백> body <공백> ``` (첫 매치, "json" 태그 대소문자 구분)
FENCED_JSON_PATTERN = re.compile(r"```json\s*([\s\S]*?)\s*```")


class _NonStandardConstant(ValueError):
    """NaN, Infinity, -Infinity (JSON 표준 아님)."""


def _reject_constant(token: str) -> Any:
    raise _NonStandardConstant(token)


class FencedJsonReplyExtractor(ReplyExtractorPort):
    """```json 펜스 블록 기반 추출기.

    schema_validation=False면 파싱 성공만 확인 (minimal variant).
    """

    def __init__(
        self,
        variant: PromptVariant = PromptVariant.THREE_CLASS,
        *,
        schema_validation: bool = True,
        type_label_validation: bool = False,
    ):
        self._variant = variant
        self._schema_validation = schema_validation
        self._type_label_validation = type_label_validation

    def extract_json(self, raw_text: str) -> ClassificationResult:
        match = FENCED_JSON_PATTERN.search(raw_text)
        if match is None:
            logger.info(
                "No fenced JSON block in model reply", extra={"reply_length": len(raw_text)}
            )
            raise NoJsonBlockError()

        body = match.group(1)
        try:
            document = json.loads(body, parse_constant=_reject_constant)
        except json.JSONDecodeError as exc:
            raise MalformedJsonError(
                {"message": exc.msg, "line": exc.lineno, "column": exc.colno}
            ) from exc
        except _NonStandardConstant as exc:
            # 위치 정보 없음 (parse_constant는 토큰만 전달)
            raise MalformedJsonError(
                {"message": f"Invalid JSON token: {exc.args[0]}", "line": None, "column": None}
            ) from exc

        if self._schema_validation:
            self._validate(document)
        return document

    def extract_type_label(self, raw_text: str) -> str:
        label = raw_text.strip()
        if not label:
            raise EmptyReplyError()
        if self._type_label_validation and not self._variant.is_valid_label(label):
            allowed = ", ".join(sorted(self._variant.allowed_labels))
            raise SchemaMismatchError(
                [{"loc": ["type"], "msg": f"label must be one of: {allowed}", "input": label}]
            )
        return label

    def _validate(self, document: Any) -> None:
        try:
            ClassificationDocument.model_validate(document, context={"variant": self._variant})
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False)
            raise SchemaMismatchError(
                [{"loc": list(err["loc"]), "msg": err["msg"]} for err in errors]
            ) from exc
