"""모델 응답 추출 관련 도메인 예외."""

from __future__ import annotations

from typing import Any

from ecosort.domain.exceptions.base import DomainError


class ExtractionError(DomainError):
    """모델 응답에서 결과를 추출하지 못함."""

    default_message = "Failed to extract result from model response."


class NoJsonBlockError(ExtractionError):
    """```json 펜스 블록이 없음. 원문은 반환하지 않는다."""

    default_message = "Model response is not valid JSON."


class MalformedJsonError(ExtractionError):
    """펜스 블록은 있으나 JSON 파싱 실패."""

    default_message = "Failed to parse JSON from model."

    def __init__(self, diagnostic: dict[str, Any]) -> None:
        super().__init__(details=diagnostic)


class SchemaMismatchError(ExtractionError):
    """파싱은 성공했으나 ClassificationResult 형태가 아님."""

    default_message = "Model response does not match the expected schema."

    def __init__(self, errors: list[Any]) -> None:
        super().__init__(details=errors)


class EmptyReplyError(ExtractionError):
    """공백만 있는 응답."""

    default_message = "Model returned an empty response."
