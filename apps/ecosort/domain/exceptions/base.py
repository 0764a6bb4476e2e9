"""도메인 예외 베이스 클래스."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ecosort.domain.enums import PipelineStage


class DomainError(Exception):
    """모든 파이프라인 예외의 베이스 클래스.

    Presentation 레이어에서 HTTP 500 응답으로 변환됩니다.

    Attributes:
        message: 호출자에게 노출되는 고정 메시지
        details: 선택적 진단 정보 (응답의 "details")
        stage: 실패한 파이프라인 단계 (Orchestrator가 채움)
    """

    default_message = "Domain error occurred"

    def __init__(self, message: str | None = None, details: Any = None) -> None:
        self.message = message or self.default_message
        self.details = details
        self.stage: PipelineStage | None = None
        super().__init__(self.message)

    def to_payload(self) -> dict[str, Any]:
        """에러 응답 본문."""
        payload: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload
