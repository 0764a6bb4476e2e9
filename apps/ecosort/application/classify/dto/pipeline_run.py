"""PipelineRun - 요청당 1개의 상태 머신 기록."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from ecosort.domain.enums import PipelineStage

_Transitions = dict[PipelineStage, tuple[PipelineStage, ...]]

# 파이프라인별 허용 전이 (failed는 별도 처리)
# extracted → done: 삭제 실패를 경고로 넘긴 경우
UPLOAD_TRANSITIONS: _Transitions = {
    PipelineStage.RECEIVED: (PipelineStage.STORED,),
    PipelineStage.STORED: (PipelineStage.CLASSIFIED,),
    PipelineStage.CLASSIFIED: (PipelineStage.EXTRACTED,),
    PipelineStage.EXTRACTED: (PipelineStage.CLEANED, PipelineStage.DONE),
    PipelineStage.CLEANED: (PipelineStage.DONE,),
}

TYPE_TRANSITIONS: _Transitions = {
    PipelineStage.RECEIVED: (PipelineStage.CLASSIFIED,),
    PipelineStage.CLASSIFIED: (PipelineStage.EXTRACTED,),
    PipelineStage.EXTRACTED: (PipelineStage.DONE,),
}

_TRANSITIONS: dict[str, _Transitions] = {
    "upload": UPLOAD_TRANSITIONS,
    "type": TYPE_TRANSITIONS,
}


@dataclass
class PipelineRun:
    """파이프라인 1회 실행 상태.

    업로드 경로: received → stored → classified → extracted → cleaned → done
    타입 경로: received → classified → extracted → done
    """

    pipeline: str
    run_id: str = field(default_factory=lambda: uuid4().hex)
    stage: PipelineStage = PipelineStage.RECEIVED

    # === 실패 정보 ===
    failed_stage: PipelineStage | None = None
    cause: BaseException | None = None

    # === 메타데이터 ===
    latencies: dict[str, float] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.pipeline not in _TRANSITIONS:
            raise ValueError(f"Unknown pipeline: {self.pipeline}")

    def advance(self, to: PipelineStage, elapsed_ms: float | None = None) -> None:
        """다음 상태로 전이.

        Raises:
            RuntimeError: 허용되지 않은 전이
        """
        if to not in _TRANSITIONS[self.pipeline].get(self.stage, ()):
            raise RuntimeError(f"Invalid transition: {self.stage.value} -> {to.value}")
        self.stage = to
        if elapsed_ms is not None:
            self.latencies[f"duration_{to.value}_ms"] = elapsed_ms

    def fail(self, stage: PipelineStage, cause: BaseException) -> None:
        """종료 상태 failed(stage, cause)로 전이."""
        if self.stage.is_terminal:
            raise RuntimeError(f"Run already finished in state {self.stage.value}")
        self.failed_stage = stage
        self.cause = cause
        self.stage = PipelineStage.FAILED

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def log_context(self) -> dict[str, Any]:
        """로깅 extra 필드."""
        return {"run_id": self.run_id, "pipeline": self.pipeline, "stage": self.stage.value}
