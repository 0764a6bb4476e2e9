"""Pipeline Stage Enum."""

from enum import Enum


class PipelineStage(str, Enum):
    """파이프라인 상태.

    received → stored → classified → extracted → cleaned → done.
    failed는 done 이전 어느 상태에서든 도달 가능한 종료 상태.
    """

    RECEIVED = "received"
    STORED = "stored"
    CLASSIFIED = "classified"
    EXTRACTED = "extracted"
    CLEANED = "cleaned"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineStage.DONE, PipelineStage.FAILED)
