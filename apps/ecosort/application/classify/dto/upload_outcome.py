"""UploadOutcome - /upload 결과."""

from __future__ import annotations

from dataclasses import dataclass, field

from ecosort.domain.value_objects import ClassificationResult


@dataclass(frozen=True)
class UploadOutcome:
    """분류 결과 + non-fatal 경고.

    warnings가 비어 있지 않아도 result는 유효하다 (예: cleanup 실패).
    """

    result: ClassificationResult
    warnings: tuple[str, ...] = field(default_factory=tuple)
