"""Classification Value Objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# {"prediction": {"<item>": {"classification": ..., "general_solution": {...}}}}
ClassificationResult = dict[str, Any]

SOLUTION_FIELDS: tuple[str, ...] = (
    "disposal",
    "benefits",
    "tips",
    "impact",
    "alternatives",
    "additional_resources",
)


@dataclass(frozen=True, slots=True)
class ClassificationQuery:
    """분류 요청 (요청당 1회 생성, 불변).

    Attributes:
        instruction_text: 고정 프롬프트 템플릿
        image_url: 공개 이미지 URL (inline bytes 아님)
        max_output_tokens: 응답 길이 상한
    """

    instruction_text: str
    image_url: str
    max_output_tokens: int


@dataclass(frozen=True, slots=True)
class RawModelReply:
    """모델 원문 응답 (신뢰 불가)."""

    text: str
