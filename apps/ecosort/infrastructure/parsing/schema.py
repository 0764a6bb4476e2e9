"""ClassificationResult 검증용 Pydantic 모델.

검증 전용이며 응답은 원본 dict 그대로 반환한다 (round-trip 보장).
"""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationInfo,
    field_validator,
    model_validator,
)

from ecosort.domain.enums import NOT_APPLICABLE, PromptVariant
from ecosort.domain.value_objects.classification import SOLUTION_FIELDS


class GeneralSolution(BaseModel):
    """처리 가이드 (6개 필드 필수)."""

    disposal: StrictStr
    benefits: StrictStr
    tips: StrictStr
    impact: StrictStr
    alternatives: StrictStr
    additional_resources: StrictStr


class WasteItem(BaseModel):
    """품목별 분류 결과."""

    classification: StrictStr
    general_solution: GeneralSolution

    @field_validator("classification")
    @classmethod
    def _label_in_variant(cls, value: str, info: ValidationInfo) -> str:
        variant = (info.context or {}).get("variant")
        if isinstance(variant, PromptVariant) and not variant.is_valid_label(value):
            allowed = ", ".join(sorted(variant.allowed_labels))
            raise ValueError(f"classification must be one of: {allowed}")
        return value

    @model_validator(mode="after")
    def _na_implies_no_advice(self) -> "WasteItem":
        # NA 라벨이면 모든 solution 필드도 NA
        if self.classification == NOT_APPLICABLE:
            offending = [
                name
                for name in SOLUTION_FIELDS
                if getattr(self.general_solution, name) != NOT_APPLICABLE
            ]
            if offending:
                raise ValueError(
                    "classification is NA but general_solution has advice in: "
                    + ", ".join(offending)
                )
        return self


class ClassificationDocument(BaseModel):
    """최상위 문서: {"prediction": {<item>: WasteItem}}."""

    model_config = ConfigDict(extra="forbid")

    prediction: dict[str, WasteItem] = Field(..., min_length=1)
