"""Domain Enums."""

from ecosort.domain.enums.pipeline_stage import PipelineStage
from ecosort.domain.enums.waste_category import (
    NOT_APPLICABLE,
    FourClassCategory,
    PromptVariant,
    ThreeClassCategory,
)

__all__ = [
    "NOT_APPLICABLE",
    "FourClassCategory",
    "PipelineStage",
    "PromptVariant",
    "ThreeClassCategory",
]
