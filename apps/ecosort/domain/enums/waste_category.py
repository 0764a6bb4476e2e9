"""Waste Category Enum."""

from enum import Enum

# 분류 불가 sentinel (라벨 + 모든 solution 필드에 사용)
NOT_APPLICABLE = "NA"


class ThreeClassCategory(str, Enum):
    """3분류 체계 (기본 프롬프트)."""

    BIODEGRADABLE = "Biodegradable"
    NON_BIODEGRADABLE = "Non-Biodegradable"
    RECYCLABLE = "Recyclable"


class FourClassCategory(str, Enum):
    """4분류 체계 (+ NA)."""

    DRY_WASTE = "Dry Waste"
    WET_WASTE = "Wet Waste"
    ELECTRONICS_WASTE = "Electronics Waste"
    MEDICAL_WASTE = "Medical Waste"


class PromptVariant(str, Enum):
    """프롬프트/카테고리 변형.

    THREE_CLASS가 기본값, FOUR_CLASS는 설정으로 선택.
    """

    THREE_CLASS = "three_class"
    FOUR_CLASS = "four_class"

    @property
    def categories(self) -> tuple[str, ...]:
        enum_cls = ThreeClassCategory if self is PromptVariant.THREE_CLASS else FourClassCategory
        return tuple(member.value for member in enum_cls)

    @property
    def allowed_labels(self) -> frozenset[str]:
        """허용 라벨 (카테고리 + NA sentinel)."""
        return frozenset(self.categories) | {NOT_APPLICABLE}

    def is_valid_label(self, label: str) -> bool:
        return label in self.allowed_labels
