"""FilePromptRepository 단위 테스트."""

from pathlib import Path

import pytest

from ecosort.domain.enums import PromptVariant
from ecosort.infrastructure.asset_loader import FilePromptRepository


class TestFilePromptRepository:
    """프롬프트 로딩 테스트."""

    @pytest.mark.parametrize("prefix", ["waste_classification", "waste_type"])
    @pytest.mark.parametrize("variant", list(PromptVariant))
    def test_packaged_prompts_exist(self, prefix, variant):
        """패키지에 포함된 모든 프롬프트 로딩."""
        repository = FilePromptRepository()

        prompt = repository.get_prompt(f"{prefix}_{variant.value}")

        assert prompt
        assert prompt == prompt.strip()

    def test_three_class_prompt_requests_fenced_json(self):
        """기본 프롬프트는 카테고리와 스키마 필드를 명시."""
        prompt = FilePromptRepository().get_prompt("waste_classification_three_class")

        for category in PromptVariant.THREE_CLASS.categories:
            assert category in prompt
        assert "general_solution" in prompt
        assert "additional_resources" in prompt

    def test_four_class_prompt_mentions_na(self):
        prompt = FilePromptRepository().get_prompt("waste_classification_four_class")

        assert "NA" in prompt

    def test_missing_prompt_raises(self, tmp_path: Path):
        (tmp_path / "prompts").mkdir()
        repository = FilePromptRepository(tmp_path)

        with pytest.raises(FileNotFoundError):
            repository.get_prompt("missing")

    def test_prompt_is_cached(self, tmp_path: Path):
        """최초 로딩 후 파일 변경은 반영되지 않음."""
        prompts = tmp_path / "prompts"
        prompts.mkdir()
        (prompts / "custom.txt").write_text("  first\n", encoding="utf-8")
        repository = FilePromptRepository(tmp_path)

        assert repository.get_prompt("custom") == "first"
        (prompts / "custom.txt").write_text("second", encoding="utf-8")
        assert repository.get_prompt("custom") == "first"

    def test_available_lists_packaged_prompts(self):
        assert FilePromptRepository().available() == [
            "waste_classification_four_class",
            "waste_classification_three_class",
            "waste_type_four_class",
            "waste_type_three_class",
        ]
