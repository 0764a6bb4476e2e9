"""FencedJsonReplyExtractor 단위 테스트."""

from __future__ import annotations

import json
from typing import Any

import pytest

from ecosort.domain.enums import PromptVariant
from ecosort.domain.exceptions import (
    EmptyReplyError,
    ExtractionError,
    MalformedJsonError,
    NoJsonBlockError,
    SchemaMismatchError,
)
from ecosort.infrastructure.parsing import FencedJsonReplyExtractor


def _fence(document: Any, prefix: str = "", suffix: str = "") -> str:
    return f"{prefix}```json\n{json.dumps(document)}\n```{suffix}"


def _na_item() -> dict[str, Any]:
    return {
        "classification": "NA",
        "general_solution": {
            "disposal": "NA",
            "benefits": "NA",
            "tips": "NA",
            "impact": "NA",
            "alternatives": "NA",
            "additional_resources": "NA",
        },
    }


@pytest.fixture
def extractor() -> FencedJsonReplyExtractor:
    return FencedJsonReplyExtractor()


class TestExtractJson:
    """extract_json 테스트."""

    def test_plastic_bottle_scenario(self, extractor, fenced_reply, sample_result):
        """펜스 블록 내부 객체 그대로 반환."""
        result = extractor.extract_json(fenced_reply)

        assert result == sample_result
        assert result["prediction"]["Plastic Bottle"]["classification"] == "Recyclable"

    def test_plain_text_reply_raises_no_json_block(self, extractor):
        """펜스 없는 응답 → NoJsonBlockError."""
        with pytest.raises(NoJsonBlockError) as exc_info:
            extractor.extract_json("Plastic Bottle")

        assert exc_info.value.message == "Model response is not valid JSON."
        assert exc_info.value.details is None

    def test_bare_json_without_fence_is_rejected(self, extractor, sample_result):
        """펜스 없이 JSON만 있어도 거부."""
        with pytest.raises(NoJsonBlockError):
            extractor.extract_json(json.dumps(sample_result))

    def test_language_tag_is_case_sensitive(self, extractor, sample_result):
        """```JSON 태그는 매치되지 않음."""
        reply = f"```JSON\n{json.dumps(sample_result)}\n```"

        with pytest.raises(NoJsonBlockError):
            extractor.extract_json(reply)

    def test_malformed_json_is_distinct_from_missing_block(self, extractor):
        """펜스는 있으나 JSON 파싱 실패 → MalformedJsonError."""
        reply = '```json\n{"prediction": {"Can": }\n```'

        with pytest.raises(MalformedJsonError) as exc_info:
            extractor.extract_json(reply)

        error = exc_info.value
        assert not isinstance(error, NoJsonBlockError)
        assert error.message == "Failed to parse JSON from model."
        assert set(error.details) == {"message", "line", "column"}
        assert error.details["line"] == 1

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    @pytest.mark.parametrize("schema_validation", [True, False])
    def test_non_standard_constants_are_malformed(self, sample_result, token, schema_validation):
        """NaN/Infinity 는 JSON 이 아니므로 MalformedJsonError (스키마 검증 여부와 무관)."""
        # Given: 스키마가 보지 않는 품목 필드에 비표준 토큰
        extractor = FencedJsonReplyExtractor(schema_validation=schema_validation)
        body = json.dumps(sample_result).replace(
            '"classification": "Recyclable"',
            f'"classification": "Recyclable", "confidence": {token}',
        )

        # When / Then
        with pytest.raises(MalformedJsonError) as exc_info:
            extractor.extract_json(f"```json\n{body}\n```")

        assert exc_info.value.message == "Failed to parse JSON from model."
        assert token in exc_info.value.details["message"]

    def test_first_fenced_block_wins(self, extractor, sample_result):
        """여러 블록 중 첫 번째만 사용."""
        other = {"prediction": {"Banana Peel": _na_item()}}
        reply = _fence(sample_result, prefix="first:\n") + "\n" + _fence(other)

        assert extractor.extract_json(reply) == sample_result

    def test_surrounding_prose_and_whitespace_ignored(self, extractor, sample_result):
        """블록 앞뒤 텍스트/공백 무시."""
        reply = f"Sure!\n\n```json   \n\n{json.dumps(sample_result, indent=2)}\n\n   ```\nThanks."

        assert extractor.extract_json(reply) == sample_result

    def test_round_trip_reproduces_value(self, extractor):
        """직렬화 → 펜스 → 추출 결과가 원본과 동일."""
        document = {
            "prediction": {
                "Glass Jar": {
                    "classification": "Recyclable",
                    "general_solution": {
                        "disposal": "Glass bin, lid removed",
                        "benefits": "Glass recycles endlessly",
                        "tips": "Rinse \"well\" before disposal",
                        "impact": "Landfill glass persists for ~1,000,000 years",
                        "alternatives": "Reuse for storage",
                        "additional_resources": "https://example.org/glass?lang=en&x=1",
                    },
                },
                "Apple Core": {
                    "classification": "Biodegradable",
                    "general_solution": {
                        "disposal": "Compost",
                        "benefits": "Returns nutrients",
                        "tips": "Mix with dry leaves",
                        "impact": "Methane in landfill",
                        "alternatives": "Eat it all",
                        "additional_resources": "사과 퇴비화 가이드",
                    },
                },
            }
        }

        result = extractor.extract_json(_fence(document))

        assert result == document
        assert list(result["prediction"]) == ["Glass Jar", "Apple Core"]

    def test_unknown_item_keys_are_preserved(self, extractor, sample_result):
        """품목 수준의 추가 필드는 그대로 보존."""
        sample_result["prediction"]["Plastic Bottle"]["confidence"] = "high"

        result = extractor.extract_json(_fence(sample_result))

        assert result["prediction"]["Plastic Bottle"]["confidence"] == "high"


class TestSchemaValidation:
    """ClassificationResult 형태 검증 테스트."""

    def test_missing_prediction_raises(self, extractor):
        """prediction 키 누락."""
        with pytest.raises(SchemaMismatchError) as exc_info:
            extractor.extract_json(_fence({"items": []}))

        assert exc_info.value.message == "Model response does not match the expected schema."
        assert isinstance(exc_info.value.details, list)
        assert all({"loc", "msg"} <= set(err) for err in exc_info.value.details)

    def test_empty_prediction_raises(self, extractor):
        """빈 prediction."""
        with pytest.raises(SchemaMismatchError):
            extractor.extract_json(_fence({"prediction": {}}))

    def test_missing_solution_field_raises(self, extractor, sample_result):
        """general_solution 필드 누락."""
        del sample_result["prediction"]["Plastic Bottle"]["general_solution"]["tips"]

        with pytest.raises(SchemaMismatchError) as exc_info:
            extractor.extract_json(_fence(sample_result))

        locs = [err["loc"] for err in exc_info.value.details]
        assert ["prediction", "Plastic Bottle", "general_solution", "tips"] in locs

    def test_non_string_field_raises(self, extractor, sample_result):
        """문자열이 아닌 필드."""
        sample_result["prediction"]["Plastic Bottle"]["general_solution"]["impact"] = 3

        with pytest.raises(SchemaMismatchError):
            extractor.extract_json(_fence(sample_result))

    def test_top_level_array_raises(self, extractor):
        """최상위가 객체가 아닌 경우."""
        with pytest.raises(SchemaMismatchError):
            extractor.extract_json("```json\n[1, 2, 3]\n```")

    def test_label_outside_variant_raises(self, extractor, sample_result):
        """3분류 체계 밖의 라벨."""
        sample_result["prediction"]["Plastic Bottle"]["classification"] = "Dry Waste"

        with pytest.raises(SchemaMismatchError):
            extractor.extract_json(_fence(sample_result))

    def test_four_class_variant_accepts_its_labels(self, sample_result):
        """4분류 체계 라벨 허용."""
        extractor = FencedJsonReplyExtractor(PromptVariant.FOUR_CLASS)
        sample_result["prediction"]["Plastic Bottle"]["classification"] = "Dry Waste"

        assert extractor.extract_json(_fence(sample_result)) == sample_result

    def test_na_item_with_na_advice_is_valid(self, extractor):
        """NA 라벨 + 모든 solution NA."""
        document = {"prediction": {"Blurry Photo": _na_item()}}

        assert extractor.extract_json(_fence(document)) == document

    def test_na_label_with_advice_raises(self, extractor):
        """NA 라벨인데 solution에 조언이 있으면 거부."""
        item = _na_item()
        item["general_solution"]["tips"] = "Try recycling"

        with pytest.raises(SchemaMismatchError) as exc_info:
            extractor.extract_json(_fence({"prediction": {"Unknown": item}}))

        assert "tips" in exc_info.value.details[0]["msg"]

    def test_minimal_mode_only_requires_parse(self):
        """schema_validation=False → 파싱 성공만 확인."""
        extractor = FencedJsonReplyExtractor(schema_validation=False)

        assert extractor.extract_json('```json\n{"anything": [1]}\n```') == {"anything": [1]}

    def test_all_extraction_errors_share_base(self, extractor):
        """모든 추출 실패는 ExtractionError."""
        for reply in ("nope", "```json\n{\n```", '```json\n{"x": 1}\n```'):
            with pytest.raises(ExtractionError):
                extractor.extract_json(reply)


class TestExtractTypeLabel:
    """extract_type_label 테스트."""

    def test_returns_trimmed_text(self, extractor):
        """앞뒤 공백 제거 후 반환."""
        assert extractor.extract_type_label("  Recyclable\n") == "Recyclable"

    def test_whitespace_reply_raises_empty(self, extractor):
        """공백만 있는 응답 → EmptyReplyError."""
        with pytest.raises(EmptyReplyError) as exc_info:
            extractor.extract_type_label(" \n\t ")

        assert exc_info.value.message == "Model returned an empty response."

    def test_label_not_validated_by_default(self, extractor):
        """기본값: 라벨 검증 없음."""
        assert extractor.extract_type_label("Plastic") == "Plastic"

    def test_label_validation_rejects_unknown(self):
        """type_label_validation=True → 허용 라벨만."""
        extractor = FencedJsonReplyExtractor(type_label_validation=True)

        with pytest.raises(SchemaMismatchError):
            extractor.extract_type_label("Plastic")
        assert extractor.extract_type_label("Non-Biodegradable") == "Non-Biodegradable"
        assert extractor.extract_type_label("NA") == "NA"
