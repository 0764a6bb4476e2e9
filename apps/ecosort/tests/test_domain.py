"""Domain 레이어 테스트."""

import pytest

from ecosort.domain.enums import NOT_APPLICABLE, PromptVariant
from ecosort.domain.exceptions import DomainError, MalformedJsonError, StorageWriteError
from ecosort.domain.value_objects import UploadRequest


class TestUploadRequest:
    """UploadRequest Value Object 테스트."""

    def test_keeps_plain_name(self):
        request = UploadRequest(name="bottle.jpg", mime_type="image/jpeg", data=b"abc")

        assert request.name == "bottle.jpg"
        assert request.byte_length == 3

    @pytest.mark.parametrize(
        "name", ["../../etc/bottle.jpg", "C:\\Users\\me\\bottle.jpg", "dir/bottle.jpg"]
    )
    def test_strips_directories(self, name):
        """경로 구성 요소 제거."""
        request = UploadRequest(name=name, mime_type="image/jpeg", data=b"")

        assert request.name == "bottle.jpg"

    @pytest.mark.parametrize("name", ["", "/"])
    def test_empty_name_rejected(self, name):
        with pytest.raises(ValueError):
            UploadRequest(name=name, mime_type="image/jpeg", data=b"")

    def test_bytes_not_in_repr(self):
        request = UploadRequest(name="a.jpg", mime_type="image/jpeg", data=b"secret-bytes")

        assert "secret-bytes" not in repr(request)


class TestPromptVariant:
    """카테고리 체계 테스트."""

    def test_three_class_labels(self):
        assert PromptVariant.THREE_CLASS.allowed_labels == {
            "Biodegradable",
            "Non-Biodegradable",
            "Recyclable",
            NOT_APPLICABLE,
        }

    def test_four_class_labels(self):
        variant = PromptVariant("four_class")

        assert variant.is_valid_label("Electronics Waste")
        assert variant.is_valid_label("NA")
        assert not variant.is_valid_label("Recyclable")


class TestDomainError:
    """도메인 예외 payload 테스트."""

    def test_payload_without_details(self):
        assert DomainError().to_payload() == {"error": "Domain error occurred"}

    def test_payload_with_details(self):
        error = MalformedJsonError({"message": "Expecting value", "line": 1, "column": 3})

        assert error.to_payload() == {
            "error": "Failed to parse JSON from model.",
            "details": {"message": "Expecting value", "line": 1, "column": 3},
        }
        assert error.stage is None

    def test_default_message_can_be_overridden(self):
        assert StorageWriteError("bucket missing").message == "bucket missing"
