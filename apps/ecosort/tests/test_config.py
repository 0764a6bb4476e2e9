"""Config Tests - Settings 환경 변수 테스트."""

import base64
import json
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from ecosort.domain.enums import PromptVariant
from ecosort.setup.config import Settings


class TestSettingsDefaults:
    """Settings 기본값 테스트."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.storage_backend == "gcs"
        assert settings.bucket_name == "waste-management-photos"
        assert settings.inference_model == "google/gemma-3-27b-it"
        assert settings.inference_provider == "nebius"
        assert settings.prompt_variant is PromptVariant.THREE_CLASS
        assert settings.upload_max_output_tokens == 500
        assert settings.type_max_output_tokens == 100
        assert settings.schema_validation is True
        assert settings.strict_cleanup is False
        assert settings.cleanup_on_failure is False
        assert settings.hf_token is None
        assert settings.cors_origins == ["http://localhost:5173"]


class TestSettingsEnvironment:
    """환경 변수 매핑 테스트."""

    def test_unprefixed_secret_aliases(self):
        """HF_TOKEN / GCLOUD_KEY_BASE64 그대로 사용."""
        env = {"HF_TOKEN": "hf_secret", "GCLOUD_KEY_BASE64": "e30="}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.hf_token.get_secret_value() == "hf_secret"
        assert "hf_secret" not in repr(settings)

    def test_prefixed_settings(self):
        env = {
            "ECOSORT_STORAGE_BACKEND": "s3",
            "ECOSORT_PROMPT_VARIANT": "four_class",
            "ECOSORT_STRICT_CLEANUP": "true",
            "ECOSORT_CORS_ORIGINS_STR": "https://a.example, https://b.example,",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.storage_backend == "s3"
        assert settings.prompt_variant is PromptVariant.FOUR_CLASS
        assert settings.strict_cleanup is True
        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_token_limit_out_of_range_rejected(self):
        """토큰 상한은 100~500."""
        with patch.dict(os.environ, {"ECOSORT_UPLOAD_MAX_OUTPUT_TOKENS": "4096"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_unknown_backend_rejected(self):
        with patch.dict(os.environ, {"ECOSORT_STORAGE_BACKEND": "azure"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestGcsCredentials:
    """gcs_credentials_info() 테스트."""

    def test_decodes_base64_json(self):
        key = {"type": "service_account", "project_id": "eco"}
        encoded = base64.b64encode(json.dumps(key).encode()).decode()
        with patch.dict(os.environ, {"GCLOUD_KEY_BASE64": encoded}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.gcs_credentials_info() == key

    def test_missing_key_means_default_credentials(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.gcs_credentials_info() is None

    @pytest.mark.parametrize("value", ["not base64!", base64.b64encode(b"not json").decode()])
    def test_invalid_key_raises(self, value):
        with patch.dict(os.environ, {"GCLOUD_KEY_BASE64": value}, clear=True):
            settings = Settings(_env_file=None)

        with pytest.raises(ValueError):
            settings.gcs_credentials_info()
