"""Pytest Configuration for Ecosort Tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from ecosort.domain.exceptions import InferenceError
from ecosort.tests.fakes import InMemoryBlobStore, MockPromptRepository

# ============================================================
# Fixtures
# ============================================================


@pytest.fixture
def sample_result() -> dict[str, Any]:
    """샘플 분류 결과."""
    return {
        "prediction": {
            "Plastic Bottle": {
                "classification": "Recyclable",
                "general_solution": {
                    "disposal": "Recycle bin",
                    "benefits": "Saves resources",
                    "tips": "Rinse first",
                    "impact": "Low",
                    "alternatives": "Reusable bottle",
                    "additional_resources": "https://example.org",
                },
            }
        }
    }


@pytest.fixture
def fenced_reply(sample_result) -> str:
    """펜스 블록으로 감싼 모델 응답."""
    return f"Here it is:\n```json\n{json.dumps(sample_result)}\n```"


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def prompt_repository() -> MockPromptRepository:
    return MockPromptRepository()


@pytest.fixture
def inference_error() -> InferenceError:
    return InferenceError(details="502 Bad Gateway")
