"""Inference 관련 도메인 예외."""

from ecosort.domain.exceptions.base import DomainError


class InferenceError(DomainError):
    """모델 호출 실패.

    transport 실패, non-2xx 응답, timeout, 빈 choices.
    """

    default_message = "Failed to process image"
