"""Ecosort 애플리케이션 예외."""

from ecosort.application.common.exceptions.base import ApplicationError
from ecosort.application.common.exceptions.validation import (
    FileRequiredError,
    ImageUrlRequiredError,
    InputValidationError,
    UploadTooLargeError,
)

__all__ = [
    "ApplicationError",
    "FileRequiredError",
    "ImageUrlRequiredError",
    "InputValidationError",
    "UploadTooLargeError",
]
