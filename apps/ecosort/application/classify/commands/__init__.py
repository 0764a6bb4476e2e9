"""Classify Commands."""

from ecosort.application.classify.commands.classify_type import ClassifyTypeCommand
from ecosort.application.classify.commands.classify_upload import (
    CLEANUP_WARNING,
    ClassifyUploadCommand,
)

__all__ = [
    "CLEANUP_WARNING",
    "ClassifyTypeCommand",
    "ClassifyUploadCommand",
]
