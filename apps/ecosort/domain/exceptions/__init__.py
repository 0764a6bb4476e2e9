"""Ecosort 도메인 예외."""

from ecosort.domain.exceptions.base import DomainError
from ecosort.domain.exceptions.extraction import (
    EmptyReplyError,
    ExtractionError,
    MalformedJsonError,
    NoJsonBlockError,
    SchemaMismatchError,
)
from ecosort.domain.exceptions.inference import InferenceError
from ecosort.domain.exceptions.storage import StorageDeleteError, StorageWriteError

__all__ = [
    "DomainError",
    "EmptyReplyError",
    "ExtractionError",
    "InferenceError",
    "MalformedJsonError",
    "NoJsonBlockError",
    "SchemaMismatchError",
    "StorageDeleteError",
    "StorageWriteError",
]
