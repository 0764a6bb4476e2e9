"""Domain Value Objects."""

from ecosort.domain.value_objects.classification import (
    ClassificationQuery,
    ClassificationResult,
    RawModelReply,
)
from ecosort.domain.value_objects.upload import StoredObjectRef, UploadRequest

__all__ = [
    "ClassificationQuery",
    "ClassificationResult",
    "RawModelReply",
    "StoredObjectRef",
    "UploadRequest",
]
