"""Blob Store Adapters.

- gcs: Google Cloud Storage (기본)
- s3: AWS S3
"""

from ecosort.infrastructure.storage.gcs import GcsBlobStore
from ecosort.infrastructure.storage.s3 import S3BlobStore

__all__ = ["GcsBlobStore", "S3BlobStore"]
