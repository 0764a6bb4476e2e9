"""GCS Blob Store Adapter - BlobStorePort 구현체.

자격 증명은 생성자로 주입 (임시 키 파일을 만들지 않음).
"""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import Any
from urllib.parse import quote

from google.api_core.exceptions import GoogleAPIError, NotFound
from google.auth.exceptions import GoogleAuthError
from google.cloud import storage

from ecosort.application.classify.ports import BlobStorePort
from ecosort.domain.exceptions import StorageDeleteError, StorageWriteError
from ecosort.domain.value_objects import StoredObjectRef

logger = logging.getLogger(__name__)

GCS_PUBLIC_HOST = "https://storage.googleapis.com"

# requests 예외는 OSError 계열
_TRANSPORT_ERRORS = (GoogleAPIError, GoogleAuthError, OSError)


class GcsBlobStore(BlobStorePort):
    """Google Cloud Storage 구현체.

    SDK가 동기 방식이므로 executor에서 실행 (이벤트 루프 블로킹 방지).
    """

    def __init__(
        self,
        bucket_name: str,
        *,
        credentials_info: dict[str, Any] | None = None,
        client: storage.Client | None = None,
    ):
        """초기화.

        Args:
            bucket_name: 버킷 이름
            credentials_info: 서비스 계정 JSON (dict, None이면 ADC 사용)
            client: 테스트용 클라이언트 주입
        """
        if client is None:
            if credentials_info:
                client = storage.Client.from_service_account_info(credentials_info)
            else:
                client = storage.Client()
        self._client = client
        self._bucket_name = bucket_name
        self._bucket = client.bucket(bucket_name)
        logger.info("GcsBlobStore initialized (bucket=%s)", bucket_name)

    async def put(self, key: str, data: bytes, content_type: str) -> StoredObjectRef:
        blob = self._bucket.blob(key)
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(
                None,
                partial(blob.upload_from_string, data, content_type=content_type),
            )
        except _TRANSPORT_ERRORS as exc:
            logger.error(
                "GCS upload failed",
                extra={"bucket": self._bucket_name, "key": key, "error": str(exc)},
            )
            raise StorageWriteError(details=str(exc)) from exc

        logger.info(
            "Image uploaded to GCS",
            extra={
                "bucket": self._bucket_name,
                "key": key,
                "content_type": content_type,
                "size_bytes": len(data),
            },
        )
        return StoredObjectRef(key=key, public_url=self.public_url(key))

    async def delete(self, key: str) -> None:
        blob = self._bucket.blob(key)
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, blob.delete)
        except NotFound:
            logger.debug("GCS object already absent", extra={"key": key})
            return
        except _TRANSPORT_ERRORS as exc:
            raise StorageDeleteError(details=str(exc)) from exc
        logger.info("Image deleted from GCS", extra={"bucket": self._bucket_name, "key": key})

    def public_url(self, key: str) -> str:
        return f"{GCS_PUBLIC_HOST}/{self._bucket_name}/{quote(key)}"
