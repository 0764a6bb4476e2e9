"""S3 Blob Store Adapter - BlobStorePort 구현체."""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import TYPE_CHECKING
from urllib.parse import quote

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ecosort.application.classify.ports import BlobStorePort
from ecosort.domain.exceptions import StorageDeleteError, StorageWriteError
from ecosort.domain.value_objects import StoredObjectRef

if TYPE_CHECKING:
    from botocore.client import BaseClient

logger = logging.getLogger(__name__)


class S3BlobStore(BlobStorePort):
    """AWS S3 구현체.

    public_base_url(CDN 등)이 없으면 가상 호스트 방식 URL 사용.
    """

    def __init__(
        self,
        bucket_name: str,
        *,
        region: str = "us-east-1",
        public_base_url: str | None = None,
        s3_client: "BaseClient | None" = None,
    ):
        """초기화.

        Args:
            bucket_name: 버킷 이름
            region: AWS 리전
            public_base_url: 공개 URL prefix (None이면 S3 기본 도메인)
            s3_client: boto3 S3 클라이언트 (None이면 기본 자격 증명 체인)
        """
        self._s3 = s3_client or boto3.client("s3", region_name=region)
        self._bucket_name = bucket_name
        base = public_base_url or f"https://{bucket_name}.s3.{region}.amazonaws.com"
        self._public_base_url = base.rstrip("/")
        logger.info("S3BlobStore initialized (bucket=%s, region=%s)", bucket_name, region)

    async def put(self, key: str, data: bytes, content_type: str) -> StoredObjectRef:
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(
                None,
                partial(
                    self._s3.put_object,
                    Bucket=self._bucket_name,
                    Key=key,
                    Body=data,
                    ContentType=content_type,
                ),
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error(
                "S3 upload failed",
                extra={"bucket": self._bucket_name, "key": key, "error": str(exc)},
            )
            raise StorageWriteError(details=str(exc)) from exc

        logger.info(
            "Image uploaded to S3",
            extra={
                "bucket": self._bucket_name,
                "key": key,
                "content_type": content_type,
                "size_bytes": len(data),
            },
        )
        return StoredObjectRef(key=key, public_url=self.public_url(key))

    async def delete(self, key: str) -> None:
        # S3 delete_object는 없는 key에도 성공 (멱등)
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(
                None,
                partial(self._s3.delete_object, Bucket=self._bucket_name, Key=key),
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageDeleteError(details=str(exc)) from exc
        logger.info("Image deleted from S3", extra={"bucket": self._bucket_name, "key": key})

    def public_url(self, key: str) -> str:
        return f"{self._public_base_url}/{quote(key)}"
