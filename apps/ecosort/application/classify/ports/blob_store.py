"""Blob Store Port - 객체 저장소 추상화."""

from abc import ABC, abstractmethod

from ecosort.domain.value_objects import StoredObjectRef


class BlobStorePort(ABC):
    """Blob Store 포트.

    GCS, S3 등 다양한 구현체를 DI로 주입.
    """

    @abstractmethod
    async def put(self, key: str, data: bytes, content_type: str) -> StoredObjectRef:
        """바이트를 key에 저장 (기존 key는 덮어씀).

        Raises:
            StorageWriteError: transport/auth/quota 실패
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """객체 삭제 (멱등, 없는 객체는 성공으로 간주).

        Raises:
            StorageDeleteError: 삭제 실패
        """
        pass

    @abstractmethod
    def public_url(self, key: str) -> str:
        """bucket + key로 공개 URL 생성 (네트워크 호출 없음)."""
        pass
