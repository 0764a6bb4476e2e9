"""Blob Store 관련 도메인 예외."""

from ecosort.domain.exceptions.base import DomainError


class StorageWriteError(DomainError):
    """객체 저장 실패 (transport/auth/quota/timeout)."""

    default_message = "Failed to store image"


class StorageDeleteError(DomainError):
    """저장된 객체 삭제 실패."""

    default_message = "Failed to delete stored image"
