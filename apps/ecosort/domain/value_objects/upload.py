"""Upload Value Objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath


@dataclass(frozen=True, slots=True)
class UploadRequest:
    """업로드 요청 Value Object.

    한 번의 파이프라인 호출 동안만 존재하며 Orchestrator가 소유.

    Attributes:
        name: 호출자가 지정한 파일명 (object key로 사용)
        mime_type: Content-Type
        data: 이미지 바이트
    """

    name: str
    mime_type: str
    data: bytes = field(repr=False)

    def __post_init__(self) -> None:
        # 디렉토리 경로 제거 (path traversal 방지)
        normalized = PurePosixPath(self.name.replace("\\", "/")).name
        if not normalized:
            raise ValueError("name must not be empty")
        object.__setattr__(self, "name", normalized)

    @property
    def byte_length(self) -> int:
        return len(self.data)


@dataclass(frozen=True, slots=True)
class StoredObjectRef:
    """Blob Store에 저장된 객체 참조."""

    key: str
    public_url: str
