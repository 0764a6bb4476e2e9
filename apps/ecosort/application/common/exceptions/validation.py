"""검증 관련 애플리케이션 예외 (HTTP 400)."""

from ecosort.application.common.exceptions.base import ApplicationError


class InputValidationError(ApplicationError):
    """요청 입력 검증 실패."""


class FileRequiredError(InputValidationError):
    """업로드 파일 누락."""

    def __init__(self) -> None:
        super().__init__("No file uploaded")


class ImageUrlRequiredError(InputValidationError):
    """이미지 URL 누락."""

    def __init__(self) -> None:
        super().__init__("No image URL provided")


class UploadTooLargeError(InputValidationError):
    """업로드 크기 초과."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__("File too large", details={"size_bytes": size, "limit_bytes": limit})
