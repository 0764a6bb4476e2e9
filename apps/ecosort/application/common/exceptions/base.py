"""애플리케이션 예외 베이스 클래스."""

from __future__ import annotations

from typing import Any


class ApplicationError(Exception):
    """모든 애플리케이션 예외의 베이스 클래스."""

    def __init__(self, message: str = "Application error occurred", details: Any = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)
