"""File Prompt Repository - PromptRepositoryPort 구현체.

패키지에 포함된 prompts/<name>.txt 를 읽는다.
프롬프트는 수정 없이 그대로 모델에 전송된다.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from ecosort.application.classify.ports import PromptRepositoryPort

logger = logging.getLogger(__name__)

DEFAULT_ASSETS_PATH = Path(__file__).resolve().parent
PROMPT_SUFFIX = ".txt"


class FilePromptRepository(PromptRepositoryPort):
    """프롬프트 템플릿 로더 (프로세스 수명 동안 캐시)."""

    def __init__(self, assets_path: str | Path = DEFAULT_ASSETS_PATH):
        self._prompts_dir = Path(assets_path) / "prompts"
        self._templates: dict[str, str] = {}

    def get_prompt(self, name: str) -> str:
        template = self._templates.get(name)
        if template is None:
            template = self._templates[name] = self._read(name)
        return template

    def available(self) -> list[str]:
        """디스크에 있는 프롬프트 이름 목록."""
        return sorted(path.stem for path in self._prompts_dir.glob(f"*{PROMPT_SUFFIX}"))

    def _read(self, name: str) -> str:
        path = self._prompts_dir / f"{name}{PROMPT_SUFFIX}"
        try:
            template = path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            raise FileNotFoundError(
                f"Prompt '{name}' not found in {self._prompts_dir} (available: {self.available()})"
            ) from None

        # 배포된 템플릿 식별용 (로그에서 버전 비교)
        logger.info(
            "Prompt loaded",
            extra={
                "prompt": name,
                "length": len(template),
                "sha1": hashlib.sha1(template.encode("utf-8")).hexdigest()[:12],
            },
        )
        return template
