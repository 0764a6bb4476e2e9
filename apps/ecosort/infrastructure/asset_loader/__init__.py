"""Asset Loader Adapters."""

from ecosort.infrastructure.asset_loader.prompt_repository_impl import (
    DEFAULT_ASSETS_PATH,
    FilePromptRepository,
)

__all__ = ["DEFAULT_ASSETS_PATH", "FilePromptRepository"]
