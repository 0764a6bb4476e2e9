"""Classify Ports."""

from ecosort.application.classify.ports.blob_store import BlobStorePort
from ecosort.application.classify.ports.prompt_repository import PromptRepositoryPort
from ecosort.application.classify.ports.reply_extractor import ReplyExtractorPort
from ecosort.application.classify.ports.vision_model import VisionModelPort

__all__ = [
    "BlobStorePort",
    "PromptRepositoryPort",
    "ReplyExtractorPort",
    "VisionModelPort",
]
