"""Reply Parsing Adapters."""

from ecosort.infrastructure.parsing.fenced_json import FENCED_JSON_PATTERN, FencedJsonReplyExtractor
from ecosort.infrastructure.parsing.schema import ClassificationDocument

__all__ = [
    "FENCED_JSON_PATTERN",
    "ClassificationDocument",
    "FencedJsonReplyExtractor",
]
