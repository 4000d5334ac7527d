"""Data models for the Tag Cloud Generator."""
from .document import Document, Page
from .token import Token
from .word_entry import WordEntry
from .tag_cloud import CloudWord, TagCloud
from .api import (
    FrequencyRequest,
    FrequencyResponse,
    WordFrequency,
    CloudRequest,
    CloudResponse,
    CloudWordOut,
)

__all__ = [
    "Document",
    "Page",
    "Token",
    "WordEntry",
    "CloudWord",
    "TagCloud",
    "FrequencyRequest",
    "FrequencyResponse",
    "WordFrequency",
    "CloudRequest",
    "CloudResponse",
    "CloudWordOut",
]
