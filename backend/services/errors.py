"""Structured errors raised by the tag cloud pipeline."""
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class CloudError:
    """Structured error payload, serialisable into an API error body."""
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class TagCloudError(Exception):
    """Base exception for tag cloud errors with structured error information."""

    code = "TAG_CLOUD_ERROR"

    def __init__(self, message: str, **details: Any):
        self.error = CloudError(code=self.code, message=message, details=details)
        super().__init__(message)


class InvalidPositionError(TagCloudError):
    """Tokenizer position outside [0, len(text))."""
    code = "INVALID_POSITION"


class InvalidCountError(TagCloudError):
    """Requested word count outside [1, unique word count]."""
    code = "INVALID_COUNT"


class InvalidScaleError(TagCloudError):
    """Font scaling called with max_count <= 0 or min_font > max_font."""
    code = "INVALID_SCALE"


class EmptyDocumentError(TagCloudError):
    """The document contains no words, so no cloud can be generated."""
    code = "EMPTY_DOCUMENT"


class DocumentLoadError(TagCloudError):
    """A source document could not be opened or decoded."""
    code = "DOCUMENT_LOAD_ERROR"
