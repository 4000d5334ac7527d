"""Document data models."""
from dataclasses import dataclass
from typing import List

@dataclass
class Page:
    """Represents a single page (or the whole body) of a source document."""
    page_number: int
    text: str
    word_count: int

@dataclass
class Document:
    """Represents a loaded source document."""
    filename: str
    pages: List[Page]
    total_pages: int

    @property
    def text(self) -> str:
        """Full document text, pages joined by line breaks."""
        return "\n".join(page.text for page in self.pages)
