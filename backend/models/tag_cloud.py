"""Tag cloud data models."""
from dataclasses import dataclass, field
from typing import List

@dataclass
class CloudWord:
    """A single word of the rendered cloud."""
    word: str
    count: int
    font_size: int

@dataclass
class TagCloud:
    """The alphabetized top-N words of one document, ready for rendering."""
    document_name: str
    top_n: int
    unique_words: int
    max_count: int
    min_font: int
    max_font: int
    words: List[CloudWord] = field(default_factory=list)
