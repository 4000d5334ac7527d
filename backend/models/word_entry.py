"""Word frequency data models."""
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class WordEntry:
    """
    A canonical word together with its occurrence count.

    Attributes:
        word: Canonical display form ("First letter upper, rest lower")
        count: Number of case-insensitive occurrences, always >= 1
    """
    word: str
    count: int

    @property
    def rank_key(self) -> Tuple[int, str]:
        """Selection order: higher counts first, then canonical word ascending."""
        return (-self.count, self.word)
