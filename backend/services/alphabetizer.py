"""Display ordering for the selected words."""
from typing import Iterable, List

from models.word_entry import WordEntry


def alphabetize(entries: Iterable[WordEntry]) -> List[WordEntry]:
    """Return ``entries`` sorted by canonical word in code point order. Counts are untouched."""
    return sorted(entries, key=lambda entry: entry.word)
