"""
Top-N selection over a word frequency map.

Selection uses one total order: count descending, then canonical word
ascending. When the n-th cutoff falls inside a block of equal counts, the
alphabetically earliest words of that block are kept.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List

from models.word_entry import WordEntry
from services.errors import InvalidCountError

logger = logging.getLogger(__name__)


@dataclass
class RankedSelection:
    """
    Result of top-N selection.
    
    Attributes:
        entries: The n selected entries in selection order
        max_count: Count of the first (largest) entry
    """
    entries: List[WordEntry]
    max_count: int


@dataclass
class CountValidation:
    """Outcome of checking a requested word count against a document."""
    valid: bool
    message: str = ""


def validate_count(n: int, unique_word_count: int) -> CountValidation:
    """
    Check that ``n`` words can be selected from ``unique_word_count`` words.
    
    Returns a result instead of raising so interactive callers can re-prompt.
    """
    if unique_word_count <= 0:
        return CountValidation(False, "The document has no words, so no tag cloud can be generated")
    if n <= 0 or n > unique_word_count:
        return CountValidation(
            False,
            f"Enter a positive integer less than or equal to {unique_word_count}"
        )
    return CountValidation(True)


def rank(freq_map: Dict[str, int]) -> List[WordEntry]:
    """All entries of ``freq_map`` sorted by count descending, then word ascending."""
    entries = [WordEntry(word=word, count=count) for word, count in freq_map.items()]
    entries.sort(key=lambda entry: entry.rank_key)
    return entries


def select_top(freq_map: Dict[str, int], n: int) -> RankedSelection:
    """
    Select the ``n`` most frequent words.
    
    Args:
        freq_map: Canonical word to count mapping
        n: Number of words to keep, 0 < n <= len(freq_map)
        
    Returns:
        RankedSelection with entries in selection order and the maximum count
        
    Raises:
        InvalidCountError: If n is outside [1, len(freq_map)]
    """
    validation = validate_count(n, len(freq_map))
    if not validation.valid:
        raise InvalidCountError(
            f"Cannot select {n} words from {len(freq_map)} unique words",
            requested=n,
            unique_words=len(freq_map)
        )
    
    ranked = rank(freq_map)
    selected = ranked[:n]
    
    if n < len(ranked) and ranked[n].count == selected[-1].count:
        logger.debug(
            f"Cutoff at {n} splits words with count {selected[-1].count}; "
            f"kept up to '{selected[-1].word}'"
        )
    
    return RankedSelection(entries=selected, max_count=selected[0].count)
