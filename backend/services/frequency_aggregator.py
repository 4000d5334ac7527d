"""Case-insensitive word frequency counting."""
import logging
from typing import Container, Dict, Optional

from services.separator_set import configured_separators
from services.tokenizer import tokenize

logger = logging.getLogger(__name__)


def canonicalize(word: str) -> str:
    """
    Display form of a word: upper-case it, then lower-case all but the first character.
    
    A first character may expand when upper-cased: "ß" gives "SS", then "Ss".
    """
    upper = word.upper()
    return upper[:1] + upper[1:].lower()


class FrequencyAggregator:
    """Counts canonical words in a text."""
    
    def __init__(self, separators: Optional[Container[str]] = None):
        """
        Initialize FrequencyAggregator.
        
        Args:
            separators: Separator alphabet (defaults to the SEPARATORS setting)
        """
        self.separators = configured_separators() if separators is None else separators
    
    def aggregate(self, text: str) -> Dict[str, int]:
        """
        Count every word of ``text`` under its canonical form.
        
        Separator runs are discarded. Line breaks are ordinary characters and
        only split words when they belong to the separator set.
        
        Args:
            text: Full document text
            
        Returns:
            Mapping of canonical word to count; empty for a text without words
        """
        frequencies: Dict[str, int] = {}
        total = 0
        
        for token in tokenize(text, self.separators):
            if token.is_separator:
                continue
            word = canonicalize(token.text)
            frequencies[word] = frequencies.get(word, 0) + 1
            total += 1
        
        logger.debug(f"Counted {total} words ({len(frequencies)} unique)")
        return frequencies
