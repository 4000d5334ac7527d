"""Orchestrates the tag cloud pipeline for a single document."""
import logging
from typing import Container, Dict, Optional

from config import MIN_FONT, MAX_FONT
from models.tag_cloud import CloudWord, TagCloud
from services.alphabetizer import alphabetize
from services.errors import EmptyDocumentError
from services.font_scaler import FontScaler
from services.frequency_aggregator import FrequencyAggregator
from services.rank_selector import select_top

logger = logging.getLogger(__name__)


class TagCloudGenerator:
    """Builds the top-N tag cloud of a document: count, rank, alphabetize, scale."""
    
    def __init__(
        self,
        separators: Optional[Container[str]] = None,
        min_font: int = MIN_FONT,
        max_font: int = MAX_FONT
    ):
        """
        Initialize TagCloudGenerator.
        
        Args:
            separators: Separator alphabet (defaults to the configured set)
            min_font: Font size of the least frequent possible word
            max_font: Font size of the most frequent word
            
        Raises:
            InvalidScaleError: If min_font > max_font
        """
        self.aggregator = FrequencyAggregator(separators)
        self.font_scaler = FontScaler(min_font, max_font)
    
    def count_words(self, text: str) -> Dict[str, int]:
        """Frequency map of ``text``; empty when the text has no words."""
        return self.aggregator.aggregate(text)
    
    def generate(self, text: str, top_n: int, document_name: str = "document") -> TagCloud:
        """
        Generate the tag cloud of ``text``.
        
        Raises:
            EmptyDocumentError: If the text contains no words
            InvalidCountError: If top_n is outside [1, unique word count]
        """
        frequencies = self.count_words(text)
        if not frequencies:
            raise EmptyDocumentError(
                f"{document_name} contains no words, so no tag cloud could be generated",
                document_name=document_name
            )
        return self.generate_from_frequencies(frequencies, top_n, document_name)
    
    def generate_from_frequencies(
        self,
        frequencies: Dict[str, int],
        top_n: int,
        document_name: str = "document"
    ) -> TagCloud:
        """Build a cloud from an already counted frequency map."""
        selection = select_top(frequencies, top_n)
        
        # Second, independent ordering: display is alphabetical
        display = alphabetize(selection.entries)
        
        words = [
            CloudWord(
                word=entry.word,
                count=entry.count,
                font_size=self.font_scaler.scale(entry.count, selection.max_count)
            )
            for entry in display
        ]
        
        logger.info(
            f"Generated tag cloud for {document_name}: "
            f"{len(words)} of {len(frequencies)} unique words, max count {selection.max_count}"
        )
        
        return TagCloud(
            document_name=document_name,
            top_n=top_n,
            unique_words=len(frequencies),
            max_count=selection.max_count,
            min_font=self.font_scaler.min_font,
            max_font=self.font_scaler.max_font,
            words=words
        )
