"""Unit tests for TagCloudGenerator."""
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import pytest
from models.tag_cloud import CloudWord
from services.errors import EmptyDocumentError, InvalidCountError, InvalidScaleError
from services.tag_cloud_generator import TagCloudGenerator


class TestTagCloudGenerator:
    """Test suite for TagCloudGenerator."""
    
    @pytest.fixture
    def generator(self):
        """Generator splitting on spaces and sentence punctuation."""
        return TagCloudGenerator(separators={" ", ".", "!"}, min_font=11, max_font=48)
    
    def test_end_to_end(self, generator):
        cloud = generator.generate("the cat sat. THE dog sat!", 3, "story.txt")
        
        assert cloud.document_name == "story.txt"
        assert cloud.top_n == 3
        assert cloud.unique_words == 4
        assert cloud.max_count == 2
        assert cloud.words == [
            CloudWord(word="Cat", count=1, font_size=29),
            CloudWord(word="Sat", count=2, font_size=48),
            CloudWord(word="The", count=2, font_size=48),
        ]
    
    def test_all_words(self, generator):
        cloud = generator.generate("b a c a", 3)
        assert [word.word for word in cloud.words] == ["A", "B", "C"]
        assert cloud.document_name == "document"
    
    def test_display_order_differs_from_selection_order(self, generator):
        cloud = generator.generate("zebra zebra zebra apple mango mango", 2)
        assert [word.word for word in cloud.words] == ["Mango", "Zebra"]
    
    def test_empty_document(self, generator):
        with pytest.raises(EmptyDocumentError) as exc_info:
            generator.generate(" . ! ", 1, "blank.txt")
        assert exc_info.value.error.code == "EMPTY_DOCUMENT"
        assert "no tag cloud" in str(exc_info.value)
    
    def test_count_above_unique_words(self, generator):
        with pytest.raises(InvalidCountError):
            generator.generate("one two", 3)
    
    def test_count_words(self, generator):
        assert generator.count_words("Go go GO stop") == {"Go": 3, "Stop": 1}
    
    def test_generate_from_frequencies(self, generator):
        cloud = generator.generate_from_frequencies({"Apple": 5, "Banana": 5, "Cherry": 1}, 2)
        assert [(w.word, w.font_size) for w in cloud.words] == [("Apple", 48), ("Banana", 48)]
    
    def test_invalid_font_range(self):
        with pytest.raises(InvalidScaleError):
            TagCloudGenerator(min_font=50, max_font=10)
