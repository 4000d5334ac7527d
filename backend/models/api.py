"""Request and response schemas for the Tag Cloud API."""
from typing import List, Optional
from pydantic import BaseModel, Field

from config import DEFAULT_TOP_N


class FrequencyRequest(BaseModel):
    """Body of POST /frequencies."""
    text: str
    separators: Optional[str] = Field(
        default=None,
        description="Separator alphabet; the configured default is used when omitted"
    )


class WordFrequency(BaseModel):
    word: str
    count: int


class FrequencyResponse(BaseModel):
    """All canonical words ordered by count descending, then word ascending."""
    unique_words: int
    total_words: int
    frequencies: List[WordFrequency]


class CloudRequest(BaseModel):
    """Body of POST /cloud and POST /cloud/html."""
    text: str
    top_n: int = Field(default=DEFAULT_TOP_N, description="Number of words in the cloud")
    document_name: str = Field(default="document", min_length=1)
    separators: Optional[str] = None


class CloudWordOut(BaseModel):
    word: str
    count: int
    font_size: int


class CloudResponse(BaseModel):
    """JSON form of a generated tag cloud."""
    document_name: str
    top_n: int
    unique_words: int
    max_count: int
    min_font: int
    max_font: int
    words: List[CloudWordOut]
