"""Token data model."""
from dataclasses import dataclass

@dataclass(frozen=True)
class Token:
    """A maximal run of word or separator characters taken from the source text."""
    text: str
    is_separator: bool

    def __len__(self) -> int:
        return len(self.text)
