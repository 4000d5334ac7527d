"""Splits text into maximal word and separator runs."""
from typing import Container, Iterator

from models.token import Token
from services.errors import InvalidPositionError


def next_token(text: str, position: int, separators: Container[str]) -> Token:
    """
    Return the word or separator run that starts at ``position``.

    The character at ``position`` decides the classification; the run extends
    while the following characters share it, so the token is never empty and
    its end falls exactly where classification changes.

    Args:
        text: Source text
        position: Start index, 0 <= position < len(text)
        separators: Characters that are not part of any word

    Returns:
        Token with the matched substring and whether it is a separator run

    Raises:
        InvalidPositionError: If position is outside [0, len(text))
    """
    if not 0 <= position < len(text):
        raise InvalidPositionError(
            f"Position {position} is outside text of length {len(text)}",
            position=position,
            length=len(text)
        )

    is_separator = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == is_separator:
        end += 1

    return Token(text=text[position:end], is_separator=is_separator)


def tokenize(text: str, separators: Container[str]) -> Iterator[Token]:
    """Yield every token of ``text`` in document order, covering it exactly once."""
    position = 0
    while position < len(text):
        token = next_token(text, position, separators)
        yield token
        position += len(token)
