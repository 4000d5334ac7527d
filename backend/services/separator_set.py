"""Separator alphabet used to split text into words."""
from typing import FrozenSet, Iterable, Iterator

import config


class SeparatorSet:
    """Immutable set of characters that act as word boundaries."""

    __slots__ = ("_chars",)

    def __init__(self, chars: Iterable[str] = ()):
        chars = frozenset(chars)
        for ch in chars:
            if not isinstance(ch, str) or len(ch) != 1:
                raise ValueError(f"Separators must be single characters, got {ch!r}")
        object.__setattr__(self, "_chars", chars)

    @classmethod
    def from_string(cls, separator_string: str) -> "SeparatorSet":
        """Build a separator set from every character in ``separator_string``."""
        if separator_string is None:
            raise ValueError("separator_string must not be None")
        return cls(separator_string)

    @property
    def chars(self) -> FrozenSet[str]:
        return self._chars

    def __setattr__(self, name, value):
        raise AttributeError("SeparatorSet is immutable")

    def __contains__(self, ch: object) -> bool:
        return ch in self._chars

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SeparatorSet):
            return self._chars == other._chars
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"SeparatorSet({''.join(sorted(self._chars))!r})"


DEFAULT = SeparatorSet.from_string(config.DEFAULT_SEPARATORS)


def configured_separators() -> SeparatorSet:
    """Separator set named by the SEPARATORS setting, read at call time."""
    return SeparatorSet.from_string(config.SEPARATORS)
