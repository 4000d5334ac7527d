"""Maps word counts onto a bounded font size range."""
from config import MIN_FONT, MAX_FONT
from services.errors import InvalidScaleError


def font_size(count: int, max_count: int, min_font: int = MIN_FONT, max_font: int = MAX_FONT) -> int:
    """
    Font size proportional to ``count / max_count``, floored.
    
    A word with ``count == max_count`` gets exactly ``max_font``.
    
    Raises:
        InvalidScaleError: If max_count <= 0 or min_font > max_font
    """
    if max_count <= 0:
        raise InvalidScaleError(f"max_count must be positive, got {max_count}", max_count=max_count)
    if min_font > max_font:
        raise InvalidScaleError(
            f"min_font ({min_font}) must not exceed max_font ({max_font})",
            min_font=min_font,
            max_font=max_font
        )
    return min_font + ((max_font - min_font) * count) // max_count


class FontScaler:
    """Font size range bound once and applied to every word of a cloud."""
    
    def __init__(self, min_font: int = MIN_FONT, max_font: int = MAX_FONT):
        if min_font > max_font:
            raise InvalidScaleError(
                f"min_font ({min_font}) must not exceed max_font ({max_font})",
                min_font=min_font,
                max_font=max_font
            )
        self.min_font = min_font
        self.max_font = max_font
    
    def scale(self, count: int, max_count: int) -> int:
        return font_size(count, max_count, self.min_font, self.max_font)
