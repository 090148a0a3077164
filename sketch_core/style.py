import re
from dataclasses import dataclass
from typing import Tuple

from app_config.constants import BrushConfig

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def hex_to_rgb(hex_color):
    """Convert a '#RRGGBB' string to an RGB tuple.

    Raises:
        ValueError: If hex_color is not a 7 character '#RRGGBB' string
    """
    if not isinstance(hex_color, str):
        raise ValueError(f"hex_color must be a string, got {type(hex_color)}")

    if not hex_color.startswith('#') or len(hex_color) != 7:
        raise ValueError(f"hex_color must be '#RRGGBB' (got {hex_color!r})")

    # int(s, 16) alone would accept signs and whitespace
    if not _HEX_COLOR.match(hex_color):
        raise ValueError(f"Invalid hex color '{hex_color}'")

    return tuple(int(hex_color[i:i+2], 16) for i in (1, 3, 5))


@dataclass(frozen=True)
class StrokeStyle:
    """Pen colour and width, read each time a segment is committed."""
    color: str = BrushConfig.DEFAULT_COLOR
    brush_width: float = BrushConfig.SIZES[BrushConfig.DEFAULT_SIZE_LABEL]

    def __post_init__(self):
        # Fail on construction so a bad picker value never reaches the raster
        hex_to_rgb(self.color)
        if isinstance(self.brush_width, bool) or not isinstance(self.brush_width, (int, float)):
            raise ValueError(f"brush_width must be a number, got {type(self.brush_width)}")
        if self.brush_width <= 0:
            raise ValueError(f"brush_width must be positive, got {self.brush_width}")

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return hex_to_rgb(self.color)

    @property
    def thickness(self) -> int:
        """Integer pixel thickness used by the rasteriser (at least 1)."""
        return max(1, int(self.brush_width + 0.5))
