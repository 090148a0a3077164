# Input validation for form values feeding the canvas and the submission

import re
from typing import Tuple, Optional

from app_config.constants import BrushConfig


def validate_hex_color(color: str) -> Tuple[bool, Optional[str]]:
    """
    Validate hex color code.
    
    Args:
        color: Hex color string to validate
        
    Returns:
        tuple: (is_valid, error_message)
        
    Example:
        >>> validate_hex_color("#FF0000")
        (True, None)
        >>> validate_hex_color("invalid")
        (False, 'Hex color must start with #')
    """
    if not isinstance(color, str):
        return False, "Color must be a string"
    
    if not color.startswith("#"):
        return False, "Hex color must start with #"
    
    if len(color) != 7:
        return False, "Hex color must be 7 characters (#RRGGBB)"
    
    if not re.match(r"^#[0-9A-Fa-f]{6}$", color):
        return False, "Invalid hex color format"
    
    return True, None


def validate_brush_width(width) -> Tuple[bool, Optional[str]]:
    """
    Validate a brush width in pixels.

    Returns:
        tuple: (is_valid, error_message)
    """
    if isinstance(width, bool) or not isinstance(width, (int, float)):
        return False, "Brush width must be a number"

    if width <= 0:
        return False, f"Brush width must be positive (got {width})"

    if width > BrushConfig.MAX_WIDTH:
        return False, f"Brush width {width} exceeds maximum {BrushConfig.MAX_WIDTH}"

    return True, None


def validate_iterations(num_iterations) -> Tuple[bool, Optional[str]]:
    """Iteration count must be a positive integer."""
    if isinstance(num_iterations, bool) or not isinstance(num_iterations, int):
        return False, "Iteration count must be an integer"

    if num_iterations < 1:
        return False, f"Iteration count must be at least 1 (got {num_iterations})"

    return True, None
