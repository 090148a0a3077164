"""
UI Components Package.

Package structure:
- canvas.py: drawing widget wrapper with cached backdrop handling
"""

from .canvas import st_canvas, backdrop_image

__all__ = [
    'st_canvas',
    'backdrop_image',
]
