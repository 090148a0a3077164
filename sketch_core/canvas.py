"""
SketchCanvas: owns the stroke layer, the background holder and the visible
surface, and recomposites after every mutation.

Callers never touch the layers directly; each mutating method goes through
_mutate(), which applies the change and then re-renders the whole visible
surface.
"""

import logging

from app_config.constants import CanvasConfig
from . import compositor
from .background import BackgroundImage, BackgroundImageHolder
from .compositor import VisibleSurface
from .stroke_surface import StrokeSurface

logger = logging.getLogger(__name__)


class SketchCanvas:
    def __init__(self, width=CanvasConfig.WIDTH, height=CanvasConfig.HEIGHT):
        self.strokes = StrokeSurface()
        self.strokes.initialize(width, height)
        self.background = BackgroundImageHolder()
        self.visible = VisibleSurface(width, height)
        self.render_count = 0
        self.recomposite()

    @property
    def size(self):
        return self.visible.size

    def recomposite(self):
        compositor.render(self.visible, self.background.get(), self.strokes)
        self.render_count += 1
        return self.visible

    def _mutate(self, operation, *args):
        result = operation(*args)
        self.recomposite()
        return result

    # --- Stroke layer ---

    def begin_stroke(self, point):
        # Moves the path head only; no pixels change
        self.strokes.begin_stroke(point)

    def extend_stroke(self, point, style) -> bool:
        if not self.strokes.is_stroking:
            return False
        return self._mutate(self.strokes.extend_stroke, point, style)

    def end_stroke(self):
        self.strokes.end_stroke()

    def clear_strokes(self):
        self._mutate(self.strokes.clear)
        logger.info("Drawing cleared")

    # --- Background layer ---

    def set_background(self, image: BackgroundImage):
        self._mutate(self.background.set, image)
        logger.info(f"Background set: {image.width}x{image.height}")

    def clear_background(self):
        self._mutate(self.background.clear)
        logger.info("Background cleared")
