"""
Canvas compositing core: stroke layer, background holder, compositor and
pointer input state machine.
"""

from .background import BackgroundImage, BackgroundImageHolder
from .canvas import SketchCanvas
from .compositor import Placement, VisibleSurface, composite, compute_placement, render
from .errors import SketchError, SurfaceNotInitializedError
from .pointer import (
    BoundingRect,
    DrawingState,
    PointerEvent,
    PointerEventType,
    PointerInputStateMachine,
)
from .stroke_surface import StrokeSurface
from .style import StrokeStyle, hex_to_rgb

__all__ = [
    'BackgroundImage',
    'BackgroundImageHolder',
    'SketchCanvas',
    'Placement',
    'VisibleSurface',
    'composite',
    'compute_placement',
    'render',
    'SketchError',
    'SurfaceNotInitializedError',
    'BoundingRect',
    'DrawingState',
    'PointerEvent',
    'PointerEventType',
    'PointerInputStateMachine',
    'StrokeSurface',
    'StrokeStyle',
    'hex_to_rgb',
]
