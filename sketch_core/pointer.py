"""
Pointer input state machine.

Turns an abstract stream of pointer events into stroke operations:

    IDLE     --down-->       DRAWING   begin_stroke(local)
    DRAWING  --move-->       DRAWING   extend_stroke(local, style) + recomposite
    DRAWING  --up / leave--> IDLE      end_stroke()

A move while IDLE is hover without drawing and is ignored. Large jumps
between samples become one straight segment, never a gap.
"""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class DrawingState(Enum):
    IDLE = "idle"
    DRAWING = "drawing"


class PointerEventType(Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    LEAVE = "leave"


@dataclass(frozen=True)
class PointerEvent:
    type: PointerEventType
    client_x: float = 0.0
    client_y: float = 0.0


@dataclass(frozen=True)
class BoundingRect:
    """Client-space offset of the visible surface's top-left corner."""
    left: float = 0.0
    top: float = 0.0

    def to_local(self, client_x, client_y):
        return client_x - self.left, client_y - self.top


class PointerInputStateMachine:
    def __init__(self, canvas, style_provider):
        """
        Args:
            canvas: Target exposing begin_stroke / extend_stroke / end_stroke.
                SketchCanvas recomposites after every extend_stroke.
            style_provider: Zero-argument callable returning the current
                StrokeStyle. Called once per segment, so a colour change
                mid-stroke applies from the next segment on.
        """
        self.canvas = canvas
        self.style_provider = style_provider
        self.state = DrawingState.IDLE

    @property
    def is_drawing(self) -> bool:
        return self.state is DrawingState.DRAWING

    def handle(self, event: PointerEvent, rect: BoundingRect = BoundingRect()) -> bool:
        """
        Apply one event.

        Returns:
            bool: True if a stroke segment was committed
        """
        if event.type is PointerEventType.DOWN:
            # A second down without an up restarts the path at the new point
            self.canvas.begin_stroke(rect.to_local(event.client_x, event.client_y))
            self.state = DrawingState.DRAWING
            return False

        if event.type is PointerEventType.MOVE:
            if self.state is DrawingState.IDLE:
                return False
            local = rect.to_local(event.client_x, event.client_y)
            return self.canvas.extend_stroke(local, self.style_provider())

        if event.type in (PointerEventType.UP, PointerEventType.LEAVE):
            if self.state is DrawingState.DRAWING:
                self.canvas.end_stroke()
                self.state = DrawingState.IDLE
            return False

        raise ValueError(f"Unknown pointer event type: {event.type!r}")

    def feed(self, events, rect: BoundingRect = BoundingRect()) -> int:
        """Drive the machine from an iterable of events; returns segments drawn."""
        segments = 0
        for event in events:
            if self.handle(event, rect):
                segments += 1
        logger.debug(f"Pointer stream processed: {segments} segment(s), state={self.state.value}")
        return segments
