"""
Exception types raised by the sketch compositing core.
"""


class SketchError(Exception):
    """Base class for errors raised by sketch_core."""


class SurfaceNotInitializedError(SketchError, RuntimeError):
    """A stroke operation ran before StrokeSurface.initialize().

    This is an integration bug, not a runtime condition, so callers are not
    expected to recover from it.
    """
