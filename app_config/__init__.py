"""
Configuration package for Lil Fast.
Centralizes all tunable parameters and constants.
"""

from .constants import (
    CanvasConfig,
    BrushConfig,
    InferenceConfig,
    PerformanceConfig
)

__all__ = [
    'CanvasConfig',
    'BrushConfig',
    'InferenceConfig',
    'PerformanceConfig'
]
