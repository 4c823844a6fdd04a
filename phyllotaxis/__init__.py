"""
Animated golden-angle (phyllotaxis) point patterns.

Usage::

    from phyllotaxis import PatternConfig, PatternGenerator, plot_pattern

    gen = PatternGenerator(PatternConfig(num_points=2000))
    gen.tick()
    fig, ax = plot_pattern(gen)
"""
from ._config import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    CONTROL_RANGES,
    GOLDEN_ANGLE,
    MAX_DISTANCE,
    MIN_DISTANCE,
    ControlRange,
    DrawStyle,
    PatternConfig,
    ShapeKind,
)
from ._animation import AnimationState, advance_distance, update_animation_state
from ._points import (
    PointDescriptor,
    PointSet,
    calculate_points,
    iter_points,
    map_range,
)
from ._rendering import FrameRenderer, draw_shapes, draw_status, hsb_to_rgba
from ._generator import PatternGenerator
from ._sketch import PhyllotaxisSketch, animate_pattern, plot_pattern

__version__ = "0.1.0"

__all__ = [
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "CONTROL_RANGES",
    "GOLDEN_ANGLE",
    "MAX_DISTANCE",
    "MIN_DISTANCE",
    "ControlRange",
    "DrawStyle",
    "PatternConfig",
    "ShapeKind",
    "AnimationState",
    "advance_distance",
    "update_animation_state",
    "PointDescriptor",
    "PointSet",
    "calculate_points",
    "iter_points",
    "map_range",
    "FrameRenderer",
    "draw_shapes",
    "draw_status",
    "hsb_to_rgba",
    "PatternGenerator",
    "PhyllotaxisSketch",
    "animate_pattern",
    "plot_pattern",
]
