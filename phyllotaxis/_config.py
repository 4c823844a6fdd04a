"""
Pattern configuration: constants, control ranges and user parameters.

``PatternConfig`` holds everything the UI layer can change. The generator
only ever reads it. Numeric values are clamped and snapped to the step of
the matching control the same way a slider would, so a config built in code
can never leave the ranges the interactive sketch offers.
"""
from __future__ import annotations

import dataclasses
import enum
import logging
from typing import NamedTuple

# Canvas
CANVAS_WIDTH = 600
CANVAS_HEIGHT = 600

# Spiral geometry
GOLDEN_ANGLE = 137.5  # degrees

# Distance oscillation
MIN_DISTANCE = 0.1
MAX_DISTANCE = 1.0
ANIMATION_SPEED = 0.01
SPEED_MULTIPLIER = 2.5

# Colour, HSB with hue in [0, 360) and the rest in [0, 100]
SATURATION = 90
BRIGHTNESS = 100
FILL_ALPHA = 10
STROKE_ALPHA = 30
BACKGROUND_HSB = (220, 10, 10)
TEXT_HSB = (0, 0, 100)


class ShapeKind(str, enum.Enum):
    SQUARE = 'square'
    CIRCLE = 'circle'
    TRIANGLE = 'triangle'

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def next(self) -> ShapeKind:
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]


class DrawStyle(str, enum.Enum):
    FILLED = 'filled'
    OUTLINE = 'outline'
    BOTH = 'both'

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def fill(self) -> bool:
        return self in (DrawStyle.FILLED, DrawStyle.BOTH)

    @property
    def stroke(self) -> bool:
        return self in (DrawStyle.OUTLINE, DrawStyle.BOTH)

    def next(self) -> DrawStyle:
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]


class ControlRange(NamedTuple):
    """Bounds and step of one slider control."""
    label: str
    vmin: float
    vmax: float
    step: float

    def clamp(self, value: float) -> float:
        """Clamp ``value`` into ``[vmin, vmax]`` and snap it to ``step``.

        :param value: Raw value.
        :return: The value a slider with this range would hold.
        """
        value = min(max(float(value), self.vmin), self.vmax)
        n_steps = round((value - self.vmin) / self.step)
        # Round off float noise from the step multiplication (0.1 * 3 etc.)
        snapped = round(self.vmin + n_steps * self.step, 10)
        return min(snapped, self.vmax)


CONTROL_RANGES = {
    'num_points': ControlRange('Number of Shapes', 100, 5000, 100),
    'shape_size': ControlRange('Shape Size', 1, 60, 1),
    'rotation_speed': ControlRange('Rotation Speed', 0, 2, 0.1),
    'hue_speed': ControlRange('Hue Speed', 0, 5, 0.1),
    'hue_range': ControlRange('Color Range', 0, 180, 5),
}

_INTEGER_FIELDS = ('num_points', 'shape_size')


@dataclasses.dataclass
class PatternConfig:
    """User-adjustable pattern parameters.

    :param num_points: Number of shapes drawn, [100, 5000] step 100.
    :param shape_size: Side length / diameter of every shape, [1, 60].
    :param rotation_speed: Degrees per frame the spiral turns, [0, 2].
    :param hue_speed: Degrees per frame the hue drifts, [0, 5].
    :param hue_range: Hue span from the centre to the canvas edge, [0, 180].
    :param shape_kind: ``ShapeKind`` or its string value.
    :param draw_style: ``DrawStyle`` or its string value.
    """
    num_points: int = 3000
    shape_size: int = 5
    rotation_speed: float = 0.2
    hue_speed: float = 0.1
    hue_range: float = 60
    shape_kind: ShapeKind = ShapeKind.SQUARE
    draw_style: DrawStyle = DrawStyle.FILLED

    def __post_init__(self):
        for name in CONTROL_RANGES:
            setattr(self, name, self._checked(name, getattr(self, name)))
        # Unknown values raise ValueError here
        self.shape_kind = ShapeKind(self.shape_kind)
        self.draw_style = DrawStyle(self.draw_style)

    def _checked(self, name, value):
        clamped = CONTROL_RANGES[name].clamp(value)
        if name in _INTEGER_FIELDS:
            clamped = int(clamped)
        # Slider values carry float noise from the step, only report
        # real adjustments
        if abs(clamped - float(value)) > 1e-9:
            logging.warning(f"{name}={value!r} is outside the control range "
                            f"or step, using {clamped!r} instead.")
        return clamped

    def set(self, name: str, value) -> None:
        """Assign one parameter the way a UI control would.

        :param name: Field name, ex. ``'num_points'`` or ``'shape_kind'``.
        :param value: New value, clamped for numeric fields and coerced
            for the enum fields.
        """
        if name in CONTROL_RANGES:
            setattr(self, name, self._checked(name, value))
        elif name == 'shape_kind':
            self.shape_kind = ShapeKind(value)
        elif name == 'draw_style':
            self.draw_style = DrawStyle(value)
        else:
            raise KeyError(f"Unknown pattern parameter {name!r}")
