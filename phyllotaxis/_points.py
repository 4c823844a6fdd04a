"""
Point-sequence computation for the golden-angle spiral.

Point ``i`` sits at radius ``i * d`` and angle ``offset + i * 137.5``
degrees around the centre (Vogel's model of a sunflower head). Its hue
depends on its distance from the centre, and squares are additionally
rotated by an amount that grows with ``i``.

Two equivalent forms are provided:

- ``calculate_points``: vectorised with numpy, returns a ``PointSet`` of
  arrays for the whole frame. Used for drawing.
- ``iter_points``: plain generator yielding one ``PointDescriptor`` per
  point, mostly useful for inspection and tests.

Usage::

    from phyllotaxis import AnimationState, PatternConfig, calculate_points

    pts = calculate_points(AnimationState(), PatternConfig(num_points=500))
    for p in pts:
        print(p.index, p.x, p.y, p.hue)
"""
from __future__ import annotations

import dataclasses
import math
from typing import Iterator, Optional, Tuple

import numpy as np

from phyllotaxis._animation import AnimationState
from phyllotaxis._config import (
    BRIGHTNESS, CANVAS_HEIGHT, CANVAS_WIDTH, FILL_ALPHA, GOLDEN_ANGLE,
    SATURATION, STROKE_ALPHA, PatternConfig, ShapeKind,
)


@dataclasses.dataclass(frozen=True)
class PointDescriptor:
    """One shape of one frame."""
    index: int
    x: float
    y: float
    size: float
    rotation: float  # radians, only used by squares
    hue: float
    saturation: float
    brightness: float
    fill_alpha: float
    stroke_alpha: float
    shape_kind: ShapeKind


@dataclasses.dataclass
class PointSet:
    """All shapes of one frame as parallel arrays.

    ``x``, ``y``, ``hue`` and ``rotation`` have shape ``(N,)``; the
    remaining colour fields and ``size`` are shared by every point.
    """
    x: np.ndarray
    y: np.ndarray
    hue: np.ndarray
    rotation: np.ndarray
    size: float
    shape_kind: ShapeKind
    saturation: float = SATURATION
    brightness: float = BRIGHTNESS
    fill_alpha: float = FILL_ALPHA
    stroke_alpha: float = STROKE_ALPHA

    def __len__(self):
        return len(self.x)

    def __iter__(self) -> Iterator[PointDescriptor]:
        for i in range(len(self)):
            yield self[i]

    def __getitem__(self, i: int) -> PointDescriptor:
        return PointDescriptor(
            index=range(len(self))[i],
            x=float(self.x[i]),
            y=float(self.y[i]),
            size=self.size,
            rotation=float(self.rotation[i]),
            hue=float(self.hue[i]),
            saturation=self.saturation,
            brightness=self.brightness,
            fill_alpha=self.fill_alpha,
            stroke_alpha=self.stroke_alpha,
            shape_kind=self.shape_kind,
        )

    @property
    def offsets(self) -> np.ndarray:
        """Positions as an ``(N, 2)`` array."""
        return np.column_stack((self.x, self.y))


def map_range(value, start1, stop1, start2, stop2):
    """Linearly re-map ``value`` from one range to another (unclamped).

    Works on scalars and numpy arrays alike.
    """
    return start2 + (stop2 - start2) * ((value - start1) / (stop1 - start1))


def _resolve_canvas(center, width):
    if width is None:
        width = CANVAS_WIDTH
    if center is None:
        center = (width / 2, CANVAS_HEIGHT / 2)
    return center, width


def calculate_points(state: AnimationState, config: PatternConfig,
                     center: Optional[Tuple[float, float]] = None,
                     width: Optional[float] = None) -> PointSet:
    """
    Compute every shape of the current frame.

    :param state: Current animation state.
    :param config: Pattern parameters (read only).
    :param center: Spiral centre in canvas coordinates, defaults to the
        centre of a ``CANVAS_WIDTH`` x ``CANVAS_HEIGHT`` canvas.
    :param width: Canvas width; the hue reaches ``hue_range`` at
        ``width / 2`` from the centre.
    :return: PointSet with ``config.num_points`` entries.
    """
    (cx, cy), width = _resolve_canvas(center, width)
    n = max(int(config.num_points), 0)
    # Zero points (a config assigned directly, bypassing the clamp) is an
    # empty frame
    step = 360 / n if n > 0 else 0.0
    i = np.arange(n, dtype=float)

    distance = i * state.distance_increment
    angle = np.radians(state.angular_offset + i * GOLDEN_ANGLE)
    x = cx + np.cos(angle) * distance
    y = cy + np.sin(angle) * distance

    dist_from_center = np.hypot(x - cx, y - cy)
    hue = (state.hue_offset
           + map_range(dist_from_center, 0, width / 2, 0, config.hue_range)
           ) % 360

    rotation = np.radians(state.square_rotation_offset
                          + i * step * 0.5)

    return PointSet(x=x, y=y, hue=hue, rotation=rotation,
                    size=config.shape_size, shape_kind=config.shape_kind)


def iter_points(state: AnimationState, config: PatternConfig,
                center: Optional[Tuple[float, float]] = None,
                width: Optional[float] = None) -> Iterator[PointDescriptor]:
    """Scalar generator form of ``calculate_points``.

    Each call starts a fresh pass over ``range(config.num_points)``.
    """
    (cx, cy), width = _resolve_canvas(center, width)
    n = max(int(config.num_points), 0)
    # Zero points (a config assigned directly, bypassing the clamp) is an
    # empty frame
    step = 360 / n if n > 0 else 0.0
    for i in range(n):
        distance = i * state.distance_increment
        angle = math.radians(state.angular_offset + i * GOLDEN_ANGLE)
        x = cx + math.cos(angle) * distance
        y = cy + math.sin(angle) * distance

        dist_from_center = math.hypot(x - cx, y - cy)
        hue = (state.hue_offset
               + map_range(dist_from_center, 0, width / 2, 0,
                           config.hue_range)) % 360

        yield PointDescriptor(
            index=i,
            x=x,
            y=y,
            size=config.shape_size,
            rotation=math.radians(state.square_rotation_offset
                                  + i * step * 0.5),
            hue=hue,
            saturation=SATURATION,
            brightness=BRIGHTNESS,
            fill_alpha=FILL_ALPHA,
            stroke_alpha=STROKE_ALPHA,
            shape_kind=config.shape_kind,
        )
