"""
Draw dispatch onto a matplotlib Axes used as the canvas.

The canvas is an Axes spanning ``[0, width] x [0, height]`` with the y axis
pointing down, so positions computed in screen convention are drawn as is.
A whole frame is a single artist collection (one per shape kind) plus the
status text, and ``FrameRenderer`` swaps these out every frame.
"""
from __future__ import annotations

from typing import List, Sequence

import numpy as np
from matplotlib.collections import EllipseCollection, PolyCollection
from matplotlib.colors import hsv_to_rgb

from phyllotaxis._config import (
    BACKGROUND_HSB, CANVAS_HEIGHT, CANVAS_WIDTH, TEXT_HSB, DrawStyle,
    ShapeKind,
)
from phyllotaxis._points import PointSet
from phyllotaxis._shapes import square_vertices, triangle_vertices


def hsb_to_rgba(hue, saturation, brightness, alpha=100):
    """Convert HSB colours to RGBA.

    :param hue: Degrees in [0, 360), scalar or array of shape (N,).
    :param saturation: Percent in [0, 100], scalar or (N,).
    :param brightness: Percent in [0, 100], scalar or (N,).
    :param alpha: Percent in [0, 100], scalar or (N,).
    :return: Array of shape (4,) for scalar input, else (N, 4), in [0, 1].
    """
    hue, saturation, brightness, alpha = np.broadcast_arrays(
        np.asarray(hue, dtype=float) % 360 / 360,
        np.asarray(saturation, dtype=float) / 100,
        np.asarray(brightness, dtype=float) / 100,
        np.asarray(alpha, dtype=float) / 100,
    )
    hsv = np.stack((hue, saturation, brightness), axis=-1)
    rgb = hsv_to_rgb(np.clip(hsv, 0, 1))
    return np.concatenate((rgb, np.clip(alpha, 0, 1)[..., np.newaxis]),
                          axis=-1)


def style_colors(points: PointSet, draw_style: DrawStyle):
    """Face colours, edge colours and line width for ``draw_style``.

    Disabled fill or stroke is returned as ``'none'``.
    """
    draw_style = DrawStyle(draw_style)
    if draw_style.fill:
        facecolors = hsb_to_rgba(points.hue, points.saturation,
                                 points.brightness, points.fill_alpha)
    else:
        facecolors = 'none'

    if draw_style.stroke:
        edgecolors = hsb_to_rgba(points.hue, points.saturation,
                                 points.brightness, points.stroke_alpha)
        linewidths = 1.0
    else:
        edgecolors = 'none'
        linewidths = 0.0
    return facecolors, edgecolors, linewidths


def draw_shapes(ax, points: PointSet, draw_style: DrawStyle):
    """
    Draw every point of ``points`` as its shape kind.

    :param ax: Canvas Axes.
    :param points: The frame's PointSet.
    :param draw_style: Which of fill and stroke are active.
    :return: The collection added to ``ax``.
    """
    facecolors, edgecolors, linewidths = style_colors(points, draw_style)
    style = dict(facecolors=facecolors, edgecolors=edgecolors,
                 linewidths=linewidths)

    kind = ShapeKind(points.shape_kind)
    if kind is ShapeKind.SQUARE:
        verts = square_vertices(points.x, points.y, points.size,
                                points.rotation)
        coll = PolyCollection(verts, closed=True, **style)
    elif kind is ShapeKind.CIRCLE:
        diameters = np.full(len(points), float(points.size))
        coll = EllipseCollection(diameters, diameters,
                                 np.zeros(len(points)), units='xy',
                                 offsets=points.offsets,
                                 offset_transform=ax.transData, **style)
    elif kind is ShapeKind.TRIANGLE:
        verts = triangle_vertices(points.x, points.y, points.size)
        coll = PolyCollection(verts, closed=True, **style)
    else:
        raise ValueError(f"No draw routine for shape kind {kind!r}")

    ax.add_collection(coll, autolim=False)
    return coll


def draw_status(ax, lines: Sequence[str], height: float = CANVAS_HEIGHT,
                fontsize: float = 14) -> list:
    """Write ``lines`` bottom-up from the lower left corner of the canvas.

    The first line sits 10 units above the bottom edge, each following
    line 20 units higher.
    """
    color = hsb_to_rgba(*TEXT_HSB)
    texts = []
    for k, line in enumerate(lines):
        texts.append(ax.text(10, height - 10 - 20 * k, line, color=color,
                             fontsize=fontsize, ha='left', va='baseline'))
    return texts


def setup_canvas(ax, width: float = CANVAS_WIDTH,
                 height: float = CANVAS_HEIGHT):
    """Turn ``ax`` into a blank ``width`` x ``height`` canvas, y down."""
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')
    ax.set_facecolor(hsb_to_rgba(*BACKGROUND_HSB))
    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)
    return ax


class FrameRenderer:
    """Immediate-mode style drawing on a persistent Axes.

    Every call to ``render`` removes the artists of the previous frame
    before drawing the new one.
    """

    def __init__(self, ax, width: float = CANVAS_WIDTH,
                 height: float = CANVAS_HEIGHT):
        self.ax = setup_canvas(ax, width, height)
        self.width = width
        self.height = height
        self.artists: List = []

    def clear(self):
        for artist in self.artists:
            artist.remove()
        self.artists = []

    def render(self, points: PointSet, draw_style: DrawStyle,
               status_lines: Sequence[str] = ()) -> list:
        self.clear()
        self.artists.append(draw_shapes(self.ax, points, draw_style))
        self.artists.extend(draw_status(self.ax, status_lines, self.height))
        return self.artists
