"""
Vertex geometry of the polygonal shape kinds.

Each function takes ``(N,)`` arrays of centres and returns an
``(N, k, 2)`` array of polygon vertices in canvas coordinates, ready for a
``matplotlib.collections.PolyCollection``. Circles are not polygons and are
drawn directly as an ellipse collection.
"""
from __future__ import annotations

import numpy as np

# Unit square corners around the origin, counter-clockwise
_SQUARE = np.array([[-0.5, -0.5],
                    [0.5, -0.5],
                    [0.5, 0.5],
                    [-0.5, 0.5]])

# Equilateral triangle on the unit circle, first vertex straight up the
# canvas (canvas y grows downward)
_TRIANGLE_ANGLES = 2 * np.pi * np.arange(3) / 3 - np.pi / 2
_TRIANGLE = np.column_stack((np.cos(_TRIANGLE_ANGLES),
                             np.sin(_TRIANGLE_ANGLES)))


def square_vertices(x: np.ndarray, y: np.ndarray, size: float,
                    rotation: np.ndarray) -> np.ndarray:
    """Centred squares of side ``size``, each rotated by ``rotation`` (rad).

    :param x: Centre x coordinates, shape (N,).
    :param y: Centre y coordinates, shape (N,).
    :param size: Side length.
    :param rotation: Rotation angles in radians, shape (N,) or scalar.
    :return: Vertices of shape (N, 4, 2).
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    rotation = np.broadcast_to(np.asarray(rotation, dtype=float), x.shape)

    cos_r = np.cos(rotation)[:, np.newaxis]
    sin_r = np.sin(rotation)[:, np.newaxis]
    dx = _SQUARE[np.newaxis, :, 0] * size
    dy = _SQUARE[np.newaxis, :, 1] * size

    vx = x[:, np.newaxis] + dx * cos_r - dy * sin_r
    vy = y[:, np.newaxis] + dx * sin_r + dy * cos_r
    return np.stack((vx, vy), axis=-1)


def triangle_vertices(x: np.ndarray, y: np.ndarray,
                      size: float) -> np.ndarray:
    """Unrotated equilateral triangles inscribed in radius ``size / 2``.

    :return: Vertices of shape (N, 3, 2).
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    r = size / 2
    centres = np.stack((x, y), axis=-1)[:, np.newaxis, :]
    return centres + _TRIANGLE[np.newaxis, :, :] * r
