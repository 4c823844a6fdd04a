"""
Frame-to-frame animation of the spiral parameters.

The radial spacing of the spiral oscillates between ``MIN_DISTANCE`` and
``MAX_DISTANCE``; it moves slowly near the minimum and speeds up towards
the maximum (quadratic in the normalised position). The angular, square
rotation and hue offsets advance linearly and wrap at 360 degrees.
"""
from __future__ import annotations

import dataclasses

from phyllotaxis._config import (
    ANIMATION_SPEED, MAX_DISTANCE, MIN_DISTANCE, SPEED_MULTIPLIER,
)


@dataclasses.dataclass
class AnimationState:
    """Scalar state advanced once per animated frame."""
    distance_increment: float = MIN_DISTANCE
    direction: int = 1
    angular_offset: float = 0.0
    square_rotation_offset: float = 0.0
    hue_offset: float = 0.0


def distance_speed(distance: float,
                   min_distance: float = MIN_DISTANCE,
                   max_distance: float = MAX_DISTANCE,
                   base_speed: float = ANIMATION_SPEED) -> float:
    """Per-frame change of the spacing at ``distance``."""
    norm = (distance - min_distance) / (max_distance - min_distance)
    return base_speed * (0.4 + 0.6 * norm * norm) * SPEED_MULTIPLIER


def advance_distance(distance: float, direction: int,
                     min_distance: float = MIN_DISTANCE,
                     max_distance: float = MAX_DISTANCE,
                     base_speed: float = ANIMATION_SPEED):
    """
    Move the spiral spacing one frame along ``direction``.

    :param distance: Current spacing.
    :param direction: +1 (growing) or -1 (shrinking).
    :return: ``(distance, direction)`` after the step. Reaching either
        bound clamps to it and reverses the direction.
    """
    distance += distance_speed(distance, min_distance, max_distance,
                               base_speed) * direction

    if distance >= max_distance:
        return max_distance, -1
    elif distance <= min_distance:
        return min_distance, 1
    return distance, direction


def update_animation_state(state: AnimationState, rotation_speed: float,
                           hue_speed: float) -> AnimationState:
    """
    Compute the state of the next frame.

    :param state: State of the current frame, left untouched.
    :param rotation_speed: Degrees per frame for the spiral; squares turn
        at twice this rate.
    :param hue_speed: Degrees per frame for the hue cycle.
    :return: A new ``AnimationState``.
    """
    distance, direction = advance_distance(state.distance_increment,
                                           state.direction)
    return AnimationState(
        distance_increment=distance,
        direction=direction,
        angular_offset=(state.angular_offset + rotation_speed) % 360,
        square_rotation_offset=(state.square_rotation_offset
                                + rotation_speed * 2) % 360,
        hue_offset=(state.hue_offset + hue_speed) % 360,
    )
