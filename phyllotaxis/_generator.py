"""
The pattern generator: owns the animation state and produces frames.

An external scheduler (``FuncAnimation`` in the interactive sketch, a plain
loop in scripts and tests) calls ``PatternGenerator.tick`` once per frame.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from phyllotaxis._animation import AnimationState, update_animation_state
from phyllotaxis._config import CANVAS_HEIGHT, CANVAS_WIDTH, PatternConfig
from phyllotaxis._points import PointSet, calculate_points

HINT_LINE = "Click canvas to toggle animation"


class PatternGenerator:
    def __init__(self, config: Optional[PatternConfig] = None,
                 state: Optional[AnimationState] = None,
                 width: float = CANVAS_WIDTH, height: float = CANVAS_HEIGHT,
                 animating: bool = True):
        """
        Golden-angle spiral generator.

        :param config: Pattern parameters shared with the UI layer. The
            generator reads it every frame and never writes to it.
        :param state: Initial animation state, a fresh ``AnimationState``
            if None.
        :param width: Canvas width in pixels.
        :param height: Canvas height in pixels.
        :param animating: Whether ``tick`` advances the state initially.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas must have a positive size, got "
                             f"{width}x{height}")
        self.config = config if config is not None else PatternConfig()
        self.state = state if state is not None else AnimationState()
        self.width = width
        self.height = height
        self.is_animating = animating
        self.frame_count = 0
        self.points = None

    @property
    def center(self):
        return self.width / 2, self.height / 2

    def update(self) -> AnimationState:
        """Advance the animation state by one frame, if animating."""
        if self.is_animating:
            self.state = update_animation_state(self.state,
                                                self.config.rotation_speed,
                                                self.config.hue_speed)
            self.frame_count += 1
        return self.state

    def compute(self) -> PointSet:
        """Point sequence for the current state without advancing it."""
        self.points = calculate_points(self.state, self.config,
                                       center=self.center, width=self.width)
        return self.points

    def tick(self) -> PointSet:
        """One frame: update the state (when animating), then recompute."""
        self.update()
        return self.compute()

    def toggle_animation(self) -> bool:
        """Flip ``is_animating``; the state is frozen, never reset."""
        self.is_animating = not self.is_animating
        logging.info(f"Animation {'resumed' if self.is_animating else 'paused'}"
                     f" at frame {self.frame_count}")
        return self.is_animating

    def status_lines(self) -> List[str]:
        """Overlay text, bottom line first."""
        return [
            f"Distance: {self.state.distance_increment:.3f} | "
            f"Shapes: {self.config.num_points} | "
            f"Type: {self.config.shape_kind.value}",
            HINT_LINE,
        ]
