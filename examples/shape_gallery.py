"""
Every shape kind in every draw style, side by side.

All nine panels share one animation state, so only the draw dispatch
differs between them.
"""
import matplotlib.pyplot as plt

from phyllotaxis import (
    AnimationState, DrawStyle, PatternConfig, PatternGenerator, ShapeKind,
    plot_pattern,
)

state = AnimationState(distance_increment=0.35, angular_offset=20.0,
                       square_rotation_offset=40.0, hue_offset=180.0)

fig, axes = plt.subplots(3, 3, figsize=(9, 9))
for row, kind in enumerate(ShapeKind):
    for col, style in enumerate(DrawStyle):
        cfg = PatternConfig(num_points=1500, shape_size=12, hue_range=120,
                            shape_kind=kind, draw_style=style)
        gen = PatternGenerator(cfg, state=state, animating=False)
        plot_pattern(gen, fig=fig, ax=axes[row, col])
        axes[row, col].set_title(f"{kind.label} / {style.label}",
                                 fontsize=9)

plt.tight_layout()
plt.show()
