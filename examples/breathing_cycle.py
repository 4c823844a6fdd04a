"""
Follow the spiral spacing through one full breathing cycle.

Steps the generator without drawing and prints the spacing whenever the
direction flips, then saves the frames at the two extremes.
"""
from matplotlib import pyplot

from phyllotaxis import PatternConfig, PatternGenerator, plot_pattern

gen = PatternGenerator(PatternConfig(num_points=2000, shape_kind='circle',
                                     draw_style='both'))

flips = []
direction = gen.state.direction
while len(flips) < 2:
    gen.tick()
    if gen.state.direction != direction:
        direction = gen.state.direction
        flips.append(gen.frame_count)
        print(f"frame {gen.frame_count}: spacing "
              f"{gen.state.distance_increment:.3f}, direction {direction:+d}")
        plot_pattern(gen, save_fig=True,
                     fig_name=f'breathing_{gen.frame_count:04d}.png')
        pyplot.close('all')

print(f"Full cycle: {flips[1]} frames")
