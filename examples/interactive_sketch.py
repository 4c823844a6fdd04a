"""
Interactive phyllotaxis sketch.

Sliders on the right control the shape count, size, rotation speed, hue
speed and colour range; the radio buttons pick the shape and draw style.
Click the canvas to pause/resume, press ``t`` / ``d`` to cycle the shape
and the draw style.
"""
from phyllotaxis import PatternConfig, PatternGenerator, PhyllotaxisSketch

gen = PatternGenerator(PatternConfig(num_points=3000, shape_size=5))
sketch = PhyllotaxisSketch(gen, interval=16)
sketch.show()
