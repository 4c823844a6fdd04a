"""Benchmark suite for per-frame cost.

Uses pytest-benchmark. Run with:
    pytest phyllotaxis/tests/test_benchmarks.py --benchmark-only

Skip during normal test runs:
    pytest --benchmark-skip
"""
import matplotlib
matplotlib.use('Agg')  # Must be before pyplot import for headless rendering

import pytest

pytest.importorskip("pytest_benchmark")

from matplotlib import pyplot

from phyllotaxis._animation import AnimationState
from phyllotaxis._config import PatternConfig
from phyllotaxis._generator import PatternGenerator
from phyllotaxis._points import calculate_points, iter_points
from phyllotaxis._rendering import FrameRenderer


@pytest.fixture(autouse=True)
def cleanup_figures():
    yield
    pyplot.close('all')


class TestBenchPoints:
    """Benchmark the point-sequence computation."""

    @pytest.mark.parametrize("n", [100, 1000, 5000])
    def test_bench_calculate_points(self, benchmark, n):
        state = AnimationState(distance_increment=0.5)
        cfg = PatternConfig(num_points=n)
        pts = benchmark(calculate_points, state, cfg)
        assert len(pts) == n

    def test_bench_iter_points(self, benchmark):
        state = AnimationState(distance_increment=0.5)
        cfg = PatternConfig(num_points=3000)
        out = benchmark(lambda: list(iter_points(state, cfg)))
        assert len(out) == 3000

    def test_bench_tick(self, benchmark):
        gen = PatternGenerator()
        benchmark(gen.tick)
        assert gen.frame_count > 0


class TestBenchRender:
    """Benchmark one full frame including the Agg draw."""

    @pytest.mark.parametrize("kind", ['square', 'circle', 'triangle'])
    def test_bench_frame(self, benchmark, kind):
        gen = PatternGenerator(PatternConfig(shape_kind=kind,
                                             draw_style='both'))
        fig, ax = pyplot.subplots(figsize=(6, 6), dpi=100)
        renderer = FrameRenderer(ax)

        def run():
            renderer.render(gen.tick(), gen.config.draw_style,
                            gen.status_lines())
            fig.canvas.draw()

        benchmark(run)
        assert len(ax.collections) == 1
