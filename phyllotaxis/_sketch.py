"""
Interactive matplotlib front end.

The left 600x600 pixels of the figure are the canvas, the right hand column
holds one slider per numeric parameter and radio buttons for the shape kind
and draw style. A click on the canvas pauses or resumes the animation, key
``t`` cycles the shape kind and key ``d`` cycles the draw style.

Usage::

    from phyllotaxis import PhyllotaxisSketch

    sketch = PhyllotaxisSketch()
    sketch.show()

or, for an existing generator::

    fig, ax, anim = animate_pattern(gen, interval=16)
    pyplot.show()
"""
import os

from matplotlib import pyplot
from matplotlib.animation import FuncAnimation
from matplotlib.widgets import RadioButtons, Slider

from phyllotaxis._config import CONTROL_RANGES, DrawStyle, ShapeKind
from phyllotaxis._generator import PatternGenerator
from phyllotaxis._rendering import FrameRenderer

DPI = 100
PANEL_WIDTH = 300  # pixels, right hand control column

SHAPE_KEY = 't'
STYLE_KEY = 'd'


class PhyllotaxisSketch:
    def __init__(self, generator=None, interval=16, dpi=DPI):
        """
        Canvas, controls and frame loop around a ``PatternGenerator``.

        :param generator: PatternGenerator to drive, a default one if None.
        :param interval: Delay between frames in milliseconds.
        :param dpi: Figure resolution; the canvas is ``width/dpi`` inches.
        """
        self.gen = generator if generator is not None else PatternGenerator()
        self.config = self.gen.config
        self.interval = interval
        self.anim = None

        width, height = self.gen.width, self.gen.height
        fig_w = width + PANEL_WIDTH
        self.fig = pyplot.figure(figsize=(fig_w / dpi, height / dpi), dpi=dpi)
        self.ax = self.fig.add_axes([0, 0, width / fig_w, 1])
        self.renderer = FrameRenderer(self.ax, width, height)

        self._panel_left = (width + 30) / fig_w
        self._panel_width = (PANEL_WIDTH - 60) / fig_w
        self.sliders = {}
        self._build_sliders()
        self._build_radios()

        self.fig.canvas.mpl_connect('button_press_event', self._on_click)
        self.fig.canvas.mpl_connect('key_press_event', self._on_key)

        # First frame is drawn without advancing the state
        self.draw_frame(self.gen.compute())

    # Controls
    def _control_ax(self, top, height):
        """Axes in the control column; ``top``/``height`` in figure units."""
        return self.fig.add_axes([self._panel_left, top - height,
                                  self._panel_width, height])

    def _build_sliders(self):
        top = 0.95
        for name, rng in CONTROL_RANGES.items():
            ax = self._control_ax(top, 0.03)
            ax.set_title(rng.label, fontsize=9, loc='left')
            slider = Slider(ax, '', rng.vmin, rng.vmax,
                            valinit=getattr(self.config, name),
                            valstep=rng.step)
            slider.on_changed(self._slider_callback(name))
            self.sliders[name] = slider
            top -= 0.09
        self._radio_top = top

    def _slider_callback(self, name):
        def on_changed(val):
            self.config.set(name, val)
            self._redraw_if_paused()
        return on_changed

    def _build_radios(self):
        top = self._radio_top
        ax = self._control_ax(top, 0.15)
        ax.set_title('Shape Type', fontsize=9, loc='left')
        kinds = list(ShapeKind)
        self.shape_radio = RadioButtons(
            ax, [k.label for k in kinds],
            active=kinds.index(self.config.shape_kind))
        self.shape_radio.on_clicked(self._on_shape)

        ax = self._control_ax(top - 0.21, 0.15)
        ax.set_title('Drawing Style', fontsize=9, loc='left')
        styles = list(DrawStyle)
        self.style_radio = RadioButtons(
            ax, [s.label for s in styles],
            active=styles.index(self.config.draw_style))
        self.style_radio.on_clicked(self._on_style)

    def _on_shape(self, label):
        self.config.set('shape_kind', label.lower())
        self._redraw_if_paused()

    def _on_style(self, label):
        self.config.set('draw_style', label.lower())
        self._redraw_if_paused()

    def _redraw_if_paused(self):
        # A paused animation does not redraw by itself
        if not self.gen.is_animating:
            self.draw_frame(self.gen.compute())
            self.fig.canvas.draw_idle()

    # Events
    def _on_click(self, event):
        if event.inaxes is not self.ax:
            return
        animating = self.gen.toggle_animation()
        if self.anim is not None:
            if animating:
                self.anim.resume()
            else:
                self.anim.pause()

    def _on_key(self, event):
        if event.key == SHAPE_KEY:
            nxt = self.config.shape_kind.next()
            self.shape_radio.set_active(list(ShapeKind).index(nxt))
        elif event.key == STYLE_KEY:
            nxt = self.config.draw_style.next()
            self.style_radio.set_active(list(DrawStyle).index(nxt))

    # Frames
    def draw_frame(self, points):
        return self.renderer.render(points, self.config.draw_style,
                                    self.gen.status_lines())

    def _frame(self, _i):
        return self.draw_frame(self.gen.tick())

    def start(self):
        """Create the frame loop; frames run once the figure is shown."""
        if self.anim is None:
            self.anim = FuncAnimation(self.fig, self._frame,
                                      interval=self.interval, blit=False,
                                      cache_frame_data=False)
        return self.anim

    def show(self):
        self.start()
        pyplot.show()


def animate_pattern(generator=None, interval=16, dpi=DPI):
    """
    Build an interactive sketch and its ``FuncAnimation``.

    The caller must keep a reference to the returned animation object and
    call ``pyplot.show()``. The animation holds the sketch through its frame
    function, which keeps the widget callbacks alive.

    :return: (fig, ax, anim) tuple.
    """
    sketch = PhyllotaxisSketch(generator, interval=interval, dpi=dpi)
    anim = sketch.start()
    return sketch.fig, sketch.ax, anim


def plot_pattern(generator, fig=None, ax=None, show=False, save_fig=False,
                 strpath=None, plot_path='fig/', fig_name='phyllotaxis.png',
                 dpi=DPI):
    """
    Draw the current frame of ``generator`` without advancing it.

    :param generator: PatternGenerator to draw.
    :param fig: Optional figure; a canvas-sized one is created if None.
    :param ax: Optional Axes to use as canvas; fills ``fig`` if None.
    :param show: If True, call ``pyplot.show()``.
    :param save_fig: If True, save the figure to ``strpath``.
    :param strpath: Full path of the saved image. Defaults to
        ``plot_path + fig_name``.
    :return: (fig, ax) tuple.
    """
    if ax is None:
        if fig is None:
            fig = pyplot.figure(figsize=(generator.width / dpi,
                                         generator.height / dpi), dpi=dpi)
        ax = fig.add_axes([0, 0, 1, 1])
    elif fig is None:
        fig = ax.get_figure()

    # Drop a previous frame drawn on the same Axes
    for artist in list(ax.collections) + list(ax.texts):
        artist.remove()

    renderer = FrameRenderer(ax, generator.width, generator.height)
    renderer.render(generator.compute(), generator.config.draw_style,
                    generator.status_lines())

    if save_fig:
        if strpath is None:
            os.makedirs(plot_path, exist_ok=True)
            strpath = os.path.join(plot_path, fig_name)
        fig.savefig(strpath, dpi=dpi)

    if show:
        pyplot.show()

    return fig, ax
