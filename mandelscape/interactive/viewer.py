"""
================================================================================
MANDELSCAPE - ANIMATED VIEWER
================================================================================

matplotlib render sink for the point-cloud pipeline: every ~33 ms the frame
loop produces a depth-sorted DrawableBatch, which is pushed into a single
scatter artist. Pointer motion over the canvas steers the camera.

Run: python -m mandelscape.cli view --profile terrain

================================================================================
"""

import logging
import time

import matplotlib.pyplot as plt
import matplotlib.animation as animation

from ..core.frame import DrawableBatch
from ..core.metrics import compute_frame_metrics
from ..core.profiles import VisualProfile
from .state import FRAME_INTERVAL_MS, FrameLoop

logger = logging.getLogger(__name__)

# =============================================================================
# STYLING
# =============================================================================

DARK_BG = '#0a0a1a'
TEXT_DIM = '#666666'

VIEWBOX_HALF_WIDTH = 400
VIEWBOX_HALF_HEIGHT = 300

METRICS_EVERY = 15  # frames


class MandelscapeViewer:
    """
    Animated pseudo-3D Mandelbrot viewer.
    """

    def __init__(self, profile: VisualProfile):
        self.profile = profile
        self.loop = FrameLoop(profile)
        self.anim = None
        self.start = None
        self.metrics = None

        self._setup_figure()

    def _setup_figure(self):
        width, height = self.profile.camera.viewport
        self.fig = plt.figure(figsize=(width / 100, height / 100))
        self.fig.patch.set_facecolor(DARK_BG)

        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.ax.set_facecolor(DARK_BG)
        self.ax.set_xlim(-VIEWBOX_HALF_WIDTH, VIEWBOX_HALF_WIDTH)
        # Screen y grows downward, like an SVG viewBox
        self.ax.set_ylim(VIEWBOX_HALF_HEIGHT, -VIEWBOX_HALF_HEIGHT)
        self.ax.set_aspect('equal')
        self.ax.axis('off')

        size = (2 * self.profile.point_radius) ** 2
        self.scatter = self.ax.scatter([], [], s=size, linewidths=0,
                                       alpha=self.profile.opacity)

        self.info_text = self.fig.text(0.01, 0.01, '', color=TEXT_DIM,
                                       fontsize=8, family='monospace')

        self.fig.canvas.mpl_connect('motion_notify_event', self._on_motion)

    # -------------------------------------------------------------------------
    # CALLBACKS
    # -------------------------------------------------------------------------

    def _on_motion(self, event):
        """Translate canvas pixels (origin bottom-left) to client coordinates."""
        if event.x is None or event.y is None:
            return
        canvas_w, canvas_h = self.fig.canvas.get_width_height()
        view_w, view_h = self.profile.camera.viewport
        client_x = event.x / canvas_w * view_w
        client_y = (canvas_h - event.y) / canvas_h * view_h
        self.loop.pointer_moved(client_x, client_y)

    def _animate_frame(self, frame):
        now = (time.perf_counter() - self.start) * 1000.0
        batch = self.loop.tick(now)
        self._draw(batch)

        if frame % METRICS_EVERY == 0:
            self.metrics = compute_frame_metrics(batch.cloud, self.profile)
        self._update_info()
        return self.scatter, self.info_text

    def _draw(self, batch: DrawableBatch):
        self.scatter.set_offsets(batch.offsets)
        self.scatter.set_facecolors(batch.colors.tolist())

    def _update_info(self):
        state = self.loop.state
        rot = state.current_rotation
        info = (f"t={state.time / 1000:6.1f}s  pitch={rot.pitch:+.2f} "
                f"yaw={rot.yaw:+.2f} roll={rot.roll:+.2f}")
        if self.metrics is not None:
            info += (f"  |  region {self.metrics.region}  "
                     f"interior {self.metrics.interior_fraction:.2f}  "
                     f"islands {self.metrics.island_count}")
        self.info_text.set_text(info)

    def run(self):
        """Run the viewer."""
        logger.info(f"Profile '{self.profile.name}': {self.profile.lattice_size}x"
                    f"{self.profile.lattice_size} lattice, max_iter={self.profile.max_iter}, "
                    f"{self.profile.projection} projection")
        self.start = time.perf_counter()
        self.anim = animation.FuncAnimation(
            self.fig, self._animate_frame,
            interval=FRAME_INTERVAL_MS, blit=False, cache_frame_data=False
        )
        plt.show()
