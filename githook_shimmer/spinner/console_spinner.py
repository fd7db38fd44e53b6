"""
Console spinner that redraws a shimmering status line with Rich ``Live``.
"""

import logging
import threading
import time
from typing import Callable, Optional, TypeVar

from rich.console import Console
from rich.live import Live
from rich.style import Style
from rich.text import Text

from githook_shimmer.config import ShimmerSettings
from githook_shimmer.spinner.shimmer import ShimmerRenderer
from githook_shimmer.spinner.spinner_base import SpinnerBase

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConsoleSpinner(SpinnerBase):
    """Spinner glyph plus shimmer text, redrawn in place at ``settings.fps``.

    The clock is injected so the sweep can be driven from any monotonic
    source. Frames are redrawn from a single background thread.
    """

    def __init__(
        self,
        settings: Optional[ShimmerSettings] = None,
        console: Optional[Console] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(settings or ShimmerSettings())
        self.console = console or Console()
        self._clock = clock
        self._renderer = ShimmerRenderer(self.settings.shimmer)
        self._spinner_style = Style(color=self.settings.spinner_color)
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._lock = threading.Lock()
        self._live: Optional[Live] = None
        self._paused = False
        self.sweep_start: Optional[float] = None

    def start(self):
        """Start the spinner animation on a background thread."""
        if self._thread is not None:
            return
        super().start()
        self.sweep_start = self._clock()
        self._paused = False
        self._stop_event.clear()
        with self._lock:
            self._start_live()
        self._thread = threading.Thread(
            target=self._run, name="githook-shimmer-spinner", daemon=True
        )
        self._thread.start()
        logger.debug("Console spinner started")

    def stop(self):
        """Stop the animation and clear the status line."""
        if self._thread is None and not self._is_spinning:
            return
        super().stop()
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=max(1.0, 2 * self.settings.frame_interval))
            self._thread = None
        with self._lock:
            self._stop_live()
        logger.debug("Console spinner stopped")

    def update_frame(self):
        super().update_frame()

    def pause(self):
        """Take the status line off screen, e.g. while the hook prints output."""
        with self._lock:
            self._paused = True
            self._stop_live()

    def resume(self):
        """Bring the status line back after ``pause``."""
        with self._lock:
            if not self._paused:
                return
            self._paused = False
            if self._is_spinning:
                self._start_live()

    def run(self, func: Callable[..., T], *args, **kwargs) -> T:
        """Call ``func`` with the spinner running, returning its result."""
        with self:
            return func(*args, **kwargs)

    def _start_live(self):
        if self._live is not None:
            return
        self._live = Live(
            self._generate_status_line(),
            console=self.console,
            auto_refresh=False,
            transient=True,
        )
        self._live.start(refresh=True)

    def _stop_live(self):
        if self._live is None:
            return
        try:
            self._live.stop()
        finally:
            self._live = None

    def _generate_status_line(self) -> Text:
        """Build the current frame: spinner glyph, a space, shimmer text."""
        if self._paused:
            return Text("")
        sweep_start = self.sweep_start if self.sweep_start is not None else self._clock()
        shimmer = self._renderer.render_text(
            self.settings.status_text, self._clock(), sweep_start
        )
        return Text.assemble(Text(self.current_frame, style=self._spinner_style), " ", shimmer)

    def _run(self):
        interval = self.settings.frame_interval
        try:
            while not self._stop_event.is_set():
                with self._lock:
                    if self._live is not None and not self._paused:
                        self._live.update(self._generate_status_line(), refresh=True)
                self.update_frame()
                self._stop_event.wait(interval)
        except Exception:
            logger.exception("Console spinner crashed, stopping animation")

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
