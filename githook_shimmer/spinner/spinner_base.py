"""
Base spinner implementation to be extended for different output modes.
"""

from abc import ABC, abstractmethod
from typing import List

from githook_shimmer.config import ShimmerSettings
from githook_shimmer.spinner.styles import get_spinner_frames


class SpinnerBase(ABC):
    """Abstract base class for spinner implementations."""

    def __init__(self, settings: ShimmerSettings):
        """Initialize the spinner."""
        self.settings = settings
        self.frames: List[str] = get_spinner_frames(settings.spinner_style)
        self._is_spinning = False
        self._frame_index = 0

    @abstractmethod
    def start(self):
        """Start the spinner animation."""
        self._is_spinning = True
        self._frame_index = 0

    @abstractmethod
    def stop(self):
        """Stop the spinner animation."""
        self._is_spinning = False

    @abstractmethod
    def update_frame(self):
        """Advance to the next spinner glyph."""
        if self._is_spinning:
            self._frame_index = (self._frame_index + 1) % len(self.frames)

    @property
    def current_frame(self) -> str:
        """Get the current frame."""
        return self.frames[self._frame_index]

    @property
    def is_spinning(self) -> bool:
        """Check if the spinner is currently spinning."""
        return self._is_spinning
