"""
Spinner and shimmer animation for git hook status lines.
"""

from .console_spinner import ConsoleSpinner
from .shimmer import ShimmerRenderer, render, shimmer_intensity, shimmer_text
from .spinner_base import SpinnerBase
from .styles import SPINNER_STYLES, get_spinner_frames

__all__ = [
    "ConsoleSpinner",
    "ShimmerRenderer",
    "SpinnerBase",
    "SPINNER_STYLES",
    "get_spinner_frames",
    "render",
    "shimmer_intensity",
    "shimmer_text",
]
