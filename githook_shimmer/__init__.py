"""Terminal shimmer and spinner feedback for slow git hooks."""

__version__ = "0.1.0"
