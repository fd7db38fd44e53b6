"""Errors raised while building shimmer configuration."""


class ShimmerError(ValueError):
    """Base class for shimmer configuration errors."""


class InvalidConfiguration(ShimmerError):
    """A configuration field is out of range or cannot be parsed."""


class UnsupportedColorMode(ShimmerError):
    """The requested color mode is not one of the known modes."""
