class BlockBreakerError(Exception):
    """Base error for the game."""


class FontLoadError(BlockBreakerError):
    """The start-up font could not be loaded."""
