"""Error types raised by bloomkit."""


class BloomFilterError(Exception):
    pass


class InvalidConfigurationError(BloomFilterError, ValueError):
    """Raised when a filter cannot be built from the given parameters."""


class IncompatibleFiltersError(BloomFilterError, ValueError):
    """Raised when two filters cannot be combined."""
