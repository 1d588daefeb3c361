"""
spg.errors
Exceptions raised by the generator.
"""


class InvalidArgument(TypeError, ValueError):
    """Raised when a config or length argument is missing or malformed."""
