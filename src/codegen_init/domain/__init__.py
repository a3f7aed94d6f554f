"""Domain layer: errors and constants."""

from .errors import ErrorCodes, ScaffoldError

__all__ = [
    "ScaffoldError",
    "ErrorCodes",
]
