"""Error types and message templates.

Python 3.13+. Zero external dependencies.
"""

from .errors import ParseError, SimparseError
from .templates import ErrorTemplate

__all__ = [
    "ErrorTemplate",
    "ParseError",
    "SimparseError",
]
