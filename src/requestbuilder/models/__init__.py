"""Request builder models.

This module contains the error taxonomy and the error envelope model.
"""

from .error_descriptor import ErrorDescriptor
from .errors import (
    ErrorReadingFailedError,
    MalformedURIError,
    NoRequestBuiltError,
    RequestBuilderError,
    RequestFailedError,
    ResponseError,
    ResponseReadingFailedError,
    UnsupportedShapeError,
)

__all__ = [
    "ErrorDescriptor",
    "ErrorReadingFailedError",
    "MalformedURIError",
    "NoRequestBuiltError",
    "RequestBuilderError",
    "RequestFailedError",
    "ResponseError",
    "ResponseReadingFailedError",
    "UnsupportedShapeError",
]
