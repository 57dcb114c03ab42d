"""Fluent builder for HTTP requests over httpx.

This package composes URIs, headers, query parameters, path variables and
bodies into requests, performs them with an ``httpx.Client`` and wraps the
responses for error inspection and typed JSON decoding.
"""

from ._config import RequestDefaults
from ._request_builder import RequestBuilder
from ._request_spec import BuiltRequest, HttpMethod, RequestSpec
from ._response import ResponseWrapper
from .models import (
    ErrorDescriptor,
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
    "BuiltRequest",
    "HttpMethod",
    "RequestBuilder",
    "RequestDefaults",
    "RequestSpec",
    "ResponseWrapper",
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
