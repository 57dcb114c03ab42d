from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .error_descriptor import ErrorDescriptor


class RequestBuilderError(Exception):
    """Base class for every error raised by the request builder."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NoRequestBuiltError(RequestBuilderError):
    """Raised when a request is performed before it has been fully built.

    Covers a perform call without a spec, a spec without an HTTP method and a
    standalone spec that has no client to execute it.
    """

    def __init__(
        self, message: str = "Attempted to perform an HTTP request that is not ready"
    ):
        super().__init__(message)


class RequestFailedError(RequestBuilderError):
    """Raised when the transport fails to perform a request."""

    def __init__(self, uri: str, cause: Optional[BaseException] = None):
        self.uri = uri
        self.cause = cause
        message = f"An error occurred while performing the request to: {uri}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message)


class ResponseReadingFailedError(RequestBuilderError):
    """Raised when a response body cannot be decoded into the requested shape."""

    def __init__(self, message: str = "An error occurred while parsing the response"):
        super().__init__(message)


class ErrorReadingFailedError(RequestBuilderError):
    """Raised when a response body does not follow the error envelope format."""

    def __init__(
        self, message: str = "The response does not follow the error format"
    ):
        super().__init__(message)


class MalformedURIError(RequestBuilderError):
    pass


class UnsupportedShapeError(RequestBuilderError):
    """Raised when extraction is requested with an unrecognized shape."""

    def __init__(self, shape: object):
        self.shape = shape
        super().__init__(
            f"Expected a class or a generic type to extract the response into, got {shape!r}"
        )


class ResponseError(RequestBuilderError):
    """User-facing error decoded from a response flagged as failed.

    Carries the decoded error envelope together with the HTTP status code of
    the response it came from.
    """

    def __init__(self, descriptor: "ErrorDescriptor", status_code: int):
        self.descriptor = descriptor
        self.status_code = status_code
        code = f" [{descriptor.code}]" if descriptor.code is not None else ""
        super().__init__(f"{descriptor.message}{code} (status: {status_code})")
