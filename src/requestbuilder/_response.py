from logging import getLogger
from typing import Any, Type, TypeVar, overload

from httpx import Headers, Response
from pydantic import ValidationError

from ._utils import decode, is_shape
from ._utils.constants import DEFAULT_ERROR_HEADER
from .models.error_descriptor import ErrorDescriptor
from .models.errors import (
    ErrorReadingFailedError,
    ResponseError,
    ResponseReadingFailedError,
    UnsupportedShapeError,
)

T = TypeVar("T")

logger = getLogger(__name__)


class ResponseWrapper:
    """Read-only view over the response of one performed request.

    Besides the HTTP status, a response is considered failed when it carries the
    error header (``"ERROR"`` by default) with a ``true`` value, a convention
    some backends use to flag application errors under a 2xx status.
    """

    def __init__(
        self, response: Response, error_header: str = DEFAULT_ERROR_HEADER
    ) -> None:
        self._response = response
        self._error_header = error_header

    def __repr__(self) -> str:
        return f"ResponseWrapper(status_code={self.status_code}, error={self.has_error()})"

    @property
    def response(self) -> Response:
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> Headers:
        return self._response.headers

    @property
    def text(self) -> str:
        return self._response.text

    @property
    def error_header(self) -> str:
        return self._error_header

    def has_error(self) -> bool:
        if self.status_code >= 300:
            return True
        values = self.headers.get_list(self._error_header)
        if values:
            return values[0].strip().lower() == "true"
        return False

    @overload
    def decode_body(self, shape: Type[T]) -> T: ...

    @overload
    def decode_body(self, shape: Any) -> Any: ...

    def decode_body(self, shape: Any) -> Any:
        """Decode the JSON body into ``shape``.

        Args:
            shape: A class (pydantic model, dataclass, builtin) or a generic type
                such as ``list[User]``.

        Returns:
            The decoded value, ``None`` for an empty array when ``shape`` is not
            a sequence.

        Raises:
            ResponseReadingFailedError: If the body is not valid JSON or does not
                match ``shape``.
            UnsupportedShapeError: If ``shape`` is neither a class nor a generic
                type, or cannot be validated against.
        """
        try:
            return decode(self._response.content, shape)
        except ValidationError as e:
            raise ResponseReadingFailedError(
                f"An error occurred while parsing the response: {e}"
            ) from e

    def decode_error(self) -> ErrorDescriptor:
        """Decode the body as an error envelope.

        Raises:
            ErrorReadingFailedError: If the body does not follow the error format.
        """
        try:
            return ErrorDescriptor.model_validate_json(self._response.content)
        except ValidationError as e:
            raise ErrorReadingFailedError(
                f"The response does not follow the error format: {e}"
            ) from e

    @overload
    def extract(self, shape: Type[T]) -> T: ...

    @overload
    def extract(self, shape: Any) -> Any: ...

    def extract(self, shape: Any) -> Any:
        """Return the decoded body, or raise the decoded error when the response failed.

        Raises:
            UnsupportedShapeError: If ``shape`` is neither a class nor a generic type.
            ResponseError: If :meth:`has_error` is true; carries the decoded
                error envelope.
            ErrorReadingFailedError: If the response failed but its body is not
                an error envelope.
            ResponseReadingFailedError: If the body cannot be decoded into ``shape``.
        """
        if not is_shape(shape):
            raise UnsupportedShapeError(shape)
        if self.has_error():
            descriptor = self.decode_error()
            logger.debug(
                f"Response flagged as error (status {self.status_code}): {descriptor.message}"
            )
            raise ResponseError(descriptor, self.status_code)
        return self.decode_body(shape)
