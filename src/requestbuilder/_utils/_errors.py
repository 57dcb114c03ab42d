from contextlib import contextmanager
from logging import getLogger
from typing import Generator

import httpx

from ..models.errors import RequestFailedError

logger = getLogger(__name__)


@contextmanager
def handle_errors(uri: str) -> Generator[None, None, None]:
    """Context manager translating transport errors raised while performing a request.

    Args:
        uri: Target URI of the request, reported on failure.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        RequestFailedError: For any httpx error, including status errors when the
            client is configured to raise them. The original error is chained.
    """
    try:
        yield
    except httpx.HTTPStatusError as e:
        logger.warning(
            f"Request to {uri} failed with status {e.response.status_code}"
        )
        raise RequestFailedError(uri, e) from e
    except httpx.HTTPError as e:
        logger.warning(f"Request to {uri} failed: {e!r}")
        raise RequestFailedError(uri, e) from e
