"""URI assembly for request specs.

Builds an encoded :class:`httpx.URL` out of the loose pieces collected by a
request spec: scheme, host, port, path template, positional path variables and
multi-valued query parameters.
"""

import re
from typing import Mapping, Optional, Sequence, Union
from urllib.parse import quote

from httpx import URL, InvalidURL

from ..models.errors import MalformedURIError
from .constants import DEFAULT_SCHEME

_PLACEHOLDER = re.compile(r"\{[^{}]*\}")
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_HOST_DELIMITERS = re.compile(r"[/@:?#\s]")

# RFC 3986 pchar plus "/" for paths; query components keep "/" and "?" but
# escape the delimiters that would change their meaning.
_PATH_SAFE = "/:@!$&'()*+,;="
_QUERY_SAFE = "/?:@!$'()*,;"


def _is_ip_literal(host: str) -> bool:
    return host.startswith("[") and host.endswith("]")


def coerce_port(port: Union[int, str, None]) -> Optional[int]:
    """Normalize a port given as an integer or a numeric string.

    Raises:
        MalformedURIError: If the port is not a number within 0-65535.
    """
    if port is None:
        return None
    if isinstance(port, bool):
        raise MalformedURIError(f"Invalid port: {port!r}")
    if isinstance(port, str):
        if not port.strip().isdigit():
            raise MalformedURIError(f"Invalid port: {port!r}")
        port = int(port.strip())
    if not 0 <= port <= 65535:
        raise MalformedURIError(f"Port out of range: {port}")
    return port


def count_placeholders(path: str) -> int:
    return len(_PLACEHOLDER.findall(path))


def expand_path(path: str, path_variables: Sequence[str]) -> str:
    """Substitute ``{...}`` placeholders positionally.

    The Nth placeholder receives the Nth variable, whatever its name.

    Raises:
        MalformedURIError: If the number of placeholders and variables differ.
    """
    expected = count_placeholders(path)
    if expected != len(path_variables):
        raise MalformedURIError(
            f"Path '{path}' has {expected} placeholder(s) but "
            f"{len(path_variables)} path variable(s) were provided"
        )
    values = iter(path_variables)
    return _PLACEHOLDER.sub(lambda _: str(next(values)), path)


def encode_query(params: Mapping[str, Sequence[str]]) -> str:
    """Encode multi-valued parameters, repeating the key once per value."""
    parts = []
    for name, values in params.items():
        encoded_name = quote(str(name), safe=_QUERY_SAFE)
        if not values:
            parts.append(encoded_name)
            continue
        for value in values:
            parts.append(f"{encoded_name}={quote(str(value), safe=_QUERY_SAFE)}")
    return "&".join(parts)


def assemble(
    scheme: Optional[str],
    host: Optional[str],
    port: Union[int, str, None] = None,
    path: Optional[str] = None,
    path_variables: Optional[Sequence[str]] = None,
    params: Optional[Mapping[str, Sequence[str]]] = None,
) -> URL:
    """Build an encoded URL from its components.

    Args:
        scheme: URL scheme, ``"http"`` when empty.
        host: Host name or address, without scheme or port.
        port: Optional port, as an integer or a numeric string.
        path: Path, possibly holding ``{...}`` placeholders.
        path_variables: Values substituted into the placeholders in order.
        params: Query parameters; keys with several values are repeated.

    Returns:
        URL: The percent-encoded URL.

    Raises:
        MalformedURIError: If the placeholders and path variables do not match
            or the scheme, host or port do not form a valid authority.
    """
    scheme = scheme or DEFAULT_SCHEME
    if not _SCHEME.match(scheme):
        raise MalformedURIError(f"Invalid scheme: {scheme!r}")
    if not host:
        raise MalformedURIError("A host is required to assemble a URI")
    if _HOST_DELIMITERS.search(host) and not _is_ip_literal(host):
        raise MalformedURIError(f"Invalid host: {host!r}")

    port = coerce_port(port)
    path = expand_path(path or "", list(path_variables or []))
    if path and not path.startswith("/"):
        path = "/" + path

    authority = host if port is None else f"{host}:{port}"
    text = f"{scheme}://{authority}{quote(path, safe=_PATH_SAFE)}"
    if params:
        text = f"{text}?{encode_query(params)}"

    try:
        return URL(text)
    except InvalidURL as e:
        raise MalformedURIError(f"Invalid URI '{text}': {e}") from e
