from logging import getLogger
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from httpx import Client
from pydantic_core import to_jsonable_python

from ._config import RequestDefaults, header_key
from ._request_spec import BuiltRequest, HttpMethod, RequestSpec
from ._response import ResponseWrapper
from ._utils import coerce_port, handle_errors, user_agent_value
from ._utils.constants import HEADER_USER_AGENT
from .models.errors import NoRequestBuiltError


class RequestBuilder:
    """Entry point for building and performing HTTP requests.

    Holds the defaults (host, base path, port, headers, params and the error
    header name) every new request starts from, and the ``httpx.Client`` the
    requests are sent with. Each verb method returns a new, independently owned
    :class:`RequestSpec` seeded with a copy of the current defaults, so changing
    the defaults later does not affect specs already handed out.

    Examples:
        ```python
        builder = RequestBuilder(host="api.example.com", base_path="/v1")

        users = builder.get().with_path("/users").perform().extract(list[User])

        builder.post().with_path("/users").with_body({"name": "x"}).perform()
        ```
    """

    def __init__(
        self,
        defaults: Optional[RequestDefaults] = None,
        *,
        client: Optional[Client] = None,
        host: Optional[str] = None,
        base_path: Optional[str] = None,
        port: Union[int, str, None] = None,
        headers: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        error_header: Optional[str] = None,
    ) -> None:
        self._logger = getLogger("requestbuilder")

        overrides: Dict[str, Any] = {
            "host": host,
            "base_path": base_path,
            "port": port,
            "headers": headers,
            "params": params,
            "error_header": error_header,
        }
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if defaults is None:
            self._defaults = RequestDefaults(**overrides)
        else:
            self._defaults = RequestDefaults(**{**defaults.model_dump(), **overrides})

        self._owns_client = client is None
        self._client = client if client is not None else Client(follow_redirects=True)

        self._logger.debug(f"DEFAULTS: {self._defaults}")

    def __enter__(self) -> "RequestBuilder":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying client when it was created by this builder."""
        if self._owns_client:
            self._client.close()

    @property
    def defaults(self) -> RequestDefaults:
        return self._defaults

    @property
    def error_header(self) -> str:
        return self._defaults.error_header

    @property
    def client(self) -> Client:
        return self._client

    # Verbs

    def get(self) -> RequestSpec:
        return self._new_spec(HttpMethod.GET)

    def delete(self) -> RequestSpec:
        return self._new_spec(HttpMethod.DELETE)

    def head(self) -> RequestSpec:
        return self._new_spec(HttpMethod.HEAD)

    def options(self) -> RequestSpec:
        return self._new_spec(HttpMethod.OPTIONS)

    def post(self) -> RequestSpec:
        return self._new_spec(HttpMethod.POST)

    def put(self) -> RequestSpec:
        return self._new_spec(HttpMethod.PUT)

    def patch(self) -> RequestSpec:
        return self._new_spec(HttpMethod.PATCH)

    def _new_spec(self, method: HttpMethod) -> RequestSpec:
        defaults = self._defaults
        spec = RequestSpec(
            method,
            headers=defaults.copy_headers(),
            params=defaults.copy_params(),
            executor=self.perform,
        ).with_scheme(defaults.scheme)

        if defaults.host is not None:
            spec.with_host(defaults.host)
        if defaults.base_path is not None:
            spec.set_base_path(defaults.base_path)
        if defaults.port is not None:
            spec.with_port(defaults.port)
        return spec

    # Execution

    def perform(self, spec: Optional[RequestSpec] = None) -> ResponseWrapper:
        """Build ``spec``, send it and wrap the response.

        Args:
            spec: The request to perform, usually obtained from a verb method.

        Returns:
            ResponseWrapper: The wrapped response, whatever its status.

        Raises:
            NoRequestBuiltError: If no spec is given or it has no HTTP method.
            MalformedURIError: If the spec does not describe a valid URI.
            RequestFailedError: If the transport fails, or the response status is
                an error and ``raise_for_status`` is enabled in the defaults.
        """
        if spec is None:
            raise NoRequestBuiltError()

        request = spec.build()
        uri = str(request.url)
        headers = self._outgoing_headers(request)

        self._logger.debug(f"Request: {request.method.value} {uri}")
        self._logger.debug(f"HEADERS: {headers}")

        with handle_errors(uri):
            response = self._client.request(
                request.method.value,
                request.url,
                headers=headers,
                **self._body_kwargs(request.body),
            )
            if self._defaults.raise_for_status:
                response.raise_for_status()

        self._logger.debug(f"Response: {response.status_code} from {uri}")
        return ResponseWrapper(response, self._defaults.error_header)

    @staticmethod
    def _outgoing_headers(request: BuiltRequest) -> List[Tuple[str, str]]:
        headers = list(request.headers)
        if not any(name.lower() == HEADER_USER_AGENT.lower() for name, _ in headers):
            headers.append((HEADER_USER_AGENT, user_agent_value()))
        return headers

    @staticmethod
    def _body_kwargs(body: Any) -> Dict[str, Any]:
        if body is None:
            return {}
        if isinstance(body, (str, bytes)):
            return {"content": body}
        return {"json": to_jsonable_python(body, by_alias=True)}

    # Defaults

    def set_default_host(self, host: Optional[str]) -> "RequestBuilder":
        self._defaults.host = host
        return self

    def set_default_base_path(self, base_path: Optional[str]) -> "RequestBuilder":
        self._defaults.base_path = base_path
        return self

    def set_default_port(self, port: Union[int, str, None]) -> "RequestBuilder":
        """Set the default port from an integer or a numeric string.

        Raises:
            MalformedURIError: If the port is not a number within 0-65535.
        """
        self._defaults.port = coerce_port(port)
        return self

    def set_default_headers(
        self, headers: Optional[Mapping[str, Any]]
    ) -> "RequestBuilder":
        self._defaults.headers = headers
        return self

    def add_default_header(self, name: str, value: str) -> "RequestBuilder":
        headers = self._defaults.headers
        headers.setdefault(header_key(headers, name), []).append(value)
        return self

    def set_default_params(
        self, params: Optional[Mapping[str, Any]]
    ) -> "RequestBuilder":
        self._defaults.params = params
        return self

    def add_default_param(self, name: str, value: Any) -> "RequestBuilder":
        self._defaults.params.setdefault(name, []).append(str(value))
        return self

    def set_error_header(self, error_header: str) -> "RequestBuilder":
        self._defaults.error_header = error_header
        return self
