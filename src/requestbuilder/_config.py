import os
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._utils.constants import (
    DEFAULT_ERROR_HEADER,
    DEFAULT_SCHEME,
    ENV_BASE_PATH,
    ENV_ERROR_HEADER,
    ENV_HOST,
    ENV_PORT,
    ENV_SCHEME,
)

MultiValue = Dict[str, List[str]]


def as_multi_value(value: Any) -> Any:
    """Normalize a mapping of names to a value or values into ``{name: [str, ...]}``."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        return value
    normalized: MultiValue = {}
    for name, values in value.items():
        if isinstance(values, (list, tuple)):
            normalized[name] = [str(item) for item in values if item is not None]
        elif values is not None:
            normalized[name] = [str(values)]
    return normalized



def header_key(headers: Mapping[str, Any], name: str) -> str:
    """Existing key of ``headers`` matching ``name`` case-insensitively, else ``name``."""
    lowered = name.lower()
    for existing in headers:
        if existing.lower() == lowered:
            return existing
    return name

class RequestDefaults(BaseModel):
    """Values every request spawned by a :class:`RequestBuilder` starts from.

    Headers and params accept either single strings or lists of strings per
    name and are always stored as lists. The port accepts an integer or a
    numeric string; whichever was assigned last wins.
    """

    model_config = ConfigDict(validate_assignment=True)

    host: Optional[str] = None
    base_path: Optional[str] = None
    port: Optional[int] = Field(default=None, ge=0, le=65535)
    scheme: str = DEFAULT_SCHEME
    headers: MultiValue = Field(default_factory=dict)
    params: MultiValue = Field(default_factory=dict)
    error_header: str = DEFAULT_ERROR_HEADER
    raise_for_status: bool = False

    @field_validator("port", mode="before")
    @classmethod
    def _parse_port(cls, value: Union[int, str, None]) -> Union[int, str, None]:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("headers", "params", mode="before")
    @classmethod
    def _normalize_multi_value(cls, value: Any) -> Any:
        return as_multi_value(value)

    @classmethod
    def from_env(cls, **overrides: Any) -> "RequestDefaults":
        """Build defaults from ``REQUESTBUILDER_*`` environment variables.

        Keyword arguments take precedence over the environment.
        """
        env_map = {
            "host": ENV_HOST,
            "base_path": ENV_BASE_PATH,
            "port": ENV_PORT,
            "scheme": ENV_SCHEME,
            "error_header": ENV_ERROR_HEADER,
        }
        values: Dict[str, Any] = {}
        for field_name, env_var in env_map.items():
            env_value = os.getenv(env_var)
            if env_value:
                values[field_name] = env_value
        values.update(overrides)
        return cls(**values)

    def copy_headers(self) -> MultiValue:
        return {name: list(values) for name, values in self.headers.items()}

    def copy_params(self) -> MultiValue:
        return {name: list(values) for name, values in self.params.items()}
