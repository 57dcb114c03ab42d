import re
from functools import lru_cache
from typing import Any, Union, get_origin

from pydantic import PydanticUndefinedAnnotation, PydanticUserError, TypeAdapter

from ..models.errors import UnsupportedShapeError

_EMPTY_ARRAY = re.compile(rb"^\s*\[\s*\]\s*$")
_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def is_shape(shape: Any) -> bool:
    """Whether ``shape`` is a class or a parametrized generic such as ``list[int]``."""
    return isinstance(shape, type) or get_origin(shape) is not None


def accepts_sequence(shape: Any) -> bool:
    origin = get_origin(shape) or shape
    return isinstance(origin, type) and issubclass(origin, _SEQUENCE_TYPES)


@lru_cache(maxsize=128)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    try:
        return TypeAdapter(shape)
    except (PydanticUndefinedAnnotation, PydanticUserError) as e:
        raise UnsupportedShapeError(shape) from e


def decode(raw: Union[str, bytes], shape: Any) -> Any:
    """Decode a JSON document into ``shape``.

    An empty array decodes as ``None`` unless ``shape`` is itself a sequence,
    and unknown object fields are ignored by the target models.

    Raises:
        pydantic.ValidationError: If the document is malformed or does not
            match ``shape``.
        UnsupportedShapeError: If ``shape`` is not a class or generic type, or
            no validator can be built for it.
    """
    if not is_shape(shape):
        raise UnsupportedShapeError(shape)
    data = raw.encode() if isinstance(raw, str) else raw
    if _EMPTY_ARRAY.match(data) and not accepts_sequence(shape):
        return None
    adapter = _adapter(shape)
    try:
        return adapter.validate_json(data)
    except (PydanticUndefinedAnnotation, PydanticUserError) as e:
        raise UnsupportedShapeError(shape) from e
