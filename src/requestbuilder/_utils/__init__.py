from ._codec import decode, is_shape
from ._errors import handle_errors
from ._uri import assemble, coerce_port, encode_query, expand_path
from ._user_agent import user_agent_value

__all__ = [
    "assemble",
    "coerce_port",
    "decode",
    "encode_query",
    "expand_path",
    "handle_errors",
    "is_shape",
    "user_agent_value",
]
