from typing import Any, Protocol
import json

from .errors import DecodeFailure, EncodeFailure


class Codec(Protocol):
    """Translate Python values to and from the text stored by a backend.

    Implementations should be symmetric: `encode` -> str, `decode` <- str.
    `encode` raises `EncodeFailure` and `decode` raises `DecodeFailure`;
    no other exception may escape either method.
    """

    def encode(self, value: Any) -> str: ...

    def decode(self, text: str) -> Any: ...


class JSONCodec:
    """Codec using strict JSON text.

    Only values JSON can represent are accepted: no fallback `default`
    hook, and NaN/Infinity are rejected rather than written as non-standard
    tokens other JSON readers would choke on.
    """

    def encode(self, value: Any) -> str:
        try:
            return json.dumps(value, allow_nan=False)
        except TypeError as e:
            # unsupported type, or a dict with non-string-like keys
            raise EncodeFailure(f"value of type {type(value).__name__} is not JSON serializable") from e
        except ValueError as e:
            # circular reference or out-of-range float
            raise EncodeFailure(str(e)) from e
        except RecursionError as e:
            raise EncodeFailure("value is nested too deeply") from e

    def decode(self, text: str) -> Any:
        if not isinstance(text, str):
            raise DecodeFailure(f"expected text, got {type(text).__name__}")
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeFailure(f"malformed JSON at position {e.pos}") from e
        except ValueError as e:
            # number literal beyond the int conversion limit
            raise DecodeFailure(str(e)) from e
        except RecursionError as e:
            raise DecodeFailure("document is nested too deeply") from e
