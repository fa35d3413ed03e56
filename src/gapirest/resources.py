import types
import typing
from dataclasses import fields, is_dataclass
from typing import Any, List, Self

from .errors import DecodeError

# field metadata flag for 64 bit integers, which the APIs carry as JSON strings
INT64 = {'format': 'int64'}


def _is_int64(f) -> bool:
    return f.metadata.get('format', None) in ('int64', 'uint64')


def _key(f) -> str:
    """JSON key for a field, only differs from the name when the key is a python keyword"""
    return f.metadata.get('name', f.name)


def _encode(value: Any, int64: bool = False) -> Any:
    if isinstance(value, ApiResource):
        return value.to_base()
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and int64:
        return str(value)
    if isinstance(value, dict):
        return {str(k): _encode(v, int64) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(v, int64) for v in value]
    return value


def _strip_optional(hint: Any) -> Any:
    """X|None -> X, leaves everything else alone"""
    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _decode(hint: Any, value: Any, int64: bool = False) -> Any:
    if value is None:
        return None
    hint = _strip_optional(hint)
    origin = typing.get_origin(hint)
    if origin in (list, List):
        (item,) = typing.get_args(hint) or (Any,)
        if not isinstance(value, list):
            raise DecodeError(f"expected a JSON array, got {type(value).__name__}")
        return [_decode(item, v, int64) for v in value]
    if origin is dict:
        _, item = typing.get_args(hint) or (str, Any)
        if not isinstance(value, dict):
            raise DecodeError(f"expected a JSON object, got {type(value).__name__}")
        return {str(k): _decode(item, v, int64) for k, v in value.items()}
    if isinstance(hint, type) and issubclass(hint, ApiResource):
        return hint.from_base(value)
    if hint is int:
        if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
            raise DecodeError(f"expected an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"expected an integer, got {value!r}") from e
    if hint is float:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise DecodeError(f"expected a number, got {value!r}")
        try:
            return float(value)
        except ValueError as e:
            raise DecodeError(f"expected a number, got {value!r}") from e
    if hint is str and not isinstance(value, str):
        raise DecodeError(f"expected a string, got {value!r}")
    if hint is bool and not isinstance(value, bool):
        raise DecodeError(f"expected a boolean, got {value!r}")
    return value


class ApiResource():
    """
    Intended to be subclassed by a dataclass but isnt actually a dataclass.
    Field names are the JSON keys verbatim and every field defaults to None,
    which means 'not present'.  dataclasses.asdict() goes one way but there's
    no inverse, so to_base()/from_base() do the translation in both directions
    driven by the field type hints.
    """

    def to_base(self) -> dict:
        """
        The JSON ready dict representation.  None fields are left out entirely
        so optional fields that were never set are never sent.
        """
        b = {}
        for f in fields(self):
            v = getattr(self, f.name)
            if v is None:
                continue
            b[_key(f)] = _encode(v, _is_int64(f))
        return b

    @classmethod
    def from_base(cls, data: dict) -> Self:
        """
        Build from a decoded JSON object.  Keys that aren't fields are ignored,
        the server is free to add to a resource.
        """
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            raise DecodeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
        if not is_dataclass(cls):
            raise TypeError(f"{cls.__name__} is not a dataclass")
        hints = typing.get_type_hints(cls)
        kwargs = {}
        for f in fields(cls):
            k = _key(f)
            if k in data and f.init:
                kwargs[f.name] = _decode(hints[f.name], data[k], _is_int64(f))
        return cls(**kwargs)

    def __bool__(self) -> bool:
        """An empty resource (every field None) is False"""
        return any(getattr(self, f.name) is not None for f in fields(self))
