"""JSON and query-string mapping for the API's dataclass payloads."""

from __future__ import annotations

import dataclasses
import enum
import inspect
import re
import types
import typing
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any

_KEY = "json_key"
_OMIT = "json_omitempty"

_TIME_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)

_TOKEN_RE = re.compile(
    r"\s*(?:(?P<name>[A-Za-z_][A-Za-z_0-9]*)"
    r"|(?P<str>'[^']*'|\"[^\"]*\")"
    r"|(?P<num>-?\d+)"
    r"|(?P<op>\.\.\.|[\[\],|.]))"
)

_BASE_NAMES = {
    "int": int,
    "str": str,
    "bool": bool,
    "float": float,
    "bytes": bytes,
    "list": list,
    "dict": dict,
    "tuple": tuple,
    "object": object,
    "Any": Any,
    "Optional": typing.Optional,
    "Union": typing.Union,
    "List": typing.List,
    "Dict": typing.Dict,
    "Literal": typing.Literal,
    "typing": typing,
    "datetime": datetime,
}


def json_field(
    *,
    key=None,
    omitempty=False,
    default=dataclasses.MISSING,
    default_factory=dataclasses.MISSING,
):
    """Declare a dataclass field with its wire key and omit-when-empty rule."""
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={_KEY: key, _OMIT: omitempty},
    )


def _key(field: dataclasses.Field) -> str:
    return field.metadata.get(_KEY) or field.name


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, int, float, str, bytes, list, tuple, dict)):
        return not value
    return False


def parse_time(value):
    """Parse an RFC 3339 timestamp into an aware datetime."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"cannot parse {type(value).__name__} as a time")
    match = _TIME_RE.fullmatch(value)
    if match is None:
        raise ValueError(f"invalid RFC 3339 time: {value!r}")
    date, clock, fraction, zone = match.groups()
    micro = (fraction or "")[:6].ljust(6, "0")
    offset = "+00:00" if zone == "Z" else zone
    return datetime.fromisoformat(f"{date}T{clock}.{micro}{offset}")


def format_time(value):
    """Format a datetime as RFC 3339; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat(timespec="seconds")[:19]
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset()
    if not offset:
        return text + "Z"
    sign = "+" if offset >= timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def encode(obj):
    """Turn a payload object into plain JSON-ready values."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        out = {}
        for field in dataclasses.fields(obj):
            value = getattr(obj, field.name)
            if field.metadata.get(_OMIT) and _is_empty(value):
                continue
            out[_key(field)] = encode(value)
        return out
    if isinstance(obj, datetime):
        return format_time(obj)
    if isinstance(obj, enum.Enum):
        return encode(obj.value)
    if isinstance(obj, Mapping):
        return {str(k): encode(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [encode(v) for v in obj]
    return obj


def _tokenize(text: str) -> list:
    text = text.strip()
    tokens = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None or match.end() == pos:
            raise ValueError(f"cannot read type annotation {text!r}")
        pos = match.end()
        kind = match.lastgroup
        tokens.append((kind, match.group(kind)))
    return tokens


def _members(obj) -> dict:
    return dict(inspect.getmembers(obj))


class _AnnotationParser:
    """Resolve a textual annotation against a namespace without running it."""

    def __init__(self, text: str, namespace: Mapping):
        self._text = text
        self._tokens = _tokenize(text)
        self._pos = 0
        self._ns = namespace

    def parse(self):
        result = self._union()
        if self._pos != len(self._tokens):
            raise self._error()
        return result

    def _error(self) -> ValueError:
        return ValueError(f"cannot read type annotation {self._text!r}")

    def _peek(self):
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return (None, None)

    def _take(self, kind=None):
        token = self._peek()
        if token[0] is None or (kind is not None and token[0] != kind):
            raise self._error()
        self._pos += 1
        return token

    def _union(self):
        items = [self._primary()]
        while self._peek() == ("op", "|"):
            self._pos += 1
            items.append(self._primary())
        if len(items) == 1:
            return items[0]
        return typing.Union[tuple(items)]

    def _primary(self):
        base = self._atom()
        if self._peek() != ("op", "["):
            return base
        self._pos += 1
        literal = base is typing.Literal
        args = []
        while self._peek() != ("op", "]"):
            args.append(self._literal() if literal else self._union())
            if self._peek() == ("op", ","):
                self._pos += 1
            elif self._peek() != ("op", "]"):
                raise self._error()
        self._pos += 1
        if not args:
            raise self._error()
        return base[tuple(args) if len(args) > 1 else args[0]]

    def _atom(self):
        kind, value = self._take()
        if kind == "str":
            return _resolve(value[1:-1], self._ns)
        if kind == "op" and value == "...":
            return Ellipsis
        if kind != "name":
            raise self._error()
        if value == "None":
            return type(None)
        try:
            obj = self._ns[value]
        except KeyError:
            raise ValueError(f"unknown name {value!r} in annotation {self._text!r}") from None
        while self._peek() == ("op", "."):
            self._pos += 1
            _, attr = self._take("name")
            try:
                obj = _members(obj)[attr]
            except KeyError:
                raise self._error() from None
        return obj

    def _literal(self):
        kind, value = self._take()
        if kind == "str":
            return value[1:-1]
        if kind == "num":
            return int(value)
        if kind == "name" and value in ("None", "True", "False"):
            return {"None": None, "True": True, "False": False}[value]
        raise self._error()


def _resolve(annotation, namespace):
    if isinstance(annotation, str):
        return _AnnotationParser(annotation, namespace).parse()
    if isinstance(annotation, typing.ForwardRef):
        return _resolve(annotation.__forward_arg__, namespace)
    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)
    if origin is typing.Literal or not args:
        return annotation
    resolved = tuple(a if isinstance(a, list) else _resolve(a, namespace) for a in args)
    if resolved == args:
        return annotation
    if _is_union(annotation):
        return typing.Union[resolved]
    return origin[resolved if len(resolved) > 1 else resolved[0]]


def _namespace(cls) -> dict:
    namespace = dict(_BASE_NAMES)
    for klass in reversed(cls.__mro__):
        module = inspect.getmodule(klass)
        if module is not None:
            namespace.update(_members(module))
        namespace.update(dict(inspect.getmembers(klass, inspect.isclass)))
        namespace[klass.__name__] = klass
    return namespace


@lru_cache(maxsize=None)
def _hints(cls) -> dict:
    namespace = _namespace(cls)
    return {field.name: _resolve(field.type, namespace) for field in dataclasses.fields(cls)}


def _is_union(tp) -> bool:
    return typing.get_origin(tp) in (typing.Union, types.UnionType)


def _nullable(tp) -> bool:
    if tp is Any or tp is object:
        return True
    return _is_union(tp) and type(None) in typing.get_args(tp)


def _mismatch(tp, value) -> ValueError:
    name = getattr(tp, "__name__", str(tp))
    return ValueError(f"cannot decode {type(value).__name__} into {name}")


def _decode_dataclass(cls, data):
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise _mismatch(cls, data)
    hints = _hints(cls)
    kwargs = {}
    for field in dataclasses.fields(cls):
        if not field.init:
            continue
        key = _key(field)
        if key not in data:
            continue
        value = data[key]
        tp = hints.get(field.name, Any)
        if value is None and not _nullable(tp):
            continue
        kwargs[field.name] = _convert(tp, value)
    return cls(**kwargs)


def _convert(tp, value):
    if tp is Any or tp is object:
        return value
    origin = typing.get_origin(tp)
    if _is_union(tp):
        if value is None:
            return None
        options = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        for option in options:
            try:
                return _convert(option, value)
            except (TypeError, ValueError):
                continue
        raise _mismatch(tp, value)
    if origin in (list, tuple) or tp in (list, tuple):
        if value is None:
            return []
        if not isinstance(value, list):
            raise _mismatch(tp, value)
        args = typing.get_args(tp)
        item_type = args[0] if args else Any
        return [_convert(item_type, item) for item in value]
    if origin is dict or tp is dict:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise _mismatch(tp, value)
        args = typing.get_args(tp)
        value_type = args[1] if len(args) == 2 else Any
        return {k: _convert(value_type, v) for k, v in value.items()}
    if not isinstance(tp, type):
        return value
    if dataclasses.is_dataclass(tp):
        from_json = getattr(tp, "from_json", None)
        if callable(from_json):
            return from_json(value)
        return _decode_dataclass(tp, value)
    if issubclass(tp, enum.Enum):
        return tp(value)
    if tp is datetime:
        return parse_time(value)
    if tp is bool:
        if not isinstance(value, bool):
            raise _mismatch(tp, value)
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _mismatch(tp, value)
        return value
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _mismatch(tp, value)
        return float(value)
    if not isinstance(value, tp):
        raise _mismatch(tp, value)
    return value


def decode(cls, data):
    """Build an instance of ``cls`` from decoded JSON data."""
    if isinstance(cls, type) and dataclasses.is_dataclass(cls):
        return _decode_dataclass(cls, data)
    return _convert(cls, data)


def _query_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return _query_value(value.value)
    if isinstance(value, datetime):
        return format_time(value)
    return str(value)


def query_params(options):
    """Return sorted (key, value) query pairs for an options object."""
    if options is None:
        return []
    if dataclasses.is_dataclass(options) and not isinstance(options, type):
        items = [
            (_key(f), getattr(options, f.name), bool(f.metadata.get(_OMIT)))
            for f in dataclasses.fields(options)
        ]
    elif isinstance(options, Mapping):
        items = [(str(k), v, False) for k, v in options.items()]
    else:
        raise TypeError(f"cannot build a query from {type(options).__name__}")
    params = []
    for key, value, omitempty in items:
        if value is None or (omitempty and _is_empty(value)):
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        params.extend((key, _query_value(v)) for v in values)
    params.sort(key=lambda pair: pair[0])
    return params