"""Argument bags: named, optional constructor arguments for score objects."""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Union

from pydantic import ConfigDict, TypeAdapter, ValidationError

from scorecore.logging_utils import log_event

if TYPE_CHECKING:
    from scorecore.models import ScoreObject

ArgValue = Union[int, str, "ScoreObject", list["ScoreObject"]]
Args = dict[str, ArgValue]

logger = logging.getLogger(__name__)

# Strict mode: a value of one kind is never coerced into another (no "1" -> 1, no True -> 1).
_ADAPTER_CONFIG = ConfigDict(strict=True, arbitrary_types_allowed=True)


class ArgKind(str, Enum):
    INT = "int"
    STRING = "string"
    SCORE_OBJECT = "score_object"
    SCORE_OBJECTS = "score_objects"


class InvalidArgument(ValueError):
    def __init__(self, key: str, owner: str) -> None:
        self.key = key
        self.owner = owner
        super().__init__(f"{owner} got an unexpected argument '{key}'")


class TypeMismatch(TypeError):
    def __init__(self, expected: ArgKind | None, actual: str, name: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        self.name = name
        target = f"argument '{name}'" if name is not None else "argument value"
        if expected is None:
            message = f"{target} of type {actual} is not a supported argument kind"
        else:
            message = f"{target} must be {expected.value}, got {actual}"
        super().__init__(message)


# Every ArgKind needs an entry here; classification and all extractors go through this table.
@lru_cache(maxsize=1)
def _kind_adapters() -> dict[ArgKind, TypeAdapter]:
    from scorecore.models import ScoreObject

    python_types: dict[ArgKind, Any] = {
        ArgKind.INT: int,
        ArgKind.STRING: str,
        ArgKind.SCORE_OBJECT: ScoreObject,
        ArgKind.SCORE_OBJECTS: list[ScoreObject],
    }
    return {kind: TypeAdapter(python_types[kind], config=_ADAPTER_CONFIG) for kind in ArgKind}


def arg_kind(value: Any, name: str | None = None) -> ArgKind:
    adapters = _kind_adapters()
    for kind in ArgKind:
        try:
            adapters[kind].validate_python(value)
        except ValidationError:
            continue
        return kind
    raise TypeMismatch(None, type(value).__name__, name)


def _describe_kind(value: Any) -> str:
    try:
        return arg_kind(value).value
    except TypeMismatch:
        return type(value).__name__


def make_args(pairs: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None, /, **kwargs: Any) -> Args:
    merged = dict(pairs or (), **kwargs)
    bag: Args = {}
    for name, value in merged.items():
        if not isinstance(name, str):
            raise TypeError(f"Argument names must be strings, got {type(name).__name__}")
        arg_kind(value, name)
        bag[name] = value
    return bag


def get_arg(value: Any, kind: ArgKind, name: str | None = None) -> Any:
    try:
        return _kind_adapters()[kind].validate_python(value)
    except ValidationError as exc:
        raise TypeMismatch(kind, _describe_kind(value), name) from exc


def get_int_arg(value: Any, name: str | None = None) -> int:
    return get_arg(value, ArgKind.INT, name)


def get_string_arg(value: Any, name: str | None = None) -> str:
    return get_arg(value, ArgKind.STRING, name)


def get_score_object_arg(value: Any, name: str | None = None) -> ScoreObject:
    return get_arg(value, ArgKind.SCORE_OBJECT, name)


def get_score_objects_arg(value: Any, name: str | None = None) -> list[ScoreObject]:
    return list(get_arg(value, ArgKind.SCORE_OBJECTS, name))


def extract_arg(args: Args, name: str, kind: ArgKind, default: Any = None) -> Any:
    if name not in args:
        return default
    return get_arg(args[name], kind, name)


def extract_int_arg(args: Args, name: str, default: int) -> int:
    return extract_arg(args, name, ArgKind.INT, default)


def extract_string_arg(args: Args, name: str, default: str) -> str:
    return extract_arg(args, name, ArgKind.STRING, default)


def extract_score_object_arg(args: Args, name: str, default: ScoreObject | None = None) -> ScoreObject | None:
    return extract_arg(args, name, ArgKind.SCORE_OBJECT, default)


def extract_score_objects_arg(
    args: Args, name: str, default: Iterable[ScoreObject] | None = None
) -> list[ScoreObject]:
    if name not in args:
        return list(default) if default is not None else []
    return get_score_objects_arg(args[name], name)


def reduce_args_by(args: Args, keys: Iterable[str]) -> Args:
    """Return a copy of ``args`` without ``keys``. Keys missing from the bag are ignored."""
    dropped = set(keys)
    return {name: value for name, value in args.items() if name not in dropped}


def check_no_leftover_args(args: Args, owner: str) -> None:
    if not args:
        return
    key = next(iter(args))
    log_event(logger, "args_rejected", level=logging.WARNING, owner=owner, key=key, leftover=list(args))
    raise InvalidArgument(key, owner)
