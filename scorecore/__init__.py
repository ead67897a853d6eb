"""Core of a hierarchical music score model: argument bags, score objects and items."""

from scorecore.args import (
    ArgKind,
    Args,
    ArgValue,
    InvalidArgument,
    TypeMismatch,
    arg_kind,
    check_no_leftover_args,
    extract_arg,
    extract_int_arg,
    extract_score_object_arg,
    extract_score_objects_arg,
    extract_string_arg,
    get_arg,
    get_int_arg,
    get_score_object_arg,
    get_score_objects_arg,
    get_string_arg,
    make_args,
    reduce_args_by,
)
from scorecore.logging_utils import configure_logging, designer_context, log_event
from scorecore.models import Container, Item, Parameter, ScoreObject

__all__ = [
    "ArgKind",
    "ArgValue",
    "Args",
    "Container",
    "InvalidArgument",
    "Item",
    "Parameter",
    "ScoreObject",
    "TypeMismatch",
    "arg_kind",
    "check_no_leftover_args",
    "configure_logging",
    "designer_context",
    "extract_arg",
    "extract_int_arg",
    "extract_score_object_arg",
    "extract_score_objects_arg",
    "extract_string_arg",
    "get_arg",
    "get_int_arg",
    "get_score_object_arg",
    "get_score_objects_arg",
    "get_string_arg",
    "log_event",
    "make_args",
    "reduce_args_by",
]
