import pytest

from scorecore.args import (
    ArgKind,
    InvalidArgument,
    TypeMismatch,
    arg_kind,
    check_no_leftover_args,
    extract_int_arg,
    extract_score_object_arg,
    extract_score_objects_arg,
    extract_string_arg,
    get_int_arg,
    get_score_objects_arg,
    get_string_arg,
    make_args,
    reduce_args_by,
)
from scorecore.models import Item, ScoreObject


def test_arg_kind_covers_every_supported_value():
    obj = ScoreObject()
    assert arg_kind(3) is ArgKind.INT
    assert arg_kind("x") is ArgKind.STRING
    assert arg_kind(obj) is ArgKind.SCORE_OBJECT
    assert arg_kind([obj, Item()]) is ArgKind.SCORE_OBJECTS
    assert arg_kind([]) is ArgKind.SCORE_OBJECTS


def test_arg_kind_rejects_values_outside_the_closed_set():
    with pytest.raises(TypeMismatch) as excinfo:
        arg_kind(1.5, "duration")

    assert excinfo.value.expected is None
    assert excinfo.value.actual == "float"
    assert excinfo.value.name == "duration"


def test_make_args_keeps_order_and_merges_keywords():
    bag = make_args([("b", 1), ("a", "x")], c=2)

    assert list(bag) == ["b", "a", "c"]
    assert bag == {"b": 1, "a": "x", "c": 2}


def test_make_args_rejects_unsupported_values_and_names():
    with pytest.raises(TypeMismatch):
        make_args({"pitch": {"step": "C"}})
    with pytest.raises(TypeError):
        make_args({1: "x"})


def test_extract_int_arg_returns_value_or_default():
    bag = {"duration": 4}

    assert extract_int_arg(bag, "duration", 1) == 4
    assert extract_int_arg(bag, "offset", 0) == 0
    assert bag == {"duration": 4}


def test_extract_int_arg_does_not_coerce_text():
    with pytest.raises(TypeMismatch) as excinfo:
        extract_int_arg({"duration": "4"}, "duration", 1)

    assert excinfo.value.expected is ArgKind.INT
    assert excinfo.value.actual == "string"
    assert "duration" in str(excinfo.value)


def test_extract_int_arg_rejects_bool():
    with pytest.raises(TypeMismatch) as excinfo:
        extract_int_arg({"n": True}, "n", 0)

    assert excinfo.value.expected is ArgKind.INT
    assert excinfo.value.actual == "bool"


def test_extract_string_arg_rejects_int():
    assert extract_string_arg({"info": "lead"}, "info", "") == "lead"
    assert extract_string_arg({}, "info", "none") == "none"
    with pytest.raises(TypeMismatch):
        extract_string_arg({"info": 7}, "info", "")


def test_extract_score_object_arg():
    obj = ScoreObject({"info": "motif"})

    assert extract_score_object_arg({"source": obj}, "source") is obj
    assert extract_score_object_arg({}, "source") is None
    with pytest.raises(TypeMismatch):
        extract_score_object_arg({"source": [obj]}, "source")


def test_extract_score_objects_arg_defaults_to_empty_list():
    items = [Item(), Item()]

    extracted = extract_score_objects_arg({"items": items}, "items")

    assert extracted == items
    assert extracted is not items
    assert extract_score_objects_arg({}, "items") == []
    assert extract_score_objects_arg({}, "items", items[:1]) == items[:1]
    with pytest.raises(TypeMismatch):
        extract_score_objects_arg({"items": ["a", "b"]}, "items")


def test_getters_check_bare_values():
    assert get_int_arg(5) == 5
    assert get_string_arg("x") == "x"
    assert get_score_objects_arg([]) == []
    with pytest.raises(TypeMismatch) as excinfo:
        get_string_arg(5)
    assert excinfo.value.name is None


def test_reduce_args_by_all_keys_yields_empty_bag():
    bag = {"info": "x", "duration": 2}

    assert reduce_args_by(bag, list(bag)) == {}
    assert bag == {"info": "x", "duration": 2}


def test_reduce_args_by_no_keys_yields_equal_copy():
    bag = {"info": "x", "duration": 2}

    reduced = reduce_args_by(bag, [])

    assert reduced == bag
    assert reduced is not bag


def test_reduce_args_by_ignores_missing_keys():
    assert reduce_args_by({"info": "x"}, ["duration", "info"]) == {}


def test_check_no_leftover_args_names_first_key():
    check_no_leftover_args({}, "Note")

    with pytest.raises(InvalidArgument) as excinfo:
        check_no_leftover_args({"pitch": 60, "bogus": 1}, "Note")

    assert excinfo.value.key == "pitch"
    assert excinfo.value.owner == "Note"
    assert "'pitch'" in str(excinfo.value)
