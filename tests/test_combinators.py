"""Tests for the assertion combinators."""

import pytest

from shapeguard.validation import (
    ValidationFailure,
    array_of,
    arrayish,
    boolean,
    either,
    literal,
    literals,
    maybe,
    number,
    object_of,
    path,
    shape,
    string,
    union,
    with_default,
)


def boom(value, name):
    raise ZeroDivisionError("not a validation failure")


def failure_of(assertion, value, name="value"):
    with pytest.raises(ValidationFailure) as exc_info:
        assertion(value, name)
    return exc_info.value


# --- array_of ---


def test_array_of_accepts():
    assert array_of(number)([], "[]") == []
    assert array_of(number)([1, 2, 3], "[1, 2, 3]") == [1, 2, 3]


def test_array_of_returns_new_list():
    items = (1, 2)
    result = array_of(number)(items, "items")
    assert result == [1, 2]
    assert isinstance(result, list)


def test_array_of_rejects_non_array():
    failure = failure_of(array_of(number), {})
    assert failure.kind == "an array"
    assert failure.target == "value"


def test_array_of_reports_first_failing_index():
    failure = failure_of(array_of(number), [1, 2, "x", "y"])
    assert failure.kind == "a number"
    assert failure.target.endswith("[2]")
    assert failure.value == "x"


# --- arrayish ---


def test_arrayish_wraps_scalar():
    assert arrayish(number)(5, "n") == [5]


def test_arrayish_passes_arrays_through():
    assert arrayish(number)([], "[]") == []
    assert arrayish(number)([1, 2], "[1, 2]") == [1, 2]


def test_arrayish_scalar_failure_mentions_array():
    failure = failure_of(arrayish(number), "x")
    assert failure.kind == "a number or an array"
    assert failure.target == "value"
    assert failure.value == "x"


def test_arrayish_object_failure():
    assert failure_of(arrayish(number), {}).kind == "a number or an array"


def test_arrayish_element_failure_is_not_rewrapped():
    failure = failure_of(arrayish(number), ["hi"])
    assert failure.kind == "a number"
    assert failure.target == "value[0]"


def test_arrayish_over_union_joins_kinds():
    failure = failure_of(arrayish(either(boolean, string)), 42)
    assert failure.kind == "a boolean or a string or an array"


def test_arrayish_does_not_catch_other_errors():
    with pytest.raises(ZeroDivisionError):
        arrayish(boom)(5, "value")


# --- object_of ---


def test_object_of_accepts():
    assert object_of(boolean)({}, "{}") == {}
    assert object_of(boolean)({"foo": True}, "obj") == {"foo": True}


def test_object_of_returns_new_dict():
    source = {"foo": True}
    result = object_of(boolean)(source, "obj")
    assert result == source
    assert result is not source


@pytest.mark.parametrize("value", [[], None])
def test_object_of_rejects_non_object(value):
    assert failure_of(object_of(boolean), value).kind == "an object"


def test_object_of_failing_key_path():
    failure = failure_of(object_of(boolean), {"foo": 42}, "flags")
    assert failure.kind == "a boolean"
    assert failure.target == "flags.foo"
    assert failure.value == 42


# --- shape ---


def test_shape_accepts():
    assert shape({"foo": boolean})({"foo": True}, "obj") == {"foo": True}


def test_shape_drops_extra_keys():
    assert shape({"a": number})({"a": 1, "b": 2}, "obj") == {"a": 1}


def test_shape_missing_key_reads_as_none():
    assert shape({"a": maybe(number)})({}, "obj") == {"a": None}

    failure = failure_of(shape({"a": number}), {})
    assert failure.target == "value.a"
    assert failure.value is None


@pytest.mark.parametrize("value", [[], None])
def test_shape_rejects_non_object(value):
    assert failure_of(shape({"foo": boolean}), value).kind == "an object"


def test_shape_checks_fields_in_declaration_order():
    failure = failure_of(shape({"b": string, "a": number}), {"a": "x", "b": 1})
    assert failure.target == "value.b"


def test_shape_nested_path_with_label():
    nested = shape({"items": array_of(shape({"id": number}))})
    failure = failure_of(nested, {"items": [{"id": "x"}]}, "root")
    assert failure.target == "root.items[0].id"
    assert failure.value == "x"


def test_shape_nested_path_with_builder():
    nested = shape({"items": array_of(shape({"id": number}))})
    failure = failure_of(nested, {"items": [{"id": 1}, {"id": "x"}]}, path("root"))
    assert failure.target == "root.items[1].id"


def test_shape_success_never_resolves_builder():
    calls = []

    def builder(*segments):
        calls.append(segments)
        return "root" + "".join(segments)

    nested = shape({"items": array_of(shape({"id": number}))})
    assert nested({"items": [{"id": 1}, {"id": 2}]}, builder) == {"items": [{"id": 1}, {"id": 2}]}
    assert calls == []


def test_shape_is_idempotent():
    user = shape({"id": number, "tags": array_of(string)})
    once = user({"id": 1, "tags": ["a"], "extra": True}, "user")
    assert user(once, "user") == once


# --- maybe / with_default ---


def test_maybe():
    assert maybe(boolean)(None, "null") is None
    assert maybe(boolean)(True, "true") is True
    assert failure_of(maybe(boolean), 42).kind == "a boolean"


def test_maybe_normalizes_absent_even_if_inner_rejects_it():
    assert maybe(literal("x"))(None, "value") is None


def test_with_default():
    assert with_default(number, 42)(None, "null") == 42
    assert with_default(number, 42)(3.14, "pi") == 3.14
    assert failure_of(with_default(number, 42), "hi").kind == "a number"


def test_with_default_returns_default_object_itself():
    default = []
    assert with_default(array_of(number), default)(None, "value") is default


# --- either ---


def test_either_accepts_either_branch():
    assert either(boolean, string)(True, "true") is True
    assert either(boolean, string)("hi", "hi") == "hi"


def test_either_merges_kinds():
    failure = failure_of(either(boolean, string), 42)
    assert failure.kind == "a boolean or a string"
    assert failure.target == "value"
    assert failure.value == 42


def test_either_does_not_catch_other_errors():
    with pytest.raises(ZeroDivisionError):
        either(boom, number)(1, "value")
    with pytest.raises(ZeroDivisionError):
        either(number, boom)("x", "value")


# --- literal / literals ---


def test_literal():
    assert literal("true")("true", "value") == "true"
    failure = failure_of(literal("true"), 42)
    assert failure.kind == "a literal<true>"


def test_literal_is_strict_about_type():
    assert failure_of(literal(1), True).kind == "a literal<1>"
    assert failure_of(literal(True), 1).kind == "a literal<true>"
    assert failure_of(literal("1"), 1).kind == "a literal<1>"


def test_literal_treats_int_and_float_as_one_number_type():
    assert literal(1)(1.0, "value") == 1.0
    assert literal(2.0)(2, "value") == 2
    assert literals([1, 2])(1.0, "value") == 1.0


def test_literal_renders_bool_and_none_like_json():
    assert failure_of(literal(True), "x").kind == "a literal<true>"
    assert failure_of(literal(False), "x").kind == "a literal<false>"
    assert failure_of(literal(None), "x").kind == "a literal<null>"
    assert literal(None)(None, "value") is None


def test_literals():
    assertion = literals(["a", "b", "c"])
    for value in ("a", "b", "c"):
        assert assertion(value, "value") == value
    failure = failure_of(assertion, 42)
    assert failure.kind == "a literal<a> or a literal<b> or a literal<c>"


# --- union ---


def test_union_returns_first_success():
    assert union(number, string)(1, "value") == 1
    assert union(number, string)("x", "value") == "x"


def test_union_first_branch_result_is_returned():
    assert union(maybe(number), string)(None, "value") is None


def test_union_aggregates_in_order():
    failure = failure_of(union(literal("a"), literal("b")), "c", "letter")
    assert failure.kind == "a literal<a> or a literal<b>"
    assert failure.target == "letter"
    assert failure.value == "c"


def test_union_target_is_original_name_not_a_branch_path():
    branch = shape({"id": number})
    failure = failure_of(union(branch, string), {"id": "x"}, "root")
    assert failure.kind == "a number or a string"
    assert failure.target == "root"


def test_union_has_no_arity_cap():
    assertion = union(*(literal(i) for i in range(7)))
    assert assertion(6, "value") == 6
    assert failure_of(assertion, 7).kind.count(" or ") == 6


def test_union_single_branch():
    assert failure_of(union(number), "x").kind == "a number"


def test_union_requires_a_branch():
    with pytest.raises(TypeError):
        union()


def test_union_does_not_catch_other_errors():
    with pytest.raises(ZeroDivisionError):
        union(string, boom, number)(1, "value")


def test_assertions_are_reusable():
    tags = array_of(string)
    assert tags(["a"], "first") == ["a"]
    assert failure_of(tags, [1], "second").target == "second[0]"
    assert tags(["b"], "third") == ["b"]
