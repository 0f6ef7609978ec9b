"""Tests for shapeguard.assertions."""

import logging
import re

import pytest
from pydantic import ValidationError

import shapeguard.deployment as d
from shapeguard.assertions import (
    VariableAssertion,
    assert_var,
    assert_variable,
    require_var,
)
from shapeguard.constraints import InvalidArgumentError, VariableAssertionError
from shapeguard.predicates import Symbol


class TestBuilder:
    """Test the VariableAssertion handle itself."""

    def test_returns_builder(self):
        builder = assert_variable(5, "msg")
        assert isinstance(builder, VariableAssertion)
        assert builder.value == 5
        assert builder.message == "msg"

    def test_aliases(self):
        assert assert_var is assert_variable
        assert require_var is assert_variable

    def test_keeps_reference(self):
        value = {"a": 1}
        assert assert_variable(value).value is value

    def test_frozen(self):
        builder = assert_variable(5)
        with pytest.raises(AttributeError):
            builder.value = 6

    @pytest.mark.parametrize("message", [b"x", 1, ["x"]])
    def test_non_string_message_rejected(self, message):
        with pytest.raises(ValidationError):
            assert_variable(1, message)

    def test_reusable(self):
        builder = assert_variable([])

        builder.is_array()
        builder.is_empty_array()
        builder.is_object_array()

        with pytest.raises(VariableAssertionError):
            builder.is_array(True)

        builder.is_array()


def test_is_string_raises_for_number():
    with pytest.raises(VariableAssertionError, match="^variable must be a string$"):
        assert_variable(5).is_string()


def test_is_string_passes():
    assert assert_variable("x").is_string() is None
    assert assert_variable("x").is_str(True) is None


def test_custom_message_is_exact():
    with pytest.raises(VariableAssertionError) as excinfo:
        assert_variable("5", "custom").is_num()

    assert str(excinfo.value) == "custom"


def test_error_is_assertion_and_type_error():
    with pytest.raises(AssertionError):
        assert_variable(None).is_callable()

    with pytest.raises(TypeError):
        assert_variable(None).is_callable()


@pytest.mark.parametrize(
    "value, check, expected",
    [
        ("", lambda b: b.is_string(True), "a non-empty string"),
        (0, lambda b: b.is_number(True), "a non-zero number"),
        (None, lambda b: b.is_number(), "a number"),
        ([], lambda b: b.is_number_or_string(), "a number or a string"),
        (0, lambda b: b.is_num_or_str(True), "a non-zero number or a non-empty string"),
        ("s", lambda b: b.is_symbol(), "a symbol"),
        (1, lambda b: b.is_func(), "callable"),
        ([], lambda b: b.is_obj(), "an object"),
        ({}, lambda b: b.is_arr(), "an array"),
        ([], lambda b: b.is_array(True), "a non-empty array"),
        ([1], lambda b: b.is_empty_arr(), "an empty array"),
        ([1], lambda b: b.is_str_arr(), "an array of strings"),
        ([""], lambda b: b.is_string_array(True, True), "a non-empty array of non-empty strings"),
        (0, lambda b: b.is_property_key(), "a property key"),
        ([""], lambda b: b.is_property_keys(), "an array of property keys"),
        ([1], lambda b: b.is_obj_arr(), "an array of objects"),
        ([], lambda b: b.is_object_array((), True), "a non-empty array of objects"),
    ],
)
def test_default_messages(value, check, expected):
    with pytest.raises(VariableAssertionError) as excinfo:
        check(assert_variable(value))

    assert str(excinfo.value) == f"variable must be {expected}"


@pytest.mark.parametrize(
    "value, check",
    [
        ("a", lambda b: b.is_string(True)),
        (-1, lambda b: b.is_number(True)),
        (0, lambda b: b.is_number_or_string()),
        (Symbol(), lambda b: b.is_symbol()),
        (len, lambda b: b.is_callable()),
        ({}, lambda b: b.is_plain_object()),
        ((1,), lambda b: b.is_array(True)),
        ((), lambda b: b.is_empty_array()),
        (["a"], lambda b: b.is_string_array(True, True)),
        ("a", lambda b: b.is_property_key()),
        (["a", 1], lambda b: b.is_property_key_array(True)),
        ({"a": 1}, lambda b: b.is_object_with("a")),
        ([{"a": 1}], lambda b: b.is_object_array("a", True)),
        ({"save": print}, lambda b: b.has_callable("save")),
    ],
)
def test_passing_checks_return_none(value, check):
    assert check(assert_variable(value)) is None


class TestObjectChecks:
    """Test the key-based assertions."""

    def test_object_with_message(self):
        expected = "variable must be an object with the properties 'a', 'b'"

        with pytest.raises(VariableAssertionError, match=re.escape(expected)):
            assert_variable({"a": 1}).is_object_with(["a", "b"])

    def test_object_with_nonempty_message(self):
        expected = "variable must be an object with the non-empty properties 'a'"

        with pytest.raises(VariableAssertionError, match=re.escape(expected)):
            assert_variable({"a": ""}).is_obj_with("a", True)

    def test_has_callable_message(self):
        expected = "variable must be an object that contains a 'save' method"

        with pytest.raises(VariableAssertionError, match=re.escape(expected)):
            assert_variable({"save": 1}).has_func("save")

    def test_custom_message_for_object_checks(self):
        with pytest.raises(VariableAssertionError, match="^needs a save$"):
            assert_variable({}, "needs a save").has_callable("save")

    def test_invalid_keys_propagate(self):
        with pytest.raises(InvalidArgumentError) as excinfo:
            assert_variable({}).is_object_with([])

        assert type(excinfo.value) is InvalidArgumentError

    def test_invalid_keys_ignore_custom_message(self):
        with pytest.raises(InvalidArgumentError, match="Constraint violation"):
            assert_variable([{}], "custom").is_object_array([""])

    def test_invalid_method_name_propagates(self):
        with pytest.raises(InvalidArgumentError, match="method_name"):
            assert_variable({"f": len}).has_callable("")


class TestConfiguration:
    """Test the settings read from shapeguard.deployment."""

    def test_variable_name(self, monkeypatch):
        monkeypatch.setattr(d, "VARIABLE_NAME", "port")

        with pytest.raises(VariableAssertionError, match="^port must be a number$"):
            assert_variable("8000").is_number()

    def test_failures_not_logged_by_default(self, monkeypatch, caplog):
        monkeypatch.setattr(d, "LOG_FAILURES", False)
        caplog.set_level(logging.DEBUG, logger="shapeguard")

        with pytest.raises(VariableAssertionError):
            assert_variable(1).is_string()

        assert [r for r in caplog.records if r.name == "shapeguard"] == []

    def test_failures_logged(self, monkeypatch, caplog):
        monkeypatch.setattr(d, "LOG_FAILURES", True)
        caplog.set_level(logging.DEBUG, logger="shapeguard")

        with pytest.raises(VariableAssertionError):
            assert_variable(1).is_string()

        records = [r for r in caplog.records if r.name == "shapeguard"]

        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert "int" in records[0].getMessage()
        assert "variable must be a string" in records[0].getMessage()
