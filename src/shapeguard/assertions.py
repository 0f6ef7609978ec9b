# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

from typing import Any, Optional

from pydantic import ConfigDict
from pydantic.dataclasses import dataclass as validated_dataclass

import shapeguard.deployment as d
import shapeguard.predicates as p
from shapeguard.constraints import VariableAssertionError


def _nonempty(flag: bool, noun: str) -> str:
    return f"non-empty {noun}" if flag else noun


def _article(phrase: str) -> str:
    return ("an " if phrase[0] in "aeiou" else "a ") + phrase


@validated_dataclass(frozen=True, config=ConfigDict(strict=True))
class VariableAssertion:
    """Assertions about a single value.

    Every method mirrors the predicate of the same name in
    `shapeguard.predicates`, minus the value itself. A method returns `None`
    if the predicate holds and raises `VariableAssertionError` otherwise. The
    error message is `message` if one was given, else a description of the
    expected shape. Errors about malformed arguments (`keys`, `method_name`)
    propagate from the predicate unchanged.
    """

    value: Any
    message: Optional[str] = None

    def _check(self, passed: bool, expected: str) -> None:
        if passed:
            return

        msg = self.message or f"{d.VARIABLE_NAME} must be {expected}"

        if d.LOG_FAILURES:
            d.LOGGER.debug(
                f"Assertion failed for value of type {type(self.value).__name__}: "
                f"{msg}"
            )

        raise VariableAssertionError(msg)

    def is_string(self, nonempty: bool = False) -> None:
        self._check(
            p.is_string(self.value, nonempty),
            _article(_nonempty(nonempty, "string")),
        )

    def is_number(self, nonzero: bool = False) -> None:
        self._check(
            p.is_number(self.value, nonzero),
            "a non-zero number" if nonzero else "a number",
        )

    def is_number_or_string(self, nonempty: bool = False) -> None:
        self._check(
            p.is_number_or_string(self.value, nonempty),
            "a non-zero number or a non-empty string"
            if nonempty
            else "a number or a string",
        )

    def is_symbol(self) -> None:
        self._check(p.is_symbol(self.value), "a symbol")

    def is_callable(self) -> None:
        self._check(p.is_callable(self.value), "callable")

    def is_plain_object(self) -> None:
        self._check(p.is_plain_object(self.value), "an object")

    def is_array(self, nonempty: bool = False) -> None:
        self._check(
            p.is_array(self.value, nonempty),
            _article(_nonempty(nonempty, "array")),
        )

    def is_empty_array(self) -> None:
        self._check(p.is_empty_array(self.value), "an empty array")

    def is_string_array(
        self, nonempty: bool = False, item_nonempty: bool = False
    ) -> None:
        self._check(
            p.is_string_array(self.value, nonempty, item_nonempty),
            _article(_nonempty(nonempty, "array"))
            + " of "
            + _nonempty(item_nonempty, "strings"),
        )

    def is_property_key(self) -> None:
        self._check(p.is_property_key(self.value), "a property key")

    def is_property_key_array(self, nonempty: bool = False) -> None:
        self._check(
            p.is_property_key_array(self.value, nonempty),
            _article(_nonempty(nonempty, "array")) + " of property keys",
        )

    def is_object_with(self, keys: p.Keys, prop_nonempty: bool = False) -> None:
        passed = p.is_object_with(self.value, keys, prop_nonempty)

        if not passed:
            names = ", ".join(repr(k) for k in p.normalize_keys(keys))
            self._check(
                passed,
                f"an object with the {'non-empty ' if prop_nonempty else ''}"
                f"properties {names}",
            )

    def is_object_array(self, keys: p.Keys = (), nonempty: bool = False) -> None:
        self._check(
            p.is_object_array(self.value, keys, nonempty),
            _article(_nonempty(nonempty, "array")) + " of objects",
        )

    def has_callable(self, method_name: str) -> None:
        self._check(
            p.has_callable(self.value, method_name),
            f"an object that contains a {method_name!r} method",
        )

    is_str = is_string
    is_num = is_number
    is_num_or_str = is_number_or_string
    is_func = is_callable
    is_obj = is_plain_object
    is_arr = is_array
    is_empty_arr = is_empty_array
    is_str_arr = is_string_array
    is_property_keys = is_property_key_array
    is_obj_with = is_object_with
    is_obj_arr = is_object_array
    has_func = has_callable


def assert_variable(value: Any, message: Optional[str] = None) -> VariableAssertion:
    return VariableAssertion(value, message)


assert_var = assert_variable
require_var = assert_variable
