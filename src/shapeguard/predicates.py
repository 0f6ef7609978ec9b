# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
Shape predicates. Every function in this file returns a plain `bool` and never
mutates its input. Only the functions that take a `keys` or `method_name`
argument raise, and only when that argument itself is malformed.
"""

from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from typing import Any, Callable, Optional, TypeAlias, TypeGuard, Union

from pydantic.dataclasses import dataclass as validated_dataclass

import shapeguard.deployment as d
from shapeguard.constraints import InvalidArgumentError, ensure

ARRAY_TYPES: tuple[type, ...] = (list, tuple)


@validated_dataclass(frozen=True, eq=False)
class Symbol:
    """A unique token. Two symbols are equal only if they are the same object."""

    description: Optional[str] = None

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"

        return f"Symbol({self.description!r})"


Number: TypeAlias = Union[Real, Decimal]
PropertyKey: TypeAlias = Union[str, Number, Symbol, object]
Keys: TypeAlias = Union[PropertyKey, list[PropertyKey], tuple[PropertyKey, ...]]


def is_string(value: Any, nonempty: bool = False) -> TypeGuard[str]:
    if not isinstance(value, str):
        return False

    return bool(value) if nonempty else True


def is_number(value: Any, nonzero: bool = False) -> TypeGuard[Number]:
    if isinstance(value, Decimal):
        if value.is_nan():
            return False
    elif not isinstance(value, Real) or isinstance(value, bool):
        return False
    elif value != value:  # NaN
        return False

    return value != 0 if nonzero else True


def is_number_or_string(
    value: Any, nonempty: bool = False
) -> TypeGuard[Union[str, Number]]:
    """For numbers, `nonempty` rejects zero."""
    return is_string(value, nonempty) or is_number(value, nonempty)


def is_symbol(value: Any) -> TypeGuard[Symbol]:
    """Accepts `Symbol` instances and bare `object()` sentinels."""
    return isinstance(value, Symbol) or type(value) is object


def is_callable(value: Any) -> TypeGuard[Callable[..., Any]]:
    return callable(value)


def is_plain_object(value: Any) -> TypeGuard[Mapping[Any, Any]]:
    return isinstance(value, Mapping)


def is_array(value: Any, nonempty: bool = False) -> TypeGuard[list[Any]]:
    if not isinstance(value, ARRAY_TYPES):
        return False

    return len(value) > 0 if nonempty else True


def is_empty_array(value: Any) -> bool:
    return isinstance(value, ARRAY_TYPES) and len(value) == 0


def is_string_array(
    value: Any,
    nonempty: bool = False,
    item_nonempty: bool = False,
) -> TypeGuard[list[str]]:
    if not is_array(value, nonempty):
        return False

    return all(is_string(item, item_nonempty) for item in value)


def is_property_key(value: Any) -> TypeGuard[PropertyKey]:
    """Empty strings and zero are not usable as keys."""
    if not (is_string(value) or is_number(value) or is_symbol(value)):
        return False

    return bool(value)


def is_property_key_array(
    value: Any, nonempty: bool = False
) -> TypeGuard[list[PropertyKey]]:
    if not is_array(value, nonempty):
        return False

    return all(is_property_key(item) for item in value)


def normalize_keys(
    keys: Any,
    *,
    allow_empty: bool = False,
    caller: str = "normalize_keys",
) -> tuple[PropertyKey, ...]:
    """Wrap a single key into a tuple and check that every key is usable.

    Raises `InvalidArgumentError` if `keys` is neither a property key nor an
    array of property keys. Unless `allow_empty` is set, the array must
    contain at least one key.
    """
    if is_property_key(keys):
        return (keys,)

    valid = is_property_key_array(keys, nonempty=not allow_empty)

    if not valid:
        d.LOGGER.debug(f"{caller}() received invalid keys: {keys!r}")

    ensure(
        valid,
        InvalidArgumentError,
        f"{caller}() expects keys to be a property key or a "
        f"{'' if allow_empty else 'non-empty '}list of property keys, "
        f"got {keys!r}",
    )

    return tuple(keys)


def is_object_with(
    value: Any,
    keys: Keys,
    prop_nonempty: bool = False,
) -> TypeGuard[Mapping[Any, Any]]:
    """Check that `value` is a mapping containing every key in `keys`.

    With `prop_nonempty`, each key must also map to a truthy value. Membership
    is tested with `in`, so keys reachable through parent maps (for example
    in a `ChainMap`) count as present.
    """
    rkeys = normalize_keys(keys, caller="is_object_with")

    if not is_plain_object(value):
        return False

    if prop_nonempty:
        return all(value.get(k) for k in rkeys)

    return all(k in value for k in rkeys)


def is_object_array(
    value: Any,
    keys: Keys = (),
    nonempty: bool = False,
) -> TypeGuard[list[Mapping[Any, Any]]]:
    rkeys = normalize_keys(keys, allow_empty=True, caller="is_object_array")

    if not is_array(value, nonempty):
        return False

    return all(
        is_plain_object(item) and all(k in item for k in rkeys) for item in value
    )


def has_callable(
    value: Any, method_name: str
) -> TypeGuard[Mapping[str, Callable[..., Any]]]:
    valid = is_string(method_name, nonempty=True)

    if not valid:
        d.LOGGER.debug(
            f"has_callable() received invalid method_name: {method_name!r}"
        )

    ensure(
        valid,
        InvalidArgumentError,
        f"has_callable() expects method_name to be a non-empty string, "
        f"got {method_name!r}",
    )

    return is_object_with(value, method_name) and is_callable(value[method_name])


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
