# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

from types import SimpleNamespace

from shapeguard.assertions import (
    VariableAssertion,
    assert_var,
    assert_variable,
    require_var,
)
from shapeguard.constraints import (
    InvalidArgumentError,
    VariableAssertionError,
    assert_,
    ensure_that,
)
from shapeguard.predicates import (
    Symbol,
    has_callable,
    has_func,
    is_arr,
    is_array,
    is_callable,
    is_empty_arr,
    is_empty_array,
    is_func,
    is_num,
    is_num_or_str,
    is_number,
    is_number_or_string,
    is_obj,
    is_obj_arr,
    is_obj_with,
    is_object_array,
    is_object_with,
    is_plain_object,
    is_property_key,
    is_property_key_array,
    is_property_keys,
    is_str,
    is_str_arr,
    is_string,
    is_string_array,
    is_symbol,
)

__version_info__ = 0, 1, 0
__version__ = ".".join(map(str, __version_info__))
__author__ = "Max R. P. Grossmann, Holger Gerhardt, et al."

FUNCTIONS: tuple[str, ...] = (
    "is_string",
    "is_str",
    "is_number",
    "is_num",
    "is_number_or_string",
    "is_num_or_str",
    "is_symbol",
    "is_callable",
    "is_func",
    "is_plain_object",
    "is_obj",
    "is_array",
    "is_arr",
    "is_empty_array",
    "is_empty_arr",
    "is_string_array",
    "is_str_arr",
    "is_property_key",
    "is_property_key_array",
    "is_property_keys",
    "is_object_with",
    "is_obj_with",
    "is_object_array",
    "is_obj_arr",
    "has_callable",
    "has_func",
    "assert_",
    "ensure_that",
    "assert_variable",
    "assert_var",
    "require_var",
)

# Aggregate of every function above, for `from shapeguard import default`
default = SimpleNamespace(**{name: globals()[name] for name in FUNCTIONS})

__all__ = [
    *FUNCTIONS,
    "InvalidArgumentError",
    "Symbol",
    "VariableAssertion",
    "VariableAssertionError",
    "default",
]
