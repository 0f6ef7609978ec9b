# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
This file provides (1) a simple replacement for raw `assert`s and (2) the error types raised by shapeguard.
"""

from typing import Any, Optional


class InvalidArgumentError(TypeError):
    """A configuration argument (such as `keys` or `method_name`) is malformed."""


class VariableAssertionError(AssertionError, TypeError):
    """The value under test does not have the required shape."""


def ensure(
    condition: Any,
    exctype: type[Exception] = ValueError,
    msg: Optional[str] = None,
) -> None:
    if not condition:
        if msg:
            msg = "Constraint violation: " + msg
        else:
            msg = "Constraint violation"

        raise exctype(msg)


def assert_(condition: Any, message: Optional[str] = None) -> None:
    if not condition:
        if message is None:
            raise AssertionError

        raise AssertionError(message)


ensure_that = assert_
