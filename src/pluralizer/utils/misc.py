# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
from collections.abc import Callable
from typing import Any

__all__ = [
    "ensure",
]


def ensure(condition:Any | bool | Callable[[], Any], error_message:str) -> None:
    """
    Raises an AssertionError with the given message if the condition is falsy.
    Callables are invoked and their result is checked instead.

    >>> ensure(True, "never raised")
    >>> ensure(lambda: 1, "never raised")
    >>> ensure([], "empty")
    Traceback (most recent call last):
      ...
    AssertionError: empty
    """
    if callable(condition):
        condition = condition()
    if not condition:
        raise AssertionError(error_message)
