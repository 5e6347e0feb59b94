# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""
Pluralize or singularize English words based on a count.

    >>> from pluralizer import pluralize
    >>> pluralize("House", 2, True)
    '2 Houses'
    >>> pluralize("Houses", 1, True)
    '1 House'
"""
from .api import (
    add_irregular_rule,
    add_plural_rule,
    add_singular_rule,
    add_uncountable_rule,
    initialize,
    is_plural,
    is_singular,
    load_rules,
    pluralize,
    reset,
    to_plural,
    to_singular,
)
from .engine import Pluralizer
from .tables import Direction

__all__ = [
    "Direction",
    "Pluralizer",
    "add_irregular_rule",
    "add_plural_rule",
    "add_singular_rule",
    "add_uncountable_rule",
    "initialize",
    "is_plural",
    "is_singular",
    "load_rules",
    "pluralize",
    "reset",
    "to_plural",
    "to_singular",
]
