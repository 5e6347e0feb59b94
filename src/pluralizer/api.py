# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""
Module level functions operating on a shared, lazily created `Pluralizer`.

Rules registered here apply process-wide. Use a dedicated `Pluralizer`
instance where rules must stay local to a component.
"""
import os, re, threading  # isort: skip
from collections.abc import Sized

from .engine import Pluralizer
from .model.rules_model import RulesConfig
from .utils.config import load_rules_config

__all__ = [
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

_lock = threading.Lock()
_default:Pluralizer | None = None


def initialize() -> Pluralizer:
    """
    Creates the shared pluralizer with the built-in rules on first use and returns it.
    """
    global _default  # noqa: PLW0603
    if _default is None:
        with _lock:
            if _default is None:
                _default = Pluralizer()
    return _default


def reset() -> None:
    """
    Drops all registered rules, the next call starts over from the built-in rules.
    """
    global _default  # noqa: PLW0603
    with _lock:
        _default = None


def pluralize(word:str, count:int | Sized, inclusive:bool = False) -> str:
    """
    >>> pluralize("House", 2, True)
    '2 Houses'
    >>> pluralize("Houses", 1, True)
    '1 House'
    >>> pluralize("House", 1)
    'House'
    >>> pluralize("Houses", 2)
    'Houses'
    """
    return initialize().pluralize(word, count, inclusive)


def to_plural(word:str) -> str:
    return initialize().to_plural(word)


def to_singular(word:str) -> str:
    return initialize().to_singular(word)


def is_plural(word:str) -> bool:
    return initialize().is_plural(word)


def is_singular(word:str) -> bool:
    return initialize().is_singular(word)


def add_plural_rule(pattern:str | re.Pattern[str], replacement:str) -> None:
    """
    >>> add_plural_rule(r"(matr|cod|mur|sil|vert|ind|append)(?:ix|ex)$", "$1ices")
    >>> pluralize("Vertex", 2)
    'Vertices'
    """
    initialize().add_plural_rule(pattern, replacement)


def add_singular_rule(pattern:str | re.Pattern[str], replacement:str) -> None:
    """
    >>> add_singular_rule(r"(matr|append)ices$", "$1ix")
    >>> pluralize("Matrices", 1)
    'Matrix'
    """
    initialize().add_singular_rule(pattern, replacement)


def add_irregular_rule(singular:str, plural:str) -> None:
    initialize().add_irregular_rule(singular, plural)


def add_uncountable_rule(rule:str | re.Pattern[str]) -> None:
    """
    >>> add_uncountable_rule("cash")
    >>> pluralize("Cash", 2)
    'Cash'
    """
    initialize().add_uncountable_rule(rule)


def load_rules(path:str | os.PathLike[str], *, pluralizer:Pluralizer | None = None) -> RulesConfig:
    """
    Reads a JSON or YAML rules file and registers its rules with `pluralizer`,
    or with the shared pluralizer if none is given.
    """
    config = load_rules_config(path)
    (pluralizer or initialize()).configure(config)
    return config
