# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations
import re, threading  # isort: skip
from collections.abc import Sized
from typing import TYPE_CHECKING, Final

from . import constants
from .tables import Direction, IrregularTable, RuleTable, UncountableSet
from .utils import loggers
from .utils.casing import restore_case

if TYPE_CHECKING:
    from .model.rules_model import RulesConfig

__all__ = [
    "Pluralizer",
]

LOG:Final[loggers.Logger] = loggers.get_logger(__name__)


class Pluralizer:
    """
    Owns the uncountable, irregular and pattern rule tables and turns words
    into their singular or plural form.

    >>> p = Pluralizer()
    >>> p.pluralize("House", 2, inclusive = True)
    '2 Houses'
    >>> p.to_singular("Geese")
    'Goose'
    """

    def __init__(self, *, defaults:bool = True) -> None:
        self._lock = threading.RLock()
        self._initialized = False
        self.uncountables = UncountableSet()
        self.irregulars = IrregularTable()
        self.plural_rules = RuleTable()
        self.singular_rules = RuleTable()
        if defaults:
            self.initialize()

    def initialize(self) -> None:
        """
        Loads the built-in rule set. Only the first call has an effect.
        Rules registered before still take precedence over the built-in ones.
        """
        with self._lock:
            if self._initialized:
                return
            self._initialized = True

            irregulars = [(singular, plural) for singular, plural in constants.IRREGULAR_RULES
                if not (self.irregulars.has_singular(singular) or self.irregulars.has_plural(plural))]
            for singular, plural in irregulars:
                self.irregulars.add(singular, plural)
            uncountable_patterns = [(pattern, "") for pattern in constants.UNCOUNTABLE_PATTERNS]
            self.plural_rules.add_defaults([*constants.PLURAL_RULES, *uncountable_patterns])
            self.singular_rules.add_defaults([*constants.SINGULAR_RULES, *uncountable_patterns])
            for word in constants.UNCOUNTABLE_RULES:
                self.uncountables.add(word)

            LOG.debug("Loaded default rules: %d irregular, %d plural, %d singular, %d uncountable",
                len(self.irregulars), len(self.plural_rules), len(self.singular_rules), len(self.uncountables))

    @property
    def initialized(self) -> bool:
        return self._initialized

    def rules_for(self, direction:Direction) -> RuleTable:
        match direction:
            case Direction.PLURAL:
                return self.plural_rules
            case Direction.SINGULAR:
                return self.singular_rules
        raise AssertionError(f"Unsupported direction: {direction}")

    #############################
    # registration
    #############################
    def add_rule(self, direction:Direction, pattern:str | re.Pattern[str], replacement:str) -> None:
        with self._lock:
            rule = self.rules_for(direction).add(pattern, replacement)
        LOG.debug("Added %s rule /%s/ -> '%s'", direction.name.lower(), rule.pattern.pattern, replacement)

    def add_plural_rule(self, pattern:str | re.Pattern[str], replacement:str) -> None:
        self.add_rule(Direction.PLURAL, pattern, replacement)

    def add_singular_rule(self, pattern:str | re.Pattern[str], replacement:str) -> None:
        self.add_rule(Direction.SINGULAR, pattern, replacement)

    def add_irregular_rule(self, singular:str, plural:str) -> None:
        with self._lock:
            self.irregulars.add(singular, plural)
        LOG.debug("Added irregular rule %s <-> %s", singular, plural)

    def add_uncountable_rule(self, rule:str | re.Pattern[str]) -> None:
        """
        Registers a word, or a compiled regular expression, whose singular and plural are the same.
        """
        with self._lock:
            if isinstance(rule, re.Pattern):
                self._add_uncountable_pattern(rule)
            else:
                self.uncountables.add(rule)
        LOG.debug("Added uncountable rule %s", rule if isinstance(rule, str) else f"/{rule.pattern}/")

    def _add_uncountable_pattern(self, pattern:str | re.Pattern[str]) -> None:
        self.plural_rules.add(pattern, "")
        self.singular_rules.add(pattern, "")

    def configure(self, config:RulesConfig) -> None:
        with self._lock:
            for irregular in config.irregular_rules:
                self.add_irregular_rule(irregular.singular, irregular.plural)
            for rule in config.plural_rules:
                self.add_plural_rule(rule.pattern, rule.replacement)
            for rule in config.singular_rules:
                self.add_singular_rule(rule.pattern, rule.replacement)
            for word in config.uncountable_rules:
                self.add_uncountable_rule(word)
            for pattern in config.uncountable_patterns:
                self.add_uncountable_rule(re.compile(pattern, re.IGNORECASE))

    #############################
    # transformation
    #############################
    def transform(self, word:str, direction:Direction) -> str:
        """
        Surrounding whitespace is kept as is and not seen by the rules.

        >>> Pluralizer().transform(" goose  ", Direction.PLURAL)
        ' geese  '
        """
        core = word.strip()
        if not core:
            return word
        start = len(word) - len(word.lstrip())
        return word[:start] + self._transform(core, direction) + word[start + len(core):]

    def _transform(self, word:str, direction:Direction) -> str:
        with self._lock:
            if word in self.uncountables:
                return word

            irregular = self.irregulars.lookup(word, direction)
            if irregular is not None:
                return irregular

            result = self.rules_for(direction).match(word)

        if result is None:
            return word
        return restore_case(word, result)

    def to_plural(self, word:str) -> str:
        return self.transform(word, Direction.PLURAL)

    def to_singular(self, word:str) -> str:
        return self.transform(word, Direction.SINGULAR)

    def is_plural(self, word:str) -> bool:
        return self.to_plural(word) == word

    def is_singular(self, word:str) -> bool:
        return self.to_singular(word) == word

    def pluralize(self, word:str, count:int | Sized, inclusive:bool = False) -> str:
        """
        Returns the singular form of `word` if count is 1, otherwise the plural form.
        Sized objects are counted by their length.

        >>> p = Pluralizer()
        >>> p.pluralize("Houses", 1, inclusive = True), p.pluralize("box", ["a", "b"])
        ('1 House', 'boxes')
        """
        count = count if isinstance(count, int) else len(count)
        result = self.to_singular(word) if count == 1 else self.to_plural(word)
        return f"{count} {result}" if inclusive else result
