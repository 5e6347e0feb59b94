# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
import enum, re  # isort: skip
from collections.abc import Iterable, Iterator
from gettext import gettext as _
from typing import Final, NamedTuple

from .utils.casing import restore_case

__all__ = [
    "Direction",
    "IrregularTable",
    "RuleTable",
    "UncountableSet",
    "WordRule",
    "compile_pattern",
]

# `$0` is the whole match, `$1`..`$99` the capture groups
PLACEHOLDER:Final[re.Pattern[str]] = re.compile(r"\$(\d{1,2})")

# splits a compound like "mother-goose" or "field mouse" into head and last component
COMPOUND:Final[re.Pattern[str]] = re.compile(r"^(?P<head>.*[\s_-])(?P<tail>[^\s_-]+)$")


class Direction(enum.Enum):
    PLURAL = enum.auto()
    SINGULAR = enum.auto()


def compile_pattern(pattern:str | re.Pattern[str]) -> re.Pattern[str]:
    """
    Compiles `pattern` case-insensitively. Already compiled patterns lacking
    the IGNORECASE flag are recompiled with it.

    >>> compile_pattern("ox$").flags & re.IGNORECASE != 0
    True
    >>> compile_pattern("(")  # doctest: +ELLIPSIS
    Traceback (most recent call last):
      ...
    ValueError: Invalid regular expression `(`: ...
    """
    if isinstance(pattern, re.Pattern):
        if pattern.flags & re.IGNORECASE:
            return pattern
        return re.compile(pattern.pattern, pattern.flags | re.IGNORECASE)
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as ex:
        raise ValueError(_("Invalid regular expression `%s`: %s") % (pattern, ex)) from ex


class WordRule(NamedTuple):
    pattern:re.Pattern[str]
    replacement:str

    def apply(self, word:str) -> str:
        """
        Replaces the first match in `word` with the interpolated replacement.

        >>> WordRule(compile_pattern("(matr|append)(?:ix|ices)$"), "$1ices").apply("matrix")
        'matrices'
        >>> WordRule(compile_pattern("sheep$"), "").apply("sheep")
        'sheep'
        """
        if not self.replacement:
            return word

        def interpolate(match:re.Match[str]) -> str:
            def group(placeholder:re.Match[str]) -> str:
                index = int(placeholder.group(1))
                if index > match.re.groups:
                    return ""
                return match.group(index) or ""
            return PLACEHOLDER.sub(group, self.replacement)

        return self.pattern.sub(interpolate, word, count = 1)


class RuleTable:
    """
    Ordered pattern rules. Rules added later take precedence over earlier ones.
    """

    def __init__(self) -> None:
        self._rules:list[WordRule] = []

    def add(self, pattern:str | re.Pattern[str], replacement:str) -> WordRule:
        rule = WordRule(compile_pattern(pattern), replacement)
        self._rules.append(rule)
        return rule

    def add_defaults(self, rules:Iterable[tuple[str | re.Pattern[str], str]]) -> None:
        """
        Inserts `rules` below all rules added so far, so those keep precedence.
        """
        self._rules[:0] = [WordRule(compile_pattern(pattern), replacement) for pattern, replacement in rules]

    def find(self, word:str) -> WordRule | None:
        for rule in reversed(self._rules):
            if rule.pattern.search(word):
                return rule
        return None

    def match(self, word:str) -> str | None:
        rule = self.find(word)
        return None if rule is None else rule.apply(word)

    def __iter__(self) -> Iterator[WordRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


class IrregularTable:
    """
    Bidirectional singular <-> plural mapping, keyed case-insensitively.
    """

    def __init__(self) -> None:
        self._plurals:dict[str, str] = {}  # singular -> plural
        self._singulars:dict[str, str] = {}  # plural -> singular

    def add(self, singular:str, plural:str) -> None:
        singular, plural = singular.lower(), plural.lower()

        # drop the reverse entry of the plural this singular is remapped from
        old_plural = self._plurals.get(singular)
        if old_plural is not None and old_plural != plural and self._singulars.get(old_plural) == singular:
            del self._singulars[old_plural]

        self._plurals[singular] = plural
        self._singulars[plural] = singular

    def plural_of(self, singular:str) -> str | None:
        return self._plurals.get(singular.lower())

    def singular_of(self, plural:str) -> str | None:
        return self._singulars.get(plural.lower())

    def has_singular(self, singular:str) -> bool:
        return singular.lower() in self._plurals

    def has_plural(self, plural:str) -> bool:
        return plural.lower() in self._singulars

    def lookup(self, word:str, direction:Direction) -> str | None:
        """
        Returns the `direction` form of `word` with its casing restored, or None
        if neither the word nor the last component of a compound word is irregular.
        Only compounds whose last component follows whitespace, `-` or `_` are matched:
        "snow-goose" becomes "snow-geese", while "snowgoose" is left to the pattern rules.
        """
        result = self._lookup_exact(word, direction)
        if result is not None:
            return result

        compound = COMPOUND.match(word)
        if compound:
            tail = self._lookup_exact(compound.group("tail"), direction)
            if tail is not None:
                return compound.group("head") + tail
        return None

    def _lookup_exact(self, word:str, direction:Direction) -> str | None:
        match direction:
            case Direction.PLURAL:
                keep, replace = self._singulars, self._plurals
            case Direction.SINGULAR:
                keep, replace = self._plurals, self._singulars

        token = word.lower()
        if token in keep:
            return restore_case(word, token)
        if token in replace:
            return restore_case(word, replace[token])
        return None

    def __len__(self) -> int:
        return len(self._plurals)


class UncountableSet:

    def __init__(self) -> None:
        self._words:set[str] = set()

    def add(self, word:str) -> None:
        self._words.add(word.lower())

    def __contains__(self, word:object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)
