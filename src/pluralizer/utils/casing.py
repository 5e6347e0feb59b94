# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
import enum

__all__ = [
    "Casing",
    "restore_case",
]


class Casing(enum.Enum):
    LOWER = enum.auto()
    UPPER = enum.auto()
    CAPITALIZED = enum.auto()
    MIXED = enum.auto()

    @classmethod
    def of(cls, word:str) -> "Casing":
        """
        >>> Casing.of("house"), Casing.of("HOUSE"), Casing.of("House"), Casing.of("iPhone")
        (<Casing.LOWER: 1>, <Casing.UPPER: 2>, <Casing.CAPITALIZED: 3>, <Casing.MIXED: 4>)
        """
        if word == word.lower():
            return cls.LOWER
        if word == word.upper():
            return cls.UPPER
        if word[0].isupper() and word[1:] == word[1:].lower():
            return cls.CAPITALIZED
        return cls.MIXED


def restore_case(word:str, token:str) -> str:
    """
    Applies the capitalization style of `word` to `token`.

    >>> restore_case("HOUSE", "houses")
    'HOUSES'
    >>> restore_case("House", "houses")
    'Houses'
    >>> restore_case("Goose", "GEESE")
    'Geese'
    >>> restore_case("iPhone", "iphones")
    'iPhones'
    """
    if word == token:
        return token

    match Casing.of(word):
        case Casing.LOWER:
            return token.lower()
        case Casing.UPPER:
            return token.upper()
        case Casing.CAPITALIZED:
            return token[:1].upper() + token[1:].lower()

    # mixed case: copy the case position by position, past the end follow the last character
    chars = []
    for i, char in enumerate(token):
        template = word[min(i, len(word) - 1)]
        chars.append(char.upper() if template.isupper() else char.lower())
    return "".join(chars)
