# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations
import copy
from typing import Any, List

from pydantic import Field, field_validator

from pluralizer.tables import compile_pattern
from pluralizer.utils import dicts
from pluralizer.utils.pydantics import ContextualModel


def _validate_pattern(value:str) -> str:
    compile_pattern(value)  # raises ValueError, reported by pydantic as a validation error
    return value


class PatternRule(ContextualModel):
    pattern: str = Field(min_length = 1, description = "case-insensitive regular expression, e.g. '(octop)us$'")
    replacement: str = Field(default = "", description = "replacement template, $1 refers to the first group; empty keeps the word as is")

    @field_validator("pattern")
    @classmethod
    def _pattern_compiles(cls, value:str) -> str:
        return _validate_pattern(value)


class IrregularRule(ContextualModel):
    singular: str = Field(min_length = 1)
    plural: str = Field(min_length = 1)


class RulesConfig(ContextualModel):
    plural_rules: List[PatternRule] = Field(default_factory = list)
    singular_rules: List[PatternRule] = Field(default_factory = list)
    irregular_rules: List[IrregularRule] = Field(default_factory = list)
    uncountable_rules: List[str] = Field(default_factory = list, description = "words that have no separate plural form")
    uncountable_patterns: List[str] = Field(default_factory = list, description = "regular expressions matching words that have no separate plural form")

    @field_validator("uncountable_patterns")
    @classmethod
    def _patterns_compile(cls, values:List[str]) -> List[str]:
        return [_validate_pattern(value) for value in values]

    def with_values(self, values:dict[str, Any]) -> RulesConfig:
        """
        Returns a copy of this config with the keys present in `values` replaced.
        """
        return RulesConfig.model_validate(dicts.apply_defaults(copy.deepcopy(values), defaults = self.model_dump()))
