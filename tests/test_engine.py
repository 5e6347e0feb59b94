# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from pluralizer import Direction, Pluralizer

REGULAR_NOUNS = [
    ("house", "houses"),
    ("box", "boxes"),
    ("city", "cities"),
    ("bus", "buses"),
    ("church", "churches"),
    ("knife", "knives"),
    ("wolf", "wolves"),
    ("baby", "babies"),
    ("tomato", "tomatoes"),
    ("key", "keys"),
]

IRREGULAR_NOUNS = [
    ("tooth", "teeth"),
    ("goose", "geese"),
    ("ox", "oxen"),
    ("echo", "echoes"),
    ("person", "people"),
    ("child", "children"),
    ("woman", "women"),
    ("mouse", "mice"),
    ("matrix", "matrices"),
]

UNCOUNTABLE_NOUNS = ["sheep", "fish", "rice", "news", "deer", "reindeer", "series", "Pokémon", "chinese"]


class TestDefaults:

    @pytest.mark.parametrize(("singular", "plural"), REGULAR_NOUNS + IRREGULAR_NOUNS)
    def test_to_plural(self, engine:Pluralizer, singular:str, plural:str) -> None:
        assert engine.to_plural(singular) == plural

    @pytest.mark.parametrize(("singular", "plural"), REGULAR_NOUNS + IRREGULAR_NOUNS)
    def test_to_singular(self, engine:Pluralizer, singular:str, plural:str) -> None:
        assert engine.to_singular(plural) == singular

    @pytest.mark.parametrize(("singular", "_plural"), REGULAR_NOUNS)
    def test_round_trip(self, engine:Pluralizer, singular:str, _plural:str) -> None:
        assert engine.to_singular(engine.to_plural(singular)) == singular

    @pytest.mark.parametrize("word", UNCOUNTABLE_NOUNS)
    def test_uncountable_words_are_never_changed(self, engine:Pluralizer, word:str) -> None:
        assert engine.to_plural(word) == word
        assert engine.to_singular(word) == word
        assert engine.to_plural(engine.to_plural(word)) == engine.to_plural(word)
        for count in (-1, 0, 1, 2, 100):
            assert engine.pluralize(word, count) == word

    def test_words_already_in_target_form(self, engine:Pluralizer) -> None:
        assert engine.to_plural("geese") == "geese"
        assert engine.to_plural("people") == "people"
        assert engine.to_singular("goose") == "goose"
        assert engine.to_singular("house") == "house"

    def test_compound_words_ending_in_irregular_noun(self, engine:Pluralizer) -> None:
        assert engine.to_plural("Mother Goose") == "Mother Geese"
        assert engine.to_plural("snow-goose") == "snow-geese"
        assert engine.to_singular("baby teeth") == "baby tooth"

    def test_empty_and_symbols(self, engine:Pluralizer) -> None:
        assert engine.to_plural("") == ""
        assert engine.to_singular("") == ""
        assert engine.to_plural("$%&") == "$%&s"
        assert engine.to_singular("$%&") == "$%&"

    def test_initialize_is_idempotent(self, engine:Pluralizer) -> None:
        sizes = (len(engine.plural_rules), len(engine.singular_rules), len(engine.irregulars), len(engine.uncountables))
        engine.initialize()
        engine.initialize()
        assert engine.initialized
        assert (len(engine.plural_rules), len(engine.singular_rules), len(engine.irregulars), len(engine.uncountables)) == sizes

    def test_without_defaults(self) -> None:
        engine = Pluralizer(defaults = False)
        assert not engine.initialized
        assert engine.to_plural("house") == "house"

        engine.initialize()
        assert engine.to_plural("house") == "houses"

    def test_rules_registered_before_initialize_keep_precedence(self) -> None:
        engine = Pluralizer(defaults = False)
        engine.add_plural_rule(r"(octop)us$", "$1odes")
        engine.add_irregular_rule("tooth", "tooths")
        engine.add_irregular_rule("she", "shes")
        engine.initialize()

        assert engine.to_plural("octopus") == "octopodes"
        assert engine.to_plural("tooth") == "tooths"
        assert engine.to_singular("tooths") == "tooth"
        assert engine.to_plural("she") == "shes"
        assert engine.to_plural("house") == "houses"
        assert engine.to_plural("goose") == "geese"
        assert engine.to_plural("he") == "they"
        assert engine.to_plural("sheep") == "sheep"

    def test_surrounding_whitespace_is_kept(self, engine:Pluralizer) -> None:
        assert engine.to_plural("goose ") == "geese "
        assert engine.to_plural(" house") == " houses"
        assert engine.to_singular("\tteeth\n") == "\ttooth\n"
        assert engine.to_plural("   ") == "   "
        assert engine.is_plural(" houses ")


class TestCasing:

    @pytest.mark.parametrize(("word", "expected"), [
        ("HOUSE", "HOUSES"),
        ("House", "Houses"),
        ("house", "houses"),
        ("TOOTH", "TEETH"),
        ("Tooth", "Teeth"),
        ("iPhone", "iPhones"),
        ("CHICKEN", "CHICKENS"),
    ])
    def test_to_plural_keeps_casing(self, engine:Pluralizer, word:str, expected:str) -> None:
        assert engine.to_plural(word) == expected

    def test_uncountable_keeps_original_casing(self, engine:Pluralizer) -> None:
        assert engine.to_plural("RiCe") == "RiCe"


class TestPluralize:

    @pytest.mark.parametrize(("word", "count", "inclusive", "expected"), [
        ("House", 2, True, "2 Houses"),
        ("Houses", 1, True, "1 House"),
        ("House", 1, False, "House"),
        ("Houses", 2, False, "Houses"),
        ("House", 0, True, "0 Houses"),
        ("House", -1, True, "-1 Houses"),
    ])
    def test_count(self, engine:Pluralizer, word:str, count:int, inclusive:bool, expected:str) -> None:
        assert engine.pluralize(word, count, inclusive) == expected

    def test_sized_count(self, engine:Pluralizer) -> None:
        assert engine.pluralize("box", ["a"]) == "box"
        assert engine.pluralize("box", [], inclusive = True) == "0 boxes"
        assert engine.pluralize("boxes", {"a": 1, "b": 2}, inclusive = True) == "2 boxes"

    def test_is_plural_and_is_singular(self, engine:Pluralizer) -> None:
        assert engine.is_plural("houses")
        assert not engine.is_plural("house")
        assert engine.is_singular("house")
        assert not engine.is_singular("houses")
        assert engine.is_plural("sheep") and engine.is_singular("sheep")


class TestRegistration:

    def test_new_rule_overrides_default(self, engine:Pluralizer) -> None:
        assert engine.to_plural("index") == "indices"
        engine.add_plural_rule(r"(ind)ex$", "$1exes")
        assert engine.to_plural("Index") == "Indexes"

    def test_singular_rule_overrides_default(self, engine:Pluralizer) -> None:
        assert engine.to_singular("indices") == "index"
        engine.add_singular_rule(r"(ind)ices$", "$1ice")
        assert engine.to_singular("Indices") == "Indice"

    def test_add_rule_by_direction(self, engine:Pluralizer) -> None:
        engine.add_rule(Direction.PLURAL, r"(octop)us$", "$1odes")
        assert engine.to_plural("octopus") == "octopodes"
        assert engine.rules_for(Direction.PLURAL) is engine.plural_rules

    def test_irregular_wins_over_patterns(self, engine:Pluralizer) -> None:
        assert engine.to_plural("octopus") == "octopuses"
        engine.add_irregular_rule("octopus", "octopodes")
        assert engine.to_plural("Octopus") == "Octopodes"
        assert engine.to_singular("octopodes") == "octopus"

        engine.add_plural_rule(r"octopus$", "octopi")
        assert engine.to_plural("octopus") == "octopodes"

    def test_remapped_irregular_forgets_old_plural(self, engine:Pluralizer) -> None:
        engine.add_irregular_rule("tooth", "tooths")
        assert engine.to_plural("tooth") == "tooths"
        assert engine.to_singular("tooths") == "tooth"
        assert engine.to_singular("teeth") != "tooth"

    def test_irregular_pronoun(self, engine:Pluralizer) -> None:
        assert engine.pluralize("I", 2) == "WE"
        engine.add_irregular_rule("thou", "ye")
        assert engine.to_plural("thou") == "ye"

    def test_empty_replacement_keeps_word(self, engine:Pluralizer) -> None:
        engine.add_plural_rule(r"craft$", "")
        assert engine.to_plural("Hovercraft") == "Hovercraft"

    def test_uncountable_word(self, engine:Pluralizer) -> None:
        engine.add_uncountable_rule("Bluetooth")
        assert engine.to_plural("bluetooth") == "bluetooth"
        assert engine.pluralize("BLUETOOTH", 5, True) == "5 BLUETOOTH"

    def test_uncountable_pattern(self, engine:Pluralizer) -> None:
        assert engine.to_plural("middleware") == "middlewares"
        engine.add_uncountable_rule(re.compile(r"ware$"))
        assert engine.to_plural("Middleware") == "Middleware"
        assert engine.to_singular("middleware") == "middleware"

    def test_invalid_rule(self, engine:Pluralizer) -> None:
        rules = len(engine.plural_rules)
        with pytest.raises(ValueError, match = "Invalid regular expression"):
            engine.add_plural_rule("(", "s")
        assert len(engine.plural_rules) == rules

    def test_engines_are_independent(self) -> None:
        first, second = Pluralizer(), Pluralizer()
        first.add_uncountable_rule("house")
        assert first.to_plural("house") == "house"
        assert second.to_plural("house") == "houses"

    def test_concurrent_registration_and_reads(self, engine:Pluralizer) -> None:
        def register(i:int) -> None:
            engine.add_uncountable_rule(f"word{i}")

        def read(_i:int) -> str:
            return engine.to_plural("house")

        with ThreadPoolExecutor(max_workers = 8) as pool:
            writes = [pool.submit(register, i) for i in range(200)]
            reads = [pool.submit(read, i) for i in range(200)]
            assert all(f.result() == "houses" for f in reads)
            for f in writes:
                f.result()
        assert "word199" in engine.uncountables
