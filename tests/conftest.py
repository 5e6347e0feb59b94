# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
from collections.abc import Iterator

import pytest

import pluralizer
from pluralizer import Pluralizer


@pytest.fixture
def engine() -> Pluralizer:
    return Pluralizer()


@pytest.fixture(autouse = True)
def fresh_default_engine() -> Iterator[None]:
    pluralizer.reset()
    yield
    pluralizer.reset()
