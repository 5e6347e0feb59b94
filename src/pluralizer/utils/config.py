# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
import os
from typing import Final

from pluralizer.model.rules_model import RulesConfig
from pluralizer.utils import dicts, loggers

LOG:Final[loggers.Logger] = loggers.get_logger(__name__)


def load_rules_config(path:str | os.PathLike[str]) -> RulesConfig:
    data = dicts.load_dict(path)
    config = RulesConfig.model_validate(data, context = os.fspath(path))
    LOG.debug("Loaded rules from %s: %d plural, %d singular, %d irregular, %d uncountable",
        path, len(config.plural_rules), len(config.singular_rules), len(config.irregular_rules),
        len(config.uncountable_rules) + len(config.uncountable_patterns))
    return config
