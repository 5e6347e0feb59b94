# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
import copy, json, os  # isort: skip
from collections.abc import Callable
from gettext import gettext as _
from typing import Any, Final

from ruamel.yaml import YAML

from . import loggers
from .misc import ensure

__all__ = [
    "apply_defaults",
    "load_dict",
]

LOG:Final[loggers.Logger] = loggers.get_logger(__name__)

JSON_SUFFIXES:Final[tuple[str, ...]] = (".json",)
YAML_SUFFIXES:Final[tuple[str, ...]] = (".yml", ".yaml")


def apply_defaults(
    target:dict[Any, Any],
    defaults:dict[Any, Any],
    ignore:Callable[[Any, Any], bool] = lambda _k, _v: False,
    override:Callable[[Any, Any], bool] = lambda _k, _v: False
) -> dict[Any, Any]:
    """
    Fills in missing keys of `target` from `defaults`, recursing into nested dicts.
    Values already present in `target` win, lists are never merged.

    >>> apply_defaults({}, {'uncountable_rules': ['rice']})
    {'uncountable_rules': ['rice']}
    >>> apply_defaults({'uncountable_rules': []}, {'uncountable_rules': ['rice']})
    {'uncountable_rules': []}
    >>> apply_defaults({}, {'plural_rules': []}, ignore = lambda k, _: k == 'plural_rules')
    {}
    >>> apply_defaults({'pattern': ''}, {'pattern': 's$'}, override = lambda _, v: v == '')
    {'pattern': 's$'}
    >>> apply_defaults({'a': {'x': 1}}, {'a': {'x': 0, 'y': 2}})
    {'a': {'x': 1, 'y': 2}}
    """
    for key, default_value in defaults.items():
        if key in target:
            if isinstance(target[key], dict) and isinstance(default_value, dict):
                apply_defaults(
                    target = target[key],
                    defaults = default_value,
                    ignore = ignore,
                    override = override
                )
            elif override(key, target[key]):
                target[key] = copy.deepcopy(default_value)
        elif not ignore(key, default_value):
            target[key] = copy.deepcopy(default_value)
    return target


def load_dict(filepath:str | os.PathLike[str]) -> dict[str, Any]:
    """
    Reads a JSON or YAML file into a plain dict. An empty file yields an empty dict.
    """
    filepath = os.path.abspath(filepath)
    ensure(os.path.exists(filepath), _("File %s does not exist") % filepath)

    file_ext = os.path.splitext(filepath)[1].lower()
    if file_ext not in JSON_SUFFIXES + YAML_SUFFIXES:
        raise ValueError(_('Unsupported file type. The filename "%s" must end with *.json, *.yaml, or *.yml') % filepath)

    LOG.debug("Loading %s...", filepath)
    with open(filepath, encoding = "utf-8") as f:
        if file_ext in JSON_SUFFIXES:
            content = f.read()
            data = json.loads(content) if content.strip() else None
        else:
            data = YAML(typ = "safe", pure = True).load(f)

    if data is None:
        return {}
    ensure(isinstance(data, dict), _("File %s must contain a mapping at the top level") % filepath)
    return data
