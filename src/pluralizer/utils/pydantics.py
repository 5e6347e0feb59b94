# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
from gettext import gettext as _
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import InitErrorDetails
from typing_extensions import Self

__all__ = [
    "ContextualModel",
    "ContextualValidationError",
]


class ContextualValidationError(ValidationError):
    """
    A ValidationError remembering where the invalid data came from, e.g. the rules file path.
    """
    context:Any

    def __str__(self) -> str:
        message = super().__str__()
        context = getattr(self, "context", None)
        if context is None:
            return message
        return _("Invalid rules in %s: %s") % (context, message)


def _with_context(ex:ValidationError, context:Any) -> ContextualValidationError:
    new_ex = ContextualValidationError.from_exception_data(
        title = ex.title,
        line_errors = cast(list[InitErrorDetails], ex.errors()),
    )
    new_ex.context = context
    return new_ex


class ContextualModel(BaseModel):
    """
    Base model for rule files: unknown keys are rejected and validation
    errors are re-raised as ContextualValidationError carrying the passed context.
    """
    model_config = ConfigDict(extra = "forbid")

    @classmethod
    def model_validate(
        cls,
        obj:Any,
        *,
        strict:bool | None = None,
        from_attributes:bool | None = None,
        context:Any | None = None,
        by_alias:bool | None = None,
        by_name:bool | None = None,
    ) -> Self:
        try:
            return super().model_validate(
                obj,
                strict = strict,
                from_attributes = from_attributes,
                context = context,
                by_alias = by_alias,
                by_name = by_name,
            )
        except ValidationError as ex:
            raise _with_context(ex, context) from ex
