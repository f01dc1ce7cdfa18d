"""click parameter types used by the interactive prompts.

click re-prompts on its own whenever ``convert`` fails, so the shell
only ever sees values that already passed these checks.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from ims.domain.model.value_objects import MAX_AMOUNT


class NonEmptyText(click.ParamType):
    name = "text"

    def convert(self, value, param, ctx) -> str:
        text = str(value).strip()
        if not text:
            self.fail("Input cannot be empty. Please try again.", param, ctx)
        return text


class PositiveAmount(click.ParamType):
    name = "amount"

    def convert(self, value, param, ctx) -> Decimal:
        if isinstance(value, Decimal):
            amount = value
        else:
            try:
                amount = Decimal(str(value).strip())
            except InvalidOperation:
                self.fail(f"{value!r} is not a valid number.", param, ctx)
        if not amount.is_finite() or amount <= 0:
            self.fail("Please enter a valid positive number.", param, ctx)
        if amount >= MAX_AMOUNT:
            self.fail(f"Please enter an amount below {MAX_AMOUNT:f}.", param, ctx)
        return amount


NON_EMPTY = NonEmptyText()
POSITIVE_AMOUNT = PositiveAmount()
QUANTITY = click.IntRange(min=0)
