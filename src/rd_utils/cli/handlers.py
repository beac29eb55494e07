"""CLI command handlers.

Each handler is a pure function that takes parameters and returns a Result.
This keeps the click commands thin and lets handlers be tested without click.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from rd_utils.constants import NAMED_TEMPLATES
from rd_utils.errors import CurrencyFormatError
from rd_utils.formatting import apply_template, currency
from rd_utils.result import Result, failure, map_result, success, try_operation
from rd_utils.validation import is_valid_identity_number, normalize_digits


def handle_validate(identifier: str, normalize: bool = False) -> Result:
    """Handle cédula validation command.

    Args:
        identifier: Identity number to check
        normalize: Strip separators before checking

    Returns:
        Result containing the checked identifier and its validity
    """
    if normalize:
        identifier = normalize_digits(identifier)
    return success(
        {"identifier": identifier, "valid": is_valid_identity_number(identifier)}
    )


def handle_format(kind: str, value: str) -> Result:
    """Handle a named format command (rnc, cedula, phone).

    Args:
        kind: Name of the template to use
        value: Plain value without separators

    Returns:
        Result containing the formatted value
    """
    template = NAMED_TEMPLATES.get(kind)
    if template is None:
        choices = ", ".join(sorted(NAMED_TEMPLATES))
        return failure(f"Unknown format {kind!r} (choose from {choices})")
    return apply_template(value, template)


def handle_custom(value: str, template: str) -> Result:
    """Handle format-by-example command.

    Returns:
        Result containing the formatted value
    """
    return apply_template(value, template)


def _parse_amount(raw: str) -> Decimal:
    try:
        amount = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise CurrencyFormatError(f"Not a number: {raw!r}") from exc
    return amount


def handle_cash(amount: str, decimals: Optional[int] = None) -> Result:
    """Handle currency formatting command.

    Args:
        amount: Amount as typed on the command line
        decimals: Fraction digits (0, 1 or 2), configured default when None

    Returns:
        Result containing the formatted amount
    """
    parsed = try_operation(lambda: _parse_amount(amount))
    return map_result(parsed, lambda value: currency(value, decimals))
