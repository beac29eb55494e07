"""Currency amounts in Dominican-Spanish (es-DO) notation: ``9,000.00``."""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from numbers import Real
from typing import Optional, Union

from rd_utils.config.settings import get_settings
from rd_utils.constants import FRACTION_DIGITS
from rd_utils.errors import CurrencyFormatError

Amount = Union[int, float, Decimal]


def _to_decimal(amount: Amount) -> Decimal:
    if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
        raise CurrencyFormatError(f"Amount must be a number, got {amount!r}")
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    else:
        amount = float(amount)
        if not math.isfinite(amount):
            raise CurrencyFormatError(f"Amount must be finite, got {amount!r}")
        # repr gives the shortest decimal that round-trips
        value = Decimal(repr(amount))
    if not value.is_finite():
        raise CurrencyFormatError(f"Amount must be finite, got {amount!r}")
    return value


def currency(amount: Amount, fraction_digits: Optional[int] = None) -> str:
    """Format an amount with thousands grouping and fixed fraction digits.

    Args:
        amount: Number to format
        fraction_digits: 0, 1 or 2. Defaults to the configured
            ``default_fraction_digits`` (0 unless overridden).

    Returns:
        Formatted amount, e.g. ``currency(4623, 2) == "4,623.00"``

    Raises:
        CurrencyFormatError: If the amount is not a finite number or
            fraction_digits is not 0, 1 or 2
    """
    settings = get_settings()
    if fraction_digits is None:
        fraction_digits = settings.default_fraction_digits
    if (
        isinstance(fraction_digits, bool)
        or not isinstance(fraction_digits, int)
        or fraction_digits not in FRACTION_DIGITS
    ):
        raise CurrencyFormatError(
            f"fraction_digits must be one of {FRACTION_DIGITS}, got {fraction_digits!r}"
        )

    value = _to_decimal(amount)
    # Enough precision to keep every integer digit of large amounts
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + fraction_digits + 2)
        try:
            quantized = value.quantize(
                Decimal(1).scaleb(-fraction_digits), rounding=ROUND_HALF_UP
            )
        except InvalidOperation as exc:
            # Only past the decimal exponent limit (about 1e999999)
            raise CurrencyFormatError(f"Amount {amount!r} is out of range") from exc
        text = f"{quantized:,.{fraction_digits}f}"
    return text.translate(
        str.maketrans(
            {",": settings.thousands_separator, ".": settings.decimal_separator}
        )
    )


# Short alias
cash = currency
