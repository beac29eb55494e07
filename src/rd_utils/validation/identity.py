"""Checksum validation for the Dominican cédula de identidad y electoral.

The cédula is 11 digits: 10 digits followed by a check digit. Digits at odd
positions (0-based) are doubled, two-digit products are reduced to the sum of
their digits, and the check digit is the distance from the sum to the next
multiple of ten (0 when that distance is 10).

Examples:
    >>> is_valid_identity_number("40212345678")
    True
    >>> is_valid_identity_number("402-1234567-8")
    False
    >>> is_valid_identity_number(normalize_digits("402-1234567-8"))
    True
"""

import re
from typing import Optional

from rd_utils.constants import IDENTITY_NUMBER_LENGTH
from rd_utils.core.logging import get_logger
from rd_utils.errors import IdentifierError

logger = get_logger(__name__)

_ASCII_DIGITS = re.compile(r"[0-9]+")
_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_digits(value: str) -> str:
    """Strip every character that is not an ASCII digit.

    Examples:
        >>> normalize_digits("102-2508835-9")
        '10225088359'
        >>> normalize_digits("(809) 345-8812")
        '8093458812'
    """
    return _NON_DIGITS.sub("", value)


def _reduce(product: int) -> int:
    # product <= 9 * 2, so at most two digits
    if product > 9:
        return product // 10 + product % 10
    return product


def _weighted_sum(digits: str) -> int:
    total = 0
    for index, char in enumerate(digits):
        multiplier = 2 if index % 2 else 1
        total += _reduce(int(char) * multiplier)
    return total


def _validator_for(digits: str) -> int:
    """Distance from the weighted sum to the next multiple of ten (1..10)."""
    total = _weighted_sum(digits)
    top_ten = (total // 10 + 1) * 10
    return top_ten - total


def check_digit(first_ten: str) -> int:
    """Compute the check digit for the leading 10 digits of a cédula.

    Args:
        first_ten: Exactly 10 ASCII digits, no separators

    Returns:
        The expected 11th digit (0-9)

    Raises:
        IdentifierError: If ``first_ten`` is not 10 ASCII digits
    """
    expected_length = IDENTITY_NUMBER_LENGTH - 1
    if (
        not isinstance(first_ten, str)
        or len(first_ten) != expected_length
        or not _ASCII_DIGITS.fullmatch(first_ten)
    ):
        raise IdentifierError(
            f"Expected {expected_length} digits to compute a check digit, "
            f"got {first_ten!r}"
        )
    return _validator_for(first_ten) % 10


def _rejection_reason(identifier: Optional[str]) -> Optional[str]:
    if not identifier or not isinstance(identifier, str):
        return "empty or not a string"
    if len(identifier) != IDENTITY_NUMBER_LENGTH:
        return f"length {len(identifier)} != {IDENTITY_NUMBER_LENGTH}"
    if not _ASCII_DIGITS.fullmatch(identifier):
        return "contains non-digit characters"
    return None


def is_valid_identity_number(identifier: Optional[str]) -> bool:
    """Check the cédula checksum.

    Never raises: structurally invalid input (empty, wrong length, any
    character outside 0-9) is simply not valid. Separators are not accepted;
    run the value through normalize_digits() first if needed.

    Args:
        identifier: 11 ASCII digits

    Returns:
        True if the last digit matches the checksum of the first ten
    """
    reason = _rejection_reason(identifier)
    if reason is not None:
        logger.debug("Rejected identity number: {}", reason)
        return False

    last_digit = int(identifier[-1])
    validator = _validator_for(identifier[:-1])

    # A validator of 10 is written as 0
    return last_digit == validator or (last_digit == 0 and validator == 10)


# Short alias
is_valid = is_valid_identity_number
