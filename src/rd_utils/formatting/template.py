"""Format-by-example: interleave template separators into a plain value.

A template mixes placeholder characters (letters and digits, conventionally
``0``) with literal separators (everything else). The value must have exactly
one character per placeholder.

Examples:
    >>> unwrap(apply_template("99511469110", "0000-0000-00-0"))
    '9951-1469-11-0'
    >>> apply_template("123", "00-00")["ok"]
    False
"""

from rd_utils.constants import (
    IDENTITY_NUMBER_TEMPLATE,
    PHONE_NUMBER_TEMPLATE,
    PLACEHOLDER_CHARS,
    TAX_ID_TEMPLATE,
)
from rd_utils.core.logging import get_logger
from rd_utils.errors import TemplateLengthError
from rd_utils.result import Result, failure, success, unwrap

logger = get_logger(__name__)


def placeholder_count(template: str) -> int:
    """Number of placeholder positions in a template."""
    return sum(1 for char in template if char in PLACEHOLDER_CHARS)


def apply_template(value: str, template: str) -> Result:
    """Format ``value`` following ``template``.

    Args:
        value: Plain text, one character per template placeholder
        template: Example of the formatted text, e.g. ``"000-00000-0"``

    Returns:
        Result with the formatted string, or a failed Result carrying a
        TemplateLengthError when the lengths do not match. Never raises for
        a length mismatch.
    """
    expected = placeholder_count(template)
    if len(value) != expected:
        logger.debug(
            "Length mismatch for template {!r}: expected {}, got {}",
            template,
            expected,
            len(value),
        )
        return failure(TemplateLengthError(expected, len(value), template))

    formatted = []
    position = 0
    for char in template:
        if char in PLACEHOLDER_CHARS:
            formatted.append(value[position])
            position += 1
        else:
            formatted.append(char)
    return success("".join(formatted))


# Generic entry point
custom = apply_template


def _format_with(value: str, template: str) -> str:
    return unwrap(apply_template(value, template))


def tax_id(value: str) -> str:
    """RNC (Registro Nacional de Contribuyentes), e.g. ``130-80003-5``.

    Raises:
        TemplateLengthError: If ``value`` is not 9 characters
    """
    return _format_with(value, TAX_ID_TEMPLATE)


def identity_number(value: str) -> str:
    """Cédula de identidad y electoral, e.g. ``102-2508835-7``.

    Raises:
        TemplateLengthError: If ``value`` is not 11 characters
    """
    return _format_with(value, IDENTITY_NUMBER_TEMPLATE)


def phone_number(value: str) -> str:
    """Dominican phone number, e.g. ``(809) 345-8812``.

    Raises:
        TemplateLengthError: If ``value`` is not 10 characters
    """
    return _format_with(value, PHONE_NUMBER_TEMPLATE)
