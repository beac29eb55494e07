"""
rd-utils: Dominican Republic identity number validation and display formats.

    >>> from rd_utils import is_valid_identity_number, formatting
    >>> is_valid_identity_number("40212345678")
    True
    >>> formatting.phone_number("8093458812")
    '(809) 345-8812'
"""

from loguru import logger

from rd_utils import formatting
from rd_utils.errors import (
    CurrencyFormatError,
    FormatError,
    IdentifierError,
    RdUtilsError,
    TemplateLengthError,
)
from rd_utils.formatting import (
    apply_template,
    cash,
    currency,
    custom,
    identity_number,
    phone_number,
    tax_id,
)
from rd_utils.validation import (
    check_digit,
    is_valid,
    is_valid_identity_number,
    normalize_digits,
)

__version__ = "1.0.0"

# Silent unless the application calls core.logging.setup_logging()
logger.disable("rd_utils")

__all__ = [
    "CurrencyFormatError",
    "FormatError",
    "IdentifierError",
    "RdUtilsError",
    "TemplateLengthError",
    "apply_template",
    "cash",
    "check_digit",
    "currency",
    "custom",
    "formatting",
    "identity_number",
    "is_valid",
    "is_valid_identity_number",
    "normalize_digits",
    "phone_number",
    "tax_id",
]
