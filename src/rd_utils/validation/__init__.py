from .identity import (
    check_digit,
    is_valid,
    is_valid_identity_number,
    normalize_digits,
)

__all__ = [
    "check_digit",
    "is_valid",
    "is_valid_identity_number",
    "normalize_digits",
]
