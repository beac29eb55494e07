"""Display formatters: templates for identifiers and phones, currency amounts."""

from .currency import cash, currency
from .template import (
    apply_template,
    custom,
    identity_number,
    phone_number,
    placeholder_count,
    tax_id,
)

__all__ = [
    "apply_template",
    "cash",
    "currency",
    "custom",
    "identity_number",
    "phone_number",
    "placeholder_count",
    "tax_id",
]
