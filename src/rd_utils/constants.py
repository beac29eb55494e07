"""Shared constants for rd-utils."""

import string

# Cédula de identidad y electoral
IDENTITY_NUMBER_LENGTH = 11

# Characters that mark a placeholder position in a template
PLACEHOLDER_CHARS = frozenset(string.ascii_letters + string.digits)

# Display templates
TAX_ID_TEMPLATE = "000-00000-0"
IDENTITY_NUMBER_TEMPLATE = "000-0000000-0"
PHONE_NUMBER_TEMPLATE = "(000) 000-0000"

# Named templates exposed on the command line
NAMED_TEMPLATES = {
    "rnc": TAX_ID_TEMPLATE,
    "cedula": IDENTITY_NUMBER_TEMPLATE,
    "phone": PHONE_NUMBER_TEMPLATE,
}

# Supported currency fraction digits
FRACTION_DIGITS = (0, 1, 2)
