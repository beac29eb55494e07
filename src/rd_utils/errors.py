"""Exception hierarchy for rd-utils.

Provides structured error handling with specific exception types
for different failure modes.
"""


class RdUtilsError(Exception):
    """Base exception for all rd-utils errors.

    All custom exceptions inherit from this base class for easy catching.
    """

    pass


class ValidationError(RdUtilsError):
    """Validation errors (invalid input, malformed data)."""

    pass


class IdentifierError(ValidationError):
    """Malformed identifier (wrong length, non-digit characters)."""

    pass


class FormatError(ValidationError):
    """Formatting errors (template mismatch, bad amount)."""

    pass


class TemplateLengthError(FormatError):
    """Input length does not match the number of template placeholders.

    Attributes:
        expected: Number of placeholder characters in the template
        actual: Length of the input that was given
        template: The template the input was formatted against
    """

    def __init__(self, expected: int, actual: int, template: str = ""):
        self.expected = expected
        self.actual = actual
        self.template = template
        super().__init__(
            f"Invalid input: expected {expected} characters for template "
            f"{template!r}, got {actual}"
        )


class CurrencyFormatError(FormatError):
    """Amount or fraction digits cannot be formatted as currency."""

    pass
