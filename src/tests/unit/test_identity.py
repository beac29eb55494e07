"""Unit tests for validation/identity.py"""

import random

import pytest

from rd_utils.errors import IdentifierError
from rd_utils.validation import (
    check_digit,
    is_valid,
    is_valid_identity_number,
    normalize_digits,
)

# Prefix whose weighted sum is a multiple of ten: check digit written as 0
ZERO_CHECK_PREFIX = "1000000009"


class TestValidIdentifiers:
    @pytest.mark.parametrize(
        "identifier",
        ["40212345678", "10225088359", "10000000090", "00000000000"],
    )
    def test_known_valid(self, identifier):
        assert is_valid_identity_number(identifier) is True

    def test_alias(self):
        assert is_valid is is_valid_identity_number

    def test_formatting_example_has_wrong_check_digit(self):
        """10225088357 formats nicely but its checksum digit should be 9."""
        assert is_valid_identity_number("10225088357") is False
        assert check_digit("1022508835") == 9

    def test_every_other_last_digit_is_invalid(self):
        for digit in "012345679":
            assert is_valid_identity_number("4021234567" + digit) is False

    def test_validator_of_ten_is_written_as_zero(self):
        """Exhaustive over the last digit when the sum is a multiple of ten."""
        valid_digits = [
            digit
            for digit in "0123456789"
            if is_valid_identity_number(ZERO_CHECK_PREFIX + digit)
        ]

        assert valid_digits == ["0"]
        assert check_digit(ZERO_CHECK_PREFIX) == 0

    def test_exactly_one_check_digit_per_prefix(self):
        rng = random.Random(20240611)
        for _ in range(300):
            prefix = "".join(rng.choice("0123456789") for _ in range(10))
            valid_digits = [
                digit
                for digit in "0123456789"
                if is_valid_identity_number(prefix + digit)
            ]

            assert valid_digits == [str(check_digit(prefix))]

    def test_doubled_products_are_reduced(self):
        # 9 at every doubled position: 9 * 2 = 18 -> 1 + 8 = 9
        prefix = "0909090909"
        assert check_digit(prefix) == (10 - (9 * 5) % 10) % 10
        assert is_valid_identity_number(prefix + "5") is True

    def test_repeated_calls_agree(self):
        assert is_valid_identity_number("40212345678") == is_valid_identity_number(
            "40212345678"
        )


class TestRejectedInput:
    @pytest.mark.parametrize(
        "identifier",
        [
            "",
            None,
            "4",
            "4021234567",
            "402123456780",
            "0" * 20,
        ],
    )
    def test_wrong_length(self, identifier):
        assert is_valid_identity_number(identifier) is False

    @pytest.mark.parametrize(
        "identifier",
        [
            "4021234567a",
            "402-1234567",
            "402 1234567",
            " 4021234567",
            "+4021234567",
            "4021234567.",
            "４021234567" + "8",
            "٤021234567" + "8",
        ],
    )
    def test_non_digit_characters(self, identifier):
        assert is_valid_identity_number(identifier) is False

    def test_formatted_identifier_is_not_normalized(self):
        assert is_valid_identity_number("402-1234567-8") is False

    def test_non_string_input(self):
        assert is_valid_identity_number(40212345678) is False

    def test_rejection_is_logged(self, captured_logs):
        is_valid_identity_number("123")

        assert any("Rejected identity number" in message for message in captured_logs)


class TestCheckDigit:
    def test_computes_digit(self):
        assert check_digit("4021234567") == 8

    @pytest.mark.parametrize("value", ["", "123", "40212345678", "402123456a"])
    def test_rejects_malformed_prefix(self, value):
        with pytest.raises(IdentifierError):
            check_digit(value)


class TestNormalizeDigits:
    def test_strips_separators(self):
        assert normalize_digits("402-1234567-8") == "40212345678"
        assert normalize_digits("(809) 345-8812") == "8093458812"

    def test_keeps_plain_digits(self):
        assert normalize_digits("40212345678") == "40212345678"

    def test_normalized_value_validates(self):
        assert is_valid_identity_number(normalize_digits("402-1234567-8")) is True
