"""Field predicates used by the validation gate. Pure, total, no side effects."""

import re

TEN_DIGITS = re.compile(r"[0-9]{10}")


def is_non_empty(text: str) -> bool:
    return bool(text)


def is_ten_digit_number(text: str) -> bool:
    """True when text is exactly ten ASCII decimal digits, nothing else.

    Whitespace, signs and non-ASCII digits are rejected, so "0000000000" passes
    but " 123456789" and "12345abcde" do not.
    """
    return TEN_DIGITS.fullmatch(text) is not None
