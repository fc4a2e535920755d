"""Testing support – random data generators and Hypothesis strategies."""

from flood_commons.testing.generators import (
    ALPHABET,
    ALPHANUMERIC,
    DIGITS,
    LOWERCASE,
    UPPERCASE,
    alphabet_strategy,
    rand_alphabet_digit_string,
    rand_alphabet_string,
    rand_digit_string,
    rand_int,
    rand_lowercase_string,
    rand_uppercase_string,
    random_string,
    request_args_strategy,
)

__all__ = [
    "ALPHABET",
    "ALPHANUMERIC",
    "DIGITS",
    "LOWERCASE",
    "UPPERCASE",
    "alphabet_strategy",
    "rand_alphabet_digit_string",
    "rand_alphabet_string",
    "rand_digit_string",
    "rand_int",
    "rand_lowercase_string",
    "rand_uppercase_string",
    "random_string",
    "request_args_strategy",
]
