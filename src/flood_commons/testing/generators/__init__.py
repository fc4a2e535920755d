"""Testing generators – random strings, integers and Hypothesis strategies."""
from flood_commons.testing.generators.alphabets import (
    ALPHABET,
    ALPHANUMERIC,
    DIGITS,
    LOWERCASE,
    UPPERCASE,
)
from flood_commons.testing.generators.random_gen import (
    rand_alphabet_digit_string,
    rand_alphabet_string,
    rand_digit_string,
    rand_int,
    rand_lowercase_string,
    rand_uppercase_string,
    random_string,
)
from flood_commons.testing.generators.strategies import (
    alphabet_strategy,
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
