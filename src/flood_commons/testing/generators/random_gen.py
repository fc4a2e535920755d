"""Testing generators – random integers and strings.

Randomness comes from :mod:`random` and is not suitable for secrets.  Pass a
seeded ``random.Random`` as ``rng`` to get reproducible output::

    rng = random.Random(42)
    rand_alphabet_string(8, rng=rng)
"""
from __future__ import annotations

import math
import random
from collections.abc import Sequence

from flood_commons.kernel.errors import ValidationError
from flood_commons.testing.generators.alphabets import (
    ALPHABET,
    ALPHANUMERIC,
    DIGITS,
    LOWERCASE,
    UPPERCASE,
)


def rand_int(a: int, b: int, *, rng: random.Random | None = None) -> int:
    """Return a random integer in ``[a, b)``.

    Raises:
        ValidationError: if ``b <= a``.
    """
    if b <= a:
        raise ValidationError(
            f"rand_int requires a < b, got a={a}, b={b}",
            errors=[{"field": "b", "reason": "must be greater than a"}],
        )
    source = rng or random
    return a + math.floor(source.random() * (b - a))  # noqa: S311


def random_string(
    alphabet: Sequence[str],
    length: int,
    *,
    rng: random.Random | None = None,
) -> str:
    """Return ``length`` characters drawn uniformly, with replacement, from *alphabet*.

    Raises:
        ValidationError: if ``length`` is negative or *alphabet* is empty.
    """
    if length < 0:
        raise ValidationError(
            f"length must be non-negative, got {length}",
            errors=[{"field": "length", "reason": "negative"}],
        )
    if length == 0:
        return ""
    if not alphabet:
        raise ValidationError(
            "alphabet must not be empty",
            errors=[{"field": "alphabet", "reason": "empty"}],
        )
    source = rng or random
    size = len(alphabet)
    return "".join(
        alphabet[math.floor(source.random() * size)]  # noqa: S311
        for _ in range(length)
    )


def rand_digit_string(length: int, *, rng: random.Random | None = None) -> str:
    return random_string(DIGITS, length, rng=rng)


def rand_lowercase_string(length: int, *, rng: random.Random | None = None) -> str:
    return random_string(LOWERCASE, length, rng=rng)


def rand_uppercase_string(length: int, *, rng: random.Random | None = None) -> str:
    return random_string(UPPERCASE, length, rng=rng)


def rand_alphabet_string(length: int, *, rng: random.Random | None = None) -> str:
    """Letters only, upper and lower case."""
    return random_string(ALPHABET, length, rng=rng)


def rand_alphabet_digit_string(length: int, *, rng: random.Random | None = None) -> str:
    """Letters and digits."""
    return random_string(ALPHANUMERIC, length, rng=rng)


__all__ = [
    "rand_alphabet_digit_string",
    "rand_alphabet_string",
    "rand_digit_string",
    "rand_int",
    "rand_lowercase_string",
    "rand_uppercase_string",
    "random_string",
]
