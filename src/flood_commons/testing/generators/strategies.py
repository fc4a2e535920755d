"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "flood-commons[testing]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flood_commons.testing.generators.alphabets import (
    ALPHABET,
    ALPHANUMERIC,
    DIGITS,
    LOWERCASE,
    UPPERCASE,
)

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]

    from flood_commons.http.request import RequestArgs


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_NAMED_ALPHABETS: tuple[tuple[str, ...], ...] = (
    DIGITS,
    LOWERCASE,
    UPPERCASE,
    ALPHABET,
    ALPHANUMERIC,
)


def alphabet_strategy(*, include_custom: bool = True) -> "SearchStrategy[tuple[str, ...]]":
    """Strategy drawing one of the named alphabets, or a custom non-empty one.

    Custom alphabets are tuples of distinct single characters.

    Example::

        @given(alphabet_strategy(), st.integers(0, 64))
        def test_membership(alphabet, n):
            assert set(random_string(alphabet, n)) <= set(alphabet)
    """
    st = _require_hypothesis()
    named = st.sampled_from(_NAMED_ALPHABETS)
    if not include_custom:
        return named
    custom = st.lists(
        st.characters(min_codepoint=0x20, max_codepoint=0x2FFF, exclude_categories=("Cs",)),
        min_size=1,
        max_size=40,
        unique=True,
    ).map(tuple)
    return st.one_of(named, custom)


def request_args_strategy() -> "SearchStrategy[RequestArgs]":
    """Strategy generating :class:`~flood_commons.http.request.RequestArgs`.

    Every optional field is independently present or absent.  ``json``
    payloads are restricted to JSON-serialisable values without NaN.
    """
    from flood_commons.http.request import RequestArgs

    st = _require_hypothesis()
    text = st.text(max_size=12)
    mapping = st.dictionaries(text, text, max_size=4)
    json_values = st.recursive(
        st.none() | st.booleans() | st.integers() | st.floats(allow_nan=False, allow_infinity=False) | text,
        lambda children: st.lists(children, max_size=3) | st.dictionaries(text, children, max_size=3),
        max_leaves=8,
    )
    path = st.text(alphabet=ALPHANUMERIC + ("/", "-", "_"), max_size=16).map(lambda p: "/" + p)
    return st.builds(
        RequestArgs,
        path=st.none() | path,
        headers=st.none() | mapping,
        qs=st.none() | mapping,
        params=st.none() | mapping,
        json=st.none() | json_values,
    )


__all__ = ["alphabet_strategy", "request_args_strategy"]
