"""Boolean composition of predicate fragments.

``conjunction`` and ``disjunction`` join fragments with ``and`` / ``or``
and parenthesize the result so it can be passed to ``where()`` or
``having()`` as a single fragment::

    >>> disjunction("cat.sex = 'male'", "cat.sex = 'female'")
    "(cat.sex = 'male' or cat.sex = 'female')"
    >>> conjunction(["A", "B", "C"])
    '(A and B and C)'

Both accept either positional fragments or a single iterable of fragments;
the two call shapes share :func:`compose`.
"""
from __future__ import annotations

from collections.abc import Iterable

from jpqlkit.errors import InvalidArgumentError

AND = "and"
OR = "or"

_JOINERS = frozenset({AND, OR})


def compose(predicates: Iterable[str], joiner: str) -> str:
    """Join ``predicates`` with ``joiner`` and wrap the result in parentheses.

    Args:
        predicates: Ordered predicate fragments.  Must not be empty.
        joiner: ``"and"`` or ``"or"``.

    Returns:
        ``"(p1 <joiner> p2 <joiner> ...)"``.

    Raises:
        InvalidArgumentError: If ``predicates`` is empty or ``joiner`` is
            not ``"and"`` / ``"or"``.
    """
    if joiner not in _JOINERS:
        raise InvalidArgumentError(
            f"Unsupported joiner '{joiner}'. Expected one of {sorted(_JOINERS)}.",
            argument="joiner",
        )
    if isinstance(predicates, str):
        items = [predicates]
    else:
        items = list(predicates)
    if not items:
        raise InvalidArgumentError(
            f"Cannot build a '{joiner}' expression from zero predicates.",
            argument="predicates",
        )
    return "(" + f" {joiner} ".join(items) + ")"


def conjunction(*predicates: str | Iterable[str]) -> str:
    """Return ``(p1 and p2 and ...)``."""
    return compose(_unpack(predicates), AND)


def disjunction(*predicates: str | Iterable[str]) -> str:
    """Return ``(p1 or p2 or ...)``."""
    return compose(_unpack(predicates), OR)


def _unpack(args: tuple) -> list[str]:
    # A single non-string argument is the collection form.
    if len(args) == 1 and not isinstance(args[0], str):
        return list(args[0])
    return list(args)
