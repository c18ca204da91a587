"""Higher-order combinators over sequences: zip, map, folds and composition."""

from __future__ import annotations

from typing import Callable, TypeVar

from .values import as_list, validate_sequence

A = TypeVar("A")
T = TypeVar("T")


def transpose(*sequences) -> list[list]:
    """Group the inputs into columns, stopping at the shortest input.

    ``transpose([1, 2, 3], [4, 5])`` is ``[[1, 4], [2, 5]]``. Every argument
    is checked before any column is built.
    """
    for position, seq in enumerate(sequences):
        validate_sequence(seq, function="transpose", position=position)
    if not sequences:
        return []

    rows = [as_list(seq) for seq in sequences]
    width = min(len(row) for row in rows)
    return [[row[i] for row in rows] for i in range(width)]


def map(f: Callable[..., T], *sequences) -> list[T]:
    """Apply ``f`` across the columns of ``sequences``.

    The result is as long as the shortest input; longer inputs are
    truncated silently.
    """
    return [f(*column) for column in transpose(*sequences)]


def foldl(f: Callable[[A, object], A], init: A, t) -> A:
    validate_sequence(t, function="foldl", position=2)
    acc = init
    for item in as_list(t):
        acc = f(acc, item)
    return acc


def foldr(f: Callable[[A, object], A], init: A, t) -> A:
    """Fold ``f`` over ``t`` from the last element to the first.

    The accumulator stays on the left, as in ``foldl``:
    ``foldr(f, z, [a, b, c]) == f(f(f(z, c), b), a)``. This is not the
    textbook right fold ``f(a, f(b, f(c, z)))``.
    """
    validate_sequence(t, function="foldr", position=2)
    acc = init
    for item in reversed(as_list(t)):
        acc = f(acc, item)
    return acc


def compose(f: Callable[[object], T], g: Callable[..., object]) -> Callable[..., T]:
    def composed(*args, **kwargs):
        return f(g(*args, **kwargs))

    return composed


def identity(x: T) -> T:
    return x
