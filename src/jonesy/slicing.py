"""Accessors, slicers and builders for sequences."""

from __future__ import annotations

import logging
import numbers

from .errors import EmptyCollection, InvalidArgument
from .values import as_list, describe_type, is_sequence, length_of, validate_sequence

logger = logging.getLogger(__name__)


def _non_empty(t, *, function: str) -> list:
    if not is_sequence(t):
        actual = describe_type(t)
    elif length_of(t) == 0:
        actual = "empty sequence"
    else:
        return as_list(t)
    logger.debug("%s rejected %s", function, actual)
    raise EmptyCollection(function=function, actual=actual)


def empty(t) -> bool:
    validate_sequence(t, function="empty", position=0)
    return length_of(t) == 0


def head(t):
    return _non_empty(t, function="head")[0]


def last(t):
    return _non_empty(t, function="last")[-1]


def tail(t) -> list:
    return _non_empty(t, function="tail")[1:]


def init(t) -> list:
    return _non_empty(t, function="init")[:-1]


def inits(t) -> list[list]:
    """Every successive ``init`` of ``t``, from ``t`` itself down to ``[]``."""
    validate_sequence(t, function="inits", position=0)
    current = as_list(t)
    out = [current]
    while current:
        current = init(current)
        out.append(current)
    return out


def tails(t) -> list[list]:
    """Every successive ``tail`` of ``t``, from ``t`` itself down to ``[]``."""
    validate_sequence(t, function="tails", position=0)
    current = as_list(t)
    out = [current]
    while current:
        current = tail(current)
        out.append(current)
    return out


def replicate(count: int, value) -> list:
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        logger.debug("replicate rejected count of type %s", describe_type(count))
        raise InvalidArgument(function="replicate", actual=describe_type(count), position=0, expected="integer")
    return [value] * max(0, int(count))


def intersperse(e, t) -> list:
    """Insert ``e`` between adjacent elements of ``t``.

    An empty ``t`` gives an empty list.
    """
    validate_sequence(t, function="intersperse", position=1)
    items = as_list(t)
    if not items:
        return []

    out = [items[0]]
    for item in items[1:]:
        out.append(e)
        out.append(item)
    return out


def array_append(*sequences) -> list:
    for position, seq in enumerate(sequences):
        validate_sequence(seq, function="array_append", position=position)

    out: list = []
    for seq in sequences:
        out.extend(as_list(seq))
    return out
