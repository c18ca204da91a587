"""Sequence value model and validators shared by every combinator."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from enum import Enum
from typing import Final

import jax
import jax.numpy as jnp
import numpy as np

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

_USE_ARRAY_SEQUENCES: Final[bool] = os.environ.get("JONESY_DISABLE_ARRAY_SEQUENCES", "0") != "1"
_TEXT_AND_BUFFER_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray, memoryview)
_ARRAY_TYPES: Final[tuple[type, ...]] = (jax.Array, np.ndarray)


class SequenceKind(str, Enum):
    LIST = "list"
    TUPLE = "tuple"
    ARRAY = "array"
    OTHER = "other"


def is_array(value: object) -> bool:
    if not _USE_ARRAY_SEQUENCES:
        return False
    return isinstance(value, _ARRAY_TYPES) and value.ndim >= 1


def is_array_like(value: object) -> bool:
    return isinstance(value, _ARRAY_TYPES)


def as_jax_array(value) -> jax.Array:
    if isinstance(value, jax.Array):
        return value
    return jnp.asarray(value)


def is_sequence(value: object) -> bool:
    if isinstance(value, _TEXT_AND_BUFFER_TYPES):
        return False
    if isinstance(value, (list, tuple)):
        return True
    if is_array(value):
        return True
    return isinstance(value, Sequence)


def describe_type(value: object) -> str:
    if value is None:
        return "None"
    if isinstance(value, _ARRAY_TYPES):
        return f"{type(value).__name__}{tuple(int(d) for d in value.shape)}"
    return type(value).__name__


def kind_of(value: object) -> SequenceKind:
    if isinstance(value, list):
        return SequenceKind.LIST
    if isinstance(value, tuple):
        return SequenceKind.TUPLE
    if is_array(value):
        return SequenceKind.ARRAY
    if is_sequence(value):
        return SequenceKind.OTHER
    raise InvalidArgument(function="kind_of", actual=describe_type(value))


def length_of(value) -> int:
    if kind_of(value) is SequenceKind.ARRAY:
        return int(value.shape[0])
    return len(value)


def as_list(value) -> list:
    """Return a fresh list holding the elements of ``value``.

    Arrays contribute their leading-axis cells, so a rank-1 array yields
    0-d arrays and a matrix yields its rows.
    """
    if kind_of(value) is SequenceKind.ARRAY:
        return [value[i] for i in range(int(value.shape[0]))]
    return list(value)


def validate_sequence(value: object, *, function: str, position: int | None = None) -> None:
    if is_sequence(value):
        return
    actual = describe_type(value)
    logger.debug("%s rejected argument %s of type %s", function, position, actual)
    raise InvalidArgument(function=function, actual=actual, position=position)
