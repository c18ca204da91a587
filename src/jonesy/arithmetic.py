"""Variadic arithmetic reducers seeded with their first argument."""

from __future__ import annotations

import logging
import numbers
import operator
from typing import Callable

import jax
import jax.numpy as jnp

from .errors import DivideByZero, InvalidArgument
from .values import as_jax_array, describe_type, is_array_like

logger = logging.getLogger(__name__)


def _is_zero(value) -> bool:
    if isinstance(value, jax.Array):
        return bool(jnp.any(value == 0))
    return value == 0


def _operands(function: str, args: tuple) -> list:
    """Validate ``args`` and return them with every array converted to a jax array."""
    if not args:
        logger.debug("%s called without operands", function)
        raise InvalidArgument(function=function, actual="no arguments", expected="number")

    out = []
    for position, value in enumerate(args):
        if isinstance(value, numbers.Number):
            out.append(value)
        elif is_array_like(value):
            out.append(as_jax_array(value))
        else:
            actual = describe_type(value)
            logger.debug("%s rejected operand %d of type %s", function, position, actual)
            raise InvalidArgument(function=function, actual=actual, position=position, expected="number")
    return out


def _fold(op: Callable, operands: list):
    acc = operands[0]
    for value in operands[1:]:
        acc = op(acc, value)
    return acc


def add(*args):
    """``add(x, y, z) == (x + y) + z``; a single argument is returned as is."""
    return _fold(operator.add, _operands("add", args))


def sub(*args):
    return _fold(operator.sub, _operands("sub", args))


def mul(*args):
    return _fold(operator.mul, _operands("mul", args))


def div(*args):
    """Left-to-right true division.

    Any zero divisor (an array divisor containing a zero counts) raises
    :class:`DivideByZero` before anything is divided. The first argument
    may be zero.
    """
    operands = _operands("div", args)
    for position, value in enumerate(operands[1:], start=1):
        if _is_zero(value):
            logger.debug("div rejected zero divisor at argument %d", position)
            raise DivideByZero(function="div", position=position)
    return _fold(operator.truediv, operands)
