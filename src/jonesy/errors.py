"""Structured error types for rejected combinator inputs."""

from __future__ import annotations

from dataclasses import dataclass


class JonesyError(Exception):
    """Base class for structured jonesy errors."""


@dataclass(frozen=True)
class InvalidArgument(JonesyError, TypeError):
    """An argument is not of the kind the function requires."""

    function: str
    actual: str
    position: int | None = None
    expected: str = "sequence"

    def __str__(self) -> str:
        where = "" if self.position is None else f" at argument {self.position}"
        return f"{self.function}: expected a {self.expected}{where}, got {self.actual}"


@dataclass(frozen=True)
class EmptyCollection(JonesyError, ValueError):
    """A function that needs at least one element received none."""

    function: str
    actual: str = "empty sequence"

    def __str__(self) -> str:
        return f"{self.function}: requires a non-empty sequence, got {self.actual}"


@dataclass(frozen=True)
class DivideByZero(JonesyError, ZeroDivisionError):
    """A divisor after the first argument of a division is zero."""

    function: str
    position: int

    def __str__(self) -> str:
        return f"{self.function}: divide by zero at argument {self.position}"
