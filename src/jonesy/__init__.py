"""jonesy public API."""

from .arithmetic import add, div, mul, sub
from .combinators import compose, foldl, foldr, identity, map, transpose
from .errors import DivideByZero, EmptyCollection, InvalidArgument, JonesyError
from .logger import setup_logger
from .slicing import array_append, empty, head, init, inits, intersperse, last, replicate, tail, tails
from .values import SequenceKind, is_sequence

__version__ = "0.1.0"

__all__ = [
    "transpose",
    "map",
    "foldl",
    "foldr",
    "compose",
    "identity",
    "empty",
    "head",
    "last",
    "tail",
    "init",
    "inits",
    "tails",
    "replicate",
    "intersperse",
    "array_append",
    "add",
    "sub",
    "mul",
    "div",
    "is_sequence",
    "SequenceKind",
    "setup_logger",
    "JonesyError",
    "InvalidArgument",
    "EmptyCollection",
    "DivideByZero",
]
