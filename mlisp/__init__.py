from .errors import (
    AllocationError,
    AtomTooLong,
    InvalidArgument,
    LispError,
    NumberOutOfRange,
    ReadError,
    TruncatedInput,
    UnbalancedParens,
    UnclosedParens,
)
from .objects import Empty, Number, Pair, Symbol, destroy, make_empty, make_list, make_number, make_pair, make_symbol
from .tokenizer import Tokenizer, TokenSequence, tokenize
from .parser import parse
from .printer import format_obj, print_obj
from .evaluator import evaluate
from .repl import read, run
from .types import Env, ReaderConfig

__all__ = [
    "read", "tokenize", "parse", "print_obj", "format_obj", "destroy", "evaluate", "run",
    "Tokenizer", "TokenSequence", "Env", "ReaderConfig",
    "Symbol", "Number", "Pair", "Empty",
    "make_symbol", "make_number", "make_pair", "make_empty", "make_list",
    "LispError", "AllocationError", "InvalidArgument", "ReadError",
    "UnbalancedParens", "TruncatedInput", "UnclosedParens", "AtomTooLong", "NumberOutOfRange",
]
