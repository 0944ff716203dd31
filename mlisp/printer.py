"""Render object trees as S-expression text."""

import io
from typing import Optional, TextIO

from .errors import InvalidArgument
from .objects import Empty, Number, Object, Pair, Symbol
from .types import DEFAULT_CONFIG, ReaderConfig


def _format_number(value: float, config: ReaderConfig) -> str:
    text = config.number_format % value
    if config.trim_zeros and "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _write(out: TextIO, obj: Object, config: ReaderConfig, continuing: bool = False) -> None:
    # continuing: we are inside a group opened by an enclosing Pair, so
    # no "(" is written and only the closing ")" is left to emit.
    if obj is None:
        raise InvalidArgument("missing object")
    if isinstance(obj, Number):
        out.write(_format_number(obj.value, config))
    elif isinstance(obj, Symbol):
        out.write(obj.text)
    elif isinstance(obj, Empty):
        if not continuing:
            out.write("(")
        out.write(")")
    elif isinstance(obj, Pair):
        if not continuing:
            out.write("(")
        node = obj
        while True:
            _write(out, node.head, config)
            rest = node.tail
            if isinstance(rest, Pair):
                out.write(" ")
                node = rest
            elif isinstance(rest, Empty):
                _write(out, rest, config, continuing=True)
                break
            else:
                out.write(" . ")
                _write(out, rest, config)
                out.write(")")
                break
    else:
        raise TypeError(f"unknown object type: {type(obj).__name__}")


def print_obj(out: TextIO, obj: Object, config: Optional[ReaderConfig] = None) -> None:
    """Write ``obj`` to ``out`` followed by a newline."""
    _write(out, obj, config or DEFAULT_CONFIG)
    out.write("\n")


def format_obj(obj: Object, config: Optional[ReaderConfig] = None) -> str:
    buf = io.StringIO()
    _write(buf, obj, config or DEFAULT_CONFIG)
    return buf.getvalue()
