"""Object model: symbols, numbers, pairs and the empty list.

Every tree built from these nodes is owned exclusively by its root. A node can
be placed in at most one Pair, so trees never share children and never form
cycles, and ``destroy`` can release a whole tree in a single traversal.
"""

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from .errors import AllocationError, InvalidArgument

RESERVED = frozenset("()'")


@dataclass(eq=True)
class Symbol:
    text: str
    _owned: bool = field(default=False, init=False, repr=False, compare=False)
    _released: bool = field(default=False, init=False, repr=False, compare=False)


@dataclass(eq=True)
class Number:
    value: float
    _owned: bool = field(default=False, init=False, repr=False, compare=False)
    _released: bool = field(default=False, init=False, repr=False, compare=False)


@dataclass(eq=True)
class Pair:
    head: "Object"
    tail: "Object"
    _owned: bool = field(default=False, init=False, repr=False, compare=False)
    _released: bool = field(default=False, init=False, repr=False, compare=False)


@dataclass(eq=True)
class Empty:
    _owned: bool = field(default=False, init=False, repr=False, compare=False)
    _released: bool = field(default=False, init=False, repr=False, compare=False)


Object = Union[Symbol, Number, Pair, Empty]
OBJECT_TYPES = (Symbol, Number, Pair, Empty)


def valid_symbol_text(text: str) -> bool:
    if not isinstance(text, str) or not text:
        return False
    return not any(ch in RESERVED or ch.isspace() for ch in text)


def make_symbol(text: str) -> Symbol:
    if not valid_symbol_text(text):
        raise InvalidArgument(f"invalid symbol text: {text!r}")
    try:
        return Symbol(text)
    except MemoryError as exc:
        raise AllocationError("cannot allocate symbol") from exc


def make_number(value: float) -> Number:
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"not a number: {value!r}") from exc
    if not math.isfinite(value):
        raise InvalidArgument(f"number must be finite: {value!r}")
    return Number(value)


def make_empty() -> Empty:
    return Empty()


def _check_child(obj: Optional[Object], slot: str) -> None:
    if obj is None:
        raise InvalidArgument(f"pair {slot} is missing")
    if not isinstance(obj, OBJECT_TYPES):
        raise InvalidArgument(f"pair {slot} is not an object: {obj!r}")
    if obj._released:
        raise InvalidArgument(f"pair {slot} was already destroyed")
    if obj._owned:
        raise InvalidArgument(f"pair {slot} already belongs to another pair")


def make_pair(head: Optional[Object], tail: Optional[Object]) -> Pair:
    """Build a Pair that takes ownership of ``head`` and ``tail``.

    Raises InvalidArgument when either child is absent, so a failed nested
    construction surfaces here instead of producing a half-built pair.
    """
    _check_child(head, "head")
    _check_child(tail, "tail")
    if head is tail:
        raise InvalidArgument("pair head and tail must be distinct objects")
    pair = Pair(head, tail)
    head._owned = True
    tail._owned = True
    return pair


def make_list(*items: Object, tail: Optional[Object] = None) -> Object:
    """Chain ``items`` into a list ending in ``tail`` (Empty by default)."""
    expr = make_empty() if tail is None else tail
    pending = list(items)
    try:
        while pending:
            expr = make_pair(pending[-1], expr)
            pending.pop()
    except Exception:
        # Nodes owned by some other tree are not ours to release.
        for obj in [expr, *pending]:
            if isinstance(obj, OBJECT_TYPES) and not obj._owned:
                destroy(obj)
        raise
    return expr


def destroy(obj: Optional[Object]) -> None:
    """Release ``obj`` and everything it owns.

    A Pair's head is destroyed before its tail. List spines are walked in a
    loop, so only nesting depth costs stack.
    """
    while obj is not None:
        if isinstance(obj, Pair):
            if obj._released:
                return
            destroy(obj.head)
            nxt = obj.tail
            obj.head = None
            obj.tail = None
            obj._released = True
            obj = nxt
            continue
        if isinstance(obj, Symbol):
            obj.text = None
        obj._released = True
        return


def head(obj: Optional[Object]) -> Optional[Object]:
    if not isinstance(obj, Pair) or obj._released:
        return None
    return obj.head


def tail(obj: Optional[Object]) -> Optional[Object]:
    if not isinstance(obj, Pair) or obj._released:
        return None
    return obj.tail


def is_atom(obj: Optional[Object]) -> bool:
    return isinstance(obj, (Symbol, Number))


def is_proper_list(obj: Optional[Object]) -> bool:
    while isinstance(obj, Pair):
        obj = obj.tail
    return isinstance(obj, Empty)


def iter_list(obj: Object) -> Iterator[Object]:
    """Yield the elements of a proper list."""
    while isinstance(obj, Pair):
        yield obj.head
        obj = obj.tail
    if not isinstance(obj, Empty):
        raise InvalidArgument("not a proper list")
