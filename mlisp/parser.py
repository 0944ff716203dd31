"""Recursive-descent parser turning token sequences into object trees."""

import logging
import math
import re
from typing import Optional, Union

from .errors import NumberOutOfRange, ReadError, TruncatedInput, UnbalancedParens
from .objects import (
    Number,
    Object,
    Symbol,
    destroy,
    make_empty,
    make_number,
    make_pair,
    make_symbol,
)
from .tokenizer import CLOSE, OPEN, QUOTE, TokenSequence
from .types import DEFAULT_CONFIG, ReaderConfig

log = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]*)?")


def is_number(atom: str) -> bool:
    return _NUMBER_RE.fullmatch(atom) is not None


def classify(atom: str) -> Union[Number, Symbol]:
    if is_number(atom):
        value = float(atom)
        if not math.isfinite(value):
            raise NumberOutOfRange(f"number out of range: {atom[:16]}...")
        return make_number(value)
    return make_symbol(atom)


def _quote(obj: Object, times: int, config: ReaderConfig) -> Object:
    # 'X  =>  (quote X), innermost quote first
    for _ in range(times):
        sym = end = inner = None
        try:
            sym = make_symbol(config.quote_symbol)
            end = make_empty()
            inner = make_pair(obj, end)
            obj = make_pair(sym, inner)
        except Exception:
            destroy(sym)
            if inner is None:
                destroy(end)
                destroy(obj)
            else:
                destroy(inner)
            raise
    return obj


def _parse_expr(tokens: TokenSequence, config: ReaderConfig) -> Object:
    quotes = 0
    while tokens.peek() == QUOTE:
        tokens.pop()
        quotes += 1

    tok = tokens.pop()
    if tok is None:
        if quotes:
            raise TruncatedInput("unexpected EOF after quote")
        raise TruncatedInput("unexpected EOF")
    if tok == CLOSE:
        if quotes:
            raise ReadError("nothing to quote before )")
        raise UnbalancedParens("unexpected )")

    if tok == OPEN:
        obj = _parse_list(tokens, config)
    else:
        obj = classify(tok)
        log.debug("atom %r -> %s", tok, type(obj).__name__)
    return _quote(obj, quotes, config)


def _parse_list(tokens: TokenSequence, config: ReaderConfig) -> Object:
    items: list[Object] = []
    try:
        while True:
            nxt = tokens.peek()
            if nxt is None:
                raise TruncatedInput("unterminated (")
            if nxt == CLOSE:
                tokens.pop()
                break
            items.append(_parse_expr(tokens, config))

        # Tokens were read left to right; build the list tail first.
        expr = make_empty()
        while items:
            obj = items.pop()
            try:
                expr = make_pair(obj, expr)
            except Exception:
                destroy(obj)
                destroy(expr)
                raise
        return expr
    except Exception:
        for item in items:
            destroy(item)
        raise


def parse(tokens: TokenSequence, config: Optional[ReaderConfig] = None) -> Object:
    """Build one object tree from ``tokens``.

    Each ``'`` wraps the element that follows it in ``(quote ...)``. On any
    error every node built so far is destroyed before the error propagates.
    """
    config = config or DEFAULT_CONFIG
    result = _parse_expr(tokens, config)
    if not tokens.empty:
        destroy(result)
        raise ReadError("extra tokens")
    return result
