"""Tokenizer for mlisp S-expressions.

Characters are pulled one at a time from a string or text stream. Parenthesis
balance is checked as tokens are produced, and a token sequence is only
handed out once it holds one complete top-level expression.
"""

import io
import logging
from typing import Iterator, Optional, TextIO, Union

from .errors import (
    AtomTooLong,
    ReadError,
    TruncatedInput,
    UnbalancedParens,
    UnclosedParens,
)
from .types import DEFAULT_CONFIG, ReaderConfig

log = logging.getLogger(__name__)

OPEN = "("
CLOSE = ")"
QUOTE = "'"
DELIMITERS = (OPEN, CLOSE, QUOTE)


class TokenSequence:
    """Tokens of one expression, consumed front to back by the parser."""

    __slots__ = ("_tokens", "_pos")

    def __init__(self, tokens: Optional[list[str]] = None):
        self._tokens: list[str] = list(tokens) if tokens else []
        self._pos = 0

    def append(self, tok: str) -> None:
        self._tokens.append(tok)

    def peek(self) -> Optional[str]:
        if self._pos >= len(self._tokens):
            return None
        return self._tokens[self._pos]

    def pop(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self._pos += 1
        return tok

    def clear(self) -> None:
        self._tokens.clear()
        self._pos = 0

    @property
    def empty(self) -> bool:
        return self._pos >= len(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens) - self._pos

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens[self._pos:])

    def __repr__(self) -> str:
        return f"TokenSequence({list(self)!r})"


class Tokenizer:
    def __init__(self, source: Union[str, TextIO], config: Optional[ReaderConfig] = None):
        if isinstance(source, str):
            source = io.StringIO(source)
        self._src = source
        self._config = config or DEFAULT_CONFIG
        self._pushback: Optional[str] = None
        self._eof = False

    def exhausted(self) -> bool:
        """Skip whitespace and report whether any input is left."""
        ch = self._getc()
        while ch and ch.isspace():
            ch = self._getc()
        self._ungetc(ch)
        return not ch

    def _getc(self) -> str:
        if self._pushback is not None:
            ch, self._pushback = self._pushback, None
            return ch
        if self._eof:
            return ""
        ch = self._src.read(1)
        if not ch:
            self._eof = True
        return ch

    def _ungetc(self, ch: str) -> None:
        if ch:
            self._pushback = ch

    def _next_token(self) -> Optional[str]:
        ch = self._getc()
        while ch and ch.isspace():
            ch = self._getc()
        if not ch:
            return None
        if ch in DELIMITERS:
            return ch
        limit = self._config.max_atom_length
        buf = ""
        while ch and not ch.isspace() and ch not in DELIMITERS:
            if len(buf) >= limit:
                raise AtomTooLong(f"atom longer than {limit} characters: {buf[:16]}...")
            buf += ch
            ch = self._getc()
        self._ungetc(ch)
        return buf

    def next_expression(self) -> TokenSequence:
        """Return the tokens of the next complete top-level expression.

        Raises UnbalancedParens on a stray ``)``, UnclosedParens when input
        ends inside a list, and TruncatedInput when it ends before any token
        or right after a quote. Nothing is returned on failure.
        """
        tokens = TokenSequence()
        depth = 0
        try:
            while True:
                tok = self._next_token()
                if tok is None:
                    if depth > 0:
                        raise UnclosedParens("unterminated (")
                    if tokens.empty:
                        raise TruncatedInput("unexpected EOF")
                    raise TruncatedInput("unexpected EOF after quote")
                if tok == OPEN:
                    depth += 1
                elif tok == CLOSE:
                    depth -= 1
                    if depth < 0:
                        raise UnbalancedParens("unexpected )")
                tokens.append(tok)
                log.debug("token %r depth=%d", tok, depth)
                if depth == 0 and tok != QUOTE:
                    return tokens
        except ReadError:
            tokens.clear()
            raise

    def discard_line(self) -> None:
        """Skip the rest of the current input line."""
        ch = self._getc()
        while ch and ch != "\n":
            ch = self._getc()

    def expect_end(self) -> None:
        """Raise if anything but whitespace is left in the input."""
        if self.exhausted():
            return
        if self._getc() == CLOSE:
            raise UnbalancedParens("unexpected )")
        raise ReadError("extra tokens")

    def __iter__(self) -> Iterator[TokenSequence]:
        while not self.exhausted():
            yield self.next_expression()


def tokenize(text: str, config: Optional[ReaderConfig] = None) -> TokenSequence:
    """Tokenize exactly one expression from ``text``."""
    tz = Tokenizer(text, config)
    tokens = tz.next_expression()
    tz.expect_end()
    return tokens
