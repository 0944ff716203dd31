"""Read-eval-print driver for mlisp."""

import logging
import sys
from typing import Optional, TextIO, Union

from .errors import AllocationError, ReadError
from .evaluator import evaluate
from .objects import Object, destroy
from .parser import parse
from .printer import print_obj
from .tokenizer import Tokenizer
from .types import DEFAULT_CONFIG, Env, ReaderConfig, make_env

log = logging.getLogger(__name__)


def _tokenizer(source: Union[str, TextIO, Tokenizer], config: ReaderConfig) -> Tokenizer:
    if isinstance(source, Tokenizer):
        return source
    return Tokenizer(source, config)


def read(source: Union[str, TextIO, Tokenizer], config: Optional[ReaderConfig] = None) -> Object:
    """Read the next expression from ``source``.

    Raises a ReadError subclass when the input is malformed; TruncatedInput
    also signals that the input is exhausted.
    """
    config = config or DEFAULT_CONFIG
    tokens = _tokenizer(source, config).next_expression()
    return parse(tokens, config)


def rep(
    tokenizer: Tokenizer,
    out: TextIO,
    env: Optional[Env] = None,
    config: Optional[ReaderConfig] = None,
) -> None:
    """Read, evaluate and print one expression, then release its tree."""
    config = config or DEFAULT_CONFIG
    obj = read(tokenizer, config)
    result = None
    try:
        result = evaluate(obj, env)
        print_obj(out, result, config)
    finally:
        if result is not obj:
            destroy(result)
        destroy(obj)


def run(
    source: Union[str, TextIO],
    out: TextIO,
    env: Optional[Env] = None,
    config: Optional[ReaderConfig] = None,
    prompt: bool = False,
    err: Optional[TextIO] = None,
) -> int:
    """Run the read-eval-print loop until ``source`` is exhausted.

    Malformed expressions are reported on ``err`` and the rest of their line
    is skipped. Returns the number of rejected expressions.
    """
    config = config or DEFAULT_CONFIG
    env = env if env is not None else make_env()
    err = err or sys.stderr
    tokenizer = Tokenizer(source, config)
    failures = 0
    while True:
        if prompt:
            out.write(config.prompt)
            out.flush()
        if tokenizer.exhausted():
            break
        try:
            rep(tokenizer, out, env, config)
        except (ReadError, AllocationError) as exc:
            failures += 1
            log.warning("rejected expression: %s", exc)
            print(f"error: {exc}", file=err)
            tokenizer.discard_line()
    if prompt:
        out.write("\n")
    return failures
