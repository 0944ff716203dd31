"""Evaluator entry point. Currently the identity: objects evaluate to themselves."""

from typing import Optional

from .objects import Object
from .types import Env


def evaluate(obj: Object, env: Optional[Env] = None) -> Object:
    # TODO: symbol lookup through env and special forms (quote, define, lambda)
    return obj
