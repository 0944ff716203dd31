from dataclasses import dataclass, field
from typing import Any, Optional

MAX_ATOM_LENGTH = 99
DEFAULT_PROMPT = "> "
DEFAULT_NUMBER_FORMAT = "%f"
QUOTE_SYMBOL = "quote"


@dataclass
class ReaderConfig:
    max_atom_length: int = MAX_ATOM_LENGTH
    prompt: str = DEFAULT_PROMPT
    number_format: str = DEFAULT_NUMBER_FORMAT
    trim_zeros: bool = False
    quote_symbol: str = QUOTE_SYMBOL


DEFAULT_CONFIG = ReaderConfig()


# Variable bindings for a future evaluator. Nothing in the reader or the
# identity evaluator consults them yet.
@dataclass
class Env:
    bindings: dict[str, Any] = field(default_factory=dict)
    parent: Optional["Env"] = None

    def define(self, name: str, value: Any) -> None:
        self.bindings[name] = value

    def lookup(self, name: str) -> Any:
        env: Optional[Env] = self
        while env is not None:
            if name in env.bindings:
                return env.bindings[name]
            env = env.parent
        raise KeyError(name)


def make_env(parent: Optional[Env] = None) -> Env:
    return Env(parent=parent)
