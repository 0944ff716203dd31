"""CLI: python -m mlisp [-v] [file]"""

import logging
import sys
from pathlib import Path

from .repl import run


def main():
    args = sys.argv[1:]
    verbose = "-v" in args
    args = [a for a in args if a != "-v"]
    if len(args) > 1:
        print("Usage: python -m mlisp [-v] [file]", file=sys.stderr)
        sys.exit(2)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    if args:
        with Path(args[0]).open() as fp:
            failures = run(fp, sys.stdout)
    else:
        failures = run(sys.stdin, sys.stdout, prompt=sys.stdin.isatty())
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
