"""Command line entry: `kappa <file_name>` runs a source file through the REPL."""

from __future__ import annotations

import logging
import sys

from kappa.config import get_log_level, get_recursion_limit
from kappa.errors import KappaError
from kappa.interpreter import Interpreter
from kappa.reader.reader import Reader

EXIT_ERROR = -1
EXIT_USAGE = -2

logger = logging.getLogger("kappa")


def usage() -> int:
    print("usage: ")
    print("    kappa <file_name> ")
    return EXIT_USAGE


def fail(message: str) -> int:
    sys.stdout.flush()
    print(f"error: {message}", file=sys.stderr)
    return EXIT_ERROR


def load(file_name: str) -> str:
    with open(file_name, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        return usage()

    logging.basicConfig(level=get_log_level(), stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    try:
        source = load(argv[0])
    except (OSError, UnicodeDecodeError) as e:
        return fail(f"cannot load {argv[0]}: {e}")

    interpreter = Interpreter()
    try:
        interpreter.repl(Reader(source), sys.stdout)
    except KappaError as e:
        logger.debug("evaluation aborted", exc_info=True)
        return fail(str(e))
    except RecursionError:
        return fail("maximum recursion depth exceeded")
    return 0


if __name__ == "__main__":
    sys.exit(main())
