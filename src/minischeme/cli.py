# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
"""
Read-eval-print driver for the Scheme-like interpreter.

Runs each file named on the command line against one shared global frame,
then (with no files, or where a file name is "-") starts an interactive
session. A form that fails is reported and skipped; the forms after it
still run.
"""

import argparse
import logging
import os
import sys
from contextlib import suppress
from pathlib import Path
from typing import Callable, List, Optional

from .builtins import standard_env
from .environment import Env
from .errors import SchemeError, UnexpectedEndOfInput
from .evaluator import eval_expr
from .parser import read_from_tokens, tokenize
from .printer import to_string

EXIT_OK = 0
EXIT_FORM_FAILED = 1
EXIT_BAD_FILE = 2
EXIT_RECURSION = 3


def _get_log_level() -> int:
    """
    Determine log level from LOGLEVEL environment variable.
    Defaults to WARNING if not set.
    """
    loglevel_env = os.getenv("LOGLEVEL", "").upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level

    # Default to WARNING if not set
    return logging.WARNING


def eval_source(source: str, env: Env, echo: bool = False) -> int:
    """
    Evaluates every top-level form in source and returns how many failed.
    With echo, the printed form of each result is written to stdout.
    """
    failures = 0
    tokens = tokenize(source)
    while tokens:
        try:
            expression = read_from_tokens(tokens)
            result = eval_expr(expression, env)
        except UnexpectedEndOfInput as e:
            # Nothing is left to read once a list runs off the end.
            logging.error(f"{type(e).__name__}: {e}")
            return failures + 1
        except SchemeError as e:
            logging.error(f"{type(e).__name__}: {e}")
            failures += 1
            continue
        if echo and result is not None:
            print(to_string(result))
    return failures


def _needs_more_input(tokens: List[str]) -> bool:
    depth = 0
    for token in tokens:
        if token == "(":
            depth += 1
        elif token == ")":
            # A stray ")" is reported when the buffer is evaluated.
            depth = max(depth - 1, 0)
    return depth > 0


def repl(
    env: Env,
    prompt: str = "> ",
    continuation_prompt: str = "  ",
    read_line: Callable[[str], str] = input,
) -> int:
    """Interactive session; returns the number of forms that failed."""
    with suppress(ImportError):
        import readline  # noqa: F401  (line editing for input())

    failures = 0
    buffer: List[str] = []
    while True:
        try:
            line = read_line(continuation_prompt if buffer else prompt)
        except EOFError:
            print()
            return failures
        except KeyboardInterrupt:
            print("\nKeyboardInterrupt")
            buffer = []
            continue
        buffer.append(line)
        source = "\n".join(buffer)
        if _needs_more_input(tokenize(source)):
            continue
        buffer = []
        try:
            failures += eval_source(source, env, echo=True)
        except KeyboardInterrupt:
            # Bindings made before the interrupt stay in the global frame.
            print("\nKeyboardInterrupt")
            failures += 1


def run_file(path: Path, env: Env) -> Optional[int]:
    """Returns the number of failed forms, or None if path cannot be read."""
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Error reading {path}: {e}")
        return None
    logging.info(f"Running {path}")
    return eval_source(source, env)


def main_with_args(
    files: List[str],
    expression: Optional[str] = None,
    prompt: str = "> ",
    continuation_prompt: str = "  ",
    recursion_limit: Optional[int] = None,
) -> int:
    # Configure logging from LOGLEVEL environment variable
    logging.basicConfig(
        level=_get_log_level(),
        format="%(message)s",
        stream=sys.stderr,
    )
    if recursion_limit is not None:
        sys.setrecursionlimit(recursion_limit)

    env = standard_env()
    failures = 0
    try:
        if expression is not None:
            failures += eval_source(expression, env, echo=True)
            files = []
        elif not files:
            failures += repl(env, prompt, continuation_prompt)
        for name in files:
            if name == "-":
                failures += repl(env, prompt, continuation_prompt)
                continue
            result = run_file(Path(name), env)
            if result is None:
                return EXIT_BAD_FILE
            failures += result
    except RecursionError:
        logging.critical("Fatal: maximum recursion depth exceeded")
        return EXIT_RECURSION
    return EXIT_FORM_FAILED if failures else EXIT_OK


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Run Scheme-like programs, or start an interactive session"
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Program files to run in order; '-' starts an interactive session",
    )
    parser.add_argument(
        "-e",
        "--eval",
        dest="expression",
        default=None,
        help="Evaluate EXPRESSION, print its result and exit",
    )
    parser.add_argument(
        "--prompt",
        default="> ",
        help="Prompt shown before each new form (default: '> ')",
    )
    parser.add_argument(
        "--continuation-prompt",
        default="  ",
        help="Prompt shown while a form is still open (default: two spaces)",
    )
    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=None,
        help="Host recursion limit; deeply recursive programs need a larger one",
    )
    args = parser.parse_args()
    return main_with_args(**vars(args))


if __name__ == "__main__":
    sys.exit(main())
