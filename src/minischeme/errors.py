# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
"""
Error kinds raised while reading and evaluating Scheme-like programs.

Every failure derives from SchemeError, so a driver can recover from any
single bad form with one except clause while tests and callers can still
tell the kinds apart.
"""

from __future__ import annotations

from typing import Any


class SchemeError(Exception):
    """Base class for every recoverable interpreter failure."""


class ReadError(SchemeError):
    """Raised when program text cannot be turned into a form."""


class UnexpectedEndOfInput(ReadError):
    def __init__(self, message: str = "unexpected EOF while reading"):
        super().__init__(message)


class UnmatchedCloseParen(ReadError):
    def __init__(self, message: str = "unexpected )"):
        super().__init__(message)


class TrailingTokens(ReadError):
    def __init__(self, token: str):
        super().__init__(f"unexpected token after expression: {token}")
        self.token = token


class EvalError(SchemeError):
    """Raised when a well-formed expression fails to evaluate."""


class UnboundVariable(EvalError):
    def __init__(self, name: Any):
        super().__init__(f"unbound symbol: {name}")
        self.name = name


class ArityMismatch(EvalError):
    def __init__(self, what: str, expected: str, received: int):
        super().__init__(
            f"{what} expects {expected} argument(s), received {received}"
        )
        self.expected = expected
        self.received = received


class NotApplicable(EvalError):
    def __init__(self, value: Any):
        super().__init__(f"not a procedure: {value}")
        self.value = value


class SpecialFormError(EvalError):
    """A special form with the wrong shape, e.g. (if 1) or (lambda x x)."""


class BuiltinError(EvalError):
    """Raised by a built-in procedure on a domain failure."""


class DivisionByZero(BuiltinError):
    pass


class EmptyListAccess(BuiltinError):
    pass


class WrongType(BuiltinError):
    pass


class NumericOverflow(BuiltinError):
    """An arithmetic result too large to represent, or not a finite number."""
