# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
"""A small interpreter for a Scheme-like expression language."""

from .builtins import Builtin, standard_env
from .datatypes import Symbol
from .environment import Env
from .errors import (
    ArityMismatch,
    BuiltinError,
    DivisionByZero,
    EmptyListAccess,
    EvalError,
    NotApplicable,
    NumericOverflow,
    ReadError,
    SchemeError,
    SpecialFormError,
    TrailingTokens,
    UnboundVariable,
    UnexpectedEndOfInput,
    UnmatchedCloseParen,
    WrongType,
)
from .evaluator import Procedure, eval_expr, run
from .parser import atom, parse, parse_many, read_from_tokens, tokenize
from .printer import to_string

__all__ = [
    "ArityMismatch",
    "Builtin",
    "BuiltinError",
    "DivisionByZero",
    "EmptyListAccess",
    "Env",
    "EvalError",
    "NotApplicable",
    "NumericOverflow",
    "Procedure",
    "ReadError",
    "SchemeError",
    "SpecialFormError",
    "Symbol",
    "TrailingTokens",
    "UnboundVariable",
    "UnexpectedEndOfInput",
    "UnmatchedCloseParen",
    "WrongType",
    "atom",
    "eval_expr",
    "parse",
    "parse_many",
    "read_from_tokens",
    "run",
    "standard_env",
    "to_string",
    "tokenize",
]
