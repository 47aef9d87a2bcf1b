# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
# Evaluator for Scheme-like expressions.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .datatypes import (
    BEGIN,
    DEFINE,
    IF,
    LAMBDA,
    QUOTE,
    SET,
    UNIT,
    Expression,
    Symbol,
    is_number,
    is_true,
)
from .builtins import standard_env
from .environment import Env
from .errors import NotApplicable, SpecialFormError
from .parser import parse_many

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Procedure:
    """A user-defined procedure closed over the frame it was created in."""

    params: tuple[Symbol, ...]
    body: Expression
    env: Env

    def __call__(self, *args: Any) -> Any:
        local = Env.child(self.params, args, self.env)
        return eval_expr(self.body, local)

    def __repr__(self) -> str:
        names = " ".join(p.name for p in self.params)
        return f"<Procedure ({names})>"


def _expect_length(form: str, rest: list, count: int, shape: str) -> None:
    if len(rest) != count:
        raise SpecialFormError(f"{form} expects {shape}")


def _expect_symbol(form: str, value: Any) -> Symbol:
    if not isinstance(value, Symbol):
        raise SpecialFormError(f"{form} expects a symbol, got {value!r}")
    return value


def eval_expr(expression: Expression, env: Env) -> Any:
    if isinstance(expression, Symbol):
        return env.lookup(expression)
    if is_number(expression):
        return expression
    if not isinstance(expression, list):
        # #t, procedures and other runtime values placed in a tree built from
        # Python evaluate to themselves.
        return expression
    if not expression:
        raise NotApplicable("()")

    head, *rest = expression
    if head is QUOTE:
        _expect_length("quote", rest, 1, "1 argument")
        return rest[0]
    if head is IF:
        _expect_length("if", rest, 3, "a test, a consequent and an alternative")
        test, conseq, alt = rest
        branch = conseq if is_true(eval_expr(test, env)) else alt
        return eval_expr(branch, env)
    if head is SET:
        _expect_length("set!", rest, 2, "a name and a value")
        name = _expect_symbol("set!", rest[0])
        value = eval_expr(rest[1], env)
        env.assign(name, value)
        logger.debug(f"set! {name} = {value!r}")
        return UNIT
    if head is DEFINE:
        _expect_length("define", rest, 2, "a name and a value")
        name = _expect_symbol("define", rest[0])
        value = eval_expr(rest[1], env)
        env.define(name, value)
        logger.debug(f"define {name} = {value!r} in {env!r}")
        return UNIT
    if head is LAMBDA:
        _expect_length("lambda", rest, 2, "parameters and body")
        params, body = rest
        if not isinstance(params, list) or not all(
            isinstance(p, Symbol) for p in params
        ):
            raise SpecialFormError("lambda parameters must be a list of symbols")
        proc = Procedure(tuple(params), body, env)
        logger.debug(f"lambda {proc!r} in {env!r}")
        return proc
    if head is BEGIN:
        result: Any = UNIT
        for item in rest:
            result = eval_expr(item, env)
        return result

    proc = eval_expr(head, env)
    args = [eval_expr(arg, env) for arg in rest]
    if not callable(proc):
        raise NotApplicable(proc)
    return proc(*args)


def run(source: str, env: Env | None = None) -> Any:
    """Evaluates every form in source in order and returns the last result."""
    if env is None:
        env = standard_env()
    result: Any = UNIT
    for expr in parse_many(source):
        result = eval_expr(expr, env)
    return result
