# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
# The global frame and the native procedures bound in it.

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .datatypes import FALSE, TRUE, Number, Symbol, is_number
from .environment import Env
from .errors import (
    ArityMismatch,
    DivisionByZero,
    EmptyListAccess,
    NumericOverflow,
    WrongType,
)


@dataclass(frozen=True, eq=False)
class Builtin:
    name: str
    fn: Callable[..., Any]
    min_args: int = 0
    max_args: Optional[int] = None

    def __call__(self, *args: Any) -> Any:
        if len(args) < self.min_args or (
            self.max_args is not None and len(args) > self.max_args
        ):
            raise ArityMismatch(self.name, self._expected(), len(args))
        try:
            return self.fn(*args)
        except OverflowError as e:
            raise NumericOverflow(f"{self.name}: {e}") from e

    def _expected(self) -> str:
        if self.max_args is None:
            return f"at least {self.min_args}"
        if self.max_args == self.min_args:
            return str(self.min_args)
        return f"{self.min_args} to {self.max_args}"

    def __repr__(self) -> str:
        return f"<Builtin {self.name}>"


def _numbers(name: str, items: tuple) -> tuple:
    for item in items:
        if not is_number(item):
            raise WrongType(f"{name} expects numbers, got {item!r}")
    return items


def _list_arg(name: str, value: Any) -> list:
    if not isinstance(value, list):
        raise WrongType(f"{name} expects a list, got {value!r}")
    return value


def _finite(name: str, value: Number) -> Number:
    if isinstance(value, float) and not math.isfinite(value):
        raise NumericOverflow(f"{name} produced {value!r}")
    return value


def _check_divisor(value: Number) -> Number:
    if value == 0:
        raise DivisionByZero("division by zero")
    return value


def _add(*items: Any) -> Number:
    return _finite("+", sum(_numbers("+", items)))


def _multiply(*items: Any) -> Number:
    result: Number = 1
    for item in _numbers("*", items):
        result *= item
    return _finite("*", result)


def _minus(*items: Any) -> Number:
    head, *tail = _numbers("-", items)
    if not tail:
        return -head
    result = head
    for item in tail:
        result -= item
    return _finite("-", result)


def _divide(*items: Any) -> Number:
    head, *tail = _numbers("/", items)
    if not tail:
        return _finite("/", 1 / _check_divisor(head))
    result = head
    for item in tail:
        result /= _check_divisor(item)
    return _finite("/", result)


def _expt(base: Any, power: Any) -> Number:
    _numbers("expt", (base, power))
    if base == 0 and power < 0:
        raise DivisionByZero("zero raised to a negative power")
    result = base**power
    if isinstance(result, complex):
        raise WrongType(f"expt of {base} to {power} is not a real number")
    return _finite("expt", result)


def _comparison_chain(name: str, op: Callable[[Any, Any], bool]):
    def _inner(*items: Any) -> bool:
        _numbers(name, items)
        return all(op(a, b) for a, b in zip(items, items[1:]))

    return _inner


def _is_eq(a: Any, b: Any) -> bool:
    if isinstance(a, (list, Symbol)) or callable(a):
        return a is b
    return type(a) is type(b) and a == b


def _is_equal(a: Any, b: Any) -> bool:
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_is_equal(x, y) for x, y in zip(a, b))
    return _is_eq(a, b)


def _cons(head: Any, tail: Any) -> list:
    return [head] + _list_arg("cons", tail)


def _car(value: Any) -> Any:
    if not _list_arg("car", value):
        raise EmptyListAccess("car of empty list")
    return value[0]


def _cdr(value: Any) -> list:
    if not _list_arg("cdr", value):
        raise EmptyListAccess("cdr of empty list")
    return value[1:]


def _append(*lists: Any) -> list:
    result: list = []
    for item in lists:
        result.extend(_list_arg("append", item))
    return result


def _length(value: Any) -> int:
    return len(_list_arg("length", value))


def _apply(proc: Any, args: Any) -> Any:
    if not callable(proc):
        raise WrongType(f"apply expects a procedure, got {proc!r}")
    return proc(*_list_arg("apply", args))


def _map(proc: Any, *lists: Any) -> list:
    if not callable(proc):
        raise WrongType(f"map expects a procedure, got {proc!r}")
    for item in lists:
        _list_arg("map", item)
    if len({len(item) for item in lists}) > 1:
        raise WrongType("map expects lists of the same length")
    return [proc(*args) for args in zip(*lists)]


def _round(value: Any) -> Number:
    _numbers("round", (value,))
    _finite("round", value)
    if isinstance(value, int):
        return value
    # Scheme rounds halves to even and keeps the result inexact.
    return float(round(value))


def standard_env() -> Env:
    """Builds a fresh global frame holding every built-in procedure."""
    table = [
        Builtin("+", _add),
        Builtin("*", _multiply),
        Builtin("-", _minus, 1),
        Builtin("/", _divide, 1),
        Builtin("abs", lambda x: abs(_numbers("abs", (x,))[0]), 1, 1),
        Builtin("max", lambda *xs: max(_numbers("max", xs)), 1),
        Builtin("min", lambda *xs: min(_numbers("min", xs)), 1),
        Builtin("expt", _expt, 2, 2),
        Builtin("round", _round, 1, 1),
        Builtin(">", _comparison_chain(">", operator.gt)),
        Builtin("<", _comparison_chain("<", operator.lt)),
        Builtin(">=", _comparison_chain(">=", operator.ge)),
        Builtin("<=", _comparison_chain("<=", operator.le)),
        Builtin("=", _comparison_chain("=", operator.eq)),
        Builtin("equal?", _is_equal, 2, 2),
        Builtin("eq?", _is_eq, 2, 2),
        Builtin("not", lambda x: x is FALSE, 1, 1),
        Builtin("cons", _cons, 2, 2),
        Builtin("car", _car, 1, 1),
        Builtin("cdr", _cdr, 1, 1),
        Builtin("append", _append),
        Builtin("list", lambda *xs: list(xs)),
        Builtin("length", _length, 1, 1),
        Builtin("list?", lambda x: isinstance(x, list), 1, 1),
        Builtin("null?", lambda x: isinstance(x, list) and not x, 1, 1),
        Builtin("symbol?", lambda x: isinstance(x, Symbol), 1, 1),
        Builtin("number?", is_number, 1, 1),
        Builtin("procedure?", callable, 1, 1),
        Builtin("apply", _apply, 2, 2),
        Builtin("map", _map, 2),
    ]
    env = Env()
    for builtin in table:
        env.define(Symbol(builtin.name), builtin)
    env.define(Symbol("#t"), TRUE)
    env.define(Symbol("#f"), FALSE)
    env.define(Symbol("pi"), math.pi)
    return env
