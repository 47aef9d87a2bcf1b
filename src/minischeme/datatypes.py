# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
"""
Runtime representation of Scheme-like data.

  symbol         => Symbol (interned, compare with `is`)
  number         => int or float (never bool)
  list           => list
  #t / #f        => True / False
  no value       => None
"""

from __future__ import annotations

import threading
from typing import Any, Union

_SYMBOL_TABLE: dict[str, "Symbol"] = {}
_SYMBOL_LOCK = threading.Lock()


class Symbol:
    """A name. Building a Symbol from the same text always gives the same object."""

    __slots__ = ("name",)

    def __new__(cls, name: str) -> "Symbol":
        with _SYMBOL_LOCK:
            self = _SYMBOL_TABLE.get(name)
            if self is None:
                self = object.__new__(cls)
                self.name = name
                _SYMBOL_TABLE[name] = self
            return self

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name


Number = Union[int, float]
Atom = Union[Symbol, int, float]
Expression = Union[Symbol, int, float, list]

TRUE = True
FALSE = False
UNIT = None


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_true(value: Any) -> bool:
    """Only #f is false; 0, () and the unit value all count as true."""
    return value is not False


# Special-form keywords.
QUOTE = Symbol("quote")
IF = Symbol("if")
SET = Symbol("set!")
DEFINE = Symbol("define")
LAMBDA = Symbol("lambda")
BEGIN = Symbol("begin")
