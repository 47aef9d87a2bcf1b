# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
# S-expression reader for a Scheme-like language.

from __future__ import annotations

import math
import re
from typing import Optional

from .datatypes import Atom, Expression, Number, Symbol
from .errors import TrailingTokens, UnexpectedEndOfInput, UnmatchedCloseParen

_INTEGER = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(
    r"[+-]?(?:\d+\.\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|\d+[eE][+-]?\d+)"
)


def tokenize(source: str) -> list[str]:
    source = source.replace("(", " ( ").replace(")", " ) ")
    return source.split()


def parse_number(token: str) -> Optional[Number]:
    """
    Returns the int or float that token spells, or None when it is not a
    number. Integer form is tried first, so "42" is an int and "42.0" a float.
    A float literal too large to represent, such as 1e400, is not a number.
    """
    if _INTEGER.fullmatch(token):
        return int(token)
    if _FLOAT.fullmatch(token):
        value = float(token)
        if math.isfinite(value):
            return value
    return None


def atom(token: str) -> Atom:
    number = parse_number(token)
    if number is not None:
        return number
    return Symbol(token)


def read_from_tokens(tokens: list[str]) -> Expression:
    """
    Reads the next complete form from the front of tokens, removing the
    tokens it uses. Whatever follows the form is left in place.
    """
    if not tokens:
        raise UnexpectedEndOfInput()
    token = tokens.pop(0)
    if token == "(":
        items: list[Expression] = []
        while True:
            if not tokens:
                raise UnexpectedEndOfInput("unexpected EOF while reading list")
            if tokens[0] == ")":
                tokens.pop(0)
                return items
            items.append(read_from_tokens(tokens))
    if token == ")":
        raise UnmatchedCloseParen()
    return atom(token)


def parse(source: str) -> Expression:
    tokens = tokenize(source)
    expression = read_from_tokens(tokens)
    if tokens:
        raise TrailingTokens(tokens[0])
    return expression


def parse_many(source: str) -> list[Expression]:
    tokens = tokenize(source)
    expressions: list[Expression] = []
    while tokens:
        expressions.append(read_from_tokens(tokens))
    return expressions
