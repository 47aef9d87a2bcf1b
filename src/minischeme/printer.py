# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
# Printer for Scheme-like expressions.

from __future__ import annotations

from typing import Any

from .builtins import Builtin
from .datatypes import Symbol
from .evaluator import Procedure


def to_string(expression: Any) -> str:
    if expression is None:
        return ""
    if isinstance(expression, bool):
        return "#t" if expression else "#f"
    if isinstance(expression, Symbol):
        return expression.name
    if isinstance(expression, list):
        return "(" + " ".join(to_string(item) for item in expression) + ")"
    if isinstance(expression, Procedure):
        return "#<procedure (" + " ".join(p.name for p in expression.params) + ")>"
    if isinstance(expression, Builtin):
        return f"#<builtin {expression.name}>"
    return repr(expression)
