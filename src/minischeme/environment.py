# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
# Lexically scoped binding frames.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from .datatypes import Symbol
from .errors import ArityMismatch, UnboundVariable


@dataclass(eq=False, repr=False)
class Env:
    """
    One frame of bindings plus a link to the enclosing frame. The global
    frame has no outer. Frames only point upwards; a frame never knows its
    children, which stay alive through the closures and calls using them.
    """

    values: dict[Symbol, Any] = field(default_factory=dict)
    outer: "Env | None" = None

    @classmethod
    def child(
        cls, params: Sequence[Symbol], args: Sequence[Any], outer: "Env"
    ) -> "Env":
        if len(params) != len(args):
            raise ArityMismatch("procedure", str(len(params)), len(args))
        return cls(dict(zip(params, args)), outer)

    def find(self, name: Symbol) -> "Env":
        """Returns the innermost frame, starting at this one, that binds name."""
        env: Env | None = self
        while env is not None:
            if name in env.values:
                return env
            env = env.outer
        raise UnboundVariable(name)

    def lookup(self, name: Symbol) -> Any:
        return self.find(name).values[name]

    def define(self, name: Symbol, value: Any) -> None:
        self.values[name] = value

    def assign(self, name: Symbol, value: Any) -> None:
        # set! only overwrites an existing binding, wherever it lives.
        self.find(name).values[name] = value

    def __repr__(self) -> str:
        depth = 0
        env = self.outer
        while env is not None:
            depth += 1
            env = env.outer
        return f"<Env depth={depth} names={len(self.values)}>"
