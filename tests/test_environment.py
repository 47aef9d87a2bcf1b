# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha

import pytest

from minischeme import ArityMismatch, Env, Symbol, UnboundVariable

X = Symbol("x")
Y = Symbol("y")


def test_find_returns_owning_frame():
    outer = Env({X: 1})
    inner = Env({Y: 2}, outer)
    assert inner.find(X) is outer
    assert inner.find(Y) is inner
    assert inner.lookup(X) == 1


def test_find_never_looks_into_children():
    outer = Env()
    Env({X: 1}, outer)
    with pytest.raises(UnboundVariable) as info:
        outer.find(X)
    assert info.value.name is X


def test_define_shadows_instead_of_overwriting():
    outer = Env({X: 1})
    inner = Env({}, outer)
    inner.define(X, 2)
    assert inner.lookup(X) == 2
    assert outer.lookup(X) == 1


def test_assign_overwrites_in_owning_frame():
    outer = Env({X: 1})
    inner = Env({}, outer)
    inner.assign(X, 5)
    assert outer.values[X] == 5
    assert X not in inner.values


def test_assign_never_creates_a_binding():
    env = Env()
    with pytest.raises(UnboundVariable):
        env.assign(X, 1)
    assert X not in env.values


def test_child_pairs_params_with_args():
    parent = Env()
    child = Env.child((X, Y), (1, 2), parent)
    assert child.values == {X: 1, Y: 2}
    assert child.outer is parent


@pytest.mark.parametrize("args", [(), (1,), (1, 2, 3)])
def test_child_rejects_arity_mismatch(args):
    with pytest.raises(ArityMismatch) as info:
        Env.child((X, Y), args, Env())
    assert info.value.received == len(args)
