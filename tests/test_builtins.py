# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
"""
Tests for the procedures bound in the global frame.
"""

import math

import pytest

from minischeme import (
    ArityMismatch,
    Builtin,
    DivisionByZero,
    EmptyListAccess,
    NumericOverflow,
    Symbol,
    WrongType,
    eval_expr,
    parse,
    standard_env,
)


@pytest.fixture
def env():
    return standard_env()


def ev(source, env):
    return eval_expr(parse(source), env)


def test_standard_env_has_required_names(env):
    names = "+ - * / > < >= <= = equal? eq? not cons car cdr append list length list? null? symbol?"
    for name in names.split():
        assert isinstance(env.lookup(Symbol(name)), Builtin)
    assert env.outer is None


def test_standard_env_is_fresh_each_time():
    first = standard_env()
    first.define(Symbol("+"), 0)
    assert isinstance(standard_env().lookup(Symbol("+")), Builtin)


class TestArithmetic:
    def test_variadic(self, env):
        assert ev("(+)", env) == 0
        assert ev("(+ 1 2 3)", env) == 6
        assert ev("(*)", env) == 1
        assert ev("(* 2 3 4)", env) == 24

    def test_minus(self, env):
        assert ev("(- 10 3 2)", env) == 5
        assert ev("(- 5)", env) == -5

    def test_divide(self, env):
        assert ev("(/ 8 2)", env) == pytest.approx(4)
        assert ev("(/ 2)", env) == pytest.approx(0.5)
        assert ev("(/ 1 4)", env) == pytest.approx(0.25)

    def test_int_and_float_stay_distinct(self, env):
        assert isinstance(ev("(+ 1 2)", env), int)
        assert isinstance(ev("(+ 1 2.0)", env), float)

    def test_division_by_zero(self, env):
        with pytest.raises(DivisionByZero):
            ev("(/ 1 0)", env)
        with pytest.raises(DivisionByZero):
            ev("(/ 1.5 0.0)", env)
        with pytest.raises(DivisionByZero):
            ev("(/ 0)", env)

    def test_minus_and_divide_need_an_argument(self, env):
        with pytest.raises(ArityMismatch):
            ev("(-)", env)
        with pytest.raises(ArityMismatch):
            ev("(/)", env)

    def test_wrong_type(self, env):
        with pytest.raises(WrongType):
            ev("(+ 1 (quote a))", env)
        with pytest.raises(WrongType):
            ev("(+ 1 #t)", env)
        with pytest.raises(WrongType):
            ev("(< 1 (list))", env)

    def test_math_helpers(self, env):
        assert ev("(abs -3)", env) == 3
        assert ev("(max 1 5 2)", env) == 5
        assert ev("(min 4 2 8)", env) == 2
        assert ev("(expt 2 10)", env) == 1024
        assert ev("(round 2.5)", env) == 2.0
        assert ev("(round 7)", env) == 7
        assert ev("pi", env) == pytest.approx(math.pi)

    def test_expt_errors(self, env):
        with pytest.raises(DivisionByZero):
            ev("(expt 0 -1)", env)
        with pytest.raises(WrongType):
            ev("(expt -8 0.5)", env)


class TestNumericOverflow:
    """Results that do not fit in a finite float are reported, never returned."""

    @pytest.mark.parametrize(
        "source",
        [
            "(expt 10.0 400)",
            "(+ (expt 10 400) 0.5)",
            "(/ (expt 10 400) 3)",
            "(* 1e200 1e200)",
            "(- (* 1e200 1e200) (* 1e200 1e200))",
            "(- -1e308 1e308)",
            "(+ 1e308 1e308)",
            "(/ 1e308 1e-308)",
        ],
    )
    def test_overflow_is_reported(self, env, source):
        with pytest.raises(NumericOverflow):
            ev(source, env)

    def test_round_of_non_finite(self, env):
        round_ = env.lookup(Symbol("round"))
        with pytest.raises(NumericOverflow):
            round_(float("inf"))
        with pytest.raises(NumericOverflow):
            round_(float("nan"))

    def test_large_exact_integers_are_fine(self, env):
        assert ev("(expt 10 400)", env) == 10**400
        assert ev("(* (expt 10 200) (expt 10 200))", env) == 10**400


class TestComparison:
    def test_chains(self, env):
        assert ev("(> 5 3 1)", env) is True
        assert ev("(> 5 5)", env) is False
        assert ev("(<= 2 2 3)", env) is True
        assert ev("(>= 3 3 4)", env) is False
        assert ev("(= 4 4 4)", env) is True
        assert ev("(= 1 1.0)", env) is True
        assert ev("(<)", env) is True

    def test_equal(self, env):
        assert ev("(equal? (list 1 (list 2)) (quote (1 (2))))", env) is True
        assert ev("(equal? (list 1 2) (list 1 3))", env) is False
        assert ev("(equal? 1 1.0)", env) is False
        assert ev("(equal? 1 #t)", env) is False

    def test_eq(self, env):
        assert ev("(eq? (quote a) (quote a))", env) is True
        assert ev("(eq? 3 3)", env) is True
        assert ev("(eq? (list 1) (list 1))", env) is False
        assert ev("(eq? car car)", env) is True

    def test_not(self, env):
        assert ev("(not #f)", env) is True
        assert ev("(not 0)", env) is False
        assert ev("(not (quote ()))", env) is False


class TestLists:
    def test_cons_car_cdr(self, env):
        assert ev("(cons 1 (quote (2 3)))", env) == [1, 2, 3]
        assert ev("(car (quote (1 2 3)))", env) == 1
        assert ev("(cdr (quote (1 2 3)))", env) == [2, 3]

    def test_cons_does_not_mutate(self, env):
        ev("(define xs (quote (2 3)))", env)
        ev("(cons 1 xs)", env)
        assert ev("xs", env) == [2, 3]

    def test_cons_needs_list(self, env):
        with pytest.raises(WrongType):
            ev("(cons 1 2)", env)

    def test_empty_list_access(self, env):
        with pytest.raises(EmptyListAccess):
            ev("(car (quote ()))", env)
        with pytest.raises(EmptyListAccess):
            ev("(cdr (list))", env)

    def test_car_of_non_list(self, env):
        with pytest.raises(WrongType):
            ev("(car 5)", env)

    def test_list_helpers(self, env):
        assert ev("(append (list 1) (list) (list 2 3))", env) == [1, 2, 3]
        assert ev("(list 1 (quote b))", env) == [1, Symbol("b")]
        assert ev("(length (list 1 2 3))", env) == 3
        assert ev("(list? (list))", env) is True
        assert ev("(list? 1)", env) is False
        assert ev("(null? (list))", env) is True
        assert ev("(null? (list 1))", env) is False
        assert ev("(null? 0)", env) is False

    def test_type_predicates(self, env):
        assert ev("(symbol? (quote a))", env) is True
        assert ev("(symbol? 1)", env) is False
        assert ev("(number? 1.5)", env) is True
        assert ev("(number? #t)", env) is False
        assert ev("(procedure? car)", env) is True
        assert ev("(procedure? (lambda (x) x))", env) is True
        assert ev("(procedure? 1)", env) is False


class TestHigherOrder:
    def test_apply(self, env):
        assert ev("(apply + (list 1 2 3))", env) == 6
        assert ev("(apply (lambda (a b) (- a b)) (list 5 2))", env) == 3

    def test_map(self, env):
        assert ev("(map (lambda (x) (* x x)) (list 1 2 3))", env) == [1, 4, 9]
        assert ev("(map + (list 1 2) (list 10 20))", env) == [11, 22]

    def test_map_errors(self, env):
        with pytest.raises(WrongType):
            ev("(map 1 (list 1))", env)
        with pytest.raises(WrongType):
            ev("(map + (list 1) (list 1 2))", env)


def test_builtin_arity(env):
    with pytest.raises(ArityMismatch) as info:
        ev("(car (list 1) (list 2))", env)
    assert info.value.expected == "1"
    assert info.value.received == 2
