"""Tests for partial evaluation and residual-tree simplification."""

import pytest

from fuzzyeval import builders as b
from fuzzyeval.analysis import free_variables
from fuzzyeval.errors import ArityError, DivisionByZero
from fuzzyeval.operations import (
    Add,
    Assign,
    Divide,
    GreaterEqual,
    IfTrue,
    Let,
    Multiply,
    Operation,
    Subtract,
    TestGate,
    Value,
    Variable,
)
from fuzzyeval.scope import Scope
from fuzzyeval.session import Interpreter


def _pe(op, scope=None):
    return Interpreter().partial_eval(op, scope=scope)


def _scope(**bindings) -> Scope:
    scope = Scope()
    for name, val in bindings.items():
        scope.set(name, val)
    return scope


X = Variable(name="x")


class TestLeaves:
    def test_value_is_returned_unchanged(self):
        assert _pe(Value(value=0.4)) == Value(value=0.4)

    def test_unbound_variable_is_returned_unchanged(self):
        assert _pe(X) == X

    def test_bound_variable_is_wrapped(self):
        assert _pe(X, _scope(x=2.0)) == Value(value=2.0)

    def test_bound_residual_is_substituted(self):
        assert _pe(X, _scope(x=b.add(1, "y"))) == b.add(1, "y")


class TestConstantFolding:
    def test_both_sides_concrete(self):
        assert _pe(b.add(5, 1)) == Value(value=6.0)

    def test_nested_folding_with_free_variable(self):
        op = b.mul(3, b.mul(b.add(5, 1), "var"))
        assert _pe(op) == Multiply(left=Value(value=18.0), right=Variable(name="var"))

    def test_multiplication_constant_hoisting(self):
        op = Multiply(left=Value(value=3), right=Multiply(left=Value(value=5), right=X))
        assert _pe(op) == Multiply(left=Value(value=15), right=X)

    def test_hoisting_from_left_nested_position(self):
        op = b.mul(b.mul(5, "x"), 3)
        assert _pe(op) == Multiply(left=Value(value=15.0), right=X)

    def test_multiply_places_constant_first(self):
        assert _pe(b.mul("x", 4)) == Multiply(left=Value(value=4), right=X)

    def test_add_places_constant_first(self):
        assert _pe(b.add("x", 4)) == Add(left=Value(value=4), right=X)

    def test_subtract_keeps_operand_order(self):
        assert _pe(b.sub("x", 4)) == Subtract(left=X, right=Value(value=4))

    def test_divide_keeps_operand_order(self):
        assert _pe(b.div("x", 4)) == Divide(left=X, right=Value(value=4))

    def test_no_constants_rebuilds_node(self):
        assert _pe(b.add("x", "y")) == Add(left=X, right=Variable(name="y"))

    def test_bound_variables_fold(self):
        assert _pe(b.mul("a", "b"), _scope(a=2.0, b=4.0)) == Value(value=8.0)

    def test_partially_bound_expression(self):
        op = b.add(b.mul("a", "x"), b.sub("a", 1))
        assert _pe(op, _scope(a=3.0)) == Add(
            left=Value(value=2.0), right=Multiply(left=Value(value=3.0), right=X)
        )


class TestDivisionByZero:
    def test_concrete_zero_divisor_fails(self):
        with pytest.raises(DivisionByZero):
            _pe(b.div(4, 0))

    def test_zero_divisor_fails_even_with_symbolic_numerator(self):
        with pytest.raises(DivisionByZero):
            _pe(b.div("x", b.sub(2, 2)))

    def test_symbolic_divisor_is_deferred(self):
        assert _pe(b.div(1, "x")) == Divide(left=Value(value=1), right=X)


class TestAssign:
    def test_returns_assign_of_reduced_value(self):
        scope = Scope()
        result = _pe(b.assign("y", b.add("x", 3)), scope)
        assert result == Assign(name="y", value=Add(left=Value(value=3), right=X))
        assert scope.get("y") == Add(left=Value(value=3), right=X)

    def test_concrete_result_is_stored_unwrapped(self):
        scope = Scope()
        result = _pe(b.assign("y", b.add(1, 2)), scope)
        assert result == Assign(name="y", value=Value(value=3.0))
        assert scope.get("y") == 3.0

    def test_stored_residual_feeds_later_reduction(self):
        scope = Scope()
        interp = Interpreter()
        interp.partial_eval(b.assign("y", b.mul(2, "x")), scope=scope)
        assert interp.partial_eval(b.mul(5, "y"), scope=scope) == Multiply(
            left=Value(value=10.0), right=X
        )


class TestLet:
    def test_reduced_bindings_and_body(self):
        op = b.let([("a", b.add(1, 1)), ("c", b.mul("a", "x"))], b.add("c", "a"))
        result = _pe(op)
        assert isinstance(result, Let)
        assert result.bindings == [
            ("a", Value(value=2.0)),
            ("c", Multiply(left=Value(value=2.0), right=X)),
        ]
        assert result.body == Add(
            left=Value(value=2.0), right=Multiply(left=Value(value=2.0), right=X)
        )

    def test_bindings_stay_local(self):
        scope = Scope()
        _pe(b.let([("a", 1)], "a"), scope)
        assert scope.get("a") is None

    def test_fresh_name_assigned_in_body_outlives_let(self):
        scope = Scope()
        result = _pe(b.let([("a", 1)], b.assign("y", b.mul("a", "x"))), scope)
        assert result.body == Assign(name="y", value=Multiply(left=Value(value=1), right=X))
        assert scope.get("y") == Multiply(left=Value(value=1), right=X)
        assert scope.get("a") is None


class TestGates:
    def test_concrete_inputs_fold(self):
        assert _pe(b.gate("AND", 0.7, 0.5)) == Value(value=0.5)

    def test_unbound_input_keeps_gate(self):
        result = _pe(b.gate("AND", "a", 0.5))
        assert result == TestGate(gate="AND", inputs=[Variable(name="a"), Value(value=0.5)])

    def test_inputs_are_reduced_inside_residual_gate(self):
        result = _pe(b.gate("OR", "a", b.mul(0.5, 0.5)))
        assert result.inputs[1] == Value(value=0.25)

    def test_not_arity_checked_when_concrete(self):
        with pytest.raises(ArityError):
            _pe(b.gate("NOT", 0.1, 0.2))


class TestConditional:
    def test_unknown_condition_keeps_both_branches(self):
        condition = b.ge(b.mul(15, "var"), b.add(2, "var1"))
        then_branch = b.assign("somevar", b.add("var", 3))
        else_branch = b.lit("Else branch executed")
        result = _pe(b.if_true(condition, then_branch, else_branch))
        assert isinstance(result, IfTrue)
        assert result.condition == GreaterEqual(
            left=Multiply(left=Value(value=15), right=Variable(name="var")),
            right=Add(left=Value(value=2), right=Variable(name="var1")),
        )
        assert result.else_branch == Value(value="Else branch executed")

    def test_unknown_condition_runs_both_branch_effects(self):
        scope = Scope()
        op = b.if_true(b.ge("x", 1), b.assign("p", 1), b.assign("q", 2))
        _pe(op, scope)
        assert scope.get("p") == 1
        assert scope.get("q") == 2

    def test_true_condition_short_circuits(self):
        scope = Scope()
        op = b.if_true(b.ge(2, 1), b.assign("p", "x"), b.assign("q", 2))
        assert _pe(op, scope) == Assign(name="p", value=X)
        assert scope.get("q") is None

    def test_false_condition_short_circuits(self):
        scope = Scope()
        op = b.if_true(b.ge(0, 1), b.assign("p", 1), b.assign("q", 2))
        _pe(op, scope)
        assert scope.get("p") is None
        assert scope.get("q") == 2

    def test_greater_equal_folds(self):
        assert _pe(b.ge(3, 2)) == Value(value=True)


class _Opaque(Operation):
    pass


class TestIdentityFallback:
    def test_unknown_node_kind_is_returned_unchanged(self):
        node = _Opaque()
        assert _pe(node) is node


EXPRESSIONS = [
    b.mul(3, b.mul(b.add(5, 1), "var")),
    b.add(b.mul("x", 2), b.sub("y", b.div(6, 3))),
    b.let([("a", 2), ("c", b.mul("a", "x"))], b.add("c", "z")),
    b.gate("OR", "a", b.gate("NOT", 0.25)),
    b.if_true(b.ge("x", 0), b.mul(2, b.mul(3, "x")), b.lit(0.0)),
    b.mul(b.mul(4, "k"), 0.5),
]


class TestProperties:
    @pytest.mark.parametrize("expr", EXPRESSIONS, ids=str)
    def test_partial_evaluation_is_idempotent(self, expr):
        once = _pe(expr)
        assert _pe(once) == once

    @pytest.mark.parametrize("expr", EXPRESSIONS, ids=str)
    def test_residual_free_variables_are_the_unbound_ones(self, expr):
        assert free_variables(_pe(expr)) == free_variables(expr)

    def test_bound_variables_disappear_from_residual(self):
        expr = b.add(b.mul("a", "x"), "b")
        residual = _pe(expr, _scope(a=2.0, b=1.0))
        assert free_variables(residual) == {"x"}
