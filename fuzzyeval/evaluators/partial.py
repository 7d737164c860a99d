"""Partial evaluator — reduces as far as the bindings allow, leaving a residual tree."""

from __future__ import annotations

import logging
from typing import Any

from ..errors import DivisionByZero
from ..objects import Instance
from ..operations import (
    COMMUTATIVE_NODES,
    Add,
    Assign,
    BinaryOperation,
    Divide,
    GreaterEqual,
    IfTrue,
    InvokeMethod,
    Let,
    Multiply,
    Operation,
    Subtract,
    TestGate,
    Value,
    Variable,
)
from ..operators import Operators
from ..runtime_types import as_operation, concrete_value, is_concrete_number
from ..scope import Scope
from ._base import BaseEvaluator

logger = logging.getLogger(__name__)


class PartialEvaluator(BaseEvaluator):
    """Mirrors the full evaluator but never fails on an unbound variable.

    Every handler returns an Operation (a ``Value`` when the result is
    concrete), except the class-model handlers, which return the same
    run-time objects as full evaluation.
    """

    MODE = "partial"

    def __init__(self, interpreter):
        super().__init__(interpreter)
        self._DISPATCH.update(
            {
                Value: self._reduce_value,
                Variable: self._reduce_variable,
                Assign: self._reduce_assign,
                Add: self._reduce_binop,
                Subtract: self._reduce_binop,
                Multiply: self._reduce_binop,
                Divide: self._reduce_binop,
                GreaterEqual: self._reduce_binop,
                Let: self._reduce_let,
                InvokeMethod: self._reduce_invoke,
                TestGate: self._reduce_gate,
                IfTrue: self._reduce_if,
            }
        )

    def _fallback(self, op: Operation, instance: Instance | None, scope: Scope) -> Any:
        return op

    # ── leaves ───────────────────────────────────────────────────

    def _reduce_value(self, op: Value, instance: Instance | None, scope: Scope) -> Value:
        return op

    def _reduce_variable(
        self, op: Variable, instance: Instance | None, scope: Scope
    ) -> Operation:
        val = self._lookup(op.name, instance, scope)
        if val is None:
            return op
        return as_operation(val)

    def _reduce_assign(
        self, op: Assign, instance: Instance | None, scope: Scope
    ) -> Assign:
        reduced = self.evaluate(op.value, instance, scope)
        scope.set(op.name, concrete_value(reduced))
        return Assign(name=op.name, value=as_operation(reduced))

    # ── arithmetic & comparison ──────────────────────────────────

    def _reduce_binop(
        self, op: BinaryOperation, instance: Instance | None, scope: Scope
    ) -> Operation:
        lhs = self.evaluate(op.left, instance, scope)
        rhs = self.evaluate(op.right, instance, scope)
        return self.simplify(type(op), as_operation(lhs), as_operation(rhs))

    def simplify(
        self, op_type: type[BinaryOperation], lhs: Operation, rhs: Operation
    ) -> Operation:
        """Rebuild ``op_type(lhs, rhs)`` from already-reduced operands, folding constants."""
        if op_type is Divide and is_concrete_number(rhs) and rhs.value == 0:
            raise DivisionByZero()
        if is_concrete_number(lhs) and is_concrete_number(rhs):
            return Value(value=Operators.eval_binop(op_type, lhs.value, rhs.value))
        if op_type is Multiply:
            folded = self._fold_nested_multiply(lhs, rhs)
            if folded is not None:
                return folded
        if op_type in COMMUTATIVE_NODES and is_concrete_number(rhs):
            return op_type(left=rhs, right=lhs)
        return op_type(left=lhs, right=rhs)

    @staticmethod
    def _fold_nested_multiply(lhs: Operation, rhs: Operation) -> Multiply | None:
        # c1 * (c2 * e) and (c1 * e) * c2 both become (c1*c2) * e
        if (
            is_concrete_number(lhs)
            and isinstance(rhs, Multiply)
            and is_concrete_number(rhs.left)
        ):
            factor = Operators.eval_binop(Multiply, lhs.value, rhs.left.value)
            logger.debug("Folding %s into %s", lhs, rhs)
            return Multiply(left=Value(value=factor), right=rhs.right)
        if (
            isinstance(lhs, Multiply)
            and is_concrete_number(lhs.left)
            and is_concrete_number(rhs)
        ):
            factor = Operators.eval_binop(Multiply, lhs.left.value, rhs.value)
            logger.debug("Folding %s into %s", rhs, lhs)
            return Multiply(left=Value(value=factor), right=lhs.right)
        return None

    def _reduce_gate(
        self, op: TestGate, instance: Instance | None, scope: Scope
    ) -> Operation:
        inputs = [as_operation(self.evaluate(i, instance, scope)) for i in op.inputs]
        if all(isinstance(i, Value) for i in inputs):
            return Value(value=Operators.eval_gate(op.gate, [i.value for i in inputs]))
        return TestGate(gate=op.gate, inputs=inputs)

    # ── blocks & control flow ────────────────────────────────────

    def _reduce_let(self, op: Let, instance: Instance | None, scope: Scope) -> Let:
        let_scope = scope.create_child()
        bindings: list[tuple[str, Operation]] = []
        for name, value_op in op.bindings:
            reduced = self.evaluate(value_op, instance, let_scope)
            let_scope.declare(name, concrete_value(reduced))
            bindings.append((name, as_operation(reduced)))
        body = self.evaluate(op.body, instance, let_scope)
        return Let(bindings=bindings, body=as_operation(body))

    def _reduce_if(self, op: IfTrue, instance: Instance | None, scope: Scope) -> Any:
        cond = as_operation(self.evaluate(op.condition, instance, scope))
        if isinstance(cond, Value) and isinstance(cond.value, bool):
            branch = op.then_branch if cond.value else op.else_branch
            return self.evaluate(branch, instance, scope)
        # condition unknown: both branches are reduced and their effects happen
        then_branch = self.evaluate(op.then_branch, instance, scope)
        else_branch = self.evaluate(op.else_branch, instance, scope)
        return IfTrue(
            condition=cond,
            then_branch=as_operation(then_branch),
            else_branch=as_operation(else_branch),
        )

    # ── object model ─────────────────────────────────────────────

    def _reduce_invoke(
        self, op: InvokeMethod, instance: Instance | None, scope: Scope
    ) -> Any:
        target = self._require_instance(self.evaluate(op.instance, instance, scope))
        args = {
            name: concrete_value(self.evaluate(arg, target, target.scope))
            for name, arg in op.args
        }
        return self._interpreter.dispatcher.invoke(
            target, op.method_name, args, partial=True
        )
