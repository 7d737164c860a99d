"""Full evaluator — reduces a fully bound operation tree to a concrete value."""

from __future__ import annotations

from typing import Any

from ..errors import OperandTypeError, UnboundVariable, UnsupportedOperation
from ..objects import Instance
from ..operations import (
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
from ..scope import Scope
from ._base import BaseEvaluator


class Evaluator(BaseEvaluator):
    MODE = "full"

    def __init__(self, interpreter):
        super().__init__(interpreter)
        self._DISPATCH.update(
            {
                Value: self._eval_value,
                Variable: self._eval_variable,
                Assign: self._eval_assign,
                Add: self._eval_binop,
                Subtract: self._eval_binop,
                Multiply: self._eval_binop,
                Divide: self._eval_binop,
                GreaterEqual: self._eval_binop,
                Let: self._eval_let,
                InvokeMethod: self._eval_invoke,
                TestGate: self._eval_gate,
                IfTrue: self._eval_if,
            }
        )

    def _fallback(self, op: Operation, instance: Instance | None, scope: Scope) -> Any:
        raise UnsupportedOperation(op, self.MODE)

    # ── leaves ───────────────────────────────────────────────────

    def _eval_value(self, op: Value, instance: Instance | None, scope: Scope) -> Any:
        return op.value

    def _eval_variable(
        self, op: Variable, instance: Instance | None, scope: Scope
    ) -> Any:
        val = self._lookup(op.name, instance, scope)
        if isinstance(val, Value):
            return val.value
        # a residual tree left behind by partial evaluation is not a value
        if val is None or isinstance(val, Operation):
            raise UnboundVariable(op.name)
        return val

    def _eval_assign(self, op: Assign, instance: Instance | None, scope: Scope) -> Any:
        value = self.evaluate(op.value, instance, scope)
        scope.set(op.name, value)
        return value

    # ── arithmetic & comparison ──────────────────────────────────

    def _eval_binop(
        self, op: BinaryOperation, instance: Instance | None, scope: Scope
    ) -> Any:
        lhs = self.evaluate(op.left, instance, scope)
        rhs = self.evaluate(op.right, instance, scope)
        return Operators.eval_binop(type(op), lhs, rhs)

    def _eval_gate(self, op: TestGate, instance: Instance | None, scope: Scope) -> float:
        inputs = [self.evaluate(i, instance, scope) for i in op.inputs]
        return Operators.eval_gate(op.gate, inputs)

    # ── blocks & control flow ────────────────────────────────────

    def _eval_let(self, op: Let, instance: Instance | None, scope: Scope) -> Any:
        let_scope = scope.create_child()
        for name, value_op in op.bindings:
            let_scope.declare(name, self.evaluate(value_op, instance, let_scope))
        return self.evaluate(op.body, instance, let_scope)

    def _eval_if(self, op: IfTrue, instance: Instance | None, scope: Scope) -> Any:
        cond = self.evaluate(op.condition, instance, scope)
        if not isinstance(cond, bool):
            raise OperandTypeError(
                f"Condition did not evaluate to a boolean value: {cond!r}"
            )
        branch = op.then_branch if cond else op.else_branch
        return self.evaluate(branch, instance, scope)

    # ── object model ─────────────────────────────────────────────

    def _eval_invoke(
        self, op: InvokeMethod, instance: Instance | None, scope: Scope
    ) -> Any:
        target = self._require_instance(self.evaluate(op.instance, instance, scope))
        # arguments resolve in the caller's scope, falling back to the callee
        args = {name: self.evaluate(arg, target, scope) for name, arg in op.args}
        return self._interpreter.dispatcher.invoke(
            target, op.method_name, args, partial=False
        )
