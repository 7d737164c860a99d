"""Arithmetic, comparison and fuzzy gate evaluation over concrete numbers."""

from __future__ import annotations

from typing import Any, Callable

from . import constants
from .errors import ArityError, DivisionByZero, OperandTypeError, UnknownGate
from .operations import Add, BinaryOperation, Divide, GreaterEqual, Multiply, Subtract
from .runtime_types import is_number


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZero()
    return a / b


def _gate_not(values: list[float]) -> float:
    if len(values) != 1:
        raise ArityError(f"NOT gate expects exactly one input, got {len(values)}")
    return 1.0 - values[0]


def _gate_and(values: list[float]) -> float:
    if not values:
        raise ArityError("AND gate expects at least one input")
    return min(values)


def _gate_or(values: list[float]) -> float:
    if not values:
        raise ArityError("OR gate expects at least one input")
    return max(values)


class Operators:
    """Operator tables keyed by node type and gate name."""

    BINOP_TABLE: dict[type[BinaryOperation], Callable[[float, float], Any]] = {
        Add: lambda a, b: a + b,
        Subtract: lambda a, b: a - b,
        Multiply: lambda a, b: a * b,
        Divide: _divide,
        GreaterEqual: lambda a, b: a >= b,
    }

    GATE_TABLE: dict[str, Callable[[list[float]], float]] = {
        constants.GATE_AND: _gate_and,
        constants.GATE_OR: _gate_or,
        constants.GATE_NOT: _gate_not,
    }

    @classmethod
    def eval_binop(cls, op_type: type[BinaryOperation], lhs: Any, rhs: Any) -> Any:
        if not (is_number(lhs) and is_number(rhs)):
            raise OperandTypeError(
                f"Invalid operands for {op_type.__name__}: {lhs!r}, {rhs!r}"
            )
        return cls.BINOP_TABLE[op_type](float(lhs), float(rhs))

    @classmethod
    def eval_gate(cls, gate: str, inputs: list[Any]) -> float:
        fn = cls.GATE_TABLE.get(gate.upper())
        if fn is None:
            raise UnknownGate(gate)
        if not all(is_number(v) for v in inputs):
            raise OperandTypeError(f"Invalid inputs for {gate.upper()} gate: {inputs!r}")
        return fn([float(v) for v in inputs])
