"""Pure functions for inspecting operation trees."""

from __future__ import annotations

from collections import Counter
from typing import Iterator

from .operations import (
    Assign,
    BinaryOperation,
    IfTrue,
    InvokeMethod,
    Let,
    Operation,
    TestGate,
    Variable,
)


def children(op: Operation) -> list[Operation]:
    """Direct sub-operations of *op*, in evaluation order.

    Class definitions are leaves: method bodies only run on invocation.
    """
    if isinstance(op, Assign):
        return [op.value]
    if isinstance(op, BinaryOperation):
        return [op.left, op.right]
    if isinstance(op, Let):
        return [expr for _, expr in op.bindings] + [op.body]
    if isinstance(op, IfTrue):
        return [op.condition, op.then_branch, op.else_branch]
    if isinstance(op, TestGate):
        return list(op.inputs)
    if isinstance(op, InvokeMethod):
        return [op.instance] + [expr for _, expr in op.args]
    return []


def walk(op: Operation) -> Iterator[Operation]:
    """Yield *op* and every operation beneath it, pre-order."""
    yield op
    for child in children(op):
        yield from walk(child)


def free_variables(op: Operation) -> set[str]:
    """Names read by *op* that it does not bind itself.

    ``Let`` bindings are visible to later bindings and to the body, but not
    to their own initializer.
    """
    if isinstance(op, Variable):
        return {op.name}
    if isinstance(op, Let):
        free: set[str] = set()
        bound: set[str] = set()
        for name, expr in op.bindings:
            free |= free_variables(expr) - bound
            bound.add(name)
        return free | (free_variables(op.body) - bound)
    result: set[str] = set()
    for child in children(op):
        result |= free_variables(child)
    return result


def count_operations(op: Operation) -> dict[str, int]:
    """Return a frequency map of node kind names in the tree rooted at *op*."""
    return dict(Counter(type(node).__name__ for node in walk(op)))
