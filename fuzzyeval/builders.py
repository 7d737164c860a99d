"""Terse constructors for building operation trees by hand."""

from __future__ import annotations

from typing import Any

from .operations import (
    Add,
    Assign,
    ClassDef,
    CreateInstance,
    Divide,
    GreaterEqual,
    IfTrue,
    InstanceVariableDecl,
    InvokeMethod,
    Let,
    Method,
    Multiply,
    Operation,
    Parameter,
    Subtract,
    TestGate,
    Value,
    Variable,
    VarType,
)


def _op(val: Any) -> Operation:
    """Accept raw literals and variable names alongside operations.

    Strings are taken as variable names; use ``lit`` for a text literal.
    """
    if isinstance(val, Operation):
        return val
    if isinstance(val, str):
        return Variable(name=val)
    return Value(value=val)


def lit(value: Any) -> Value:
    return Value(value=value)


def var(name: str) -> Variable:
    return Variable(name=name)


def assign(name: str, value: Any) -> Assign:
    return Assign(name=name, value=_op(value))


def add(left: Any, right: Any) -> Add:
    return Add(left=_op(left), right=_op(right))


def sub(left: Any, right: Any) -> Subtract:
    return Subtract(left=_op(left), right=_op(right))


def mul(left: Any, right: Any) -> Multiply:
    return Multiply(left=_op(left), right=_op(right))


def div(left: Any, right: Any) -> Divide:
    return Divide(left=_op(left), right=_op(right))


def ge(left: Any, right: Any) -> GreaterEqual:
    return GreaterEqual(left=_op(left), right=_op(right))


def let(bindings: list[tuple[str, Any]], body: Any) -> Let:
    return Let(bindings=[(name, _op(expr)) for name, expr in bindings], body=_op(body))


def if_true(condition: Any, then_branch: Any, else_branch: Any) -> IfTrue:
    return IfTrue(
        condition=_op(condition),
        then_branch=_op(then_branch),
        else_branch=_op(else_branch),
    )


def gate(kind: str, *inputs: Any) -> TestGate:
    return TestGate(gate=kind, inputs=[_op(i) for i in inputs])


def number(name: str) -> InstanceVariableDecl:
    return InstanceVariableDecl(name=name, var_type=VarType.NUMBER)


def text(name: str) -> InstanceVariableDecl:
    return InstanceVariableDecl(name=name, var_type=VarType.TEXT)


def method(name: str, params: list[str], *body: Any) -> Method:
    return Method(
        name=name,
        parameters=[Parameter(name=p) for p in params],
        body=[_op(op) for op in body],
    )


def class_def(
    name: str,
    superclass: str | None = None,
    instance_vars: list[InstanceVariableDecl] | None = None,
    methods: list[Method] | None = None,
    nested: list[ClassDef] | None = None,
) -> ClassDef:
    return ClassDef(
        name=name,
        superclass_name=superclass,
        instance_vars=instance_vars or [],
        methods=methods or [],
        nested_classes=nested or [],
    )


def new(class_name: str) -> CreateInstance:
    return CreateInstance(class_name=class_name)


def invoke(instance: Any, method_name: str, **args: Any) -> InvokeMethod:
    return InvokeMethod(
        instance=_op(instance),
        method_name=method_name,
        args=[(name, _op(val)) for name, val in args.items()],
    )
