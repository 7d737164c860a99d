"""Operation tree — the closed set of expression nodes both evaluators consume."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from . import constants


class VarType(str, Enum):
    NUMBER = "NUMBER"
    TEXT = "TEXT"

    @property
    def default(self) -> Any:
        if self is VarType.NUMBER:
            return constants.NUMBER_DEFAULT
        return constants.TEXT_DEFAULT


class Operation(BaseModel):
    """Base of every node kind. Nodes are immutable once built."""

    model_config = ConfigDict(frozen=True)


# ── Class-model declarations ─────────────────────────────────────


class InstanceVariableDecl(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    var_type: VarType = VarType.NUMBER


class Parameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    param_type: VarType = VarType.NUMBER


class Method(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    parameters: list[Parameter] = []
    body: list[Operation] = []

    def __str__(self) -> str:
        params = ", ".join(p.name for p in self.parameters)
        body = "; ".join(str(op) for op in self.body)
        return f"def {self.name}({params}) {{ {body} }}"


# ── Leaves ───────────────────────────────────────────────────────


class Value(Operation):
    value: Any

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return repr(self.value)
        return str(self.value)


class Variable(Operation):
    name: str

    def __str__(self) -> str:
        return self.name


class Assign(Operation):
    name: str
    value: Operation

    def __str__(self) -> str:
        return f"{self.name} := {self.value}"


# ── Arithmetic & comparison ──────────────────────────────────────


class BinaryOperation(Operation):
    left: Operation
    right: Operation

    SYMBOL: ClassVar[str] = "?"

    def __str__(self) -> str:
        return f"({self.left} {self.SYMBOL} {self.right})"


class Add(BinaryOperation):
    SYMBOL: ClassVar[str] = constants.ADD_SYMBOL


class Subtract(BinaryOperation):
    SYMBOL: ClassVar[str] = constants.SUBTRACT_SYMBOL


class Multiply(BinaryOperation):
    SYMBOL: ClassVar[str] = constants.MULTIPLY_SYMBOL


class Divide(BinaryOperation):
    SYMBOL: ClassVar[str] = constants.DIVIDE_SYMBOL


class GreaterEqual(BinaryOperation):
    SYMBOL: ClassVar[str] = constants.GREATER_EQUAL_SYMBOL


COMMUTATIVE_NODES: tuple[type[BinaryOperation], ...] = (Add, Multiply)


# ── Blocks & control flow ────────────────────────────────────────


class Let(Operation):
    bindings: list[tuple[str, Operation]] = []
    body: Operation

    def __str__(self) -> str:
        binds = ", ".join(f"{name} = {op}" for name, op in self.bindings)
        return f"let {binds} in {self.body}"


class IfTrue(Operation):
    condition: Operation
    then_branch: Operation
    else_branch: Operation

    def __str__(self) -> str:
        return f"if {self.condition} then {self.then_branch} else {self.else_branch}"


class TestGate(Operation):
    gate: str
    inputs: list[Operation] = []

    # keep pytest from collecting this model as a test class
    __test__ = False

    def __str__(self) -> str:
        return f"{self.gate.upper()}({', '.join(str(op) for op in self.inputs)})"


# ── Object model ─────────────────────────────────────────────────


class ClassDef(Operation):
    name: str
    superclass_name: str | None = None
    instance_vars: list[InstanceVariableDecl] = []
    methods: list[Method] = []
    nested_classes: list[ClassDef] = []

    def __str__(self) -> str:
        base = f"({self.superclass_name})" if self.superclass_name else ""
        return f"class {self.name}{base}"


class CreateInstance(Operation):
    class_name: str

    def __str__(self) -> str:
        return f"new {self.class_name}"


class InvokeMethod(Operation):
    instance: Operation
    method_name: str
    args: list[tuple[str, Operation]] = []

    def __str__(self) -> str:
        args = ", ".join(f"{name}={op}" for name, op in self.args)
        return f"{self.instance}.{self.method_name}({args})"
