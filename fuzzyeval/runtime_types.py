"""Run-time data types (pure data, no evaluation logic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from . import constants
from .operations import Assign, InstanceVariableDecl, Method, Operation, Parameter, Value


class NoValue:
    """Sentinel for operations that produce nothing (``ClassDef``, empty methods)."""

    _instance: NoValue | None = None

    def __new__(cls) -> NoValue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return constants.NO_VALUE_REPR

    def __bool__(self) -> bool:
        return False


NO_VALUE = NoValue()


@dataclass
class ClassDefinition:
    name: str
    superclass: ClassDefinition | None = None
    instance_vars: list[InstanceVariableDecl] = field(default_factory=list)
    methods: list[Method] = field(default_factory=list)
    nested_classes: list[ClassDefinition] = field(default_factory=list)

    def all_instance_variables(self) -> list[InstanceVariableDecl]:
        """Own declarations followed by every ancestor's, nearest first."""
        inherited = self.superclass.all_instance_variables() if self.superclass else []
        return self.instance_vars + inherited

    def find_methods(self, name: str) -> list[Method]:
        """Every method called *name* along the superclass chain, most-derived first."""
        own = [m for m in self.methods if m.name == name]
        inherited = self.superclass.find_methods(name) if self.superclass else []
        return own + inherited

    def find_nested_class(self, name: str) -> ClassDefinition | None:
        return next((c for c in self.nested_classes if c.name == name), None)

    def lineage(self) -> list[str]:
        """Class names from this class up to the root of its hierarchy."""
        chain = [self.name]
        if self.superclass:
            chain.extend(self.superclass.lineage())
        return chain


@dataclass
class PartiallyEvaluatedMethod:
    """A method body reduced against one instance and one set of arguments."""

    name: str
    parameters: list[Parameter] = field(default_factory=list)
    body: list[Any] = field(default_factory=list)

    @property
    def result(self) -> Any:
        """The last body element, unwrapped when it reduced to a ``Value``."""
        if not self.body:
            return NO_VALUE
        return concrete_value(self.body[-1])

    @property
    def is_fully_reduced(self) -> bool:
        """True when every body element is concrete; assignments count by their value."""
        return all(_is_reduced(op) for op in self.body)


# ── Helpers ──────────────────────────────────────────────────────


def _is_reduced(op: Any) -> bool:
    if isinstance(op, Assign):
        return isinstance(op.value, Value)
    return isinstance(op, Value) or not isinstance(op, Operation)


def is_number(val: Any) -> bool:
    return isinstance(val, (int, float)) and not isinstance(val, bool)


def is_concrete_number(op: Any) -> bool:
    return isinstance(op, Value) and is_number(op.value)


def concrete_value(op: Any) -> Any:
    """Unwrap a ``Value`` node; anything else is returned unchanged."""
    if isinstance(op, Value):
        return op.value
    return op


def as_operation(val: Any) -> Operation:
    """Wrap a run-time value so it can sit inside a residual tree."""
    if isinstance(val, Operation):
        return val
    return Value(value=val)
