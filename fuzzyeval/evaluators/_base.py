"""BaseEvaluator — tree-walking infrastructure shared by both evaluation modes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

from ..errors import OperandTypeError
from ..objects import Instance
from ..operations import ClassDef, CreateInstance, Operation
from ..runtime_types import NO_VALUE, concrete_value
from ..scope import Scope

if TYPE_CHECKING:
    from ..session import Interpreter


class BaseEvaluator(ABC):
    """Base class for the full and partial evaluators.

    Subclasses populate ``_DISPATCH`` with one handler per node type and
    override ``_fallback`` for node types they do not handle. Every handler
    takes ``(op, instance, scope)``.
    """

    MODE: str = "base"

    def __init__(self, interpreter: Interpreter):
        self._interpreter = interpreter
        self._DISPATCH: dict[type[Operation], Callable] = {
            ClassDef: self._define_class,
            CreateInstance: self._create_instance,
        }

    # ── entry point ──────────────────────────────────────────────

    def evaluate(
        self,
        op: Operation,
        instance: Instance | None = None,
        scope: Scope | None = None,
    ) -> Any:
        scope = scope if scope is not None else Scope()
        handler = self._DISPATCH.get(type(op))
        if handler is None:
            return self._fallback(op, instance, scope)
        return handler(op, instance, scope)

    @abstractmethod
    def _fallback(self, op: Operation, instance: Instance | None, scope: Scope) -> Any:
        """Handle a node kind with no entry in ``_DISPATCH``."""

    # ── helpers ──────────────────────────────────────────────────

    @staticmethod
    def _lookup(name: str, instance: Instance | None, scope: Scope) -> Any | None:
        val = scope.get(name)
        if val is None and instance is not None:
            return instance.get(name)
        return val

    @staticmethod
    def _require_instance(val: Any) -> Instance:
        target = concrete_value(val)
        if not isinstance(target, Instance):
            raise OperandTypeError(f"Method target is not an instance: {val!r}")
        return target

    # ── class-model handlers (identical in both modes) ───────────

    def _define_class(self, op: ClassDef, instance: Instance | None, scope: Scope) -> Any:
        self._interpreter.registry.define(op)
        return NO_VALUE

    def _create_instance(
        self, op: CreateInstance, instance: Instance | None, scope: Scope
    ) -> Instance:
        return self._interpreter.registry.create_instance(op.class_name)
