"""Method dispatchers — pluggable strategies for ``InvokeMethod``."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .config import DispatchMode, EvalConfig
from .errors import MethodNotFound
from .objects import Instance
from .operations import Method, Variable
from .runtime_types import NO_VALUE, PartiallyEvaluatedMethod
from .scope import Scope

if TYPE_CHECKING:
    from .session import Interpreter

logger = logging.getLogger(__name__)


class MethodDispatcher(ABC):
    """Strategy for resolving and running a method call on an instance."""

    def __init__(self, interpreter: Interpreter):
        self._interpreter = interpreter

    @abstractmethod
    def invoke(
        self,
        instance: Instance,
        method_name: str,
        args: dict[str, Any],
        *,
        partial: bool,
    ) -> Any:
        """Invoke *method_name* on *instance* with already-evaluated *args*."""
        ...

    def _candidates(self, instance: Instance, method_name: str) -> list[Method]:
        methods = instance.class_def.find_methods(method_name)
        if not methods:
            raise MethodNotFound(method_name, instance.class_name)
        return methods

    def _method_scope(
        self, method: Method, instance: Instance, args: dict[str, Any]
    ) -> Scope:
        # parameters without an argument stay symbolic
        scope = instance.scope.create_child()
        for param in method.parameters:
            scope.declare(param.name, args.get(param.name, Variable(name=param.name)))
        return scope

    def _reduce(
        self, method: Method, instance: Instance, args: dict[str, Any]
    ) -> PartiallyEvaluatedMethod:
        scope = self._method_scope(method, instance, args)
        body = [
            self._interpreter.partial_eval(op, instance, scope) for op in method.body
        ]
        return PartiallyEvaluatedMethod(
            name=method.name, parameters=list(method.parameters), body=body
        )


class AllOverridesDispatcher(MethodDispatcher):
    """Reduce every definition of the method along the superclass chain.

    Returns one PartiallyEvaluatedMethod per class declaring the method,
    most-derived first, regardless of evaluation mode.
    """

    def invoke(
        self,
        instance: Instance,
        method_name: str,
        args: dict[str, Any],
        *,
        partial: bool,
    ) -> list[PartiallyEvaluatedMethod]:
        methods = self._candidates(instance, method_name)
        logger.debug(
            "Dispatching %s.%s to %d definition(s)",
            instance.class_name,
            method_name,
            len(methods),
        )
        return [self._reduce(m, instance, args) for m in methods]


class MostDerivedDispatcher(MethodDispatcher):
    """Classic single dispatch: only the most-derived definition runs."""

    def invoke(
        self,
        instance: Instance,
        method_name: str,
        args: dict[str, Any],
        *,
        partial: bool,
    ) -> Any:
        method = self._candidates(instance, method_name)[0]
        logger.debug("Dispatching %s.%s (most derived)", instance.class_name, method_name)
        if partial:
            return [self._reduce(method, instance, args)]
        scope = self._method_scope(method, instance, args)
        result: Any = NO_VALUE
        for op in method.body:
            result = self._interpreter.eval(op, instance, scope)
        return result


def create_dispatcher(config: EvalConfig, interpreter: Interpreter) -> MethodDispatcher:
    """Create the method dispatcher selected by *config*."""
    if config.dispatch == DispatchMode.MOST_DERIVED:
        return MostDerivedDispatcher(interpreter)
    return AllOverridesDispatcher(interpreter)
