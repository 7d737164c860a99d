"""Interpreter session — owns a class registry and the evaluators that share it."""

from __future__ import annotations

import logging
from typing import Any

from .config import EvalConfig
from .dispatch import MethodDispatcher, create_dispatcher
from .evaluators import Evaluator, PartialEvaluator
from .objects import Instance
from .operations import Operation
from .registry import ClassRegistry
from .scope import Scope

logger = logging.getLogger(__name__)


class Interpreter:
    """One evaluation session.

    Classes defined through either evaluation mode land in the same
    registry, so a class defined by ``eval`` can be instantiated by
    ``partial_eval`` and vice versa. Separate sessions never share classes.
    """

    def __init__(
        self,
        config: EvalConfig = EvalConfig(),
        registry: ClassRegistry | None = None,
    ):
        self.config = config
        self.registry = registry if registry is not None else ClassRegistry()
        self.evaluator = Evaluator(self)
        self.partial_evaluator = PartialEvaluator(self)
        self.dispatcher: MethodDispatcher = create_dispatcher(config, self)
        logger.debug("Interpreter session created (dispatch=%s)", config.dispatch.value)

    def eval(
        self,
        op: Operation,
        instance: Instance | None = None,
        scope: Scope | None = None,
    ) -> Any:
        """Fully evaluate *op*; every variable it reads must be bound."""
        return self.evaluator.evaluate(op, instance, scope)

    def partial_eval(
        self,
        op: Operation,
        instance: Instance | None = None,
        scope: Scope | None = None,
    ) -> Any:
        """Reduce *op* as far as the bindings in *scope* and *instance* allow."""
        return self.partial_evaluator.evaluate(op, instance, scope)

    def create_instance(self, class_name: str) -> Instance:
        return self.registry.create_instance(class_name)

    def invoke_method(
        self,
        instance: Instance,
        method_name: str,
        args: dict[str, Any] | None = None,
        partial: bool = True,
    ) -> Any:
        """Invoke a method directly with already-evaluated arguments."""
        return self.dispatcher.invoke(instance, method_name, args or {}, partial=partial)
