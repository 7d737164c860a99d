"""Module-level entry points backed by a process-wide default session.

Each function mirrors the corresponding ``Interpreter`` method; pass
``session=`` to evaluate against an isolated registry instead.
"""

from __future__ import annotations

import logging
from typing import Any

from .objects import Instance
from .operations import Operation
from .scope import Scope
from .session import Interpreter

logger = logging.getLogger(__name__)

_default_session: Interpreter | None = None


def default_session() -> Interpreter:
    """Return the process-wide session, creating it on first use."""
    global _default_session
    if _default_session is None:
        _default_session = Interpreter()
    return _default_session


def reset_default_session() -> Interpreter:
    """Discard every class registered through the default session."""
    global _default_session
    logger.debug("Resetting default interpreter session")
    _default_session = Interpreter()
    return _default_session


def evaluate(
    operation: Operation,
    instance: Instance | None = None,
    scope: Scope | None = None,
    *,
    session: Interpreter | None = None,
) -> Any:
    """Fully evaluate *operation* and return its concrete value.

    Args:
        operation: The operation tree to evaluate.
        instance: Owning instance whose variables are visible to the tree.
        scope: Variable bindings; a fresh empty scope when omitted.
        session: Interpreter session; the default session when omitted.

    Returns:
        The concrete result: a float, string, boolean, Instance,
        ``NO_VALUE`` or, for method invocations, the dispatcher's result.

    Raises:
        EvaluationError: any evaluation failure, as its specific subclass.
    """
    return (session or default_session()).eval(operation, instance, scope)


def partial_evaluate(
    operation: Operation,
    instance: Instance | None = None,
    scope: Scope | None = None,
    *,
    session: Interpreter | None = None,
) -> Any:
    """Partially evaluate *operation*, returning a value or residual tree.

    Args:
        operation: The operation tree to reduce.
        instance: Owning instance whose variables are visible to the tree.
        scope: Variable bindings; a fresh empty scope when omitted.
        session: Interpreter session; the default session when omitted.

    Returns:
        A ``Value`` when the tree reduced completely, a residual Operation
        otherwise, or the run-time result of a class-model operation.
    """
    return (session or default_session()).partial_eval(operation, instance, scope)
