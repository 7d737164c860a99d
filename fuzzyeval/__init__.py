"""Fuzzy expression language with full and partial evaluation."""

from .api import (  # noqa: F401
    default_session,
    evaluate,
    partial_evaluate,
    reset_default_session,
)
from .config import DispatchMode, EvalConfig  # noqa: F401
from .errors import EvaluationError  # noqa: F401
from .objects import Instance  # noqa: F401
from .runtime_types import NO_VALUE, PartiallyEvaluatedMethod  # noqa: F401
from .scope import Scope  # noqa: F401
from .session import Interpreter  # noqa: F401
