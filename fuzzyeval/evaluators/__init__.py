"""Tree-walking evaluators for full and partial evaluation."""

from ._base import BaseEvaluator  # noqa: F401
from .full import Evaluator  # noqa: F401
from .partial import PartialEvaluator  # noqa: F401
