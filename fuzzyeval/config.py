"""Evaluation configuration (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DispatchMode(Enum):
    """How ``InvokeMethod`` chooses among overriding definitions."""

    ALL_OVERRIDES = "all_overrides"
    MOST_DERIVED = "most_derived"


@dataclass(frozen=True)
class EvalConfig:
    """Groups interpreter session configuration."""

    dispatch: DispatchMode = DispatchMode.ALL_OVERRIDES
