"""Run-time instances of registered classes."""

from __future__ import annotations

import logging
from typing import Any

from .errors import UnknownNestedClass
from .runtime_types import ClassDefinition
from .scope import Scope

logger = logging.getLogger(__name__)


class Instance:
    """An object bound to a class definition.

    The instance owns its scope. ``parent_instance`` is set for instances of
    nested classes: lookups and writes that miss the instance's own scope
    chain fall through to it.
    """

    def __init__(
        self,
        class_def: ClassDefinition,
        parent_instance: Instance | None = None,
        scope: Scope | None = None,
    ):
        self.class_def = class_def
        self.parent_instance = parent_instance
        self.scope = scope if scope is not None else Scope()
        self._initialize_variables()

    def _initialize_variables(self) -> None:
        for decl in self.class_def.all_instance_variables():
            self.scope.declare(decl.name, decl.var_type.default)

    @property
    def class_name(self) -> str:
        return self.class_def.name

    def get(self, name: str) -> Any | None:
        val = self.scope.get(name)
        if val is None and self.parent_instance is not None:
            return self.parent_instance.get(name)
        return val

    def set(self, name: str, value: Any) -> None:
        if self.scope.defines(name) or self.parent_instance is None:
            self.scope.set(name, value)
        else:
            self.parent_instance.set(name, value)

    def create_nested_instance(self, class_name: str) -> Instance:
        """Instantiate a class declared directly inside this instance's class."""
        nested = self.class_def.find_nested_class(class_name)
        if nested is None:
            raise UnknownNestedClass(class_name, self.class_def.name)
        logger.debug("Creating nested %s inside %s", class_name, self.class_def.name)
        return Instance(nested, parent_instance=self, scope=self.scope.create_child())

    def __repr__(self) -> str:
        return f"Instance({self.class_def.name}, vars={sorted(self.scope.local_names())})"
