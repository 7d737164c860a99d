"""Class registry — name → ClassDefinition table owned by an interpreter session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .errors import UnknownClass
from .objects import Instance
from .operations import ClassDef
from .runtime_types import ClassDefinition

logger = logging.getLogger(__name__)


@dataclass
class ClassRegistry:
    classes: dict[str, ClassDefinition] = field(default_factory=dict)

    def define(self, class_def: ClassDef) -> None:
        """Build a ClassDefinition from *class_def* and store it under its name.

        The superclass is resolved once, now. A superclass that is not yet
        registered leaves the class without one; it is never looked up again.
        """
        definition = self._build_definition(class_def)
        if class_def.name in self.classes:
            logger.debug("Redefining class %s", class_def.name)
        self.classes[class_def.name] = definition
        logger.debug("Registered class %s (lineage %s)", class_def.name, definition.lineage())

    def _build_definition(self, class_def: ClassDef) -> ClassDefinition:
        superclass = None
        if class_def.superclass_name:
            superclass = self.classes.get(class_def.superclass_name)
            if superclass is None:
                logger.debug(
                    "Superclass %s of %s not registered; defining without superclass",
                    class_def.superclass_name,
                    class_def.name,
                )
        return ClassDefinition(
            name=class_def.name,
            superclass=superclass,
            instance_vars=list(class_def.instance_vars),
            methods=list(class_def.methods),
            nested_classes=[self._build_definition(n) for n in class_def.nested_classes],
        )

    def lookup(self, name: str) -> ClassDefinition | None:
        return self.classes.get(name)

    def create_instance(self, class_name: str) -> Instance:
        cls = self.classes.get(class_name)
        if cls is None:
            raise UnknownClass(class_name)
        logger.debug("Creating instance of %s", class_name)
        return Instance(cls)

    def names(self) -> list[str]:
        return list(self.classes)

    def __contains__(self, name: str) -> bool:
        return name in self.classes
