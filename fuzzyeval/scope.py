"""Chained variable environments for lexical blocks and instance state."""

from __future__ import annotations

from typing import Any


class Scope:
    """A name → value mapping with an optional parent scope.

    The parent link is a non-owning back-reference used for lookup and for
    routing writes to the scope that already binds a name. ``None`` is never
    stored as a language value, so ``get`` returning ``None`` means "not found".
    """

    def __init__(self, parent: Scope | None = None):
        self.parent = parent
        self._variables: dict[str, Any] = {}

    def get(self, name: str) -> Any | None:
        if name in self._variables:
            return self._variables[name]
        if self.parent is not None:
            return self.parent.get(name)
        return None

    def defines(self, name: str) -> bool:
        return name in self._variables or (
            self.parent is not None and self.parent.defines(name)
        )

    def set(self, name: str, value: Any) -> None:
        """Rebind *name* where it is already bound, else bind it in the root scope."""
        target = self._binding_scope(name) or self.root()
        target._variables[name] = value

    def declare(self, name: str, value: Any) -> None:
        """Bind *name* in this scope, shadowing any outer binding."""
        self._variables[name] = value

    def create_child(self) -> Scope:
        return Scope(parent=self)

    def root(self) -> Scope:
        """The outermost scope of the chain."""
        scope = self
        while scope.parent is not None:
            scope = scope.parent
        return scope

    def local_names(self) -> list[str]:
        return list(self._variables)

    def _binding_scope(self, name: str) -> Scope | None:
        scope: Scope | None = self
        while scope is not None:
            if name in scope._variables:
                return scope
            scope = scope.parent
        return None

    def __contains__(self, name: str) -> bool:
        return self.defines(name)

    def __repr__(self) -> str:
        depth = 0
        scope = self.parent
        while scope is not None:
            depth += 1
            scope = scope.parent
        return f"Scope(depth={depth}, names={sorted(self._variables)})"
