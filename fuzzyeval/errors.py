"""Evaluation errors.

Every error is raised at the point of detection and aborts the current
``eval`` / ``partial_eval`` call. Each kind also derives from the closest
built-in exception so callers can catch either.
"""

from __future__ import annotations


class EvaluationError(Exception):
    """Base class for every failure raised while evaluating an operation tree."""


class UnboundVariable(EvaluationError, NameError):
    def __init__(self, name: str):
        super().__init__(f"Variable {name} not found")
        self.name = name


class UnknownClass(EvaluationError, LookupError):
    def __init__(self, class_name: str):
        super().__init__(f"Class {class_name} not found")
        self.class_name = class_name


class UnknownNestedClass(UnknownClass):
    def __init__(self, class_name: str, outer_class: str):
        EvaluationError.__init__(
            self, f"Nested class {class_name} not found in {outer_class}"
        )
        self.class_name = class_name
        self.outer_class = outer_class


class MethodNotFound(EvaluationError, AttributeError):
    def __init__(self, method_name: str, class_name: str):
        super().__init__(f"Method {method_name} not found on {class_name}")
        self.method_name = method_name
        self.class_name = class_name


class OperandTypeError(EvaluationError, TypeError):
    """An operand evaluated to a value of the wrong kind."""


class DivisionByZero(EvaluationError, ZeroDivisionError):
    def __init__(self):
        super().__init__("Division by zero")


class ArityError(EvaluationError, ValueError):
    """An operation received the wrong number of inputs."""


class UnknownGate(EvaluationError, ValueError):
    def __init__(self, gate: str):
        super().__init__(f"Unknown gate type: {gate}")
        self.gate = gate


class UnsupportedOperation(EvaluationError, NotImplementedError):
    def __init__(self, operation: object, mode: str):
        super().__init__(
            f"Operation {type(operation).__name__} not supported by {mode} evaluation"
        )
        self.operation = operation
        self.mode = mode
