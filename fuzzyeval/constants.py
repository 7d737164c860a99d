"""Named constants for gate names, variable defaults and fuzzy-set degrees."""

from __future__ import annotations

GATE_AND = "AND"
GATE_OR = "OR"
GATE_NOT = "NOT"

NUMBER_DEFAULT = 0.0
TEXT_DEFAULT = ""

FUZZY_SET_MISSING_DEGREE = 0.0
FUZZY_SET_MAX_DEGREE = 1.0

ADD_SYMBOL = "+"
SUBTRACT_SYMBOL = "-"
MULTIPLY_SYMBOL = "*"
DIVIDE_SYMBOL = "/"
GREATER_EQUAL_SYMBOL = ">="

NO_VALUE_REPR = "<no value>"
