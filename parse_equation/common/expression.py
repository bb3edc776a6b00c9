"""Expression tree built from an equation: numeric leaves and operator nodes."""
from collections.abc import Callable as ABCCallable
from enum import Enum
import math
import operator
from typing import Callable, Union

from pydantic import BaseModel, ConfigDict, Field


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]


def divide(lhs: float, rhs: float) -> float:
    """
    Divide two floats following IEEE-754 rather than raising ZeroDivisionError.

    :param float lhs: Numerator
    :param float rhs: Denominator

    :return: Quotient, signed infinity for a non-zero numerator over zero, NaN for 0/0
    :rtype: float
    """
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


class OperatorKind(str, Enum):
    """Binary operators an Operation node can apply."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    def apply(self, lhs: float, rhs: float) -> float:
        """Apply the operator to two already reduced operands."""
        return OPERATOR_FUNCTIONS[self](lhs, rhs)


OPERATOR_FUNCTIONS: dict[OperatorKind, OperatorFn] = {
    OperatorKind.ADD: operator.add,
    OperatorKind.SUBTRACT: operator.sub,
    OperatorKind.MULTIPLY: operator.mul,
    OperatorKind.DIVIDE: divide,
}


class LiteralNode(BaseModel):
    """Terminal numeric leaf of an expression tree."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Numeric value of the leaf")


class Operation(BaseModel):
    """
    Internal node applying an operator to two sub-expressions.

    Trees built from an equation are comb-shaped: lhs is always a LiteralNode and
    only rhs nests further, e.g. ``3+4*2`` becomes ``Operation(ADD, 3, Operation(MULTIPLY, 4, 2))``.
    """

    model_config = ConfigDict(frozen=True)

    kind: OperatorKind = Field(..., description="Operator applied at this node")
    lhs: "Expression" = Field(..., description="Left operand")
    rhs: "Expression" = Field(..., description="Right operand")


Expression = Union[LiteralNode, Operation]

Operation.model_rebuild()
