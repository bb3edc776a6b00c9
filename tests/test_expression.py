"""Test expression tree models and operator kinds."""
import math

from pydantic import ValidationError
import pytest

from parse_equation.common.expression import LiteralNode, Operation, OperatorKind, divide


@pytest.mark.parametrize("kind,lhs,rhs,expected", [
    (OperatorKind.ADD, 3.0, 4.0, 7.0),
    (OperatorKind.SUBTRACT, 10.0, 3.0, 7.0),
    (OperatorKind.MULTIPLY, 2.0, 3.0, 6.0),
    (OperatorKind.DIVIDE, 8.0, 2.0, 4.0),
])
def test_operator_kind_apply(kind, lhs, rhs, expected):
    """Each operator kind applies its arithmetic operation."""
    assert kind.apply(lhs, rhs) == expected


@pytest.mark.parametrize("lhs,rhs,expected", [
    (1.0, 0.0, math.inf),
    (-1.0, 0.0, -math.inf),
    (1.0, -0.0, -math.inf),
    (-1.0, -0.0, math.inf),
])
def test_divide_by_zero(lhs, rhs, expected):
    """Division by zero gives a signed infinity."""
    assert divide(lhs, rhs) == expected


def test_divide_zero_by_zero():
    """0/0 gives NaN."""
    assert math.isnan(divide(0.0, 0.0))


def test_literal_valid() -> None:
    """A literal stores its value as a float."""
    leaf = LiteralNode(value=5)
    assert leaf.value == 5.0


def test_literal_invalid_value() -> None:
    """Non-numeric literal values raise a validation error."""
    with pytest.raises(ValidationError):
        LiteralNode(value="five")


def test_operation_nests_expressions() -> None:
    """An operation can own literals and other operations."""
    node = Operation(
        kind=OperatorKind.SUBTRACT,
        lhs=LiteralNode(value=1),
        rhs=Operation(kind=OperatorKind.ADD, lhs=LiteralNode(value=2), rhs=LiteralNode(value=3)),
    )
    assert isinstance(node.rhs, Operation)
    assert node.rhs.rhs == LiteralNode(value=3)


def test_operation_invalid_kind() -> None:
    """Unknown operator kinds raise a validation error."""
    with pytest.raises(ValidationError):
        Operation(kind="power", lhs=LiteralNode(value=1), rhs=LiteralNode(value=2))


def test_expression_is_frozen() -> None:
    """Tree nodes cannot be modified after creation."""
    leaf = LiteralNode(value=1)
    with pytest.raises(ValidationError):
        leaf.value = 2.0
