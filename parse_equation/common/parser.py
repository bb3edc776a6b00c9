"""Parse and evaluate equations strictly left-to-right."""
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from parse_equation.common.expression import Expression, LiteralNode, Operation, OperatorKind
from parse_equation.common.logger import logger


NUMBER_CHARACTERS = frozenset("0123456789.")
OPERATOR_CHARACTERS = frozenset("+-*/")
VALID_CHARACTERS = NUMBER_CHARACTERS | OPERATOR_CHARACTERS

# Mapping of operator symbols to operator kinds.
# "/" maps to SUBTRACT unless true division is enabled on the parser.
SYMBOL_KINDS: dict[str, OperatorKind] = {
    "+": OperatorKind.ADD,
    "-": OperatorKind.SUBTRACT,
    "*": OperatorKind.MULTIPLY,
    "/": OperatorKind.SUBTRACT,
}


class EquationParser(BaseModel):
    """
    Parse and evaluate equations without operator precedence or parentheses.

    Algorithm:
        1. Sanitize: drop every character that is not a digit, "." or one of "+-*/"
        2. Build a comb-shaped expression tree, one leading number per level
        3. Reduce the tree by folding operators from left to right

    Examples:
        - Equation: 3+4*2
        - Tree: 3 + (4 * (2))
        - Result: (3 + 4) * 2 = 14

    Malformed equations never raise: invalid characters are dropped, unparsable
    numbers count as 0 and an empty equation evaluates to 0.
    """

    # Make the Pydantic instance immutable (read-only), so that a shared
    # parser cannot change behaviour between two calls.
    model_config = ConfigDict(frozen=True)

    true_division: bool = Field(
        default=False,
        description="Map '/' to division instead of subtraction",
    )
    max_terms: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum number of terms parsed before the rest of the equation is dropped",
    )

    @staticmethod
    def sanitize(raw: str) -> str:
        """
        Remove every character that cannot be part of an equation.

        A warning is logged for each dropped character.

        :param str raw: Equation as typed by the caller

        :return: Equation containing only digits, "." and "+-*/"
        :rtype: str
        """
        kept: list[str] = []
        for char in raw:
            if char in VALID_CHARACTERS:
                kept.append(char)
            else:
                logger.warning(
                    "A non-valid character (%r) was found in the equation %r", char, raw
                )
        return "".join(kept)

    @staticmethod
    def extract_leading_number(string: str) -> str:
        """
        Extract the number text at the start of a string.

        Only digits and "." are accumulated, so the text is never signed and is not
        checked for well-formedness ("1.2.3" is returned as is).

        :param str string: Text starting with the number

        :return: Leading number text, possibly empty
        :rtype: str
        """
        end = 0
        while end < len(string) and string[end] in NUMBER_CHARACTERS:
            end += 1
        return string[:end]

    @staticmethod
    def _to_float(number_text: str) -> float:
        """Convert number text to a float, 0 when it cannot be parsed."""
        try:
            return float(number_text)
        except ValueError:
            return 0.0

    def kind_for(self, symbol: str) -> Optional[OperatorKind]:
        """
        Map an operator symbol to its operator kind.

        :param str symbol: Single operator character

        :return: Operator kind, or None for an unknown symbol
        :rtype: Optional[OperatorKind]
        """
        if symbol == "/" and self.true_division:
            return OperatorKind.DIVIDE
        return SYMBOL_KINDS.get(symbol)

    def build_expression(self, equation: str) -> Expression:
        """
        Build the expression tree of a sanitized equation.

        :param str equation: Sanitized equation

        :return: LiteralNode for a single number, otherwise a comb of Operation nodes
        :rtype: Expression
        """
        # Leading numbers and the operator following each, in equation order
        terms: List[Tuple[LiteralNode, OperatorKind]] = []
        remainder = equation

        while True:
            if not remainder:
                last = LiteralNode(value=0.0)
                break

            # A leading "-" is always a sign: subtraction only follows a number.
            if remainder[0] == "-":
                number_text = "-" + self.extract_leading_number(remainder[1:])
            else:
                number_text = self.extract_leading_number(remainder)

            lhs = LiteralNode(value=self._to_float(number_text))

            cursor = len(number_text)
            # None marks the end of the equation
            symbol: Optional[str] = remainder[cursor] if cursor < len(remainder) else None

            logger.debug(
                "Equation: %s, first number: %s, first symbol: %s", remainder, lhs.value, symbol
            )

            if symbol is None:
                last = lhs
                break

            kind = self.kind_for(symbol)
            if kind is None:
                logger.warning("Unknown symbol %r in equation %r", symbol, remainder)
                last = lhs
                break

            if self.max_terms is not None and len(terms) + 1 >= self.max_terms:
                logger.warning(
                    "Equation exceeds %d terms, dropping the rest: %r", self.max_terms, remainder[cursor:]
                )
                last = lhs
                break

            terms.append((lhs, kind))
            remainder = remainder[cursor + 1:]

        # Fold from the right so that each number becomes the lhs of its own node
        expr: Expression = last
        for lhs, kind in reversed(terms):
            expr = Operation(kind=kind, lhs=lhs, rhs=expr)
        return expr

    @staticmethod
    def evaluate(expr: Expression) -> float:
        """
        Reduce an expression tree to a number.

        Operators are applied from left to right: the running result is carried
        down the right-hand spine, so ``n1 op1 (n2 op2 (n3))`` evaluates as
        ``(n1 op1 n2) op2 n3``. A left operand that is itself an Operation is
        reduced first.

        :param Expression expr: Expression tree

        :return: Computed result
        :rtype: float
        """
        if isinstance(expr, LiteralNode):
            return expr.value

        result: float = EquationParser.evaluate(expr.lhs)
        node: Operation = expr
        while isinstance(node.rhs, Operation):
            result = node.kind.apply(result, EquationParser.evaluate(node.rhs.lhs))
            node = node.rhs
        return node.kind.apply(result, node.rhs.value)

    def solve(self, equation: str) -> float:
        """
        Sanitize, parse and evaluate an equation.

        :param str equation: Raw equation

        :return: Computed result, 0 when the equation holds no number
        :rtype: float
        """
        return self.evaluate(self.build_expression(self.sanitize(equation)))


_default_parser = EquationParser()


def sanitize(raw: str) -> str:
    """Remove every character that cannot be part of an equation."""
    return EquationParser.sanitize(raw)


def extract_leading_number(string: str) -> str:
    """Extract the unsigned number text at the start of a string."""
    return EquationParser.extract_leading_number(string)


def build_expression(equation: str) -> Expression:
    """Build the expression tree of a sanitized equation with the default parser."""
    return _default_parser.build_expression(equation)


def evaluate(expr: Expression) -> float:
    """Reduce an expression tree to a number."""
    return EquationParser.evaluate(expr)


def solve(equation: str, **options) -> float:
    """
    Evaluate an equation from left to right.

    :param str equation: Raw equation
    :param options: EquationParser fields, e.g. ``true_division=True``

    :return: Computed result
    :rtype: float
    """
    parser = EquationParser(**options) if options else _default_parser
    return parser.solve(equation)
