"""Evaluate a file of equations and write the results to disk."""
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from parse_equation.batch.reader import read_equations
from parse_equation.common.logger import logger
from parse_equation.common.models import EquationRequest, EquationResult
from parse_equation.common.parser import EquationParser


class BatchRunner(BaseModel):
    """
    Evaluate every equation of an input file, one per line.

    Lifecycle:
        - Loads equations from a text file or an archive
        - Evaluates them in order with a single parser
        - Writes each result to the output file as soon as it is computed
    """

    model_config = ConfigDict(frozen=True)

    parser: EquationParser = Field(default_factory=EquationParser, description="Parser used for every equation")

    def evaluate(self, request: EquationRequest) -> EquationResult:
        """
        Evaluate a single equation request.

        :param EquationRequest request: Equation to evaluate

        :return: Original equation, its sanitized form and the result
        :rtype: EquationResult
        """
        sanitized = self.parser.sanitize(request.equation)
        result = self.parser.evaluate(self.parser.build_expression(sanitized))
        return EquationResult(equation=request.equation, sanitized=sanitized, result=result)

    def run(self, input_file: Path, output_file: Path) -> List[EquationResult]:
        """
        Evaluate the equations of an input file and write "<equation> = <result>" lines.

        :param Path input_file: Path to the input file or archive
        :param Path output_file: Path where results will be written

        :return: Results in input order
        :rtype: List[EquationResult]
        :raises ValueError: If the archive format is unsupported or contains no .txt file
        """
        equations = read_equations(input_file)
        results: List[EquationResult] = []

        with Path(output_file).open("w", encoding="utf-8") as f_out:
            for line_number, equation in enumerate(equations, start=1):
                result = self.evaluate(EquationRequest(equation=equation))
                if result.was_sanitized:
                    logger.info("Line %d sanitized to %r", line_number, result.sanitized)
                results.append(result)

                # Flush so progress survives an interruption
                f_out.write(f"{result.equation} = {result.result}\n")
                f_out.flush()

        logger.info("Wrote %d results to %s", len(results), output_file)
        return results
