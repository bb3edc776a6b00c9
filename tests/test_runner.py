"""Test class BatchRunner."""
from pathlib import Path

import pytest

from parse_equation.batch.runner import BatchRunner
from parse_equation.common.models import EquationRequest
from parse_equation.common.parser import EquationParser


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    """Create an input file with a few equations."""
    path = tmp_path / "ops.txt"
    path.write_text("3+4*2\n\n10 - 3\n8/2\n")
    return path


def test_evaluate_request() -> None:
    """A single request is sanitized and evaluated."""
    result = BatchRunner().evaluate(EquationRequest(equation="3 + 4"))
    assert result.equation == "3 + 4"
    assert result.sanitized == "3+4"
    assert result.result == 7.0
    assert result.was_sanitized


def test_run_writes_results(input_file: Path, tmp_path: Path) -> None:
    """Each equation is written with its result, in input order."""
    output_file = tmp_path / "results.txt"
    results = BatchRunner().run(input_file, output_file)

    assert [r.result for r in results] == [14.0, 7.0, 6.0]
    assert output_file.read_text().splitlines() == [
        "3+4*2 = 14.0",
        "10 - 3 = 7.0",
        "8/2 = 6.0",
    ]


def test_run_with_true_division(input_file: Path, tmp_path: Path) -> None:
    """The runner uses the options of its parser."""
    output_file = tmp_path / "results.txt"
    runner = BatchRunner(parser=EquationParser(true_division=True))
    results = runner.run(input_file, output_file)

    assert results[-1].result == 4.0
    assert output_file.read_text().splitlines()[-1] == "8/2 = 4.0"


def test_run_with_long_equation(tmp_path: Path) -> None:
    """A very long line is evaluated and the lines after it are still written."""
    input_file = tmp_path / "long.txt"
    input_file.write_text("+".join(["1"] * 5000) + "\n2*3\n")
    output_file = tmp_path / "results.txt"

    results = BatchRunner().run(input_file, output_file)

    assert [r.result for r in results] == [5000.0, 6.0]
    assert output_file.read_text().splitlines()[-1] == "2*3 = 6.0"
