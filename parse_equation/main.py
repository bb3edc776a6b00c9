"""
Command-line entrypoint.

This script:
- Reads an equations file (plain text or archive) provided as argument
- Evaluates every equation from left to right
- Writes the results next to the input file
"""

import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError

from parse_equation.batch.runner import BatchRunner
from parse_equation.common.logger import configure_logging, logger
from parse_equation.common.parser import EquationParser


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : FilePath
        Path to the file containing equations.
    true_division : bool
        Map "/" to division instead of subtraction.
    max_terms : Optional[int]
        Maximum number of terms parsed per equation.
    log_level : str
        Logging level name.
    """

    file_path: FilePath
    true_division: bool = False
    max_terms: Optional[int] = Field(default=None, ge=1)
    log_level: str = "INFO"


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param Optional[List[str]] argv: Arguments, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Evaluate equations left-to-right, one per line"
    )

    parser.add_argument(
        "file_path",
        help="Path to the file containing equations (.txt, .zip, .tar.xz or .7z)",
    )
    parser.add_argument(
        "--true-division",
        action="store_true",
        help="Treat '/' as division instead of subtraction",
    )
    parser.add_argument(
        "--max-terms",
        type=int,
        default=None,
        help="Stop parsing an equation after this many terms",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging level",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            file_path=args.file_path,
            true_division=args.true_division,
            max_terms=args.max_terms,
            log_level=args.log_level,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/equations.7z
    output: resources/equations_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    stem = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function executed from the command line.
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    input_path: Path = Path(cli_args.file_path)
    output_path: Path = build_output_path(input_path)

    runner = BatchRunner(
        parser=EquationParser(
            true_division=cli_args.true_division,
            max_terms=cli_args.max_terms,
        )
    )
    runner.run(input_path, output_path)
    logger.info("Results available in %s", output_path)


if __name__ == "__main__":
    main()
