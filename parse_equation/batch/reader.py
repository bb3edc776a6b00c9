"""Load equations from a text file or an archive holding one."""
from pathlib import Path
import tarfile
import tempfile
from typing import Iterable, List
import zipfile

import py7zr

from parse_equation.common.logger import logger


def read_equations(input_file: Path) -> List[str]:
    """
    Read equations, one per line, from a plain text file or an archive.

    Blank lines are skipped and surrounding whitespace is stripped.

    :param Path input_file: Path to a .txt file or a .zip, .tar.xz or .7z archive

    :return: List of non-empty equation lines
    :rtype: List[str]
    :raises ValueError: If the archive format is unsupported or contains no .txt file
    """
    input_file = Path(input_file)
    if input_file.suffix == ".txt":
        content = input_file.read_text(encoding="utf-8")
    else:
        content = extract_archive(input_file)

    equations = [line.strip() for line in content.splitlines() if line.strip()]
    logger.info("Loaded %d equations from %s", len(equations), input_file)
    return equations


def first_text_member(names: Iterable[str], archive_path: Path) -> str:
    """
    Pick the first .txt entry among the member names of an archive.

    :param Iterable[str] names: Member names, in archive order
    :param Path archive_path: Archive the names come from, used in the error message

    :return: Name of the first .txt member
    :rtype: str
    :raises ValueError: If the archive holds no .txt file
    """
    for name in names:
        if name.endswith(".txt"):
            return name
    raise ValueError(f"No .txt file found in archive: {archive_path}")


def extract_archive(archive_path: Path) -> str:
    """
    Return the content of the first .txt file found in a supported archive.

    Supported formats: .zip, .tar.xz and .7z

    :param Path archive_path: Path to the archive file

    :return: Content of the extracted .txt file
    :rtype: str
    :raises ValueError: If no .txt file is found or format is unsupported
    """
    archive_path = Path(archive_path)

    # Members are extracted to a temporary directory, removed once read
    with tempfile.TemporaryDirectory() as tmpdir:
        tmpdir_path = Path(tmpdir)

        if archive_path.suffix == ".zip":
            with zipfile.ZipFile(archive_path, "r") as zf:
                member = first_text_member(zf.namelist(), archive_path)
                zf.extract(member, path=tmpdir_path)

        elif archive_path.suffixes[-2:] == [".tar", ".xz"]:
            with tarfile.open(archive_path, "r:xz") as tf:
                member = first_text_member((m.name for m in tf.getmembers() if m.isfile()), archive_path)
                tf.extract(member, path=tmpdir_path, filter="data")

        elif archive_path.suffix == ".7z":
            with py7zr.SevenZipFile(archive_path, mode="r") as archive:
                member = first_text_member(archive.getnames(), archive_path)
                archive.extract(path=tmpdir_path, targets=[member])

        else:
            raise ValueError(f"Unsupported archive format: {''.join(archive_path.suffixes) or archive_path.name}")

        logger.debug("Extracted %s from %s", member, archive_path)
        return (tmpdir_path / member).read_text(encoding="utf-8")
