from pathlib import Path

from pyskim.parsers.base import BaseParser
from pyskim.parsers.python_parser import PythonParser

PYTHON_SUFFIXES = {".py", ".pyi", ".pyw"}


def get_parser_for_file(file_path: Path) -> BaseParser | None:
    """Return a parser for the file's language, or None if unsupported.

    Args:
        file_path: Path whose extension selects the parser (case-insensitive)

    Returns:
        Parser instance, or None if the extension isn't recognized
    """
    if file_path.suffix.lower() in PYTHON_SUFFIXES:
        return PythonParser()
    return None
