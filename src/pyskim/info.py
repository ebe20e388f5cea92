from pathlib import Path

from pyskim.models import ModuleSummary
from pyskim.parsers import get_parser_for_file


def get_module_summary(file_path: str | Path, root: Path | None = None) -> ModuleSummary:
    """Scan a source file for top-level functions, classes and globals.

    Args:
        file_path: Path to file (absolute, or relative to root)
        root: Directory relative paths are resolved against (current directory if None)

    Returns:
        ModuleSummary for the file, with path as given by the caller

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file type not supported
        UnicodeDecodeError: If file isn't valid UTF-8
    """
    if root is None:
        root = Path.cwd()

    file_path_obj = Path(file_path)
    if not file_path_obj.is_absolute():
        file_path_obj = root / file_path_obj

    if not file_path_obj.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")

    parser = get_parser_for_file(file_path_obj)
    if parser is None:
        raise ValueError(f"Unsupported file type: {file_path}")

    source_code = file_path_obj.read_text(encoding="utf-8")

    return parser.extract_module(source_code, str(file_path))
