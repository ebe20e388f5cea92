"""Top-level metadata scanning for Python source text.

Every function here is a pure function of its input: nothing is cached
between calls and the compiled patterns are shared read-only, so calls are
safe from multiple threads. Scope is approximated via indentation, not a
real parser.
"""

from collections.abc import Iterable, Iterator

from pyskim.arguments import parse_argument_list
from pyskim.models import ClassDescriptor, FunctionDescriptor, GlobalVariable, ModuleSummary
from pyskim.parsers.python_parser import PythonParser

__all__ = [
    "find_class_by_name",
    "find_classes_with_base",
    "find_function_by_name",
    "parse_argument_list",
    "scan_classes",
    "scan_functions",
    "scan_global_variables",
    "scan_source",
]

# Holds no per-call state.
_parser = PythonParser()


def scan_functions(source_text: str) -> list[FunctionDescriptor]:
    """Return every column-zero function header in source order."""
    return _parser.extract_functions(source_text)


def scan_classes(source_text: str) -> list[ClassDescriptor]:
    """Return every column-zero class header in source order."""
    return _parser.extract_classes(source_text)


def scan_global_variables(source_text: str) -> Iterator[GlobalVariable]:
    """Return a fresh single-use iterator over column-zero assignments."""
    return _parser.extract_global_variables(source_text)


def scan_source(source_text: str, path: str = "") -> ModuleSummary:
    """Run all three passes and collect the results in one summary."""
    return _parser.extract_module(source_text, path)


def find_function_by_name(
    name: str,
    functions: Iterable[FunctionDescriptor]
) -> FunctionDescriptor | None:
    """Return the first function called ``name``, or None."""
    return next((f for f in functions if f.name == name), None)


def find_class_by_name(
    name: str,
    classes: Iterable[ClassDescriptor]
) -> ClassDescriptor | None:
    """Return the first class called ``name``, or None."""
    return next((c for c in classes if c.name == name), None)


def find_classes_with_base(
    base_name: str,
    classes: Iterable[ClassDescriptor]
) -> list[ClassDescriptor]:
    """Return all classes listing ``base_name`` among their base classes.

    Bases are compared as written, so ``module.Base`` does not match ``Base``.
    """
    return [c for c in classes if base_name in c.base_classes]
