import logging
from collections.abc import Iterator

from pyskim.arguments import parse_argument_list
from pyskim.models import ClassDescriptor, FunctionDescriptor, GlobalVariable
from pyskim.parsers.base import BaseParser
from pyskim.patterns import (
    CLASS_HEADER,
    CONSTRUCTOR_HEADER,
    FUNCTION_HEADER,
    GLOBAL_ASSIGNMENT,
    NON_ASSIGNMENT_PREFIXES,
)

logger = logging.getLogger(__name__)


def _require_text(source_code) -> None:
    if not isinstance(source_code, str):
        raise TypeError(f"source_code must be str, not {type(source_code).__name__}")


class PythonParser(BaseParser):
    """Scanner for Python source code based on regular expressions.

    Scope is approximated via indentation, not a real parser: a construct is
    top level when its line starts at column zero. Headers that don't match
    (multi-line parameter lists, unbalanced parentheses) are skipped without
    error.
    """

    def extract_functions(self, source_code: str) -> list[FunctionDescriptor]:
        """Extract column-zero ``def`` headers.

        Args:
            source_code: Python source code to scan

        Returns:
            List of FunctionDescriptor objects in source order
        """
        _require_text(source_code)

        functions = [
            FunctionDescriptor(name=m.group(1), arguments=parse_argument_list(m.group(2)))
            for m in FUNCTION_HEADER.finditer(source_code)
        ]

        logger.debug(f"Found {len(functions)} top-level functions")
        return functions

    def extract_classes(self, source_code: str) -> list[ClassDescriptor]:
        """Extract column-zero ``class`` headers with bases and constructor arguments.

        The class body is every following line that is blank or indented. The
        first ``__init__`` anywhere in that body wins, so a constructor of a
        nested class is attributed to the outer class when the outer one has
        none before it.

        Args:
            source_code: Python source code to scan

        Returns:
            List of ClassDescriptor objects in source order
        """
        _require_text(source_code)
        classes = []

        for m in CLASS_HEADER.finditer(source_code):
            bases = m.group(2)
            base_classes = ()
            if bases is not None:
                base_classes = tuple(b.strip() for b in bases.split(",") if b.strip())

            constructor_arguments = ()
            init_match = CONSTRUCTOR_HEADER.search(m.group(3))
            if init_match:
                constructor_arguments = parse_argument_list(init_match.group(1))

            classes.append(ClassDescriptor(
                name=m.group(1),
                base_classes=base_classes,
                constructor_arguments=constructor_arguments,
            ))

        logger.debug(f"Found {len(classes)} top-level classes")
        return classes

    def _filter_global_lines(self, source_code: str) -> str:
        """Keep only non-blank, non-indented lines that aren't headers or decorators."""
        kept = [
            line for line in source_code.split("\n")
            if line.strip()
            and not line[0].isspace()
            and not line.lstrip().startswith(NON_ASSIGNMENT_PREFIXES)
        ]
        return "\n".join(kept)

    def extract_global_variables(self, source_code: str) -> Iterator[GlobalVariable]:
        """Extract column-zero assignments, lazily.

        Lines indented by any amount are dropped before matching, whatever
        their real nesting. Each call starts a fresh pass; the returned
        iterator itself is single-use.

        Args:
            source_code: Python source code to scan

        Returns:
            Iterator of GlobalVariable objects in source order

        Raises:
            TypeError: If source_code is not a string
        """
        _require_text(source_code)
        return self._iter_global_variables(self._filter_global_lines(source_code))

    def _iter_global_variables(self, filtered: str) -> Iterator[GlobalVariable]:
        count = 0
        for m in GLOBAL_ASSIGNMENT.finditer(filtered):
            count += 1
            yield GlobalVariable(
                name=m.group(1),
                type_annotation=m.group(2),
                value_expression=m.group(3).strip(),
            )

        logger.debug(f"Found {count} global variables")
