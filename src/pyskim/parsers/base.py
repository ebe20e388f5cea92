from abc import ABC, abstractmethod
from collections.abc import Iterator

from pyskim.models import ClassDescriptor, FunctionDescriptor, GlobalVariable, ModuleSummary


class BaseParser(ABC):
    """Abstract base class for language-specific metadata scanners."""

    @abstractmethod
    def extract_functions(self, source_code: str) -> list[FunctionDescriptor]:
        """Extract top-level function headers from source code.

        Args:
            source_code: The source code to scan

        Returns:
            List of FunctionDescriptor objects in source order
        """
        pass

    @abstractmethod
    def extract_classes(self, source_code: str) -> list[ClassDescriptor]:
        """Extract top-level class headers from source code.

        Args:
            source_code: The source code to scan

        Returns:
            List of ClassDescriptor objects in source order
        """
        pass

    @abstractmethod
    def extract_global_variables(self, source_code: str) -> Iterator[GlobalVariable]:
        """Extract top-level assignments from source code.

        Args:
            source_code: The source code to scan

        Returns:
            Iterator of GlobalVariable objects in source order
        """
        pass

    def extract_module(self, source_code: str, file_path: str = "") -> ModuleSummary:
        """Run every extraction pass over the same source text.

        Args:
            source_code: The source code to scan
            file_path: Path recorded on the summary (not read)

        Returns:
            ModuleSummary holding all three descriptor kinds
        """
        return ModuleSummary(
            path=file_path,
            functions=tuple(self.extract_functions(source_code)),
            classes=tuple(self.extract_classes(source_code)),
            global_variables=tuple(self.extract_global_variables(source_code)),
        )
