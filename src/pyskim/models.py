from dataclasses import dataclass


@dataclass(frozen=True)
class Argument:
    """Represents one parameter of a function or constructor signature.

    Variadic markers stay on the name: ``*args`` and ``**kwargs`` keep their
    stars so the record renders back to source-like text without extra flags.
    """
    name: str
    type_annotation: str | None = None  # None if no type hint


@dataclass(frozen=True)
class FunctionDescriptor:
    """Represents a top-level function header."""
    name: str
    arguments: tuple[Argument, ...] = ()


@dataclass(frozen=True)
class ClassDescriptor:
    """Represents a top-level class header and its constructor parameters."""
    name: str
    base_classes: tuple[str, ...] = ()  # Empty, never None, without an inheritance list
    constructor_arguments: tuple[Argument, ...] = ()  # Empty if no __init__ was found


@dataclass(frozen=True)
class GlobalVariable:
    """Represents a top-level assignment statement."""
    name: str
    type_annotation: str | None = None
    value_expression: str = ""  # Unparsed right-hand side, trimmed


@dataclass(frozen=True)
class ModuleSummary:
    """All top-level metadata found in one source text."""
    path: str
    functions: tuple[FunctionDescriptor, ...] = ()
    classes: tuple[ClassDescriptor, ...] = ()
    global_variables: tuple[GlobalVariable, ...] = ()
