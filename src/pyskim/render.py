"""Source-like text and JSON-ready dicts for extracted descriptors."""

from dataclasses import asdict
from typing import Any

from pyskim.models import (
    Argument,
    ClassDescriptor,
    FunctionDescriptor,
    GlobalVariable,
    ModuleSummary,
)


def render_argument(argument: Argument) -> str:
    if argument.type_annotation is None:
        return argument.name
    return f"{argument.name}: {argument.type_annotation}"


def render_arguments(arguments) -> str:
    return ", ".join(render_argument(a) for a in arguments)


def render_function(function: FunctionDescriptor) -> str:
    """Render a function header, e.g. ``def load(path: str, *args):``."""
    return f"def {function.name}({render_arguments(function.arguments)}):"


def render_class(cls: ClassDescriptor) -> str:
    """Render a class header, with a constructor stub for derived classes.

    A class without bases renders as its bare header even when a
    constructor was found.

    Examples:
        >>> print(render_class(ClassDescriptor("Foo", ("Base",), (Argument("self"),))))
        class Foo(Base):
            def __init__(self):
                pass
    """
    if not cls.base_classes:
        return f"class {cls.name}:"

    header = f"class {cls.name}({', '.join(cls.base_classes)}):"
    if not cls.constructor_arguments:
        return header

    return "\n".join([
        header,
        f"    def __init__({render_arguments(cls.constructor_arguments)}):",
        "        pass",
    ])


def render_global_variable(variable: GlobalVariable) -> str:
    if variable.type_annotation is None:
        return f"{variable.name} = {variable.value_expression}"
    return f"{variable.name}: {variable.type_annotation} = {variable.value_expression}"


def render_module(summary: ModuleSummary) -> str:
    """Render every descriptor of a summary, globals first, one block per construct."""
    blocks = [render_global_variable(v) for v in summary.global_variables]
    blocks.extend(render_function(f) for f in summary.functions)
    blocks.extend(render_class(c) for c in summary.classes)
    return "\n\n".join(blocks)


def filter_none(d: Any) -> Any:
    """Recursively drop None values from dicts, turning tuples into lists."""
    if isinstance(d, dict):
        return {k: filter_none(v) for k, v in d.items() if v is not None}
    elif isinstance(d, (list, tuple)):
        return [filter_none(item) for item in d]
    else:
        return d


def to_dict(descriptor) -> dict[str, Any]:
    """Convert a descriptor dataclass into a JSON-ready dict without None values."""
    return filter_none(asdict(descriptor))
