"""Parameter-list tokenization shared by the function and class scanners."""

import logging

from pyskim.models import Argument
from pyskim.patterns import ARGUMENT_FRAGMENT

logger = logging.getLogger(__name__)


def _parse_fragment(fragment: str) -> Argument:
    match = ARGUMENT_FRAGMENT.match(fragment)
    if match is None:
        logger.debug(f"Unrecognized argument fragment {fragment!r}, keeping it as a name")
        return Argument(name=fragment)

    return Argument(
        name=match.group("star") + match.group("name"),
        type_annotation=match.group("type"),
    )


def parse_argument_list(raw_text: str) -> tuple[Argument, ...]:
    """Split a raw parameter list into Argument records.

    Splitting happens on every comma, including commas inside brackets or
    default values, so ``x: dict = {"a": 1, "b": 2}`` produces more than one
    record. Default values are dropped. Fragments that don't look like a
    parameter are kept whole as the argument name.

    Args:
        raw_text: Text between the parentheses of a signature

    Returns:
        Tuple of Argument objects in declaration order

    Raises:
        TypeError: If raw_text is not a string

    Examples:
        >>> parse_argument_list("timeout: float = 30.0")
        (Argument(name='timeout', type_annotation='float'),)
        >>> parse_argument_list("*args, **kwargs")
        (Argument(name='*args', type_annotation=None), Argument(name='**kwargs', type_annotation=None))
    """
    if not isinstance(raw_text, str):
        raise TypeError(f"raw_text must be str, not {type(raw_text).__name__}")

    if not raw_text.strip():
        return ()

    fragments = (fragment.strip() for fragment in raw_text.split(","))
    return tuple(_parse_fragment(fragment) for fragment in fragments if fragment)
