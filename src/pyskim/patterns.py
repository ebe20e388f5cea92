"""Compiled recognizers for top-level constructs.

None of these understand block structure. "Top level" is approximated by
anchoring headers to column zero (``re.MULTILINE``), so anything indented by
even one space is treated as nested.
"""

import re

_IDENTIFIER = r"[a-zA-Z_][a-zA-Z0-9_]*"

# def <name>(<parameters>):
# Parameter lists must close on the header line.
FUNCTION_HEADER = re.compile(
    rf"^def\s+({_IDENTIFIER})\s*\(([^)\n]*)\)\s*:",
    re.MULTILINE,
)

# class <name>[(<bases>)]: [# comment]\n<indented or blank lines>
# The body stops at the first column-zero line; deeper nesting is not tracked.
CLASS_HEADER = re.compile(
    rf"^class\s+({_IDENTIFIER})\s*(?:\(([^)\n]*)\)\s*)?:\s*(?:#.*)?\n"
    r"((?:^[ \t]*\n|^[ \t]+.*(?:\n|\Z))*)",
    re.MULTILINE,
)

# <indent>def __init__(<parameters>):
CONSTRUCTOR_HEADER = re.compile(
    r"^[ \t]+def\s+__init__\s*\(([^)\n]*)\)\s*:",
    re.MULTILINE,
)

# <name> [: <type>] = <value>
# The annotation class is narrower than the one used for arguments and starts
# and ends on a non-space. Nothing here crosses a line break.
GLOBAL_ASSIGNMENT = re.compile(
    rf"^({_IDENTIFIER})[ \t]*"
    r"(?::[ \t]*([a-zA-Z0-9_\[\]\.](?:[a-zA-Z0-9_\[\], \.]*[a-zA-Z0-9_\]\.])?)[ \t]*)?"
    r"=[ \t]*(.+)$",
    re.MULTILINE,
)

# [*|**]<name> [: <type>] [= <default>]
ARGUMENT_FRAGMENT = re.compile(
    rf"^(?P<star>\*{{0,2}})\s*(?P<name>{_IDENTIFIER})\s*"
    r"(?::\s*(?P<type>[^=\s](?:[^=]*[^=\s])?)\s*)?"
    r"(?:=\s*.+)?$"
)

# Line prefixes that never start a global assignment.
NON_ASSIGNMENT_PREFIXES = ("def", "class", "@")
