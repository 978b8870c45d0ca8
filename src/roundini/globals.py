DEFAULT_COMMENT_PREFIXES: tuple[str, ...] = (";", "#")
"""Comment prefixes recognized when reading. The first one is used for writing."""
OPTION_DELIMITER = "="
SECTION_OPEN = "["
SECTION_CLOSE = "]"
DEFAULT_LINE_SEPARATOR = "\n"
CONTINUATION_JOINER = "\n"
"""Joins continuation lines of a value and lines of dangling text."""

INT_RANGE = (-(2**31), 2**31 - 1)
LONG_RANGE = (-(2**63), 2**63 - 1)
