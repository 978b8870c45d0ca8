"""Ini entities are either a section name, an option, a comment or dangling text.

While reading, every line is turned into one of them. A section's content is then
collected as an ordered list of Option | Comment | Dangling and flushed into the
section once the next section name (or the end of the input) is reached.
"""

from typing import Self
from .exceptions_warnings import ExtractionError
from .globals import (
    CONTINUATION_JOINER,
    OPTION_DELIMITER,
    SECTION_CLOSE,
    SECTION_OPEN,
)


class Comment:
    """Comment object holding a comment's content (without prefix)."""

    __slots__ = ("content",)

    def __init__(self, content: str) -> None:
        self.content = content

    @classmethod
    def from_string(cls, string: str, prefixes: tuple[str, ...]) -> Self:
        """Create a Comment from a line.

        A line is a comment if, after leading whitespace, it starts with one of the
        prefixes. All candidate prefixes start at the same (leftmost) offset; if more
        than one matches, the shortest wins.

        Args:
            string (str): The line.
            prefixes (tuple[str, ...]): Prefixes that can denote a comment.

        Raises:
            ExtractionError: If the line is no comment.

        Returns:
            Self: The comment, content is everything after the prefix.
        """
        stripped = string.lstrip()
        matching = [prefix for prefix in prefixes if stripped.startswith(prefix)]
        if not matching:
            raise ExtractionError("Comment could not be extracted.")
        prefix = min(matching, key=len)
        return cls(stripped[len(prefix) :])

    def to_string(self, prefix: str) -> str:
        """Convert the Comment into an ini string.

        Args:
            prefix (str): Prefix to use for the string (including a space if wanted).

        Returns:
            str: The ini string.
        """
        return f"{prefix}{self.content}"

    def __repr__(self) -> str:
        return f"Comment({self.content!r})"


class Option:
    """Option object holding an option's key and the lines of its value."""

    __slots__ = ("key", "lines", "line_index")

    def __init__(self, key: str, value: str, line_index: int | None = None) -> None:
        self.key = key
        self.lines = [value]
        self.line_index = line_index

    @property
    def value(self) -> str:
        """The value with continuations joined by a newline."""
        return CONTINUATION_JOINER.join(self.lines)

    def add_continuation(self, continuation: str) -> None:
        """Add a continuation line to the value."""
        self.lines.append(continuation)

    @classmethod
    def from_string(cls, string: str, line_index: int | None = None) -> Self:
        """Create an Option from a line, splitting at the first delimiter.

        Args:
            string (str): The line that contains the option key and value.
            line_index (int | None, optional): Index of the line in its source.
                Defaults to None.

        Raises:
            ExtractionError: If the line contains no delimiter.

        Returns:
            Self: A new option with the untrimmed key and value.
        """
        key, delimiter, value = string.partition(OPTION_DELIMITER)
        if not delimiter:
            raise ExtractionError("Option could not be extracted.")
        return cls(key, value, line_index)

    def to_string(self, equalizer: str, line_separator: str) -> str:
        """Convert the Option into an ini string. Continuations go onto lines of
        their own.
        """
        return f"{self.key}{equalizer}{self.value}".replace(
            CONTINUATION_JOINER, line_separator
        )

    def __repr__(self) -> str:
        return f"Option({self.key!r}, {self.value!r})"


class Dangling:
    """A line that is neither section name, option nor comment and appeared before
    the first option of a section."""

    __slots__ = ("content", "line_index")

    def __init__(self, content: str, line_index: int | None = None) -> None:
        self.content = content
        self.line_index = line_index

    def __repr__(self) -> str:
        return f"Dangling({self.content!r})"


type Entity = Option | Comment | Dangling
"""One item of a section's content in the order it was read."""


class SectionName(str):
    """A configuration section's name."""

    @classmethod
    def from_string(cls, string: str, strip: bool = True) -> Self:
        """Extract the section name from a line. The name is everything between the
        first opening and the last closing bracket.

        Args:
            string (str): The line.
            strip (bool, optional): Whether to strip whitespace from the name.
                Defaults to True.

        Raises:
            ExtractionError: If the line has no opening bracket followed by a closing
                bracket.

        Returns:
            Self: The section name.
        """
        start = string.find(SECTION_OPEN)
        end = string.rfind(SECTION_CLOSE)
        if start == -1 or end < start:
            raise ExtractionError(
                f"Could not extract section name from {string!r}"
            )
        name = string[start + 1 : end]
        return cls(name.strip() if strip else name)
