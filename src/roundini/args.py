from enum import Enum
from typing import Any, Self
from .globals import (
    DEFAULT_COMMENT_PREFIXES,
    DEFAULT_LINE_SEPARATOR,
    OPTION_DELIMITER,
    SECTION_OPEN,
)


class DanglingTextPolicy(Enum):
    """How to handle text at the top of a section that is neither a comment nor an
    option."""

    KEEP = "keep"
    """Store the text as the section's dangling text."""
    TO_COMMENT = "to_comment"
    """Convert every dangling line into a comment at its position."""
    DROP = "drop"
    """Discard the text."""


class Parameters:
    """Parameters for reading and writing."""

    def __init__(
        self,
        comment_prefixes: str | tuple[str, ...] = DEFAULT_COMMENT_PREFIXES,
        trim_section_name: bool = True,
        trim_key: bool = True,
        trim_value: bool = True,
        trim_comment: bool = True,
        dangling_text_policy: DanglingTextPolicy | str = DanglingTextPolicy.KEEP,
        ignore_whitespace_lines: bool = False,
        line_separator: str = DEFAULT_LINE_SEPARATOR,
        write_comment_prefix: str | None = None,
        space_around_equalizer: bool = False,
        space_before_comment: bool = False,
    ) -> None:
        """
        Args:
            comment_prefixes (str | tuple[str, ...], optional): Prefix string(s) that
                denote a comment when reading. If write_comment_prefix is None, the
                first will be taken for writing. Defaults to (";", "#").
            trim_section_name (bool, optional): Whether to strip whitespace around
                section names when reading. Defaults to True.
            trim_key (bool, optional): Whether to strip whitespace around option keys
                when reading. Defaults to True.
            trim_value (bool, optional): Whether to strip whitespace around option
                values (after joining continuations) when reading. Defaults to True.
            trim_comment (bool, optional): Whether to strip whitespace around comment
                contents when reading. Defaults to True.
            dangling_text_policy (DanglingTextPolicy | str, optional): What to do with
                non-standard lines that appear before the first option of a section.
                Defaults to DanglingTextPolicy.KEEP.
            ignore_whitespace_lines (bool, optional): Whether to skip lines with only
                whitespace characters instead of absorbing them as continuation or
                dangling text. Defaults to False.
            line_separator (str, optional): Separator between lines when writing.
                Defaults to "\\n".
            write_comment_prefix (str | None, optional): Prefix to write comments with.
                If None, the first of comment_prefixes is used. Defaults to None.
            space_around_equalizer (bool, optional): Whether to write "key = value"
                instead of "key=value". Defaults to False.
            space_before_comment (bool, optional): Whether to write a space between
                comment prefix and comment content. Defaults to False.
        """
        self.comment_prefixes = comment_prefixes
        self.trim_section_name = trim_section_name
        self.trim_key = trim_key
        self.trim_value = trim_value
        self.trim_comment = trim_comment
        self.dangling_text_policy = dangling_text_policy
        self.ignore_whitespace_lines = ignore_whitespace_lines
        self.line_separator = line_separator
        self.write_comment_prefix = write_comment_prefix
        self.space_around_equalizer = space_around_equalizer
        self.space_before_comment = space_before_comment

    @property
    def comment_prefixes(self) -> tuple[str, ...]:
        return self._comment_prefixes

    @comment_prefixes.setter
    def comment_prefixes(self, value: str | tuple[str, ...]) -> None:
        if isinstance(value, str):
            value = (value,)
        value = tuple(value)
        if not value:
            raise ValueError("At least one comment prefix is required.")
        for prefix in value:
            self.verify_marker(prefix, "comment prefix")
        # drop duplicates but keep order
        self._comment_prefixes = tuple(dict.fromkeys(value))

    @property
    def write_comment_prefix(self) -> str:
        """The prefix comments are written with."""
        if self._write_comment_prefix is None:
            return self._comment_prefixes[0]
        return self._write_comment_prefix

    @write_comment_prefix.setter
    def write_comment_prefix(self, value: str | None) -> None:
        if value is not None:
            self.verify_marker(value, "comment prefix")
        self._write_comment_prefix = value

    @property
    def dangling_text_policy(self) -> DanglingTextPolicy:
        return self._dangling_text_policy

    @dangling_text_policy.setter
    def dangling_text_policy(self, value: DanglingTextPolicy | str) -> None:
        if isinstance(value, str):
            try:
                value = DanglingTextPolicy(value.lower())
            except ValueError as e:
                raise ValueError(
                    f"'{value}' is not a valid dangling text policy. Valid policies"
                    f" are {', '.join(p.value for p in DanglingTextPolicy)}."
                ) from e
        if not isinstance(value, DanglingTextPolicy):
            raise TypeError("dangling_text_policy must be a DanglingTextPolicy.")
        self._dangling_text_policy = value

    @property
    def line_separator(self) -> str:
        return self._line_separator

    @line_separator.setter
    def line_separator(self, value: str) -> None:
        if not isinstance(value, str) or not value:
            raise ValueError("line_separator must be a non-empty string.")
        self._line_separator = value

    @property
    def equalizer(self) -> str:
        """Delimiter between option key and value when writing."""
        return (
            f" {OPTION_DELIMITER} "
            if self.space_around_equalizer
            else OPTION_DELIMITER
        )

    @property
    def combined_comment_prefix(self) -> str:
        """Comment prefix including the optional space when writing."""
        return self.write_comment_prefix + (" " if self.space_before_comment else "")

    def verify_marker(self, marker: str, name: str) -> None:
        if not isinstance(marker, str):
            raise TypeError(f"A {name} must be a string.")
        if not marker or marker.isspace():
            raise ValueError(f"A {name} must contain a non-whitespace character.")
        if marker.startswith(SECTION_OPEN):
            raise ValueError(
                f"'{SECTION_OPEN}' (section name identifier) is not allowed as"
                f" a {name}."
            )
        if OPTION_DELIMITER in marker:
            raise ValueError(
                f"'{OPTION_DELIMITER}' (option delimiter) is not allowed inside of"
                f" a {name}."
            )

    def update(self, **kwargs) -> None:
        """Update parameters with kwargs

        Args:
            **kwargs: Keyword-arguments to update the parameters with.
        """
        for k, v in kwargs.items():
            if not hasattr(self, k) or k.startswith("_"):
                raise AttributeError(f"'{k}' is not a parameter.")
            setattr(self, k, v)

    def copy(self, **kwargs) -> Self:
        """Create a copy of these parameters.

        Args:
            **kwargs: Parameters to change in the copy.

        Returns:
            Self: The new Parameters.
        """
        new = self.__class__(**self.as_dict())
        new.update(**kwargs)
        return new

    def as_dict(self) -> dict[str, Any]:
        """Parameters as keyword-arguments for the constructor."""
        return {
            "comment_prefixes": self.comment_prefixes,
            "trim_section_name": self.trim_section_name,
            "trim_key": self.trim_key,
            "trim_value": self.trim_value,
            "trim_comment": self.trim_comment,
            "dangling_text_policy": self.dangling_text_policy,
            "ignore_whitespace_lines": self.ignore_whitespace_lines,
            "line_separator": self.line_separator,
            "write_comment_prefix": self._write_comment_prefix,
            "space_around_equalizer": self.space_around_equalizer,
            "space_before_comment": self.space_before_comment,
        }

    @classmethod
    def pretty(cls, **kwargs) -> Self:
        """Parameters that write "key = value" and "; comment"."""
        return cls(
            **({"space_around_equalizer": True, "space_before_comment": True} | kwargs)
        )

    @classmethod
    def identity(cls, **kwargs) -> Self:
        """Reading parameters under which reading back a written Document yields an
        equal Document (no trimming, dangling text kept)."""
        return cls(
            **(
                {
                    "trim_section_name": False,
                    "trim_key": False,
                    "trim_value": False,
                    "trim_comment": False,
                    "dangling_text_policy": DanglingTextPolicy.KEEP,
                }
                | kwargs
            )
        )

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"{self.__class__.__name__}({args})"
