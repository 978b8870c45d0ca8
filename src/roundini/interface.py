"""Interface classes exist for coder interaction: a Document holds the Sections of
one ini file, a Section holds options, comments and dangling text."""

from collections.abc import MutableMapping
from typing import Any, Callable, Iterable, Iterator, TYPE_CHECKING
from .exceptions_warnings import AccessError
from .globals import INT_RANGE, LONG_RANGE
from .type_converters.converters import (
    TypeConverter,
    DEFAULT_BOOL_CONVERTER,
    DEFAULT_FLOAT_CONVERTER,
    DEFAULT_INT_CONVERTER,
    DEFAULT_LIST_CONVERTER,
)

if TYPE_CHECKING:
    from .chain import ChainDocumentAccessor

_MISSING: Any = object()


def _comment_lines(lines: tuple[str | Iterable[str], ...]) -> list[str]:
    """Flatten comment arguments (strings or iterables of strings), skipping None."""
    flat: list[str] = []
    for line in lines:
        if line is None:
            continue
        if isinstance(line, str):
            flat.append(line)
        else:
            flat.extend(str(i) for i in line if i is not None)
    return flat


class Section(MutableMapping[str, str]):
    """A configuration section. Holds options (key-value pairs of strings), comments
    and dangling text.

    Sections are created by their Document (see Document.get_or_create) and should
    not be instantiated directly.

    Comments are stored in one list in document order. For every option, an anchor
    marks where its trailing comments start in that list; the comments before the
    first anchor are the section's leading comments. Removing an option drops its
    anchor, so its trailing comments end up after the previous option (or among the
    leading comments).
    """

    def __init__(self, name: str | None = None) -> None:
        """
        Args:
            name (str | None, optional): Name of the section. None for the untitled
                section. Defaults to None.
        """
        self._name = name
        self._keys: list[str] = []
        self._values: dict[str, str] = {}
        self._comments: list[str] = []
        self._anchors: list[int] = []
        self._dangling_text: str | None = None

    @property
    def name(self) -> str | None:
        """Name of the section (None for the untitled section)."""
        return self._name

    # ----------
    # options
    # ----------

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get the value of an option.

        Args:
            key (str): The option key.
            default (str | None, optional): Returned if the key doesn't exist.
                Defaults to None.

        Returns:
            str | None: The value or default.
        """
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set an option. Existing options keep their position, new options are
        appended. Values are stored as strings (converted with str()).

        Args:
            key (str): The option key.
            value (Any): The value.

        Raises:
            TypeError: If key is no string or value is None.
        """
        if not isinstance(key, str):
            raise TypeError(f"Option keys must be strings, not {type(key).__name__}.")
        if value is None:
            raise TypeError(f"Value of option '{key}' must not be None.")
        if key not in self._values:
            self._keys.append(key)
            self._anchors.append(len(self._comments))
        self._values[key] = value if isinstance(value, str) else str(value)

    def contains(self, key: str) -> bool:
        """Whether the option exists."""
        return key in self._values

    def remove(self, key: str) -> bool:
        """Remove an option. Comments after it are kept and now follow the previous
        option (or become leading comments if it was the first option).

        Args:
            key (str): The option key.

        Returns:
            bool: True if removed, False if the option didn't exist.
        """
        if key not in self._values:
            return False
        index = self._keys.index(key)
        del self._keys[index]
        del self._anchors[index]
        del self._values[key]
        return True

    def rename(self, key: str, new_key: str) -> bool:
        """Rename an option. Position and comments are kept.

        Args:
            key (str): The option key.
            new_key (str): The new option key.

        Returns:
            bool: True if renamed. False if key doesn't exist, new_key already exists
                or both are equal.
        """
        if not isinstance(new_key, str):
            raise TypeError(
                f"Option keys must be strings, not {type(new_key).__name__}."
            )
        if key == new_key or key not in self._values or new_key in self._values:
            return False
        self._keys[self._keys.index(key)] = new_key
        self._values[new_key] = self._values.pop(key)
        return True

    def count(self) -> int:
        """Number of options."""
        return len(self._keys)

    def count_keys_and_comments(self) -> int:
        """Number of options plus number of comments."""
        return len(self._keys) + len(self._comments)

    def to_dict(self) -> dict[str, str]:
        """The options as a new dict (in section order)."""
        return {key: self._values[key] for key in self._keys}

    def clear(self) -> None:
        """Remove all options, comments and the dangling text."""
        self._keys.clear()
        self._values.clear()
        self._comments.clear()
        self._anchors.clear()
        self._dangling_text = None

    def has_content(self) -> bool:
        """Whether the section holds any option, comment or dangling text."""
        return bool(self._keys or self._comments or self._dangling_text is not None)

    # ----------
    # typed access
    # ----------

    def _get_converted(
        self,
        key: str,
        type_converter: TypeConverter,
        type_name: str,
        default: Any,
        value_range: tuple[int, int] | None = None,
    ) -> Any:
        """Get an option's value converted by type_converter.

        Args:
            key (str): The option key.
            type_converter (TypeConverter): Converter to apply. Conversion failed if
                it returns a string.
            type_name (str): Name of the target type for the error message.
            default (Any): Returned instead of raising if not _MISSING.
            value_range (tuple[int, int] | None, optional): Inclusive bounds the
                converted value must lie in. Defaults to None.

        Raises:
            AccessError: If the option doesn't exist or can't be converted.

        Returns:
            Any: The converted value.
        """
        if key not in self._values:
            if default is not _MISSING:
                return default
            raise AccessError(f'Key "{key}" not found.')
        converted = type_converter(self._values[key])
        if isinstance(converted, str) or (
            value_range is not None
            and not value_range[0] <= converted <= value_range[1]
        ):
            if default is not _MISSING:
                return default
            raise AccessError(f'Unable to parse value to {type_name} for key "{key}".')
        return converted

    def get_as_int(self, key: str, default: Any = _MISSING) -> int:
        """Get an option's value as 32 bit integer.

        Args:
            key (str): The option key.
            default (Any, optional): Returned instead of raising an AccessError.

        Raises:
            AccessError: If the option doesn't exist, isn't an integer or exceeds
                32 bit.

        Returns:
            int: The value.
        """
        return self._get_converted(
            key, DEFAULT_INT_CONVERTER, "int", default, INT_RANGE
        )

    def get_as_long(self, key: str, default: Any = _MISSING) -> int:
        """Get an option's value as 64 bit integer. See get_as_int."""
        return self._get_converted(
            key, DEFAULT_INT_CONVERTER, "long", default, LONG_RANGE
        )

    def get_as_float(self, key: str, default: Any = _MISSING) -> float:
        return self._get_converted(key, DEFAULT_FLOAT_CONVERTER, "float", default)

    def get_as_bool(self, key: str, default: Any = _MISSING) -> bool:
        """Get an option's value as boolean. "1", "true", "yes", "y" and "on" are
        True, "0", "false", "no", "n" and "off" are False (case insensitive).

        Args:
            key (str): The option key.
            default (Any, optional): Returned instead of raising an AccessError.

        Raises:
            AccessError: If the option doesn't exist or isn't a boolean.

        Returns:
            bool: The value.
        """
        return self._get_converted(key, DEFAULT_BOOL_CONVERTER, "bool", default)

    def get_as_list(self, key: str, default: Any = _MISSING) -> list[str]:
        """Get an option's value split at commas (whitespace around items removed)."""
        return self._get_converted(key, DEFAULT_LIST_CONVERTER, "list", default)

    def get_as(
        self, key: str, type_converter: Callable[[str], Any], default: Any = _MISSING
    ) -> Any:
        """Get an option's value converted by an arbitrary callable.

        Args:
            key (str): The option key.
            type_converter (Callable[[str], Any]): Callable that converts the value and
                raises ValueError or TypeError on failure.
            default (Any, optional): Returned instead of raising an AccessError.

        Raises:
            AccessError: If the option doesn't exist or conversion fails.

        Returns:
            Any: The converted value.
        """
        if key not in self._values:
            if default is not _MISSING:
                return default
            raise AccessError(f'Key "{key}" not found.')
        try:
            return type_converter(self._values[key])
        except (ValueError, TypeError) as e:
            if default is not _MISSING:
                return default
            raise AccessError(
                f'Unable to convert value for key "{key}": {e}'
            ) from e

    # ----------
    # comments
    # ----------

    def _index(self, key: str) -> int:
        if key not in self._values:
            raise AccessError(f'Key "{key}" not found.')
        return self._keys.index(key)

    def _span(self, index: int) -> tuple[int, int]:
        """Start and end in self._comments of the comments following the option at
        index. Index -1 addresses the leading comments."""
        start = 0 if index < 0 else self._anchors[index]
        end = (
            self._anchors[index + 1]
            if index + 1 < len(self._anchors)
            else len(self._comments)
        )
        return start, end

    def _shift_anchors(self, from_index: int, by: int) -> None:
        for i in range(max(from_index, 0), len(self._anchors)):
            self._anchors[i] += by

    def _extend_span(self, index: int, lines: list[str]) -> None:
        _, end = self._span(index)
        self._comments[end:end] = lines
        self._shift_anchors(index + 1, len(lines))

    def _clear_span(self, index: int) -> None:
        start, end = self._span(index)
        del self._comments[start:end]
        self._shift_anchors(index + 1, start - end)

    @property
    def leading_comments(self) -> list[str]:
        """Comments before the first option (a copy)."""
        start, end = self._span(-1)
        return self._comments[start:end]

    def add_comments(self, *lines: str | Iterable[str]) -> None:
        """Add comments at the end of the section (after the last option or, if
        there is none, to the leading comments).

        Args:
            *lines (str | Iterable[str]): Comment contents without prefix.
        """
        self._extend_span(len(self._keys) - 1, _comment_lines(lines))

    def comments_before(self, key: str) -> list[str]:
        """Get the comments between an option and the previous option (or the start
        of the section).

        Args:
            key (str): The option key.

        Raises:
            AccessError: If the option doesn't exist.

        Returns:
            list[str]: The comments (a copy).
        """
        start, end = self._span(self._index(key) - 1)
        return self._comments[start:end]

    def comments_after(self, key: str) -> list[str]:
        """Get the comments between an option and the next option (or the end of the
        section).

        Args:
            key (str): The option key.

        Raises:
            AccessError: If the option doesn't exist.

        Returns:
            list[str]: The comments (a copy).
        """
        start, end = self._span(self._index(key))
        return self._comments[start:end]

    def add_comments_before(self, key: str, *lines: str | Iterable[str]) -> None:
        """Append comments to the ones directly before an option.

        Raises:
            AccessError: If the option doesn't exist.
        """
        self._extend_span(self._index(key) - 1, _comment_lines(lines))

    def add_comments_after(self, key: str, *lines: str | Iterable[str]) -> None:
        """Append comments to the ones directly after an option.

        Raises:
            AccessError: If the option doesn't exist.
        """
        self._extend_span(self._index(key), _comment_lines(lines))

    def remove_comments_before(self, key: str) -> None:
        """Remove the comments directly before an option.

        Raises:
            AccessError: If the option doesn't exist.
        """
        self._clear_span(self._index(key) - 1)

    def remove_comments_after(self, key: str) -> None:
        """Remove the comments directly after an option.

        Raises:
            AccessError: If the option doesn't exist.
        """
        self._clear_span(self._index(key))

    def all_comments(self) -> list[str]:
        """All comments in document order: leading comments first, then the comments
        after each option."""
        return list(self._comments)

    def remove_all_comments(self) -> None:
        self._comments.clear()
        self._anchors = [0] * len(self._keys)

    @property
    def dangling_text(self) -> str | None:
        """Non-comment text at the top of the section or None.

        Dangling text doesn't follow ini syntax. Setting it may produce files other
        ini readers can't handle.
        """
        return self._dangling_text

    @dangling_text.setter
    def dangling_text(self, value: str | None) -> None:
        self._dangling_text = value

    # ----------
    # writing
    # ----------

    def iter_content(self) -> Iterator[tuple[str, str] | str]:
        """Iterate over the section's options and comments in document order.

        Yields:
            tuple[str, str] | str: (key, value) for an option, the content for a
                comment.
        """
        yield from self.leading_comments
        for index, key in enumerate(self._keys):
            yield key, self._values[key]
            start, end = self._span(index)
            yield from self._comments[start:end]

    def _deep_clone(self, name: str | None) -> "Section":
        section = Section(name)
        section._keys = list(self._keys)
        section._values = dict(self._values)
        section._comments = list(self._comments)
        section._anchors = list(self._anchors)
        section._dangling_text = self._dangling_text
        return section

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return (
            self._keys == other._keys
            and self._values == other._values
            and self._comments == other._comments
            and self._anchors == other._anchors
            and self._dangling_text == other._dangling_text
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "(untitled)" if self._name is None else f"[{self._name}]"

    def __repr__(self) -> str:
        return "%s { .options = %d, .comments = %d }" % (
            self,
            len(self._keys),
            len(self._comments),
        )


class Document:
    """An ini document: ordered named Sections plus the untitled section holding
    everything before the first section name."""

    def __init__(self) -> None:
        self._sections: dict[str, Section] = {}
        self._untitled = Section(None)

    @staticmethod
    def _verify_name(name: Any) -> None:
        if not isinstance(name, str):
            raise TypeError(
                f"Section names must be strings, not {type(name).__name__}."
            )

    @property
    def untitled(self) -> Section:
        """The untitled section. It always exists and can't be removed."""
        return self._untitled

    def get(self, name: str) -> Section | None:
        """Get a section or None if it doesn't exist."""
        self._verify_name(name)
        return self._sections.get(name)

    def get_or_create(self, name: str) -> Section:
        """Get a section, appending a new empty one if it doesn't exist.

        Args:
            name (str): Name of the section.

        Returns:
            Section: The (new) section.
        """
        self._verify_name(name)
        if name not in self._sections:
            self._sections[name] = Section(name)
        return self._sections[name]

    def __getitem__(self, name: str) -> Section:
        return self._sections[name]

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def contains(self, name: str) -> bool:
        return name in self._sections

    def __len__(self) -> int:
        return len(self._sections)

    def count(self) -> int:
        """Number of named sections (the untitled section isn't counted)."""
        return len(self._sections)

    def __iter__(self) -> Iterator[tuple[str, Section]]:
        """Iterate over (name, Section) of the named sections in creation order."""
        return iter(list(self._sections.items()))

    def section_names(self) -> list[str]:
        return list(self._sections)

    def remove(self, name: str) -> bool:
        """Remove a section.

        Returns:
            bool: True if removed, False if the section didn't exist.
        """
        self._verify_name(name)
        return self._sections.pop(name, None) is not None

    def rename(self, name: str, new_name: str) -> bool:
        """Rename a section. Its content and position are kept.

        Args:
            name (str): Name of the section.
            new_name (str): New name.

        Returns:
            bool: True if renamed. False if the section doesn't exist, new_name is
                already taken or both are equal.
        """
        self._verify_name(new_name)
        if (
            name == new_name
            or name not in self._sections
            or new_name in self._sections
        ):
            return False
        section = self._sections[name]
        section._name = new_name
        self._sections = {
            (new_name if k == name else k): v for k, v in self._sections.items()
        }
        return True

    def clear(self, including_untitled: bool = True) -> None:
        """Remove all named sections.

        Args:
            including_untitled (bool, optional): Whether to also clear the untitled
                section. Defaults to True.
        """
        if including_untitled:
            self._untitled.clear()
        for section in self._sections.values():
            section.clear()
        self._sections.clear()

    def deep_clone(self) -> "Document":
        """Create a copy sharing no mutable state with this document."""
        doc = Document()
        doc._untitled = self._untitled._deep_clone(None)
        doc._sections = {
            name: section._deep_clone(name) for name, section in self._sections.items()
        }
        return doc

    def __copy__(self) -> "Document":
        return self.deep_clone()

    def __deepcopy__(self, memo: dict) -> "Document":
        return self.deep_clone()

    # ----------
    # quick access
    # ----------

    def get_item_value(
        self, name: str, key: str, default: str | None = None
    ) -> str | None:
        """Get the value of an option in a section.

        Args:
            name (str): Name of the section.
            key (str): The option key.
            default (str | None, optional): Returned if section or option don't
                exist. Defaults to None.

        Returns:
            str | None: The value or default.
        """
        section = self.get(name)
        return default if section is None else section.get(key, default)

    def set_item_value(self, name: str, key: str, value: Any) -> None:
        """Set an option in a section, creating the section if necessary."""
        self.get_or_create(name).set(key, value)

    def _existing(self, name: str) -> Section:
        section = self.get(name)
        if section is None:
            raise AccessError(f'Section "{name}" not found.')
        return section

    def get_item_value_as_int(
        self, name: str, key: str, default: Any = _MISSING
    ) -> int:
        """Get an option's value in a section as integer.

        Raises:
            AccessError: If section or option don't exist or the value isn't an int.
        """
        if default is not _MISSING and name not in self._sections:
            return default
        return self._existing(name).get_as_int(key, default)

    def get_item_value_as_long(
        self, name: str, key: str, default: Any = _MISSING
    ) -> int:
        if default is not _MISSING and name not in self._sections:
            return default
        return self._existing(name).get_as_long(key, default)

    def get_item_value_as_bool(
        self, name: str, key: str, default: Any = _MISSING
    ) -> bool:
        """Get an option's value in a section as boolean.

        Raises:
            AccessError: If section or option don't exist or the value isn't a bool.
        """
        if default is not _MISSING and name not in self._sections:
            return default
        return self._existing(name).get_as_bool(key, default)

    def contains_item_value(self, name: str, key: str) -> bool:
        """Whether the section exists and holds the option."""
        section = self.get(name)
        return section is not None and key in section

    def chain_access(self) -> "ChainDocumentAccessor":
        """Access this document with chained calls."""
        from .chain import ChainDocumentAccessor

        return ChainDocumentAccessor(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._untitled == other._untitled and list(
            self._sections.items()
        ) == list(other._sections.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "Document { .sections = %d }" % len(self._sections)
