"""Converters turning option values (strings) into Python objects. They back the
typed accessors of a Section (get_as_int, get_as_bool, ...)."""

from functools import wraps
from typing import Callable, Any
import re


class WrongType(Exception):
    """Raised by a processor when an option value doesn't represent its type."""


type TypeConverter[ConvertedType] = Callable[[Any], ConvertedType | Any]
"""Converts an option value. A value that can't be converted is handed back as it is,
so a str result means failure for every converter that doesn't produce str."""


def converter[T](processor: Callable[[str], T]) -> TypeConverter[T]:
    """Decorator turning a processor into a TypeConverter.

    Args:
        processor (Callable[[str], T]): Parses an option value. Raises WrongType if the
            value doesn't fit.

    Returns:
        TypeConverter[T]: Applies processor to strings. Non-strings and values
            processor rejects are returned unchanged.
    """

    @wraps(processor)
    def apply(value: Any) -> T | Any:
        if not isinstance(value, str):
            return value
        try:
            return processor(value)
        except WrongType:
            return value

    return apply


def _lowered(words: str | tuple[str, ...]) -> frozenset[str]:
    if isinstance(words, str):
        words = (words,)
    return frozenset(word.lower() for word in words)


def bool_converter(
    true: str | tuple[str, ...] = ("1", "true", "yes", "y", "on"),
    false: str | tuple[str, ...] = ("0", "false", "no", "n", "off"),
) -> TypeConverter[bool]:
    """Create a converter for boolean option values. Comparison ignores case and
    surrounding whitespace.

    Args:
        true (str | tuple[str, ...], optional): Word(s) read as True.
            Defaults to ("1", "true", "yes", "y", "on").
        false (str | tuple[str, ...], optional): Word(s) read as False.
            Defaults to ("0", "false", "no", "n", "off").

    Returns:
        TypeConverter[bool]: The converter.
    """
    true_words, false_words = _lowered(true), _lowered(false)

    @converter
    def to_bool(value: str) -> bool:
        word = value.strip().lower()
        if word in true_words:
            return True
        if word in false_words:
            return False
        raise WrongType(value)

    return to_bool


type Numerics = int | float
"""Results of numeric conversion."""


def _has_valid_grouping(value: str, thousands_sep: str) -> bool:
    """Whether every group following a thousands separator has three digits."""
    sep = re.escape(thousands_sep)
    return all(
        len(group) == 3 for group in re.findall(rf"(?<={sep})\d+(?={sep}|$)", value)
    )


def numeric_converter[
    T: Numerics
](
    numeric_type: type[T] | tuple[type[T], ...] = (int, float),
    decimal_sep: str = ".",
    thousands_sep: str | None = None,
) -> TypeConverter[T]:
    """Create a converter for numeric option values.

    Underscores (which int() and float() would accept) and empty values are rejected.

    Args:
        numeric_type (type[Numerics] | tuple[type[Numerics], ...], optional): Target
            type(s), tried in order. Defaults to (int, float).
        decimal_sep (str, optional): Decimal separator used in values. Defaults to ".".
        thousands_sep (str | None, optional): Thousands separator used in values. If
            None, values must not group digits. Defaults to None.

    Returns:
        TypeConverter[Numerics]: The converter.
    """
    targets = numeric_type if isinstance(numeric_type, tuple) else (numeric_type,)

    @converter
    def to_number(value: str) -> T:
        number = value.strip()
        if thousands_sep and thousands_sep in number:
            if not _has_valid_grouping(number, thousands_sep):
                raise WrongType(value)
            number = number.replace(thousands_sep, "")
        if decimal_sep != ".":
            number = number.replace(decimal_sep, ".")
        if not number or "_" in number:
            raise WrongType(value)
        for target in targets:
            try:
                return target(number)
            except ValueError:
                continue
        raise WrongType(value)

    return to_number


def list_converter[
    T
](
    delimiter: str = ",",
    remove_whitespace: bool = True,
    item_converter: TypeConverter[T] | None = None,
) -> TypeConverter[list[T | str]]:
    """Create a converter splitting option values into lists. An empty value is an
    empty list.

    Args:
        delimiter (str, optional): Separates items. Defaults to ",".
        remove_whitespace (bool, optional): Whether to strip whitespace around items.
            Defaults to True.
        item_converter (TypeConverter[T] | None, optional): Applied to every item.
            If None, items stay strings. Defaults to None.

    Returns:
        TypeConverter[list]: The converter.
    """
    escaped = re.escape(delimiter)
    pattern = re.compile(rf"\s*{escaped}\s*" if remove_whitespace else escaped)

    @converter
    def to_list(value: str) -> list[T | str]:
        if remove_whitespace:
            value = value.strip()
        if not value:
            return []
        items = pattern.split(value)
        return items if item_converter is None else [item_converter(i) for i in items]

    return to_list


DEFAULT_BOOL_CONVERTER = bool_converter()
DEFAULT_INT_CONVERTER = numeric_converter(int)
"""Plain integers, no digit grouping."""
DEFAULT_FLOAT_CONVERTER = numeric_converter(float)
DEFAULT_LIST_CONVERTER = list_converter()
"""Comma separated, items stripped and kept as strings."""
