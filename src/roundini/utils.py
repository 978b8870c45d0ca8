from typing import Callable, Iterable, Iterator


def copy_doc[**P, T](
    doc_source: Callable[..., object],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator giving a wrapper method the docstring of the method it forwards to.

    Args:
        doc_source (Callable): The function whose docstring is copied.

    Returns:
        Callable: Decorator that sets __doc__ and returns the function unchanged.
    """

    def wrapped(doc_target: Callable[P, T]) -> Callable[P, T]:
        doc_target.__doc__ = doc_source.__doc__
        return doc_target

    return wrapped


def strip_line_terminator(line: str) -> str:
    """Remove one trailing line terminator ("\\r\\n", "\\n" or "\\r") from a line.

    Args:
        line (str): The line as produced by iterating a text stream.

    Returns:
        str: The line without its terminator.
    """
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def iter_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines with their terminators removed."""
    for line in lines:
        yield strip_line_terminator(line)
