"""Writing a Document as ini text."""

from typing import Iterator, TextIO
from .args import Parameters
from .entities import Comment, Option
from .globals import CONTINUATION_JOINER, SECTION_CLOSE, SECTION_OPEN
from .interface import Document, Section


class Serializer:
    """Writes Documents as ini text.

    The untitled section comes first (without a section name line) if it has any
    content, followed by every named section in Document order. A section consists of
    its dangling text, its leading comments and then every option followed by its
    comments. Every line, including the last, ends with the line separator.

    Reading the output with Parameters.identity() and the write comment prefix among
    the comment prefixes yields an equal Document, as long as no value, comment or
    dangling text contains a line that would itself be read as comment, section name
    or option.
    """

    def __init__(self, parameters: Parameters | None = None, **kwargs) -> None:
        """
        Args:
            parameters (Parameters | None, optional): Parameters for writing. If None,
                default Parameters are used. Defaults to None.
            **kwargs (optional): Parameters to change (on a copy of parameters).
                See doc of Parameters for details.
        """
        self.parameters = (parameters or Parameters()).copy(**kwargs)

    def iter_lines(self, document: Document) -> Iterator[str]:
        """Iterate over the lines of the ini text (without line separators).

        Args:
            document (Document): The Document to write.

        Yields:
            str: One line.
        """
        if document.untitled.has_content():
            yield from self._section_lines(document.untitled)
        for name, section in document:
            yield f"{SECTION_OPEN}{name}{SECTION_CLOSE}"
            yield from self._section_lines(section)

    def _section_lines(self, section: Section) -> Iterator[str]:
        prefix = self.parameters.combined_comment_prefix
        equalizer = self.parameters.equalizer

        if section.dangling_text is not None:
            yield from section.dangling_text.split(CONTINUATION_JOINER)

        for item in section.iter_content():
            if isinstance(item, tuple):
                key, value = item
                # continuations go onto lines of their own
                yield from Option(key, value).to_string(
                    equalizer, CONTINUATION_JOINER
                ).split(CONTINUATION_JOINER)
            else:
                # a comment spanning lines gets a prefix per line
                for line in item.split(CONTINUATION_JOINER):
                    yield Comment(line).to_string(prefix)

    def to_string(self, document: Document) -> str:
        """Convert a Document into ini text.

        Args:
            document (Document): The Document to write.

        Returns:
            str: The ini text.
        """
        separator = self.parameters.line_separator
        return "".join(f"{line}{separator}" for line in self.iter_lines(document))

    def write(self, document: Document, stream: TextIO) -> None:
        """Write a Document into an opened text stream.

        Args:
            document (Document): The Document to write.
            stream (TextIO): The stream to write to. Is flushed but not closed.
        """
        separator = self.parameters.line_separator
        for line in self.iter_lines(document):
            stream.write(line)
            stream.write(separator)
        stream.flush()
