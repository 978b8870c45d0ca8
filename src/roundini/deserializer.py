"""Reading ini text into a Document.

Every line is classified, in this order, as comment, section name, option or
continuation. Nothing is ever rejected: a line that is none of the first three
continues the value of the last option of the current section or, if the section
has no option yet, becomes dangling text.
"""

import contextlib
import re
import warnings
from typing import Iterable, TextIO
from .args import Parameters, DanglingTextPolicy
from .entities import Comment, Dangling, Entity, Option, SectionName
from .exceptions_warnings import (
    DroppedTextWarning,
    DuplicateKeyWarning,
    DuplicateSectionWarning,
    ExtractionError,
)
from .globals import CONTINUATION_JOINER
from .interface import Document, Section
from .utils import iter_lines

__all__ = ["Deserializer", "DanglingTextPolicy", "split_lines"]


def split_lines(text: str) -> list[str]:
    """Split text at "\\r\\n", "\\r" and "\\n". A terminator at the very end doesn't
    produce an empty last line.

    Args:
        text (str): The text to split.

    Returns:
        list[str]: The lines without terminators.
    """
    lines = re.split(r"\r\n|\r|\n", text)
    if lines[-1] == "":
        lines.pop()
    return lines


class Deserializer:
    """Reads ini content into Documents."""

    def __init__(self, parameters: Parameters | None = None, **kwargs) -> None:
        """
        Args:
            parameters (Parameters | None, optional): Parameters for reading. If None,
                default Parameters are used. Defaults to None.
            **kwargs (optional): Parameters to change (on a copy of parameters).
                See doc of Parameters for details.
        """
        self.parameters = (parameters or Parameters()).copy(**kwargs)

    def read(
        self, lines: Iterable[str], document: Document | None = None
    ) -> Document:
        """Read lines into a Document.

        Args:
            lines (Iterable[str]): The lines, without line terminators.
            document (Document | None, optional): Document to read into. Sections that
                already exist are continued. If None, a new Document is created.
                Defaults to None.

        Returns:
            Document: The Document.
        """
        if document is None:
            document = Document()
        _ReadIni(target=document, parameters=self.parameters).read(lines)
        return document

    def read_string(self, text: str, document: Document | None = None) -> Document:
        """Read ini text into a Document. See read."""
        return self.read(split_lines(text), document)

    def read_stream(self, stream: TextIO, document: Document | None = None) -> Document:
        """Read an opened text stream into a Document. See read."""
        return self.read(iter_lines(stream), document)


class _ReadIni:

    def __init__(self, target: Document, parameters: Parameters) -> None:
        """Read lines into target. For more info cf. Deserializer.read."""
        self.target = target
        self.parameters = parameters

        # ----
        # define variables for read process
        # ----
        self.current_section: Section = target.untitled
        self.current_section_structure: list[Entity] = []
        self.current_option: Option | None = None
        """Last option of the current section (receives continuations)."""

        self.current_entity_index: int = 0
        self.current_entity_content: str = ""
        # ----

    def read(self, lines: Iterable[str]) -> None:
        for self.current_entity_index, self.current_entity_content in enumerate(
            lines
        ):

            if self._is_empty_entity():
                continue

            # try to extract comment
            elif (comment := self._extract_comment()) is not None:
                self.current_section_structure.append(comment)

            # try to extract section
            elif (section_name := self._extract_section_name()) is not None:
                self._flush()
                self.current_section = self._handle_section_name(section_name)
                self.current_option = None

            # try to extract option
            elif (option := self._extract_option()) is not None:
                self.current_option = option
                self.current_section_structure.append(option)

            else:
                self._handle_continuation()

        self._flush()

    def _is_empty_entity(self) -> bool:
        """Check whether self.current_entity_content is to be skipped as empty."""
        return (
            self.parameters.ignore_whitespace_lines
            and not self.current_entity_content.strip()
        )

    def _extract_comment(self) -> Comment | None:
        """Extract a comment if present in self.current_entity_content.

        Returns:
            Comment | None: The extracted comment or None if no comment
                was found in line.
        """
        with contextlib.suppress(ExtractionError):
            return Comment.from_string(
                self.current_entity_content, self.parameters.comment_prefixes
            )
        return None

    def _extract_section_name(self) -> SectionName | None:
        """Extract a section name if present in self.current_entity_content.

        Returns:
            SectionName | None: The extracted section name or None if no section name
                was found in self.current_entity_content.
        """
        with contextlib.suppress(ExtractionError):
            return SectionName.from_string(
                self.current_entity_content, strip=self.parameters.trim_section_name
            )
        return None

    def _handle_section_name(self, section_name: SectionName) -> Section:
        """Get (or create) the section belonging to an extracted SectionName.

        Returns:
            Section: The section that following lines belong to.
        """
        if section_name in self.target:
            warnings.warn(
                f"Line {self.current_entity_index} repeats section '{section_name}'."
                " Its content is merged into the existing section.",
                DuplicateSectionWarning,
            )
        return self.target.get_or_create(str(section_name))

    def _extract_option(self) -> Option | None:
        """Extract an option if present in self.current_entity_content.

        Returns:
            Option | None: The extracted option or None if no option was found
                in self.current_entity_content.
        """
        with contextlib.suppress(ExtractionError):
            return Option.from_string(
                self.current_entity_content, self.current_entity_index
            )
        return None

    def _handle_continuation(self) -> None:
        """Handles a line that is neither comment, section name nor option: either
        continues the last option or is dangling text."""
        if self.current_option is not None:
            self.current_option.add_continuation(self.current_entity_content)
        else:
            self.current_section_structure.append(
                Dangling(self.current_entity_content, self.current_entity_index)
            )

    def _flush(self) -> None:
        """Move the collected structure into the current section and reset it."""
        section = self.current_section
        policy = self.parameters.dangling_text_policy

        dangling = [
            entity
            for entity in self.current_section_structure
            if isinstance(entity, Dangling)
        ]
        if dangling and policy is DanglingTextPolicy.KEEP:
            text = CONTINUATION_JOINER.join(entity.content for entity in dangling)
            section.dangling_text = (
                text
                if section.dangling_text is None
                else CONTINUATION_JOINER.join((section.dangling_text, text))
            )
        elif dangling and policy is DanglingTextPolicy.DROP:
            warnings.warn(
                f"Line(s) {', '.join(str(entity.line_index) for entity in dangling)}"
                f" of section {section} are being dropped because they are dangling"
                f" text (dangling_text_policy is set to {policy.name}).",
                DroppedTextWarning,
            )

        for entity in self.current_section_structure:
            if isinstance(entity, Option):
                key = entity.key.strip() if self.parameters.trim_key else entity.key
                value = (
                    entity.value.strip() if self.parameters.trim_value else entity.value
                )
                if key in section:
                    warnings.warn(
                        f"Line {entity.line_index} repeats key '{key}' of section"
                        f" {section}. The earlier value is overwritten.",
                        DuplicateKeyWarning,
                    )
                section.set(key, value)
            elif isinstance(entity, Comment):
                section.add_comments(self._trim_comment(entity.content))
            elif policy is DanglingTextPolicy.TO_COMMENT:
                section.add_comments(self._trim_comment(entity.content))

        self.current_section_structure = []

    def _trim_comment(self, content: str) -> str:
        return content.strip() if self.parameters.trim_comment else content
