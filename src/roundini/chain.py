"""Chained access to a Document: open a section, change it, close it and go on with
the next one.

    doc.chain_access().open_section("server").set("port", 80).close_section()
"""

from typing import Any, Iterable
from .interface import Document, Section
from .utils import copy_doc


class ChainDocumentAccessor:
    """Chained access to a Document."""

    def __init__(self, document: Document) -> None:
        self.document = document

    def rename_section(self, name: str, new_name: str) -> "ChainDocumentAccessor":
        """Rename a section. Does nothing if the section doesn't exist."""
        self.document.rename(name, new_name)
        return self

    def remove_section(self, name: str) -> "ChainDocumentAccessor":
        """Remove a section. Does nothing if the section doesn't exist."""
        self.document.remove(name)
        return self

    def open_section(self, name: str) -> "ChainSectionAccessor":
        """Open a section, creating it if it doesn't exist."""
        return ChainSectionAccessor(self, self.document.get_or_create(name))

    def open_untitled_section(self) -> "ChainSectionAccessor":
        """Open the untitled section."""
        return ChainSectionAccessor(self, self.document.untitled)

    def done(self) -> Document:
        """End the chain and return the Document."""
        return self.document


class ChainSectionAccessor:
    """Chained access to one Section of a Document."""

    def __init__(self, parent: ChainDocumentAccessor, section: Section) -> None:
        self._parent = parent
        self.section = section

    @copy_doc(Section.set)
    def set(self, key: str, value: Any) -> "ChainSectionAccessor":
        self.section.set(key, value)
        return self

    @copy_doc(Section.rename)
    def rename(self, key: str, new_key: str) -> "ChainSectionAccessor":
        self.section.rename(key, new_key)
        return self

    @copy_doc(Section.remove)
    def remove(self, key: str) -> "ChainSectionAccessor":
        self.section.remove(key)
        return self

    @copy_doc(Section.add_comments)
    def add_comments(self, *lines: str | Iterable[str]) -> "ChainSectionAccessor":
        self.section.add_comments(*lines)
        return self

    def close_section(self) -> ChainDocumentAccessor:
        """Stop working on this section and return to the Document."""
        return self._parent
