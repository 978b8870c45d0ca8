from roundini import Document, Parameters, Section, load_from_file
from typing import Any, ContextManager, Callable
from contextlib import nullcontext
from uuid import uuid1
from pathlib import Path
import inspect


class Base:
    """Base for tests. Builds ini content line by line together with the Document that
    reading the content with default Parameters should result in."""

    def __init__(self, write_parameters: Parameters | None = None) -> None:
        """
        Args:
            write_parameters (Parameters | None, optional): Parameters for creating the
                ini content. Defaults to Parameters().
        """
        self.write_parameters = write_parameters or Parameters()
        self.lines: list[str] = []
        self.document = Document()
        self.section: Section = self.document.untitled

    @property
    def content(self) -> str:
        """The ini content, every line terminated by "\\n"."""
        return "".join(f"{line}\n" for line in self.lines)

    @classmethod
    def create_parametrization(
        cls, target: Callable, parameters: list[dict[str, Any]]
    ) -> tuple[str, list[tuple]]:
        """Create a pytest mark parametrization for a target function.

        Args:
            target (Callable): The target function to parametrize.
            parameters (list[dict[str, Any]]): Parameters to pass. One dict per
                parametrization with keys matching target arguments.

        Returns:
            tuple[str, list[tuple]]: Tuple of argnames and argvalues to pass to
                pytest.mark.parametrization.
        """

        args_to_pass = {"opt_val": "", "opt_result": ""}

        # get default args from target
        args_to_pass |= {
            k: v.default
            for k, v in inspect.signature(target).parameters.items()
            if v.default is not v.empty
        }

        parametrization: list[tuple] = []
        for pars in parameters:
            if {*pars.keys()}.difference(args_to_pass.keys()):
                raise ValueError(
                    "Parameters must be either read_parameters or function arguments."
                )
            parametrization.append(tuple((args_to_pass | pars).values()))

        return ",".join(args_to_pass), parametrization

    def test_read_and_access(
        self,
        opt_val: str,
        opt_result: Any,
        export_path: Path,
        untitled: bool = False,
        read_context: ContextManager | None = None,
        read_parameters: Parameters | None = None,
        write_parameters: Parameters | None = None,
        further: Callable[[Document, Section, str, str], bool] | None = None,
    ):
        """Create test ini content with one comment and one option, read it and verify
        option value and comment content.

        Args:
            opt_val (str): The value the option should take inside the ini content.
            opt_result (Any): The value the option is expected to have after reading.
            export_path (Path): The directory to export the ini to.
            untitled (bool, optional): Whether to put comment and option into the
                untitled section. Defaults to False.
            read_context (ContextManager | None, optional): The ContextManager for
                reading the ini. Defaults to nullcontext().
            read_parameters (Parameters | None, optional): Parameters for reading.
            write_parameters (Parameters | None, optional): Parameters for writing.
            further (Callable[[Document, Section, str, str], bool] | None, optional): A
                function that takes the read document, the read section, the option key
                and the comment content and returns a boolean. Will be asserted at the
                end if not None. Defaults to None.
        """
        if write_parameters is not None:
            self.write_parameters = write_parameters
        if read_context is None:
            read_context = nullcontext()

        if not untitled:
            self.add_section()
        comment = self.add_comment()
        key = self.add_option(opt_val)

        read_path = self.export(export_path)

        with read_context:
            document = load_from_file(read_path, parameters=read_parameters)

        section = (
            document.untitled if untitled else document.get(self.section.name)
        )
        assert section is not None
        assert section.get(key) == opt_result
        assert section.comments_before(key) == [comment]
        if further:
            assert further(document, section, key, comment)

    @classmethod
    def random_id(cls) -> str:
        """Create a random UUID1 with underscores instead of hyphens.

        Returns:
            str: The generated UUID1.
        """
        return str(uuid1()).replace("-", "_")

    def add_section(self, name: str | None = None) -> str:
        """Add a section. Following entities are added to it.

        Args:
            name (str | None, optional): Name of the section. If None will generate a
                random name. Defaults to None.

        Returns:
            str: The section name.
        """
        if name is None:
            name = self.random_id()
        self.lines.append(f"[{name}]")
        self.section = self.document.get_or_create(name)
        return name

    def add_option(self, value: str | None = None, key: str | None = None) -> str:
        """Add an option to the current section.

        Args:
            value (str | None, optional): The value the option should take. If None
                will generate a random value. Defaults to None.
            key (str | None, optional): The option key. If None will generate a
                random key. Defaults to None.

        Returns:
            str: The option key.
        """
        if value is None:
            value = self.random_id()
        if key is None:
            key = self.random_id()
        self.lines.append(f"{key}{self.write_parameters.equalizer}{value}")
        self.section.set(key, value)
        return key

    def add_comment(self, content: str | None = None) -> str:
        """Add a comment to the current section."""
        if content is None:
            content = self.random_id()
        self.lines.append(f"{self.write_parameters.combined_comment_prefix}{content}")
        self.section.add_comments(content)
        return content

    def add_dangling(self, content: str | None = None) -> str:
        """Add dangling text. Only valid before the first option of a section."""
        if content is None:
            content = self.random_id()
        self.lines.append(content)
        self.section.dangling_text = (
            content
            if self.section.dangling_text is None
            else f"{self.section.dangling_text}\n{content}"
        )
        return content

    def export(self, path: Path) -> Path:
        """Export the generated ini content.

        Args:
            path (Path): The directory to export to.

        Returns:
            Path: The export path.
        """
        dest = path / f"{self.random_id()}.ini"
        with open(dest, "w", encoding="utf-8", newline="") as f:
            f.write(self.content)
        return dest
