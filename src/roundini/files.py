"""Reading and writing ini files and byte streams. Any failure of the underlying I/O
or of en-/decoding is raised as ReadWriteError."""

import io
from pathlib import Path
from typing import BinaryIO, TextIO
from charset_normalizer import from_bytes as read_from_bytes
from .args import Parameters
from .deserializer import Deserializer, split_lines
from .exceptions_warnings import ReadWriteError
from .interface import Document
from .serializer import Serializer

DEFAULT_ENCODING = "utf-8"
BOM = "\ufeff"


def decode(raw: bytes, encoding: str | None = None) -> str:
    """Decode bytes. Without an encoding, the encoding is detected.

    Args:
        raw (bytes): The bytes to decode.
        encoding (str | None, optional): The encoding. If None, will be detected
            (falling back to utf-8). Defaults to None.

    Raises:
        ReadWriteError: If the bytes can't be decoded.

    Returns:
        str: The text without byte order mark.
    """
    try:
        if encoding is not None:
            text = raw.decode(encoding)
        elif (best := read_from_bytes(raw).best()) is not None:
            text = str(best)
        else:
            text = raw.decode(DEFAULT_ENCODING)
    except (UnicodeError, LookupError) as e:
        raise ReadWriteError(f"Content could not be decoded: {e}") from e
    return text.removeprefix(BOM)


def read_all(stream: BinaryIO | TextIO, encoding: str | None = None) -> list[str]:
    """Read all lines of a stream.

    Args:
        stream (BinaryIO | TextIO): Stream to read. Byte streams are decoded
            (cf. decode), text streams are read as they are.
        encoding (str | None, optional): Encoding of a byte stream. Defaults to None.

    Raises:
        ReadWriteError: If reading or decoding fails.

    Returns:
        list[str]: The lines without line terminators.
    """
    try:
        content = stream.read()
    except OSError as e:
        raise ReadWriteError(f"Error when reading content: {e}") from e
    if isinstance(content, bytes):
        return split_lines(decode(content, encoding))
    return split_lines(content)


def write_all(
    stream: BinaryIO | TextIO, text: str, encoding: str = DEFAULT_ENCODING
) -> None:
    """Write text into a stream (encoded if it is a byte stream).

    Raises:
        ReadWriteError: If writing or encoding fails.
    """
    try:
        if isinstance(stream, io.TextIOBase):
            stream.write(text)
        else:
            stream.write(text.encode(encoding))
        stream.flush()
    except (OSError, UnicodeError, LookupError) as e:
        raise ReadWriteError(f"Error when writing content: {e}") from e


def load_from_file(
    path: str | Path,
    encoding: str | None = None,
    parameters: Parameters | None = None,
    **kwargs,
) -> Document:
    """Read an ini file.

    Args:
        path (str | Path): Path to the ini file.
        encoding (str | None, optional): Encoding of the file. If None, the encoding
            is detected. Defaults to None.
        parameters (Parameters | None, optional): Parameters for reading.
            Defaults to None.
        **kwargs (optional): Parameters as kwargs. See doc of Parameters for details.

    Raises:
        ReadWriteError: If the file can't be read or decoded.

    Returns:
        Document: The read Document.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise ReadWriteError(f"Exception occurred while loading {path}: {e}") from e
    return Deserializer(parameters, **kwargs).read_string(decode(raw, encoding))


def save_to_file(
    document: Document,
    path: str | Path,
    encoding: str = DEFAULT_ENCODING,
    parameters: Parameters | None = None,
    pretty: bool = False,
    **kwargs,
) -> None:
    """Write a Document to an ini file (the file is overwritten).

    Args:
        document (Document): The Document to write.
        path (str | Path): Path to the ini file.
        encoding (str, optional): Encoding of the file. Defaults to "utf-8".
        parameters (Parameters | None, optional): Parameters for writing. If None,
            default Parameters (or Parameters.pretty() if pretty) are used.
            Defaults to None.
        pretty (bool, optional): Whether to write "key = value" and "; comment"
            if no parameters are given. Defaults to False.
        **kwargs (optional): Parameters as kwargs. See doc of Parameters for details.

    Raises:
        ReadWriteError: If the file can't be written or the content can't be encoded.
    """
    if parameters is None:
        parameters = Parameters.pretty() if pretty else Parameters()
    text = Serializer(parameters, **kwargs).to_string(document)
    try:
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(text)
    except (OSError, UnicodeError, LookupError) as e:
        raise ReadWriteError(f"Exception occurred while saving {path}: {e}") from e
