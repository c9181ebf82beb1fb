#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/utils/io_utils.py
"""I/O utilities for reading inputs and writing outputs.

Every function here turns ``OSError`` and decoding failures into the
library's own exceptions so callers can map them to exit codes.

"""

from __future__ import annotations

import errno
import logging
from pathlib import Path
from typing import IO, Union

from md2nexus.constants import DEFAULT_ENCODING
from md2nexus.exceptions import FileAccessError, FileNotFoundError, OutputWriteError

logger = logging.getLogger(__name__)

UTF8_BOM = "\ufeff"


def decode_text(data: bytes, source: str | None = None) -> str:
    """Decode UTF-8 bytes, dropping a leading byte order mark.

    Parameters
    ----------
    data : bytes
        Raw input bytes
    source : str, optional
        Name of the input for error messages

    Returns
    -------
    str
        Decoded text

    Raises
    ------
    FileAccessError
        If the bytes are not valid UTF-8

    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        name = source or "<bytes>"
        raise FileAccessError(name, message=f"Input is not valid UTF-8: {name} ({e.reason})", original_error=e) from e


def read_text_file(path: Union[str, Path]) -> str:
    """Read a UTF-8 text file.

    Parameters
    ----------
    path : str or Path
        File to read

    Returns
    -------
    str
        File contents without a byte order mark

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file cannot be read or is not valid UTF-8

    """
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as e:
        if e.errno == errno.ENOENT:
            raise FileNotFoundError(str(file_path), original_error=e) from e
        raise FileAccessError(str(file_path), original_error=e) from e

    logger.debug("Read %d bytes from %s", len(data), file_path)
    return decode_text(data, source=str(file_path))


def read_stream(stream: IO[bytes] | IO[str]) -> str:
    """Read a binary or text stream to a string."""
    content = stream.read()
    if isinstance(content, bytes):
        return decode_text(content, source=getattr(stream, "name", None))
    return content[1:] if content.startswith(UTF8_BOM) else content


def write_content(content: str, output: Union[str, Path, IO[str]]) -> None:
    """Write rendered text to a path or text stream.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, or IO[str]
        Destination file path or writable text stream

    Raises
    ------
    OutputWriteError
        If the destination cannot be written

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding=DEFAULT_ENCODING)
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        logger.debug("Wrote %d characters to %s", len(content), output_path)
        return

    if hasattr(output, "write"):
        output.write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output).__name__}")


def ensure_directory(path: Union[str, Path]) -> Path:
    """Create a directory (and parents) if it does not exist.

    Raises
    ------
    OutputWriteError
        If the directory cannot be created

    """
    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(
            str(directory), message=f"Cannot create output directory: {directory}", original_error=e
        ) from e
    return directory
