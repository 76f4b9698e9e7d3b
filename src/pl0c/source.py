"""
Source File Loading
===================

Reads a PL/0 source file into memory for the scanner. The whole file is
read up front; the scanner itself never touches the filesystem.
"""

import logging
from pathlib import Path
from typing import Union

from pl0c.errors import BadSuffixError, SourceReadError

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".pl0"


def has_source_suffix(path: Union[str, Path]) -> bool:
    """
    Check that the text after the last '.' in path is exactly 'pl0'.

    >>> has_source_suffix("square.pl0")
    True
    >>> has_source_suffix("square.pl0.bak")
    False
    """
    name = str(path)
    dot = name.rfind(".")
    return dot != -1 and name[dot:] == SOURCE_SUFFIX


def read_source(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read a PL/0 source file.

    Args:
        path: Path to a file whose name ends in '.pl0'
        encoding: Text encoding of the file

    Returns:
        The complete file contents

    Raises:
        BadSuffixError: If the path does not end in '.pl0'
        SourceReadError: If the file cannot be opened, read or decoded
    """
    if not has_source_suffix(path):
        raise BadSuffixError(str(path))

    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceReadError(f"Unable to open file '{path}'", str(path)) from e

    try:
        source = data.decode(encoding)
    except UnicodeDecodeError as e:
        raise SourceReadError(f"Unable to read file '{path}'", str(path)) from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return source
