"""Reading and writing buffers as newline-terminated lines."""

import logging
import os
import tempfile
from typing import Iterable

logger = logging.getLogger(__name__)

# One character per byte: every byte is one column and files round-trip unchanged
FILE_ENCODING = 'latin-1'


def read_lines(filename: str) -> list[str]:
    """Read a file as a list of lines without their terminators.

    A missing file is created empty rather than treated as an error.

    Raises:
        OSError: if the file can be neither read nor created.
    """
    try:
        with open(filename, 'r', encoding=FILE_ENCODING, newline='\n') as f:
            content = f.read()
    except FileNotFoundError:
        logger.info(f"{filename} does not exist, creating it")
        with open(filename, 'w', encoding=FILE_ENCODING):
            pass
        return []

    lines = content.split('\n')
    if content.endswith('\n'):
        # The terminator of the last line does not start a new one
        lines.pop()
    return lines


def write_lines(filename: str, lines: Iterable[str]) -> None:
    """Write each line followed by a newline, replacing the file atomically.

    Raises:
        OSError: if the file cannot be written. The original file is
            left untouched in that case.
    """
    content = ''.join(line + '\n' for line in lines)

    # Temp file in the same directory so the rename stays on one filesystem
    dir_name = os.path.dirname(filename) or '.'
    suffix = os.path.splitext(filename)[1]
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='w', encoding=FILE_ENCODING, newline='\n',
                                         dir=dir_name, suffix=suffix, delete=False) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        if os.path.exists(filename):
            os.chmod(temp_filename, os.stat(filename).st_mode & 0o7777)
        os.replace(temp_filename, filename)
    except OSError:
        if temp_filename and os.path.exists(temp_filename):
            os.remove(temp_filename)
        raise
