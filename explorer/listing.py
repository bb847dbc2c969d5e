"""
Directory enumeration and file content decoding
"""

import os
import stat
import logging
from typing import List, Optional

from explorer.paths import FileSystemEntry

logger = logging.getLogger(__name__)

DEFAULT_MAX_READ_BYTES = 10 * 1024 * 1024  # 10MB


def list_entries(entry: FileSystemEntry) -> Optional[List[FileSystemEntry]]:
    """List the immediate children of a directory entry.

    Children are returned in the order the filesystem yields them. A child
    whose type cannot be determined is skipped; an unreadable directory
    yields None.
    """
    if not entry.is_dir:
        return None

    try:
        scanner = os.scandir(entry.path)
    except OSError as e:
        logger.warning(f"Could not list directory {entry.path}: {e}")
        return None

    children = []
    with scanner:
        for child in scanner:
            try:
                is_dir = child.is_dir()
            except OSError as e:
                logger.debug(f"Skipping {child.path}: {e}")
                continue
            children.append(FileSystemEntry(name=child.name, path=child.path, is_dir=is_dir))

    return children


def read_content(entry: FileSystemEntry, max_bytes: int = DEFAULT_MAX_READ_BYTES) -> Optional[str]:
    """Read a file entry as UTF-8 text.

    Returns None for directories, anything that is not a regular file
    (FIFOs and devices would block or never end), files larger than
    max_bytes, unreadable files and content that is not valid UTF-8.
    """
    if entry.is_dir:
        return None

    try:
        st = os.stat(entry.path)
    except OSError as e:
        logger.debug(f"Could not stat {entry.path}: {e}")
        return None

    if not stat.S_ISREG(st.st_mode):
        logger.debug(f"Not reading {entry.path}: not a regular file")
        return None

    try:
        with open(entry.path, "rb") as f:
            data = f.read(max_bytes + 1)
    except OSError as e:
        logger.debug(f"Could not read {entry.path}: {e}")
        return None

    if len(data) > max_bytes:
        logger.info(f"Not decoding {entry.path}: larger than {max_bytes} bytes")
        return None

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug(f"Could not decode {entry.path} as text")
        return None
