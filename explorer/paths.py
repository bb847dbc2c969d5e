"""
Path resolution - turns a request path into a filesystem entry
"""

import os
import logging
from dataclasses import dataclass

from explorer.errors import InvalidPath, PathNotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileSystemEntry:
    """One filesystem node as observed when it was resolved or listed.

    ``name`` is kept exactly as ``os`` returned it (undecodable bytes survive
    as surrogate escapes) so it can be joined back into a path later.
    """

    name: str
    path: str
    is_dir: bool


def is_within_root(path, root):
    """Check that a normalized path lives inside root"""
    root = os.path.abspath(root)
    try:
        return os.path.commonpath([path, root]) == root
    except ValueError:
        return False


def resolve(raw_path, root, confine=True):
    """Resolve a request path against the browsing root.

    Args:
        raw_path (str): Path taken from the request, relative to root
        root (str): Base location; an empty path resolves to it
        confine (bool): Reject paths that normalize to somewhere outside root

    Returns:
        FileSystemEntry: The resolved node

    Raises:
        InvalidPath: The path is malformed or escapes root
        PathNotFound: Nothing exists at the resolved location
    """
    stripped = raw_path[:-1] if raw_path.endswith("/") else raw_path

    if "\x00" in stripped:
        logger.warning(f"Invalid path: {raw_path!r} - embedded NUL byte")
        raise InvalidPath(raw_path)

    try:
        path = os.path.abspath(os.path.join(root, stripped.lstrip("/")))
    except (TypeError, ValueError) as e:
        logger.warning(f"Invalid path: {raw_path!r} - {e}")
        raise InvalidPath(raw_path) from e

    if confine and not is_within_root(path, root):
        logger.warning(f"Invalid path: {raw_path!r} - outside of {root}")
        raise InvalidPath(raw_path)

    if not os.path.exists(path):
        logger.info(f"Path not found: {path}")
        raise PathNotFound(raw_path)

    name = os.path.basename(path) or path
    return FileSystemEntry(name=name, path=path, is_dir=os.path.isdir(path))
