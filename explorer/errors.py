"""Errors raised while resolving request paths"""


class ExplorerError(Exception):
    """Base class for path resolution failures"""

    def __init__(self, path, message=None):
        self.path = path
        super().__init__(message or f"{self.__class__.__name__}: {path!r}")


class InvalidPath(ExplorerError):
    """The request path is malformed or escapes the browsing root"""


class PathNotFound(ExplorerError):
    """The request path does not exist or cannot be listed"""
