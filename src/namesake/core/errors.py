"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Fatal error kinds raised by the scan pipeline.
Permission problems while walking a tree are not errors: those entries are skipped.
"""


class NamesakeError(RuntimeError):
    """Base class for every fatal scan error. Carries the offending path."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class PathNotFound(NamesakeError):
    """A user-supplied root path does not exist."""


class TraversalError(NamesakeError):
    """Non-permission I/O failure while walking a directory tree."""


class HashReadError(NamesakeError):
    """A file could not be opened or read during strict verification."""


class OutputWriteError(NamesakeError):
    """The report destination could not be opened for appending."""
