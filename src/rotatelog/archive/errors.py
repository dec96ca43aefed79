from __future__ import annotations


class RotateLogError(Exception):
    """Base error for any log directory operation."""


class DirectoryOpenError(RotateLogError):
    """The target directory could not be opened for listing."""

    def __init__(self, directory, reason: str | None = None):
        self.directory = directory
        msg = f"Cannot open directory {directory}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class InputFileMissing(RotateLogError):
    """The live log file to rotate does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Input file '{path}' does not exist")


class CompressionError(RotateLogError):
    """Archiving a single log file failed."""

    def __init__(self, path, reason: str | None = None):
        self.path = path
        msg = f"Cannot compress log file '{path}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
