"""Error taxonomy for project generation.

Every error raised by the generator is terminal for the current run.  None of
them are retried: the caller (usually the CLI) reports the message and exits.
"""

from __future__ import annotations

from pathlib import PurePath


class GeneratorError(Exception):
    """Base class for all errors raised while generating a project."""


class InvalidOption(GeneratorError):
    """Raised when the option set fails a precondition (e.g. an empty name).

    Always raised before any file-system interaction.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"Invalid option '{field}': {message}")


class DirectoryExists(GeneratorError):
    """Raised when the target project root is already present.

    The run makes zero file-system mutations before this is raised.
    """

    def __init__(self, path: str | PurePath) -> None:
        self.path = str(path)
        super().__init__(f"Folder already exists: {self.path}")


class FileSystemError(GeneratorError):
    """Raised when a directory creation or file write fails mid-run.

    Files written before the failing step are left in place.
    """

    def __init__(
        self,
        operation: str,
        path: str | PurePath,
        cause: BaseException | None = None,
    ) -> None:
        self.operation = operation
        self.path = str(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to {operation} {self.path}{detail}")
