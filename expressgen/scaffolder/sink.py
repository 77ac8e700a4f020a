"""File-system sinks used by the Tree Emitter.

The emitter never touches the file system directly; it talks to an object
implementing ``FileSystemSink``.  ``LocalFileSystemSink`` writes to disk,
``MemorySink`` keeps everything in memory (dry runs and tests).
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Protocol, runtime_checkable

from expressgen.errors import FileSystemError


@runtime_checkable
class FileSystemSink(Protocol):
    """Synchronous file-system operations needed by the emitter.

    Paths are POSIX-style and relative to the sink's base.  Each call's effect
    must be visible before the next call returns.
    """

    def directory_exists(self, path: str) -> bool: ...

    def create_directory(self, path: str) -> None: ...

    def write_file(self, path: str, content: str) -> None: ...


class LocalFileSystemSink:
    """Writes to the real file system underneath *base_dir*."""

    def __init__(self, base_dir: str | Path = ".") -> None:
        self.base_dir = Path(base_dir)

    def _resolve(self, path: str) -> Path:
        return self.base_dir.joinpath(*PurePosixPath(path).parts)

    def directory_exists(self, path: str) -> bool:
        # Any existing entry (file or directory) blocks the project root.
        return self._resolve(path).exists()

    def create_directory(self, path: str) -> None:
        target = self._resolve(path)
        try:
            target.mkdir(parents=True, exist_ok=False)
        except OSError as exc:
            raise FileSystemError("create directory", target, exc) from exc

    def write_file(self, path: str, content: str) -> None:
        target = self._resolve(path)
        try:
            with open(target, "w", encoding="utf-8", newline="\n") as fh:
                fh.write(content)
        except OSError as exc:
            raise FileSystemError("write file", target, exc) from exc


class MemorySink:
    """In-memory sink recording every operation in order.

    Args:
        existing: Paths reported as already present by ``directory_exists``.
        fail_on: Paths whose ``create_directory``/``write_file`` call raises
            ``FileSystemError`` (simulates permission or disk errors).
    """

    def __init__(
        self,
        existing: set[str] | None = None,
        fail_on: set[str] | None = None,
    ) -> None:
        self.existing: set[str] = set(existing or ())
        self.fail_on: set[str] = set(fail_on or ())
        self.directories: list[str] = []
        self.files: dict[str, str] = {}
        self.operations: list[tuple[str, str]] = []

    def directory_exists(self, path: str) -> bool:
        self.operations.append(("exists", path))
        return path in self.existing or path in self.directories

    def create_directory(self, path: str) -> None:
        if path in self.fail_on:
            raise FileSystemError("create directory", path)
        self.operations.append(("mkdir", path))
        self.directories.append(path)

    def write_file(self, path: str, content: str) -> None:
        if path in self.fail_on:
            raise FileSystemError("write file", path)
        parent = str(PurePosixPath(path).parent)
        if parent not in self.directories:
            raise FileSystemError("write file", path, FileNotFoundError(parent))
        self.operations.append(("write", path))
        self.files[path] = content

    @property
    def mutations(self) -> list[tuple[str, str]]:
        """Operations that changed state (everything except existence checks)."""
        return [op for op in self.operations if op[0] != "exists"]
