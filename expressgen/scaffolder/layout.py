"""Layout Planner: decides the directory skeleton and every artifact's path.

The logical grouping (which category directory an artifact lives in) is the
same for both language variants.  TypeScript nests everything one level deeper
under ``src/`` and uses the ``.ts`` extension; JavaScript keeps the source
root at the project root and uses ``.js``.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from expressgen.scaffolder.options import Language


class Artifact(str, Enum):
    """Logical names of the template-produced source files."""
    ENTRY_POINT = "entry-point"
    ROUTES = "routes"
    CONTROLLER = "controller"
    ERROR_MIDDLEWARE = "error-middleware"
    ERROR_CLASS = "error-class"
    DB_CONNECTOR = "db-connector"
    RESPONSE_HELPER = "response-helper"


# Category directories, in creation order.
CATEGORY_DIRS: tuple[str, ...] = ("controllers", "routes", "middlewares", "utils")

# Artifact -> (category directory or "" for the source root, file stem)
_ARTIFACT_LOCATIONS: dict[Artifact, tuple[str, str]] = {
    Artifact.ENTRY_POINT: ("", "server"),
    Artifact.ROUTES: ("routes", "helloRoutes"),
    Artifact.CONTROLLER: ("controllers", "helloController"),
    Artifact.ERROR_MIDDLEWARE: ("middlewares", "errorHandler"),
    Artifact.ERROR_CLASS: ("utils", "errorClass"),
    Artifact.DB_CONNECTOR: ("utils", "mongoConnect"),
    Artifact.RESPONSE_HELPER: ("utils", "apiResponse"),
}

MANIFEST_PATH = "package.json"
ENV_PATH = ".env"
COMPILER_CONFIG_PATH = "tsconfig.json"


@dataclass(frozen=True)
class LayoutPlan:
    """Directories to create and the relative path of every artifact.

    All paths are POSIX-style and relative to the project root.
    """

    language: Language
    source_root: str
    extension: str
    directories: tuple[str, ...]
    artifact_paths: dict[Artifact, str] = field(default_factory=dict)
    manifest_path: str = MANIFEST_PATH
    env_path: str = ENV_PATH
    compiler_config_path: Optional[str] = None

    def path_for(self, artifact: Artifact) -> str:
        return self.artifact_paths[artifact]

    def category_of(self, artifact: Artifact) -> str:
        """Category directory of *artifact* (``""`` for the source root)."""
        return _ARTIFACT_LOCATIONS[artifact][0]

    def module_specifier(self, source: Artifact, target: Artifact) -> str:
        """Relative import specifier used inside *source* to import *target*.

        JavaScript ESM imports keep the ``.js`` suffix; TypeScript imports
        drop the extension.
        """
        source_dir = posixpath.dirname(self.path_for(source)) or "."
        target_path = self.path_for(target)
        rel = posixpath.relpath(target_path, source_dir)
        if not rel.startswith("."):
            rel = f"./{rel}"
        if self.language is Language.TYPESCRIPT:
            rel = rel[: -len(self.extension)]
        return rel


def plan(language: Language) -> LayoutPlan:
    """Build the layout plan for *language*."""
    if language is Language.TYPESCRIPT:
        source_root, extension = "src", ".ts"
    else:
        source_root, extension = "", ".js"

    def _join(*parts: str) -> str:
        return posixpath.join(*[p for p in parts if p])

    directories: list[str] = []
    if source_root:
        directories.append(source_root)
    directories.extend(_join(source_root, category) for category in CATEGORY_DIRS)

    artifact_paths = {
        artifact: _join(source_root, category, f"{stem}{extension}")
        for artifact, (category, stem) in _ARTIFACT_LOCATIONS.items()
    }

    return LayoutPlan(
        language=language,
        source_root=source_root,
        extension=extension,
        directories=tuple(directories),
        artifact_paths=artifact_paths,
        compiler_config_path=(
            COMPILER_CONFIG_PATH if language is Language.TYPESCRIPT else None
        ),
    )
