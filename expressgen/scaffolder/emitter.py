"""Tree Emitter: the only component that performs file-system side effects.

The whole tree is first built in memory (``build_tree``), then handed to a
``FileSystemSink`` one operation at a time, in a fixed order:

1. existence check of the project root (``DirectoryExists`` on a clash)
2. project root and every planned sub-directory
3. ``package.json``
4. ``.env`` (when env loading is enabled)
5. every template-produced source file
6. ``tsconfig.json`` (TypeScript only)

There is no rollback: a ``FileSystemError`` half-way through leaves the files
already written in place.
"""

from __future__ import annotations

import asyncio
import json
import posixpath
from dataclasses import dataclass, field

from expressgen.errors import DirectoryExists
from expressgen.scaffolder.layout import LayoutPlan
from expressgen.scaffolder.library import TemplateLibrary, render_env_file
from expressgen.scaffolder.options import OptionSet
from expressgen.scaffolder.resolver import PackageManifest, resolve
from expressgen.scaffolder.sink import FileSystemSink


COMPILER_OPTIONS: dict[str, object] = {
    "target": "ES2020",
    "module": "NodeNext",
    "moduleResolution": "NodeNext",
    "outDir": "./dist",
    "esModuleInterop": True,
    "noImplicitAny": True,
    "strict": True,
    "skipLibCheck": True,
}


def render_compiler_config() -> str:
    """Content of ``tsconfig.json`` (feature-independent)."""
    return json.dumps({"compilerOptions": COMPILER_OPTIONS}, indent=2) + "\n"


@dataclass
class GeneratedTree:
    """The full ``path -> content`` mapping of one generation run.

    ``directories`` and ``files`` are relative to ``root`` and listed in
    emission order.
    """

    root: str
    manifest: PackageManifest
    directories: tuple[str, ...] = ()
    files: dict[str, str] = field(default_factory=dict)

    def absolute(self, path: str) -> str:
        """Path of *path* as seen by the sink (prefixed with the root)."""
        return posixpath.join(self.root, path)

    def paths(self) -> list[str]:
        return list(self.files)


def build_tree(
    layout: LayoutPlan,
    library: TemplateLibrary,
    options: OptionSet,
    versions: dict[str, str] | None = None,
) -> GeneratedTree:
    """Render every file of the project in memory, in emission order."""
    manifest, features = resolve(options, versions)
    files: dict[str, str] = {layout.manifest_path: manifest.to_json()}

    if features.use_env_file:
        files[layout.env_path] = render_env_file()

    for artifact, content in library.render_all(features, layout).items():
        files[layout.path_for(artifact)] = content

    if layout.compiler_config_path is not None:
        files[layout.compiler_config_path] = render_compiler_config()

    return GeneratedTree(
        root=options.project_name,
        manifest=manifest,
        directories=layout.directories,
        files=files,
    )


async def emit(
    layout: LayoutPlan,
    library: TemplateLibrary,
    options: OptionSet,
    sink: FileSystemSink,
    versions: dict[str, str] | None = None,
) -> GeneratedTree:
    """Write the project described by *options* through *sink*.

    Each sink call is awaited in turn; nothing is written before the root
    existence check succeeds.

    Raises:
        DirectoryExists: The project root is already present (no mutations).
        FileSystemError: A directory creation or write failed (propagated as is).
    """
    if layout.language is not options.language:
        raise ValueError(
            f"Layout plan is for {layout.language.value}, "
            f"options request {options.language.value}"
        )

    tree = build_tree(layout, library, options, versions)

    if await asyncio.to_thread(sink.directory_exists, tree.root):
        raise DirectoryExists(tree.root)

    await asyncio.to_thread(sink.create_directory, tree.root)
    for directory in tree.directories:
        await asyncio.to_thread(sink.create_directory, tree.absolute(directory))

    for path, content in tree.files.items():
        await asyncio.to_thread(sink.write_file, tree.absolute(path), content)

    return tree
