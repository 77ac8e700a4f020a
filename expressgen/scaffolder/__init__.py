"""expressgen scaffolder -- generates Express starter projects.

Maps a validated ``OptionSet`` (language plus six feature flags) to a
``package.json`` manifest, a directory layout and a set of mutually
consistent source files, then writes them through a file-system sink.

Quick usage::

    from expressgen.scaffolder import ProjectGenerator, build_options

    options = build_options(project_name="my-app", language="TypeScript", enable_cors=True)
    tree = await ProjectGenerator().generate(options)
"""

from expressgen.scaffolder.emitter import GeneratedTree, build_tree, emit
from expressgen.scaffolder.generator import ProjectGenerator
from expressgen.scaffolder.layout import Artifact, LayoutPlan, plan
from expressgen.scaffolder.library import TemplateLibrary, scheduled_artifacts
from expressgen.scaffolder.options import (
    ActiveFeatureSet,
    Language,
    OptionSet,
    build_options,
)
from expressgen.scaffolder.resolver import PackageManifest, resolve
from expressgen.scaffolder.sink import FileSystemSink, LocalFileSystemSink, MemorySink
from expressgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "ActiveFeatureSet",
    "Artifact",
    "FileSystemSink",
    "GeneratedTree",
    "Language",
    "LayoutPlan",
    "LocalFileSystemSink",
    "MemorySink",
    "OptionSet",
    "PackageManifest",
    "ProjectGenerator",
    "TemplateLibrary",
    "TemplateRenderer",
    "build_options",
    "build_tree",
    "emit",
    "plan",
    "resolve",
    "scheduled_artifacts",
]
