"""Main scaffolding orchestrator.

Wires the pipeline together for one run::

    OptionSet -> resolve -> plan -> TemplateLibrary -> emit -> FileSystemSink
"""

from __future__ import annotations

from pathlib import Path

from expressgen.config import Config
from expressgen.scaffolder.emitter import GeneratedTree, build_tree, emit
from expressgen.scaffolder.layout import plan
from expressgen.scaffolder.library import TemplateLibrary
from expressgen.scaffolder.options import OptionSet
from expressgen.scaffolder.sink import FileSystemSink, LocalFileSystemSink


class ProjectGenerator:
    """Generates Express starter projects from an ``OptionSet``.

    One generator can serve many runs; no state is shared between them
    apart from the (read-only) configuration and template library.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.library = TemplateLibrary()

    # -- Public API --------------------------------------------------------

    def preview(self, options: OptionSet) -> GeneratedTree:
        """Render the full project in memory without touching the file system."""
        return build_tree(
            plan(options.language), self.library, options, self.config.versions
        )

    async def generate(
        self,
        options: OptionSet,
        sink: FileSystemSink | None = None,
    ) -> GeneratedTree:
        """Generate the project described by *options*.

        Args:
            options: Validated option set.
            sink: Destination sink.  Defaults to the local file system under
                ``config.output_dir``.

        Returns:
            The generated tree that was written.
        """
        if sink is None:
            sink = LocalFileSystemSink(self.config.output_dir)
        return await emit(
            plan(options.language),
            self.library,
            options,
            sink,
            self.config.versions,
        )

    def project_path(self, options: OptionSet) -> Path:
        """Where the project lands when using the default local sink."""
        return Path(self.config.output_dir) / options.project_name
