"""Shared pytest fixtures for the expressgen test suite.

Provides reusable fixtures for:
- Option sets (single scenarios and the full 128-combination sweep)
- The template library and renderer
- In-memory and on-disk file-system sinks
"""

from __future__ import annotations

import itertools
from pathlib import Path
from typing import Any, Callable

import pytest

from expressgen.config import Config
from expressgen.scaffolder import (
    Language,
    LocalFileSystemSink,
    MemorySink,
    OptionSet,
    ProjectGenerator,
    TemplateLibrary,
    TemplateRenderer,
)
from expressgen.scaffolder.options import FEATURE_NAMES


# ---------------------------------------------------------------------------
# Option sets
# ---------------------------------------------------------------------------

def _all_combinations() -> list[OptionSet]:
    combos: list[OptionSet] = []
    for language in Language:
        for flags in itertools.product((False, True), repeat=len(FEATURE_NAMES)):
            combos.append(
                OptionSet(
                    project_name="combo-app",
                    language=language,
                    **dict(zip(FEATURE_NAMES, flags)),
                )
            )
    return combos


def _combo_id(options: OptionSet) -> str:
    prefix = "ts" if options.language is Language.TYPESCRIPT else "js"
    enabled = [name.split("_", 1)[1] for name in options.features.enabled()]
    return "-".join([prefix, *enabled]) or prefix


ALL_OPTION_SETS = _all_combinations()


@pytest.fixture(params=ALL_OPTION_SETS, ids=[_combo_id(o) for o in ALL_OPTION_SETS])
def any_options(request) -> OptionSet:
    """Every language x feature combination (128 cases)."""
    return request.param


@pytest.fixture
def make_options() -> Callable[..., OptionSet]:
    """Factory for option sets with everything off unless overridden."""

    def _make(**overrides: Any) -> OptionSet:
        fields: dict[str, Any] = {
            "project_name": "my-app",
            "language": Language.JAVASCRIPT,
            **{name: False for name in FEATURE_NAMES},
        }
        fields.update(overrides)
        return OptionSet(**fields)

    return _make


@pytest.fixture
def minimal_js(make_options) -> OptionSet:
    """JavaScript project with every optional feature off."""
    return make_options()


@pytest.fixture
def minimal_ts(make_options) -> OptionSet:
    """TypeScript project with every optional feature off."""
    return make_options(language=Language.TYPESCRIPT)


@pytest.fixture
def full_js(make_options) -> OptionSet:
    """JavaScript project with every optional feature on."""
    return make_options(**{name: True for name in FEATURE_NAMES})


@pytest.fixture
def full_ts(make_options) -> OptionSet:
    """TypeScript project with every optional feature on."""
    return make_options(
        language=Language.TYPESCRIPT, **{name: True for name in FEATURE_NAMES}
    )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture(scope="session")
def library(renderer) -> TemplateLibrary:
    return TemplateLibrary(renderer)


# ---------------------------------------------------------------------------
# Sinks & generator
# ---------------------------------------------------------------------------

@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def local_sink(tmp_path: Path) -> LocalFileSystemSink:
    return LocalFileSystemSink(tmp_path)


@pytest.fixture
def generator(tmp_path: Path) -> ProjectGenerator:
    """Generator writing under a temporary output directory."""
    return ProjectGenerator(Config(output_dir=tmp_path))
