"""Feature Resolver: option set -> dependency manifest + active features.

The manifest is composed from a fixed base plus one rule per feature.  All
per-feature package knowledge lives in ``FEATURE_RULES`` so adding a feature
touches a single table entry.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from expressgen.config import DEFAULT_VERSIONS
from expressgen.scaffolder.options import (
    ActiveFeatureSet,
    Language,
    OptionSet,
)


# ---------------------------------------------------------------------------
# Package rules
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FeatureRule:
    """Packages contributed by one feature.

    ``typings`` are only added for the TypeScript variant.
    """

    runtime: tuple[str, ...] = ()
    dev: tuple[str, ...] = ()
    typings: tuple[str, ...] = ()


BASE_RUNTIME: tuple[str, ...] = ("express",)
BASE_DEV: tuple[str, ...] = ("nodemon",)
TYPESCRIPT_TOOLCHAIN: tuple[str, ...] = (
    "typescript",
    "ts-node",
    "@types/node",
    "@types/express",
)

# mongoose and dotenv ship their own type declarations.
FEATURE_RULES: dict[str, FeatureRule] = {
    "use_database": FeatureRule(runtime=("mongoose",)),
    "enable_cors": FeatureRule(runtime=("cors",), typings=("@types/cors",)),
    "use_error_handling": FeatureRule(),
    "use_env_file": FeatureRule(runtime=("dotenv",)),
    "use_request_logging": FeatureRule(runtime=("morgan",), typings=("@types/morgan",)),
    "use_linting": FeatureRule(dev=("eslint",)),
}

MANIFEST_VERSION = "1.0.0"


# ---------------------------------------------------------------------------
# Manifest schema
# ---------------------------------------------------------------------------

class Scripts(BaseModel):
    """``scripts`` block of ``package.json``."""

    model_config = ConfigDict(frozen=True)

    start: str
    dev: str


class PackageManifest(BaseModel):
    """Explicit schema of the generated ``package.json``.

    Field order is the serialisation order.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    version: str = Field(default=MANIFEST_VERSION)
    type: Optional[Literal["module"]] = Field(default=None)
    scripts: Scripts
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    def to_dict(self) -> dict[str, object]:
        """Plain ``package.json`` mapping (``type`` omitted when unset)."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Serialise with two-space indentation and a trailing newline."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def expected_packages(features: ActiveFeatureSet) -> tuple[list[str], list[str]]:
    """Return ``(runtime, dev)`` package names implied by *features*, in order."""
    runtime: list[str] = list(BASE_RUNTIME)
    dev: list[str] = list(BASE_DEV)
    active = features.enabled()

    for name in active:
        runtime.extend(FEATURE_RULES[name].runtime)

    if features.is_typescript:
        dev.extend(TYPESCRIPT_TOOLCHAIN)
        for name in active:
            dev.extend(FEATURE_RULES[name].typings)

    for name in active:
        dev.extend(FEATURE_RULES[name].dev)

    return runtime, dev


def build_scripts(language: Language) -> Scripts:
    """Start/dev scripts that run the entry point with the right runner."""
    if language is Language.TYPESCRIPT:
        return Scripts(start="ts-node src/server.ts", dev="nodemon src/server.ts")
    return Scripts(start="node server.js", dev="nodemon server.js")


def resolve(
    options: OptionSet,
    versions: dict[str, str] | None = None,
) -> tuple[PackageManifest, ActiveFeatureSet]:
    """Derive the dependency manifest and the Active Feature Set.

    Args:
        options: A validated option set.
        versions: ``{package: version}`` overrides. Packages missing from the
            table use ``DEFAULT_VERSIONS``.

    Returns:
        ``(manifest, features)``.
    """
    table = {**DEFAULT_VERSIONS, **(versions or {})}
    features = options.features
    runtime, dev = expected_packages(features)

    manifest = PackageManifest(
        name=options.project_name,
        type="module" if options.language is Language.JAVASCRIPT else None,
        scripts=build_scripts(options.language),
        dependencies={pkg: table[pkg] for pkg in runtime},
        dev_dependencies={pkg: table[pkg] for pkg in dev},
    )
    return manifest, features
