"""expressgen configuration.

Centralised, typed configuration for the generator.  All settings use
Pydantic v2 models so they can be validated at construction time and
serialised to/from JSON or environment variables without boiler-plate.

npm version strings are treated as opaque constants: the generator never
inspects them, it only copies them into ``package.json``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# npm package versions
# ---------------------------------------------------------------------------

DEFAULT_VERSIONS: dict[str, str] = {
    "express": "^5.1.0",
    "nodemon": "^3.1.10",
    "mongoose": "^8.0.0",
    "cors": "^2.8.5",
    "morgan": "^1.10.0",
    "dotenv": "^16.4.7",
    "typescript": "^5.3.3",
    "ts-node": "^10.9.2",
    "@types/node": "^20.11.17",
    "@types/express": "^4.17.21",
    "@types/cors": "^2.8.13",
    "@types/morgan": "^1.9.4",
    "eslint": "^8.57.0",
}


class PromptDefaults(BaseModel):
    """Default answers offered by the interactive prompts."""

    project_name: str = Field(default="my-app")
    language: str = Field(default="JavaScript")
    use_database: bool = Field(default=True)
    enable_cors: bool = Field(default=True)
    use_error_handling: bool = Field(default=True)
    use_env_file: bool = Field(default=True)
    use_request_logging: bool = Field(default=False)
    use_linting: bool = Field(default=True)


class Config(BaseModel):
    """Global generator configuration.

    Instances are typically created once by the CLI entry point and then
    passed to ``ProjectGenerator``.
    """

    output_dir: Path = Field(default=Path("."))
    versions: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_VERSIONS))
    defaults: PromptDefaults = Field(default_factory=PromptDefaults)

    @field_validator("versions")
    @classmethod
    def _fill_missing_versions(cls, value: dict[str, str]) -> dict[str, str]:
        # A partial table only pins the packages it lists.
        return {**DEFAULT_VERSIONS, **value}

    def version_for(self, package: str) -> str:
        """Return the configured version for *package*.

        Raises:
            KeyError: If no version is configured for the package.
        """
        return self.versions[package]

    def with_versions(self, overrides: dict[str, str]) -> "Config":
        """Return a copy with *overrides* merged on top of the current versions."""
        return self.model_copy(update={"versions": {**self.versions, **overrides}})

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON.

        A config file only needs to list the versions it pins differently.
        """
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"Configuration file must contain a JSON object: {path}")
        return cls.model_validate(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            EXPRESSGEN_OUTPUT_DIR, EXPRESSGEN_VERSIONS (a JSON object of
            ``{package: version}`` overrides).
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EXPRESSGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["EXPRESSGEN_OUTPUT_DIR"])

        if os.environ.get("EXPRESSGEN_VERSIONS"):
            overrides = json.loads(os.environ["EXPRESSGEN_VERSIONS"])
            if not isinstance(overrides, dict):
                raise ValueError("EXPRESSGEN_VERSIONS must be a JSON object")
            kwargs["versions"] = {str(k): str(v) for k, v in overrides.items()}

        return cls(**kwargs)
