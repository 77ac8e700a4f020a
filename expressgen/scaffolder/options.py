"""Option Set and Active Feature Set models.

The ``OptionSet`` is the validated, immutable record of the user's choices.
The ``ActiveFeatureSet`` is the read-only view of it that every template,
the feature resolver and the layout planner consult, so a feature flag is
only ever checked against one value.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from expressgen.errors import InvalidOption


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Language(str, Enum):
    """Language variant of the generated project."""
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"

    @classmethod
    def parse(cls, value: str) -> "Language":
        """Case-insensitive lookup (``"ts"``, ``"typescript"``, ``"TypeScript"``)."""
        lowered = value.strip().lower()
        if lowered in ("ts", "typescript"):
            return cls.TYPESCRIPT
        if lowered in ("js", "javascript"):
            return cls.JAVASCRIPT
        raise ValueError(f"Unknown language: {value!r}")


# Canonical feature order.  The resolver, the fragment builders and the CLI
# all iterate features in this order so generated output stays stable.
FEATURE_NAMES: tuple[str, ...] = (
    "use_database",
    "enable_cors",
    "use_error_handling",
    "use_env_file",
    "use_request_logging",
    "use_linting",
)

_INVALID_NAME_CHARS = ("/", "\\", "\0")


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class ActiveFeatureSet(BaseModel):
    """Feature flags that gate conditional content, independent of naming."""

    model_config = ConfigDict(frozen=True)

    language: Language
    use_database: bool = False
    enable_cors: bool = False
    use_error_handling: bool = False
    use_env_file: bool = False
    use_request_logging: bool = False
    use_linting: bool = False

    @property
    def is_typescript(self) -> bool:
        return self.language is Language.TYPESCRIPT

    def enabled(self) -> tuple[str, ...]:
        """Names of the active features, in canonical order."""
        return tuple(name for name in FEATURE_NAMES if getattr(self, name))


class OptionSet(BaseModel):
    """The resolved set of user choices driving one generation run."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Name of the project directory")
    language: Language = Field(default=Language.JAVASCRIPT)
    use_database: bool = Field(default=False, description="Generate a MongoDB connector")
    enable_cors: bool = Field(default=False, description="Register the CORS middleware")
    use_error_handling: bool = Field(
        default=False, description="Generate the global error handler and error class"
    )
    use_env_file: bool = Field(default=False, description="Write .env and load it with dotenv")
    use_request_logging: bool = Field(
        default=False, description="Register morgan request logging"
    )
    use_linting: bool = Field(default=False, description="Add ESLint as a dev dependency")

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("Project name cannot be empty")
        if name in (".", ".."):
            raise ValueError(f"'{name}' is not a valid directory name")
        if any(ch in name for ch in _INVALID_NAME_CHARS):
            raise ValueError("Project name must be a single directory name")
        return name

    @property
    def features(self) -> ActiveFeatureSet:
        """Derive the Active Feature Set for this option set."""
        return ActiveFeatureSet(
            language=self.language,
            **{name: getattr(self, name) for name in FEATURE_NAMES},
        )


def build_options(**fields: Any) -> OptionSet:
    """Construct an ``OptionSet``, converting validation failures to ``InvalidOption``."""
    try:
        return OptionSet(**fields)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "options"
        message = first.get("msg", str(exc))
        # Pydantic prefixes custom validator messages with "Value error, ".
        message = message.removeprefix("Value error, ")
        raise InvalidOption(field, message) from exc
