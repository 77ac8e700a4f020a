"""Template Library: renders every generated source file.

Each artifact is rendered from ``<variant>/<artifact>.j2`` with a context
built from the Active Feature Set, the caller's layout plan (for import specifiers)
and the fixed response policy below.  Rendering is pure and deterministic:
the same feature set always yields byte-identical text.
"""

from __future__ import annotations

from typing import Any

from expressgen.scaffolder.fragments import controller_imports, entry_point_fragments
from expressgen.scaffolder.layout import Artifact, LayoutPlan
from expressgen.scaffolder.options import ActiveFeatureSet
from expressgen.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Response policy
# ---------------------------------------------------------------------------

SUCCESS_STATUS = 200
DEFAULT_ERROR_STATUS = 500
DEFAULT_ERROR_MESSAGE = "Internal server error"

# Error name -> fixed client-facing message.
ERROR_MESSAGE_OVERRIDES: dict[str, str] = {
    "CastError": "Invalid ID",
}

ROUTE_PREFIX = "/api/hello"
HELLO_MESSAGE = "Hello from API!"

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

ENV_PORT_KEY = "PORT"
ENV_DB_KEY = "MONGO_URI"
DEFAULT_PORT = 5000
DEFAULT_DB_URI = "mongodb://localhost:27017/mydb"

ENV_DEFAULTS: dict[str, str] = {
    ENV_PORT_KEY: str(DEFAULT_PORT),
    ENV_DB_KEY: DEFAULT_DB_URI,
}

# Emission order of the template-produced files.
ARTIFACT_ORDER: tuple[Artifact, ...] = (
    Artifact.ENTRY_POINT,
    Artifact.CONTROLLER,
    Artifact.ROUTES,
    Artifact.ERROR_MIDDLEWARE,
    Artifact.ERROR_CLASS,
    Artifact.DB_CONNECTOR,
    Artifact.RESPONSE_HELPER,
)


def scheduled_artifacts(features: ActiveFeatureSet) -> tuple[Artifact, ...]:
    """Artifacts emitted for *features*, in emission order.

    The error middleware and the error class always travel together.
    """
    scheduled: list[Artifact] = []
    for artifact in ARTIFACT_ORDER:
        if artifact in (Artifact.ERROR_MIDDLEWARE, Artifact.ERROR_CLASS):
            if not features.use_error_handling:
                continue
        elif artifact is Artifact.DB_CONNECTOR and not features.use_database:
            continue
        scheduled.append(artifact)
    return tuple(scheduled)


def render_env_file() -> str:
    """Content of the ``.env`` file: fixed ``KEY=VALUE`` lines."""
    return "".join(f"{key}={value}\n" for key, value in ENV_DEFAULTS.items())


class TemplateLibrary:
    """Catalog of file templates, one per artifact and language variant."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    @staticmethod
    def template_path(artifact: Artifact, features: ActiveFeatureSet) -> str:
        return f"{features.language.value.lower()}/{artifact.value}.j2"

    def render(
        self,
        artifact: Artifact,
        features: ActiveFeatureSet,
        layout: LayoutPlan,
    ) -> str:
        """Render *artifact* for *features*, resolving imports through *layout*.

        Raises:
            ValueError: If *artifact* is not scheduled for *features*; rendering
                it would produce a file nothing else references.  Also raised
                when *layout* was planned for the other language.
        """
        if layout.language is not features.language:
            raise ValueError(
                f"Layout plan is for {layout.language.value}, "
                f"features request {features.language.value}"
            )
        if artifact not in scheduled_artifacts(features):
            raise ValueError(
                f"Artifact '{artifact.value}' is not scheduled for features "
                f"{features.enabled()!r}"
            )
        context = self._build_context(artifact, features, layout)
        return self.renderer.render(self.template_path(artifact, features), context)

    def render_all(
        self, features: ActiveFeatureSet, layout: LayoutPlan
    ) -> dict[Artifact, str]:
        """Render every scheduled artifact, in emission order."""
        return {
            artifact: self.render(artifact, features, layout)
            for artifact in scheduled_artifacts(features)
        }

    # -- Context building --------------------------------------------------

    def _build_context(
        self,
        artifact: Artifact,
        features: ActiveFeatureSet,
        layout: LayoutPlan,
    ) -> dict[str, Any]:
        """Build the Jinja2 context for one artifact."""
        context: dict[str, Any] = {
            "features": features,
            "success_status": SUCCESS_STATUS,
            "default_error_status": DEFAULT_ERROR_STATUS,
            "default_error_message": DEFAULT_ERROR_MESSAGE,
            "error_overrides": ERROR_MESSAGE_OVERRIDES,
            "route_prefix": ROUTE_PREFIX,
            "hello_message": HELLO_MESSAGE,
            "env_port_key": ENV_PORT_KEY,
            "env_db_key": ENV_DB_KEY,
            "default_port": DEFAULT_PORT,
            "default_db_uri": DEFAULT_DB_URI,
        }
        if artifact is Artifact.ENTRY_POINT:
            context.update(entry_point_fragments(features, layout))
        elif artifact is Artifact.ROUTES:
            context["controller_import"] = layout.module_specifier(
                Artifact.ROUTES, Artifact.CONTROLLER
            )
        elif artifact is Artifact.CONTROLLER:
            context["controller_imports"] = controller_imports(features, layout)
        return context
