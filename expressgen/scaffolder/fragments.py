"""Fragment builders for the conditional parts of generated source files.

Each builder returns the list of source lines contributed by the active
features (an empty list when none apply).  Templates only splice these
lines in, so every conditional branch can be tested on its own.
"""

from __future__ import annotations

from expressgen.scaffolder.layout import Artifact, LayoutPlan
from expressgen.scaffolder.options import ActiveFeatureSet

REQUEST_LOG_FORMAT = "dev"


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def library_imports(features: ActiveFeatureSet) -> list[str]:
    """Third-party middleware/loader imports for the entry point."""
    lines: list[str] = []
    if features.enable_cors:
        lines.append('import cors from "cors";')
    if features.use_request_logging:
        lines.append('import morgan from "morgan";')
    if features.use_env_file:
        lines.append('import dotenv from "dotenv";')
    return lines


def local_imports(features: ActiveFeatureSet, plan: LayoutPlan) -> list[str]:
    """Imports of other generated modules for the entry point."""
    specifier = plan.module_specifier
    lines = [f'import helloRoutes from "{specifier(Artifact.ENTRY_POINT, Artifact.ROUTES)}";']
    if features.use_error_handling:
        lines.append(
            "import { globalErrorHandler } from "
            f'"{specifier(Artifact.ENTRY_POINT, Artifact.ERROR_MIDDLEWARE)}";'
        )
    if features.use_database:
        lines.append(
            f'import mongoConnect from "{specifier(Artifact.ENTRY_POINT, Artifact.DB_CONNECTOR)}";'
        )
    return lines


def bootstrap_calls(features: ActiveFeatureSet) -> list[str]:
    """Statements run before the app is created."""
    if features.use_env_file:
        return ["dotenv.config();"]
    return []


def middleware_registrations(features: ActiveFeatureSet) -> list[str]:
    """``app.use`` lines for request middleware, registered before the routes."""
    lines: list[str] = []
    if features.enable_cors:
        lines.append("app.use(cors());")
    if features.use_request_logging:
        lines.append(f'app.use(morgan("{REQUEST_LOG_FORMAT}"));')
    return lines


def error_handler_registration(features: ActiveFeatureSet) -> list[str]:
    """Registration of the global error handler, after the routes."""
    if features.use_error_handling:
        return ["app.use(globalErrorHandler);"]
    return []


def startup_calls(features: ActiveFeatureSet) -> list[str]:
    """Calls made once at startup (database connection)."""
    if features.use_database:
        return ["mongoConnect();"]
    return []


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------

def controller_imports(features: ActiveFeatureSet, plan: LayoutPlan) -> list[str]:
    """Error-handling helper imports for the controller module."""
    if not features.use_error_handling:
        return []
    specifier = plan.module_specifier
    return [
        "import { tryCatch } from "
        f'"{specifier(Artifact.CONTROLLER, Artifact.ERROR_MIDDLEWARE)}";',
        f'import ErrorHandler from "{specifier(Artifact.CONTROLLER, Artifact.ERROR_CLASS)}";',
    ]


def entry_point_fragments(features: ActiveFeatureSet, plan: LayoutPlan) -> dict[str, list[str]]:
    """All entry-point fragments keyed by their template slot."""
    return {
        "library_imports": library_imports(features),
        "local_imports": local_imports(features, plan),
        "bootstrap": bootstrap_calls(features),
        "middleware": middleware_registrations(features),
        "error_handler": error_handler_registration(features),
        "startup": startup_calls(features),
    }
