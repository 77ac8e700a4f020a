"""Tests for the layout planner."""

from __future__ import annotations

import posixpath

import pytest

from expressgen.scaffolder.layout import CATEGORY_DIRS, Artifact, plan
from expressgen.scaffolder.options import Language

pytestmark = pytest.mark.unit


class TestJavaScriptPlan:
    def test_directories(self):
        assert plan(Language.JAVASCRIPT).directories == (
            "controllers",
            "routes",
            "middlewares",
            "utils",
        )

    def test_paths(self):
        layout = plan(Language.JAVASCRIPT)
        assert layout.path_for(Artifact.ENTRY_POINT) == "server.js"
        assert layout.path_for(Artifact.ROUTES) == "routes/helloRoutes.js"
        assert layout.path_for(Artifact.CONTROLLER) == "controllers/helloController.js"
        assert layout.path_for(Artifact.ERROR_MIDDLEWARE) == "middlewares/errorHandler.js"
        assert layout.path_for(Artifact.ERROR_CLASS) == "utils/errorClass.js"
        assert layout.path_for(Artifact.DB_CONNECTOR) == "utils/mongoConnect.js"
        assert layout.path_for(Artifact.RESPONSE_HELPER) == "utils/apiResponse.js"

    def test_no_compiler_config(self):
        assert plan(Language.JAVASCRIPT).compiler_config_path is None

    def test_module_specifiers_keep_extension(self):
        layout = plan(Language.JAVASCRIPT)
        assert (
            layout.module_specifier(Artifact.ENTRY_POINT, Artifact.ROUTES)
            == "./routes/helloRoutes.js"
        )
        assert (
            layout.module_specifier(Artifact.CONTROLLER, Artifact.ERROR_MIDDLEWARE)
            == "../middlewares/errorHandler.js"
        )


class TestTypeScriptPlan:
    def test_directories_nested_under_src(self):
        assert plan(Language.TYPESCRIPT).directories == (
            "src",
            "src/controllers",
            "src/routes",
            "src/middlewares",
            "src/utils",
        )

    def test_paths(self):
        layout = plan(Language.TYPESCRIPT)
        assert layout.path_for(Artifact.ENTRY_POINT) == "src/server.ts"
        assert layout.path_for(Artifact.DB_CONNECTOR) == "src/utils/mongoConnect.ts"

    def test_compiler_config_at_root(self):
        assert plan(Language.TYPESCRIPT).compiler_config_path == "tsconfig.json"

    def test_module_specifiers_drop_extension(self):
        layout = plan(Language.TYPESCRIPT)
        assert (
            layout.module_specifier(Artifact.ENTRY_POINT, Artifact.DB_CONNECTOR)
            == "./utils/mongoConnect"
        )
        assert (
            layout.module_specifier(Artifact.ROUTES, Artifact.CONTROLLER)
            == "../controllers/helloController"
        )


class TestPlanInvariants:
    @pytest.mark.parametrize("language", list(Language))
    def test_every_parent_directory_is_planned(self, language):
        layout = plan(language)
        for path in layout.artifact_paths.values():
            parent = posixpath.dirname(path)
            assert parent == "" or parent in layout.directories

    @pytest.mark.parametrize("language", list(Language))
    def test_all_artifacts_planned(self, language):
        assert set(plan(language).artifact_paths) == set(Artifact)

    def test_variants_differ_only_in_prefix_and_extension(self):
        js = plan(Language.JAVASCRIPT)
        ts = plan(Language.TYPESCRIPT)
        for artifact in Artifact:
            js_path = js.path_for(artifact)
            ts_path = ts.path_for(artifact)
            assert ts_path == "src/" + js_path[: -len(".js")] + ".ts"
            assert js.category_of(artifact) == ts.category_of(artifact)

    @pytest.mark.parametrize("language", list(Language))
    def test_same_category_directories(self, language):
        layout = plan(language)
        leaves = [posixpath.basename(d) for d in layout.directories if d != "src"]
        assert tuple(leaves) == CATEGORY_DIRS

    def test_fixed_config_paths(self):
        for language in Language:
            layout = plan(language)
            assert layout.manifest_path == "package.json"
            assert layout.env_path == ".env"
