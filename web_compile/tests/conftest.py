"""
Shared pytest fixtures for web_compile tests.

Provides a minimal application directory on disk and a fake build system
that records what it was asked to build and returns a canned result.
"""
import json
import textwrap
from pathlib import Path
from typing import List, Tuple

import pytest

from web_compile.core.build_system import BuildResult, WebServiceWorkerTarget
from web_compile.core.environment import Environment
from web_compile.core.project import WebProject
from web_compile.core.telemetry import RecordingAnalytics

PUBSPEC = textwrap.dedent("""\
    name: my_app
    environment:
      sdk: '^3.5.0'
""")


class FakeBuildSystem:
    """Records every build call and returns *result* (or raises *error*)."""

    def __init__(self, result: BuildResult, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: List[Tuple[WebServiceWorkerTarget, Environment]] = []

    def build(self, target: WebServiceWorkerTarget, environment: Environment) -> BuildResult:
        self.calls.append((target, environment))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """Application directory with a pubspec and an empty lib/."""
    d = tmp_path / "my_app_dir"
    (d / "lib").mkdir(parents=True)
    (d / "pubspec.yaml").write_text(PUBSPEC)
    return d


@pytest.fixture
def project(project_dir) -> WebProject:
    return WebProject.from_directory(project_dir)


@pytest.fixture
def analytics() -> RecordingAnalytics:
    return RecordingAnalytics()


@pytest.fixture
def write_plugin_dependencies(project_dir):
    """Write .flutter-plugins-dependencies listing the given web plugins."""

    def _write(web_plugins: List[str]) -> Path:
        path = project_dir / ".flutter-plugins-dependencies"
        path.write_text(json.dumps({
            "plugins": {
                "web": [{"name": name, "dependencies": []} for name in web_plugins],
                "android": [],
            },
        }))
        return path

    return _write


@pytest.fixture
def make_build_system():
    """Factory for FakeBuildSystem."""
    return FakeBuildSystem
