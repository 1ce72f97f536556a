"""
test_config — environment-driven settings and their use as builder defaults.
"""
from web_compile.config import Settings
from web_compile.core.build_info import BuildInfo
from web_compile.core.build_system import BuildResult
from web_compile.core.compiler_config import JsCompilerConfig
from web_compile.core.service_worker import ServiceWorkerStrategy
from web_compile.runner import WebBuilder


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ENGINE_REVISION", raising=False)
        monkeypatch.delenv("REPORT_OUTPUT_DIR", raising=False)
        s = Settings(_env_file=None)
        assert s.ENGINE_REVISION == "unknown"
        assert s.REPORT_OUTPUT_DIR is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ENGINE_REVISION", "9.8.7")
        monkeypatch.setenv("REPORT_OUTPUT_DIR", "/tmp/reports")
        s = Settings(_env_file=None)
        assert s.ENGINE_REVISION == "9.8.7"
        assert s.REPORT_OUTPUT_DIR == "/tmp/reports"


class TestBuilderDefaults:

    def test_engine_version_from_settings(self, monkeypatch, make_build_system):
        monkeypatch.setattr("web_compile.runner.settings", Settings(_env_file=None, ENGINE_REVISION="1.2.3"))
        builder = WebBuilder(make_build_system(BuildResult(success=True)))
        assert builder.engine_version == "1.2.3"

    def test_report_dir_from_settings(self, monkeypatch, make_build_system, tmp_path):
        monkeypatch.setattr(
            "web_compile.runner.settings",
            Settings(_env_file=None, REPORT_OUTPUT_DIR=str(tmp_path)),
        )
        builder = WebBuilder(make_build_system(BuildResult(success=True)))
        assert builder.report_dir == tmp_path

    def test_explicit_arguments_win(self, monkeypatch, make_build_system, tmp_path):
        monkeypatch.setattr(
            "web_compile.runner.settings",
            Settings(_env_file=None, ENGINE_REVISION="1.2.3", REPORT_OUTPUT_DIR=str(tmp_path)),
        )
        builder = WebBuilder(
            make_build_system(BuildResult(success=True)),
            engine_version="9.9.9",
            report_dir=tmp_path / "other",
        )
        assert builder.engine_version == "9.9.9"
        assert builder.report_dir == tmp_path / "other"

    def test_framework_version_reported(self, monkeypatch, make_build_system, project):
        monkeypatch.setattr(
            "web_compile.runner.settings",
            Settings(_env_file=None, FRAMEWORK_VERSION="1.0.0"),
        )
        builder = WebBuilder(make_build_system(BuildResult(success=True)))
        report = builder.build_web(
            project, "target", BuildInfo.debug(), ServiceWorkerStrategy.OFFLINE_FIRST,
            [JsCompilerConfig()],
        )
        assert report.framework_version == "1.0.0"
