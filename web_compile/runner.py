"""
Web builder — top-level orchestration: project + configs → web build.

Ties the pre-build migration, environment construction, the external
build system and result handling into a single ``WebBuilder.build_web``
call.  On success analytics are sent and a report is returned; on failure
every target error is logged and a ``WebCompilationFailed`` is raised with
no analytics sent.
"""
import logging
import time
from pathlib import Path
from typing import Sequence

from web_compile.config import settings
from web_compile.core.build_info import BuildInfo
from web_compile.core.build_system import (
    BuildResult,
    BuildSystem,
    ExceptionMeasurement,
    WebServiceWorkerTarget,
)
from web_compile.core.compiler_config import WebCompilerConfig, validate_compiler_configs
from web_compile.core.environment import Environment, build_environment
from web_compile.core.migrations import scrub_generated_plugin_registrant
from web_compile.core.project import DependenciesFilePluginDetector, PluginDetector, WebProject
from web_compile.core.service_worker import ServiceWorkerStrategy
from web_compile.core.summary import summarize_settings
from web_compile.core.telemetry import Analytics, BuildInfoEvent, RecordingAnalytics, TimingEvent
from web_compile.errors import WebCompilationFailed
from web_compile.io.schema import BuildStatus, TargetFailure, WebBuildReport, now_iso
from web_compile.io.writer import write_report
from web_compile.policy.profile import WebBuildProfile

logger = logging.getLogger(__name__)


class WebBuilder:
    """Builds a project for the web with one or more compiler backends."""

    def __init__(
        self,
        build_system: BuildSystem,
        analytics: Analytics | None = None,
        plugin_detector: PluginDetector | None = None,
        engine_version: str | None = None,
        profile: WebBuildProfile | None = None,
        report_dir: Path | None = None,
    ):
        self.build_system = build_system
        self.analytics = analytics if analytics is not None else RecordingAnalytics()
        self.plugin_detector = plugin_detector or DependenciesFilePluginDetector()
        self.engine_version = engine_version or settings.ENGINE_REVISION
        self.framework_version = settings.FRAMEWORK_VERSION
        self.profile = profile or WebBuildProfile.v0()
        if report_dir is None and settings.REPORT_OUTPUT_DIR:
            report_dir = Path(settings.REPORT_OUTPUT_DIR)
        self.report_dir = report_dir

    def build_web(
        self,
        project: WebProject,
        target_file: str,
        build_info: BuildInfo,
        strategy: ServiceWorkerStrategy,
        compiler_configs: Sequence[WebCompilerConfig],
    ) -> WebBuildReport:
        """
        Compile *target_file* of *project* with every config in *compiler_configs*.

        Returns the build report on success.
        Raises WebCompilationFailed if any target fails.
        """
        validate_compiler_configs(compiler_configs)
        configs = tuple(compiler_configs)

        started_at = now_iso()
        start = time.monotonic()
        logger.info(f"Compiling {target_file} for the Web...")

        # ── Step 1: pre-build migration ──────────────────────────────────
        scrub_generated_plugin_registrant(project)

        # ── Step 2: environment ──────────────────────────────────────────
        has_plugins = self.plugin_detector.has_web_plugins(project)
        environment = build_environment(
            project,
            target_file,
            build_info,
            has_plugins,
            strategy,
            self.engine_version,
        )

        # ── Step 3: run the service worker target ────────────────────────
        target = WebServiceWorkerTarget(compiler_configs=configs, name=self.profile.target_name)
        result = self._run(target, environment)
        elapsed_ms = int((time.monotonic() - start) * 1000)

        report = WebBuildReport(
            profile_id=self.profile.profile_id,
            project_name=project.name,
            target_file=target_file,
            build_mode=build_info.mode_name,
            service_worker_strategy=strategy.cli_name,
            engine_version=self.engine_version,
            framework_version=self.framework_version,
            compile_targets=[c.compile_target.value for c in configs],
            renderers=[c.renderer.value for c in configs],
            settings=summarize_settings(configs),
            status=BuildStatus.SUCCESS if result.success else BuildStatus.FAILED,
            started_at=started_at,
            finished_at=now_iso(),
            duration_ms=elapsed_ms,
        )

        # ── Step 4: interpret ────────────────────────────────────────────
        self._interpret_result(result, report, configs, target_file, elapsed_ms)
        return report

    def _run(self, target: WebServiceWorkerTarget, environment: Environment) -> BuildResult:
        """Run the build system; an exception from it counts as a failed target."""
        try:
            return self.build_system.build(target, environment)
        except Exception as e:
            return BuildResult(
                success=False,
                exceptions={
                    target.name: ExceptionMeasurement(target.name, e, e.__traceback__),
                },
            )

    def _interpret_result(
        self,
        result: BuildResult,
        report: WebBuildReport,
        configs: Sequence[WebCompilerConfig],
        target_file: str,
        elapsed_ms: int,
    ) -> None:
        if not result.success:
            failures = []
            for measurement in result.exceptions.values():
                line = f"Target {measurement.target} failed: {measurement.description}"
                logger.error(line)
                failures.append(line)
                report.failures.append(
                    TargetFailure(target=measurement.target, error=measurement.description)
                )

            error = WebCompilationFailed(self.profile.failure_message, failures=failures)
            cause = next(iter(result.exceptions.values()), None)
            try:
                if cause is not None:
                    raise error from cause.exception
                raise error
            finally:
                self._save(report)

        logger.info(f"Compiled {target_file} for the Web in {elapsed_ms / 1000:.1f}s.")

        self.analytics.send(
            BuildInfoEvent(
                label=self.profile.analytics_label,
                build_type=self.profile.analytics_build_type,
                settings=report.settings,
            )
        )
        if len(configs) > 1:
            self.analytics.send(
                TimingEvent(
                    workflow=self.profile.timing_workflow,
                    variable_name=self.profile.dual_compile_variable,
                    elapsed_ms=elapsed_ms,
                )
            )

        self._save(report)

    def _save(self, report: WebBuildReport) -> None:
        """Write the report if a report directory is configured; never fails the build."""
        if self.report_dir is None:
            return
        try:
            path = write_report(report, self.report_dir)
        except OSError as e:
            logger.error(f"Could not write build report to {self.report_dir}: {e}")
            return
        logger.debug(f"Build report saved: {path}")
