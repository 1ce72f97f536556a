"""
Environment — the flat key/value defines handed to the build-target executor.

The environment is the same whatever compiler backends were requested;
backend options travel on the target, not here.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from web_compile.core.build_info import BuildInfo
from web_compile.core.project import WebProject
from web_compile.core.service_worker import ServiceWorkerStrategy

# Define keys
TARGET_FILE = "TargetFile"
HAS_WEB_PLUGINS = "HasWebPlugins"
SERVICE_WORKER_STRATEGY = "ServiceWorkerStrategy"
BUILD_MODE = "BuildMode"
DART_OBFUSCATION = "DartObfuscation"
TRACK_WIDGET_CREATION = "TrackWidgetCreation"
TREE_SHAKE_ICONS = "TreeShakeIcons"


@dataclass(frozen=True)
class Environment:
    """Executor input. Built once per build; never read back by the builder."""

    project_dir: Path
    output_dir: Path
    engine_version: str
    generate_dart_plugin_registry: bool
    defines: Dict[str, str] = field(default_factory=dict)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_environment(
    project: WebProject,
    target_file: str,
    build_info: BuildInfo,
    has_plugins: bool,
    strategy: ServiceWorkerStrategy,
    engine_version: str,
) -> Environment:
    """Merge project, build mode and strategy into one Environment."""
    defines = {
        TARGET_FILE: target_file,
        HAS_WEB_PLUGINS: _flag(has_plugins),
        SERVICE_WORKER_STRATEGY: strategy.cli_name,
        BUILD_MODE: build_info.mode_name,
        DART_OBFUSCATION: _flag(build_info.obfuscate),
        TRACK_WIDGET_CREATION: _flag(build_info.track_widget_creation),
        TREE_SHAKE_ICONS: _flag(build_info.tree_shake_icons),
    }
    return Environment(
        project_dir=project.directory,
        output_dir=project.web_output_dir,
        engine_version=engine_version,
        generate_dart_plugin_registry=has_plugins,
        defines=defines,
    )
