"""
Project — handle on the application being built, and web plugin detection.

Plugin detection reads ``.flutter-plugins-dependencies``, the JSON file the
package resolver writes next to ``pubspec.yaml``::

    {"plugins": {"web": [{"name": "url_launcher_web", ...}], ...}}
"""
import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Union

logger = logging.getLogger(__name__)

PUBSPEC = "pubspec.yaml"
PLUGINS_DEPENDENCIES = ".flutter-plugins-dependencies"

_NAME_RE = re.compile(r"^name:\s*([A-Za-z0-9_]+)\s*$", re.MULTILINE)


@dataclass(frozen=True)
class WebProject:
    """An application directory containing a pubspec."""

    directory: Path
    name: str

    @classmethod
    def from_directory(cls, directory: Union[str, Path]) -> "WebProject":
        directory = Path(directory)
        name = directory.name
        pubspec = directory / PUBSPEC
        if pubspec.is_file():
            match = _NAME_RE.search(pubspec.read_text())
            if match:
                name = match.group(1)
        return cls(directory=directory, name=name)

    @property
    def lib_dir(self) -> Path:
        return self.directory / "lib"

    @property
    def build_dir(self) -> Path:
        return self.directory / "build"

    @property
    def web_output_dir(self) -> Path:
        return self.build_dir / "web"


class PluginDetector(Protocol):
    def has_web_plugins(self, project: WebProject) -> bool:
        ...


def has_web_plugins(project: WebProject) -> bool:
    """True when the resolved dependencies include at least one web plugin."""
    path = project.directory / PLUGINS_DEPENDENCIES
    if not path.is_file():
        logger.debug(f"{PLUGINS_DEPENDENCIES} not found in {project.directory}")
        return False

    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        logger.debug(f"Could not read {path}: {e}")
        return False

    plugins = data.get("plugins") if isinstance(data, dict) else None
    if not isinstance(plugins, dict):
        return False
    web = plugins.get("web")
    return isinstance(web, list) and len(web) > 0


class DependenciesFilePluginDetector:
    """Default PluginDetector backed by ``.flutter-plugins-dependencies``."""

    def has_web_plugins(self, project: WebProject) -> bool:
        return has_web_plugins(project)
