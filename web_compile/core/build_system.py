"""
Build system contract — what the web builder needs from the target executor.

The executor itself (DAG scheduling, caching, running compilers) lives
outside this package.  The builder hands it a ``WebServiceWorkerTarget``
carrying the compiler configs, plus an ``Environment``, and gets back a
``BuildResult``.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Protocol, Tuple

from web_compile.core.compiler_config import WebCompilerConfig
from web_compile.core.environment import Environment

WEB_SERVICE_WORKER = "web_service_worker"


@dataclass(frozen=True)
class WebServiceWorkerTarget:
    """Top-level web target: compiles every config, then the service worker."""

    compiler_configs: Tuple[WebCompilerConfig, ...]
    name: str = WEB_SERVICE_WORKER


@dataclass
class ExceptionMeasurement:
    """A failure raised while running one named target."""

    target: str
    exception: BaseException
    stack_trace: Any | None = None

    @property
    def description(self) -> str:
        message = str(self.exception)
        kind = type(self.exception).__name__
        return f"{kind}: {message}" if message else kind


@dataclass
class BuildResult:
    success: bool
    exceptions: Dict[str, ExceptionMeasurement] = field(default_factory=dict)


class BuildSystem(Protocol):
    def build(self, target: WebServiceWorkerTarget, environment: Environment) -> BuildResult:
        ...
