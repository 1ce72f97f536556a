"""
Profile — fixed names and messages of the web build.

Keeps every externally visible string (target id, analytics labels,
failure message) in one place so the runner carries no literals.
"""
from dataclasses import dataclass

from web_compile.core.build_system import WEB_SERVICE_WORKER


@dataclass(frozen=True)
class WebBuildProfile:
    profile_id: str
    target_name: str
    analytics_label: str
    analytics_build_type: str
    timing_workflow: str
    dual_compile_variable: str
    failure_message: str

    @classmethod
    def v0(cls) -> "WebBuildProfile":
        return cls(
            profile_id="web-js-wasm",
            target_name=WEB_SERVICE_WORKER,
            analytics_label="web-compile",
            analytics_build_type="web",
            timing_workflow="build",
            dual_compile_variable="dual-compile",
            failure_message="Failed to compile application for the Web.",
        )
