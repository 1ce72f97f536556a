"""
Schema — Pydantic model for the web build report.

One report per build (web_build_report.json), written on success and on
failure.  Runtime contract fields: package_name, package_version,
schema_version, profile_id.
"""
from datetime import datetime, timezone
from enum import Enum, unique
from typing import List

from pydantic import BaseModel, Field

from web_compile import PACKAGE_NAME, SCHEMA_VERSION, __version__


@unique
class BuildStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class TargetFailure(BaseModel):
    """One failed target, as logged."""
    target: str
    error: str


class WebBuildReport(BaseModel):
    package_name: str = PACKAGE_NAME
    package_version: str = __version__
    schema_version: str = SCHEMA_VERSION
    profile_id: str

    project_name: str
    target_file: str
    build_mode: str
    service_worker_strategy: str
    engine_version: str
    framework_version: str = "unknown"

    compile_targets: List[str] = Field(default_factory=list)
    renderers: List[str] = Field(default_factory=list)
    settings: str = ""

    status: BuildStatus
    failures: List[TargetFailure] = Field(default_factory=list)

    started_at: str                 # ISO 8601
    finished_at: str | None = None
    duration_ms: int = 0


def now_iso() -> str:
    """Current UTC time as ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()
