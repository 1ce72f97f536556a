"""
Errors — user-facing failures raised by the web build.

A ``ToolExit`` ends the build with a message meant for the person running
it; the detailed per-target breakdown goes to the error log channel.
"""
from typing import List


class ToolExit(Exception):
    """Fatal, user-facing failure. ``message`` is shown verbatim."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self) -> str:
        return self.message


class WebCompilationFailed(ToolExit):
    """One or more build targets failed; the whole web build is aborted."""

    def __init__(
        self,
        message: str,
        failures: List[str] | None = None,
        exit_code: int = 1,
    ):
        super().__init__(message, exit_code=exit_code)
        self.failures = list(failures or [])
