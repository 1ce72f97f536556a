"""
Build info — build mode plus the flags shared by every compiler backend.
"""
from dataclasses import dataclass
from enum import Enum, unique


@unique
class BuildMode(str, Enum):
    DEBUG = "debug"
    PROFILE = "profile"
    RELEASE = "release"


@dataclass(frozen=True)
class BuildInfo:
    """Build mode bundle; passed through to the environment unchanged."""

    mode: BuildMode
    obfuscate: bool = False
    track_widget_creation: bool = False
    tree_shake_icons: bool = False

    @property
    def mode_name(self) -> str:
        return self.mode.value

    @classmethod
    def debug(cls) -> "BuildInfo":
        return cls(mode=BuildMode.DEBUG, track_widget_creation=True)

    @classmethod
    def profile(cls) -> "BuildInfo":
        return cls(mode=BuildMode.PROFILE, tree_shake_icons=True)

    @classmethod
    def release(cls) -> "BuildInfo":
        return cls(mode=BuildMode.RELEASE, tree_shake_icons=True)
