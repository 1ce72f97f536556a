"""
Renderer — web renderer modes and their resolution from compile-time defines.

Each mode owns a small selector set of ``KEY=value`` defines.  Resolution is
pure: the first mode (declaration order) whose selectors appear in the
given defines wins; with no match the default depends on whether the Wasm
backend is enabled.
"""
from enum import Enum, unique
from typing import FrozenSet, Iterable, List

AUTO_DETECT_DEFINE = "FLUTTER_WEB_AUTO_DETECT=false"

_SELECTORS = {
    "canvaskit": frozenset({"FLUTTER_WEB_USE_SKIA=true"}),
    "html": frozenset({"FLUTTER_WEB_USE_SKIA=false"}),
    "skwasm": frozenset({"FLUTTER_WEB_USE_SKWASM=true"}),
}

_HELP = {
    "canvaskit": (
        "Always use the CanvasKit renderer. This renderer uses WebGL and "
        "WebAssembly to render graphics."
    ),
    "html": (
        "Always use the HTML renderer. This renderer uses a combination of "
        "HTML, CSS, SVG, 2D Canvas, and WebGL."
    ),
    "skwasm": (
        "Always use the experimental Skwasm renderer. Requires a Wasm build."
    ),
}


@unique
class WebRendererMode(str, Enum):
    """Runtime rendering strategy of a web build."""

    CANVASKIT = "canvaskit"
    HTML = "html"
    SKWASM = "skwasm"

    @property
    def cli_name(self) -> str:
        return self.value

    @property
    def help_text(self) -> str:
        return _HELP[self.value]

    @property
    def selectors(self) -> FrozenSet[str]:
        """Defines that identify this mode."""
        return _SELECTORS[self.value]

    @property
    def dart_defines(self) -> List[str]:
        """Defines handed to the compiler to select this mode."""
        return [AUTO_DETECT_DEFINE] + sorted(self.selectors)

    @classmethod
    def from_cli_name(cls, name: str) -> "WebRendererMode":
        for mode in cls:
            if mode.cli_name == name:
                return mode
        raise ValueError(f"Unknown web renderer '{name}'")


def default_renderer(use_wasm: bool) -> WebRendererMode:
    """Renderer used when the defines select none."""
    return WebRendererMode.SKWASM if use_wasm else WebRendererMode.HTML


def resolve_renderer(defines: Iterable[str], use_wasm: bool) -> WebRendererMode:
    """
    Map a set of compile-time defines to a renderer mode.

    If the defines select more than one mode, the earliest in declaration
    order (canvaskit, html, skwasm) wins.  Defines that carry both
    ``FLUTTER_WEB_USE_SKIA=false`` and ``FLUTTER_WEB_USE_SKWASM=true``
    therefore resolve to ``html``.
    """
    present = frozenset(defines)
    for mode in WebRendererMode:
        if mode.selectors & present:
            return mode
    return default_renderer(use_wasm)
