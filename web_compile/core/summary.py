"""
Settings summary — one descriptive string for a list of compiler configs.

Format (order-preserving, duplicates kept):

    dryRun: false; optimizationLevel: 0; web-renderer: skwasm,canvaskit; web-target: wasm,js;

``optimizationLevel`` comes from the first Wasm config and is omitted when
there is none; ``dryRun`` comes from the first JS config (false if none).
"""
from typing import List, Sequence

from web_compile.core.compiler_config import (
    JsCompilerConfig,
    WasmCompilerConfig,
    WebCompilerConfig,
)


def _bool(value: bool) -> str:
    return "true" if value else "false"


def summarize_settings(configs: Sequence[WebCompilerConfig]) -> str:
    """Build the analytics ``settings`` string for *configs*."""
    js: JsCompilerConfig | None = next(
        (c for c in configs if isinstance(c, JsCompilerConfig)), None
    )
    wasm: WasmCompilerConfig | None = next(
        (c for c in configs if isinstance(c, WasmCompilerConfig)), None
    )

    parts: List[str] = [f"dryRun: {_bool(js.dry_run if js else False)}"]
    if wasm is not None:
        parts.append(f"optimizationLevel: {wasm.optimization_level}")
    parts.append("web-renderer: " + ",".join(c.renderer.value for c in configs))
    parts.append("web-target: " + ",".join(c.compile_target.value for c in configs))

    return "; ".join(parts) + ";"
