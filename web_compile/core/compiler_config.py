"""
Compiler configuration — one value per requested web compiler backend.

Two closed variants:
  - JsCompilerConfig   → dart2js, output "js"
  - WasmCompilerConfig → dart2wasm, output "wasm"

Both are immutable.  A renderer left unset is resolved at construction
from an empty define set, so the backend's default applies.
"""
import json
from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Any, Dict, List, Sequence, Union

from web_compile.core.renderer import WebRendererMode, resolve_renderer

MAX_JS_OPTIMIZATION_LEVEL = 4


@unique
class CompileTarget(str, Enum):
    """Output format of a compiler backend."""
    JS = "js"
    WASM = "wasm"


def _check_optimization_level(level: int, maximum: int | None = None) -> None:
    if level < 0:
        raise ValueError(f"optimization_level must be >= 0, got {level}")
    if maximum is not None and level > maximum:
        raise ValueError(f"optimization_level must be <= {maximum}, got {level}")


def _renderer_options(renderer: WebRendererMode) -> List[str]:
    return [f"-D{define}" for define in renderer.dart_defines]


@dataclass(frozen=True)
class WasmCompilerConfig:
    """Options for the Wasm backend."""

    optimization_level: int
    strip_wasm: bool
    renderer: WebRendererMode | None = None
    dry_run: bool = False
    compile_target: CompileTarget = field(default=CompileTarget.WASM, init=False)

    def __post_init__(self):
        _check_optimization_level(self.optimization_level)
        if self.renderer is None:
            object.__setattr__(self, "renderer", resolve_renderer((), use_wasm=True))

    def to_command_options(self) -> List[str]:
        options = _renderer_options(self.renderer)
        options.append(f"-O{self.optimization_level}")
        options.append("--strip-wasm" if self.strip_wasm else "--no-strip-wasm")
        if self.dry_run:
            options.append("--dry-run")
        return options

    @property
    def build_key(self) -> str:
        """Stable JSON identity of these options."""
        return _build_key({
            "compileTarget": self.compile_target.value,
            "renderer": self.renderer.value,
            "optimizationLevel": self.optimization_level,
            "stripWasm": self.strip_wasm,
            "dryRun": self.dry_run,
        })


@dataclass(frozen=True)
class JsCompilerConfig:
    """Options for the JS backend."""

    native_null_assertions: bool = False
    renderer: WebRendererMode | None = None
    dry_run: bool = False
    optimization_level: int = MAX_JS_OPTIMIZATION_LEVEL
    source_maps: bool = True
    csp: bool = False
    dump_info: bool = False
    no_frequency_based_minification: bool = False
    compile_target: CompileTarget = field(default=CompileTarget.JS, init=False)

    def __post_init__(self):
        _check_optimization_level(self.optimization_level, MAX_JS_OPTIMIZATION_LEVEL)
        if self.renderer is None:
            object.__setattr__(self, "renderer", resolve_renderer((), use_wasm=False))

    @classmethod
    def run(
        cls,
        native_null_assertions: bool,
        renderer: WebRendererMode,
    ) -> "JsCompilerConfig":
        """Options used when serving the app for ``run``."""
        return cls(
            native_null_assertions=native_null_assertions,
            renderer=renderer,
            source_maps=True,
        )

    def to_command_options(self) -> List[str]:
        options = _renderer_options(self.renderer)
        options.append(f"-O{self.optimization_level}")
        if self.native_null_assertions:
            options.append("--native-null-assertions")
        if not self.source_maps:
            options.append("--no-source-maps")
        if self.csp:
            options.append("--csp")
        if self.dump_info:
            options.append("--dump-info")
        if self.no_frequency_based_minification:
            options.append("--no-frequency-based-minification")
        if self.dry_run:
            options.append("--dry-run")
        return options

    @property
    def build_key(self) -> str:
        """Stable JSON identity of these options."""
        return _build_key({
            "compileTarget": self.compile_target.value,
            "renderer": self.renderer.value,
            "nativeNullAssertions": self.native_null_assertions,
            "optimizationLevel": self.optimization_level,
            "sourceMaps": self.source_maps,
            "csp": self.csp,
            "dumpInfo": self.dump_info,
            "noFrequencyBasedMinification": self.no_frequency_based_minification,
            "dryRun": self.dry_run,
        })


WebCompilerConfig = Union[JsCompilerConfig, WasmCompilerConfig]


def _build_key(values: Dict[str, Any]) -> str:
    return json.dumps(values, sort_keys=True, separators=(",", ":"))


def validate_compiler_configs(configs: Sequence[WebCompilerConfig]) -> None:
    """
    Reject an empty request or one that names a backend twice.

    Raises ValueError.
    """
    if not configs:
        raise ValueError("At least one web compiler configuration is required")

    seen = set()
    for config in configs:
        if not isinstance(config, (JsCompilerConfig, WasmCompilerConfig)):
            raise ValueError(f"Unsupported compiler configuration: {config!r}")
        if config.compile_target in seen:
            raise ValueError(
                f"Duplicate compiler configuration for target '{config.compile_target.value}'"
            )
        seen.add(config.compile_target)
