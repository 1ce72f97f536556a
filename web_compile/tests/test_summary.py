"""
test_summary — analytics settings string for a list of compiler configs.
"""
from web_compile.core.compiler_config import JsCompilerConfig, WasmCompilerConfig
from web_compile.core.renderer import WebRendererMode
from web_compile.core.summary import summarize_settings


class TestSummarizeSettings:

    def test_dual_compile(self):
        configs = [
            WasmCompilerConfig(optimization_level=0, strip_wasm=False),
            JsCompilerConfig.run(native_null_assertions=True, renderer=WebRendererMode.CANVASKIT),
        ]
        assert summarize_settings(configs) == (
            "dryRun: false; optimizationLevel: 0; "
            "web-renderer: skwasm,canvaskit; web-target: wasm,js;"
        )

    def test_js_only_omits_optimization_level(self):
        configs = [JsCompilerConfig(renderer=WebRendererMode.CANVASKIT)]
        assert summarize_settings(configs) == (
            "dryRun: false; web-renderer: canvaskit; web-target: js;"
        )

    def test_wasm_only_defaults_dry_run_false(self):
        configs = [WasmCompilerConfig(optimization_level=3, strip_wasm=True, dry_run=True)]
        assert summarize_settings(configs) == (
            "dryRun: false; optimizationLevel: 3; web-renderer: skwasm; web-target: wasm;"
        )

    def test_dry_run_taken_from_js(self):
        configs = [
            JsCompilerConfig(dry_run=True, renderer=WebRendererMode.SKWASM),
            WasmCompilerConfig(optimization_level=1, strip_wasm=False),
        ]
        assert summarize_settings(configs) == (
            "dryRun: true; optimizationLevel: 1; "
            "web-renderer: skwasm,skwasm; web-target: js,wasm;"
        )

    def test_first_of_each_kind_wins(self):
        configs = [
            WasmCompilerConfig(optimization_level=1, strip_wasm=False),
            JsCompilerConfig(dry_run=False),
            WasmCompilerConfig(optimization_level=4, strip_wasm=False),
            JsCompilerConfig(dry_run=True),
        ]
        summary = summarize_settings(configs)
        assert summary.startswith("dryRun: false; optimizationLevel: 1;")
        assert "web-target: wasm,js,wasm,js;" in summary
