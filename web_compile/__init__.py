"""
web_compile — web build orchestration for multi-backend (JS / Wasm) bundles.

Resolves per-backend compiler configuration, builds the environment handed
to the build-target executor, runs the ``web_service_worker`` target and
turns the outcome into a build report plus analytics, or a fatal ToolExit.
"""

__version__ = "0.1.0"
PACKAGE_NAME = "web_compile"
SCHEMA_VERSION = "0.1"
