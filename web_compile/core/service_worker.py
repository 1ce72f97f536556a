"""
Service worker strategy — how the generated service worker caches assets.
"""
from enum import Enum, unique


@unique
class ServiceWorkerStrategy(str, Enum):
    OFFLINE_FIRST = "offline-first"
    NONE = "none"

    @property
    def cli_name(self) -> str:
        return self.value

    @property
    def help_text(self) -> str:
        if self is ServiceWorkerStrategy.OFFLINE_FIRST:
            return "Attempt to cache the application shell eagerly and then lazily cache all subsequent assets as they are loaded."
        return "Generate a service worker with no body. This is useful for local testing or in cases where the service worker caching functionality is not desirable."

    @classmethod
    def from_cli_name(cls, name: str) -> "ServiceWorkerStrategy":
        for strategy in cls:
            if strategy.cli_name == name:
                return strategy
        raise ValueError(f"Unknown service worker strategy '{name}'")
