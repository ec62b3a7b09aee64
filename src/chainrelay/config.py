import os

from chainrelay.constants import DEFAULT_ROUTE_PATH, DEFAULT_TARGET_URL
from chainrelay.exceptions import ConfigurationException

MAX_CLIENT_TIMEOUT_SECS = 120.0


class ConfigManager:
    def __init__(self):
        self.DEFAULT_TARGET_URL: str = os.environ.get("RELAY_DEFAULT_TARGET_URL", DEFAULT_TARGET_URL)
        self.ALLOWLIST_PATH: str | None = os.environ.get("RELAY_ALLOWLIST_PATH") or None
        self.ROUTE_PATH: str = os.environ.get("RELAY_ROUTE_PATH", DEFAULT_ROUTE_PATH)
        self.CLIENT_TIMEOUT_SECS: float = self._bounded_timeout(
            os.environ.get("RELAY_CLIENT_TIMEOUT_SECS", 30)
        )

    @staticmethod
    def _bounded_timeout(value) -> float:
        try:
            timeout = float(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationException(f"Invalid RELAY_CLIENT_TIMEOUT_SECS: {value!r}") from e
        if timeout <= 0:
            raise ConfigurationException("RELAY_CLIENT_TIMEOUT_SECS must be positive.")
        return min(timeout, MAX_CLIENT_TIMEOUT_SECS)

    def get(self, key, default=None):
        return os.environ.get(key, default=default)
