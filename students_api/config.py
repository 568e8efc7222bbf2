"""Application settings and validation.

Settings are read once at startup and handed to `create_app`; nothing
below the app factory looks at the environment.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    ENV: str = "dev"
    STORAGE_PATH: str = "storage/storage.db"
    HTTP_ADDRESS: str = "127.0.0.1:8082"
    LOG_LEVEL: str = "INFO"
    STORAGE_TIMEOUT_SECONDS: float = 5.0
    SHUTDOWN_GRACE_SECONDS: int = 5

    def __post_init__(self):
        self._validate()

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, failing fast on bad values."""
        try:
            storage_timeout = float(os.getenv("STORAGE_TIMEOUT_SECONDS", "5"))
            shutdown_grace = int(os.getenv("SHUTDOWN_GRACE_SECONDS", "5"))
        except ValueError as exc:
            raise RuntimeError(f"invalid timeout setting: {exc}") from exc
        return cls(
            ENV=os.getenv("ENV", "dev").lower(),
            STORAGE_PATH=os.getenv("STORAGE_PATH", "storage/storage.db"),
            HTTP_ADDRESS=os.getenv("HTTP_ADDRESS", "127.0.0.1:8082"),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
            STORAGE_TIMEOUT_SECONDS=storage_timeout,
            SHUTDOWN_GRACE_SECONDS=shutdown_grace,
        )

    @property
    def host(self) -> str:
        return self.HTTP_ADDRESS.rsplit(":", 1)[0]

    @property
    def port(self) -> int:
        return int(self.HTTP_ADDRESS.rsplit(":", 1)[1])

    def _validate(self):
        if not self.STORAGE_PATH:
            raise RuntimeError("STORAGE_PATH must not be empty")
        host, sep, port = self.HTTP_ADDRESS.rpartition(":")
        if not sep or not host or not port.isdigit():
            raise RuntimeError(f"HTTP_ADDRESS must look like host:port, got {self.HTTP_ADDRESS!r}")
        if self.STORAGE_TIMEOUT_SECONDS <= 0:
            raise RuntimeError("STORAGE_TIMEOUT_SECONDS must be positive")
        if self.SHUTDOWN_GRACE_SECONDS < 0:
            raise RuntimeError("SHUTDOWN_GRACE_SECONDS must not be negative")
