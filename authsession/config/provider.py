"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol


STORAGE_BACKENDS = ("memory", "file")


@dataclass
class ClientConfig:
    """Remote authentication API configuration."""
    base_url: str
    timeout: float = 10.0
    verify_tls: bool = True

    @property
    def login_url(self) -> str:
        return f"{self.base_url}/auth/login"

    @property
    def check_token_url(self) -> str:
        return f"{self.base_url}/auth/check-token"


@dataclass
class StorageConfig:
    """Token storage configuration."""
    backend: str = "file"
    path: Optional[str] = None
    token_key: str = "token"

    @property
    def resolved_path(self) -> str:
        """Storage file path with ``~`` expanded."""
        return os.path.expanduser(self.path or "~/.authsession/storage.json")


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_client_config(self) -> ClientConfig:
        """Get authentication API configuration."""
        ...

    def get_storage_config(self) -> StorageConfig:
        """Get token storage configuration."""
        ...

    def get_log_level(self) -> str:
        """Get logging level name."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_client_config(self) -> ClientConfig:
        """Get authentication API configuration from environment variables."""
        # Base URL is required - there is no sensible default server
        base_url = os.getenv("AUTH_API_BASE_URL")
        if not base_url:
            raise ValueError(
                "AUTH_API_BASE_URL environment variable is required. "
                "Example: https://api.example.com/api"
            )

        return ClientConfig(
            base_url=base_url.rstrip("/"),
            timeout=float(os.getenv("AUTH_API_TIMEOUT", "10")),
            verify_tls=os.getenv("AUTH_API_VERIFY_TLS", "true").lower() == "true",
        )

    def get_storage_config(self) -> StorageConfig:
        """Get token storage configuration from environment variables."""
        backend = os.getenv("AUTH_STORAGE_BACKEND", "file").lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unsupported AUTH_STORAGE_BACKEND '{backend}'. "
                f"Expected one of: {', '.join(STORAGE_BACKENDS)}"
            )

        return StorageConfig(
            backend=backend,
            path=os.getenv("AUTH_STORAGE_PATH"),
            token_key=os.getenv("AUTH_TOKEN_KEY", "token"),
        )

    def get_log_level(self) -> str:
        """Get logging level from environment variables."""
        return os.getenv("AUTHSESSION_LOG_LEVEL", "INFO").upper()
