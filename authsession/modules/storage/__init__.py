"""
Storage Module - Black Box Interface

Purpose: Persist the session token
Interface: get(), set(), delete()
Hidden: Backend specifics, file format

Can be replaced with any storage backend without affecting other modules.
"""

from typing import Optional

from ...config.provider import StorageConfig
from .store import FileTokenStore, MemoryTokenStore, TokenStore


def create_token_store(config: Optional[StorageConfig] = None) -> TokenStore:
    """Build the token store selected by configuration."""
    config = config or StorageConfig()

    if config.backend == "memory":
        return MemoryTokenStore()
    if config.backend == "file":
        return FileTokenStore(config.resolved_path)

    raise ValueError(f"Unsupported storage backend: {config.backend}")


__all__ = [
    "FileTokenStore",
    "MemoryTokenStore",
    "TokenStore",
    "create_token_store",
]
