"""
Config - Black Box Interface

Purpose: Client configuration management
Interface: ConfigProvider, EnvConfigProvider
Hidden: Config sources, environment parsing

Can be replaced with any other provider (files, secrets manager) that
satisfies the ConfigProvider protocol.
"""

from .provider import ClientConfig, ConfigProvider, EnvConfigProvider, StorageConfig

__all__ = ["ClientConfig", "ConfigProvider", "EnvConfigProvider", "StorageConfig"]
