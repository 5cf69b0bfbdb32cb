"""
Session Factory following Black Box Design principles.

This factory:
- Constructs the session stack based on configuration
- Wires dependencies together
- Returns only the session manager (hiding implementation)
"""

import logging
from typing import Optional

import httpx

from ...config.provider import ConfigProvider
from ..storage import MemoryTokenStore, TokenStore, create_token_store
from .client import AuthApiClient, OfflineAuthBackend
from .interfaces import AuthBackend
from .manager import SessionManager

logger = logging.getLogger(__name__)


class SessionFactory:
    """
    Factory for building the session stack.

    This is the composition root that:
    - Creates the API client and the token store
    - Wires them into a SessionManager via dependency injection
    """

    @staticmethod
    def build(
        config_provider: ConfigProvider,
        http_client: Optional[httpx.AsyncClient] = None,
        token_store: Optional[TokenStore] = None,
    ) -> SessionManager:
        """
        Build the complete session stack.

        Args:
            config_provider: Configuration provider
            http_client: Optional async HTTP client shared with the host
            token_store: Optional store overriding the configured backend

        Returns:
            SessionManager (status ``checking`` until initialize() runs)
        """
        client_config = config_provider.get_client_config()
        storage_config = config_provider.get_storage_config()

        if token_store is None:
            logger.debug(f"Building session stack with {storage_config.backend} token storage")
            token_store = create_token_store(storage_config)

        backend = AuthApiClient(client_config, http_client=http_client)
        return SessionManager(backend, token_store, token_key=storage_config.token_key)

    @staticmethod
    def build_offline(config_provider: ConfigProvider) -> SessionManager:
        """
        Build a session manager that can only act on the stored token.

        Needs no API configuration and opens no HTTP client; logout() works,
        login() and check_auth_status() fail as if the service were unreachable.

        Args:
            config_provider: Configuration provider (only storage settings are read)

        Returns:
            SessionManager backed by OfflineAuthBackend
        """
        storage_config = config_provider.get_storage_config()
        token_store = create_token_store(storage_config)
        return SessionManager(OfflineAuthBackend(), token_store, token_key=storage_config.token_key)

    @staticmethod
    def build_for_testing(
        mock_backend: AuthBackend,
        token_store: Optional[TokenStore] = None,
    ) -> SessionManager:
        """
        Build a session manager around a mock backend.

        Args:
            mock_backend: Object implementing login() and check_token()
            token_store: Optional store; defaults to an empty in-memory one

        Returns:
            SessionManager for testing
        """
        return SessionManager(mock_backend, token_store or MemoryTokenStore())
