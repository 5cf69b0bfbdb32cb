"""
HTTP client for the remote authentication API.

This module is a black box that:
- Implements the AuthBackend protocol over httpx
- Maps every failure onto AuthenticationError
- Never touches session state or token storage
"""

import logging
from typing import Optional, Type

import httpx
from pydantic import ValidationError

from ...config.provider import ClientConfig
from ..api.models import (
    AuthResponse,
    CheckTokenResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
)
from .exceptions import (
    GENERIC_LOGIN_ERROR,
    INVALID_RESPONSE_ERROR,
    UNREACHABLE_ERROR,
    AuthenticationError,
)
from .interfaces import AuthBackend

logger = logging.getLogger(__name__)


class AuthApiClient(AuthBackend):
    """
    Calls ``/auth/login`` and ``/auth/check-token``.

    An httpx.AsyncClient may be injected (tests pass one built on
    httpx.MockTransport); otherwise the client creates and owns one.
    """

    def __init__(self, config: ClientConfig, http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize API client with injected config.

        Args:
            config: Client configuration object
            http_client: Optional pre-built async HTTP client
        """
        self.config = config
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=config.timeout,
            verify=config.verify_tls,
        )

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Exchange credentials for a user and a token.

        Args:
            email: Account email, sent as-is
            password: Account password, sent as-is

        Returns:
            Parsed login response

        Raises:
            AuthenticationError: Carrying the server message when one was sent
        """
        body = LoginRequest(email=email, password=password).model_dump()
        return await self._request(
            "POST", self.config.login_url, LoginResponse, json=body
        )

    async def check_token(self, token: str) -> CheckTokenResponse:
        """
        Verify a bearer token.

        Args:
            token: Stored session token (without ``Bearer`` prefix)

        Returns:
            Parsed check-token response with a possibly rotated token
        """
        headers = {"Authorization": f"Bearer {token}"}
        return await self._request(
            "GET", self.config.check_token_url, CheckTokenResponse, headers=headers
        )

    async def _request(
        self, method: str, url: str, response_model: Type[AuthResponse], **kwargs
    ) -> AuthResponse:
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.debug(f"{method} {url} failed: {e!r}")
            raise AuthenticationError(UNREACHABLE_ERROR) from e

        if response.is_error:
            message = self._extract_error_message(response)
            logger.debug(f"{method} {url} returned {response.status_code}: {message}")
            raise AuthenticationError(message, status_code=response.status_code)

        try:
            return response_model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"{method} {url} returned an unexpected body: {e}")
            raise AuthenticationError(INVALID_RESPONSE_ERROR, response.status_code) from e

    @staticmethod
    def _extract_error_message(response: httpx.Response) -> str:
        """Pull the ``message`` field out of an error body, if there is one."""
        try:
            payload = ErrorResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            return GENERIC_LOGIN_ERROR
        return payload.describe() or GENERIC_LOGIN_ERROR

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "AuthApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


class OfflineAuthBackend(AuthBackend):
    """Backend for hosts without API configuration; every call fails as unreachable."""

    async def login(self, email: str, password: str) -> AuthResponse:
        raise AuthenticationError(UNREACHABLE_ERROR)

    async def check_token(self, token: str) -> AuthResponse:
        raise AuthenticationError(UNREACHABLE_ERROR)
