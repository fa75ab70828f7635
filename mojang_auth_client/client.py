"""
Python client for Mojang's session server.

This module provides a client for the server side of Minecraft online-mode
authentication: verifying that a connecting player has joined the session
server with the expected server hash, and looking up player profiles.
"""

import asyncio
import functools
import json
import logging
from typing import Optional, Dict, Union
from uuid import UUID

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from . import __version__
from .models import AuthRequest, AuthResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://sessionserver.mojang.com'

# Bodies quoted in MalformedResponse details are cut to this many characters
_BODY_EXCERPT = 200


class AuthError(Exception):
    """Base exception for session server errors."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details or {}


class NotAuthenticated(AuthError):
    """The player has not joined the session server; deny the login."""


class ServerError(AuthError):
    """The session server answered with an unexpected HTTP status."""

    def __init__(self, status_code: int, reason: Optional[str] = None):
        message = f"HTTP {status_code}: {reason}" if reason else f"HTTP {status_code}"
        super().__init__(message, status_code)
        self.reason = reason

    def __reduce__(self):
        return type(self), (self.status_code, self.reason)


class NetworkError(AuthError):
    """The request did not complete (DNS, TLS, timeout, connection reset)."""

    def __init__(self, cause: Exception):
        super().__init__(f"Network error: {cause}")
        self.cause = cause

    def __reduce__(self):
        return type(self), (self.cause,)


class MalformedResponse(AuthError):
    """The session server returned a body that is not a valid profile."""


class AuthClient:
    """
    Client for Mojang's session server.

    Each call makes exactly one HTTP attempt. The client keeps no state
    between calls besides its HTTP session configuration, so one instance
    can serve concurrent verifications.

    Example:
        >>> client = AuthClient()
        >>> server_hash = compute_server_hash('', shared_secret, public_key)
        >>> profile = client.has_joined('Notch', server_hash)
        >>> print(f"{profile.name} logged in as {profile.uuid}")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10,
        verify_ssl: Union[bool, str] = True,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the AuthClient.

        Args:
            base_url: Base URL of the session server
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify TLS certificates, or a CA bundle path
            user_agent: User-Agent header sent with every request
            session: Pre-configured session to use instead of a new one
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.verify_ssl = verify_ssl

        self._owns_session = session is None
        if session is None:
            # One attempt per call: never retry, never raise on status
            session = requests.Session()
            adapter = HTTPAdapter(max_retries=Retry(total=0, read=False, raise_on_status=False))
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

        # Sent per request; a caller-supplied session is left untouched
        self._headers = {
            'Accept': 'application/json',
            'User-Agent': user_agent or f'mojang-auth-client/{__version__}'
        }

    def _make_request(self, endpoint: str, params: Optional[Dict] = None) -> requests.Response:
        """
        Make a GET request to the session server.

        Args:
            endpoint: API endpoint (without base URL)
            params: Query parameters

        Returns:
            HTTP response object with status 200 or 204

        Raises:
            NetworkError: If the request does not complete
            ServerError: If the server answers with any other status
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug("GET %s", url)

        try:
            response = self.session.get(
                url,
                params=params,
                headers=self._headers,
                timeout=self.timeout,
                verify=self.verify_ssl
            )
        except requests.exceptions.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise NetworkError(e) from e

        if response.status_code not in (200, 204):
            logger.warning("Session server returned HTTP %d for %s", response.status_code, url)
            raise ServerError(response.status_code, response.reason)

        return response

    @staticmethod
    def _parse_profile(response: requests.Response) -> Optional[AuthResponse]:
        """
        Parse a profile body, returning None when there is no profile.

        Raises:
            MalformedResponse: If the body is not a valid profile
        """
        if response.status_code == 204 or not response.content.strip():
            return None

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise MalformedResponse(
                f"Invalid JSON from session server: {e}",
                response.status_code,
                {'body': response.text[:_BODY_EXCERPT]}
            ) from e

        if data is None:
            return None

        try:
            return AuthResponse.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponse(
                f"Unexpected profile payload: {e!r}",
                response.status_code,
                {'body': response.text[:_BODY_EXCERPT]}
            ) from e

    def has_joined(self, username: str, server_hash: str, client_ip: Optional[str] = None) -> AuthResponse:
        """
        Verify that a player has joined the session server.

        Args:
            username: Name the player logged in with
            server_hash: Hash from ``compute_server_hash``
            client_ip: Player's address, to let Mojang check it (optional)

        Returns:
            AuthResponse with the player's profile

        Raises:
            NotAuthenticated: If the player did not join with this hash
                (HTTP 204, or a 200 with an empty or null body)
            ServerError: If the session server returns any status other than 200 or 204
            NetworkError: If the request does not complete
            MalformedResponse: If the response is not a valid profile
        """
        request_data = AuthRequest(username=username, server_hash=server_hash, client_ip=client_ip)

        response = self._make_request('/session/minecraft/hasJoined', request_data.to_params())
        profile = self._parse_profile(response)
        if profile is None:
            logger.info("%s has not joined the session server", username)
            raise NotAuthenticated(f"{username} has not joined the session server", response.status_code)

        return profile

    async def has_joined_async(
        self,
        username: str,
        server_hash: str,
        client_ip: Optional[str] = None
    ) -> AuthResponse:
        """
        Coroutine version of ``has_joined``.

        The request runs in the event loop's default executor; the caller
        suspends until it completes. Wrap it in ``asyncio.wait_for`` to
        impose a deadline.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            functools.partial(self.has_joined, username, server_hash, client_ip)
        )

    def get_profile(self, player_uuid: Union[UUID, str], unsigned: bool = True) -> Optional[AuthResponse]:
        """
        Look up a player's profile, including skin and cape properties.

        Args:
            player_uuid: Player UUID, as a UUID or a dashed or dashless string
            unsigned: Whether to leave out property signatures

        Returns:
            AuthResponse with the profile, or None if no such player exists

        Raises:
            ValueError: If player_uuid is not a valid UUID
            ServerError: If the session server returns an unexpected status
            NetworkError: If the request does not complete
            MalformedResponse: If the response is not a valid profile
        """
        if not isinstance(player_uuid, UUID):
            player_uuid = UUID(player_uuid)

        params = None if unsigned else {'unsigned': 'false'}
        response = self._make_request(f'/session/minecraft/profile/{player_uuid.hex}', params)
        return self._parse_profile(response)

    def close(self):
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close session."""
        self.close()
