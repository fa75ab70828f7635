"""
Mojang Session Server Python Client

A Python client library for Minecraft online-mode authentication.
Computes the server hash and verifies connecting players with Mojang's
session server.
"""

import logging

__version__ = "1.0.0"

from .hashing import compute_server_hash, format_signed_hex  # noqa: E402
from .client import (  # noqa: E402
    AuthClient, AuthError, NotAuthenticated, ServerError, NetworkError, MalformedResponse
)
from .models import ServerHashInput, AuthRequest, AuthResponse, ProfileProperty  # noqa: E402

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "compute_server_hash",
    "format_signed_hex",
    "AuthClient",
    "AuthError",
    "NotAuthenticated",
    "ServerError",
    "NetworkError",
    "MalformedResponse",
    "ServerHashInput",
    "AuthRequest",
    "AuthResponse",
    "ProfileProperty",
]
