"""
Shared pytest fixtures for the session server client tests.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mojang_auth_client import AuthClient  # noqa: E402

BASE_URL = "https://sessionserver.mojang.com"
HAS_JOINED_URL = f"{BASE_URL}/session/minecraft/hasJoined"
PROFILE_URL = f"{BASE_URL}/session/minecraft/profile/"


@pytest.fixture
def profile_payload():
    """A hasJoined response body as the session server sends it."""
    return {
        "id": "069a79f444e94726a5befca90e38aaf5",
        "name": "Notch",
        "properties": [
            {
                "name": "textures",
                "value": "eyJ0aW1lc3RhbXAiOjB9",
                "signature": "c2lnbmF0dXJl",
            }
        ],
    }


@pytest.fixture
def client():
    """AuthClient pointed at the default session server."""
    with AuthClient(timeout=2) as auth_client:
        yield auth_client
