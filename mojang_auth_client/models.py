"""
Data models for the Mojang session server client.
"""

import base64
from uuid import UUID
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .hashing import compute_server_hash


@dataclass(frozen=True)
class ServerHashInput:
    """Inputs of a single server hash computation."""

    server_id: str
    shared_secret: bytes
    public_key: bytes

    def server_hash(self) -> str:
        """Compute the signed hexadecimal server hash for these inputs."""
        return compute_server_hash(self.server_id, self.shared_secret, self.public_key)


@dataclass(frozen=True)
class AuthRequest:
    """Session verification request data."""

    username: str
    server_hash: str
    client_ip: Optional[str] = None

    def to_params(self) -> dict:
        """Convert to query parameters, omitting the ip when not given."""
        params = {
            'username': self.username,
            'serverId': self.server_hash,
        }
        if self.client_ip is not None:
            params['ip'] = self.client_ip
        return params


@dataclass(frozen=True)
class ProfileProperty:
    """A signed profile property, such as the player's textures."""

    name: str
    value: str
    signature: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'ProfileProperty':
        """Create ProfileProperty instance from dictionary."""
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        signature = data.get('signature')
        if not isinstance(data['name'], str) or not isinstance(data['value'], str):
            raise TypeError("property name and value must be strings")
        if signature is not None and not isinstance(signature, str):
            raise TypeError("property signature must be a string")

        return cls(
            name=data['name'],
            value=data['value'],
            signature=signature,
        )

    def decoded_value(self) -> bytes:
        """Decode the base64 property value."""
        return base64.b64decode(self.value)


@dataclass(frozen=True)
class AuthResponse:
    """Game profile returned by a successful session lookup."""

    id: str
    name: str
    properties: Tuple[ProfileProperty, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict) -> 'AuthResponse':
        """
        Create AuthResponse instance from dictionary.

        Raises:
            KeyError: If a required field is missing
            TypeError: If the payload or a field has the wrong shape
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        if not isinstance(data['id'], str) or not isinstance(data['name'], str):
            raise TypeError("profile id and name must be strings")

        return cls(
            id=data['id'],
            name=data['name'],
            properties=tuple(ProfileProperty.from_dict(p) for p in data.get('properties', [])),
        )

    @property
    def uuid(self) -> UUID:
        """Get the player's UUID parsed from the dashless id."""
        return UUID(hex=self.id)

    def get_property(self, name: str) -> Optional[ProfileProperty]:
        """Get the first property with the given name, if any."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None
