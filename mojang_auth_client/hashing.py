"""
Server hash computation for Mojang session authentication.

Mojang's session server identifies a login attempt by a SHA-1 digest of the
server id, the shared secret and the server's public key. The digest is sent
as a signed hexadecimal number, the way Java's ``BigInteger.toString(16)``
prints it.
"""

import hashlib


def _negate(digest: bytes) -> bytes:
    """Return the two's-complement negation of a big-endian byte string."""
    result = bytearray(len(digest))
    carry = 1
    for i in range(len(digest) - 1, -1, -1):
        value = (~digest[i] & 0xFF) + carry
        result[i] = value & 0xFF
        carry = value >> 8
    return bytes(result)


def format_signed_hex(digest: bytes) -> str:
    """
    Format a digest as a signed, lowercase hexadecimal string.

    A digest whose first byte has the high bit set is read as a negative
    two's-complement integer: its magnitude is printed with a leading ``-``.
    Leading zero digits are dropped; an all-zero digest prints as ``"0"``.

    Args:
        digest: Big-endian digest bytes

    Returns:
        Signed hexadecimal representation of the digest
    """
    negative = len(digest) > 0 and digest[0] & 0x80 != 0
    if negative:
        digest = _negate(digest)

    hex_digits = digest.hex().lstrip('0') or '0'
    return f"-{hex_digits}" if negative else hex_digits


def compute_server_hash(server_id: str, shared_secret: bytes, public_key: bytes) -> str:
    """
    Compute the server hash sent to ``join`` and ``hasJoined``.

    Args:
        server_id: Server id from the encryption request (usually empty)
        shared_secret: Symmetric key agreed during the encryption handshake
        public_key: DER-encoded server public key

    Returns:
        Signed hexadecimal SHA-1 digest

    Raises:
        TypeError: If the secret or key are not bytes-like
        UnicodeEncodeError: If server_id has characters outside ISO-8859-1
    """
    sha1 = hashlib.sha1()
    sha1.update(server_id.encode('iso-8859-1'))
    sha1.update(shared_secret)
    sha1.update(public_key)
    return format_signed_hex(sha1.digest())
