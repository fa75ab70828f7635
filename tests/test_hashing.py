import hashlib

import pytest

from mojang_auth_client import ServerHashInput, compute_server_hash, format_signed_hex


@pytest.mark.parametrize("server_id, expected", [
    ("Notch", "4ed1f46bbe04bc756bcb17c0c7ce3e4632f06a48"),
    ("jeb_", "-7c9d5b0044c130109a5d7b5fb5c317c02b4e28c1"),
    ("simon", "88e16a1019277b15d58faf0541e11910eb756f6"),
    ("", "-25c65c11a194b4f2cdaa40106a9fe76f5027f8f7"),
])
def test_reference_hashes(server_id, expected):
    """Known server hashes printed by the vanilla server."""
    assert compute_server_hash(server_id, b"", b"") == expected


def test_inputs_are_concatenated_in_order():
    """server_id, shared secret and public key are hashed back to back."""
    secret = bytes(range(16))
    public_key = b"\x30\x81\x9f" + b"\x01" * 32

    digest = hashlib.sha1(b"abc" + secret + public_key).digest()
    assert compute_server_hash("abc", secret, public_key) == format_signed_hex(digest)
    assert compute_server_hash("abc", public_key, secret) != compute_server_hash("abc", secret, public_key)


def test_deterministic():
    secret = b"\x8f" * 16
    key = b"\x42" * 162
    assert compute_server_hash("", secret, key) == compute_server_hash("", secret, key)


def test_negative_digest_is_twos_complement():
    """A digest with the high bit set prints as minus its negation."""
    digest = bytes.fromhex("ff" * 19 + "fe")
    assert format_signed_hex(digest) == "-2"

    digest = bytes.fromhex("80" + "00" * 19)
    assert format_signed_hex(digest) == "-80" + "00" * 19


def test_negative_matches_integer_arithmetic():
    digest = hashlib.sha1(b"jeb_").digest()
    magnitude = (1 << 160) - int.from_bytes(digest, "big")
    assert format_signed_hex(digest) == f"-{magnitude:x}"


def test_positive_digest_strips_leading_zeros():
    digest = bytes.fromhex("000f" + "00" * 17 + "01")
    result = format_signed_hex(digest)
    assert result == "f" + "00" * 17 + "01"
    assert not result.startswith("0")


def test_all_zero_digest():
    assert format_signed_hex(bytes(20)) == "0"


def test_server_hash_input():
    hash_input = ServerHashInput(server_id="Notch", shared_secret=b"", public_key=b"")
    assert hash_input.server_hash() == "4ed1f46bbe04bc756bcb17c0c7ce3e4632f06a48"


def test_server_id_is_latin1_encoded():
    """Server ids are hashed as ISO-8859-1, like the vanilla server."""
    digest = hashlib.sha1("caf\u00e9".encode("latin-1")).digest()
    assert compute_server_hash("caf\u00e9", b"", b"") == format_signed_hex(digest)


def test_rejects_server_id_outside_latin1():
    with pytest.raises(UnicodeEncodeError):
        compute_server_hash("\u2603", b"", b"")


def test_rejects_text_secret():
    with pytest.raises(TypeError):
        compute_server_hash("", "not bytes", b"")
