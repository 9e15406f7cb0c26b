"""
Unit tests for shared secret derivation.

Tests:
- HKDF-SHA256 known vector
- encapsulate/decapsulate symmetry
- Known ECDH vector for scalars 2 and 3
- Invalid input handling
"""

import pytest

from ecies.errors import InvalidInputLength, InvalidPrivateKey, InvalidPublicKey
from ecies.kdf import HKDF_MAX_LENGTH, decapsulate, encapsulate, hkdf_sha256
from ecies.keys import KeyPair
from tests.helpers import decode_hex


def scalar(value: int) -> bytes:
    return value.to_bytes(32, byteorder='big')


class TestHKDF:
    """Tests for HKDF key derivation."""

    def test_known_vector(self):
        """HKDF over b"secret" with no salt and empty info."""
        assert hkdf_sha256(b"secret") == decode_hex(
            "2f34e5ff91ec85d53ca9b543683174d0cf550b60d5f52b24c97b386cfcf6cbbf"
        )

    def test_default_length(self):
        assert len(hkdf_sha256(b"master")) == 32

    def test_deterministic(self):
        assert hkdf_sha256(b"fixed_secret") == hkdf_sha256(b"fixed_secret")

    def test_longer_output_prefix(self):
        """HKDF output blocks are chained, so 32 bytes prefix 64 bytes."""
        assert hkdf_sha256(b"secret", 64)[:32] == hkdf_sha256(b"secret")

    def test_max_length_accepted(self):
        assert len(hkdf_sha256(b"secret", HKDF_MAX_LENGTH)) == HKDF_MAX_LENGTH

    def test_too_long_rejected(self):
        with pytest.raises(InvalidInputLength):
            hkdf_sha256(b"secret", HKDF_MAX_LENGTH + 1)

    def test_zero_length_rejected(self):
        with pytest.raises(InvalidInputLength):
            hkdf_sha256(b"secret", 0)


class TestEncapsulation:
    """Tests for ECDH + HKDF key agreement."""

    def test_known_vector(self):
        """Scalars 2 and 3 give the reference key on both sides."""
        sk2 = KeyPair.from_secret_bytes(scalar(2))
        sk3 = KeyPair.from_secret_bytes(scalar(3))
        expected = decode_hex(
            "6f982d63e8590c9d9b5b4c1959ff80315d772edd8f60287c9361d548d5200f82"
        )

        assert encapsulate(sk2.private_key, sk3.public_key) == expected
        assert decapsulate(sk2.public_key, sk3.private_key) == expected

    def test_symmetry_random_pairs(self):
        """encapsulate(a, B) == decapsulate(A, b)."""
        for _ in range(5):
            a = KeyPair.generate()
            b = KeyPair.generate()
            assert encapsulate(a.private_key, b.public_key) == \
                decapsulate(a.public_key, b.private_key)

    def test_key_length(self):
        a = KeyPair.generate()
        b = KeyPair.generate()
        assert len(encapsulate(a.private_key, b.public_key)) == 32

    def test_not_commutative_in_roles(self):
        """The master names the sender, so swapping roles changes the key."""
        a = KeyPair.generate()
        b = KeyPair.generate()
        assert encapsulate(a.private_key, b.public_key) != \
            encapsulate(b.private_key, a.public_key)

    def test_different_peers_different_keys(self):
        a = KeyPair.generate()
        b1 = KeyPair.generate()
        b2 = KeyPair.generate()
        assert encapsulate(a.private_key, b1.public_key) != \
            encapsulate(a.private_key, b2.public_key)

    def test_bytes_and_objects_agree(self):
        a = KeyPair.generate()
        b = KeyPair.generate()
        assert encapsulate(a.secret_bytes(), b.public_bytes()) == \
            encapsulate(a.private_key, b.public_key)
        assert decapsulate(a.public_bytes(), b.secret_bytes()) == \
            decapsulate(a.public_key, b.private_key)

    def test_compressed_peer_key(self):
        """A compressed peer key derives the same key as its uncompressed form."""
        a = KeyPair.generate()
        b = KeyPair.generate()
        assert encapsulate(a.private_key, b.public_bytes(compressed=True)) == \
            encapsulate(a.private_key, b.public_bytes())
        assert decapsulate(a.public_bytes(compressed=True), b.private_key) == \
            decapsulate(a.public_bytes(), b.private_key)

    def test_invalid_private_key(self):
        b = KeyPair.generate()
        with pytest.raises(InvalidPrivateKey):
            encapsulate(bytes(32), b.public_key)
        with pytest.raises(InvalidPrivateKey):
            decapsulate(b.public_key, bytes(32))

    def test_invalid_public_key(self):
        a = KeyPair.generate()
        with pytest.raises(InvalidPublicKey):
            encapsulate(a.private_key, b"\x04" + b"\x01" * 64)
        with pytest.raises(InvalidPublicKey):
            decapsulate(b"\x02" * 10, a.private_key)
