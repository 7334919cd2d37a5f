import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from edkey.core.codec import AlgorithmMismatch, MalformedKeyEncoding
from edkey.core.keys import public_key_from_raw, public_key_to_raw


def new_public_key():
    return Ed25519PrivateKey.generate().public_key()


class TestRawConversion:
    def test_raw_key_length(self):
        assert len(public_key_to_raw(new_public_key())) == 32

    def test_keys_are_unique(self):
        assert public_key_to_raw(new_public_key()) != public_key_to_raw(new_public_key())

    def test_round_trip(self):
        raw = public_key_to_raw(new_public_key())
        assert public_key_to_raw(public_key_from_raw(raw)) == raw

    def test_raw_key_verifies_signatures(self):
        priv = Ed25519PrivateKey.generate()
        key = public_key_from_raw(public_key_to_raw(priv.public_key()))
        key.verify(priv.sign(b"hello"), b"hello")

    def test_wrong_length(self):
        with pytest.raises(MalformedKeyEncoding):
            public_key_from_raw(b"\x01" * 31)
        with pytest.raises(MalformedKeyEncoding):
            public_key_from_raw(b"\x01" * 33)

    def test_to_raw_rejects_rsa(self):
        pub = rsa.generate_private_key(public_exponent=65537, key_size=2048).public_key()
        with pytest.raises(AlgorithmMismatch):
            public_key_to_raw(pub)

    def test_to_raw_rejects_private_key(self):
        with pytest.raises(AlgorithmMismatch):
            public_key_to_raw(Ed25519PrivateKey.generate())
