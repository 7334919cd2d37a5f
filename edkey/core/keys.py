from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from edkey.core.codec import MalformedKeyEncoding, require_ed25519
from edkey.core.config import ED25519_KEY_SIZE


def public_key_from_raw(raw: bytes) -> Ed25519PublicKey:
    """Build a public key from its raw 32-byte value."""
    if len(raw) != ED25519_KEY_SIZE:
        raise MalformedKeyEncoding(
            f"raw Ed25519 key must be {ED25519_KEY_SIZE} bytes, got {len(raw)}"
        )
    return Ed25519PublicKey.from_public_bytes(raw)


def public_key_to_raw(key: Ed25519PublicKey) -> bytes:
    """Return the raw 32-byte value of an Ed25519 public key."""
    require_ed25519(key)
    return key.public_bytes(Encoding.Raw, PublicFormat.Raw)
