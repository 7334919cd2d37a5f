"""Conversion between Ed25519 public keys and base64 / PEM text."""
from __future__ import annotations

import base64
import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import (
    ec,
    ed448,
    ed25519,
    rsa,
    x448,
    x25519,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    PublicFormat,
    load_der_public_key,
)

from edkey.core.config import (
    ALGORITHM_ALIASES,
    ARMOR_MARKER,
    KEY_ALGORITHM,
    LINE_BREAKS,
    PEM_FOOTER,
    PEM_HEADER,
    PEM_LINE_WIDTH,
)

logger = logging.getLogger(__name__)

_ALGORITHM_NAMES = (
    (ed25519.Ed25519PublicKey, KEY_ALGORITHM),
    (ed448.Ed448PublicKey, "Ed448"),
    (x25519.X25519PublicKey, "X25519"),
    (x448.X448PublicKey, "X448"),
    (rsa.RSAPublicKey, "RSA"),
    (ec.EllipticCurvePublicKey, "EC"),
)


class KeyCodecError(Exception):
    pass


class AlgorithmMismatch(KeyCodecError):
    def __init__(self, algorithm: str) -> None:
        super().__init__(f"Key type is {algorithm}, should be {KEY_ALGORITHM}.")
        self.algorithm = algorithm


class MalformedBase64(KeyCodecError):
    pass


class MalformedKeyEncoding(KeyCodecError):
    pass


def key_algorithm(key) -> str:
    """Return the algorithm identifier of a public key object."""
    for key_type, name in _ALGORITHM_NAMES:
        if isinstance(key, key_type):
            return name
    return type(key).__name__


def require_ed25519(key) -> None:
    """Raise AlgorithmMismatch unless `key` is an Ed25519 public key."""
    algorithm = key_algorithm(key)
    if algorithm not in ALGORITHM_ALIASES:
        logger.debug(f"rejected {algorithm} key")
        raise AlgorithmMismatch(algorithm)


def key_to_string(key: ed25519.Ed25519PublicKey) -> str:
    """Encode an Ed25519 public key as base64 of its X.509 SubjectPublicKeyInfo.

    The result carries no armor and no line breaks. Raises AlgorithmMismatch
    for any other kind of key.
    """
    require_ed25519(key)
    der = key.public_bytes(Encoding.DER, PublicFormat.SubjectPublicKeyInfo)
    return base64.b64encode(der).decode("ascii")


def strip_armor(text: str) -> str:
    """Remove PEM header, footer and line breaks from armored key text.

    Text without the BEGIN marker is returned unchanged.
    """
    if ARMOR_MARKER not in text:
        return text
    text = text.replace(PEM_HEADER, "").replace(PEM_FOOTER, "")
    for line_break in LINE_BREAKS:
        text = text.replace(line_break, "")
    return text


def string_to_key(text: str) -> ed25519.Ed25519PublicKey:
    """Parse base64 key text, optionally PEM-armored, into an Ed25519 public key.

    Raises MalformedBase64 when the payload is not base64, MalformedKeyEncoding
    when the decoded bytes are not a SubjectPublicKeyInfo the library can load,
    and AlgorithmMismatch when they hold a key of another algorithm.
    """
    payload = strip_armor(text)

    # Unpadded text is accepted, partial padding is not
    if "=" not in payload and len(payload) % 4 in (2, 3):
        payload += "=" * (4 - len(payload) % 4)

    # binascii.Error is a ValueError, as is non-ASCII input
    try:
        der = base64.b64decode(payload, validate=True)
    except ValueError as e:
        logger.debug(f"invalid base64 key text: {e}")
        raise MalformedBase64(f"key text is not valid base64: {e}") from e

    try:
        key = load_der_public_key(der)
    except (ValueError, UnsupportedAlgorithm) as e:
        logger.debug(f"invalid SubjectPublicKeyInfo ({len(der)} bytes): {e}")
        raise MalformedKeyEncoding(f"not a valid public key encoding: {e}") from e

    require_ed25519(key)
    return key


def armor(text: str, width: int = PEM_LINE_WIDTH) -> str:
    """Wrap base64 key text in PEM header and footer, folded at `width` columns."""
    if width <= 0:
        raise ValueError("line width must be positive")
    lines = [text[i:i + width] for i in range(0, len(text), width)]
    return "\n".join([PEM_HEADER, *lines, PEM_FOOTER]) + "\n"


def key_to_pem(key: ed25519.Ed25519PublicKey) -> str:
    """Encode an Ed25519 public key as PEM text."""
    return armor(key_to_string(key))
