"""AES-256-GCM encryption of stored credential hashes."""

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

KEY_SIZE = 32
NONCE_SIZE = 12


class DecryptionError(Exception):
    """Raised when a ciphertext cannot be authenticated or decrypted."""


def generate_aes_key() -> bytes:
    """Return the vault's fixed AES-256 key (all zero bytes)."""
    return bytes(KEY_SIZE)


def generate_nonce() -> bytes:
    """Return a fresh random nonce for AES-GCM."""
    return os.urandom(NONCE_SIZE)


def encrypt(plaintext: bytes) -> tuple[bytes, bytes]:
    """Encrypt ``plaintext`` and return ``(ciphertext, nonce)``."""
    nonce = generate_nonce()
    ciphertext = AESGCM(generate_aes_key()).encrypt(nonce, bytes(plaintext), None)
    return ciphertext, nonce


def decrypt(ciphertext: bytes, nonce: bytes) -> bytes:
    """Decrypt ``ciphertext`` with ``nonce``; raise DecryptionError on failure."""
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")
    try:
        return AESGCM(generate_aes_key()).decrypt(bytes(nonce), bytes(ciphertext), None)
    except InvalidTag as exc:
        raise DecryptionError("ciphertext failed authentication") from exc