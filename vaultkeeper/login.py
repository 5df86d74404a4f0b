"""Verification of entered credentials against the stored vault record."""

from __future__ import annotations

import sqlite3
from os import PathLike

from vaultkeeper.cipher import NONCE_SIZE, DecryptionError, decrypt
from vaultkeeper.database import load_master_record
from vaultkeeper.hashing import InvalidHashError, PasswordHash


class LoginError(Exception):
    """Raised when the stored credentials cannot be read or checked."""


def _decrypt_hash(ciphertext: bytes, nonce: bytes, label: str) -> PasswordHash:
    if len(nonce) != NONCE_SIZE:
        raise LoginError("Invalid nonce size")
    try:
        plaintext = decrypt(ciphertext, nonce)
    except DecryptionError as exc:
        raise LoginError(f"{label.capitalize()} decryption error: {exc}") from exc
    try:
        text = plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise LoginError(f"Invalid {label} hash encoding: {exc}") from exc
    try:
        return PasswordHash.parse(text)
    except InvalidHashError as exc:
        raise LoginError(f"Invalid {label} hash: {exc}") from exc


def login_hash_comparison(
    db_path: str | PathLike, master_username: str, master_key: str
) -> bool:
    """Return True if both username and master key match the stored hashes."""
    try:
        record = load_master_record(db_path)
    except (sqlite3.Error, LookupError) as exc:
        raise LoginError(f"Could not read master record: {exc}") from exc

    username_hash = _decrypt_hash(
        record.encrypted_username_hash, record.username_nonce, "username"
    )
    key_hash = _decrypt_hash(
        record.encrypted_master_key_hash, record.key_nonce, "master key"
    )

    username_ok = username_hash.verify(master_username)
    key_ok = key_hash.verify(master_key)
    return username_ok and key_ok