"""SQLite storage for the encrypted master credentials."""

from __future__ import annotations

import sqlite3
from contextlib import closing
from dataclasses import dataclass
from os import PathLike

from vaultkeeper.cipher import NONCE_SIZE

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS master (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    encrypted_username_hash BLOB NOT NULL,
    username_nonce BLOB NOT NULL,
    encrypted_master_key_hash BLOB NOT NULL,
    key_nonce BLOB NOT NULL
)
"""

_INSERT = """
INSERT INTO master (encrypted_username_hash, username_nonce, encrypted_master_key_hash, key_nonce)
VALUES (?, ?, ?, ?)
"""

_SELECT = """
SELECT encrypted_username_hash, username_nonce, encrypted_master_key_hash, key_nonce
FROM master
"""


@dataclass(frozen=True)
class MasterRecord:
    """The stored, encrypted master credential hashes and their nonces."""

    encrypted_username_hash: bytes
    username_nonce: bytes
    encrypted_master_key_hash: bytes
    key_nonce: bytes


def initialize_database(
    db_path: str | PathLike,
    encrypted_master_username_hash: bytes,
    username_nonce: bytes,
    encrypted_master_key_hash: bytes,
    key_nonce: bytes,
) -> None:
    """Create the master table if needed and insert a credential row."""
    for name, nonce in (("username_nonce", username_nonce), ("key_nonce", key_nonce)):
        if len(nonce) != NONCE_SIZE:
            raise ValueError(f"{name} must be {NONCE_SIZE} bytes, got {len(nonce)}")
    with closing(sqlite3.connect(db_path)) as conn, conn:
        conn.execute(_CREATE_TABLE)
        conn.execute(
            _INSERT,
            (
                bytes(encrypted_master_username_hash),
                bytes(username_nonce),
                bytes(encrypted_master_key_hash),
                bytes(key_nonce),
            ),
        )


def load_master_record(db_path: str | PathLike) -> MasterRecord:
    """Return the first stored master record; raise LookupError if there is none."""
    with closing(sqlite3.connect(db_path)) as conn:
        row = conn.execute(_SELECT).fetchone()
    if row is None:
        raise LookupError("no master record stored")
    return MasterRecord(*(bytes(value) for value in row))