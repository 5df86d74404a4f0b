import sqlite3

import pytest

from vaultkeeper.cipher import encrypt
from vaultkeeper.database import initialize_database
from vaultkeeper.hashing import hash_credentials
from vaultkeeper.login import LoginError, login_hash_comparison


@pytest.fixture(scope="module")
def credential_hashes():
    return hash_credentials("alice", "secret")


@pytest.fixture
def vault(tmp_path, credential_hashes):
    user_hash, key_hash = credential_hashes
    path = tmp_path / "vault.db"
    user_ct, user_nonce = encrypt(user_hash.encode())
    key_ct, key_nonce = encrypt(key_hash.encode())
    initialize_database(path, user_ct, user_nonce, key_ct, key_nonce)
    return path


def test_correct_credentials(vault):
    assert login_hash_comparison(vault, "alice", "secret") is True


def test_wrong_username(vault):
    assert login_hash_comparison(vault, "bob", "secret") is False


def test_wrong_key(vault):
    assert login_hash_comparison(vault, "alice", "password") is False


def test_missing_database_table(tmp_path):
    with pytest.raises(LoginError):
        login_hash_comparison(tmp_path / "none.db", "alice", "secret")


def test_bad_nonce_size(vault):
    with sqlite3.connect(vault) as conn:
        conn.execute("UPDATE master SET username_nonce = ?", (b"short",))
    with pytest.raises(LoginError, match="Invalid nonce size"):
        login_hash_comparison(vault, "alice", "secret")


def test_tampered_ciphertext(vault):
    with sqlite3.connect(vault) as conn:
        conn.execute("UPDATE master SET encrypted_master_key_hash = ?", (b"x" * 40,))
    with pytest.raises(LoginError, match="Master key decryption error"):
        login_hash_comparison(vault, "alice", "secret")


def test_stored_value_is_not_a_hash(tmp_path, credential_hashes):
    path = tmp_path / "vault.db"
    user_ct, user_nonce = encrypt(b"not a phc string")
    key_ct, key_nonce = encrypt(credential_hashes[1].encode())
    initialize_database(path, user_ct, user_nonce, key_ct, key_nonce)
    with pytest.raises(LoginError, match="Invalid username hash"):
        login_hash_comparison(path, "alice", "secret")