import sqlite3

import pytest

from vaultkeeper.database import MasterRecord, initialize_database, load_master_record


def _nonce(fill):
    return bytes([fill]) * 12


def test_round_trip(tmp_path):
    path = tmp_path / "vault.db"
    initialize_database(path, b"user-ct", _nonce(1), b"key-ct", _nonce(2))
    assert load_master_record(path) == MasterRecord(b"user-ct", _nonce(1), b"key-ct", _nonce(2))


def test_first_row_is_returned(tmp_path):
    path = tmp_path / "vault.db"
    initialize_database(path, b"first", _nonce(1), b"first-key", _nonce(2))
    initialize_database(path, b"second", _nonce(3), b"second-key", _nonce(4))
    record = load_master_record(path)
    assert record.encrypted_username_hash == b"first"
    assert record.key_nonce == _nonce(2)


def test_creates_file(tmp_path):
    path = tmp_path / "vault.db"
    initialize_database(str(path), b"a", _nonce(0), b"b", _nonce(0))
    assert path.is_file()


@pytest.mark.parametrize("bad", [b"", bytes(11), bytes(13)])
def test_rejects_bad_nonce(tmp_path, bad):
    with pytest.raises(ValueError):
        initialize_database(tmp_path / "vault.db", b"a", bad, b"b", _nonce(0))
    with pytest.raises(ValueError):
        initialize_database(tmp_path / "vault.db", b"a", _nonce(0), b"b", bad)


def test_empty_table(tmp_path):
    path = tmp_path / "vault.db"
    with sqlite3.connect(path) as conn:
        conn.execute(
            "CREATE TABLE master (id INTEGER PRIMARY KEY, encrypted_username_hash BLOB,"
            " username_nonce BLOB, encrypted_master_key_hash BLOB, key_nonce BLOB)"
        )
    with pytest.raises(LookupError):
        load_master_record(path)


def test_missing_table(tmp_path):
    with pytest.raises(sqlite3.OperationalError):
        load_master_record(tmp_path / "empty.db")