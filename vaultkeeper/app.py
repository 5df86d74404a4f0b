"""Command-line entry point: set up or unlock the credential vault."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from os import PathLike
from pathlib import Path

from vaultkeeper.cipher import encrypt
from vaultkeeper.database import initialize_database
from vaultkeeper.hashing import hash_credentials
from vaultkeeper.login import LoginError, login_hash_comparison
from vaultkeeper.prompt import prompt_for_username_and_master_key

DEFAULT_DB_PATH = "vault.db"


def run_app(db_path: str | PathLike) -> bool:
    """Ask for credentials and check them against an existing vault."""
    master_username, master_key = prompt_for_username_and_master_key(
        "Please enter Username: ", "Please enter Master-Key: "
    )
    if login_hash_comparison(db_path, master_username, master_key):
        print("Login successful!")
        return True
    print("Login failed!")
    return False


def initialize_app(db_path: str | PathLike) -> None:
    """Ask for new credentials and store them in a fresh vault."""
    master_username, master_key = prompt_for_username_and_master_key(
        "Please set Username: ", "Please set Master-Key: "
    )
    username_hash, key_hash = hash_credentials(master_username, master_key)
    encrypted_username_hash, username_nonce = encrypt(username_hash.encode("utf-8"))
    encrypted_key_hash, key_nonce = encrypt(key_hash.encode("utf-8"))
    initialize_database(
        db_path, encrypted_username_hash, username_nonce, encrypted_key_hash, key_nonce
    )
    print("Initialization successful!")


def app(db_path: str | PathLike = DEFAULT_DB_PATH) -> bool | None:
    """Log in if the vault file exists, otherwise create it."""
    if Path(db_path).is_file():
        return run_app(db_path)
    initialize_app(db_path)
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="vaultkeeper", description="Set up or unlock a master-key vault."
    )
    parser.add_argument(
        "--database",
        default=DEFAULT_DB_PATH,
        help=f"path to the vault database (default: {DEFAULT_DB_PATH})",
    )
    args = parser.parse_args(argv)
    try:
        app(args.database)
    except LoginError as exc:
        print(f"Login comparison failed!: {exc}", file=sys.stderr)
        return 1
    except sqlite3.Error as exc:
        print(f"DB initialization failed!: {exc}", file=sys.stderr)
        return 1
    except EOFError:
        print("Failed to read input", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())