# vaultkeeper

A small command-line vault that guards access with a master username and a
master key.

On its first run it asks you to set both. Each is hashed with Argon2id under
its own random 16-byte salt, and the resulting PHC string
(`$argon2id$v=19$m=19456,t=2,p=1$...`) is encrypted with AES-256-GCM under a
fresh 12-byte nonce. The ciphertexts and nonces go into a `master` table in a
SQLite file. On every later run it asks for the username and master key again
and tells you whether they match what was stored.

## Installation

```
pip install .
```

This needs `cryptography` 44 or later, which provides Argon2id.

## Usage

```
vaultkeeper
vaultkeeper --database path/to/vault.db
```

The database defaults to `vault.db` in the current directory. If that file
exists, you are asked to log in; otherwise a new vault is created.

First run:

```
Please set Username: alice
Please set Master-Key:
Initialization successful!
```

Later runs:

```
Please enter Username: alice
Please enter Master-Key:
Login successful!
```

A wrong username or master key prints `Login failed!`. The master key is read
without being echoed, and whitespace around both inputs is trimmed.

The command exits with status 0 after a successful setup or any completed
login check, including a failed one. It exits with status 1 and a message on
stderr when the stored record cannot be read, decrypted or parsed, when the
database cannot be written, or when input ends early.

## Using it as a library

```python
from vaultkeeper.hashing import hash_credentials
from vaultkeeper.cipher import encrypt
from vaultkeeper.database import initialize_database
from vaultkeeper.login import login_hash_comparison

username_hash, key_hash = hash_credentials("alice", "secret")
enc_user, user_nonce = encrypt(username_hash.encode())
enc_key, key_nonce = encrypt(key_hash.encode())
initialize_database("vault.db", enc_user, user_nonce, enc_key, key_nonce)

assert login_hash_comparison("vault.db", "alice", "secret")
```

The modules:

- `vaultkeeper.cipher`: `encrypt` returns `(ciphertext, nonce)`; `decrypt`
  raises `DecryptionError` when authentication fails and `ValueError` for a
  nonce that is not 12 bytes. Also `generate_nonce` and `generate_aes_key`.
- `vaultkeeper.hashing`: `hash_secret`, `verify_secret` and
  `hash_credentials`; `PasswordHash.parse` reads a PHC string and
  `PasswordHash.verify` checks a secret against it. Malformed strings raise
  `InvalidHashError`.
- `vaultkeeper.database`: `initialize_database` creates the table and inserts
  a row; `load_master_record` returns the first row as a `MasterRecord`, or
  raises `LookupError` if the table is empty.
- `vaultkeeper.login`: `login_hash_comparison` returns whether both values
  match, and raises `LoginError` if the record cannot be read, decrypted or
  parsed.
- `vaultkeeper.prompt`: `prompt_for_username_and_master_key`.
- `vaultkeeper.app`: `app`, `run_app`, `initialize_app` and `main`.

## Security note

The AES key is fixed: it is all zero bytes. The encryption layer therefore
only obscures the stored hashes. The protection comes from the salted
Argon2id hashes.

## What it does not do

vaultkeeper only sets and checks the master credentials. It does not store,
list or retrieve any other secrets, and there is no way to change or reset
the master credentials other than deleting the database file.

## Development

```
pip install -e ".[test]"
pytest
```