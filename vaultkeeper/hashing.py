"""Argon2id hashing of credentials in PHC string format."""

from __future__ import annotations

import base64
import binascii
import hmac
import os
import re
from dataclasses import dataclass

from cryptography.hazmat.primitives.kdf.argon2 import Argon2id

ALGORITHM = "argon2id"
VERSION = 0x13
DEFAULT_MEMORY_COST = 19456
DEFAULT_ITERATIONS = 2
DEFAULT_LANES = 1
OUTPUT_LENGTH = 32
SALT_LENGTH = 16

_IDENT_RE = re.compile(r"^[a-z0-9-]{1,32}$")
_PARAM_NAME_RE = re.compile(r"^[a-z0-9-]{1,32}$")


class InvalidHashError(ValueError):
    """Raised when a string is not a well-formed PHC hash."""


def _b64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def _b64_decode(text: str) -> bytes:
    if len(text) % 4 == 1 or "=" in text:
        raise InvalidHashError(f"invalid base64 field: {text!r}")
    try:
        return base64.b64decode(text + "=" * (-len(text) % 4), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidHashError(f"invalid base64 field: {text!r}") from exc


def _as_bytes(value: str | bytes) -> bytes:
    """Return ``value`` as bytes, encoding text as UTF-8."""
    if isinstance(value, str):
        return value.encode()
    return value


@dataclass(frozen=True)
class PasswordHash:
    """A parsed PHC-format password hash."""

    algorithm: str
    version: int | None
    params: tuple[tuple[str, str], ...]
    salt: str | None
    hash: bytes | None

    @classmethod
    def parse(cls, encoded: str) -> PasswordHash:
        """Parse a PHC string such as ``$argon2id$v=19$m=...,t=...,p=...$salt$hash``."""
        parts = encoded.split("$")
        if len(parts) < 2 or parts[0] != "":
            raise InvalidHashError("hash must start with '$'")
        fields = parts[1:]
        algorithm = fields.pop(0)
        if not _IDENT_RE.match(algorithm):
            raise InvalidHashError(f"invalid algorithm identifier: {algorithm!r}")

        version = None
        if fields and fields[0].startswith("v="):
            raw = fields.pop(0)[2:]
            if not raw.isdigit():
                raise InvalidHashError(f"invalid version: {raw!r}")
            version = int(raw)

        params: list[tuple[str, str]] = []
        if fields and "=" in fields[0]:
            for item in fields.pop(0).split(","):
                name, sep, value = item.partition("=")
                if not sep or not _PARAM_NAME_RE.match(name) or not value:
                    raise InvalidHashError(f"invalid parameter: {item!r}")
                if any(name == seen for seen, _ in params):
                    raise InvalidHashError(f"duplicate parameter: {name!r}")
                params.append((name, value))

        salt = None
        if fields:
            salt = fields.pop(0)
            if not salt:
                raise InvalidHashError("empty salt")
            _b64_decode(salt)

        digest = None
        if fields:
            digest = _b64_decode(fields.pop(0))
            if not digest:
                raise InvalidHashError("empty hash output")

        if fields:
            raise InvalidHashError("too many fields")
        return cls(algorithm, version, tuple(params), salt, digest)

    def __str__(self) -> str:
        pieces = ["", self.algorithm]
        if self.version is not None:
            pieces.append(f"v={self.version}")
        if self.params:
            pieces.append(",".join(f"{k}={v}" for k, v in self.params))
        if self.salt is not None:
            pieces.append(self.salt)
            if self.hash is not None:
                pieces.append(_b64_encode(self.hash))
        return "$".join(pieces)

    def verify(self, secret: str | bytes) -> bool:
        """Return True if ``secret`` hashes to this value."""
        if (
            self.algorithm != ALGORITHM
            or self.version != VERSION
            or self.salt is None
            or self.hash is None
        ):
            return False
        material = _as_bytes(secret)
        params = dict(self.params)
        try:
            kdf = Argon2id(
                salt=_b64_decode(self.salt),
                length=len(self.hash),
                iterations=int(params["t"]),
                lanes=int(params["p"]),
                memory_cost=int(params["m"]),
            )
            derived = kdf.derive(material)
        except (KeyError, ValueError, TypeError, InvalidHashError):
            return False
        return hmac.compare_digest(derived, self.hash)


def hash_secret(secret: str | bytes) -> str:
    """Hash ``secret`` with Argon2id and a fresh random salt, as a PHC string."""
    material = _as_bytes(secret)
    salt = os.urandom(SALT_LENGTH)
    digest = Argon2id(
        salt=salt,
        length=OUTPUT_LENGTH,
        iterations=DEFAULT_ITERATIONS,
        lanes=DEFAULT_LANES,
        memory_cost=DEFAULT_MEMORY_COST,
    ).derive(material)
    params = (
        ("m", str(DEFAULT_MEMORY_COST)),
        ("t", str(DEFAULT_ITERATIONS)),
        ("p", str(DEFAULT_LANES)),
    )
    return str(PasswordHash(ALGORITHM, VERSION, params, _b64_encode(salt), digest))


def verify_secret(secret: str | bytes, encoded: str) -> bool:
    """Check ``secret`` against a PHC string; raise InvalidHashError if malformed."""
    return PasswordHash.parse(encoded).verify(secret)


def hash_credentials(master_username: str, master_key: str) -> tuple[str, str]:
    """Hash a username and master key, each with its own salt."""
    return hash_secret(master_username), hash_secret(master_key)