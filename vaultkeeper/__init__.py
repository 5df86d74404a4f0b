"""A small vault that stores encrypted Argon2id hashes of master credentials and verifies logins."""

__version__ = "0.1.0"