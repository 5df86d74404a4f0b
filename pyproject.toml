[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vaultkeeper"
version = "0.1.0"
description = "A small command-line vault that stores encrypted Argon2id hashes of a master username and key in SQLite and verifies logins against them."
requires-python = ">=3.10"
keywords = ["vault", "password", "login", "argon2", "aes-gcm", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]
dependencies = [
    "cryptography>=44",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vaultkeeper = "vaultkeeper.app:main"

[tool.hatch.build.targets.wheel]
packages = ["vaultkeeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
