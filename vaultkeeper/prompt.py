"""Interactive prompts for the vault's master credentials."""

import getpass
import sys


def prompt_for_username_and_master_key(
    prompt_username: str, prompt_master_key: str
) -> tuple[str, str]:
    """Ask for a username on stdin and a master key without echo."""
    print(prompt_username, end="", flush=True)
    master_username = sys.stdin.readline().strip()

    print(prompt_master_key, end="", flush=True)
    master_key = getpass.getpass(prompt="").strip()

    return master_username, master_key