import io
from unittest.mock import patch

from vaultkeeper.prompt import prompt_for_username_and_master_key


def test_reads_and_trims(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("  alice  \n"))
    with patch("getpass.getpass", return_value=" secret \n"):
        result = prompt_for_username_and_master_key("User: ", "Key: ")
    assert result == ("alice", "secret")
    assert capsys.readouterr().out == "User: Key: "


def test_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with patch("getpass.getpass", return_value=""):
        result = prompt_for_username_and_master_key("A", "B")
    assert result == ("", "")
    assert capsys.readouterr().out == "AB"


def test_only_first_line_used(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("alice\nbob\n"))
    with patch("getpass.getpass", return_value="token") as mocked:
        result = prompt_for_username_and_master_key("u", "k")
    assert result == ("alice", "token")
    assert mocked.call_count == 1