"""
Tests for the command-line entry point.
"""

import io

from .. import cli


class TestCLI:

    def test_play_session(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("1\n:give-up\n:quit\n"))
        code = cli.main(["play", "--max", "1"])
        output = capsys.readouterr().out
        assert code == 0
        assert "Right!" in output
        assert "The number was 1." in output

    def test_invalid_max(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert cli.main(["play", "--max", "0"]) == 2
        assert "upper_bound must be >= 1" in capsys.readouterr().err

    def test_invalid_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("NUMGUESS_UPPER_BOUND", "lots")
        assert cli.main(["play"]) == 2

    def test_no_command(self, capsys):
        assert cli.main([]) == 1
