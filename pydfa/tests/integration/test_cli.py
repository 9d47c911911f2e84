"""
Tests for the pydfa command-line front end.
"""

import logging

import pytest

from pydfa import cli
from pydfa.examples import AB_STAR


@pytest.fixture
def answers(monkeypatch):
    """Feed canned replies to input(); end of input once they run out."""
    def _feed(*replies):
        remaining = list(replies)

        def _input(prompt=""):
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", _input)
    return _feed


class TestNonInteractive:
    """Strings given with -s."""

    def test_accept_and_reject(self, dfa_file, capsys):
        status = cli.main([str(dfa_file(AB_STAR)), "-s", "ab", "-s", "aba", "-s", ""])
        assert status == cli.EXIT_OK
        assert capsys.readouterr().out == "accept\nreject\naccept\n"

    def test_parse_error(self, dfa_file, caplog):
        with caplog.at_level(logging.ERROR):
            status = cli.main([str(dfa_file("0\n0 a\n")), "-s", "a"])
        assert status == cli.EXIT_PARSE_ERROR
        assert "error in the DFA" in caplog.text

    def test_missing_file_argument(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            status = cli.main([str(tmp_path / "missing.dfa"), "-s", "a"])
        assert status == cli.EXIT_PARSE_ERROR

    def test_invalid_dfa(self, dfa_file, caplog):
        with caplog.at_level(logging.ERROR):
            status = cli.main([str(dfa_file("0\n0 a 1\n")), "-s", "a"])
        assert status == cli.EXIT_INVALID_DFA
        assert "doesn't represent a valid DFA" in caplog.text
        assert "undeclared state" in caplog.text

    def test_invalid_encoding(self, tmp_path, caplog):
        """A file that is not UTF-8 is a parse error, not a crash."""
        path = tmp_path / "bad.dfa"
        path.write_bytes(b"0\n0 \xff 0\n")
        with caplog.at_level(logging.ERROR):
            status = cli.main([str(path), "-s", "a"])
        assert status == cli.EXIT_PARSE_ERROR
        assert "UTF-8" in caplog.text

    def test_directory_argument(self, tmp_path, caplog):
        """A directory given as the DFA file is reported, not raised."""
        with caplog.at_level(logging.ERROR):
            status = cli.main([str(tmp_path), "-s", "a"])
        assert status == cli.EXIT_PARSE_ERROR
        assert "not found" in caplog.text

    def test_validates_once(self, dfa_file, monkeypatch, capsys):
        """Loading freezes the builder once instead of checking then building."""
        import pydfa.core.builder
        import pydfa.core.dfa

        calls = []
        original = pydfa.core.dfa.find_build_failure

        def counting(*args):
            calls.append(args)
            return original(*args)

        monkeypatch.setattr(pydfa.core.dfa, "find_build_failure", counting)
        monkeypatch.setattr(pydfa.core.builder, "find_build_failure", counting)
        assert cli.main([str(dfa_file(AB_STAR)), "-s", "ab"]) == cli.EXIT_OK
        assert len(calls) == 1

    def test_logs_unreachable_states(self, dfa_file, caplog, capsys):
        path = dfa_file("0\n0 a 0\n7 a 0\n")
        with caplog.at_level(logging.INFO):
            status = cli.main([str(path), "-s", "aa"])
        assert status == cli.EXIT_OK
        assert "never reached" in caplog.text
        assert "[7]" in caplog.text
        assert capsys.readouterr().out == "accept\n"


class TestInteractive:
    """Prompt loop."""

    def test_repl(self, dfa_file, answers, capsys):
        answers("ab", "aba", "quit", "ab")
        status = cli.main([str(dfa_file(AB_STAR))])
        out = capsys.readouterr().out

        assert status == cli.EXIT_OK
        assert out == (
            "That line is valid with this DFA!\n\n"
            "That line isn't valid with this DFA.\n\n"
        )

    def test_repl_ends_on_eof(self, dfa_file, answers, capsys):
        answers("abab")
        assert cli.main([str(dfa_file(AB_STAR))]) == cli.EXIT_OK
        assert "valid with this DFA!" in capsys.readouterr().out

    def test_prompts_for_file(self, dfa_file, tmp_path, answers, capsys, caplog):
        path = dfa_file(AB_STAR)
        answers(str(tmp_path / "nope.dfa"), str(path), "", "quit")
        with caplog.at_level(logging.ERROR):
            status = cli.main([])

        assert status == cli.EXIT_OK
        assert "didn't exist" in caplog.text
        assert capsys.readouterr().out == "That line is valid with this DFA!\n\n"

    def test_no_file_given(self, answers):
        answers()
        assert cli.main([]) == cli.EXIT_OK


def test_request_input_trims(answers):
    answers("  ab \n")
    assert cli.request_input("> ") == "ab"
