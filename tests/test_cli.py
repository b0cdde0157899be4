"""Tests for loginform.cli — entrypoint, check and prompt commands."""

import logging
from collections.abc import Iterator

import pytest

from loginform.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_check_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "--help"])
        assert exc_info.value.code == 0

    def test_prompt_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["prompt", "--help"])
        assert exc_info.value.code == 0


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "loginform" in captured.out


class TestCheck:
    def test_valid_exits_normally(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["check", "--email", "bob@example.com", "--password", "abcdef"])
        out = capsys.readouterr().out
        assert "E-Mail: bob@example.com" in out
        assert "Password: abcdef" in out

    def test_missing_email(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check"])
        assert exc_info.value.code == 1
        assert "E-Mail: Enter an E-Mail Address" in capsys.readouterr().out

    def test_short_password(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "--email", "bob@example.com", "--password", "abc"])
        assert exc_info.value.code == 1
        assert "Enter at least 6 Digit password" in capsys.readouterr().out

    def test_min_password_length_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "check",
                "--email",
                "bob@example.com",
                "--password",
                "abc",
                "--min-password-length",
                "3",
            ]
        )
        out = capsys.readouterr().out
        assert "E-Mail: bob@example.com" in out
        assert "Password: abc" in out

    def test_invalid_min_password_length(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "--min-password-length", "0"])
        assert exc_info.value.code == 2
        assert "Error:" in capsys.readouterr().err


def _feed(monkeypatch: pytest.MonkeyPatch, emails: list[str], passwords: list[str]) -> None:
    email_iter: Iterator[str] = iter(emails)
    password_iter: Iterator[str] = iter(passwords)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(email_iter)
        except StopIteration:
            raise EOFError from None

    def fake_getpass(prompt: str = "Password: ") -> str:
        try:
            return next(password_iter)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    monkeypatch.setattr("getpass.getpass", fake_getpass)


class TestPrompt:
    def test_valid_first_try(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _feed(monkeypatch, ["bob@example.com"], ["abcdef"])
        main(["prompt"])
        assert "E-Mail: bob@example.com" in capsys.readouterr().out

    def test_reasks_only_failed_field(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _feed(monkeypatch, ["bob", "bob@example.com"], ["abc", "abcdef"])
        main(["prompt"])
        out = capsys.readouterr().out
        assert "Enter a Valid E-mail Address" in out
        assert "Enter at least 6 Digit password" in out
        assert "Password: abcdef" in out

    def test_end_of_input_exits_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _feed(monkeypatch, [""], [""])
        with pytest.raises(SystemExit) as exc_info:
            main(["prompt"])
        assert exc_info.value.code == 1
        assert "Enter an E-Mail Address" in capsys.readouterr().out


@pytest.fixture
def _restore_log_level() -> Iterator[None]:
    logger = logging.getLogger("loginform")
    level = logger.level
    yield
    logger.setLevel(level)


@pytest.mark.usefixtures("_restore_log_level")
class TestLogLevel:
    def test_debug_level_emits_check_record(self, caplog: pytest.LogCaptureFixture) -> None:
        main(["--log-level", "debug", "check", "--email", "bob@example.com", "--password", "abcdef"])
        records = [r for r in caplog.records if r.name == "loginform.cli"]
        assert records
        assert records[0].levelno == logging.DEBUG
        assert "abcdef" not in caplog.text

    def test_default_level_hides_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        main(["check", "--email", "bob@example.com", "--password", "abcdef"])
        assert logging.getLogger("loginform").level == logging.WARNING
        assert not [r for r in caplog.records if r.name == "loginform.cli"]
