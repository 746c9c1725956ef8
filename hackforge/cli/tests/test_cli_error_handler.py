import pytest

from hackforge.cli.errors.error_handler import cli_hackforge_error_handler
from libhackforge.assembler.errors import DuplicateLabelError


def test_error_handler_toolchain_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exit_info, cli_hackforge_error_handler():
        raise DuplicateLabelError(label="LOOP", already_bound_to=2)

    assert exit_info.value.code == 1
    assert "[duplicate-label-error]" in capsys.readouterr().err


def test_error_handler_unwrapped_toolchain_error() -> None:
    with (
        pytest.raises(DuplicateLabelError),
        cli_hackforge_error_handler(debug_user_friendly_errors=False),
    ):
        raise DuplicateLabelError(label="LOOP", already_bound_to=2)


def test_error_handler_file_errors(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exit_info, cli_hackforge_error_handler():
        raise FileNotFoundError(2, "No such file or directory", "Missing.asm")

    assert exit_info.value.code == 1
    assert "Cannot access `Missing.asm`" in capsys.readouterr().err

    with pytest.raises(SystemExit) as exit_info, cli_hackforge_error_handler():
        b"\xff".decode("UTF-8")

    assert exit_info.value.code == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_error_handler_interrupt() -> None:
    with pytest.raises(SystemExit) as exit_info, cli_hackforge_error_handler():
        raise KeyboardInterrupt

    assert exit_info.value.code == 0


def test_error_handler_goal_without_exit(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exit_info, cli_hackforge_error_handler():
        pass

    assert exit_info.value.code == 1
    assert "bug in Hackforge CLI" in capsys.readouterr().err
