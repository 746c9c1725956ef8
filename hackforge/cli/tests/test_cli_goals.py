from pathlib import Path

import pytest

from hackforge.cli.main import cli_entry_point
from libhackforge.assembler.errors import UnknownComputationError


def _run(*argv: str) -> int | str | None:
    with pytest.raises(SystemExit) as exit_info:
        cli_entry_point(list(argv))
    return exit_info.value.code


def _write(path: Path, *lines: str) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="UTF-8")
    return path


def test_cli_assemble_goal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path / "Add.asm", "@2", "D=A", "@3", "D=D+A", "@sum", "M=D")

    assert _run(str(source), "--symbols") == 0

    words = (tmp_path / "Add.hack").read_text(encoding="UTF-8").splitlines()
    assert len(words) == 6
    assert words[4] == "0000000000010000"
    assert "sum" in capsys.readouterr().out


def test_cli_translate_goal(tmp_path: Path) -> None:
    source = _write(tmp_path / "Main.vm", "push constant 7", "pop static 1")

    assert _run(str(source)) == 0

    assembly = (tmp_path / "Main.asm").read_text(encoding="UTF-8").splitlines()
    assert assembly[:2] == ["@7", "D=A"]
    assert "@Main.1" in assembly


def test_cli_build_and_execute_goal(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write(
        tmp_path / "Main.vm",
        "push constant 7",
        "push constant 8",
        "add",
    )

    assert _run(str(source), "-of", "hack", "--execute") == 0

    assert (tmp_path / "Main.hack").exists()
    assert "Stack: [15]" in capsys.readouterr().out


def test_cli_reports_toolchain_errors(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write(tmp_path / "Bad.asm", "@1", "D=M+D")

    assert _run(str(source)) == 1

    assert "[unknown-computation-error]" in capsys.readouterr().err
    assert not (tmp_path / "Bad.hack").exists()


def test_cli_unwrapped_errors(tmp_path: Path) -> None:
    source = _write(tmp_path / "Bad.asm", "D=M+D")

    with pytest.raises(UnknownComputationError):
        cli_entry_point([str(source), "--debug-unwrap-errors"])


def test_cli_warnings_are_verbose_only(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write(tmp_path / "Flow.vm", "label LOOP", "push constant 1")

    assert _run(str(source)) == 0
    assert "Skipping" not in capsys.readouterr().err

    assert _run(str(source), "-v") == 0
    assert "Skipping unsupported label command" in capsys.readouterr().err


def test_cli_version_goal(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run("--version") == 0
    assert "[Hackforge toolchain]" in capsys.readouterr().out
