import io
from pathlib import Path

import pytest

from previter.__main__ import main


def test_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "lines.txt"
    path.write_text("a\nb\nb\nc\n")
    main([str(path)])
    assert capsys.readouterr().out == "\ta\na\tb\nb\tb\nb\tc\n"


def test_dedupe_and_separator(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "lines.txt"
    path.write_text("a\nb\nb\nc\n")
    main([str(path), "--dedupe", "--separator", " -> "])
    assert capsys.readouterr().out == " -> a\na -> b\nb -> c\n"


def test_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("x\ny\n"))
    main([])
    assert capsys.readouterr().out == "\tx\nx\ty\n"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.txt")])
    assert excinfo.value.code == 2
