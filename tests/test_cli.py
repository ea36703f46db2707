"""CLI: score and batch output, corpus override, password never printed."""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

import cli


def run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["cli.py", *argv])
    cli.main()


def test_score_command(monkeypatch, capsys):
    run(monkeypatch, "score", "password")
    out = capsys.readouterr().out
    assert "Score: 0" in out
    assert "Grade: F" in out
    assert "Password is too common. Change it." in out


def test_score_prompts_when_no_argument(monkeypatch, capsys):
    monkeypatch.setattr(cli.getpass, "getpass", lambda prompt="": "xyza")
    run(monkeypatch, "score")
    out = capsys.readouterr().out
    assert "Too short. Make it longer." in out
    assert "xyza" not in out


def test_score_with_custom_corpus(monkeypatch, capsys, tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("Vq7#rZ!m2Lx9\n", encoding="utf-8")
    run(monkeypatch, "--corpus", str(words), "score", "Vq7#rZ!m2Lx9")
    assert "Score: 0" in capsys.readouterr().out


def test_missing_corpus_exits(monkeypatch, tmp_path):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, "--corpus", str(tmp_path / "missing.txt"), "score", "abc")
    assert exc.value.code == 1


def test_batch_prints_line_numbers_not_passwords(monkeypatch, capsys, tmp_path):
    f = tmp_path / "pw.txt"
    f.write_text("password\n\nKq!8zR#2wLp0\n", encoding="utf-8")
    run(monkeypatch, "batch", str(f))
    out = capsys.readouterr().out
    lines = out.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("line 1: 0 F")
    assert lines[1].startswith("line 3: ")
    assert "password" not in out.lower().replace("password is", "")
    assert "Kq!8zR#2wLp0" not in out


def test_batch_non_utf8_file_exits_cleanly(monkeypatch, capsys, tmp_path):
    f = tmp_path / "latin1.txt"
    f.write_bytes(b"caf\xe9\n\xff\xfe\n")
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, "batch", str(f))
    assert exc.value.code == 1
    assert "Not a UTF-8 text file" in capsys.readouterr().err


def test_batch_missing_file(monkeypatch, tmp_path):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, "batch", str(tmp_path / "nope.txt"))
    assert exc.value.code == 1
