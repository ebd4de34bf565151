import json
from pathlib import Path

import pytest

from todo_cli import cli
from todo_cli.config import default_store_path


def _run(tmp_path: Path, *args: str) -> int:
    return cli.main(["--file", str(tmp_path / "todos.json"), *args])


def test_add_list_done(tmp_path: Path, capsys):
    assert _run(tmp_path, "add", "Buy", "milk") == 0
    assert _run(tmp_path, "add", "Walk dog") == 0
    out = capsys.readouterr().out
    assert "Added task #1: Buy milk" in out
    assert "Added task #2: Walk dog" in out

    assert _run(tmp_path, "done", "1") == 0
    assert "Completed task #1: Buy milk" in capsys.readouterr().out

    assert _run(tmp_path, "list") == 0
    lines = capsys.readouterr().out.splitlines()
    assert any(l.split()[:2] == ["1", "DONE"] for l in lines)
    assert any(l.split()[:2] == ["2", "TODO"] for l in lines)

    assert _run(tmp_path, "list", "--todo") == 0
    out = capsys.readouterr().out
    assert "Walk dog" in out
    assert "Buy milk" not in out


def test_list_empty(tmp_path: Path, capsys):
    assert _run(tmp_path, "list") == 0
    assert "No tasks yet!" in capsys.readouterr().out
    assert not (tmp_path / "todos.json").exists()


def test_done_already_completed(tmp_path: Path, capsys):
    _run(tmp_path, "add", "A")
    _run(tmp_path, "done", "1")
    capsys.readouterr()

    assert _run(tmp_path, "done", "1") == 0
    assert "already completed" in capsys.readouterr().out


def test_done_unknown_id_exits_nonzero(tmp_path: Path, capsys):
    _run(tmp_path, "add", "A")
    before = (tmp_path / "todos.json").read_text(encoding="utf-8")

    assert _run(tmp_path, "done", "9") == 1
    assert "No task found with id 9" in capsys.readouterr().err
    assert (tmp_path / "todos.json").read_text(encoding="utf-8") == before


def test_corrupt_file_exits_nonzero(tmp_path: Path, capsys):
    (tmp_path / "todos.json").write_text("[oops", encoding="utf-8")
    assert _run(tmp_path, "list") == 1
    assert "Failed to parse" in capsys.readouterr().err


def test_blank_description_exits_nonzero(tmp_path: Path, capsys):
    assert _run(tmp_path, "add", "  ") == 1
    assert "must not be empty" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["frobnicate"],
        ["add"],
        ["done"],
        ["done", "abc"],
        ["done", "0"],
        ["list", "--todo", "--done"],
    ],
)
def test_invalid_arguments_print_usage(tmp_path: Path, capsys, argv):
    with pytest.raises(SystemExit) as exc:
        _run(tmp_path, *argv)
    assert exc.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_help(tmp_path: Path, capsys):
    assert _run(tmp_path, "help") == 0
    out = capsys.readouterr().out
    for name in ("add", "list", "done"):
        assert name in out


def test_default_file_in_working_directory(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.delenv("TODO_CLI_FILE", raising=False)
    monkeypatch.chdir(tmp_path)

    assert default_store_path() == (tmp_path / "todos.json").resolve()
    assert cli.main(["add", "here"]) == 0
    data = json.loads((tmp_path / "todos.json").read_text(encoding="utf-8"))
    assert data == [{"id": 1, "description": "here", "done": False}]


def test_env_var_overrides_default(tmp_path: Path, monkeypatch):
    target = tmp_path / "elsewhere" / "tasks.json"
    monkeypatch.setenv("TODO_CLI_FILE", str(target))

    assert default_store_path() == target.resolve()
    assert cli.main(["add", "x"]) == 0
    assert target.exists()


@pytest.mark.parametrize("content", [b"\xff\xfe[]", b"[" * 100000 + b"]" * 100000])
def test_undecodable_file_exits_nonzero(tmp_path: Path, capsys, content: bytes):
    (tmp_path / "todos.json").write_bytes(content)
    assert _run(tmp_path, "list") == 1
    assert "Failed to parse" in capsys.readouterr().err
