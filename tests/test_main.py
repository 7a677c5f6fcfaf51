from __future__ import annotations

import io
import json
import os
import subprocess
import sys
from pathlib import Path

import main as entry
from src.nick.models import ChangeNick, ConnectionId, Disconnect

ROOT = Path(__file__).parents[1]


def _write_config(tmp_path, **data):
    path = tmp_path / "altnick.conf"
    path.write_text(json.dumps(data))
    return str(path)


def test_health_check_ok(tmp_path):
    path = _write_config(tmp_path, nicks=["Foo"])
    assert entry.main(["--config", path, "--health-check"]) == 0


def test_health_check_fails_on_bad_config(tmp_path):
    path = _write_config(tmp_path, nicks=["1bad"])
    assert entry.main(["--config", path, "--health-check"]) == 1


def test_missing_config_file_exits_nonzero(tmp_path):
    assert entry.main(["--config", str(tmp_path / "nope.conf")]) == 1


def test_replay_prints_commands(tmp_path, monkeypatch, capsys):
    path = _write_config(tmp_path, nicks=["Foo"])
    stdin = io.StringIO(
        ":srv 433 * Wanted :Nickname is already in use\n"
        ":srv 433 * Foo :Nickname is already in use\n"
    )
    monkeypatch.setattr("sys.stdin", stdin)

    assert entry.main(["--config", path, "--connection", "test"]) == 0

    assert capsys.readouterr().out.splitlines() == [
        "NICK Foo",
        "QUIT :All specified alternate nicks are in use",
    ]


def test_replay_stdout_carries_only_commands(tmp_path):
    path = _write_config(tmp_path, nicks=["Foo"])
    result = subprocess.run(
        [sys.executable, str(ROOT / "main.py"), "--config", path],
        input=(
            ":srv 433 * Wanted :Nickname is already in use\r\n"
            ":srv 433 * Foo :Nickname is already in use\r\n"
        ),
        capture_output=True,
        text=True,
        cwd=ROOT,
        env={**os.environ, "DEBUG": "true"},
        timeout=60,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == [
        "NICK Foo",
        "QUIT :All specified alternate nicks are in use",
    ]
    # Each event is logged once, by the project logger on stderr.
    assert result.stderr.count("Loaded 1 alternate nick(s)") == 1


def test_format_command():
    cid = ConnectionId("c")
    assert entry.format_command(ChangeNick(cid, "Foo")) == "NICK Foo"
    assert entry.format_command(Disconnect(cid, "bye")) == "QUIT :bye"
