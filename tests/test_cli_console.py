from __future__ import annotations

import json
from pathlib import Path

from eggers.presentation.cli import app
from eggers.presentation.cli.app import build_session


def _started_session(tmp_path: Path, seed: int = 1):
    session = build_session(config_path=tmp_path / "eggers.json", seed=seed)
    assert session.start()
    return session


def test_set_get_remove_flow(tmp_path: Path) -> None:
    session = _started_session(tmp_path)
    assert session.execute("set zombie 35") == ["You have set the drop chance for minecraft:zombie to 35.0!"]
    assert session.execute("get zombie") == ["The drop chance for minecraft:zombie is 35.0."]
    assert session.execute("list") == ["minecraft:zombie: 35.0"]
    assert session.execute("remove zombie") == ["You have removed the drop chance for: minecraft:zombie"]
    assert session.execute("get zombie") == ["This entity type does not have a drop chance set!"]
    assert session.execute("list") == ["No drop chances are set."]


def test_policy_rejections_are_reported(tmp_path: Path) -> None:
    session = _started_session(tmp_path)
    assert session.execute("set zombie 0") == [
        "You cannot set a drop chance as zero or below, consider removing instead."
    ]
    assert session.execute("set wither 10") == ["This entity type does not have a spawn egg!"]
    assert session.execute("set unicorn 10") == ["You must specify an entity type!"]
    assert session.execute("set zombie lots") == ["You must specify a drop chance!"]


def test_usage_and_unknown_commands(tmp_path: Path) -> None:
    session = _started_session(tmp_path)
    assert session.execute("set zombie") == ["Usage: set <entity> <chance>"]
    assert session.execute("remove") == ["Usage: remove <entity>"]
    assert session.execute("get") == ["Usage: get <entity>"]
    assert session.execute("dance")[0].startswith("Unknown command: dance")
    assert session.execute("") == []
    assert session.execute('set "zombie 5') == [
        "Could not parse command: No closing quotation"
    ]
    assert session.execute("help")[0] == "Commands:"
    assert "spawn eggs" in session.execute("info")[0]
    assert session.execute("quit") is None


def test_kill_reports_drops(tmp_path: Path) -> None:
    session = _started_session(tmp_path)
    session.execute("set pig 100")
    assert session.execute("kill pig 3") == ["Killed 3 Pig and dropped 3 spawn egg(s) (3 on the ground)."]
    assert session.execute("kill cow") == ["Killed 1 Cow and dropped 0 spawn egg(s) (3 on the ground)."]
    assert session.execute("kill pig zero") == ["Count must be a whole number."]
    assert session.execute("kill pig 0") == ["Count must be between 1 and 10000."]
    assert session.execute("kill unicorn") == ["You must specify an entity type!"]


def test_reload_command(tmp_path: Path) -> None:
    session = _started_session(tmp_path)
    path = tmp_path / "eggers.json"
    path.write_text(json.dumps({"drop_chances": {"minecraft:cow": 40}}), encoding="utf-8")
    assert session.execute("reload") == ["Configuration reloaded."]
    assert session.execute("get cow") == ["The drop chance for minecraft:cow is 40.0."]
    path.write_text("nope", encoding="utf-8")
    assert session.execute("reload") == ["Reload failed, see the log for details."]


def test_main_loop_reads_until_quit(monkeypatch, tmp_path: Path, capsys) -> None:
    monkeypatch.setenv("EGGERS_CONFIG", str(tmp_path / "eggers.json"))
    inputs = iter(["set cow 50", "get cow", "quit"])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(inputs))
    app.main()
    output = capsys.readouterr().out
    assert "You have set the drop chance for minecraft:cow to 50.0!" in output
    assert "The drop chance for minecraft:cow is 50.0." in output
    assert output.rstrip().endswith("Goodbye!")


def test_main_exits_on_eof(monkeypatch, tmp_path: Path, capsys) -> None:
    monkeypatch.setenv("EGGERS_CONFIG", str(tmp_path / "eggers.json"))

    def _eof(_prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    app.main()
    assert "Goodbye!" in capsys.readouterr().out
