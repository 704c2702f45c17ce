"""Test the panelsim CLI."""

import json

import pytest

from panelsim.cli import build_parser, main
from panelsim.schematic.presets import get_preset
from panelsim.schematic.store import load_schematic, save_schematic


def _run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 0
    assert "panelsim" in capsys.readouterr().out


def test_kinds(capsys):
    out = _run(capsys, "kinds")
    assert "Switches:" in out
    assert "push_button_no" in out
    assert "gate_normally_open" in out


def test_presets(capsys):
    out = _run(capsys, "presets")
    assert "motor_contactor" in out
    assert "conveyor" in out


def test_run_preset_json(capsys):
    out = _run(capsys, "run", "preset:basic_on_off", "--json")
    data = json.loads(out)
    assert data["component_states"]["lamp_1"] == "off"
    assert data["switch_state"] == {"pb_1": False}

    out = _run(capsys, "run", "preset:basic_on_off", "--toggle", "pb_1", "--json")
    data = json.loads(out)
    assert data["component_states"]["lamp_1"] == "on"
    assert data["wire_energized"] == {"w1": True, "w2": True, "w3": True}


def test_run_table_output(capsys):
    out = _run(capsys, "run", "preset:traffic_light", "-t", "s1")
    assert "=== Simple Traffic Light ===" in out
    assert "closed" in out
    assert "4/8 components on" in out


def test_run_reports_non_gate_toggle(capsys):
    main(["run", "preset:basic_on_off", "--toggle", "lamp_1", "--json"])
    captured = capsys.readouterr()
    assert "Not a gate, ignored: lamp_1" in captured.err
    assert json.loads(captured.out)["component_states"]["lamp_1"] == "off"


def test_run_unknown_preset_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["run", "preset:nope"])
    assert exc.value.code == 1
    assert "Unknown preset" in capsys.readouterr().out


def test_run_file_and_stored_id(tmp_path, capsys):
    path = tmp_path / "panel.json"
    path.write_text(json.dumps(get_preset("basic_on_off").model_dump(mode="json")))
    data = json.loads(_run(capsys, "run", str(path), "-t", "pb_1", "--json"))
    assert data["component_states"]["lamp_1"] == "on"

    save_schematic(get_preset("sensor_signaling"))
    data = json.loads(_run(capsys, "run", "sensor_signaling", "--json"))
    assert data["component_states"]["bz"] == "on"


def test_run_missing_source_exits(capsys):
    with pytest.raises(SystemExit):
        main(["run", "does_not_exist"])
    assert "No schematic file" in capsys.readouterr().out


def test_export_save_list_delete(tmp_path, capsys):
    out_file = tmp_path / "motor.json"
    assert "Preset exported" in _run(capsys, "export", "motor_contactor", "-o", str(out_file))
    assert json.loads(out_file.read_text())["schematic_id"] == "motor_contactor"

    _run(capsys, "save", str(out_file))
    assert load_schematic("motor_contactor") is not None
    assert "motor_contactor" in _run(capsys, "list")

    assert "Deleted motor_contactor" in _run(capsys, "delete", "motor_contactor")
    assert "No stored schematics" in _run(capsys, "list")


def test_config_file_changes_roles(tmp_path, capsys):
    config = tmp_path / "custom.yaml"
    config.write_text("panelsim:\n  role_overrides:\n    push_button_no: gate_normally_closed\n")
    data = json.loads(_run(capsys, "--config", str(config), "run", "preset:basic_on_off", "--json"))
    assert data["switch_state"] == {"pb_1": True}
    assert data["component_states"]["lamp_1"] == "on"


def test_parser_toggle_is_repeatable():
    args = build_parser().parse_args(["run", "x.json", "-t", "a", "-t", "b"])
    assert args.toggle == ["a", "b"]


def test_delete_rejects_path_like_ids(tmp_path, capsys):
    outside = tmp_path / "foo.json"
    outside.write_text("{}")
    with pytest.raises(SystemExit) as exc:
        main(["delete", "../foo"])
    assert exc.value.code == 1
    assert "Invalid schematic id" in capsys.readouterr().out
    assert outside.exists()
