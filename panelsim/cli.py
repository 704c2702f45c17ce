"""CLI for the continuity simulator.

Usage:
    panelsim kinds
    panelsim presets
    panelsim run preset:basic_on_off --toggle pb_1
    panelsim run my_panel.json --toggle S1 --toggle K1a --json
    panelsim export motor_contactor -o motor.json
    panelsim save my_panel.json
    panelsim list
    panelsim delete <schematic_id>
    panelsim serve
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from panelsim.config import PanelSimConfig
from panelsim.observability.logging import setup_logging
from panelsim.schematic.catalog import categories
from panelsim.schematic.models import Schematic
from panelsim.schematic.presets import PresetNotFound, get_preset, list_presets
from panelsim.schematic.store import (
    delete_schematic,
    list_schematics,
    load_schematic,
    load_schematic_file,
    save_schematic,
)
from panelsim.simulation import SimulationSession
from panelsim.types import DisplayState, Role

PRESET_PREFIX = "preset:"


def _load_config(args: argparse.Namespace) -> PanelSimConfig:
    return PanelSimConfig.from_yaml(args.config)


def _store_dir(config: PanelSimConfig) -> Optional[str]:
    return config.schematics_dir or None


def _read_file(path: str) -> Schematic:
    """Load a schematic file or exit with an error."""
    try:
        return load_schematic_file(path)
    except (json.JSONDecodeError, ValidationError) as e:
        print(f"Invalid schematic file {path}: {e}")
        sys.exit(1)


def _load_source(source: str, config: PanelSimConfig) -> Schematic:
    """Resolve `preset:<id>`, a file path, or a stored schematic id."""
    if source.startswith(PRESET_PREFIX):
        preset_id = source[len(PRESET_PREFIX):]
        try:
            return get_preset(preset_id)
        except PresetNotFound:
            print(f"Unknown preset: {preset_id}")
            sys.exit(1)

    if Path(source).exists():
        return _read_file(source)

    try:
        schematic = load_schematic(source, _store_dir(config))
    except ValueError as e:
        print(e)
        sys.exit(1)
    if schematic is None:
        print(f"No schematic file or stored schematic named: {source}")
        sys.exit(1)
    return schematic


def cmd_kinds(args: argparse.Namespace) -> None:
    """List catalog kinds grouped by category."""
    config = _load_config(args)
    roles = config.role_table().kinds()
    for category, entries in categories().items():
        print(f"{category}:")
        for entry in entries:
            sub_role = roles.get(entry.kind, entry.sub_role)
            print(f"  {entry.kind:<20} {entry.label:<28} {sub_role.value}")


def cmd_presets(args: argparse.Namespace) -> None:
    """List built-in presets."""
    print(f"{'ID':<18} {'Level':<13} {'Name':<24} {'Description'}")
    print(f"{'---':<18} {'---':<13} {'---':<24} {'---'}")
    for p in list_presets():
        print(f"{p['preset_id']:<18} {p['level']:<13} {p['name']:<24} {p['description']}")


def cmd_run(args: argparse.Namespace) -> None:
    """Seed, apply toggles in order, and print the resulting states."""
    config = _load_config(args)
    schematic = _load_source(args.source, config)
    roles = config.role_table()

    session = SimulationSession(
        schematic.components,
        schematic.wires,
        roles=roles,
        threshold=config.proximity_threshold,
    )
    result = session.start()
    for gate_id in args.toggle or []:
        if gate_id not in session.switch_state:
            print(f"Not a gate, ignored: {gate_id}", file=sys.stderr)
        result = session.toggle(gate_id)

    switch_state = session.switch_state
    if args.json:
        data = result.to_dict()
        data["switch_state"] = switch_state.as_dict()
        print(json.dumps(data, indent=2))
        return

    print(f"=== {schematic.name} ===")
    print()
    print("COMPONENTS:")
    print(f"  {'ID':<10} {'Kind':<20} {'Role':<8} {'State':<6} {'Switch'}")
    print(f"  {'---':<10} {'---':<20} {'---':<8} {'---':<6} {'---'}")
    for comp in schematic.components:
        role = roles.role_of(comp)
        state = result.state_of(comp.id)
        switch = ""
        if role is Role.GATE:
            switch = "closed" if switch_state.is_closed(comp.id) else "open"
        print(f"  {comp.id:<10} {comp.kind:<20} {role.value:<8} {state.value:<6} {switch}")

    print()
    energized_wires = result.energized_wires()
    print(f"WIRES ({len(energized_wires)}/{len(result.wire_energized)} energized):")
    for wire_id, energized in result.wire_energized.items():
        print(f"  {wire_id:<10} {'energized' if energized else '-'}")

    on = sum(1 for s in result.component_states.values() if s is DisplayState.ON)
    print()
    print(f"{on}/{len(result.component_states)} components on")


def cmd_export(args: argparse.Namespace) -> None:
    """Write a preset as a schematic JSON file."""
    try:
        schematic = get_preset(args.preset_id)
    except PresetNotFound:
        print(f"Unknown preset: {args.preset_id}")
        sys.exit(1)

    output = args.output or f"{schematic.schematic_id}.json"
    Path(output).write_text(json.dumps(schematic.model_dump(mode="json"), indent=2))
    print(f"Preset exported to: {output}")


def cmd_save(args: argparse.Namespace) -> None:
    """Copy a schematic file into the store."""
    config = _load_config(args)
    if not Path(args.file).exists():
        print(f"File not found: {args.file}")
        sys.exit(1)
    schematic = _read_file(args.file)
    try:
        path = save_schematic(schematic, _store_dir(config))
    except ValueError as e:
        print(e)
        sys.exit(1)
    print(f"Saved {schematic.schematic_id} to {path}")


def cmd_list(args: argparse.Namespace) -> None:
    """List stored schematics."""
    config = _load_config(args)
    schematics = list_schematics(_store_dir(config))
    if not schematics:
        print("No stored schematics. Run: panelsim save <file.json>")
        return

    print(f"{'ID':<14} {'Name':<28} {'Comps':<6} {'Wires'}")
    print(f"{'---':<14} {'---':<28} {'---':<6} {'---'}")
    for s in schematics:
        print(f"{s['schematic_id']:<14} {s['name']:<28} {s['components']:<6} {s['wires']}")


def cmd_delete(args: argparse.Namespace) -> None:
    """Delete a stored schematic."""
    config = _load_config(args)
    try:
        deleted = delete_schematic(args.schematic_id, _store_dir(config))
    except ValueError as e:
        print(e)
        sys.exit(1)
    if deleted:
        print(f"Deleted {args.schematic_id}")
    else:
        print(f"No stored schematic: {args.schematic_id}")
        sys.exit(1)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the HTTP API under uvicorn."""
    import uvicorn

    from panelsim.app import create_app

    config = _load_config(args)
    uvicorn.run(
        create_app(config),
        host=args.host or config.host,
        port=args.port or config.port,
        log_level=config.log_level.lower(),
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="panelsim",
        description="Continuity simulator for electrical control schematics",
    )
    parser.add_argument("--config", default="panelsim.yaml", help="YAML config file")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = parser.add_subparsers(dest="command", help="Available commands")

    # kinds
    sub.add_parser("kinds", help="List component kinds and their simulation roles")

    # presets
    sub.add_parser("presets", help="List built-in example circuits")

    # run
    p_run = sub.add_parser("run", help="Simulate a schematic")
    p_run.add_argument("source", help="Schematic JSON file, stored schematic id, or preset:<id>")
    p_run.add_argument("--toggle", "-t", action="append", metavar="GATE_ID", help="Toggle a gate (repeatable)")
    p_run.add_argument("--json", action="store_true", help="Print the result as JSON")

    # export
    p_export = sub.add_parser("export", help="Export a preset as schematic JSON")
    p_export.add_argument("preset_id", help="Preset id (see `panelsim presets`)")
    p_export.add_argument("--output", "-o", default=None, help="Output file path")

    # save
    p_save = sub.add_parser("save", help="Add a schematic file to the store")
    p_save.add_argument("file", help="Schematic JSON file")

    # list
    sub.add_parser("list", help="List stored schematics")

    # delete
    p_delete = sub.add_parser("delete", help="Delete a stored schematic")
    p_delete.add_argument("schematic_id")

    # serve
    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the `panelsim` CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    setup_logging(args.log_level or _load_config(args).log_level)

    commands = {
        "kinds": cmd_kinds,
        "presets": cmd_presets,
        "run": cmd_run,
        "export": cmd_export,
        "save": cmd_save,
        "list": cmd_list,
        "delete": cmd_delete,
        "serve": cmd_serve,
    }

    fn = commands.get(args.command)
    if fn:
        fn(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
