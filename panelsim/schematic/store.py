"""Persistence for schematic documents.

JSON files in ~/.panelsim/schematics/<schematic_id>.json, one document per
file. The directory can be overridden per call (see `schematics_dir` in
the configuration).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from panelsim.schematic.models import Schematic

log = logging.getLogger(__name__)

PANELSIM_HOME = Path.home() / ".panelsim"
SCHEMATICS_DIR = PANELSIM_HOME / "schematics"

PathLike = Union[str, Path]


def _resolve(directory: Optional[PathLike]) -> Path:
    path = Path(directory) if directory else SCHEMATICS_DIR
    path.mkdir(parents=True, exist_ok=True)
    return path


def _schematic_path(schematic_id: str, directory: Optional[PathLike]) -> Path:
    """File for a schematic id. Ids that could leave the store directory raise ValueError."""
    if not schematic_id or "/" in schematic_id or "\\" in schematic_id or ".." in schematic_id:
        raise ValueError(f"Invalid schematic id: {schematic_id!r}")
    return _resolve(directory) / f"{schematic_id}.json"


def save_schematic(schematic: Schematic, directory: Optional[PathLike] = None) -> Path:
    """Save a schematic to its JSON file. Returns the file path."""
    path = _schematic_path(schematic.schematic_id, directory)
    data = schematic.model_dump(mode="json")
    path.write_text(json.dumps(data, indent=2))
    log.info("Schematic saved: %s", path)
    return path


def load_schematic_file(path: PathLike) -> Schematic:
    """Load a schematic from an arbitrary JSON file.

    Raises FileNotFoundError for a missing file and pydantic's
    ValidationError for a document that does not match the model.
    """
    data = json.loads(Path(path).read_text())
    return Schematic.model_validate(data)


def load_schematic(schematic_id: str, directory: Optional[PathLike] = None) -> Optional[Schematic]:
    """Load a stored schematic by id; None if it does not exist.

    Raises ValueError for an id containing a path separator or "..".
    """
    path = _schematic_path(schematic_id, directory)
    if not path.exists():
        return None
    return load_schematic_file(path)


def list_schematics(directory: Optional[PathLike] = None) -> list[dict]:
    """List stored schematics (id, name, component and wire counts)."""
    result = []
    for path in sorted(_resolve(directory).glob("*.json")):
        try:
            schematic = load_schematic_file(path)
        except Exception as e:
            log.warning("Failed to load %s: %s", path, e)
            continue
        result.append({
            "schematic_id": schematic.schematic_id,
            "name": schematic.name,
            "components": len(schematic.components),
            "wires": len(schematic.wires),
        })
    return result


def delete_schematic(schematic_id: str, directory: Optional[PathLike] = None) -> bool:
    """Delete a stored schematic. Returns False if there was nothing to delete."""
    path = _schematic_path(schematic_id, directory)
    if path.exists():
        path.unlink()
        return True
    return False
