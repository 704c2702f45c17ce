"""Shared fixtures: keep the schematic store out of the real home directory."""

import pytest

from panelsim.schematic import store


@pytest.fixture(autouse=True)
def _isolated_store(tmp_path, monkeypatch):
    monkeypatch.setattr(store, "SCHEMATICS_DIR", tmp_path / "schematics")
    monkeypatch.chdir(tmp_path)
