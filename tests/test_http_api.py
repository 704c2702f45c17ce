"""Test the HTTP API with FastAPI's TestClient."""

from fastapi.testclient import TestClient

from panelsim.app import create_app
from panelsim.config import PanelSimConfig
from panelsim.schematic.presets import get_preset


def _client(**overrides) -> TestClient:
    return TestClient(create_app(PanelSimConfig(**overrides)))


def _basic():
    return get_preset("basic_on_off").model_dump(mode="json")


def test_root_and_health():
    client = _client()
    assert client.get("/health").json()["status"] == "healthy"
    root = client.get("/").json()
    assert root["name"] == "panelsim"
    assert "basic_on_off" in root["presets"]


def test_seed():
    client = _client()
    resp = client.post("/api/v1/seed", json={"components": _basic()["components"]})
    assert resp.status_code == 200
    assert resp.json() == {"switch_state": {"pb_1": False}}


def test_toggle():
    client = _client()
    resp = client.post("/api/v1/toggle", json={"switch_state": {"pb_1": False}, "gate_id": "pb_1"})
    assert resp.json() == {"switch_state": {"pb_1": True}}

    resp = client.post("/api/v1/toggle", json={"switch_state": {"pb_1": False}, "gate_id": "nope"})
    assert resp.json() == {"switch_state": {"pb_1": False}}


def test_run_seeds_when_switch_state_missing():
    client = _client()
    doc = _basic()
    resp = client.post("/api/v1/run", json={"components": doc["components"], "wires": doc["wires"]})
    body = resp.json()
    assert resp.status_code == 200
    assert body["component_states"]["lamp_1"] == "off"
    assert body["component_states"]["src_1"] == "on"
    assert body["switch_state"] == {"pb_1": False}
    assert body["wire_energized"] == {"w1": False, "w2": False, "w3": False}


def test_seed_toggle_run_round():
    client = _client()
    doc = _basic()
    state = client.post("/api/v1/seed", json={"components": doc["components"]}).json()["switch_state"]
    state = client.post("/api/v1/toggle", json={"switch_state": state, "gate_id": "pb_1"}).json()["switch_state"]
    body = client.post(
        "/api/v1/run",
        json={"components": doc["components"], "wires": doc["wires"], "switch_state": state},
    ).json()
    assert body["component_states"]["lamp_1"] == "on"
    assert all(body["wire_energized"].values())

    metrics = client.get("/metrics").json()
    assert metrics["seeds"] == 1
    assert metrics["toggles"] == 1
    assert metrics["runs"] == 1
    assert metrics["last_node_count"] == 7


def test_run_uses_configured_threshold():
    doc = _basic()
    for wire in doc["wires"]:
        for point in wire["points"]:
            point["x"] += 16
    payload = {"components": doc["components"], "wires": doc["wires"], "switch_state": {"pb_1": True}}

    assert _client().post("/api/v1/run", json=payload).json()["component_states"]["lamp_1"] == "off"
    wide = _client(proximity_threshold=20)
    assert wide.post("/api/v1/run", json=payload).json()["component_states"]["lamp_1"] == "on"


def test_run_rejects_malformed_payload():
    client = _client()
    resp = client.post("/api/v1/run", json={"components": [{"kind": "lamp"}]})
    assert resp.status_code == 422


def test_presets():
    client = _client()
    listed = client.get("/api/v1/presets").json()
    assert listed[0]["preset_id"] == "basic_on_off"

    resp = client.get("/api/v1/presets/motor_contactor")
    assert resp.status_code == 200
    assert len(resp.json()["components"]) == 11

    assert client.get("/api/v1/presets/nope").status_code == 404


def test_api_key_required_when_configured():
    client = _client(http_api_require_auth=True, api_key="secret")
    assert client.get("/api/v1/presets").status_code == 401
    assert client.get("/api/v1/presets", headers={"X-API-Key": "wrong"}).status_code == 401
    assert client.get("/api/v1/presets", headers={"X-API-Key": "secret"}).status_code == 200
    # Health stays open
    assert client.get("/health").status_code == 200
