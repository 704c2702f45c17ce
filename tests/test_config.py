"""Test configuration loading."""

from panelsim.config import PanelSimConfig, _flatten_yaml
from panelsim.schematic.models import Component
from panelsim.types import SubRole


def test_default_config():
    config = PanelSimConfig()
    assert config.port == 8350
    assert config.log_level == "INFO"
    assert config.proximity_threshold == 15.0
    assert config.role_overrides == {}
    assert config.http_api_require_auth is False


def test_missing_yaml_gives_defaults(tmp_path):
    config = PanelSimConfig.from_yaml(tmp_path / "absent.yaml")
    assert config.port == 8350


def test_from_yaml(tmp_path):
    path = tmp_path / "panelsim.yaml"
    path.write_text(
        "panelsim:\n"
        "  port: 9000\n"
        "  proximity_threshold: 12\n"
        "  http_api:\n"
        "    require_auth: true\n"
        "  role_overrides:\n"
        "    timer_ton: gate_normally_open\n"
    )
    config = PanelSimConfig.from_yaml(path)
    assert config.port == 9000
    assert config.proximity_threshold == 12.0
    assert config.http_api_require_auth is True
    assert config.role_overrides == {"timer_ton": "gate_normally_open"}
    assert config.role_table().classify(Component(id="kt", kind="timer_ton")) is SubRole.GATE_NORMALLY_OPEN


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("PANELSIM_PROXIMITY_THRESHOLD", "18")
    assert PanelSimConfig().proximity_threshold == 18.0


def test_flatten_keeps_role_overrides_nested():
    flat = _flatten_yaml({"http_api": {"require_auth": True}, "role_overrides": {"lamp": "source"}})
    assert flat == {"http_api_require_auth": True, "role_overrides": {"lamp": "source"}}
