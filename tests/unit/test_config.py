from __future__ import annotations

import json
from pathlib import Path

import pytest

from icocheck.config import Config, ConfigError
from icocheck.config_schemas import ExitCodeConfig, IcoCheckConfig, LoggingConfig, TargetConfig
from icocheck.core.constants import DEFAULT_ICON_PATH


def _write_config(tmp_path: Path, data) -> str:
    path = tmp_path / "icocheck.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


@pytest.mark.unit
def test_defaults_do_not_touch_disk(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = Config()
    assert config.config_path is None
    assert config.get_target_path() == DEFAULT_ICON_PATH
    assert list(tmp_path.iterdir()) == []


@pytest.mark.unit
def test_default_sections_are_isolated_between_instances() -> None:
    first = Config()
    first.set("target", "path", "other.ico")
    assert Config().get("target", "path") == DEFAULT_ICON_PATH


@pytest.mark.unit
def test_load_merges_user_values(tmp_path: Path) -> None:
    config = Config(_write_config(tmp_path, {"target": {"path": "assets/app.ico"}}))
    typed = config.typed()
    assert typed.target.path == "assets/app.ico"
    assert typed.exit_codes.invalid == 1
    assert typed.exit_codes.io_failure == 1
    assert config["logging"]["level"] == "WARNING"
    assert "exit_codes" in config


@pytest.mark.unit
def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        Config(str(tmp_path / "absent.json"))


@pytest.mark.unit
def test_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Could not load config"):
        Config(str(path))


@pytest.mark.unit
def test_non_object_root(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="JSON object"):
        Config(_write_config(tmp_path, ["target"]))


@pytest.mark.unit
@pytest.mark.parametrize(
    "data",
    [
        {"exit_codes": {"io_failure": 0}},
        {"exit_codes": {"invalid": 256}},
        {"exit_codes": {"invalid": True}},
        {"logging": {"level": "LOUD"}},
        {"target": {"path": "  "}},
        {"target": "icon.ico"},
    ],
)
def test_invalid_values_are_rejected(tmp_path: Path, data) -> None:
    config = Config(_write_config(tmp_path, data))
    with pytest.raises(ConfigError, match="Invalid configuration"):
        config.typed()


@pytest.mark.unit
def test_unknown_keys_are_ignored() -> None:
    typed = IcoCheckConfig.from_dict({"target": {"path": "a.ico", "extra": 1}, "other": {}})
    assert typed.target == TargetConfig(path="a.ico")
    assert typed.logging == LoggingConfig()
    assert typed.exit_codes == ExitCodeConfig()
    assert typed.to_dict()["target"] == {"path": "a.ico"}
