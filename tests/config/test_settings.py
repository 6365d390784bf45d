from pathlib import Path

import pytest
import yaml

from keychain_store.config.settings import ConfigLoadError, default_config, load_config

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "keychain.yaml"


def test_default_config_file_loads() -> None:
    config = load_config(CONFIG_PATH)
    assert config.store.backend in {"keyring", "memory"}
    assert config.keyring.value_encoding in {"base64", "utf-8"}
    assert config.store.delete_missing_ok is True


def test_default_config_without_file() -> None:
    config = default_config()
    assert config.store.backend == "keyring"
    assert config.store.delete_missing_ok is True
    assert config.keyring.value_encoding == "base64"
    assert config.logging.level == "INFO"


def _write(tmp_path: Path, data: dict) -> Path:
    path = tmp_path / "keychain.yaml"
    path.write_text(yaml.safe_dump(data, allow_unicode=False), encoding="utf-8")
    return path


def _base() -> dict:
    return yaml.safe_load(CONFIG_PATH.read_text(encoding="utf-8"))


def test_config_rejects_unknown_backend(tmp_path: Path) -> None:
    src = _base()
    src["store"]["backend"] = "vault"
    with pytest.raises(ConfigLoadError):
        load_config(_write(tmp_path, src))


def test_config_rejects_unknown_encoding(tmp_path: Path) -> None:
    src = _base()
    src["keyring"]["value_encoding"] = "hex"
    with pytest.raises(ConfigLoadError):
        load_config(_write(tmp_path, src))


def test_config_accepts_utf8_alias(tmp_path: Path) -> None:
    src = _base()
    src["keyring"]["value_encoding"] = "UTF8"
    assert load_config(_write(tmp_path, src)).keyring.value_encoding == "utf-8"


def test_config_rejects_non_bool_delete_policy(tmp_path: Path) -> None:
    src = _base()
    src["store"]["delete_missing_ok"] = "yes please"
    with pytest.raises(ConfigLoadError):
        load_config(_write(tmp_path, src))


def test_config_rejects_non_object_section(tmp_path: Path) -> None:
    src = _base()
    src["logging"] = ["INFO"]
    with pytest.raises(ConfigLoadError):
        load_config(_write(tmp_path, src))


def test_config_requires_version(tmp_path: Path) -> None:
    src = _base()
    del src["version"]
    with pytest.raises(ConfigLoadError):
        load_config(_write(tmp_path, src))


def test_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError):
        load_config(tmp_path / "absent.yaml")


def test_config_rejects_non_object_root(tmp_path: Path) -> None:
    path = tmp_path / "keychain.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError):
        load_config(path)
