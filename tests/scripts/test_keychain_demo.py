import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType

import pytest

from keychain_store.secrets.credential_store import CredentialStore
from keychain_store.secrets.memory_backend import MemoryBackend

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "keychain_demo.py"


def _load_demo() -> ModuleType:
    spec = importlib.util.spec_from_file_location("keychain_demo", SCRIPT_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_demo_scenario_leaves_no_entry(caplog: pytest.LogCaptureFixture) -> None:
    demo = _load_demo()
    backend = MemoryBackend()
    with caplog.at_level(logging.INFO):
        demo.run_scenario(CredentialStore(backend), "token", "Autherization")
    assert "result, post save = TestToken" in caplog.text
    assert "result, post update = TestToken Updated" in caplog.text
    assert "result, post delete = None" in caplog.text
    assert len(backend) == 0


def test_demo_main_with_memory_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    demo = _load_demo()
    monkeypatch.setattr(sys, "argv", ["keychain_demo.py", "--backend", "memory"])
    assert demo.main() == 0


def test_demo_main_rejects_missing_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    demo = _load_demo()
    monkeypatch.setattr(sys, "argv", ["keychain_demo.py", "--config", str(tmp_path / "absent.yaml")])
    assert demo.main() == 1


@pytest.mark.parametrize("flag", ["--service", "--account"])
def test_demo_main_rejects_empty_key_part(monkeypatch: pytest.MonkeyPatch, flag: str) -> None:
    demo = _load_demo()
    monkeypatch.setattr(sys, "argv", ["keychain_demo.py", "--backend", "memory", flag, ""])
    assert demo.main() == 1


def test_demo_puts_repo_root_on_path() -> None:
    demo = _load_demo()
    assert str(demo.ROOT) in sys.path
    assert (demo.ROOT / "keychain_store").is_dir()
