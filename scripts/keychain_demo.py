#!/usr/bin/env python3
"""Walk a credential through save, load, update, load, delete, load."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from keychain_store.config.settings import AppConfig, ConfigLoadError, default_config, load_config, parse_config  # noqa: E402
from keychain_store.secrets.base import StoreError  # noqa: E402
from keychain_store.secrets.credential_store import CredentialStore  # noqa: E402
from keychain_store.secrets.factory import create_credential_store  # noqa: E402

DEFAULT_SERVICE = "token"
DEFAULT_ACCOUNT = "Autherization"
TEST_DATA = "TestToken"
UPDATED_DATA = "TestToken Updated"

LOGGER = logging.getLogger("keychain_demo")


def _resolve_config(config_path: Optional[str], backend: Optional[str]) -> AppConfig:
    if config_path:
        config = load_config(Path(config_path))
    else:
        config = default_config()
    if backend:
        config = parse_config(
            {
                "version": config.version,
                "store": {"backend": backend, "delete_missing_ok": config.store.delete_missing_ok},
                "keyring": {"value_encoding": config.keyring.value_encoding},
                "logging": {"level": config.logging.level},
            }
        )
    return config


def run_scenario(store: CredentialStore, service: str, account: str) -> None:
    store.save_text(service, account, TEST_DATA)
    LOGGER.info("save ok")
    LOGGER.info("result, post save = %s", store.load_text(service, account))

    store.update_text(service, account, UPDATED_DATA)
    LOGGER.info("update ok")
    LOGGER.info("result, post update = %s", store.load_text(service, account))

    store.delete(service, account)
    LOGGER.info("delete ok")
    LOGGER.info("result, post delete = %s", store.load_text(service, account))


def main() -> int:
    parser = argparse.ArgumentParser(description="keychain-store demo runner")
    parser.add_argument("--config", default="", help="path to keychain.yaml")
    parser.add_argument("--backend", choices=["keyring", "memory"], default=None)
    parser.add_argument("--service", default=DEFAULT_SERVICE)
    parser.add_argument("--account", default=DEFAULT_ACCOUNT)
    args = parser.parse_args()

    try:
        config = _resolve_config(args.config, args.backend)
    except ConfigLoadError as exc:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        logging.error("demo blocked by invalid config: %s", exc)
        return 1

    logging.basicConfig(
        level=getattr(logging, config.logging.level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.info("backend=%s service=%s account=%s", config.store.backend, args.service, args.account)

    try:
        store = create_credential_store(config)
        run_scenario(store, args.service, args.account)
    except StoreError as exc:
        logging.error("credential operation failed: %s", exc)
        return 1
    except ValueError as exc:
        logging.error("invalid credential key: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
