"""Credential backend factory based on config and OS."""

from __future__ import annotations

import platform
from typing import Optional

from keychain_store.config.settings import AppConfig, default_config
from keychain_store.secrets.base import BackendFailure, CredentialBackend
from keychain_store.secrets.credential_store import CredentialStore
from keychain_store.secrets.keyring_backend import KeyringBackend
from keychain_store.secrets.memory_backend import MemoryBackend
from keychain_store.secrets.status import BackendStatus

SUPPORTED_SYSTEMS = {
    "darwin": "macOS Keychain",
    "windows": "Windows Credential Manager",
    "linux": "Secret Service",
}


def create_backend(config: AppConfig) -> CredentialBackend:
    if config.store.backend == "memory":
        return MemoryBackend()
    system = platform.system().lower()
    if system not in SUPPORTED_SYSTEMS:
        raise BackendFailure(
            BackendStatus.NOT_AVAILABLE,
            f"unsupported OS for keychain storage: {platform.system()} "
            "(supported: macOS, Windows, Linux)",
        )
    return KeyringBackend(value_encoding=config.keyring.value_encoding)


def create_credential_store(config: Optional[AppConfig] = None) -> CredentialStore:
    config = config or default_config()
    return CredentialStore(
        backend=create_backend(config),
        delete_missing_ok=config.store.delete_missing_ok,
    )
