"""OS keychain adapter built on the keyring package.

keyring selects the platform store: macOS Keychain, Windows Credential
Manager, or Secret Service (GNOME Keyring / KWallet) on Linux.
"""

from __future__ import annotations

import base64
import binascii
import importlib
import logging
from typing import Any, Callable, Optional

from keychain_store.secrets.base import BackendFailure, CredentialBackend
from keychain_store.secrets.requests import CreateRequest, ItemClass, MatchSpec, QueryRequest, QueryResult, UpdateRequest
from keychain_store.secrets.status import BackendStatus, status_name

LOGGER = logging.getLogger(__name__)

VALUE_ENCODINGS = ("base64", "utf-8")


class KeyringBackend(CredentialBackend):
    def __init__(self, value_encoding: str = "base64") -> None:
        if value_encoding not in VALUE_ENCODINGS:
            raise ValueError(f"unsupported value encoding: {value_encoding}")
        self._value_encoding = value_encoding
        try:
            self._keyring = importlib.import_module("keyring")
            self._errors = importlib.import_module("keyring.errors")
        except ImportError as exc:
            raise BackendFailure(
                BackendStatus.NOT_AVAILABLE, "keyring package is required for OS keychain access"
            ) from exc

    @property
    def value_encoding(self) -> str:
        return self._value_encoding

    def backend_name(self) -> str:
        return type(self._keyring.get_keyring()).__name__

    def create(self, request: CreateRequest) -> int:
        match = request.match
        if match.item_class != ItemClass.GENERIC_PASSWORD:
            return BackendStatus.PARAM
        stored = self._encode(request.value)
        if stored is None:
            return BackendStatus.PARAM
        status, existing = self._call(self._keyring.get_password, match.service, match.account)
        if status != BackendStatus.SUCCESS:
            return status
        if existing is not None:
            return BackendStatus.DUPLICATE_ITEM
        status, _ = self._call(self._keyring.set_password, match.service, match.account, stored)
        return status

    def update(self, request: UpdateRequest) -> int:
        match = request.match
        if match.item_class != ItemClass.GENERIC_PASSWORD:
            return BackendStatus.PARAM
        stored = self._encode(request.value)
        if stored is None:
            return BackendStatus.PARAM
        status, existing = self._call(self._keyring.get_password, match.service, match.account)
        if status != BackendStatus.SUCCESS:
            return status
        if existing is None:
            return BackendStatus.ITEM_NOT_FOUND
        status, _ = self._call(self._keyring.set_password, match.service, match.account, stored)
        return status

    def query(self, request: QueryRequest) -> QueryResult:
        match = request.match
        if match.item_class != ItemClass.GENERIC_PASSWORD:
            return QueryResult(status=BackendStatus.PARAM)
        status, stored = self._call(self._keyring.get_password, match.service, match.account)
        if status != BackendStatus.SUCCESS:
            return QueryResult(status=status)
        if stored is None:
            return QueryResult(status=BackendStatus.ITEM_NOT_FOUND)
        if not request.return_data:
            return QueryResult(status=BackendStatus.SUCCESS)
        value = self._decode(stored)
        if value is None:
            return QueryResult(status=BackendStatus.DECODE)
        return QueryResult(status=BackendStatus.SUCCESS, value=value)

    def delete(self, match: MatchSpec) -> int:
        if match.item_class != ItemClass.GENERIC_PASSWORD:
            return BackendStatus.PARAM
        status, _ = self._call(self._keyring.delete_password, match.service, match.account)
        return status

    def _call(self, fn: Callable[..., Any], service: str, account: str, *args: Any) -> tuple[int, Any]:
        try:
            return BackendStatus.SUCCESS, fn(service, account, *args)
        except self._errors.KeyringError as exc:
            status = self._status_for(exc)
            if status != BackendStatus.ITEM_NOT_FOUND:
                LOGGER.debug(
                    "keyring %s failed for service=%s account=%s: %s (%s)",
                    fn.__name__,
                    service,
                    account,
                    status_name(status),
                    exc,
                )
            return status, None
        except Exception as exc:
            # Platform backends can raise raw OS or D-Bus errors outside keyring.errors.
            LOGGER.warning(
                "keyring %s raised %s for service=%s account=%s: %s",
                fn.__name__,
                type(exc).__name__,
                service,
                account,
                exc,
            )
            return BackendStatus.IO, None

    def _status_for(self, exc: Exception) -> int:
        errors = self._errors
        if isinstance(exc, errors.PasswordDeleteError):
            return BackendStatus.ITEM_NOT_FOUND
        if isinstance(exc, (errors.NoKeyringError, errors.InitError)):
            return BackendStatus.NOT_AVAILABLE
        if isinstance(exc, errors.KeyringLocked):
            return BackendStatus.INTERACTION_NOT_ALLOWED
        return BackendStatus.IO

    def _encode(self, value: bytes) -> Optional[str]:
        if self._value_encoding == "base64":
            return base64.b64encode(value).decode("ascii")
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            LOGGER.debug("value is not valid UTF-8 and cannot be stored as text")
            return None

    def _decode(self, stored: str) -> Optional[bytes]:
        try:
            if self._value_encoding == "base64":
                return base64.b64decode(stored.encode("ascii"), validate=True)
            return stored.encode("utf-8")
        except (binascii.Error, UnicodeError):
            LOGGER.debug("stored value is not valid %s", self._value_encoding)
            return None
