"""Save/load/update/delete facade over a credential backend."""

from __future__ import annotations

import logging
from typing import Optional, Union

from keychain_store.secrets.base import BackendFailure, CredentialBackend, CredentialKey, NotFound
from keychain_store.secrets.encoding import bytes_from_text, text_from_bytes
from keychain_store.secrets.requests import (
    CreateRequest,
    ItemClass,
    MatchLimit,
    MatchSpec,
    QueryRequest,
    UpdateRequest,
)
from keychain_store.secrets.status import BackendStatus, status_name

LOGGER = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(value: BytesLike) -> bytes:
    if isinstance(value, str):
        raise TypeError("credential value must be bytes; use bytes_from_text for text")
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"credential value must be bytes, not {type(value).__name__}")
    return bytes(value)


class CredentialStore:
    """Generic-password entries keyed by (service, account).

    Every backend call is made exactly once. The store holds no cache, so
    concurrent callers see whatever ordering the backend guarantees per key.
    """

    def __init__(self, backend: CredentialBackend, delete_missing_ok: bool = True) -> None:
        self._backend = backend
        self._delete_missing_ok = delete_missing_ok

    @property
    def backend(self) -> CredentialBackend:
        return self._backend

    @property
    def delete_missing_ok(self) -> bool:
        return self._delete_missing_ok

    def save(self, service: str, account: str, value: BytesLike) -> None:
        """Create the entry, or overwrite it when one already exists."""
        key = CredentialKey(service=service, account=account)
        data = _as_bytes(value)
        status = self._backend.create(
            CreateRequest(
                item_class=ItemClass.GENERIC_PASSWORD,
                service=key.service,
                account=key.account,
                value=data,
            )
        )
        if status == BackendStatus.DUPLICATE_ITEM:
            LOGGER.debug("save found existing entry, updating: service=%s account=%s", key.service, key.account)
            self._update(key, data)
            return
        if status != BackendStatus.SUCCESS:
            raise self._failure("save", key, status)
        LOGGER.debug("saved credential: service=%s account=%s", key.service, key.account)

    def update(self, service: str, account: str, value: BytesLike) -> None:
        """Overwrite an existing entry. Raises NotFound when absent."""
        key = CredentialKey(service=service, account=account)
        self._update(key, _as_bytes(value))

    def load(self, service: str, account: str) -> Optional[bytes]:
        """Return the stored bytes, or None when nothing is stored under the key."""
        key = CredentialKey(service=service, account=account)
        result = self._backend.query(QueryRequest(match=_match(key), return_data=True, limit=MatchLimit.ONE))
        if result.status == BackendStatus.ITEM_NOT_FOUND:
            LOGGER.debug("no credential stored: service=%s account=%s", key.service, key.account)
            return None
        if not result.ok:
            raise self._failure("load", key, result.status)
        if result.value is None:
            raise self._failure("load", key, BackendStatus.DECODE)
        return result.value

    def delete(self, service: str, account: str) -> None:
        """Remove the entry.

        Deleting an absent key succeeds unless the store was built with
        delete_missing_ok=False, in which case NotFound is raised.
        """
        key = CredentialKey(service=service, account=account)
        status = self._backend.delete(_match(key))
        if status == BackendStatus.ITEM_NOT_FOUND:
            if self._delete_missing_ok:
                LOGGER.debug("delete of absent credential: service=%s account=%s", key.service, key.account)
                return
            raise NotFound(key.service, key.account)
        if status != BackendStatus.SUCCESS:
            raise self._failure("delete", key, status)
        LOGGER.debug("deleted credential: service=%s account=%s", key.service, key.account)

    def exists(self, service: str, account: str) -> bool:
        return self.load(service, account) is not None

    def save_text(self, service: str, account: str, text: str) -> None:
        self.save(service, account, bytes_from_text(text))

    def update_text(self, service: str, account: str, text: str) -> None:
        self.update(service, account, bytes_from_text(text))

    def load_text(self, service: str, account: str) -> Optional[str]:
        data = self.load(service, account)
        if data is None:
            return None
        return text_from_bytes(data)

    def _update(self, key: CredentialKey, data: bytes) -> None:
        status = self._backend.update(UpdateRequest(match=_match(key), value=data))
        if status == BackendStatus.ITEM_NOT_FOUND:
            raise NotFound(key.service, key.account)
        if status != BackendStatus.SUCCESS:
            raise self._failure("update", key, status)
        LOGGER.debug("updated credential: service=%s account=%s", key.service, key.account)

    def _failure(self, op: str, key: CredentialKey, status: int) -> BackendFailure:
        message = self._backend.status_message(status)
        LOGGER.warning(
            "%s failed: service=%s account=%s status=%s (%s)",
            op,
            key.service,
            key.account,
            status_name(status),
            message or "no diagnostic",
        )
        return BackendFailure(status, message)


def _match(key: CredentialKey) -> MatchSpec:
    return MatchSpec(item_class=ItemClass.GENERIC_PASSWORD, service=key.service, account=key.account)
