"""In-process credential backend."""

from __future__ import annotations

import threading

from keychain_store.secrets.base import CredentialBackend
from keychain_store.secrets.requests import CreateRequest, ItemClass, MatchSpec, QueryRequest, QueryResult, UpdateRequest
from keychain_store.secrets.status import BackendStatus

_EntryKey = tuple[ItemClass, str, str]


def _entry_key(match: MatchSpec) -> _EntryKey:
    return (match.item_class, match.service, match.account)


class MemoryBackend(CredentialBackend):
    """Dict-backed store with keychain semantics. Nothing survives the process."""

    def __init__(self) -> None:
        self._entries: dict[_EntryKey, bytes] = {}
        self._lock = threading.Lock()

    def create(self, request: CreateRequest) -> int:
        key = _entry_key(request.match)
        with self._lock:
            if key in self._entries:
                return BackendStatus.DUPLICATE_ITEM
            self._entries[key] = bytes(request.value)
        return BackendStatus.SUCCESS

    def update(self, request: UpdateRequest) -> int:
        key = _entry_key(request.match)
        with self._lock:
            if key not in self._entries:
                return BackendStatus.ITEM_NOT_FOUND
            self._entries[key] = bytes(request.value)
        return BackendStatus.SUCCESS

    def query(self, request: QueryRequest) -> QueryResult:
        with self._lock:
            value = self._entries.get(_entry_key(request.match))
        if value is None:
            return QueryResult(status=BackendStatus.ITEM_NOT_FOUND)
        return QueryResult(status=BackendStatus.SUCCESS, value=value if request.return_data else None)

    def delete(self, match: MatchSpec) -> int:
        with self._lock:
            if self._entries.pop(_entry_key(match), None) is None:
                return BackendStatus.ITEM_NOT_FOUND
        return BackendStatus.SUCCESS

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
