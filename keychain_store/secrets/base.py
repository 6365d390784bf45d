"""Credential store abstractions.

Persistence is always delegated to a backend (OS keychain or in-process);
this layer only builds requests and classifies the statuses it gets back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from keychain_store.secrets.requests import CreateRequest, MatchSpec, QueryRequest, QueryResult, UpdateRequest
from keychain_store.secrets.status import status_message, status_name


class StoreError(RuntimeError):
    """Raised when a credential operation cannot be completed."""


class NotFound(StoreError):
    """Raised when an operation requires an existing entry and none matched."""

    def __init__(self, service: str, account: str) -> None:
        super().__init__(f"credential not found: service='{service}' account='{account}'")
        self.service = service
        self.account = account


class BackendFailure(StoreError):
    """Raised when the backend reports a status other than success/duplicate/not-found."""

    def __init__(self, code: int, message: Optional[str] = None) -> None:
        detail = f"backend failure {status_name(code)} ({int(code)})"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)
        self.code = int(code)
        self.message = message


class CredentialKey(BaseModel):
    """(service, account) pair identifying one stored secret. No normalization is applied."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    service: str = Field(min_length=1)
    account: str = Field(min_length=1)


class CredentialBackend(ABC):
    """Platform secure key-value store interface.

    Expected outcomes (duplicate, not found, locked keychain, ...) are
    returned as status codes, never raised.
    """

    @abstractmethod
    def create(self, request: CreateRequest) -> int:
        """Add a new entry; DUPLICATE_ITEM when one already matches."""

    @abstractmethod
    def update(self, request: UpdateRequest) -> int:
        """Replace the value of an existing entry; ITEM_NOT_FOUND otherwise."""

    @abstractmethod
    def query(self, request: QueryRequest) -> QueryResult:
        """Look up at most one exact match."""

    @abstractmethod
    def delete(self, match: MatchSpec) -> int:
        """Remove the matching entry; ITEM_NOT_FOUND when none matched."""

    def status_message(self, status: int) -> Optional[str]:
        return status_message(status)
