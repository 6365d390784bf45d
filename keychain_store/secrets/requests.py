"""Typed backend requests, one per operation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from keychain_store.secrets.status import BackendStatus


class ItemClass(str, Enum):
    GENERIC_PASSWORD = "generic_password"


class MatchLimit(str, Enum):
    ONE = "one"


@dataclass(frozen=True)
class MatchSpec:
    item_class: ItemClass
    service: str
    account: str


@dataclass(frozen=True)
class CreateRequest:
    item_class: ItemClass
    service: str
    account: str
    value: bytes

    @property
    def match(self) -> MatchSpec:
        return MatchSpec(item_class=self.item_class, service=self.service, account=self.account)


@dataclass(frozen=True)
class UpdateRequest:
    match: MatchSpec
    value: bytes


@dataclass(frozen=True)
class QueryRequest:
    match: MatchSpec
    return_data: bool = True
    limit: MatchLimit = MatchLimit.ONE


@dataclass(frozen=True)
class QueryResult:
    status: int
    value: Optional[bytes] = None

    @property
    def ok(self) -> bool:
        return self.status == BackendStatus.SUCCESS
