"""Backend status codes.

Numbers follow the platform keychain (OSStatus) so native codes pass through
unchanged. The status space is open: any other int is a failure code.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional


class BackendStatus(IntEnum):
    SUCCESS = 0
    UNIMPLEMENTED = -4
    IO = -36
    PARAM = -50
    USER_CANCELED = -128
    NOT_AVAILABLE = -25291
    AUTH_FAILED = -25293
    DUPLICATE_ITEM = -25299
    ITEM_NOT_FOUND = -25300
    INTERACTION_NOT_ALLOWED = -25308
    DECODE = -26275


_MESSAGES = {
    BackendStatus.SUCCESS: "No error.",
    BackendStatus.UNIMPLEMENTED: "Function or operation not implemented.",
    BackendStatus.IO: "I/O error.",
    BackendStatus.PARAM: "One or more parameters passed to a function were not valid.",
    BackendStatus.USER_CANCELED: "User canceled the operation.",
    BackendStatus.NOT_AVAILABLE: "No keychain is available.",
    BackendStatus.AUTH_FAILED: "The user name or passphrase you entered is not correct.",
    BackendStatus.DUPLICATE_ITEM: "The specified item already exists in the keychain.",
    BackendStatus.ITEM_NOT_FOUND: "The specified item could not be found in the keychain.",
    BackendStatus.INTERACTION_NOT_ALLOWED: "User interaction is not allowed.",
    BackendStatus.DECODE: "Unable to decode the provided data.",
}


def status_message(status: int) -> Optional[str]:
    """Return the diagnostic for a status code, or None for unknown codes."""
    try:
        return _MESSAGES[BackendStatus(status)]
    except ValueError:
        return None


def status_name(status: int) -> str:
    try:
        return BackendStatus(status).name
    except ValueError:
        return str(status)
