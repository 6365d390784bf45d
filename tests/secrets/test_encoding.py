import pytest

from keychain_store.secrets.encoding import bytes_from_text, text_from_bytes
from keychain_store.secrets.status import BackendStatus, status_message, status_name


@pytest.mark.parametrize("text", ["", "TestToken", "pässwörd", "トークン", "emoji \U0001f511"])
def test_text_round_trip(text: str) -> None:
    assert text_from_bytes(bytes_from_text(text)) == text


def test_invalid_utf8_is_replaced() -> None:
    assert text_from_bytes(b"ok\xffok") == "ok�ok"


def test_status_lookup() -> None:
    assert status_message(BackendStatus.ITEM_NOT_FOUND) == "The specified item could not be found in the keychain."
    assert status_message(-1) is None
    assert status_name(-25299) == "DUPLICATE_ITEM"
    assert status_name(-1) == "-1"
