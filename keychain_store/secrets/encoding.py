"""UTF-8 helpers for storing text secrets as bytes."""

from __future__ import annotations


def bytes_from_text(text: str) -> bytes:
    return text.encode("utf-8")


def text_from_bytes(data: bytes) -> str:
    # Invalid sequences become U+FFFD instead of raising.
    return bytes(data).decode("utf-8", errors="replace")
