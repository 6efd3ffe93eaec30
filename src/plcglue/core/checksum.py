"""Running checksum over the located-variable input."""

from __future__ import annotations

import hashlib

_HEX_CHARS = "0123456789ABCDEF"

DIGEST_SIZE = 16


class RunningChecksum:
    """MD5 over the raw declaration lines, in read order.

    Only used to detect that the located variables changed between builds.
    It must not be used to trust file contents.
    """

    def __init__(self) -> None:
        self._md5 = hashlib.md5(usedforsecurity=False)
        self._digest: bytes | None = None

    def append(self, data: bytes) -> None:
        if self._digest is not None:
            raise RuntimeError("Checksum already finished")
        self._md5.update(data)

    def finish(self) -> bytes:
        if self._digest is not None:
            raise RuntimeError("Checksum already finished")
        self._digest = self._md5.digest()
        return self._digest

    @property
    def finished(self) -> bool:
        return self._digest is not None


def digest_hex_chars(digest: bytes) -> list[str]:
    """Split a digest into upper-case hex characters, high nibble first."""
    if len(digest) != DIGEST_SIZE:
        raise ValueError(f"Expected a {DIGEST_SIZE}-byte digest, got {len(digest)} bytes")
    chars: list[str] = []
    for byte in digest:
        chars.append(_HEX_CHARS[(byte & 0xF0) >> 4])
        chars.append(_HEX_CHARS[byte & 0x0F])
    return chars
