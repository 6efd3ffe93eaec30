"""Tests for the running located-variables checksum."""

from __future__ import annotations

import hashlib

import pytest

from plcglue.core.checksum import RunningChecksum, digest_hex_chars


class TestRunningChecksum:
    def test_matches_md5_of_concatenation(self):
        checksum = RunningChecksum()
        checksum.append(b"abc")
        checksum.append(b"def")
        assert checksum.finish() == hashlib.md5(b"abcdef").digest()

    def test_empty_input(self):
        assert RunningChecksum().finish() == hashlib.md5(b"").digest()

    def test_finish_only_once(self):
        checksum = RunningChecksum()
        checksum.finish()
        assert checksum.finished
        with pytest.raises(RuntimeError, match="already finished"):
            checksum.finish()

    def test_no_append_after_finish(self):
        checksum = RunningChecksum()
        checksum.finish()
        with pytest.raises(RuntimeError):
            checksum.append(b"x")


class TestDigestHexChars:
    def test_upper_case_high_nibble_first(self):
        digest = bytes([0x0F, 0xA5] + [0] * 14)
        chars = digest_hex_chars(digest)
        assert chars[:4] == ["0", "F", "A", "5"]
        assert len(chars) == 32

    def test_matches_hexdigest(self):
        digest = hashlib.md5(b"glue").digest()
        assert "".join(digest_hex_chars(digest)) == hashlib.md5(b"glue").hexdigest().upper()

    def test_rejects_wrong_length(self):
        with pytest.raises(ValueError, match="16-byte"):
            digest_hex_chars(b"\x00" * 17)
