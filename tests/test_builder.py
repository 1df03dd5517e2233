"""Tests for the text builder."""

from __future__ import annotations

import pytest

from wbem_path._builder import build_namespace, build_server, build_text
from wbem_path._config import PathConfig
from wbem_path._errors import InvalidParameter, OutOfMemory
from wbem_path._models import PathBuffer
from wbem_path._parser import parse_text
from wbem_path._types import TextFlag


def _buffer(text: str) -> PathBuffer:
    buf = PathBuffer()
    buf.load(parse_text(text), text)
    return buf


FULL = r"\\server\root\cimv2:Win32_Process"


class TestModes:
    @pytest.mark.parametrize(
        ("flags", "expected"),
        [
            (TextFlag.DEFAULT, r"root\cimv2:Win32_Process"),
            (TextFlag.RELATIVE_ONLY, "Win32_Process"),
            (TextFlag.SERVER_TOO, r"\\server\root\cimv2:Win32_Process"),
            (TextFlag.SERVER_AND_NAMESPACE_ONLY, r"\\server\root\cimv2"),
            (TextFlag.NAMESPACE_ONLY, r"root\cimv2"),
            (TextFlag.ORIGINAL, FULL),
        ],
    )
    def test_full_path(self, flags: TextFlag, expected: str) -> None:
        assert build_text(_buffer(FULL), flags) == expected

    def test_plain_int_flags(self) -> None:
        assert build_text(_buffer(FULL), 0x10) == r"root\cimv2"

    def test_no_server_renders_local_marker(self) -> None:
        assert build_text(_buffer(r"root\cimv2:Win32_Process"), TextFlag.SERVER_AND_NAMESPACE_ONLY) == r"\\.\root\cimv2"

    def test_empty_server_renders_local_marker(self) -> None:
        assert build_text(_buffer("\\\\\\root"), TextFlag.SERVER_TOO) == r"\\.\root"

    def test_no_class_default_has_no_colon(self) -> None:
        assert build_text(_buffer(r"\\server\root"), TextFlag.DEFAULT) == "root"

    def test_forward_slashes_normalized(self) -> None:
        assert build_text(_buffer("//server/root/cimv2:Cls"), TextFlag.SERVER_TOO) == r"\\server\root\cimv2:Cls"

    def test_original_keeps_key_list(self) -> None:
        text = r'\\.\root\cimv2:Win32_Service.Name="Beep"'
        buf = _buffer(text)
        assert build_text(buf, TextFlag.ORIGINAL) == text
        assert build_text(buf, TextFlag.SERVER_TOO) == r"\\.\root\cimv2:Win32_Service"


class TestAbsentResults:
    def test_relative_only_without_class(self) -> None:
        assert build_text(_buffer(r"\\server\root"), TextFlag.RELATIVE_ONLY) is None

    def test_original_without_text(self) -> None:
        assert build_text(PathBuffer(), TextFlag.ORIGINAL) is None

    def test_empty_projection_is_present(self) -> None:
        result = build_text(PathBuffer(), TextFlag.NAMESPACE_ONLY)
        assert result == ""
        assert result is not None

    def test_empty_original_text_is_present(self) -> None:
        assert build_text(_buffer(""), TextFlag.ORIGINAL) == ""


class TestHelpers:
    def test_namespace_without_leading_separator(self) -> None:
        assert build_namespace(_buffer(FULL), leading_separator=False) == r"root\cimv2"

    def test_namespace_with_leading_separator(self) -> None:
        assert build_namespace(_buffer(FULL), leading_separator=True) == r"\root\cimv2"

    def test_namespace_empty(self) -> None:
        assert build_namespace(PathBuffer(), leading_separator=True) == ""

    def test_server(self) -> None:
        assert build_server(_buffer(FULL)) == r"\\server"

    def test_local_server(self) -> None:
        assert build_server(PathBuffer()) == r"\\."


class TestConfig:
    def test_forward_slash_separator(self) -> None:
        cfg = PathConfig(separator="/", local_server="localhost")
        assert build_text(_buffer(r"root\cimv2:Cls"), TextFlag.SERVER_TOO, cfg) == "//localhost/root/cimv2:Cls"


class TestErrors:
    @pytest.mark.parametrize("flags", [1, 3, 0x40, -1, TextFlag.SERVER_TOO | TextFlag.NAMESPACE_ONLY])
    def test_unknown_flags(self, flags: int) -> None:
        with pytest.raises(InvalidParameter, match="Unhandled text flags"):
            build_text(_buffer(FULL), flags)

    def test_memory_error_becomes_out_of_memory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from wbem_path import _builder

        def exhausted(*args: object, **kwargs: object) -> str:
            raise MemoryError

        monkeypatch.setattr(_builder, "build_namespace", exhausted)
        with pytest.raises(OutOfMemory, match="building path text"):
            build_text(_buffer(FULL), TextFlag.SERVER_TOO)


class TestIdempotence:
    @pytest.mark.parametrize("flags", list(TextFlag))
    def test_repeated_builds_identical(self, flags: TextFlag) -> None:
        buf = _buffer(FULL)
        assert build_text(buf, flags) == build_text(buf, flags)
