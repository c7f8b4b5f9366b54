from __future__ import annotations

import base64
from pathlib import Path

import pytest

from invoicer.core.logo import decode_data_uri, read_logo_data_uri, split_data_uri


def test_read_logo_data_uri(tmp_path: Path) -> None:
    payload = b"\x89PNG\r\n\x1a\nfake"
    p = tmp_path / "logo.png"
    p.write_bytes(payload)
    uri = read_logo_data_uri(p)
    assert uri == "data:image/png;base64," + base64.b64encode(payload).decode()
    assert decode_data_uri(uri) == payload


def test_unknown_extension_falls_back_to_octet_stream(tmp_path: Path) -> None:
    p = tmp_path / "logo.unknownext"
    p.write_bytes(b"abc")
    mime, payload = split_data_uri(read_logo_data_uri(p))
    assert mime == "application/octet-stream"
    assert payload == b"abc"


def test_missing_file_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_logo_data_uri(tmp_path / "nope.png")


@pytest.mark.parametrize("uri", ["", "http://x/logo.png", "data:image/png,raw", "data:image/png;base64,@@@"])
def test_malformed_data_uri(uri: str) -> None:
    with pytest.raises(ValueError):
        decode_data_uri(uri)
