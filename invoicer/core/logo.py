from __future__ import annotations

import base64
import binascii
import mimetypes
from pathlib import Path
from typing import Tuple, Union

DATA_URI_PREFIX = "data:"


def encode_data_uri(payload: bytes, mime: str) -> str:
	return f"data:{mime};base64,{base64.b64encode(payload).decode('ascii')}"


def read_logo_data_uri(path: Union[str, Path]) -> str:
	"""Read an image file into a base64 data: URI.

	No size or type validation; the file dialog filter is the only gate.
	Raises OSError when the file cannot be read.
	"""
	p = Path(path)
	payload = p.read_bytes()
	mime, _enc = mimetypes.guess_type(p.name)
	return encode_data_uri(payload, mime or "application/octet-stream")


def split_data_uri(uri: str) -> Tuple[str, bytes]:
	"""Return (mime, payload) for a base64 data: URI; raise ValueError otherwise."""
	if not uri or not uri.startswith(DATA_URI_PREFIX) or "," not in uri:
		raise ValueError("not a data: URI")
	header, _sep, body = uri.partition(",")
	meta = header[len(DATA_URI_PREFIX):]
	if not meta.endswith(";base64"):
		raise ValueError("only base64 data: URIs are supported")
	mime = meta[: -len(";base64")] or "application/octet-stream"
	try:
		return mime, base64.b64decode(body, validate=True)
	except binascii.Error as e:
		raise ValueError(f"bad base64 payload: {e}") from e


def decode_data_uri(uri: str) -> bytes:
	return split_data_uri(uri)[1]
