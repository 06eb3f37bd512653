"""Embed recorded audio as a self-contained data URI."""

from __future__ import annotations

import base64


def to_data_uri(audio: bytes, content_type: str) -> str:
    payload = base64.b64encode(audio).decode('ascii')
    return f'data:{content_type};base64,{payload}'
