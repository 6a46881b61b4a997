# ==============================================================================
# BASE64 HELPERS
# ==============================================================================

from __future__ import annotations

import base64
from typing import Any


def encode_to_base64(value: Any) -> str:
    """Base64 of the UTF-8 bytes of ``str(value)``."""
    text = value if isinstance(value, str) else str(value)
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_base64_string(value: str) -> str:
    """
    Decode Base64 text back to a UTF-8 string.

    Raises:
        binascii.Error: If the input is not valid Base64
        UnicodeDecodeError: If the decoded bytes are not UTF-8
    """
    return base64.b64decode(value, validate=True).decode("utf-8")
