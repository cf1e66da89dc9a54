from __future__ import annotations
import base64
import binascii
from collections.abc import Mapping
from typing import Any

import rfc8785


class DecodingError(ValueError):
    """Raised when a hex or base64 string cannot be decoded."""


def B64(b: bytes) -> str:
    """Base64-encode bytes to ASCII string (standard alphabet, padded)."""
    return base64.b64encode(b).decode("ascii")


def B64D(s: str) -> bytes:
    """Decode base64 ASCII string to bytes with strict validation."""
    try:
        return base64.b64decode(s.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError, AttributeError) as e:
        raise DecodingError("invalid base64") from e


def HEX(b: bytes) -> str:
    return binascii.hexlify(b).decode("ascii")


def HEXD(s: str) -> bytes:
    """Decode a hex string (either case, even length, no separators)."""
    try:
        return binascii.unhexlify(s.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError, AttributeError) as e:
        raise DecodingError("invalid hex") from e


def jcs_dumps(obj: Any) -> bytes:
    """Deterministic canonical JSON bytes per RFC8785."""
    return rfc8785.dumps(obj)


def decode_pubkey(pub_key: Any) -> bytes:
    """Raw key bytes of a PubKey (model or mapping).

    Only the base64 layer is removed; key length and curve are not checked.
    """
    value = pub_key.get("value") if isinstance(pub_key, Mapping) else getattr(pub_key, "value", None)
    if not isinstance(value, str):
        raise DecodingError("pub_key has no base64 value")
    return B64D(value)
