from __future__ import annotations
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .models import (
    MSG_EXECUTE_CONTRACT,
    MSG_INSTANTIATE_CONTRACT,
    MSG_SEND,
    MSG_STORE_CODE,
)

"""Shape checks for raw JSON (or model) values.

Guardrails:
- Shallow only: discriminator tags and top-level field kinds, nothing nested.
- Never raise; a mismatch is reported as False.
"""

_MISSING = object()


def _field(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name, _MISSING)
    if isinstance(value, BaseModel):
        return getattr(value, name, _MISSING)
    return _MISSING


def _is_sequence(v: Any) -> bool:
    return isinstance(v, (list, tuple))


def _is_object(v: Any) -> bool:
    return isinstance(v, (Mapping, BaseModel))


def is_std_tx(value: Any) -> bool:
    """True if value looks like a StdTx: string memo, list msg, object fee, list signatures.

    `fee` must be a mapping or model instance; unlike a JS `typeof` check,
    a list or None is not accepted as an object.
    """
    return (
        isinstance(_field(value, "memo"), str)
        and _is_sequence(_field(value, "msg"))
        and _is_object(_field(value, "fee"))
        and _is_sequence(_field(value, "signatures"))
    )


def _has_type(msg: Any, tag: str) -> bool:
    t = _field(msg, "type")
    return isinstance(t, str) and t == tag


def is_msg_send(msg: Any) -> bool:
    return _has_type(msg, MSG_SEND)


def is_msg_store_code(msg: Any) -> bool:
    return _has_type(msg, MSG_STORE_CODE)


def is_msg_instantiate_contract(msg: Any) -> bool:
    return _has_type(msg, MSG_INSTANTIATE_CONTRACT)


def is_msg_execute_contract(msg: Any) -> bool:
    return _has_type(msg, MSG_EXECUTE_CONTRACT)
