"""Fuzz harness for the StdTx / Msg shape predicates.

Arbitrary bytes are parsed as JSON when possible; any value at all must be
classified without raising, and at most one message predicate may match.
"""
from __future__ import annotations
import atheris
import json
import sys

with atheris.instrument_imports():
    from cosmwasm_sdk.guards import (
        is_msg_execute_contract,
        is_msg_instantiate_contract,
        is_msg_send,
        is_msg_store_code,
        is_std_tx,
    )


def TestOneInput(data: bytes):  # noqa: N802
    try:
        value = json.loads(data.decode("utf-8", errors="ignore"))
    except ValueError:
        value = {"type": data.decode("latin-1"), "value": {}}

    is_std_tx(value)
    candidates = value.get("msg", [value]) if isinstance(value, dict) else [value]
    if not isinstance(candidates, list):
        candidates = [candidates]
    for msg in candidates:
        hits = sum(
            g(msg)
            for g in (
                is_msg_send,
                is_msg_store_code,
                is_msg_instantiate_contract,
                is_msg_execute_contract,
            )
        )
        if hits > 1:
            raise RuntimeError("message matched more than one variant")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
