"""Fuzz harness for raw contract state decoding.

Targets: parse_wasm_data -> encode_wasm_data round trip.

Fuzzer bytes are split into a key and a value string. Malformed hex/base64
must surface as DecodingError and nothing else; well-formed input must
round-trip.
"""
from __future__ import annotations
import atheris
import sys

with atheris.instrument_imports():
    from cosmwasm_sdk.encoding import DecodingError
    from cosmwasm_sdk.models import encode_wasm_data, parse_wasm_data


def TestOneInput(data: bytes):  # noqa: N802 (Atheris signature)
    fdp = atheris.FuzzedDataProvider(data)
    key = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 128))
    val = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 256))
    try:
        model = parse_wasm_data({"key": key, "val": val})
    except DecodingError:
        return
    again = parse_wasm_data(encode_wasm_data(model))
    if again != model:
        raise RuntimeError("wasm data round trip changed bytes")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
