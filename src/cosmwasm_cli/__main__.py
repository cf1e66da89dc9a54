from __future__ import annotations
import json
import logging
import pathlib
from typing import Any

import typer
from pydantic import ValidationError
from rich import print
from rich.markup import escape

from cosmwasm_sdk.encoding import DecodingError, HEX, jcs_dumps
from cosmwasm_sdk.guards import (
    is_msg_execute_contract,
    is_msg_instantiate_contract,
    is_msg_send,
    is_msg_store_code,
    is_std_tx,
)
from cosmwasm_sdk.logutil import setup_logging
from cosmwasm_sdk.models import PUBKEY_TYPES, dump, parse_tx, parse_wasm_data
from cosmwasm_sdk.settings import settings

app = typer.Typer(add_completion=False, no_args_is_help=True)
log = logging.getLogger("cosmwasm_cli")


@app.callback()
def _main(
    log_level: str = typer.Option(None, help="Override COSMWASM_LOG_LEVEL"),
):
    level = (log_level or settings.log_level).upper()
    setup_logging(getattr(logging, level, logging.INFO), keep=settings.log_elide_over)


def _load(path: str) -> Any:
    try:
        return json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
    except ValueError as e:
        print(f"[red]invalid JSON in {escape(path)}: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def _unwrap(obj: Any) -> Any:
    """Return the StdTx inside a {type, value} envelope, or obj itself."""
    if isinstance(obj, dict) and "value" in obj and isinstance(obj.get("type"), str):
        return obj["value"]
    return obj


def _kind(msg: Any) -> str:
    if is_msg_send(msg):
        return "send"
    if is_msg_store_code(msg):
        return "store-code"
    if is_msg_instantiate_contract(msg):
        return "instantiate"
    if is_msg_execute_contract(msg):
        return "execute"
    return "unknown"


def _printable(b: bytes) -> str:
    return "".join(chr(c) if 32 <= c < 127 else "." for c in b)


@app.command()
def inspect_tx(path: str):
    """Report the shape and messages of a transaction JSON file."""
    raw = _unwrap(_load(path))
    if not is_std_tx(raw):
        print("[red]not a StdTx (need string memo, list msg, object fee, list signatures)[/red]")
        raise typer.Exit(code=1)
    try:
        tx = parse_tx(raw)
    except ValidationError as e:
        log.debug("validation failed: %s", e)
        print(f"[red]invalid transaction: {e.error_count()} error(s)[/red]")
        raise typer.Exit(code=1)

    print(f"[cyan]memo[/cyan]: {escape(repr(tx.memo))}")
    print(f"[cyan]fee[/cyan]: {escape(str(dump(tx.fee)))}")
    print(f"[cyan]signatures[/cyan]: {len(tx.signatures)}")
    for i, msg in enumerate(tx.msg):
        print(f"  [{i}] {escape(msg.type)} ({_kind(msg)})")


@app.command()
def decode_state(path: str):
    """Decode hex keys and base64 values of raw contract state entries."""
    obj = _load(path)
    entries = obj if isinstance(obj, list) else [obj]
    for i, entry in enumerate(entries):
        try:
            model = parse_wasm_data(entry)
        except DecodingError as e:
            print(f"[red]entry {i}: {e}[/red]")
            raise typer.Exit(code=1)
        except (KeyError, AttributeError, TypeError) as e:
            # entry is not a {key, val} object
            print(f"[red]entry {i}: not a key/val object ({escape(repr(e))})[/red]")
            raise typer.Exit(code=1)
        try:
            val: Any = json.loads(model.val.decode("utf-8"))
        except ValueError:
            val = HEX(model.val)
        out = {"key_hex": HEX(model.key), "key": _printable(model.key), "val": val}
        typer.echo(json.dumps(out, indent=settings.json_indent))


@app.command()
def canonical(path: str):
    """Print the RFC 8785 canonical JSON of a transaction."""
    obj = _load(path)
    try:
        if _unwrap(obj) is not obj:
            body = {"type": obj["type"], "value": dump(parse_tx(obj["value"]))}
        else:
            body = dump(parse_tx(obj))
    except ValidationError as e:
        print(f"[red]invalid transaction: {e.error_count()} error(s)[/red]")
        raise typer.Exit(code=1)
    typer.echo(jcs_dumps(body).decode("utf-8"))


@app.command()
def pubkey_types():
    """List known public key type identifiers."""
    for t in PUBKEY_TYPES:
        typer.echo(t)


if __name__ == "__main__":
    app()
