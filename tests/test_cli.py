import json

from typer.testing import CliRunner

from cosmwasm_cli.__main__ import app

runner = CliRunner()


def _write(tmp_path, name, obj):
    p = tmp_path / name
    p.write_text(json.dumps(obj))
    return str(p)


def test_inspect_tx_envelope(tmp_path, sdk_tx):
    path = _write(tmp_path, "tx.json", sdk_tx)
    result = runner.invoke(app, ["inspect-tx", path])
    assert result.exit_code == 0, result.output
    assert "wasm/instantiate" in result.output
    assert "(execute)" in result.output
    assert "signatures" in result.output


def test_inspect_tx_rejects_non_tx(tmp_path):
    path = _write(tmp_path, "tx.json", {"msg": [], "fee": {}, "signatures": []})
    result = runner.invoke(app, ["inspect-tx", path])
    assert result.exit_code == 1


def test_inspect_tx_reports_invalid_messages(tmp_path):
    bad = {
        "memo": "",
        "msg": [{"type": "wasm/execute", "value": {"sender": "a"}}],
        "fee": {"amount": [], "gas": "1"},
        "signatures": [],
    }
    result = runner.invoke(app, ["inspect-tx", _write(tmp_path, "tx.json", bad)])
    assert result.exit_code == 1
    assert "invalid transaction" in result.output


def test_decode_state(tmp_path):
    entries = [
        {"key": "00060636f6e666967", "val": "eyJvd25lciI6ImEifQ=="},
        {"key": "ff", "val": "AAEC"},
    ]
    # odd-length key above is rejected
    result = runner.invoke(app, ["decode-state", _write(tmp_path, "state.json", entries)])
    assert result.exit_code == 1

    entries[0]["key"] = "0006636f6e666967"
    result = runner.invoke(app, ["decode-state", _write(tmp_path, "state.json", entries)])
    assert result.exit_code == 0, result.output
    assert '"key_hex": "0006636f6e666967"' in result.output
    assert '"owner": "a"' in result.output
    assert '"val": "000102"' in result.output


def test_canonical_is_sorted_and_compact(tmp_path, sdk_tx):
    result = runner.invoke(app, ["canonical", _write(tmp_path, "tx.json", sdk_tx)])
    assert result.exit_code == 0, result.output
    line = result.output.strip()
    assert line.startswith('{"type":"cosmos-sdk/StdTx","value":{"fee":')
    assert json.loads(line) == sdk_tx


def test_pubkey_types():
    result = runner.invoke(app, ["pubkey-types"])
    assert result.exit_code == 0
    assert result.output.split() == [
        "tendermint/PubKeySecp256k1",
        "tendermint/PubKeyEd25519",
        "tendermint/PubKeySr25519",
    ]


def test_log_level_option():
    result = runner.invoke(app, ["--log-level", "debug", "pubkey-types"])
    assert result.exit_code == 0


def test_inspect_tx_prints_bracketed_text_literally(tmp_path):
    tx = {
        "memo": "[/oops]",
        "msg": [{"type": "custom/[/x]", "value": {"a": "[bold]"}}],
        "fee": {"amount": [{"denom": "[/x]", "amount": "1"}], "gas": "1"},
        "signatures": [],
    }
    result = runner.invoke(app, ["inspect-tx", _write(tmp_path, "tx.json", tx)])
    assert result.exit_code == 0, result.output
    assert "[/oops]" in result.output
    assert "custom/[/x] (unknown)" in result.output


def test_decode_state_rejects_entries_without_key_or_val(tmp_path):
    for entries in ([{"key": "ab"}], ["ab"], [None], [{"val": "AAEC"}]):
        result = runner.invoke(app, ["decode-state", _write(tmp_path, "state.json", entries)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "not a key/val object" in result.output


def test_malformed_json_is_reported(tmp_path):
    p = tmp_path / "broken.json"
    p.write_text("{not json")
    for cmd in ("inspect-tx", "decode-state", "canonical"):
        result = runner.invoke(app, [cmd, str(p)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "invalid JSON" in result.output
