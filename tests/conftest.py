import sys
from pathlib import Path

import pytest

# Ensure the 'src' directory is on sys.path for imports in tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

SENDER = "cosmos1pkptre7fdkl6gfrzlesjjvhxhlc3r4gmmk8rs6"
CONTRACT = "cosmos18vd8fpwxzck93qlwghaj6arh4p7c5n89uzcee5"


@pytest.fixture
def std_tx():
    """A signed StdTx as returned by the REST server, one msg of each kind."""
    return {
        "msg": [
            {
                "type": "cosmos-sdk/MsgSend",
                "value": {
                    "from_address": SENDER,
                    "to_address": CONTRACT,
                    "amount": [{"denom": "ucosm", "amount": "1234567"}],
                },
            },
            {
                "type": "wasm/store-code",
                "value": {
                    "sender": SENDER,
                    "wasm_byte_code": "AGFzbQEAAAA=",
                    "source": "https://crates.io/api/v1/crates/cw-erc20/0.2.0/download",
                    "builder": "",
                },
            },
            {
                "type": "wasm/instantiate",
                "value": {
                    "sender": SENDER,
                    "code_id": "1",
                    "init_msg": {"verifier": SENDER, "beneficiary": CONTRACT},
                    "init_funds": [],
                },
            },
            {
                "type": "wasm/execute",
                "value": {
                    "sender": SENDER,
                    "contract": CONTRACT,
                    "msg": {"release": {}},
                    "sent_funds": [{"denom": "ustake", "amount": "10"}],
                },
            },
        ],
        "fee": {"amount": [{"denom": "ucosm", "amount": "5000"}], "gas": "890000"},
        "signatures": [
            {
                "pub_key": {
                    "type": "tendermint/PubKeySecp256k1",
                    "value": "A08EGB7ro1ORuFhjOnZcSgwYlpe0DSFjVNUIkNNQxwKQ",
                },
                "signature": "NOhw6ab0QStW8z5uekVCfdkNrBrM4mCYWpUdTWjUT6ARWs/K6NQq17s/yBr5oKSXVv2JUeoHtNEF6ldN5Zt2Fw==",
            }
        ],
        "memo": "",
    }


@pytest.fixture
def sdk_tx(std_tx):
    return {"type": "cosmos-sdk/StdTx", "value": std_tx}
