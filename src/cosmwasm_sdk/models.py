from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter

from .encoding import B64, HEX, B64D, HEXD

log = logging.getLogger(__name__)

MSG_SEND = "cosmos-sdk/MsgSend"
MSG_STORE_CODE = "wasm/store-code"
MSG_INSTANTIATE_CONTRACT = "wasm/instantiate"
MSG_EXECUTE_CONTRACT = "wasm/execute"

KNOWN_MSG_TYPES = (
    MSG_SEND,
    MSG_STORE_CODE,
    MSG_INSTANTIATE_CONTRACT,
    MSG_EXECUTE_CONTRACT,
)


class PubkeyType:
    """Tendermint public key type identifiers."""

    secp256k1 = "tendermint/PubKeySecp256k1"
    ed25519 = "tendermint/PubKeyEd25519"
    sr25519 = "tendermint/PubKeySr25519"


PUBKEY_TYPES = (PubkeyType.secp256k1, PubkeyType.ed25519, PubkeyType.sr25519)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Coin(_Frozen):
    denom: str
    # decimal digits, kept as a string
    amount: str


class StdFee(_Frozen):
    amount: List[Coin] = Field(default_factory=list)
    gas: str


class PubKey(_Frozen):
    """Amino JSON public key.

    `type` is usually one of PUBKEY_TYPES but is not restricted to it, so
    fixtures carrying other identifiers still load. `value` is base64; for
    secp256k1 it holds the compressed key.
    """

    type: str
    value: str


class StdSignature(_Frozen):
    pub_key: PubKey
    signature: str


class MsgSendValue(_Frozen):
    from_address: str
    to_address: str
    amount: List[Coin] = Field(default_factory=list)


class MsgSend(_Frozen):
    """Token transfer between two Bech32 accounts."""

    type: Literal["cosmos-sdk/MsgSend"] = MSG_SEND
    value: MsgSendValue


class MsgStoreCodeValue(_Frozen):
    sender: str
    wasm_byte_code: str
    # URI of the contract source; may be empty
    source: str = ""
    # docker tag of the builder image; may be empty
    builder: str = ""


class MsgStoreCode(_Frozen):
    """Uploads base64 encoded Wasm code to the chain."""

    type: Literal["wasm/store-code"] = MSG_STORE_CODE
    value: MsgStoreCodeValue


class MsgInstantiateContractValue(_Frozen):
    sender: str
    code_id: str
    init_msg: Dict[str, Any]
    init_funds: List[Coin] = Field(default_factory=list)


class MsgInstantiateContract(_Frozen):
    """Creates a contract instance from previously uploaded code."""

    type: Literal["wasm/instantiate"] = MSG_INSTANTIATE_CONTRACT
    value: MsgInstantiateContractValue


class MsgExecuteContractValue(_Frozen):
    sender: str
    contract: str
    msg: Dict[str, Any]
    sent_funds: List[Coin] = Field(default_factory=list)


class MsgExecuteContract(_Frozen):
    """Calls the handle entry point of an instantiated contract."""

    type: Literal["wasm/execute"] = MSG_EXECUTE_CONTRACT
    value: MsgExecuteContractValue


class UnknownMsg(_Frozen):
    """Any message kind not modelled above, kept verbatim."""

    type: str
    value: Dict[str, Any] = Field(default_factory=dict)


def _msg_tag(v: Any) -> str:
    t = v.get("type") if isinstance(v, Mapping) else getattr(v, "type", None)
    if isinstance(t, str) and t in KNOWN_MSG_TYPES:
        return t
    log.debug("unrecognized msg type %r, keeping raw message", t)
    return "unknown"


Msg = Annotated[
    Union[
        Annotated[MsgSend, Tag(MSG_SEND)],
        Annotated[MsgStoreCode, Tag(MSG_STORE_CODE)],
        Annotated[MsgInstantiateContract, Tag(MSG_INSTANTIATE_CONTRACT)],
        Annotated[MsgExecuteContract, Tag(MSG_EXECUTE_CONTRACT)],
        Annotated[UnknownMsg, Tag("unknown")],
    ],
    Discriminator(_msg_tag),
]


class StdTx(_Frozen):
    """An Amino/Cosmos SDK StdTx.

    Signatures are carried in the order given; matching them to signers is
    left to the chain.
    """

    msg: List[Msg] = Field(default_factory=list)
    fee: StdFee
    signatures: List[StdSignature] = Field(default_factory=list)
    memo: Optional[str] = None


class CosmosSdkTx(_Frozen):
    type: str
    value: StdTx


class CosmosSdkAccount(_Frozen):
    address: str
    coins: List[Coin] = Field(default_factory=list)
    # bech32 of the amino-binary pubkey, not decoded here
    public_key: str
    account_number: int
    sequence: int


class CodeInfo(_Frozen):
    id: int
    creator: str
    # hex sha256 of the stored code
    code_hash: str
    source: Optional[str] = None
    builder: Optional[str] = None


class CodeDetails(_Frozen):
    # TODO: switch to a base64 bytes field once wasmd returns the code content
    code: str


class ContractInfo(_Frozen):
    code_id: int
    creator: str
    init_msg: Dict[str, Any]


class WasmData(_Frozen):
    """Raw contract storage cell: hex key, base64 value."""

    key: str
    val: str


class Model(_Frozen):
    """Decoded WasmData."""

    key: bytes
    val: bytes


_msg_adapter: TypeAdapter[Msg] = TypeAdapter(Msg)


def parse_msg(obj: Any) -> Msg:
    return _msg_adapter.validate_python(obj)


def parse_tx(obj: Any) -> StdTx:
    return StdTx.model_validate(obj)


def parse_sdk_tx(obj: Any) -> CosmosSdkTx:
    return CosmosSdkTx.model_validate(obj)


def dump(model: BaseModel) -> Dict[str, Any]:
    """JSON-ready dict of a model; optional fields left as None are omitted."""
    return model.model_dump(mode="json", exclude_none=True)


def parse_wasm_data(raw: Union[WasmData, Mapping[str, Any]]) -> Model:
    """Decode a raw storage cell.

    Raises DecodingError if `key` is not hex or `val` is not base64.
    """
    if isinstance(raw, Mapping):
        key, val = raw["key"], raw["val"]
    else:
        key, val = raw.key, raw.val
    return Model(key=HEXD(key), val=B64D(val))


def encode_wasm_data(model: Model) -> WasmData:
    return WasmData(key=HEX(model.key), val=B64(model.val))
