import typing
from enum import StrEnum
from typing import Self

import pydantic

from ..codec import Model
from ..types import (
    Address,
    BigInt,
    BlockId,
    BlockIdShort,
    HashBytes,
    Int32,
    Int64,
    OptionalAddress,
    Tokens,
    Uint8,
    Uint32,
    Uint64,
)


def _shard_to_str(value: object) -> object:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


type ShardStr = typing.Annotated[str, pydantic.BeforeValidator(_shard_to_str)]


# ===== Request parameters =====
class GetShardsParams(Model):
    seqno: Uint32


class DetectAddressParams(Model):
    address: str


class AccountParams(Model):
    address: Address


class BlockHeaderParams(Model):
    workchain: Int32
    shard: Int64
    seqno: Uint32
    root_hash: HashBytes | None = None
    file_hash: HashBytes | None = None

    @classmethod
    def for_block(cls, block: BlockId | BlockIdShort) -> Self:
        if isinstance(block, BlockId):
            return cls(
                workchain=block.workchain,
                shard=block.shard,
                seqno=block.seqno,
                root_hash=block.root_hash,
                file_hash=block.file_hash,
            )
        return cls(workchain=block.workchain, shard=block.shard, seqno=block.seqno)


class TransactionsParams(Model):
    address: Address
    limit: Uint8 = 10
    lt: Uint64 | None = None
    hash: HashBytes | None = None
    to_lt: Uint64 = 0


class BlockTransactionsParams(Model):
    workchain: Int32
    shard: Int64
    seqno: Uint32
    root_hash: HashBytes | None = None
    file_hash: HashBytes | None = None
    after_lt: Uint64 | None = None
    after_hash: HashBytes | None = None
    count: Uint8 = 10


class SendBocParams(Model):
    boc: str


# ===== Stack items =====
class StackNum(Model):
    type: typing.Literal["num"] = "num"
    value: str

    @classmethod
    def of(cls, value: int) -> Self:
        return cls(value=str(value))


class StackCell(Model):
    type: typing.Literal["cell"] = "cell"
    bytes: str


class StackSlice(Model):
    type: typing.Literal["slice"] = "slice"
    bytes: str


class StackList(Model):
    type: typing.Literal["list"] = "list"
    elements: list["OutputStackItem"]


class StackTuple(Model):
    type: typing.Literal["tuple"] = "tuple"
    elements: list["OutputStackItem"]


type InputStackItem = typing.Annotated[
    StackNum | StackCell | StackSlice,
    pydantic.Field(discriminator="type"),
]
type OutputStackItem = typing.Annotated[
    StackNum | StackCell | StackSlice | StackList | StackTuple,
    pydantic.Field(discriminator="type"),
]

_ = StackList.model_rebuild()
_ = StackTuple.model_rebuild()


class RunGetMethodParams(Model):
    address: Address
    method: str
    stack: list[InputStackItem] = []


class JsonRpcRequest(Model):
    jsonrpc: typing.Literal["2.0"] = "2.0"
    method: str
    params: dict[str, pydantic.JsonValue]
    id: int = 1


# ===== Common records =====
class TonlibBlockId(Model):
    tl_type: str = pydantic.Field(alias="@type", default="ton.blockIdExt")
    workchain: Int32
    shard: ShardStr
    seqno: Uint32
    root_hash: str
    file_hash: str


class TransactionId(Model):
    lt: Uint64
    hash: HashBytes

    @classmethod
    def default(cls) -> Self:
        return cls(lt=0, hash=HashBytes.ZERO)


class TonlibAddress(Model):
    tl_type: str = pydantic.Field(alias="@type", default="accountAddress")
    account_address: Address


class TonlibAccountStatus(StrEnum):
    UNINITIALIZED = "uninitialized"
    FROZEN = "frozen"
    ACTIVE = "active"


class AddressType(StrEnum):
    RAW_FORM = "raw_form"
    FRIENDLY_BOUNCEABLE = "friendly_bounceable"
    FRIENDLY_NON_BOUNCEABLE = "friendly_non_bounceable"


# ===== Responses =====
class MasterchainInfo(Model):
    tl_type: str = pydantic.Field(alias="@type")
    last: TonlibBlockId
    state_root_hash: str
    init: TonlibBlockId
    extra: str = pydantic.Field(alias="@extra", default="")


class Shards(Model):
    tl_type: str = pydantic.Field(alias="@type")
    shards: list[TonlibBlockId]
    extra: str = pydantic.Field(alias="@extra", default="")


class Base64Form(Model):
    b64: str
    b64url: str


class AddressForms(Model):
    raw_form: Address
    bounceable: Base64Form
    non_bounceable: Base64Form
    given_type: AddressType
    test_only: bool


class AddressInformation(Model):
    tl_type: str = pydantic.Field(alias="@type")
    balance: Tokens
    extra_currencies: list[pydantic.JsonValue] = []
    code: str | None = None
    data: str | None = None
    last_transaction_id: TransactionId
    block_id: TonlibBlockId
    frozen_hash: str | None = None
    sync_utime: Uint32
    extra: str = pydantic.Field(alias="@extra", default="")
    state: str


# ===== Parsed account state =====
class UninitAccountState(Model):
    type: typing.Literal["uninit"] = "uninit"
    frozen_hash: HashBytes | None = None


class RawAccountState(Model):
    type: typing.Literal["raw"] = "raw"
    code: str | None = None
    data: str | None = None
    frozen_hash: HashBytes | None = None


class WalletV3AccountState(Model):
    type: typing.Literal["wallet_v3"] = "wallet_v3"
    seqno: Uint32
    public_key: str
    wallet_id: Uint32


class WalletV4AccountState(Model):
    type: typing.Literal["wallet_v4"] = "wallet_v4"
    seqno: Uint32
    public_key: str
    wallet_id: Uint32


type ParsedAccountState = typing.Annotated[
    UninitAccountState | RawAccountState | WalletV3AccountState | WalletV4AccountState,
    pydantic.Field(discriminator="type"),
]


class ExtendedAddressInformation(Model):
    tl_type: str = pydantic.Field(alias="@type")
    address: TonlibAddress
    balance: Tokens
    extra_currencies: list[pydantic.JsonValue] = []
    last_transaction_id: TransactionId
    block_id: TonlibBlockId
    sync_utime: Uint32
    account_state: ParsedAccountState
    revision: int
    extra: str = pydantic.Field(alias="@extra", default="")


class WalletInformation(Model):
    wallet: bool
    balance: Tokens
    extra_currencies: list[pydantic.JsonValue] = []
    account_state: TonlibAccountStatus
    wallet_type: str | None = None
    seqno: Uint32 | None = None
    wallet_id: int | None = None
    last_transaction_id: TransactionId


# ===== Token data =====
class OnchainContent(Model):
    type: typing.Literal["onchain"] = "onchain"
    data: dict[str, str]


class OffchainContent(Model):
    type: typing.Literal["offchain"] = "offchain"
    data: str


type JettonContent = typing.Annotated[
    OnchainContent | OffchainContent,
    pydantic.Field(discriminator="type"),
]


class JettonMasterData(Model):
    type: typing.Literal["jetton_master"] = "jetton_master"
    total_supply: BigInt
    mintable: bool
    admin_address: OptionalAddress = None
    jetton_content: JettonContent
    jetton_wallet_code: str


class JettonWalletData(Model):
    type: typing.Literal["jetton_wallet"] = "jetton_wallet"
    balance: BigInt
    owner: Address
    jetton: Address
    jetton_wallet_code: str


type TokenData = typing.Annotated[
    JettonMasterData | JettonWalletData,
    pydantic.Field(discriminator="type"),
]


class BlockHeader(Model):
    tl_type: str = pydantic.Field(alias="@type")
    id: TonlibBlockId
    global_id: Int32
    version: Uint32
    flags: Uint8
    after_merge: bool
    after_split: bool
    before_split: bool
    want_merge: bool
    want_split: bool
    validator_list_hash_short: Uint32
    catchain_seqno: Uint32
    min_ref_mc_seqno: Uint32
    is_key_block: bool
    prev_key_block_seqno: Uint32
    start_lt: Uint64
    end_lt: Uint64
    gen_utime: Uint32
    vert_seqno: Uint32
    prev_blocks: list[TonlibBlockId]
    extra: str = pydantic.Field(alias="@extra", default="")


# ===== Transactions =====
class MessageData(Model):
    tl_type: str = pydantic.Field(alias="@type", default="msg.dataRaw")
    body: str
    init_state: str | None = None


class Message(Model):
    tl_type: str = pydantic.Field(alias="@type", default="raw.message")
    hash: HashBytes
    source: OptionalAddress = None
    destination: OptionalAddress = None
    value: Tokens
    extra_currencies: list[pydantic.JsonValue] = []
    fwd_fee: Tokens
    ihr_fee: Tokens
    created_lt: Uint64
    body_hash: HashBytes
    msg_data: MessageData


class Transaction(Model):
    tl_type: str = pydantic.Field(alias="@type", default="raw.transaction")
    address: TonlibAddress
    utime: Uint32
    data: str
    transaction_id: TransactionId
    fee: Tokens
    storage_fee: Tokens
    other_fee: Tokens
    in_msg: Message | None = None
    out_msgs: list[Message]


class ExtMessageInfo(Model):
    tl_type: str = pydantic.Field(alias="@type")
    hash: HashBytes
    hash_norm: HashBytes
    extra: str = pydantic.Field(alias="@extra", default="")


class RunGetMethodResult(Model):
    tl_type: str = pydantic.Field(alias="@type")
    exit_code: Int32
    gas_used: Uint64
    stack: list[OutputStackItem]
    last_transaction_id: TransactionId
    block_id: TonlibBlockId
    extra: str = pydantic.Field(alias="@extra", default="")


class BlockTransactionId(Model):
    tl_type: str = pydantic.Field(alias="@type")
    mode: Uint8
    account: Address
    lt: Uint64
    hash: HashBytes


class BlockTransactions(Model):
    tl_type: str = pydantic.Field(alias="@type")
    id: TonlibBlockId
    req_count: Uint8
    transactions: list[BlockTransactionId]
    incomplete: bool
    extra: str = pydantic.Field(alias="@extra", default="")


class BlockTransaction(Model):
    tx: Transaction
    account: Address


class BlockTransactionsExt(Model):
    tl_type: str = pydantic.Field(alias="@type")
    id: TonlibBlockId
    req_count: Uint8
    transactions: list[BlockTransaction]
    incomplete: bool
    extra: str = pydantic.Field(alias="@extra", default="")
