import typing
from enum import StrEnum

import pydantic

from ..codec import Model
from ..types import (
    Address,
    BigInt,
    HashBytes,
    Int8,
    Int32,
    OptionalAddress,
    Tokens,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
)


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


class MessageDirection(StrEnum):
    IN = "in"
    OUT = "out"


# ===== Requests =====
class BlocksRequest(Model):
    workchain: Int32 | None = None
    shard: str | None = None
    seqno: Uint32 | None = None
    mc_seqno: Uint32 | None = None
    start_utime: Uint32 | None = None
    end_utime: Uint32 | None = None
    start_lt: Uint64 | None = None
    end_lt: Uint64 | None = None
    limit: Uint32 = 10
    offset: Uint32 = 0
    sort: SortDirection = SortDirection.DESC


class TransactionsRequest(Model):
    workchain: Int32 | None = None
    shard: str | None = None
    seqno: Uint32 | None = None
    mc_seqno: Uint32 | None = None
    account: tuple[Address, ...] = ()
    exclude_account: tuple[Address, ...] = ()
    hash: HashBytes | None = None
    lt: Uint64 | None = None
    start_utime: Uint32 | None = None
    end_utime: Uint32 | None = None
    start_lt: Uint64 | None = None
    end_lt: Uint64 | None = None
    limit: Uint32 = 10
    offset: Uint32 = 0
    sort: SortDirection = SortDirection.DESC


class TransactionsByMcBlockRequest(Model):
    seqno: Uint32
    limit: Uint32 = 10
    offset: Uint32 = 0
    sort: SortDirection = SortDirection.DESC


class AdjacentTransactionsRequest(Model):
    hash: HashBytes
    direction: MessageDirection | None = None


class TransactionsByMessageRequest(Model):
    msg_hash: HashBytes
    body_hash: HashBytes | None = None
    opcode: Int32 | None = None
    direction: MessageDirection | None = None
    limit: Uint32 = 10
    offset: Uint32 = 0
    sort: SortDirection = SortDirection.DESC


class JettonMastersRequest(Model):
    address: tuple[Address, ...] | None = None
    admin_address: tuple[Address, ...] | None = None
    limit: Uint32 = 10
    offset: Uint32 = 0


class JettonWalletsRequest(Model):
    address: tuple[Address, ...] | None = None
    owner_address: tuple[Address, ...] | None = None
    jetton_address: tuple[Address, ...] | None = None
    exclude_zero_balance: bool = False
    limit: Uint32 = 10
    offset: Uint32 = 0
    sort: SortDirection | None = None


# ===== Blocks =====
class BlockRef(Model):
    workchain: Int32
    shard: str
    seqno: Uint32


class Block(Model):
    workchain: Int32
    shard: str
    seqno: Uint32
    root_hash: HashBytes
    file_hash: HashBytes
    global_id: Int32
    version: Uint32
    after_merge: bool
    before_split: bool
    after_split: bool
    want_merge: bool
    want_split: bool
    key_block: bool
    vert_seqno_incr: bool
    flags: Uint8
    gen_utime: Uint32
    start_lt: Uint64
    end_lt: Uint64
    validator_list_hash_short: Uint32
    gen_catchain_seqno: Uint32
    min_ref_mc_seqno: Uint32
    prev_key_block_seqno: Uint32
    vert_seqno: Uint32
    master_ref_seqno: Uint32
    rand_seed: HashBytes
    created_by: HashBytes
    tx_count: Uint32
    masterchain_block_ref: BlockRef
    prev_blocks: list[BlockRef]


class AddressBook(Model):
    """
    Addresses referenced by a list response.

    Accepts both ``{"items": [...]}`` and a mapping keyed by address, in which
    case only the keys are kept.
    """

    items: frozenset[Address] = frozenset()

    @pydantic.model_validator(mode="before")
    @classmethod
    def _from_mapping(cls, data: typing.Any) -> typing.Any:
        if isinstance(data, dict) and "items" not in data:
            return {"items": list(typing.cast(dict[str, typing.Any], data))}
        return data

    def __contains__(self, address: object) -> bool:
        return address in self.items

    def __len__(self) -> int:
        return len(self.items)


class MasterchainInfo(Model):
    last: Block
    first: Block


class Blocks(Model):
    blocks: list[Block]


# ===== Transactions =====
class AccountStatus(StrEnum):
    UNINIT = "uninit"
    FROZEN = "frozen"
    ACTIVE = "active"
    NONEXIST = "nonexist"


class AccountStatusChange(StrEnum):
    UNCHANGED = "unchanged"
    FROZEN = "frozen"
    DELETED = "deleted"


class BriefAccountState(Model):
    hash: HashBytes
    balance: Tokens | None = None
    extra_currencies: dict[str, str] | None = None
    account_status: AccountStatus | None = None
    frozen_hash: HashBytes | None = None
    data_hash: HashBytes | None = None
    code_hash: HashBytes | None = None


class MessageSize(Model):
    cells: Uint64
    bits: Uint64


class StoragePhase(Model):
    storage_fees_collected: Tokens
    status_change: AccountStatusChange


class CreditPhase(Model):
    due_fees_collected: Tokens | None = None
    credit: Tokens


class ComputeSkipped(Model):
    skipped: typing.Literal[True] = True
    reason: str


class ComputeExecuted(Model):
    skipped: typing.Literal[False] = False
    success: bool
    msg_state_used: bool
    account_activated: bool
    gas_fees: Tokens
    gas_used: Uint64
    gas_limit: Uint64
    gas_credit: Uint32 | None = None
    mode: Int8
    exit_code: Int32
    vm_steps: Uint32
    vm_init_state_hash: HashBytes
    vm_final_state_hash: HashBytes


def _compute_phase_tag(value: typing.Any) -> str | None:
    if isinstance(value, dict):
        skipped = typing.cast(dict[str, typing.Any], value).get("skipped")
    else:
        skipped = getattr(value, "skipped", None)
    if skipped is True:
        return "skipped"
    if skipped is False:
        return "executed"
    return None


# The compute phase is tagged by its boolean ``skipped`` field.
type ComputePhase = typing.Annotated[
    typing.Annotated[ComputeSkipped, pydantic.Tag("skipped")]
    | typing.Annotated[ComputeExecuted, pydantic.Tag("executed")],
    pydantic.Discriminator(
        _compute_phase_tag,
        custom_error_type="invalid_union_member",
        custom_error_message="compute phase requires a boolean 'skipped' field",
    ),
]


class ActionPhase(Model):
    success: bool
    valid: bool
    no_funds: bool
    status_change: AccountStatusChange
    total_fwd_fees: Tokens | None = None
    total_action_fees: Tokens | None = None
    result_code: Int32
    tot_actions: Uint16
    spec_actions: Uint16
    skipped_actions: Uint16
    msgs_created: Uint16
    action_list_hash: HashBytes
    tot_msg_size: MessageSize


class BouncePhase(Model):
    type: str
    msg_size: MessageSize | None = None
    req_fwd_fees: Tokens | None = None
    msg_fees: Tokens | None = None
    fwd_fees: Tokens | None = None


class OrdinaryDescription(Model):
    type: typing.Literal["ord"] = "ord"
    aborted: bool
    destroyed: bool
    credit_first: bool
    storage_ph: StoragePhase | None = None
    credit_ph: CreditPhase | None = None
    compute_ph: ComputePhase
    action: ActionPhase | None = None
    bounce: BouncePhase | None = None


class TickTockDescription(Model):
    type: typing.Literal["tick_tock"] = "tick_tock"
    aborted: bool
    destroyed: bool
    is_tock: bool
    storage_ph: StoragePhase
    compute_ph: ComputePhase
    action: ActionPhase | None = None


type TxDescription = typing.Annotated[
    OrdinaryDescription | TickTockDescription,
    pydantic.Field(discriminator="type"),
]


# ===== Messages =====
class TextContent(Model):
    type: typing.Literal["text"] = "text"
    text: str


class JettonTransferContent(Model):
    type: typing.Literal["jetton_transfer"] = "jetton_transfer"
    query_id: Uint64
    amount: BigInt
    destination: Address
    response_destination: OptionalAddress = None
    custom_payload: str | None = None
    forward_ton_amount: Tokens
    forward_payload: str | None = None


type DecodedContent = typing.Annotated[
    TextContent | JettonTransferContent,
    pydantic.Field(discriminator="type"),
]


class MessageContent(Model):
    hash: HashBytes
    body: str
    decoded: DecodedContent | None = None


class Message(Model):
    hash: HashBytes
    source: OptionalAddress = None
    destination: OptionalAddress = None
    value: Tokens | None = None
    value_extra_currencies: dict[str, str] | None = None
    fwd_fee: Tokens | None = None
    ihr_fee: Tokens | None = None
    created_lt: Uint64 | None = None
    created_at: Uint32 | None = None
    ihr_disabled: bool | None = None
    bounce: bool | None = None
    bounced: bool | None = None
    import_fee: Tokens | None = None
    message_content: MessageContent
    init_state: MessageContent | None = None
    hash_norm: HashBytes | None = None


class Transaction(Model):
    account: Address
    hash: HashBytes
    lt: Uint64
    now: Uint32
    mc_block_seqno: Uint32
    trace_id: HashBytes
    prev_trans_hash: HashBytes
    prev_trans_lt: Uint64
    orig_status: AccountStatus
    end_status: AccountStatus
    total_fees: Tokens
    total_fees_extra_currencies: dict[str, str] = {}
    description: TxDescription
    block_ref: BlockRef
    in_msg: Message | None = None
    out_msgs: list[Message]
    account_state_before: BriefAccountState
    account_state_after: BriefAccountState


class Transactions(Model):
    transactions: list[Transaction]
    address_book: AddressBook


# ===== Jettons =====
class JettonMaster(Model):
    address: Address
    total_supply: BigInt
    mintable: bool
    admin_address: OptionalAddress = None
    jetton_content: dict[str, pydantic.JsonValue] | None = None
    jetton_wallet_code_hash: HashBytes
    code_hash: HashBytes
    data_hash: HashBytes
    last_transaction_lt: Uint64


class JettonMasters(Model):
    jetton_masters: list[JettonMaster]
    address_book: AddressBook


class JettonWallet(Model):
    address: Address
    balance: BigInt
    owner: Address
    jetton: Address
    last_transaction_lt: Uint64
    code_hash: HashBytes | None = None
    data_hash: HashBytes | None = None


class JettonWallets(Model):
    jetton_wallets: list[JettonWallet]
    address_book: AddressBook
