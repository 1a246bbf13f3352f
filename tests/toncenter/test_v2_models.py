import json
from typing import Any

import pytest

from toncenter import Address, DecodeError, HashBytes, Tokens
from toncenter.codec import decode
from toncenter.v2.models import (
    ExtendedAddressInformation,
    ExtMessageInfo,
    JettonMasterData,
    JettonWalletData,
    MasterchainInfo,
    OffchainContent,
    OnchainContent,
    RawAccountState,
    RunGetMethodResult,
    StackList,
    StackNum,
    StackTuple,
    TokenData,
    TonlibAccountStatus,
    Transaction,
    TransactionId,
    UninitAccountState,
    WalletInformation,
    WalletV3AccountState,
    WalletV4AccountState,
)

ACCOUNT = "0:" + "83" * 32
HASH = "5f" * 32


def block_id(seqno: int = 1, shard: str | int = "-9223372036854775808") -> dict[str, Any]:
    return {
        "@type": "ton.blockIdExt",
        "workchain": -1,
        "shard": shard,
        "seqno": seqno,
        "root_hash": "8mV0a4tDoQ3CjH0Sx1sVd/hR7/0Ca3hAmSmwu7rA9JM=",
        "file_hash": "r1LVfm+Ss8G/kZ6S1mJJR2+FQ8LoR6S3r0u1VS1F7fE=",
    }


def transaction_id() -> dict[str, Any]:
    return {"@type": "internal.transactionId", "lt": "47597573000001", "hash": HASH}


def extended_info(account_state: dict[str, Any]) -> str:
    return json.dumps(
        {
            "@type": "fullAccountState",
            "address": {"@type": "accountAddress", "account_address": ACCOUNT},
            "balance": "1500000000",
            "extra_currencies": [],
            "last_transaction_id": transaction_id(),
            "block_id": block_id(),
            "sync_utime": 1718000000,
            "account_state": account_state,
            "revision": 2,
            "@extra": "1718000000.1:0:0.5",
        }
    )


def test_masterchain_info():
    body = json.dumps(
        {
            "@type": "blocks.masterchainInfo",
            "last": block_id(12345),
            "state_root_hash": "2mZ0k1/rQ2Vj1t5u1c1Nt1p2X3Y4Z5a6b7c8d9e0f1g=",
            "init": block_id(0, shard=-9223372036854775808),
            "@extra": "1.2",
        }
    )
    info = decode(body, MasterchainInfo, envelope=False)
    assert info.last.seqno == 12345
    assert info.last.workchain == -1
    assert info.init.shard == "-9223372036854775808"
    assert info.tl_type == "blocks.masterchainInfo"
    assert info.extra == "1.2"


@pytest.mark.parametrize(
    "target",
    [MasterchainInfo, ExtMessageInfo],
)
def test_response_requires_type_tag(target: type[MasterchainInfo] | type[ExtMessageInfo]):
    body = {
        "last": block_id(1),
        "state_root_hash": "srh",
        "init": block_id(0),
        "hash": HASH,
        "hash_norm": HASH,
    }
    with pytest.raises(DecodeError) as exc_info:
        _ = decode(json.dumps(body), target, envelope=False)
    assert len(exc_info.value.fields) == 1
    assert exc_info.value.fields[0] in {"@type", "tl_type"}


def test_nested_tonlib_records_default_their_type_tag():
    last = {key: value for key, value in block_id(7).items() if key != "@type"}
    body = {"@type": "blocks.masterchainInfo", "last": last, "state_root_hash": "", "init": last}
    info = decode(json.dumps(body), MasterchainInfo, envelope=False)
    assert info.last.tl_type == "ton.blockIdExt"


@pytest.mark.parametrize(
    ("account_state", "expected"),
    [
        ({"type": "uninit"}, UninitAccountState()),
        (
            {"type": "raw", "code": "te6cc", "data": "te6cc"},
            RawAccountState(code="te6cc", data="te6cc"),
        ),
        (
            {"type": "wallet_v3", "seqno": 3, "public_key": "pk", "wallet_id": 698983191},
            WalletV3AccountState(seqno=3, public_key="pk", wallet_id=698983191),
        ),
        (
            {"type": "wallet_v4", "seqno": 0, "public_key": "pk", "wallet_id": 2},
            WalletV4AccountState(seqno=0, public_key="pk", wallet_id=2),
        ),
    ],
)
def test_parsed_account_state(account_state: dict[str, Any], expected: object):
    info = decode(extended_info(account_state), ExtendedAddressInformation, envelope=False)
    assert info.account_state == expected
    assert info.balance == Tokens(1_500_000_000)
    assert info.address.account_address == Address.parse(ACCOUNT)
    assert info.last_transaction_id.lt == 47597573000001


@pytest.mark.parametrize("account_state", [{"type": "wallet_v5"}, {"seqno": 1}])
def test_parsed_account_state_unknown_kind(account_state: dict[str, Any]):
    with pytest.raises(DecodeError) as exc_info:
        _ = decode(extended_info(account_state), ExtendedAddressInformation, envelope=False)
    assert any(field.startswith("account_state") for field in exc_info.value.fields)


def test_wallet_information():
    body = json.dumps(
        {
            "wallet": True,
            "balance": "0",
            "account_state": "active",
            "wallet_type": "wallet v4 r2",
            "seqno": 12,
            "wallet_id": 698983191,
            "last_transaction_id": transaction_id(),
        }
    )
    info = decode(body, WalletInformation, envelope=False)
    assert info.account_state is TonlibAccountStatus.ACTIVE
    assert info.wallet_id == 698983191
    assert info.balance == Tokens.ZERO


def test_wallet_information_rejects_unknown_status():
    body = json.dumps(
        {
            "wallet": False,
            "balance": "0",
            "account_state": "nonexist",
            "last_transaction_id": transaction_id(),
        }
    )
    with pytest.raises(DecodeError) as exc_info:
        _ = decode(body, WalletInformation, envelope=False)
    assert exc_info.value.fields == ["account_state"]


def test_jetton_master_data():
    body = json.dumps(
        {
            "type": "jetton_master",
            "total_supply": "340282366920938463463374607431768211456",
            "mintable": True,
            "admin_address": "",
            "jetton_content": {"type": "onchain", "data": {"name": "Test", "decimals": "9"}},
            "jetton_wallet_code": "te6cc",
        }
    )
    data = decode(body, TokenData, envelope=False)
    assert isinstance(data, JettonMasterData)
    assert data.total_supply == 1 << 128
    assert data.admin_address is None
    assert data.jetton_content == OnchainContent(data={"name": "Test", "decimals": "9"})


def test_jetton_wallet_data():
    body = json.dumps(
        {
            "type": "jetton_wallet",
            "balance": "100",
            "owner": ACCOUNT,
            "jetton": "0:" + "ee" * 32,
            "jetton_wallet_code": "te6cc",
        }
    )
    data = decode(body, TokenData, envelope=False)
    assert isinstance(data, JettonWalletData)
    assert data.balance == 100
    assert data.owner == Address.parse(ACCOUNT)


def test_offchain_jetton_content():
    body = json.dumps(
        {
            "type": "jetton_master",
            "total_supply": "1",
            "mintable": False,
            "admin_address": ACCOUNT,
            "jetton_content": {"type": "offchain", "data": "https://example.org/jetton.json"},
            "jetton_wallet_code": "te6cc",
        }
    )
    data = decode(body, TokenData, envelope=False)
    assert isinstance(data, JettonMasterData)
    assert data.admin_address == Address.parse(ACCOUNT)
    assert data.jetton_content == OffchainContent(data="https://example.org/jetton.json")


@pytest.mark.parametrize(
    "body",
    [
        {"type": "nft_item", "jetton_wallet_code": "te6cc"},
        {
            "type": "jetton_master",
            "total_supply": "1",
            "mintable": False,
            "jetton_content": {"type": "semichain", "data": ""},
            "jetton_wallet_code": "te6cc",
        },
    ],
)
def test_token_data_unknown_kind(body: dict[str, Any]):
    with pytest.raises(DecodeError):
        _ = decode(json.dumps(body), TokenData, envelope=False)


def test_run_get_method_nested_stack():
    body = json.dumps(
        {
            "@type": "smc.runResult",
            "exit_code": 0,
            "gas_used": 2994,
            "stack": [
                {"type": "num", "value": "0x1"},
                {
                    "type": "tuple",
                    "elements": [
                        {"type": "cell", "bytes": "te6cc"},
                        {"type": "list", "elements": [{"type": "slice", "bytes": "te6cc"}]},
                    ],
                },
            ],
            "last_transaction_id": transaction_id(),
            "block_id": block_id(),
        }
    )
    result = decode(body, RunGetMethodResult, envelope=False)
    assert result.stack[0] == StackNum(value="0x1")
    outer = result.stack[1]
    assert isinstance(outer, StackTuple)
    assert isinstance(outer.elements[1], StackList)
    assert outer.elements[1].elements[0].type == "slice"


def test_run_get_method_unknown_stack_entry():
    body = json.dumps(
        {
            "exit_code": 0,
            "gas_used": 1,
            "stack": [{"type": "cont", "bytes": ""}],
            "last_transaction_id": transaction_id(),
            "block_id": block_id(),
        }
    )
    with pytest.raises(DecodeError):
        _ = decode(body, RunGetMethodResult, envelope=False)


def test_external_inbound_message_has_no_source():
    message = {
        "@type": "raw.message",
        "hash": HASH,
        "source": "",
        "destination": ACCOUNT,
        "value": "0",
        "fwd_fee": "0",
        "ihr_fee": "0",
        "created_lt": "0",
        "body_hash": HASH,
        "msg_data": {"@type": "msg.dataRaw", "body": "te6cc", "init_state": ""},
    }
    body = json.dumps(
        {
            "@type": "raw.transaction",
            "address": {"@type": "accountAddress", "account_address": ACCOUNT},
            "utime": 1718000000,
            "data": "te6cc",
            "transaction_id": transaction_id(),
            "fee": "2000000",
            "storage_fee": "100",
            "other_fee": "1999900",
            "in_msg": message,
            "out_msgs": [],
        }
    )
    tx = decode(body, Transaction, envelope=False)
    assert tx.in_msg is not None
    assert tx.in_msg.source is None
    assert tx.in_msg.destination == Address.parse(ACCOUNT)
    assert tx.fee == Tokens(2_000_000)
    assert tx.out_msgs == []


def test_default_transaction_id():
    tx_id = TransactionId.default()
    assert tx_id.lt == 0
    assert tx_id.hash == HashBytes.ZERO
