import json

import pydantic
import pytest

from toncenter import Address, DecodeError, HashBytes, ProtocolError
from toncenter.codec import decode, encode_body, encode_query
from toncenter.v2.models import (
    Base64Form,
    BlockHeaderParams,
    JsonRpcRequest,
    RunGetMethodParams,
    SendBocParams,
    StackCell,
    StackNum,
    TransactionsParams,
)
from toncenter.v3.models import (
    Blocks,
    BlocksRequest,
    JettonMastersRequest,
    JettonWalletsRequest,
    SortDirection,
    TransactionsRequest,
)
from toncenter.types import BlockId, BlockIdShort

ADDR_A = Address.parse("0:" + "aa" * 32)
ADDR_B = Address.parse("-1:" + "bb" * 32)


def test_defaults_are_always_sent():
    assert encode_query(BlocksRequest()) == {"limit": "10", "offset": "0", "sort": "desc"}
    assert encode_query(JettonWalletsRequest()) == {
        "exclude_zero_balance": "false",
        "limit": "10",
        "offset": "0",
    }


def test_address_lists_are_comma_joined_in_order():
    query = encode_query(TransactionsRequest(account=[ADDR_B, ADDR_A], limit=5))
    assert query["account"] == f"{ADDR_B},{ADDR_A}"
    assert query["limit"] == "5"
    assert "exclude_account" not in query


def test_empty_lists_and_none_are_omitted():
    query = encode_query(JettonMastersRequest(address=(), admin_address=None))
    assert query == {"limit": "10", "offset": "0"}


def test_query_values_are_canonical_strings():
    request = TransactionsRequest(
        workchain=-1,
        hash=HashBytes("AB" * 32),
        lt="18446744073709551615",
        sort=SortDirection.ASC,
    )
    query = encode_query(request)
    assert query["workchain"] == "-1"
    assert query["hash"] == "AB" * 32
    assert query["lt"] == "18446744073709551615"
    assert query["sort"] == "asc"


def test_v2_transactions_query():
    query = encode_query(TransactionsParams(address=ADDR_A))
    assert query == {"address": str(ADDR_A), "limit": "10", "to_lt": "0"}


def test_block_header_params_from_block_id():
    full = BlockId(
        workchain=0,
        shard=-(1 << 63),
        seqno=7,
        root_hash=HashBytes("11" * 32),
        file_hash=HashBytes("22" * 32),
    )
    assert encode_query(BlockHeaderParams.for_block(full)) == {
        "workchain": "0",
        "shard": str(-(1 << 63)),
        "seqno": "7",
        "root_hash": "11" * 32,
        "file_hash": "22" * 32,
    }
    assert encode_query(BlockHeaderParams.for_block(full.as_short())) == {
        "workchain": "0",
        "shard": str(-(1 << 63)),
        "seqno": "7",
    }
    assert isinstance(full.as_short(), BlockIdShort)


def test_post_bodies():
    assert json.loads(encode_body(SendBocParams(boc="te6cc"))) == {"boc": "te6cc"}

    params = RunGetMethodParams(
        address=ADDR_A,
        method="get_wallet_data",
        stack=[StackNum.of(-5), StackCell(bytes="te6cc")],
    )
    assert json.loads(encode_body(params)) == {
        "address": str(ADDR_A),
        "method": "get_wallet_data",
        "stack": [{"type": "num", "value": "-5"}, {"type": "cell", "bytes": "te6cc"}],
    }

    rpc = JsonRpcRequest(method="getAddressBalance", params={"address": str(ADDR_A)})
    assert json.loads(encode_body(rpc)) == {
        "jsonrpc": "2.0",
        "method": "getAddressBalance",
        "params": {"address": str(ADDR_A)},
        "id": 1,
    }


def test_invalid_request_input_fails_before_encoding():
    with pytest.raises(pydantic.ValidationError):
        _ = TransactionsParams(address="not an address")  # pyright: ignore[reportArgumentType]
    with pytest.raises(pydantic.ValidationError):
        _ = TransactionsParams(address=ADDR_A, limit=256)
    with pytest.raises(pydantic.ValidationError):
        _ = TransactionsRequest(hash="abc")  # pyright: ignore[reportArgumentType]


def test_envelope_is_unwrapped():
    body = '{"ok": true, "result": {"b64": "x", "b64url": "y"}, "@extra": "1"}'
    assert decode(body, Base64Form, envelope=True) == Base64Form(b64="x", b64url="y")


def test_envelope_not_ok():
    body = '{"ok": false, "error": "LITE_SERVER_UNKNOWN", "code": 500}'
    with pytest.raises(ProtocolError) as exc_info:
        _ = decode(body, Base64Form, envelope=True)
    assert exc_info.value.code == 500
    assert exc_info.value.error == "LITE_SERVER_UNKNOWN"


@pytest.mark.parametrize(
    "body",
    [
        '{"result": {"b64": "x", "b64url": "y"}}',
        '{"ok": "true", "result": {"b64": "x", "b64url": "y"}}',
        '{"ok": true}',
        "[]",
    ],
)
def test_malformed_envelope(body: str):
    with pytest.raises(ProtocolError):
        _ = decode(body, Base64Form, envelope=True)


def test_bare_body_without_envelope():
    body = '{"b64": "x", "b64url": "y", "unknown": [1, 2, 3]}'
    assert decode(body, Base64Form, envelope=False) == Base64Form(b64="x", b64url="y")


def test_invalid_json():
    with pytest.raises(DecodeError) as exc_info:
        _ = decode("<html>gateway</html>", Base64Form, envelope=False)
    assert exc_info.value.fields == ["<body>"]


@pytest.mark.parametrize(
    "body",
    [
        b'{"b64": "\xff", "b64url": "y"}',
        '{"b64": "x", "b64url": "y", "n": ' + "1" * 5000 + "}",
    ],
    ids=["non-utf8-bytes", "oversized-integer"],
)
@pytest.mark.parametrize("envelope", [False, True])
def test_unreadable_body(body: str | bytes, envelope: bool):
    with pytest.raises(DecodeError) as exc_info:
        _ = decode(body, Base64Form, envelope=envelope)
    assert exc_info.value.fields == ["<body>"]


def test_decode_error_names_missing_field():
    with pytest.raises(DecodeError) as exc_info:
        _ = decode('{"b64": "x"}', Base64Form, envelope=False)
    assert exc_info.value.fields == ["b64url"]
    assert "Base64Form" in str(exc_info.value)


def test_decode_error_names_nested_field():
    body = json.dumps({"blocks": [{"workchain": 0, "shard": "8000000000000000"}]})
    with pytest.raises(DecodeError) as exc_info:
        _ = decode(body, Blocks, envelope=False)
    assert "blocks.0.seqno" in exc_info.value.fields
    assert "blocks.0.workchain" not in exc_info.value.fields
