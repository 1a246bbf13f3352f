from collections.abc import Mapping
from typing import final

import pydantic

from ..codec import decode, encode_body, encode_query
from ..transport import Transport
from .models import (
    AccountParams,
    AddressForms,
    AddressInformation,
    BlockHeader,
    BlockHeaderParams,
    BlockTransactions,
    BlockTransactionsExt,
    BlockTransactionsParams,
    DetectAddressParams,
    ExtendedAddressInformation,
    ExtMessageInfo,
    GetShardsParams,
    JsonRpcRequest,
    MasterchainInfo,
    RunGetMethodParams,
    RunGetMethodResult,
    SendBocParams,
    Shards,
    TokenData,
    Transaction,
    TransactionsParams,
    WalletInformation,
)


@final
class ToncenterV2:
    """
    The legacy JSON-RPC flavoured API.

    Every response comes wrapped in ``{"ok": true, "result": ...}``; the
    envelope is removed before decoding, and a failed envelope raises
    ``ProtocolError``. Each method is exactly one HTTP round trip.
    """

    def __init__(self, transport: Transport, base_path: str = "/toncenter/v2"):
        self._transport: Transport = transport
        self._base_path: str = base_path

    async def _get[T](
        self, method: str, target: type[T] | object, params: pydantic.BaseModel | None = None
    ) -> T:
        query = encode_query(params) if params is not None else {}
        body = await self._transport.get(f"{self._base_path}/{method}", query)
        return decode(body, target, envelope=True)

    async def _post[T](
        self, method: str, target: type[T] | object, params: pydantic.BaseModel
    ) -> T:
        body = await self._transport.post(f"{self._base_path}/{method}", encode_body(params))
        return decode(body, target, envelope=True)

    async def get_masterchain_info(self) -> MasterchainInfo:
        return await self._get("getMasterchainInfo", MasterchainInfo)

    async def get_block_header(self, params: BlockHeaderParams) -> BlockHeader:
        return await self._get("getBlockHeader", BlockHeader, params)

    async def get_shards(self, params: GetShardsParams) -> Shards:
        return await self._get("shards", Shards, params)

    async def detect_address(self, params: DetectAddressParams) -> AddressForms:
        return await self._get("detectAddress", AddressForms, params)

    async def get_address_information(self, params: AccountParams) -> AddressInformation:
        return await self._get("getAddressInformation", AddressInformation, params)

    async def get_extended_address_information(
        self, params: AccountParams
    ) -> ExtendedAddressInformation:
        return await self._get(
            "getExtendedAddressInformation", ExtendedAddressInformation, params
        )

    async def get_wallet_information(self, params: AccountParams) -> WalletInformation:
        return await self._get("getWalletInformation", WalletInformation, params)

    async def get_token_data(self, params: AccountParams) -> TokenData:
        return await self._get("getTokenData", TokenData, params)

    async def get_transactions(self, params: TransactionsParams) -> list[Transaction]:
        return await self._get("getTransactions", list[Transaction], params)

    async def get_block_transactions(self, params: BlockTransactionsParams) -> BlockTransactions:
        return await self._get("getBlockTransactions", BlockTransactions, params)

    async def get_block_transactions_ext(
        self, params: BlockTransactionsParams
    ) -> BlockTransactionsExt:
        return await self._get("getBlockTransactionsExt", BlockTransactionsExt, params)

    async def send_boc(self, params: SendBocParams) -> ExtMessageInfo:
        return await self._post("sendBoc", ExtMessageInfo, params)

    async def send_boc_return_hash(self, params: SendBocParams) -> ExtMessageInfo:
        return await self._post("sendBocReturnHash", ExtMessageInfo, params)

    async def run_get_method(self, params: RunGetMethodParams) -> RunGetMethodResult:
        """Run a read-only get method of a contract against its latest state."""
        return await self._post("runGetMethod", RunGetMethodResult, params)

    async def json_rpc(
        self, method: str, params: Mapping[str, pydantic.JsonValue]
    ) -> pydantic.JsonValue:
        """
        Call any v2 method through the generic JSON-RPC endpoint.

        The ``result`` of the envelope is returned as plain JSON.
        """
        request = JsonRpcRequest(method=method, params=dict(params))
        return await self._post("jsonRPC", pydantic.JsonValue, request)
