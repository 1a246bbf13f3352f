from typing import final

import pydantic

from ..codec import decode, encode_query
from ..transport import Transport
from .models import (
    AdjacentTransactionsRequest,
    Blocks,
    BlocksRequest,
    JettonMasters,
    JettonMastersRequest,
    JettonWallets,
    JettonWalletsRequest,
    MasterchainInfo,
    Transactions,
    TransactionsByMcBlockRequest,
    TransactionsByMessageRequest,
    TransactionsRequest,
)


@final
class ToncenterV3:
    """
    The REST API.

    Responses are decoded directly, without an envelope. List endpoints return
    an address book next to the primary list. Address filters are sent as one
    comma-separated parameter.
    """

    def __init__(self, transport: Transport, base_path: str = "/toncenter/v3"):
        self._transport: Transport = transport
        self._base_path: str = base_path

    async def _get[T](self, path: str, target: type[T], params: pydantic.BaseModel | None) -> T:
        query = encode_query(params) if params is not None else {}
        body = await self._transport.get(f"{self._base_path}/{path}", query)
        return decode(body, target, envelope=False)

    async def get_masterchain_info(self) -> MasterchainInfo:
        return await self._get("masterchainInfo", MasterchainInfo, None)

    async def get_blocks(self, request: BlocksRequest | None = None) -> Blocks:
        return await self._get("blocks", Blocks, request or BlocksRequest())

    async def get_transactions(self, request: TransactionsRequest | None = None) -> Transactions:
        return await self._get("transactions", Transactions, request or TransactionsRequest())

    async def get_transactions_by_masterchain_block(
        self, request: TransactionsByMcBlockRequest
    ) -> Transactions:
        return await self._get("transactionsByMasterchainBlock", Transactions, request)

    async def get_adjacent_transactions(
        self, request: AdjacentTransactionsRequest
    ) -> Transactions:
        """Transactions linked to the given one through its inbound or outbound messages."""
        return await self._get("adjacentTransactions", Transactions, request)

    async def get_transactions_by_message(
        self, request: TransactionsByMessageRequest
    ) -> Transactions:
        return await self._get("transactionsByMessage", Transactions, request)

    async def get_jetton_masters(
        self, request: JettonMastersRequest | None = None
    ) -> JettonMasters:
        return await self._get("jetton/masters", JettonMasters, request or JettonMastersRequest())

    async def get_jetton_wallets(
        self, request: JettonWalletsRequest | None = None
    ) -> JettonWallets:
        return await self._get("jetton/wallets", JettonWallets, request or JettonWalletsRequest())
