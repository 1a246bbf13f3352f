from .client import ToncenterV2
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
    JettonContent,
    MasterchainInfo,
    ParsedAccountState,
    RunGetMethodParams,
    RunGetMethodResult,
    SendBocParams,
    Shards,
    StackCell,
    StackList,
    StackNum,
    StackSlice,
    StackTuple,
    TokenData,
    TonlibAccountStatus,
    TonlibBlockId,
    Transaction,
    TransactionId,
    TransactionsParams,
    WalletInformation,
)

__all__ = [
    "AccountParams",
    "AddressForms",
    "AddressInformation",
    "BlockHeader",
    "BlockHeaderParams",
    "BlockTransactions",
    "BlockTransactionsExt",
    "BlockTransactionsParams",
    "DetectAddressParams",
    "ExtMessageInfo",
    "ExtendedAddressInformation",
    "GetShardsParams",
    "JettonContent",
    "MasterchainInfo",
    "ParsedAccountState",
    "RunGetMethodParams",
    "RunGetMethodResult",
    "SendBocParams",
    "Shards",
    "StackCell",
    "StackList",
    "StackNum",
    "StackSlice",
    "StackTuple",
    "TokenData",
    "TonlibAccountStatus",
    "TonlibBlockId",
    "ToncenterV2",
    "Transaction",
    "TransactionId",
    "TransactionsParams",
    "WalletInformation",
]
