from .client import ToncenterV3
from .models import (
    AddressBook,
    AdjacentTransactionsRequest,
    Block,
    Blocks,
    BlocksRequest,
    JettonMasters,
    JettonMastersRequest,
    JettonWallets,
    JettonWalletsRequest,
    MasterchainInfo,
    MessageDirection,
    SortDirection,
    Transaction,
    Transactions,
    TransactionsByMcBlockRequest,
    TransactionsByMessageRequest,
    TransactionsRequest,
)

__all__ = [
    "AddressBook",
    "AdjacentTransactionsRequest",
    "Block",
    "Blocks",
    "BlocksRequest",
    "JettonMasters",
    "JettonMastersRequest",
    "JettonWallets",
    "JettonWalletsRequest",
    "MasterchainInfo",
    "MessageDirection",
    "SortDirection",
    "ToncenterV3",
    "Transaction",
    "Transactions",
    "TransactionsByMcBlockRequest",
    "TransactionsByMessageRequest",
    "TransactionsRequest",
]
