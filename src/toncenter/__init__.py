from .client import ToncenterClient
from .config import ToncenterConfig
from .errors import (
    DecodeError,
    InvalidFormat,
    NetworkError,
    ProtocolError,
    ToncenterError,
    TransportError,
)
from .transport import HttpTransport, Transport
from .types import Address, BlockId, BlockIdShort, HashBytes, ShardIdent, Tokens

__all__ = [
    "Address",
    "BlockId",
    "BlockIdShort",
    "DecodeError",
    "HashBytes",
    "HttpTransport",
    "InvalidFormat",
    "NetworkError",
    "ProtocolError",
    "ShardIdent",
    "ToncenterClient",
    "ToncenterConfig",
    "ToncenterError",
    "Tokens",
    "Transport",
    "TransportError",
]
