import argparse
import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import cast

from .client import ToncenterClient
from .config import ToncenterConfig
from .errors import ToncenterError
from .types import Address
from .v2.models import AccountParams
from .v3.models import BlocksRequest, TransactionsRequest

logger = logging.getLogger(__name__)

DEFAULT_SMOKE_URL = "https://toncenter-testnet.tychoprotocol.com"
ZERO_ADDRESS = "0:" + "0" * 64


async def check_v2_masterchain_info(client: ToncenterClient) -> None:
    info = await client.v2.get_masterchain_info()
    logger.info(f"Last block: {info.last.workchain}:{info.last.shard}:{info.last.seqno}")


async def check_v2_address_information(client: ToncenterClient) -> None:
    params = AccountParams(address=Address.parse(ZERO_ADDRESS))
    info = await client.v2.get_address_information(params)
    logger.info(f"Address state: {info.state}, balance: {info.balance}")


async def check_v3_masterchain_info(client: ToncenterClient) -> None:
    info = await client.v3.get_masterchain_info()
    logger.info(f"Last block seqno: {info.last.seqno}, first block seqno: {info.first.seqno}")


async def check_v3_transactions(client: ToncenterClient) -> None:
    result = await client.v3.get_transactions(TransactionsRequest(limit=5))
    logger.info(f"Found {len(result.transactions)} transactions")
    if result.transactions:
        tx = result.transactions[0]
        logger.info(f"First transaction {tx.hash} of {tx.account}")


async def check_v3_blocks(client: ToncenterClient) -> None:
    result = await client.v3.get_blocks(BlocksRequest(limit=3))
    logger.info(f"Found {len(result.blocks)} blocks")
    if result.blocks:
        block = result.blocks[0]
        logger.info(f"First block {block.workchain}:{block.shard}:{block.seqno}")


CHECKS: list[tuple[str, Callable[[ToncenterClient], Awaitable[None]]]] = [
    ("v2 getMasterchainInfo", check_v2_masterchain_info),
    ("v2 getAddressInformation", check_v2_address_information),
    ("v3 masterchainInfo", check_v3_masterchain_info),
    ("v3 transactions", check_v3_transactions),
    ("v3 blocks", check_v3_blocks),
]


async def run(config: ToncenterConfig) -> int:
    logger.info(f"Checking {config.base_url}")
    failed = 0
    async with ToncenterClient(config) as client:
        for name, check in CHECKS:
            try:
                await check(client)
            except ToncenterError as e:
                failed += 1
                logger.error(f"{name} failed: {e}")
            else:
                logger.info(f"{name} ok")
    logger.info(f"{len(CHECKS) - failed}/{len(CHECKS)} checks passed")
    return 1 if failed else 0


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(
        prog="toncenter",
        description="Run a few read-only calls against a toncenter-compatible service",
    )
    _ = parser.add_argument("--base-url", default=DEFAULT_SMOKE_URL, help="Service base URL")
    _ = parser.add_argument("--api-key", default=None, help="Value for the X-API-Key header")
    _ = parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every request and response body",
    )

    args = parser.parse_args()
    config = ToncenterConfig(
        base_url=cast(str, args.base_url),
        api_key=cast(str | None, args.api_key),
        enable_logging=cast(bool, args.verbose),
    )
    sys.exit(asyncio.run(run(config)))


if __name__ == "__main__":
    main()
