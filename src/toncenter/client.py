import logging
import traceback

from .config import ToncenterConfig
from .transport import HttpTransport, Transport
from .v2.client import ToncenterV2
from .v3.client import ToncenterV3

logger = logging.getLogger(__name__)


class ToncenterClient:
    """
    Entry point bundling both API flavours over one shared transport.

    Use as ``async with ToncenterClient(config) as client: ...`` or call
    ``aclose`` when done, which cancels in-flight calls and releases the
    connection pool.
    """

    def __init__(self, config: ToncenterConfig | None = None, *, transport: Transport | None = None):
        self._config: ToncenterConfig = config or ToncenterConfig()
        self._transport: Transport = transport or HttpTransport(self._config)
        self._v2: ToncenterV2 = ToncenterV2(self._transport)
        self._v3: ToncenterV3 = ToncenterV3(self._transport)
        logger.debug(f"toncenter client created for {self._config.base_url}")

    @property
    def config(self) -> ToncenterConfig:
        return self._config

    @property
    def v2(self) -> ToncenterV2:
        return self._v2

    @property
    def v3(self) -> ToncenterV3:
        return self._v3

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: traceback.TracebackException | None,
    ):
        await self.aclose()
