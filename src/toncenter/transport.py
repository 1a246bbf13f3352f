import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import final, override

import httpx

from .config import ToncenterConfig
from .errors import NetworkError, TransportError

logger = logging.getLogger(__name__)


class Transport(ABC):
    @abstractmethod
    async def get(self, path: str, query: Mapping[str, str] | None = None) -> str:
        pass

    @abstractmethod
    async def post(self, path: str, body: str, content_type: str = "application/json") -> str:
        pass

    @abstractmethod
    async def aclose(self) -> None:
        pass


async def _log_request(request: httpx.Request) -> None:
    body = request.content.decode("utf-8", errors="replace")
    logger.info(f"--> {request.method} {request.url}")
    if body:
        logger.info(body)


async def _log_response(response: httpx.Response) -> None:
    body = (await response.aread()).decode("utf-8", errors="replace")
    logger.info(f"<-- {response.status_code} {response.reason_phrase} {response.request.url}")
    if body:
        logger.info(body)


@final
class HttpTransport(Transport):
    """
    Transport backed by a single pooled ``httpx.AsyncClient``.

    Every call runs as its own task, so cancelling the caller cancels the
    request on the wire, and ``aclose`` can cancel whatever is still in flight
    before the pool is released.
    """

    def __init__(
        self,
        config: ToncenterConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {"Accept": "application/json"}
        if config.api_key:
            headers["X-API-Key"] = config.api_key

        event_hooks: dict[str, list[object]] = {"request": [], "response": []}
        if config.enable_logging:
            event_hooks["request"].append(_log_request)
            event_hooks["response"].append(_log_response)

        self._client: httpx.AsyncClient = httpx.AsyncClient(
            base_url=config.base_url,
            headers=headers,
            timeout=httpx.Timeout(
                connect=config.connect_timeout,
                read=config.read_timeout,
                write=config.read_timeout,
                pool=None,
            ),
            event_hooks=event_hooks,  # pyright: ignore[reportArgumentType]
            transport=transport,
        )
        self._inflight: set[asyncio.Task[httpx.Response]] = set()
        self._closed: bool = False

    @property
    def closed(self) -> bool:
        return self._closed

    @override
    async def get(self, path: str, query: Mapping[str, str] | None = None) -> str:
        request = self._client.build_request("GET", path, params=dict(query or {}))
        return await self._execute(request)

    @override
    async def post(self, path: str, body: str, content_type: str = "application/json") -> str:
        request = self._client.build_request(
            "POST", path, content=body.encode("utf-8"), headers={"Content-Type": content_type}
        )
        return await self._execute(request)

    async def _execute(self, request: httpx.Request) -> str:
        if self._closed:
            raise RuntimeError("transport is closed")

        logger.debug(f"{request.method} {request.url}")
        task = asyncio.ensure_future(self._client.send(request))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

        try:
            response = await task
        except httpx.RequestError as e:
            raise NetworkError(f"{request.method} {request.url} failed: {e}") from e

        if not response.is_success:
            raise TransportError(response.status_code, response.reason_phrase, response.text)
        return response.text

    @override
    async def aclose(self) -> None:
        if self._closed:
            logger.warning("transport is already closed")
            return
        self._closed = True

        pending = list(self._inflight)
        for task in pending:
            _ = task.cancel()
        if pending:
            _ = await asyncio.gather(*pending, return_exceptions=True)

        await self._client.aclose()
