"""Thin lifecycle wrapper around aiohttp.ClientSession."""

import asyncio
import typing as t

import aiohttp

from ...domain.exceptions import ClientNotInitialisedError
from .factories import create_secure_connector, create_ssl_context


class AiohttpClient:
    """Owns (or borrows) an aiohttp session for the duration of a context.

    A session passed in by the caller is used as-is and never closed here.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ) -> None:
        self._session = session
        self._owns_session = session is None
        self._timeout = timeout

    async def open(self) -> None:
        if self._session is not None:
            return
        # Loading the CA bundle reads from disk
        ssl_context = await asyncio.to_thread(create_ssl_context)
        self._session = aiohttp.ClientSession(
            connector=create_secure_connector(ssl=ssl_context),
            timeout=aiohttp.ClientTimeout(total=self._timeout),
        )

    async def close(self) -> None:
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    async def __aenter__(self) -> "AiohttpClient":
        await self.open()
        return self

    async def __aexit__(self, *exc_info: t.Any) -> None:
        await self.close()

    def _require_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            raise ClientNotInitialisedError(
                "HTTP client not initialised. Use 'async with' or call open()."
            )
        return self._session

    def post(self, url: str, **kwargs: t.Any) -> t.Any:
        """Start a POST request; use the result as an async context manager."""
        return self._require_session().post(url, **kwargs)
