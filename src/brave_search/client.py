"""Async client for the Brave Search API.

One call is one GET request and one decode: no retries, caching or
pagination state live here. Decoding is delegated to
``brave_search.envelope.decode_response``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

import httpx
from pydantic import BaseModel

from brave_search._errors import wrap_transport_error
from brave_search._http import (
    IMAGE_SEARCH_PATH,
    SPELLCHECK_PATH,
    SUGGEST_SEARCH_PATH,
    SUMMARIZER_SEARCH_PATH,
    VIDEO_SEARCH_PATH,
    WEB_SEARCH_PATH,
)
from brave_search.config import Config
from brave_search.envelope import decode_response
from brave_search.models import (
    ImageSearchResult,
    SpellcheckResult,
    SuggestSearchResult,
    SummarizerSearchResult,
    VideoSearchResult,
    WebSearchResult,
)
from brave_search.options import (
    SearchOptions,
    spellcheck_params,
    suggest_params,
    summarizer_params,
    web_search_params,
)

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

ShapeT = TypeVar("ShapeT", bound=BaseModel)


class Brave:
    """Brave Search API client.

    Example:
        async with Brave() as brave:
            result = await brave.web_search("python packaging")
            for item in result.web.results if result.web else []:
                print(item.title, item.url)
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize with a config (resolved from the environment when omitted).

        A caller-supplied ``http_client`` is used as-is and never closed here.
        """
        self.config = config if config is not None else Config()
        self._owns_client = http_client is None
        self._client = (
            http_client
            if http_client is not None
            else httpx.AsyncClient(timeout=self.config.timeout_s)
        )

    async def __aenter__(self) -> Brave:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _get(
        self,
        path: str,
        params: dict[str, str],
        options: SearchOptions,
        result_type: type[ShapeT],
    ) -> ShapeT:
        url = httpx.URL(self.config.base_url).join(path).copy_merge_params(params)
        query = url.query.decode("ascii")
        logger.debug("GET %s?%s", path, query)

        try:
            response = await self._client.get(
                url, headers=options.headers(self.config.api_key or "")
            )
        except httpx.RequestError as e:
            raise wrap_transport_error(e, endpoint=path, query=query) from e

        return decode_response(
            response.content,
            status_code=response.status_code,
            result_type=result_type,
            query=query,
            headers=response.headers,
        )

    async def web_search(
        self, term: str, options: SearchOptions | None = None
    ) -> WebSearchResult:
        """Return web search results for ``term``."""
        opts = options or SearchOptions()
        return await self._get(
            WEB_SEARCH_PATH, web_search_params(term, opts), opts, WebSearchResult
        )

    async def image_search(
        self, term: str, options: SearchOptions | None = None
    ) -> ImageSearchResult:
        """Return image search results for ``term``."""
        opts = (options or SearchOptions()).for_image_search()
        return await self._get(
            IMAGE_SEARCH_PATH, web_search_params(term, opts), opts, ImageSearchResult
        )

    async def video_search(
        self, term: str, options: SearchOptions | None = None
    ) -> VideoSearchResult:
        """Return video search results for ``term``."""
        opts = options or SearchOptions()
        return await self._get(
            VIDEO_SEARCH_PATH, web_search_params(term, opts), opts, VideoSearchResult
        )

    async def suggest_search(
        self, term: str, options: SearchOptions | None = None
    ) -> SuggestSearchResult:
        """Return suggested related search terms."""
        opts = options or SearchOptions()
        return await self._get(
            SUGGEST_SEARCH_PATH, suggest_params(term, opts), opts, SuggestSearchResult
        )

    async def spellcheck(
        self, term: str, options: SearchOptions | None = None
    ) -> SpellcheckResult:
        """Return spelling suggestions for ``term``."""
        opts = options or SearchOptions()
        return await self._get(
            SPELLCHECK_PATH, spellcheck_params(term, opts), opts, SpellcheckResult
        )

    async def summarizer_search(
        self, key: str, options: SearchOptions | None = None
    ) -> SummarizerSearchResult:
        """Return the summary for a key taken from ``WebSearchResult.summarizer``."""
        opts = options or SearchOptions()
        return await self._get(
            SUMMARIZER_SEARCH_PATH,
            summarizer_params(key, opts),
            opts,
            SummarizerSearchResult,
        )
