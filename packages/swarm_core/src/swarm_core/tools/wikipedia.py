"""Wikipedia search adapter (free, no key required)."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from swarm_core.tools.registry import ToolFindings

logger = logging.getLogger(__name__)

WIKIPEDIA_SEARCH_URL = "https://en.wikipedia.org/w/api.php"
WIKIPEDIA_SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/summary/"
NO_RESULTS_TEXT = "No Wikipedia articles found."
_TAG_RE = re.compile(r"<[^>]*>")


@dataclass(frozen=True)
class WikipediaSearchResult:
    """Search hit from the MediaWiki search API."""

    title: str
    pageid: int
    snippet: str
    url: str


@dataclass(frozen=True)
class WikipediaSummary:
    """Article summary from the REST API."""

    title: str
    extract: str
    url: str


def article_url(title: str) -> str:
    """Return the canonical article URL for a title."""
    return f"https://en.wikipedia.org/wiki/{quote(title.replace(' ', '_'))}"


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _search_result(hit: Any) -> WikipediaSearchResult | None:
    if not isinstance(hit, dict):
        return None
    title = _string(hit.get("title")).strip()
    if not title:
        return None
    pageid = hit.get("pageid")
    return WikipediaSearchResult(
        title=title,
        pageid=pageid if isinstance(pageid, int) else 0,
        snippet=_TAG_RE.sub("", _string(hit.get("snippet"))),
        url=article_url(title),
    )


def format_summaries(summaries: list[WikipediaSummary]) -> str:
    """Format article summaries for model consumption."""
    if not summaries:
        return NO_RESULTS_TEXT
    parts = ["**Wikipedia Results:**\n"]
    for idx, summary in enumerate(summaries, start=1):
        parts.append(f"### {idx}. {summary.title}")
        parts.append(summary.extract)
        parts.append(f"Link: {summary.url}\n")
    return "\n".join(parts)


class WikipediaLookup:
    """Adapter searching Wikipedia and summarizing the top articles."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        search_limit: int = 3,
        timeout: float = 15.0,
    ) -> None:
        self._client = client
        self._search_limit = search_limit
        self._timeout = timeout

    async def search(self, query: str) -> list[WikipediaSearchResult]:
        """Search article titles, returning [] on any failure."""
        params = {
            "action": "query",
            "list": "search",
            "srsearch": query,
            "srlimit": str(self._search_limit),
            "format": "json",
            "origin": "*",
        }
        try:
            response = await self._client.get(
                WIKIPEDIA_SEARCH_URL, params=params, timeout=self._timeout
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Wikipedia search failed: %s", exc)
            return []

        hits = _mapping(_mapping(data).get("query")).get("search")
        if not isinstance(hits, list):
            return []
        return [result for result in map(_search_result, hits) if result is not None]

    async def summary(self, title: str) -> WikipediaSummary | None:
        """Fetch an article summary; None when missing or on failure."""
        url = WIKIPEDIA_SUMMARY_URL + quote(title, safe="")
        try:
            response = await self._client.get(url, timeout=self._timeout)
            if response.status_code == httpx.codes.NOT_FOUND:
                return None
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Wikipedia summary fetch failed for %r: %s", title, exc)
            return None
        if not isinstance(data, dict):
            return None

        page_url = _mapping(_mapping(data.get("content_urls")).get("desktop")).get("page")
        return WikipediaSummary(
            title=_string(data.get("title")) or title,
            extract=_string(data.get("extract")),
            url=_string(page_url) or article_url(title),
        )

    async def search_and_summarize(self, query: str) -> list[WikipediaSummary]:
        """Summaries for the top search hits, in search order."""
        summaries: list[WikipediaSummary] = []
        for result in await self.search(query):
            summary = await self.summary(result.title)
            if summary is not None:
                summaries.append(summary)
        return summaries

    async def __call__(self, query: str) -> ToolFindings:
        summaries = await self.search_and_summarize(query)
        return ToolFindings(
            findings=format_summaries(summaries),
            sources=[summary.url for summary in summaries],
        )
