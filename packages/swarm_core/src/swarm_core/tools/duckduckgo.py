"""DuckDuckGo Instant Answer adapter (free, no key required)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from swarm_core.tools.registry import ToolFindings

logger = logging.getLogger(__name__)

DUCKDUCKGO_API_URL = "https://api.duckduckgo.com/"
NO_RESULTS_TEXT = "No results found from DuckDuckGo."
_FORMATTED_RESULT_LIMIT = 5
_RELATED_TOPIC_LIMIT = 5


@dataclass(frozen=True)
class SearchResult:
    """Single DuckDuckGo result or related topic."""

    title: str
    url: str
    snippet: str


@dataclass(frozen=True)
class InstantAnswer:
    """Parsed Instant Answer payload."""

    answer: str | None = None
    abstract: str | None = None
    abstract_source: str | None = None
    abstract_url: str | None = None
    results: list[SearchResult] = field(default_factory=list)
    related_topics: list[str] = field(default_factory=list)


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _title_from_text(text: str) -> str:
    return text.split(" - ")[0] or text[:50]


def _append_topic(results: list[SearchResult], topic: Any) -> bool:
    if not isinstance(topic, dict):
        return False
    text = _text(topic.get("Text"))
    url = _text(topic.get("FirstURL"))
    if text is None or url is None:
        return False
    results.append(SearchResult(title=_title_from_text(text), url=url, snippet=text))
    return True


def _entries(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def parse_instant_answer(data: dict[str, Any], max_results: int = 10) -> InstantAnswer:
    """Parse a raw Instant Answer response, skipping entries of unexpected shape."""
    results: list[SearchResult] = []
    related: list[str] = []

    for item in _entries(data.get("Results")):
        _append_topic(results, item)

    for topic in _entries(data.get("RelatedTopics")):
        if _append_topic(results, topic):
            related.append(topic["Text"])
        if isinstance(topic, dict):
            for nested in _entries(topic.get("Topics")):
                _append_topic(results, nested)

    return InstantAnswer(
        answer=_text(data.get("Answer")),
        abstract=_text(data.get("AbstractText")),
        abstract_source=_text(data.get("AbstractSource")),
        abstract_url=_text(data.get("AbstractURL")),
        results=results[:max_results],
        related_topics=related[:_RELATED_TOPIC_LIMIT],
    )


def format_instant_answer(answer: InstantAnswer) -> str:
    """Format parsed results for model consumption."""
    parts: list[str] = []
    if answer.answer:
        parts.append(f"**Direct Answer:** {answer.answer}")
    if answer.abstract:
        parts.append(f"**Summary ({answer.abstract_source}):** {answer.abstract}")
        if answer.abstract_url:
            parts.append(f"Source: {answer.abstract_url}")
    if answer.results:
        parts.append("\n**Related Results:**")
        for idx, result in enumerate(answer.results[:_FORMATTED_RESULT_LIMIT], start=1):
            parts.append(f"{idx}. {result.snippet}")
            parts.append(f"   URL: {result.url}")
    if not parts:
        return NO_RESULTS_TEXT
    return "\n".join(parts)


def answer_sources(answer: InstantAnswer, limit: int = 3) -> list[str]:
    """Return citation URLs: abstract URL first, then the leading results."""
    sources: list[str] = []
    if answer.abstract_url:
        sources.append(answer.abstract_url)
    sources.extend(result.url for result in answer.results[:limit])
    return sources


class DuckDuckGoSearch:
    """Adapter calling the DuckDuckGo Instant Answer API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        max_results: int = 10,
        source_limit: int = 3,
        timeout: float = 15.0,
    ) -> None:
        self._client = client
        self._max_results = max_results
        self._source_limit = source_limit
        self._timeout = timeout

    async def search(self, query: str) -> InstantAnswer:
        """Run a query, returning an empty answer on any failure."""
        params = {"q": query, "format": "json", "no_html": "1", "skip_disambig": "1"}
        try:
            response = await self._client.get(
                DUCKDUCKGO_API_URL,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("DuckDuckGo search failed: %s", exc)
            return InstantAnswer()
        if not isinstance(data, dict):
            logger.warning("DuckDuckGo returned an unexpected payload")
            return InstantAnswer()
        return parse_instant_answer(data, self._max_results)

    async def __call__(self, query: str) -> ToolFindings:
        answer = await self.search(query)
        return ToolFindings(
            findings=format_instant_answer(answer),
            sources=answer_sources(answer, self._source_limit),
        )
