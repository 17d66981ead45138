from __future__ import annotations

import httpx
import pytest
from swarm_core.agents import AgentRegistry, AgentStatus
from swarm_core.config import Settings
from swarm_core.execution import TaskExecutor
from swarm_core.tools import build_tool_registry
from swarm_core.tools.duckduckgo import NO_RESULTS_TEXT as DDG_NO_RESULTS
from swarm_core.tools.duckduckgo import DuckDuckGoSearch, parse_instant_answer
from swarm_core.tools.wikipedia import NO_RESULTS_TEXT as WIKI_NO_RESULTS
from swarm_core.tools.wikipedia import WikipediaLookup, article_url

DDG_PAYLOAD = {
    "Answer": "",
    "AbstractText": "Python is a programming language.",
    "AbstractSource": "Wikipedia",
    "AbstractURL": "https://en.wikipedia.org/wiki/Python",
    "Results": [{"Text": "Python.org - Official site", "FirstURL": "https://python.org"}],
    "RelatedTopics": [
        {"Text": "PyPI - Package index", "FirstURL": "https://pypi.org"},
        {
            "Name": "Implementations",
            "Topics": [{"Text": "CPython - Reference", "FirstURL": "https://cpython.example"}],
        },
        {"Text": "", "FirstURL": "https://skipped.example"},
    ],
}


def _async_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_parse_instant_answer_flattens_topics() -> None:
    answer = parse_instant_answer(DDG_PAYLOAD, max_results=10)
    assert [result.url for result in answer.results] == [
        "https://python.org",
        "https://pypi.org",
        "https://cpython.example",
    ]
    assert answer.results[0].title == "Python.org"
    assert answer.related_topics == ["PyPI - Package index"]
    assert answer.answer is None
    assert parse_instant_answer(DDG_PAYLOAD, max_results=1).results[0].url == "https://python.org"


@pytest.mark.asyncio
async def test_duckduckgo_findings_and_sources() -> None:
    seen: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=DDG_PAYLOAD)

    search = DuckDuckGoSearch(_async_client(handler), source_limit=2)
    findings = await search("python")

    assert seen[0].url.params["q"] == "python"
    assert seen[0].url.params["format"] == "json"
    assert "**Summary (Wikipedia):** Python is a programming language." in findings.findings
    assert "1. Python.org - Official site\n   URL: https://python.org" in findings.findings
    assert findings.sources == [
        "https://en.wikipedia.org/wiki/Python",
        "https://python.org",
        "https://pypi.org",
    ]


@pytest.mark.asyncio
async def test_duckduckgo_degrades_on_error() -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    findings = await DuckDuckGoSearch(_async_client(handler))("python")
    assert findings.findings == DDG_NO_RESULTS
    assert findings.sources == []


def _wikipedia_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/w/api.php":
        return httpx.Response(
            200,
            json={
                "query": {
                    "search": [
                        {"title": "Python (language)", "pageid": 1, "snippet": "<b>Python</b> lang"},
                        {"title": "Missing Page", "pageid": 2, "snippet": ""},
                    ]
                }
            },
        )
    if "Missing" in str(request.url):
        return httpx.Response(404)
    return httpx.Response(
        200,
        json={
            "title": "Python (language)",
            "extract": "A high-level language.",
            "content_urls": {"desktop": {"page": "https://en.wikipedia.org/wiki/Python_(language)"}},
        },
    )


@pytest.mark.asyncio
async def test_wikipedia_search_strips_markup() -> None:
    lookup = WikipediaLookup(_async_client(_wikipedia_handler))
    results = await lookup.search("python")
    assert results[0].snippet == "Python lang"
    assert results[1].url == article_url("Missing Page")


@pytest.mark.asyncio
async def test_wikipedia_findings_skip_missing_summaries() -> None:
    findings = await WikipediaLookup(_async_client(_wikipedia_handler))("python")
    assert findings.findings.startswith("**Wikipedia Results:**")
    assert "### 1. Python (language)" in findings.findings
    assert "Link: https://en.wikipedia.org/wiki/Python_(language)" in findings.findings
    assert "Missing Page" not in findings.findings
    assert findings.sources == ["https://en.wikipedia.org/wiki/Python_(language)"]


@pytest.mark.asyncio
async def test_wikipedia_degrades_on_error() -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    findings = await WikipediaLookup(_async_client(handler))("python")
    assert findings.findings == WIKI_NO_RESULTS
    assert findings.sources == []


@pytest.mark.asyncio
async def test_build_tool_registry_registers_search_adapters() -> None:
    async with httpx.AsyncClient() as client:
        registry = build_tool_registry(Settings(), client)
    assert registry.names() == ["duckduckgo", "wikipedia"]
    assert registry.list()[1] == {
        "name": "wikipedia",
        "label": "Wikipedia",
        "description": "Wikipedia article search with summaries",
    }
    assert registry.get("duckduckgo").definition.label == "DuckDuckGo"
    assert "summarize" not in registry
    with pytest.raises(ValueError, match="Tool already registered: wikipedia"):
        registry.register(registry.get("wikipedia").definition, registry.get("wikipedia").handler)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"RelatedTopics": ["x"]},
        {"Results": [{"Text": 5, "FirstURL": "https://python.org"}]},
        {"Results": "nope", "RelatedTopics": [{"Topics": "nope"}]},
        {"RelatedTopics": [{"Name": "Group", "Topics": [None, {"Text": "A - b", "FirstURL": 3}]}]},
        {"AbstractText": ["list"], "AbstractURL": 7},
    ],
)
async def test_duckduckgo_skips_malformed_entries(payload) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    findings = await DuckDuckGoSearch(_async_client(handler))("python")
    assert findings.findings == DDG_NO_RESULTS
    assert findings.sources == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "hit",
    [
        {"title": "Python", "pageid": "abc", "snippet": None},
        {"title": "Python", "pageid": None},
    ],
)
async def test_wikipedia_tolerates_malformed_hits(hit) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/w/api.php":
            return httpx.Response(200, json={"query": {"search": [hit, "junk", {"title": 3}]}})
        return httpx.Response(
            200, json={"title": None, "extract": 5, "content_urls": "x", "thumbnail": []}
        )

    lookup = WikipediaLookup(_async_client(handler))
    results = await lookup.search("python")
    assert [(result.title, result.pageid, result.snippet) for result in results] == [
        ("Python", 0, "")
    ]

    findings = await lookup("python")
    assert "### 1. Python" in findings.findings
    assert findings.sources == [article_url("Python")]


@pytest.mark.asyncio
@pytest.mark.parametrize("search_payload", [{"query": []}, {"query": {"search": {"a": 1}}}, []])
async def test_wikipedia_unexpected_search_shape(search_payload) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=search_payload)

    findings = await WikipediaLookup(_async_client(handler))("python")
    assert findings.findings == WIKI_NO_RESULTS


@pytest.mark.asyncio
async def test_malformed_tool_payloads_do_not_fail_tasks(fake_model, settings) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "api.duckduckgo.com":
            return httpx.Response(200, json={"RelatedTopics": ["x"], "Results": [{"Text": 5}]})
        return httpx.Response(200, json={"query": {"search": [{"title": "Q", "snippet": None}]}})

    async with _async_client(handler) as client:
        registry = AgentRegistry()
        agent = registry.spawn("web-searcher")
        executor = TaskExecutor(
            registry, build_tool_registry(settings, client), fake_model(configured=False), settings
        )
        result = await executor.execute(agent.id, "q")

    assert result.success is True
    assert result.tools_used == ["duckduckgo", "wikipedia"]
    assert DDG_NO_RESULTS in result.output
    assert registry.get(agent.id).status is AgentStatus.IDLE
