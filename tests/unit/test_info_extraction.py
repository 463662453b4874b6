from __future__ import annotations

from flowchart_models import Fallback, Parsed, StatsResult, SummaryResult, TitleResult
from llm_tasks import extract_statistics, extract_title, summarize


TEXT = "Revenue grew 12.5% to $3,400 last year. Costs fell. Staff doubled to 40."


def test_offline_heuristics(offline_client):
    summary = summarize(TEXT, client=offline_client)
    title = extract_title(TEXT, client=offline_client)
    stats = extract_statistics(TEXT, client=offline_client)

    assert isinstance(summary, Fallback)
    assert summary.value.summary.startswith("Revenue grew 12")
    assert title.value == TitleResult("Revenue grew 12.5% to $3,400")
    assert stats.value == StatsResult(["12.5", "3,400", "40"])
    assert offline_client.calls == []


def test_stats_fallback_example(offline_client):
    stats = extract_statistics("Revenue grew 12.5% to $3,400 last year.", client=offline_client)
    assert stats.value.stats == ["12.5", "3,400"]


def test_parsed_objects(fake_client):
    client = fake_client([
        '{"summary": "Growth year."}',
        'Title: {"title": "Annual Results"}',
        '{"stats": ["12.5% growth", "$3,400 revenue", "40 staff", "extra"]}',
    ])
    summary = summarize(TEXT, client=client)
    title = extract_title(TEXT, client=client)
    stats = extract_statistics(TEXT, client=client)

    assert summary == Parsed(SummaryResult("Growth year."))
    assert title == Parsed(TitleResult("Annual Results"))
    assert isinstance(stats, Parsed)
    assert stats.value.stats == ["12.5% growth", "$3,400 revenue", "40 staff"]
    assert [c["call_name"] for c in client.calls] == ["Summary", "Title", "Stats"]


def test_unparseable_uses_response_text(fake_client):
    client = fake_client(["The title is Quarterly Review of Sales Figures"])
    title = extract_title(TEXT, client=client)
    assert isinstance(title, Fallback)
    assert title.reason == "unparseable response"
    assert title.value.title == "The title is Quarterly Review"


def test_wrong_field_type_is_unparseable(fake_client):
    client = fake_client(['{"stats": "12 and 13"}'])
    stats = extract_statistics(TEXT, client=client)
    assert isinstance(stats, Fallback)
    assert stats.value.stats == ["12", "13"]


def test_service_failure_uses_input(fake_client):
    client = fake_client([None])
    summary = summarize("First. Second.", client=client)
    assert isinstance(summary, Fallback)
    assert summary.reason == "service error"
    assert summary.value.summary == "First. Second."


def test_each_call_fails_independently(fake_client):
    client = fake_client([None, '{"title": "Kept"}', "garbage"])
    assert isinstance(summarize(TEXT, client=client), Fallback)
    assert extract_title(TEXT, client=client) == Parsed(TitleResult("Kept"))
    assert isinstance(extract_statistics(TEXT, client=client), Fallback)
    assert len(client.calls) == 3


def test_empty_input_makes_no_call(fake_client):
    client = fake_client(['{"summary": "x"}'])
    assert summarize("  ", client=client).value == SummaryResult("")
    assert extract_title("", client=client).value == TitleResult("")
    assert extract_statistics("", client=client).value == StatsResult([])
    assert client.calls == []
