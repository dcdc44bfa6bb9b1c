import asyncio
import json

import httpx
import openai

from travel_advisor.graph import build_graph as pipeline
from travel_advisor.graph.agents import INCOMPLETE_FAILURE_MESSAGE, TRANSPORT_FAILURE_MESSAGE
from travel_advisor.graph.normalize import normalize_params
from travel_advisor.graph.postprocess.fallback import synthesize_plan
from travel_advisor.graph.state import RunState
from travel_advisor.models.results import Failure, Success

PARAMS = normalize_params(
    query="",
    preferences=["family"],
    regions=["punta-cana"],
    budget="mid-range",
    companions="family",
)


def test_structured_answer_is_returned(make_client, sample_plan):
    client, completions = make_client(json.dumps(sample_plan))

    envelope = asyncio.run(pipeline.submit_query(PARAMS, client))

    assert isinstance(envelope, Success)
    assert envelope.data.model_dump(by_alias=True) == sample_plan
    assert "Regions of interest: Punta Cana" in completions.calls[0]["messages"][1]["content"]


def test_transport_error_is_a_failure_without_plan(make_client, monkeypatch):
    def _no_synthesis(params):
        raise AssertionError("synthesis must not run after a transport failure")

    monkeypatch.setattr(pipeline, "synthesize_plan", _no_synthesis)
    monkeypatch.setattr("travel_advisor.graph.postprocess.interpret.synthesize_plan", _no_synthesis)
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    client, completions = make_client(error=openai.APIConnectionError(request=request))

    envelope = asyncio.run(pipeline.submit_query(PARAMS, client))

    assert isinstance(envelope, Failure)
    assert envelope.error == TRANSPORT_FAILURE_MESSAGE
    assert len(completions.calls) == 1


def test_timeout_is_a_failure(make_client):
    client, _ = make_client("{}", delay=1.0, timeout=0.05)
    envelope = asyncio.run(pipeline.submit_query(PARAMS, client))
    assert isinstance(envelope, Failure)
    assert envelope.error


def test_truncated_without_text_is_a_failure(make_client):
    client, _ = make_client(None, finish_reason="length")
    envelope = asyncio.run(pipeline.submit_query(PARAMS, client))
    assert isinstance(envelope, Failure)
    assert envelope.error == INCOMPLETE_FAILURE_MESSAGE


def test_unusable_answer_still_succeeds(make_client):
    client, _ = make_client("I could not find anything useful.")
    envelope = asyncio.run(pipeline.submit_query(PARAMS, client))
    assert isinstance(envelope, Success)
    assert envelope.data == synthesize_plan(PARAMS)
    assert "family vacation" in envelope.data.summary


def test_graph_records_stages(make_client):
    client, _ = make_client("Summary: Sun.\nPros:\n- Beaches")
    graph = pipeline.build_graph(client)

    result = asyncio.run(graph.ainvoke(RunState(params=PARAMS)))

    assert result["strategy"] == "sections"
    assert [log["stage"] for log in result["logs"]] == ["Prompt Built", "Research Received", "Plan Interpreted"]
    assert result["plan"].summary == "Sun."


def test_graph_stops_after_failed_research(make_client):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    client, _ = make_client(error=openai.APITimeoutError(request=request))
    graph = pipeline.build_graph(client)

    result = asyncio.run(graph.ainvoke(RunState(params=PARAMS)))

    assert result["error"] == TRANSPORT_FAILURE_MESSAGE
    assert result.get("plan") is None
    assert [log["stage"] for log in result["logs"]] == ["Prompt Built", "Research Failed"]
