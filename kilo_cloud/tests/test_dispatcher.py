"""Tests for the dispatcher boundary."""

import asyncio
import json

import httpx
import pytest

from shared.rpc.dispatcher import Dispatcher, render_result
from shared.rpc.procedure import RawResult
from shared.rpc.registry import EndpointDescriptor, build_procedures, summarize

REGISTRY = {
    "webhookTriggers": (
        EndpointDescriptor("list", "GET", "List all webhook triggers."),
        EndpointDescriptor("create", "POST", "Create webhook trigger.", params="triggerId"),
    ),
    "rest": (
        EndpointDescriptor("getRepository", "GET", "Get repo.", path="/repositories/{id}"),
        EndpointDescriptor("getLog", "GET", "Get log.", path="/logs/{id}", raw=True),
    ),
}


@pytest.fixture
def dispatcher(recorder, settings):
    return Dispatcher(build_procedures(REGISTRY), settings, client_factory=recorder.client_factory)


@pytest.mark.asyncio
async def test_every_declared_key_resolves(dispatcher, recorder):
    """No declared key should come back as not found."""
    for key in dispatcher.procedures:
        output = await dispatcher.dispatch(key, '{"id": "1"}')
        assert "not found" not in output


@pytest.mark.asyncio
async def test_unknown_key_returns_error_object(dispatcher, recorder):
    output = await dispatcher.dispatch("doesNotExist.op")

    data = json.loads(output)
    assert data["error"] is True
    assert "doesNotExist.op" in data["message"]
    assert "ProcedureNotFoundError" in data["stack"]
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_malformed_params_return_error_object(dispatcher, recorder):
    output = await dispatcher.dispatch("webhookTriggers.list", "{not json")

    data = json.loads(output)
    assert data["error"] is True
    assert "params" in data["message"]
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_json_result_round_trips(dispatcher, recorder):
    """Pretty-printed output should parse back to the decoded body."""
    body = {"items": [{"id": "t1", "active": True, "score": 1.5, "note": None}], "name": "über"}
    recorder.body = json.dumps(body)

    output = await dispatcher.dispatch("webhookTriggers.list")

    assert json.loads(output) == body
    assert "über" in output
    assert output.startswith("{\n  ")


@pytest.mark.asyncio
async def test_raw_result_rendered_with_status(dispatcher, recorder):
    recorder.status, recorder.body = 202, "line one\nline two"

    output = await dispatcher.dispatch("rest.getLog", '{"id": "7"}')

    assert output == "Status: 202\n\nline one\nline two"


@pytest.mark.asyncio
async def test_raw_override_on_trpc_procedure(dispatcher, recorder):
    recorder.status, recorder.body = 500, "oops"

    output = await dispatcher.dispatch("webhookTriggers.list", raw=True)

    assert output == "Status: 500\n\noops"


@pytest.mark.asyncio
async def test_remote_parse_failure_returns_error_object(dispatcher, recorder):
    recorder.status, recorder.body = 503, "Service Unavailable"

    data = json.loads(await dispatcher.dispatch("webhookTriggers.list"))

    assert data["error"] is True
    assert "503" in data["message"]
    assert "Service Unavailable" in data["message"]


@pytest.mark.asyncio
async def test_transport_failure_returns_error_object(settings):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    dispatcher = Dispatcher(
        build_procedures(REGISTRY),
        settings,
        client_factory=lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    data = json.loads(await dispatcher.dispatch("webhookTriggers.list"))

    assert data["error"] is True
    assert "webhookTriggers.list" in data["message"]
    assert "timed out" in data["message"]


@pytest.mark.asyncio
async def test_cancellation_propagates(settings):
    """Task cancellation must not be converted into an error object."""
    started = asyncio.Event()

    async def handler(request):
        started.set()
        await asyncio.sleep(10)

    dispatcher = Dispatcher(
        build_procedures(REGISTRY),
        settings,
        client_factory=lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    task = asyncio.create_task(dispatcher.dispatch("webhookTriggers.list"))
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
async def test_audit_sink_receives_outcome(recorder, settings):
    calls = []

    async def sink(*args):
        calls.append(args)

    dispatcher = Dispatcher(
        build_procedures(REGISTRY),
        settings,
        client_factory=recorder.client_factory,
        audit=sink,
    )

    await dispatcher.dispatch("webhookTriggers.create", '{"triggerId": "t"}')
    await dispatcher.dispatch("nope.nope")

    assert calls[0] == ("webhookTriggers.create", "POST", '{"triggerId": "t"}', None, None)
    assert calls[1][0] == "nope.nope"
    assert calls[1][1] == "UNKNOWN"
    assert "nope.nope" in calls[1][4]


@pytest.mark.asyncio
async def test_failing_audit_sink_does_not_break_dispatch(recorder, settings):
    async def sink(*args):
        raise RuntimeError("disk full")

    dispatcher = Dispatcher(
        build_procedures(REGISTRY),
        settings,
        client_factory=recorder.client_factory,
        audit=sink,
    )

    output = await dispatcher.dispatch("webhookTriggers.list")

    assert json.loads(output) == {"ok": True}


def test_render_result_for_raw_and_json():
    assert render_result(RawResult(content="hi", status=200)) == "Status: 200\n\nhi"
    assert render_result([1, 2]) == "[\n  1,\n  2\n]"


def test_summarize_lists_procedures_in_order():
    summary = summarize(build_procedures(REGISTRY))

    assert [s["key"] for s in summary] == [
        "webhookTriggers.list",
        "webhookTriggers.create",
        "rest.getRepository",
        "rest.getLog",
    ]
    assert summary[2]["path"] == "/repositories/{id}"
    assert summary[3]["raw"] is True
