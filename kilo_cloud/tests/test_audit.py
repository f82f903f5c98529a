"""Tests for audit logging."""

import pytest

from shared.rpc.audit import audit_sink, get_recent_logs, init_audit_db, log_request


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "audit" / "calls.db"


@pytest.mark.asyncio
async def test_log_request_creates_entry(db_path):
    """log_request should create audit log entry."""
    await init_audit_db(db_path)

    await log_request(
        db_path,
        procedure="webhookTriggers.get",
        method="GET",
        params='{"triggerId": "t"}',
        status_code=None,
    )

    logs = await get_recent_logs(db_path, limit=10)
    assert len(logs) == 1
    assert logs[0]["procedure"] == "webhookTriggers.get"
    assert logs[0]["method"] == "GET"
    assert logs[0]["params"] == '{"triggerId": "t"}'
    assert logs[0]["status_code"] is None
    assert logs[0]["error"] is None


@pytest.mark.asyncio
async def test_log_request_with_error(db_path):
    """log_request should store error message."""
    await init_audit_db(db_path)

    await log_request(db_path, "test.hello", "GET", "", 502, error="invalid JSON response")

    logs = await get_recent_logs(db_path, limit=10)
    assert logs[0]["error"] == "invalid JSON response"
    assert logs[0]["status_code"] == 502


@pytest.mark.asyncio
async def test_get_recent_logs_ordered_by_newest(db_path):
    """get_recent_logs should return newest first."""
    await init_audit_db(db_path)

    await log_request(db_path, "a.first", "GET", "", 200)
    await log_request(db_path, "a.second", "GET", "", 200)
    await log_request(db_path, "a.third", "GET", "", 200)

    logs = await get_recent_logs(db_path, limit=2)
    assert [log["procedure"] for log in logs] == ["a.third", "a.second"]


@pytest.mark.asyncio
async def test_audit_sink_binds_database_path(db_path):
    """The sink should accept the dispatcher's positional call shape."""
    await init_audit_db(db_path)
    sink = audit_sink(db_path)

    await sink("rest.getRepository", "GET", '{"id": "42"}', 200, None)

    logs = await get_recent_logs(db_path)
    assert logs[0]["procedure"] == "rest.getRepository"
    assert logs[0]["status_code"] == 200
