"""Kilo Cloud tool gateway API."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from shared.rpc import RpcError, generate_skill_markdown, init_audit_db, render_error, summarize
from kilo_cloud.config import audit_db_path, audit_enabled
from kilo_cloud.tool import DESCRIPTION, PROCEDURES, TOOL_NAME, get_dispatcher


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize the audit database on startup."""
    if audit_enabled(default=True):
        await init_audit_db(audit_db_path())
    yield


app = FastAPI(
    title="Kilo Cloud Gateway",
    description="Dispatches agent tool calls to the Kilo Cloud API",
    version="0.1.0",
    lifespan=lifespan,
)


class DispatchRequest(BaseModel):
    procedure: str
    params: Optional[str] = None
    raw: bool = False
    timeout: Optional[float] = None


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/description", response_class=PlainTextResponse)
async def get_description():
    """Return the tool self-description."""
    return DESCRIPTION


@app.get("/api/skill", response_class=PlainTextResponse)
async def get_skill():
    """Return auto-generated skill markdown."""
    return generate_skill_markdown(
        PROCEDURES,
        name=TOOL_NAME,
        description="Control Kilo Cloud agents, sessions and webhooks",
    )


@app.get("/api/procedures")
async def list_procedures():
    """List every known procedure."""
    return summarize(PROCEDURES)


@app.post("/api/dispatch", response_class=PlainTextResponse)
async def dispatch(req: DispatchRequest):
    """Dispatch one procedure; errors are returned in-band as JSON text."""
    try:
        dispatcher = get_dispatcher(audit=audit_enabled(default=True))
    except RpcError as e:
        return render_error(e)
    return await dispatcher.dispatch(
        req.procedure,
        req.params,
        raw=req.raw,
        timeout=req.timeout,
    )
