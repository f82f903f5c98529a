"""The ``kilo-cloud`` tool as seen by the host agent."""

import json
import logging
from typing import Any, Callable, Optional

import httpx

from shared.rpc import Dispatcher, audit_sink, build_procedures, generate_description, render_error

from .config import audit_db_path, audit_enabled, load_settings, parse_bool
from .endpoints import ENDPOINTS

logger = logging.getLogger(__name__)

TOOL_NAME = "kilo-cloud"

INTRO = """Use this tool to control Kilo Cloud Agents and Webhooks.
All procedures return JSON responses unless marked as raw text.
You can use the params argument to pass parameters to the procedure as a JSON string.
Example: procedure="webhookTriggers.get", params='{"triggerId": "my-trigger"}'"""

PROCEDURES = build_procedures(ENDPOINTS)

DESCRIPTION = generate_description(PROCEDURES, INTRO)

ARGS_SCHEMA = {
    "type": "object",
    "properties": {
        "procedure": {
            "type": "string",
            "description": "Name of the procedure to execute.",
        },
        "params": {
            "type": "string",
            "description": "Parameters to pass to the procedure, as a JSON object string.",
        },
        "raw": {
            "type": "boolean",
            "description": "Return the response body as text with its HTTP status instead of parsing JSON.",
        },
    },
    "required": ["procedure"],
}


def tool_definition() -> dict[str, Any]:
    return {"name": TOOL_NAME, "description": DESCRIPTION, "parameters": ARGS_SCHEMA}


def get_dispatcher(
    client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
    audit: Optional[bool] = None,
) -> Dispatcher:
    """Build a dispatcher over the shared procedure map with current settings."""
    if audit is None:
        audit = audit_enabled(default=False)
    return Dispatcher(
        PROCEDURES,
        load_settings(),
        client_factory=client_factory,
        audit=audit_sink(audit_db_path()) if audit else None,
    )


async def execute(args: dict[str, Any], dispatcher: Optional[Dispatcher] = None) -> str:
    """Entry point invoked by the host agent with ``{procedure, params?, raw?}``."""
    if dispatcher is None:
        try:
            dispatcher = get_dispatcher()
        except Exception as e:
            logger.warning(f"Could not set up kilo-cloud dispatcher: {e}")
            return render_error(e)
    params = args.get("params")
    if isinstance(params, dict):
        params = json.dumps(params)
    return await dispatcher.dispatch(
        str(args.get("procedure", "")),
        params,
        raw=parse_bool(args.get("raw")),
    )
