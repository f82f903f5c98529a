"""Execution of a single procedure as one HTTP request."""

import json
import logging
import re
from typing import Any, Literal, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from .config import ClientSettings
from .errors import MissingCredentialError, ProcedureError, RemoteParseError, TransportError
from .params import Params
from .registry import Procedure

logger = logging.getLogger(__name__)

BODY_EXCERPT_LIMIT = 500

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


class RawResult(BaseModel):
    """Unparsed response body tagged with its HTTP status."""

    raw: Literal[True] = True
    content: str
    status: int


ExecutionResult = Union[RawResult, Any]


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def fill_path(procedure: Procedure, params: Params) -> tuple[str, Params]:
    """Substitute ``{name}`` placeholders and return (path, remaining params)."""
    remaining = dict(params)

    def replace(match: re.Match) -> str:
        name = match.group(1)
        if name not in remaining:
            raise ProcedureError(procedure.key, f"missing path parameter '{name}'")
        value = remaining.pop(name)
        if value is None:
            raise ProcedureError(procedure.key, f"path parameter '{name}' is null")
        return quote(_scalar(value), safe="")

    path = _PLACEHOLDER.sub(replace, procedure.path)
    return path, remaining


def build_request(procedure: Procedure, params: Params, settings: ClientSettings) -> httpx.Request:
    """Build the outbound request for a procedure call."""
    headers = settings.auth_headers()

    if procedure.kind == "rest":
        path, remaining = fill_path(procedure, params)
        url = f"{settings.rest_base_url.rstrip('/')}{path}"
        if procedure.method == "GET":
            query = {k: _scalar(v) for k, v in remaining.items() if v is not None}
            return httpx.Request("GET", url, params=query, headers=headers)
        return httpx.Request(procedure.method, url, content=json.dumps(remaining), headers=headers)

    url = f"{settings.trpc_base_url.rstrip('/')}{procedure.path}"
    if procedure.method == "GET":
        return httpx.Request("GET", url, params={"input": json.dumps(params)}, headers=headers)
    return httpx.Request(procedure.method, url, content=json.dumps(params), headers=headers)


async def execute(
    procedure: Procedure,
    params: Params,
    *,
    settings: ClientSettings,
    client: httpx.AsyncClient,
    raw: bool = False,
    timeout: Optional[float] = None,
) -> ExecutionResult:
    """Issue exactly one HTTP request for ``procedure`` and normalize the result."""
    if not settings.api_key:
        raise MissingCredentialError(procedure.key, settings.api_key_env)

    request = build_request(procedure, params, settings)
    url = str(request.url)
    request.extensions["timeout"] = httpx.Timeout(timeout if timeout is not None else settings.timeout).as_dict()

    try:
        response = await client.send(request)
        body = response.text
    except httpx.HTTPError as e:
        logger.error(f"{procedure.key} request to {url} failed: {e!r}")
        raise TransportError(procedure.key, str(e) or type(e).__name__) from e

    logger.info(f"{procedure.key} -> {response.status_code}")

    if raw or procedure.raw:
        return RawResult(content=body, status=response.status_code)

    try:
        return json.loads(body)
    except ValueError as e:
        logger.warning(f"{procedure.key} returned non-JSON body (status {response.status_code})")
        raise RemoteParseError(
            procedure.key,
            url=url,
            status=response.status_code,
            excerpt=body[:BODY_EXCERPT_LIMIT],
            reason=str(e),
        ) from e
