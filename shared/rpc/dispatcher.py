"""Single host-facing entry point that resolves, executes and renders procedures."""

import json
import logging
import traceback
from typing import Awaitable, Callable, Mapping, Optional

import httpx

from .config import ClientSettings
from .errors import RemoteParseError
from .params import parse_params
from .procedure import ExecutionResult, RawResult, execute
from .registry import Procedure, resolve

logger = logging.getLogger(__name__)

AuditSink = Callable[..., Awaitable[None]]


def render_result(result: ExecutionResult) -> str:
    """Render an execution result as the text handed back to the agent."""
    if isinstance(result, RawResult):
        return f"Status: {result.status}\n\n{result.content}"
    return json.dumps(result, indent=2, ensure_ascii=False)


def render_error(exc: BaseException) -> str:
    payload = {
        "error": True,
        "message": str(exc),
        "stack": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


class Dispatcher:
    """Resolve procedure keys against an immutable map and execute them.

    ``run`` raises typed errors; ``dispatch`` never raises (except for task
    cancellation) and always returns renderable text.
    """

    def __init__(
        self,
        procedures: Mapping[str, Procedure],
        settings: ClientSettings,
        client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
        audit: Optional[AuditSink] = None,
    ):
        self.procedures = procedures
        self.settings = settings
        self._client_factory = client_factory or (lambda: httpx.AsyncClient(timeout=settings.timeout))
        self._audit = audit

    async def run(
        self,
        key: str,
        params: Optional[str] = None,
        *,
        raw: bool = False,
        timeout: Optional[float] = None,
    ) -> ExecutionResult:
        procedure = resolve(self.procedures, key)
        parsed = parse_params(params)
        async with self._client_factory() as client:
            return await execute(
                procedure,
                parsed,
                settings=self.settings,
                client=client,
                raw=raw,
                timeout=timeout,
            )

    async def dispatch(
        self,
        key: str,
        params: Optional[str] = None,
        *,
        raw: bool = False,
        timeout: Optional[float] = None,
    ) -> str:
        status_code: Optional[int] = None
        error: Optional[str] = None
        try:
            result = await self.run(key, params, raw=raw, timeout=timeout)
            if isinstance(result, RawResult):
                status_code = result.status
            output = render_result(result)
        except Exception as e:
            if isinstance(e, RemoteParseError):
                status_code = e.status
            error = str(e)
            logger.warning(f"Dispatch of {key} failed: {e}")
            output = render_error(e)

        if self._audit is not None:
            await self._record(key, params, status_code, error)
        return output

    async def _record(self, key: str, params: Optional[str], status_code: Optional[int], error: Optional[str]) -> None:
        procedure = self.procedures.get(key)
        method = procedure.method if procedure else "UNKNOWN"
        try:
            await self._audit(key, method, params or "", status_code, error)
        except Exception as e:
            logger.error(f"Audit logging failed for {key}: {e}")

