"""Registry-driven RPC dispatch shared by agent tools."""

from .config import ClientSettings
from .registry import EndpointDescriptor, Procedure, build_procedures, make_procedure, resolve, summarize
from .procedure import RawResult, execute
from .dispatcher import Dispatcher, render_error, render_result
from .skill import generate_description, generate_skill_markdown
from .audit import audit_sink, init_audit_db, log_request, get_recent_logs
from .errors import (
    ConfigurationError,
    DuplicateProcedureError,
    MalformedParamsError,
    MissingCredentialError,
    ProcedureError,
    ProcedureNotFoundError,
    RemoteParseError,
    RpcError,
    TransportError,
)

__all__ = [
    "ConfigurationError",
    "ClientSettings",
    "EndpointDescriptor",
    "Procedure",
    "build_procedures",
    "make_procedure",
    "resolve",
    "RawResult",
    "execute",
    "Dispatcher",
    "render_error",
    "render_result",
    "summarize",
    "generate_description",
    "generate_skill_markdown",
    "audit_sink",
    "init_audit_db",
    "log_request",
    "get_recent_logs",
    "DuplicateProcedureError",
    "MalformedParamsError",
    "MissingCredentialError",
    "ProcedureError",
    "ProcedureNotFoundError",
    "RemoteParseError",
    "RpcError",
    "TransportError",
]
