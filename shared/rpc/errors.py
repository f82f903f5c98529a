"""Error types raised by the procedure framework."""

from typing import Optional


class RpcError(Exception):
    """Base class for every failure the dispatcher normalizes."""


class ProcedureNotFoundError(RpcError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Procedure {key} not found.")


class MalformedParamsError(RpcError):
    """Parameters string is not a JSON object."""


class ConfigurationError(RpcError):
    """A setting could not be read from its source."""


class DuplicateProcedureError(RpcError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Procedure {key} is declared more than once.")


class ProcedureError(RpcError):
    """A failure while executing one procedure, annotated with its key."""

    def __init__(self, procedure: str, message: str):
        self.procedure = procedure
        self.cause = message
        super().__init__(f"Procedure {procedure} failed: {message}")


class TransportError(ProcedureError):
    """The outbound HTTP request could not complete."""


class MissingCredentialError(ProcedureError):
    def __init__(self, procedure: str, env_var: str = "KILO_API_KEY"):
        super().__init__(procedure, f"{env_var} is not set")


class RemoteParseError(ProcedureError):
    """The response completed but its body is not JSON."""

    def __init__(self, procedure: str, url: str, status: int, excerpt: str, reason: Optional[str] = None):
        self.url = url
        self.status = status
        self.excerpt = excerpt
        message = f"invalid JSON response from {url} (status {status})"
        if reason:
            message += f": {reason}"
        message += f". Body: {excerpt}"
        super().__init__(procedure, message)
