"""Endpoint registry and the procedure map derived from it."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Sequence

from .errors import DuplicateProcedureError, ProcedureNotFoundError

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")


@dataclass(frozen=True)
class EndpointDescriptor:
    """Metadata for one remote operation.

    Descriptors without a ``path`` are tRPC procedures addressed as
    ``<namespace>.<name>``. Descriptors with a ``path`` are REST endpoints;
    the path may contain ``{param}`` placeholders.
    """

    name: str
    method: str
    description: str
    params: Optional[str] = None
    raw: bool = False
    path: Optional[str] = None

    def __post_init__(self):
        if self.method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method {self.method!r} for {self.name}")
        if self.path is not None and not self.path.startswith("/"):
            raise ValueError(f"REST path for {self.name} must start with '/'")

    @property
    def kind(self) -> str:
        return "rest" if self.path is not None else "trpc"


Registry = Mapping[str, Sequence[EndpointDescriptor]]


@dataclass(frozen=True)
class Procedure:
    """Call shape derived from a descriptor; executed by ``procedure.execute``."""

    key: str
    namespace: str
    kind: str
    method: str
    path: str
    description: str
    raw: bool
    descriptor: EndpointDescriptor


def procedure_key(namespace: str, descriptor: EndpointDescriptor) -> str:
    return f"{namespace}.{descriptor.name}"


def make_procedure(namespace: str, descriptor: EndpointDescriptor) -> Procedure:
    """Build the Procedure for one descriptor."""
    if descriptor.kind == "rest":
        path = descriptor.path
    else:
        path = f"/{namespace}.{descriptor.name}"

    description = descriptor.description
    if descriptor.params:
        description = f"{description} Parameters: {descriptor.params}"

    return Procedure(
        key=procedure_key(namespace, descriptor),
        namespace=namespace,
        kind=descriptor.kind,
        method=descriptor.method,
        path=path,
        description=description,
        raw=descriptor.raw,
        descriptor=descriptor,
    )


def iter_descriptors(registry: Registry) -> Iterator[tuple[str, EndpointDescriptor]]:
    """Yield (namespace, descriptor) pairs in declaration order."""
    for namespace, descriptors in registry.items():
        for descriptor in descriptors:
            yield namespace, descriptor


def build_procedures(registry: Registry) -> Mapping[str, Procedure]:
    """Build the read-only key -> Procedure map, rejecting duplicate keys."""
    procedures: dict[str, Procedure] = {}
    for namespace, descriptor in iter_descriptors(registry):
        proc = make_procedure(namespace, descriptor)
        if proc.key in procedures:
            raise DuplicateProcedureError(proc.key)
        procedures[proc.key] = proc
    return MappingProxyType(procedures)


def resolve(procedures: Mapping[str, Procedure], key: str) -> Procedure:
    try:
        return procedures[key]
    except KeyError:
        raise ProcedureNotFoundError(key) from None


def summarize(procedures: Mapping[str, Procedure]) -> list[dict[str, Any]]:
    """Machine-readable listing of procedures in declaration order."""
    return [
        {
            "key": proc.key,
            "kind": proc.kind,
            "method": proc.method,
            "path": proc.path,
            "description": proc.description,
            "raw": proc.raw,
        }
        for proc in procedures.values()
    ]
