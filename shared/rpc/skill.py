"""Tool description and skill generation from the procedure map."""

from itertools import groupby
from typing import Mapping

from .registry import Procedure


def _line(proc: Procedure) -> str:
    if proc.kind == "rest":
        line = f"- {proc.key} ({proc.method} {proc.path}): {proc.description}"
    else:
        line = f"- {proc.key}: {proc.description}"
    if proc.raw:
        line += " (returns raw text)"
    return line


def generate_description(procedures: Mapping[str, Procedure], intro: str) -> str:
    """
    Render every procedure into the tool's self-description.

    tRPC procedures are grouped by namespace in declaration order. REST
    endpoints follow in their own section, each shown with its method and path
    template next to the key used to call it.
    """
    trpc = [p for p in procedures.values() if p.kind == "trpc"]
    rest = [p for p in procedures.values() if p.kind == "rest"]

    lines = [intro.rstrip(), "", "Available procedures:"]
    for namespace, group in groupby(trpc, key=lambda p: p.namespace):
        lines.append("")
        lines.append(f"## {namespace}")
        lines.extend(_line(proc) for proc in group)

    if rest:
        lines.append("")
        lines.append("## REST endpoints")
        lines.extend(_line(proc) for proc in rest)

    return "\n".join(lines) + "\n"


def generate_skill_markdown(
    procedures: Mapping[str, Procedure],
    name: str,
    description: str,
    api_key_env: str = "KILO_API_KEY",
) -> str:
    """
    Generate skill markdown from the procedure map.

    Args:
        procedures: Procedure map built from the registry
        name: Skill name (e.g., "kilo-cloud")
        description: Skill description
        api_key_env: Environment variable holding the bearer token

    Returns:
        Markdown string for SKILL.md
    """
    lines = [
        "---",
        f"name: {name}",
        f"description: {description}",
        f'metadata: {{"kilo": {{"requires": {{"env": ["{api_key_env}"]}}}}}}',
        "---",
        "",
        f"# {name.replace('-', ' ').title()}",
        "",
        f"Credential: ${{{api_key_env}}}",
        "",
    ]

    for proc in procedures.values():
        lines.append(f"## {proc.key}")
        lines.append(f"`{proc.method} {proc.path}`")
        lines.append(proc.descriptor.description)
        lines.append("")

        if proc.descriptor.params:
            lines.append(f"**Params:** {proc.descriptor.params}")
            lines.append("")

        if proc.raw:
            lines.append("Returns raw text with the HTTP status.")
            lines.append("")

    return "\n".join(lines)
