"""JSON parameter parsing at the dispatcher boundary."""

from typing import Optional

from pydantic import JsonValue, TypeAdapter, ValidationError

from .errors import MalformedParamsError

Params = dict[str, JsonValue]

_params_adapter = TypeAdapter(Params)


def parse_params(raw: Optional[str]) -> Params:
    """Parse a params string into an ordered mapping of JSON values.

    ``None`` or a blank string yields an empty mapping. Anything that is not a
    JSON object raises MalformedParamsError.
    """
    if raw is None or not raw.strip():
        return {}
    try:
        return _params_adapter.validate_json(raw)
    except ValidationError as e:
        detail = e.errors()[0]["msg"] if e.errors() else str(e)
        raise MalformedParamsError(f"Could not parse params {raw!r}: {detail}") from e
