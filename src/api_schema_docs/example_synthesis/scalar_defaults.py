"""Type-driven placeholder values for scalars without authored examples."""

from __future__ import annotations

from typing import Any

UNTYPED_PLACEHOLDER = "untyped"

SCALAR_DEFAULTS: dict[str, Any] = {
    "integer": 0,
    "number": 0.0,
    "boolean": True,
    "string": "string",
}


def synthesize_scalar(kind: str | None) -> Any:
    """Return the placeholder for a scalar kind.

    integer -> 0, number -> 0.0, boolean -> True, string -> "string"; formats
    and enumerations do not change the placeholder and any other kind yields
    its own name.
    """
    if kind is None:
        return UNTYPED_PLACEHOLDER
    return SCALAR_DEFAULTS.get(kind, kind)
