from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass(frozen=True)
class ChainConfig:
    separator: str = "; "
    # Only used by errchain.core.report.
    include_arguments: bool = True
    include_origin: bool = True


DEFAULT_CONFIG = ChainConfig()

_FIELD_TYPES: dict[str, type] = {
    "separator": str,
    "include_arguments": bool,
    "include_origin": bool,
}


class ChainConfigError(ValueError):
    pass


def validate_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(ChainConfig)}
    out: dict[str, Any] = {}
    for k, v in raw.items():
        if k not in known:
            raise ChainConfigError(f"unknown config option '{k}'")
        expected = _FIELD_TYPES[k]
        if not isinstance(v, expected):
            raise ChainConfigError(f"config option '{k}' must be of type {expected.__name__}")
        if k == "separator" and not v:
            raise ChainConfigError("separator must be a non-empty string")
        out[k] = v
    return out


def merged_config(overrides: dict[str, Any] | None = None) -> ChainConfig:
    """Return DEFAULT_CONFIG with the given overrides applied.

    Overrides replace the option of the same name; unknown options, wrong
    types and an empty separator raise ChainConfigError.
    """
    if not overrides:
        return DEFAULT_CONFIG
    return replace(DEFAULT_CONFIG, **validate_overrides(overrides))
