"""Structured views of an error chain for logs and debugging output."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from errchain.core.config import DEFAULT_CONFIG, ChainConfig
from errchain.core.errors import ErrorRecord, chain_as_list


@dataclass(frozen=True)
class LinkInfo:
    message: str
    origin: Optional[str]
    arguments: dict[str, Any]
    decorated: bool


def describe_chain(err: Optional[BaseException], config: Optional[ChainConfig] = None) -> list[LinkInfo]:
    """One LinkInfo per link, root cause first."""
    cfg = config or DEFAULT_CONFIG
    out: list[LinkInfo] = []
    for link in chain_as_list(err):
        if isinstance(link, ErrorRecord):
            out.append(
                LinkInfo(
                    message=link.message,
                    origin=link.origin if cfg.include_origin else None,
                    arguments=dict(link.arguments) if cfg.include_arguments else {},
                    decorated=True,
                )
            )
        else:
            out.append(LinkInfo(message=str(link), origin=None, arguments={}, decorated=False))
    return out


def merged_arguments(err: Optional[BaseException]) -> dict[str, Any]:
    """Arguments of every link in the chain; outer links win on key clashes."""
    merged: dict[str, Any] = {}
    for link in chain_as_list(err):
        if isinstance(link, ErrorRecord):
            merged.update(link.arguments)
    return merged


def format_chain(err: Optional[BaseException], config: Optional[ChainConfig] = None) -> str:
    """Multi-line report, outermost error first.

    Example:
      operation update failed [app/service.py:42] id=42
      low-level failure [app/db.py:10]
    """
    lines: list[str] = []
    for info in reversed(describe_chain(err, config)):
        parts = [info.message]
        if info.origin:
            parts.append(f"[{info.origin}]")
        for k in sorted(info.arguments):
            parts.append(f"{k}={info.arguments[k]!r}")
        lines.append(" ".join(parts))
    return "\n".join(lines)


def log_error(
    logger: logging.Logger,
    err: BaseException,
    level: int = logging.ERROR,
    config: Optional[ChainConfig] = None,
) -> None:
    """Log the one-line rendering of ``err`` with its chain attached as ``extra``.

    Handlers and formatters can read ``record.error_origin``,
    ``record.error_arguments`` and ``record.error_chain``. ``error_origin``
    is the origin of ``err`` itself (the outermost link, None for a plain
    exception); the origins of inner links are only in ``error_chain``.
    ``error_arguments`` merges the arguments of every link.
    """
    cfg = config or DEFAULT_CONFIG
    if isinstance(err, ErrorRecord):
        text = err.render(cfg)
        origin: Optional[str] = err.origin
    else:
        text = str(err)
        origin = None

    extra = {
        "error_origin": origin,
        "error_arguments": merged_arguments(err) if cfg.include_arguments else {},
        "error_chain": describe_chain(err, cfg),
    }
    logger.log(level, "%s", text, extra=extra)
