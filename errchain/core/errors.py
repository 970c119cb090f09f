"""Decorated errors with arguments and a causal parent.

Instead of packing all context into one string::

    raise RuntimeError(f"my error with id {thing_id}, response {resp!r}; {err}")

attach it to the error::

    raise (
        new_error("my error")
        .set_parent(err)
        .set_argument("thing_id", thing_id)
        .set_argument("response", resp)
    )

``str()`` of the result is ``"my error; <parent>"``; the arguments stay
available for inspection and logging.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from errchain.core.caller import resolve

if TYPE_CHECKING:
    from errchain.core.config import ChainConfig

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "; "


class ChainCycleError(ValueError):
    pass


class ErrorRecord(Exception):
    """An error message plus arguments, an optional parent and its origin."""

    def __init__(self, message: str, *, skip: int = 0) -> None:
        if skip < 0:
            raise ValueError("skip must be >= 0")
        super().__init__(message)
        self._message = message
        self._parent: Optional[BaseException] = None
        self._origin = resolve(skip + 1)
        self.arguments: dict[str, Any] = {}

    @property
    def message(self) -> str:
        return self._message

    @property
    def parent(self) -> Optional[BaseException]:
        return self._parent

    @property
    def origin(self) -> str:
        return self._origin

    def set_argument(self, key: str, value: Any) -> ErrorRecord:
        self.arguments[key] = value
        return self

    def set_parent(self, err: BaseException) -> ErrorRecord:
        """Attach ``err`` as the cause of this error, replacing any previous one.

        Raises ChainCycleError if ``err`` is this error or already has it in
        its chain.
        """
        if not isinstance(err, BaseException):
            raise TypeError(f"parent must be an exception, got {type(err).__name__}")
        if any(link is self for link in chain_as_list(err)):
            raise ChainCycleError(f"attaching parent would create a cycle at {self._origin}")

        self._parent = err
        self.__cause__ = err
        return self

    def render(self, config: Optional[ChainConfig] = None) -> str:
        separator = config.separator if config is not None else DEFAULT_SEPARATOR
        parts: list[str] = []
        link: Optional[BaseException] = self
        while link is not None:
            if isinstance(link, ErrorRecord):
                parts.append(link.message)
                link = link.parent
            else:
                parts.append(str(link))
                link = None
        return separator.join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r}, origin={self._origin!r})"


def new_error(message: str) -> ErrorRecord:
    return ErrorRecord(message, skip=1)


def new_errorf(format: str, *args: Any) -> ErrorRecord:
    """Like new_error() but with a printf-style message (``format % args``)."""
    return ErrorRecord(_format_message(format, args), skip=1)


def is_decorated(err: object) -> bool:
    return isinstance(err, ErrorRecord)


def root_cause(err: Optional[BaseException]) -> Optional[BaseException]:
    """Follow parents of decorated errors down to the innermost cause."""
    while isinstance(err, ErrorRecord) and err.parent is not None:
        err = err.parent
    return err


def chain_as_list(err: Optional[BaseException]) -> list[BaseException]:
    """Return the chain of ``err``, root cause first and ``err`` last."""
    if err is None:
        return []

    out: list[BaseException] = [err]
    while isinstance(err, ErrorRecord) and err.parent is not None:
        err = err.parent
        out.append(err)
    out.reverse()
    return out


def _format_message(format: str, args: tuple[Any, ...]) -> str:
    if not args:
        return format
    try:
        return format % args
    except (TypeError, ValueError, KeyError) as e:
        logger.warning("could not format error message %r: %s", format, e)
        return f"{format} (bad format args: {args!r})"
