"""
``anyrender.base``: Handler capabilities
========================================

A handler converts a value to bytes in one format family. The only required
capability is :class:`Handler`; :class:`PrettyHandler` and
:class:`FormatsHandler` are optional extras that are detected structurally
(there is no base class to inherit from).

"""
from __future__ import annotations

import typing
from typing import Any, Protocol, TypeGuard

__all__ = (
    "Writer",
    "Handler",
    "PrettyHandler",
    "FormatsHandler",
    "is_pretty",
    "formats_of",
    "render_with",
)


@typing.runtime_checkable
class Writer(Protocol):  # pragma: no cover
    "A binary sink (e.g.: :class:`io.BytesIO` or ``sys.stdout.buffer``)"

    def write(self, b: bytes, /) -> int | None:
        ...


@typing.runtime_checkable
class Handler(Protocol):  # pragma: no cover
    def render(self, w: Writer, v: Any) -> None:
        """Write *v* into *w* in the format supported by the handler.

        Must raise :class:`~anyrender.errors.CannotRenderError` if *v* doesn't
        have the capability the handler requires. Any other exception is
        treated as a genuine failure.
        """
        ...


@typing.runtime_checkable
class PrettyHandler(Protocol):  # pragma: no cover
    def render_pretty(self, w: Writer, v: Any) -> None:
        """Like :meth:`Handler.render` but in a human friendly layout."""
        ...


@typing.runtime_checkable
class FormatsHandler(Protocol):  # pragma: no cover
    def formats(self) -> list[str]:
        """All the format names (aliases included) this handler serves."""
        ...


def is_pretty(handler: Handler) -> TypeGuard[PrettyHandler]:
    return isinstance(handler, PrettyHandler)


def formats_of(handler: Handler) -> list[str]:
    "The formats declared by *handler* (empty if it doesn't declare any)"
    if isinstance(handler, FormatsHandler):
        return list(handler.formats())
    return []


def render_with(handler: Handler, w: Writer, v: Any, pretty: bool) -> None:
    """Render *v* with *handler*, using the pretty variant if asked for and
    available."""
    if pretty and is_pretty(handler):
        handler.render_pretty(w, v)
    else:
        handler.render(w, v)
