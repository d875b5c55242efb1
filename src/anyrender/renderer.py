"""
``anyrender.renderer``: Format dispatch
=======================================

A :class:`Renderer` maps format names to handlers and picks the handler to use
based on a format string (typically coming from a command line flag)::

  >>> import io
  >>> from anyrender.handlers import JSON, YAML
  >>> r = Renderer({"json": JSON(), "yaml": YAML()})
  >>> r.formats()
  ['json', 'yaml', 'yml']
  >>> r.dumps("JSON", {"age": 30})
  b'{"age":30}\\n'
  >>> r.dumps("toml", {"age": 30})
  Traceback (most recent call last):
    ...
  anyrender.errors.UnsupportedFormatError: unsupported format: toml

Format names are case insensitive. Handlers that declare aliases (via a
``formats`` method) are also registered under all of their aliases.

A :class:`Renderer` should be fully built before it's shared: :meth:`add`
isn't safe to call while other threads are rendering.
"""
from __future__ import annotations

import io
import logging
import types
from typing import Any, Iterable, Mapping

from anyrender import base, errors
from anyrender.base import Handler, Writer

__all__ = ("Renderer",)

logger = logging.getLogger(__name__)

HandlerSource = Mapping[str, Handler] | Iterable[tuple[str, Handler]]


class Renderer:
    """Renders values to the format given by name.

    Args:
      handlers: The handlers to register, either as a mapping or as a
        sequence of ``(format, handler)`` pairs. They are registered in order
        via :meth:`add`.
    """

    _handlers: dict[str, Handler]

    def __init__(self, handlers: HandlerSource | None = None) -> None:
        self._handlers = {}
        if handlers is None:
            return
        if isinstance(handlers, Mapping):
            handlers = handlers.items()
        for format, handler in handlers:
            self.add(format, handler)

    @property
    def handlers(self) -> Mapping[str, Handler]:
        "Read-only view of the format to handler mapping"
        return types.MappingProxyType(self._handlers)

    def add(self, format: str, handler: Handler) -> None:
        """Register *handler* under *format* and under all of its aliases.

        An empty *format* registers the handler under its aliases only. If a
        name was already taken the new handler replaces the old one.
        """
        if format:
            logger.debug("registering %r as %r", handler, format.lower())
            self._handlers[format.lower()] = handler
        for alias in base.formats_of(handler):
            if alias and alias != format:
                logger.debug("registering %r as %r", handler, alias.lower())
                self._handlers[alias.lower()] = handler

    def formats(self) -> list[str]:
        "All the registered format names, sorted"
        return sorted(self._handlers)

    def __contains__(self, format: object) -> bool:
        return isinstance(format, str) and format.lower() in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def render(self, w: Writer, format: str, pretty: bool, v: Any) -> None:
        """Render *v* into *w* using the handler registered for *format*.

        If *pretty* is set and the handler has a ``render_pretty`` method it
        is used instead of ``render``.

        Raises:
          UnsupportedFormatError: *format* isn't registered or its handler
            can't render *v*.
          FailedError: the handler accepted *v* but couldn't render it.
        """
        handler = self._handlers.get(format.lower())
        if handler is None:
            raise errors.UnsupportedFormatError(format)
        logger.debug("rendering %s with %r", format, handler)
        try:
            base.render_with(handler, w, v, pretty)
        except errors.CannotRenderError as e:
            raise errors.UnsupportedFormatError(format) from e
        except errors.FailedError:
            raise
        except Exception as e:
            raise errors.failed(e) from e

    def compact(self, w: Writer, format: str, v: Any) -> None:
        "Same as :meth:`render` with *pretty* unset"
        self.render(w, format, False, v)

    def pretty(self, w: Writer, format: str, v: Any) -> None:
        "Same as :meth:`render` with *pretty* set"
        self.render(w, format, True, v)

    def dumps(self, format: str, v: Any, pretty: bool = False) -> bytes:
        "Render *v* to :class:`bytes`"
        buf = io.BytesIO()
        self.render(buf, format, pretty, v)
        return buf.getvalue()

    def new_with(self, *formats: str) -> Renderer:
        """A new renderer restricted to *formats*.

        Only the names listed are kept (aliases are not added back) and names
        that aren't registered are silently dropped::

          >>> from anyrender.handlers import JSON, YAML
          >>> r = Renderer({"json": JSON(), "yaml": YAML()})
          >>> r.new_with("yml", "toml").formats()
          ['yml']
        """
        res = Renderer()
        for format in formats:
            key = format.lower()
            handler = self._handlers.get(key)
            if handler is not None:
                res._handlers[key] = handler
        return res

    def __repr__(self) -> str:
        return f"Renderer(formats={self.formats()!r})"
