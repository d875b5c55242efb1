"""
``anyrender.multi``: Fallback composition
=========================================

:class:`Multi` is a handler built out of other handlers. It tries them in
order and the first one that accepts the value wins::

  >>> import io
  >>> from anyrender.handlers import Binary, Stringer
  >>> class Version:
  ...   def __str__(self):
  ...     return "v1.2.3"
  >>> buf = io.BytesIO()
  >>> Multi(Binary(), Stringer()).render(buf, Version())
  >>> buf.getvalue()
  b'v1.2.3'

A handler that raises :class:`~anyrender.errors.CannotRenderError` is skipped.
Any other error stops the search: a handler that accepted a value is
authoritative, even when it fails.
"""
from __future__ import annotations

import logging
from typing import Any

from anyrender import base, errors
from anyrender.base import Handler, Writer

__all__ = ("Multi",)

logger = logging.getLogger(__name__)


class Multi:
    """Tries several handlers in order until one of them succeeds."""

    handlers: tuple[Handler, ...]

    def __init__(self, *handlers: Handler) -> None:
        self.handlers = handlers

    def _render(self, w: Writer, v: Any, pretty: bool) -> None:
        for handler in self.handlers:
            try:
                base.render_with(handler, w, v, pretty)
            except errors.CannotRenderError as e:
                logger.debug("%r skipped: %s", handler, e)
                continue
            return
        raise errors.cannot_render(v)

    def render(self, w: Writer, v: Any) -> None:
        self._render(w, v, pretty=False)

    def render_pretty(self, w: Writer, v: Any) -> None:
        """Like :meth:`render` but uses the ``render_pretty`` method of the
        handlers that have one."""
        self._render(w, v, pretty=True)

    def formats(self) -> list[str]:
        """All the formats declared by the handlers, in first-seen order.

          >>> from anyrender.handlers import Text, YAML
          >>> Multi(YAML(), Text(), YAML()).formats()
          ['yaml', 'yml', 'text', 'txt', 'plain']
        """
        seen = dict[str, None]()
        for handler in self.handlers:
            for fmt in base.formats_of(handler):
                seen.setdefault(fmt, None)
        return list(seen)

    def __repr__(self) -> str:
        return f"Multi({', '.join(repr(h) for h in self.handlers)})"
