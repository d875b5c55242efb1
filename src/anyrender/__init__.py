"""Render values to a format picked at runtime.

:mod:`anyrender` is meant for command line tools that let their users choose
how the output should look via a flag (``--format=json``)::

  >>> import io
  >>> r = default_renderer()
  >>> buf = io.BytesIO()
  >>> r.pretty(buf, "json", {"current": "1.2.2", "stable": True})
  >>> print(buf.getvalue().decode(), end="")
  {
    "current": "1.2.2",
    "stable": true
  }
  >>> r.dumps("text", 42)
  b'42'

"""
from __future__ import annotations

from importlib import metadata

from .base import FormatsHandler, Handler, PrettyHandler, Writer
from .defaults import (
    DEFAULT_FORMATS,
    compact,
    default_renderer,
    full_renderer,
    new,
    pretty,
    render,
)
from .errors import (
    CannotRenderError,
    FailedError,
    RenderError,
    UnsupportedFormatError,
)
from .multi import Multi
from .renderer import Renderer

__version__ = metadata.version(__name__)

__all__ = (
    "CannotRenderError",
    "DEFAULT_FORMATS",
    "FailedError",
    "FormatsHandler",
    "Handler",
    "Multi",
    "PrettyHandler",
    "RenderError",
    "Renderer",
    "UnsupportedFormatError",
    "Writer",
    "compact",
    "default_renderer",
    "full_renderer",
    "new",
    "pretty",
    "render",
)
