"""
``anyrender.handlers.writer_to``: Self-writing values
=====================================================
"""
from __future__ import annotations

import typing
from typing import Any, Protocol

from anyrender import errors
from anyrender.base import Writer

__all__ = ("SupportsWriteTo", "WriterTo")


@typing.runtime_checkable
class SupportsWriteTo(Protocol):  # pragma: no cover
    def write_to(self, w: Writer) -> int:
        "Write the value to *w*, returns the number of bytes written."
        ...


class WriterTo:
    """Renders values that know how to write themselves out.

      >>> import io
      >>> class Greeting:
      ...   def write_to(self, w):
      ...     return w.write(b"hello")
      >>> buf = io.BytesIO()
      >>> WriterTo().render(buf, Greeting())
      >>> buf.getvalue()
      b'hello'
    """

    def render(self, w: Writer, v: Any) -> None:
        if not isinstance(v, SupportsWriteTo):
            raise errors.cannot_render(v)
        try:
            v.write_to(w)
        except Exception as e:
            raise errors.failed(e) from e

    def __repr__(self) -> str:
        return "WriterTo()"
