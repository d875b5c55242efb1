"""
``anyrender.handlers.stringer``: ``__str__`` based rendering
============================================================
"""
from __future__ import annotations

from typing import Any

from anyrender import errors
from anyrender.base import Writer

from .text import has_custom_str

__all__ = ("Stringer",)


class Stringer:
    """Renders instances of classes that define their own ``__str__``.

    Classes relying on :meth:`object.__str__` (which just calls
    :func:`repr`) are rejected with
    :class:`~anyrender.errors.CannotRenderError`.
    """

    def render(self, w: Writer, v: Any) -> None:
        if not has_custom_str(v):
            raise errors.cannot_render(v)
        try:
            w.write(str(v).encode("utf-8"))
        except Exception as e:
            raise errors.failed(e) from e

    def __repr__(self) -> str:
        return "Stringer()"
