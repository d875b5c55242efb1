"""
``anyrender.handlers.bin``: Raw binary
======================================

Values opt into binary rendering by implementing :meth:`object.__bytes__`.
"""
from __future__ import annotations

from typing import Any

from anyrender import errors
from anyrender.base import Writer

__all__ = ("Binary",)


class Binary:
    "Writes out the result of ``bytes(v)``"

    def render(self, w: Writer, v: Any) -> None:
        if getattr(type(v), "__bytes__", None) is None:
            raise errors.cannot_render(v)
        try:
            data = bytes(v)
            w.write(data)
        except Exception as e:
            raise errors.failed(e) from e

    def formats(self) -> list[str]:
        return ["binary", "bin"]

    def __repr__(self) -> str:
        return "Binary()"
