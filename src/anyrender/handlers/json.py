"""
``anyrender.handlers.json``: JSON
=================================

JSON encoding is delegated to :mod:`msgspec.json`, which handles the builtin
containers as well as dataclasses, :class:`msgspec.Struct`, enums, datetimes...

  >>> import io
  >>> buf = io.BytesIO()
  >>> JSON().render_pretty(buf, {"age": 30})
  >>> print(buf.getvalue().decode(), end="")
  {
    "age": 30
  }

"""
from __future__ import annotations

from typing import Any, Callable, Final, Literal

import msgspec

from anyrender import errors
from anyrender.base import Writer

__all__ = ("JSON", "JSON_DEFAULT_INDENT")

#: Indentation used when pretty printing
JSON_DEFAULT_INDENT: Final = 2

Order = Literal["deterministic", "sorted"] | None


class JSON:
    """Marshals values to JSON.

    The output always ends with a newline.

    Args:
      indent: Number of spaces per indentation level in the pretty output.
      order: Passed to :class:`msgspec.json.Encoder`; ``"sorted"`` sorts the
        keys of the mappings and the fields of the objects.
      enc_hook: Called on objects msgspec doesn't know how to encode.
    """

    indent: int
    encoder: msgspec.json.Encoder

    def __init__(
        self,
        indent: int = JSON_DEFAULT_INDENT,
        order: Order = None,
        enc_hook: Callable[[Any], Any] | None = None,
    ) -> None:
        self.indent = indent
        self.encoder = msgspec.json.Encoder(enc_hook=enc_hook, order=order)

    def _write(self, w: Writer, v: Any, pretty: bool) -> None:
        try:
            data = self.encoder.encode(v)
            if pretty:
                data = msgspec.json.format(data, indent=self.indent)
            w.write(data + b"\n")
        except Exception as e:
            raise errors.failed(e) from e

    def render(self, w: Writer, v: Any) -> None:
        self._write(w, v, pretty=False)

    def render_pretty(self, w: Writer, v: Any) -> None:
        self._write(w, v, pretty=True)

    def formats(self) -> list[str]:
        return ["json"]

    def __repr__(self) -> str:
        return f"JSON(indent={self.indent!r})"
