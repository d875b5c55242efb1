"""
``anyrender.handlers.text``: Plain text
=======================================

:class:`Text` renders a value as text without requiring it to implement one
specific interface. Values are matched against :data:`PRECEDENCE`, in order,
and the first entry that matches writes the value out:

+ ``bytes``: :class:`bytes`, :class:`bytearray` and :class:`memoryview` are
  written verbatim.
+ ``chars``: a sequence of characters (an :class:`array.array` of unicode
  characters, or a non empty list/tuple of one character strings).
+ ``str``: written as utf-8.
+ ``scalar``: :class:`bool` (``true``/``false``), :class:`int` and
  :class:`float`.
+ ``reader``: anything with a ``read`` method, drained until exhaustion.
+ ``writer_to``: anything with a ``write_to(w)`` method.
+ ``stringer``: instances of a class that defines its own ``__str__``.
+ ``error``: exceptions are rendered as their message.

  >>> import io
  >>> buf = io.BytesIO()
  >>> Text().render(buf, [1.5, "x"])
  Traceback (most recent call last):
    ...
  anyrender.errors.CannotRenderError: cannot render: list

A failure inside of a matching entry is reported as-is: the following entries
are not tried.

"""
from __future__ import annotations

import array
from typing import Any, Callable, Final, NamedTuple

from anyrender import errors
from anyrender.base import Writer

__all__ = ("Text", "PRECEDENCE", "CHUNK_SIZE", "has_custom_str")

#: Size of the reads when draining a stream
CHUNK_SIZE: Final = 64 * 1024

_UNICODE_TYPECODES: Final = frozenset(("u", "w"))


class Rule(NamedTuple):
    name: str
    matches: Callable[[Any], bool]
    write: Callable[[Writer, Any], None]


def has_custom_str(v: Any) -> bool:
    "Does the class of *v* define its own ``__str__``?"
    method = type(v).__str__
    return method is not object.__str__ and method is not BaseException.__str__


def _is_chars(v: Any) -> bool:
    if isinstance(v, array.array):
        return v.typecode in _UNICODE_TYPECODES
    if isinstance(v, list | tuple) and v:
        return all(isinstance(c, str) and len(c) == 1 for c in v)
    return False


def _is_scalar(v: Any) -> bool:
    return isinstance(v, bool | int | float)


def _is_reader(v: Any) -> bool:
    if isinstance(v, type):
        return False
    return callable(getattr(v, "read", None))


def _is_writer_to(v: Any) -> bool:
    if isinstance(v, type):
        return False
    return callable(getattr(v, "write_to", None))


def _write_bytes(w: Writer, v: bytes | bytearray | memoryview) -> None:
    w.write(bytes(v))


def _write_chars(w: Writer, v: Any) -> None:
    if isinstance(v, array.array):
        s = v.tounicode()
    else:
        s = "".join(v)
    w.write(s.encode("utf-8"))


def _write_str(w: Writer, v: str) -> None:
    w.write(v.encode("utf-8"))


def format_scalar(v: bool | int | float) -> str:
    """The textual representation of a number or a boolean.

    >>> [format_scalar(x) for x in (False, 42, 3.14159, 1e21)]
    ['false', '42', '3.14159', '1e+21']
    """
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, int):
        return int.__repr__(v)
    return float.__repr__(v)


def _write_scalar(w: Writer, v: bool | int | float) -> None:
    w.write(format_scalar(v).encode("ascii"))


def _write_reader(w: Writer, v: Any) -> None:
    while True:
        chunk = v.read(CHUNK_SIZE)
        if not chunk:
            return
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        w.write(chunk)


def _write_writer_to(w: Writer, v: Any) -> None:
    v.write_to(w)


def _write_stringer(w: Writer, v: Any) -> None:
    w.write(str(v).encode("utf-8"))


#: The checks performed by :class:`Text`, in order of precedence.
PRECEDENCE: Final[tuple[Rule, ...]] = (
    Rule(
        "bytes",
        lambda v: isinstance(v, bytes | bytearray | memoryview),
        _write_bytes,
    ),
    Rule("chars", _is_chars, _write_chars),
    Rule("str", lambda v: isinstance(v, str), _write_str),
    Rule("scalar", _is_scalar, _write_scalar),
    Rule("reader", _is_reader, _write_reader),
    Rule("writer_to", _is_writer_to, _write_writer_to),
    Rule("stringer", has_custom_str, _write_stringer),
    Rule(
        "error", lambda v: isinstance(v, BaseException), _write_stringer
    ),
)


class Text:
    "Renders values as plain text"

    def render(self, w: Writer, v: Any) -> None:
        for rule in PRECEDENCE:
            if rule.matches(v):
                break
        else:
            raise errors.cannot_render(v)
        try:
            rule.write(w, v)
        except Exception as e:
            raise errors.failed(e) from e

    def formats(self) -> list[str]:
        return ["text", "txt", "plain"]

    def __repr__(self) -> str:
        return "Text()"
