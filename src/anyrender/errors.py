"""
``anyrender.errors``: Error classification
==========================================

Every error raised by :mod:`anyrender` derives from :class:`RenderError`. The
three subclasses tell apart the failure modes a caller (or a composing
handler) needs to react to differently:

+ :class:`CannotRenderError`: a handler doesn't know how to handle a value.
  Composing handlers use it to move on to their next candidate.
+ :class:`FailedError`: a handler accepted the value but encoding or writing
  it failed.
+ :class:`UnsupportedFormatError`: the format isn't registered, or it cannot
  express the value.

"""
from __future__ import annotations

from typing import Any

__all__ = (
    "RenderError",
    "FailedError",
    "CannotRenderError",
    "UnsupportedFormatError",
    "cannot_render",
    "failed",
)


class RenderError(Exception):
    "Base class for all the errors raised by anyrender"


class FailedError(RenderError):
    """A handler accepted a value but couldn't write it out.

    The underlying exception is available as ``__cause__``::

      >>> err = OSError("disk full")
      >>> try:
      ...   raise failed(err) from err
      ... except FailedError as e:
      ...   print(e, "|", repr(e.__cause__))
      failed: disk full | OSError('disk full')

    """

    def __init__(self, message: str) -> None:
        super().__init__(f"failed: {message}")


class CannotRenderError(RenderError):
    """A handler doesn't support the value it was given."""

    type_name: str

    def __init__(self, type_name: str) -> None:
        super().__init__(f"cannot render: {type_name}")
        self.type_name = type_name


class UnsupportedFormatError(RenderError):
    """No handler for *format* can render the value."""

    format: str

    def __init__(self, format: str) -> None:
        super().__init__(f"unsupported format: {format}")
        self.format = format


def type_name(v: Any) -> str:
    ty = type(v)
    if ty.__module__ == "builtins":
        return ty.__qualname__
    return f"{ty.__module__}.{ty.__qualname__}"


def cannot_render(v: Any) -> CannotRenderError:
    """Build the error reported when *v* lacks a required capability.

      >>> cannot_render(None)
      CannotRenderError('cannot render: NoneType')
    """
    return CannotRenderError(type_name(v))


def failed(exc: BaseException) -> FailedError:
    """Wrap *exc* in a :class:`FailedError`, unless it already is one.

    The result is meant to be raised with ``raise failed(e) from e``.
    """
    if isinstance(exc, FailedError):
        return exc
    return FailedError(str(exc) or type(exc).__name__)
