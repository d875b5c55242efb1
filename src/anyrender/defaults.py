"""
``anyrender.defaults``: Ready-made renderers
============================================

Factories for renderers that support the common formats. Each call builds a
fresh :class:`~anyrender.renderer.Renderer`: build one when your program
starts and pass it to whoever needs it.

  >>> r = new("json", "yaml")
  >>> r.formats()
  ['json', 'yaml', 'yml']
  >>> print(r.dumps("yml", {"current": "1.2.2"}).decode(), end="")
  current: 1.2.2

"""
from __future__ import annotations

from typing import Any, Final

from anyrender import errors
from anyrender.base import Writer
from anyrender.handlers import JSON, XML, YAML, Binary, Text
from anyrender.renderer import Renderer

__all__ = (
    "DEFAULT_FORMATS",
    "full_renderer",
    "default_renderer",
    "new",
    "render",
    "pretty",
    "compact",
)

#: The formats (and their aliases) exposed by :func:`default_renderer`
DEFAULT_FORMATS: Final = ("json", "text", "xml", "yaml")


def full_renderer(*, with_msgpack: bool = False) -> Renderer:
    """A renderer with every builtin handler.

    Args:
      with_msgpack: Also register the ``msgpack`` format (requires the
        ``msgpack`` extra).
    """
    renderer = Renderer(
        [
            ("binary", Binary()),
            ("json", JSON()),
            ("text", Text()),
            ("xml", XML()),
            ("yaml", YAML()),
        ]
    )
    if with_msgpack:
        from anyrender.handlers.msgpack import MsgPack

        renderer.add("msgpack", MsgPack())
    return renderer


def _expand(renderer: Renderer, formats: tuple[str, ...]) -> Renderer:
    # Keep the aliases of the formats that were asked for
    names = [
        name
        for name, handler in renderer.handlers.items()
        if any(renderer.handlers[f.lower()] is handler for f in formats)
    ]
    return renderer.new_with(*names)


def default_renderer() -> Renderer:
    """A renderer for :data:`DEFAULT_FORMATS`

      >>> default_renderer().formats()
      ['json', 'plain', 'text', 'txt', 'xml', 'yaml', 'yml']
    """
    return _expand(full_renderer(), DEFAULT_FORMATS)


def new(*formats: str, with_msgpack: bool = False) -> Renderer:
    """A renderer that only supports *formats* (and their aliases).

    Raises:
      RenderError: no formats were given.
      UnsupportedFormatError: one of the formats isn't a builtin format.
    """
    if not formats:
        raise errors.RenderError("no formats specified")
    full = full_renderer(with_msgpack=with_msgpack)
    for format in formats:
        if format not in full:
            raise errors.UnsupportedFormatError(format)
    return _expand(full, formats)


def render(
    w: Writer,
    format: str,
    pretty: bool,
    v: Any,
    *,
    renderer: Renderer | None = None,
) -> None:
    """Render *v* to *w* in *format*.

    Uses *renderer* if given, otherwise a :func:`default_renderer`.
    """
    if renderer is None:
        renderer = default_renderer()
    renderer.render(w, format, pretty, v)


def pretty(
    w: Writer, format: str, v: Any, *, renderer: Renderer | None = None
) -> None:
    render(w, format, True, v, renderer=renderer)


def compact(
    w: Writer, format: str, v: Any, *, renderer: Renderer | None = None
) -> None:
    render(w, format, False, v, renderer=renderer)
