"""
``anyrender.handlers.xml``: XML
===============================

There is no canonical mapping from python values to XML, so :class:`XML`
only accepts values that already are XML trees:

+ :class:`xml.etree.ElementTree.Element` and
  :class:`xml.etree.ElementTree.ElementTree`
+ values with an ``__xml__()`` method that returns an
  :class:`~xml.etree.ElementTree.Element`

  >>> import io
  >>> from xml.etree import ElementTree as ET
  >>> root = ET.Element("versions-list")
  >>> ET.SubElement(root, "current").text = "1.2.2"
  >>> buf = io.BytesIO()
  >>> XML().render_pretty(buf, root)
  >>> print(buf.getvalue().decode(), end="")
  <versions-list>
    <current>1.2.2</current>
  </versions-list>

"""
from __future__ import annotations

import copy
from typing import Any, Final
from xml.etree import ElementTree as ET

from anyrender import errors
from anyrender.base import Writer

__all__ = ("XML", "XML_DEFAULT_INDENT")

#: Indentation used when pretty printing
XML_DEFAULT_INDENT: Final = "  "


def _is_tree(v: Any) -> bool:
    return isinstance(v, ET.ElementTree | ET.Element) or callable(
        getattr(v, "__xml__", None)
    )


def _to_element(v: Any) -> Any:
    if isinstance(v, ET.ElementTree):
        return v.getroot()
    if isinstance(v, ET.Element):
        return v
    return v.__xml__()


class XML:
    """Serialises element trees.

    Args:
      indent: String used for each level of indentation in the pretty output.
      xml_declaration: Start the document with an ``<?xml ...?>`` declaration.
    """

    indent: str
    xml_declaration: bool

    def __init__(
        self, indent: str = XML_DEFAULT_INDENT, xml_declaration: bool = False
    ) -> None:
        self.indent = indent
        self.xml_declaration = xml_declaration

    def _write(self, w: Writer, v: Any, pretty: bool) -> None:
        if not _is_tree(v):
            raise errors.cannot_render(v)
        try:
            elt = _to_element(v)
            if not isinstance(elt, ET.Element):
                raise TypeError(
                    f"__xml__ returned {type(elt).__name__!r}, "
                    "expected an Element"
                )
            if pretty:
                # ET.indent works in place
                elt = copy.deepcopy(elt)
                ET.indent(elt, space=self.indent)
            data = ET.tostring(
                elt,
                encoding="utf-8",
                xml_declaration=self.xml_declaration,
            )
            w.write(data + b"\n" if pretty else data)
        except Exception as e:
            raise errors.failed(e) from e

    def render(self, w: Writer, v: Any) -> None:
        self._write(w, v, pretty=False)

    def render_pretty(self, w: Writer, v: Any) -> None:
        self._write(w, v, pretty=True)

    def formats(self) -> list[str]:
        return ["xml"]

    def __repr__(self) -> str:
        return f"XML(indent={self.indent!r})"
