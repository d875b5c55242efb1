"""
``anyrender.handlers.yaml``: YAML
=================================

Values are dumped with PyYAML's safe dumper, in block style:

  >>> import io
  >>> buf = io.BytesIO()
  >>> YAML().render(buf, {"versions": ["1.2.2", "1.2.1"], "stable": True})
  >>> print(buf.getvalue().decode(), end="")
  versions:
  - 1.2.2
  - 1.2.1
  stable: true

YAML is always human readable, :class:`YAML` doesn't have a separate pretty
mode.
"""
from __future__ import annotations

from typing import Any, Final

import yaml

from anyrender import errors
from anyrender.base import Writer

__all__ = ("YAML", "YAML_DEFAULT_INDENT")

#: Number of spaces used to indent nested blocks
YAML_DEFAULT_INDENT: Final = 2


class YAML:
    """Marshals values to YAML.

    Args:
      indent: Number of spaces used to indent nested blocks.
      sort_keys: Sort the keys of mappings.
      width: Preferred line width.
    """

    indent: int
    sort_keys: bool
    width: int | None

    def __init__(
        self,
        indent: int = YAML_DEFAULT_INDENT,
        sort_keys: bool = False,
        width: int | None = None,
    ) -> None:
        self.indent = indent
        self.sort_keys = sort_keys
        self.width = width

    def render(self, w: Writer, v: Any) -> None:
        try:
            data = yaml.dump(
                v,
                Dumper=yaml.SafeDumper,
                default_flow_style=False,
                indent=self.indent,
                width=self.width,
                sort_keys=self.sort_keys,
                allow_unicode=True,
                encoding="utf-8",
            )
            w.write(data)
        except Exception as e:
            raise errors.failed(e) from e

    def formats(self) -> list[str]:
        return ["yaml", "yml"]

    def __repr__(self) -> str:
        return f"YAML(indent={self.indent!r})"
