"""
``anyrender.handlers``: Format handlers
=======================================

Ready-made handlers. Most of them are thin wrappers around an encoding
library; :class:`Text` is the only one with non trivial logic.
"""
from __future__ import annotations

from .bin import Binary
from .json import JSON
from .stringer import Stringer
from .text import Text
from .writer_to import WriterTo
from .xml import XML
from .yaml import YAML

__all__ = (
    "Binary",
    "JSON",
    "Stringer",
    "Text",
    "WriterTo",
    "XML",
    "YAML",
)
