"""
``anyrender.handlers.msgpack``: MessagePack
===========================================

Encode values as `MessagePack <https://msgpack.org/>`_. This requires the
optional ``msgpack`` dependency (``pip install anyrender[msgpack]``).
"""

from __future__ import annotations

import typing
import warnings
from typing import Any, Callable

from anyrender import errors
from anyrender.base import Writer

if typing.TYPE_CHECKING:  # pragma: no cover
    import types
    from typing import Type

__all__ = ("ImportGuard", "MsgPack")


class ImportGuard:
    def __enter__(self) -> None:
        pass

    def __exit__(
        self,
        exctype: Type[BaseException] | None,
        excinst: BaseException | None,
        exctb: types.TracebackType | None,
    ) -> None:
        if exctype is not None and issubclass(exctype, ModuleNotFoundError):
            warnings.warn(
                "Support for msgpack rendering is not available because of "
                "missing dependencies. You can fix this by running ``pip "
                "install anyrender[msgpack]``"
            )


class MsgPack:
    """Packs values with :func:`msgpack.packb`.

    Args:
      default: Called on objects msgpack doesn't know how to pack.
      use_bin_type: Pack :class:`bytes` as the msgpack *bin* type.
    """

    default: Callable[[Any], Any] | None
    use_bin_type: bool

    def __init__(
        self,
        default: Callable[[Any], Any] | None = None,
        use_bin_type: bool = True,
    ) -> None:
        with ImportGuard():
            import msgpack  # noqa: F401

        self.default = default
        self.use_bin_type = use_bin_type

    def render(self, w: Writer, v: Any) -> None:
        import msgpack

        try:
            data = msgpack.packb(
                v, default=self.default, use_bin_type=self.use_bin_type
            )
            w.write(data)
        except Exception as e:
            raise errors.failed(e) from e

    def formats(self) -> list[str]:
        return ["msgpack", "mpk"]

    def __repr__(self) -> str:
        return "MsgPack()"
