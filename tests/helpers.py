from __future__ import annotations

import io
from typing import Any

from anyrender import errors


class MockWriter:
    """A binary sink that can be told to fail."""

    def __init__(self, write_err: Exception | None = None):
        self.write_err = write_err
        self.buf = io.BytesIO()

    def write(self, b: bytes) -> int:
        if self.write_err is not None:
            raise self.write_err
        return self.buf.write(b)

    def getvalue(self) -> bytes:
        return self.buf.getvalue()


class MockHandler:
    """Writes *output* and then raises *err* (if set)."""

    def __init__(self, output: bytes = b"", err: Exception | None = None):
        self.output = output
        self.err = err
        self.calls = 0

    def render(self, w: Any, v: Any) -> None:
        self.calls += 1
        w.write(self.output)
        if self.err is not None:
            raise self.err


class MockFormatsHandler(MockHandler):
    def __init__(
        self,
        output: bytes = b"",
        formats: tuple[str, ...] = (),
        err: Exception | None = None,
    ):
        super().__init__(output=output, err=err)
        self._formats = list(formats)

    def formats(self) -> list[str]:
        return self._formats


class MockPrettyHandler(MockFormatsHandler):
    def __init__(
        self,
        output: bytes = b"",
        pretty_output: bytes = b"",
        formats: tuple[str, ...] = (),
        err: Exception | None = None,
    ):
        super().__init__(output=output, formats=formats, err=err)
        self.pretty_output = pretty_output
        self.pretty_calls = 0

    def render_pretty(self, w: Any, v: Any) -> None:
        self.pretty_calls += 1
        w.write(self.pretty_output)
        if self.err is not None:
            raise self.err


def cannot(output: bytes = b"") -> MockHandler:
    "A handler that always rejects its value"
    return MockHandler(output=output, err=errors.CannotRenderError("mock"))
