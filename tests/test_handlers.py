from __future__ import annotations

import dataclasses
import io
from xml.etree import ElementTree as ET

import msgpack
import pytest

from anyrender import errors
from anyrender.handlers import JSON, XML, YAML, Binary, Stringer, WriterTo
from anyrender.handlers.msgpack import ImportGuard, MsgPack

from .helpers import MockWriter


@dataclasses.dataclass
class Version:
    version: str
    latest: bool = False
    stable: bool = True


class Marshaler:
    def __init__(self, data=b"test string", err=None):
        self.data = data
        self.err = err

    def __bytes__(self):
        if self.err is not None:
            raise self.err
        return self.data


class Tree:
    def __xml__(self):
        root = ET.Element("versions-list")
        current = ET.SubElement(root, "current")
        current.text = "1.2.2"
        return root


class NotATree:
    def __xml__(self):
        return "<a/>"


class Greeting:
    def write_to(self, w):
        return w.write(b"hello")


class Named:
    def __str__(self):
        return "named"


def render(handler, v, pretty=False, w=None):
    if w is None:
        w = MockWriter()
    if pretty:
        handler.render_pretty(w, v)
    else:
        handler.render(w, v)
    return w.getvalue()


# JSON


def test_json():
    assert render(JSON(), {"age": 30}) == b'{"age":30}\n'
    assert render(JSON(), {"age": 30}, pretty=True) == (
        b'{\n  "age": 30\n}\n'
    )


def test_json_indent():
    assert render(JSON(indent=4), [1], pretty=True) == b"[\n    1\n]\n"


def test_json_dataclass():
    assert render(JSON(), [Version("1.2.2", latest=True)]) == (
        b'[{"version":"1.2.2","latest":true,"stable":true}]\n'
    )


def test_json_sorted():
    out = render(JSON(order="sorted"), {"b": 1, "a": 2})
    assert out == b'{"a":2,"b":1}\n'


def test_json_enc_hook():
    handler = JSON(enc_hook=lambda v: str(v))
    assert render(handler, {"v": Named()}) == b'{"v":"named"}\n'


def test_json_unsupported_type_is_failure():
    with pytest.raises(errors.FailedError) as exc_info:
        render(JSON(), {"v": object()})
    assert isinstance(exc_info.value.__cause__, TypeError)


def test_json_write_error():
    w = MockWriter(write_err=OSError("write error!!1"))
    with pytest.raises(errors.FailedError, match="write error!!1"):
        render(JSON(), {"age": 30}, w=w)


# YAML


def test_yaml():
    assert render(YAML(), {"age": 30}) == b"age: 30\n"
    assert render(YAML(), {"versions": ["1.2.2"], "stable": True}) == (
        b"versions:\n- 1.2.2\nstable: true\n"
    )


def test_yaml_indent():
    assert render(YAML(indent=4), {"a": {"b": 1}}) == b"a:\n    b: 1\n"


def test_yaml_sort_keys():
    assert render(YAML(sort_keys=True), {"b": 1, "a": 2}) == b"a: 2\nb: 1\n"


def test_yaml_unicode():
    assert render(YAML(), ["été"]) == "- été\n".encode()


def test_yaml_unsupported_type_is_failure():
    with pytest.raises(errors.FailedError):
        render(YAML(), {"v": object()})


def test_yaml_formats():
    assert YAML().formats() == ["yaml", "yml"]


# XML


def test_xml():
    assert render(XML(), Tree()) == (
        b"<versions-list><current>1.2.2</current></versions-list>"
    )
    assert render(XML(), Tree(), pretty=True) == (
        b"<versions-list>\n  <current>1.2.2</current>\n</versions-list>\n"
    )


def test_xml_element_and_tree():
    elt = ET.Element("a", {"b": "c"})
    assert render(XML(), elt) == b'<a b="c" />'
    assert render(XML(), ET.ElementTree(elt)) == b'<a b="c" />'


def test_xml_pretty_does_not_mutate():
    root = Tree().__xml__()
    render(XML(indent="\t"), root, pretty=True)
    assert root[0].tail is None


def test_xml_declaration():
    out = render(XML(xml_declaration=True), ET.Element("a"))
    assert out.startswith(b"<?xml version='1.0' encoding='utf-8'?>")


@pytest.mark.parametrize("value", ({"a": 1}, "<a/>", None))
def test_xml_cannot_render(value):
    with pytest.raises(errors.CannotRenderError):
        render(XML(), value)


def test_xml_bad_tree_is_failure():
    with pytest.raises(errors.FailedError, match="expected an Element"):
        render(XML(), NotATree())


# Binary


def test_binary():
    assert render(Binary(), Marshaler()) == b"test string"
    assert Binary().formats() == ["binary", "bin"]


@pytest.mark.parametrize("value", (None, "str", 42, {"a": 1}))
def test_binary_cannot_render(value):
    with pytest.raises(errors.CannotRenderError):
        render(Binary(), value)


def test_binary_marshal_error():
    err = ValueError("marshal error!!1")
    with pytest.raises(errors.FailedError) as exc_info:
        render(Binary(), Marshaler(err=err))
    assert str(exc_info.value) == "failed: marshal error!!1"
    assert exc_info.value.__cause__ is err


def test_binary_write_error():
    w = MockWriter(write_err=OSError("write error!!1"))
    with pytest.raises(errors.FailedError, match="write error!!1"):
        render(Binary(), Marshaler(), w=w)


# Stringer and WriterTo


def test_stringer():
    assert render(Stringer(), Named()) == b"named"
    with pytest.raises(errors.CannotRenderError):
        render(Stringer(), object())


def test_writer_to():
    assert render(WriterTo(), Greeting()) == b"hello"
    with pytest.raises(errors.CannotRenderError):
        render(WriterTo(), Named())


def test_writer_to_error():
    w = MockWriter(write_err=OSError("write error!!1"))
    with pytest.raises(errors.FailedError):
        render(WriterTo(), Greeting(), w=w)


# MessagePack


def test_msgpack():
    out = render(MsgPack(), {"age": 30, "tags": [b"x"]})
    assert msgpack.unpackb(out) == {"age": 30, "tags": [b"x"]}
    assert MsgPack().formats() == ["msgpack", "mpk"]


def test_msgpack_default():
    out = render(MsgPack(default=str), [Named()])
    assert msgpack.unpackb(out) == ["named"]


def test_msgpack_unsupported_type_is_failure():
    with pytest.raises(errors.FailedError):
        render(MsgPack(), object())


def test_module_not_found():
    with pytest.warns(UserWarning), pytest.raises(
        ModuleNotFoundError
    ), ImportGuard():
        import adfasdfasdf  # noqa: F401


def test_render_into_bytesio():
    buf = io.BytesIO()
    JSON().render(buf, [1, 2])
    assert buf.getvalue() == b"[1,2]\n"
