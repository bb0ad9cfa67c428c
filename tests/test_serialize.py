"""Tests for serializing documents to canonical linkset JSON."""

import io
import json
import logging

import pytest

from linkset import (
    InvalidArgumentError,
    Link,
    LinksetDocument,
    LinksetOptions,
    LinksetParser,
    MissingLinksError,
    MissingTargetError,
    parse,
    serialize,
    serialize_to_stream,
)


def test_valid_document():
    document = LinksetDocument(links=[
        Link(href="https://example.com", rel="describedby", type="text/html", title="Example Link"),
    ])
    data = json.loads(serialize(document))

    assert data == {
        "linkset": [
            {"href": "https://example.com", "rel": "describedby", "type": "text/html", "title": "Example Link"},
        ]
    }


def test_empty_linkset():
    data = json.loads(serialize(LinksetDocument(links=[])))

    assert data == {"linkset": []}


def test_empty_linkset_compact():
    compact = LinksetParser(LinksetOptions(indent=None))

    assert compact.serialize(LinksetDocument()) == '{"linkset":[]}'


def test_omits_absent_fields():
    text = serialize(LinksetDocument(links=[Link(href="https://example.com")]))

    for key in ('"rel"', '"anchor"', '"type"', '"hreflang"', '"title"', '"length"'):
        assert key not in text
    assert "null" not in text


def test_empty_string_is_emitted():
    data = json.loads(serialize(LinksetDocument(links=[Link(href="https://example.com", title="")])))

    assert data["linkset"][0]["title"] == ""


def test_field_order_then_extensions():
    link = Link(
        href="https://example.com/doc.pdf",
        length=10,
        title="Doc",
        hreflang="en",
        type="application/pdf",
        anchor="https://example.com/",
        rel="describedby",
        extensions={"zeta": 1, "alpha": 2},
    )
    data = json.loads(serialize(LinksetDocument(links=[link], extensions={"profile": "p"})))

    assert list(data) == ["linkset", "profile"]
    assert list(data["linkset"][0]) == [
        "href", "rel", "anchor", "type", "hreflang", "title", "length", "zeta", "alpha",
    ]


def test_extension_data_emitted_verbatim():
    original = '{"linkset":[{"href":"https://example.com","customProperty":"customValue"}]}'
    text = serialize(parse(original))

    assert '"customProperty": "customValue"' in text


def test_extension_shapes_round_trip():
    ext = {"n": 1, "f": 2.5, "b": False, "z": None, "a": [1, {"k": "v"}], "o": {"deep": {"x": []}}}
    document = LinksetDocument(links=[Link(href="https://example.com", extensions=ext)])

    assert parse(serialize(document)).links[0].extensions == ext


def test_colliding_extension_key_is_skipped(caplog):
    document = LinksetDocument(
        links=[Link(href="https://example.com", extensions={"HREF": "https://other.example", "keep": 1})],
        extensions={"LinkSet": []},
    )
    with caplog.at_level(logging.WARNING, logger="linkset.kernel.wire"):
        data = json.loads(serialize(document))

    assert data == {"linkset": [{"href": "https://example.com", "keep": 1}]}
    assert "HREF" in caplog.text


def test_output_is_deterministic(sample_document):
    assert serialize(sample_document) == serialize(sample_document.model_copy(deep=True))


def test_output_never_contains_comments_or_trailing_commas():
    lenient = """{
        // comment
        "linkset": [{"href": "https://example.com",},],
    }"""
    text = serialize(parse(lenient))

    assert "//" not in text.replace("https://", "")
    json.loads(text)  # strict stdlib parser accepts it


def test_non_ascii_is_kept_by_default():
    text = serialize(LinksetDocument(links=[Link(href="https://example.com", title="Café")]))

    assert "Café" in text


def test_ensure_ascii_option():
    ascii_parser = LinksetParser(LinksetOptions(ensure_ascii=True))
    text = ascii_parser.serialize(LinksetDocument(links=[Link(href="https://example.com", title="Café")]))

    assert "Caf\\u00e9" in text


def test_none_document():
    with pytest.raises(InvalidArgumentError):
        serialize(None)


def test_invalid_document_raises_validation_error():
    with pytest.raises(MissingTargetError):
        serialize(LinksetDocument(links=[Link(rel="describedby")]))


def test_missing_container_raises():
    with pytest.raises(MissingLinksError):
        serialize(LinksetDocument(links=None))


class TestRoundTrip:

    def test_parse_serialize_parse(self):
        original = LinksetDocument(
            links=[
                Link(href="https://example.com/1", rel="describedby", type="text/html", title="First Link"),
                Link(href="https://example.com/2", rel="related", anchor="https://example.com/context", length=12345),
                Link(href="/relative", hreflang="de", extensions={"x-meta": {"k": [1, 2]}}),
            ],
            extensions={"profile": "https://example.com/profile"},
        )

        assert parse(serialize(original)) == original

    def test_empty(self):
        assert parse(serialize(LinksetDocument())) == LinksetDocument()


class TestSerializeToStream:

    def test_binary_stream(self):
        document = LinksetDocument(links=[Link(href="https://example.com", rel="describedby")])
        stream = io.BytesIO()
        serialize_to_stream(document, stream)

        data = json.loads(stream.getvalue().decode("utf-8"))
        assert data["linkset"][0]["href"] == "https://example.com"

    def test_text_stream(self):
        stream = io.StringIO()
        serialize_to_stream(LinksetDocument(), stream)

        assert json.loads(stream.getvalue()) == {"linkset": []}

    def test_plain_writer_receives_text(self):
        class Sink:
            def __init__(self):
                self.chunks = []

            def write(self, data):
                self.chunks.append(data)

        sink = Sink()
        serialize_to_stream(LinksetDocument(), sink)

        assert len(sink.chunks) == 1
        assert isinstance(sink.chunks[0], str)
        assert json.loads(sink.chunks[0]) == {"linkset": []}

    def test_writer_with_binary_mode_receives_bytes(self):
        class Sink:
            mode = "wb"

            def __init__(self):
                self.chunks = []

            def write(self, data):
                self.chunks.append(data)

        sink = Sink()
        serialize_to_stream(LinksetDocument(), sink)

        assert isinstance(sink.chunks[0], bytes)

    def test_binary_file(self, tmp_path):
        path = tmp_path / "out.json"
        with open(path, "wb") as f:
            serialize_to_stream(LinksetDocument(), f)

        assert json.loads(path.read_bytes()) == {"linkset": []}

    def test_none_document(self):
        with pytest.raises(InvalidArgumentError):
            serialize_to_stream(None, io.BytesIO())

    def test_none_stream(self):
        with pytest.raises(InvalidArgumentError):
            serialize_to_stream(LinksetDocument(), None)

    def test_nothing_written_on_validation_failure(self):
        stream = io.BytesIO()
        with pytest.raises(MissingTargetError):
            serialize_to_stream(LinksetDocument(links=[Link()]), stream)

        assert stream.getvalue() == b""

    def test_stream_round_trip(self, parser):
        original = LinksetDocument(links=[Link(href="https://example.com", rel="describedby", type="text/html")])
        stream = io.BytesIO()
        parser.serialize_to_stream(original, stream)
        stream.seek(0)

        assert parser.parse_stream(stream) == original
