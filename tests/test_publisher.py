"""Tests for the Publisher (object → meta tags)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

import pytest

from ogkit.consumer import Consumer
from ogkit.errors import UnsupportedValueException
from ogkit.objects import Audio, Image, ObjectBase, Video, Website
from ogkit.publisher import Doctype, Publisher
from ogkit.schema import ScalarField, Schema


@dataclass
class SinglePropertyObject(ObjectBase):
    """Object exposing a single untyped property."""

    KEY: ClassVar[str] = "og:title"
    schema: ClassVar[Schema] = Schema(entries=(ScalarField(KEY, "value"),))

    value: object = None


class TestGenerateHtml:
    def test_null(self) -> None:
        assert Publisher().generate_html(SinglePropertyObject(value=None)) == ""

    def test_empty_object(self) -> None:
        assert Publisher().serialize(Website()) == []

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "1"),
            (False, "0"),
            (1, "1"),
            (-1, "-1"),
            (1.11111, "1.11111"),
            (-1.11111, "-1.11111"),
            (
                datetime.fromisoformat("2014-07-21T20:14:00+02:00"),
                "2014-07-21T20:14:00+02:00",
            ),
            ("string", "string"),
            ('some " quotes', "some &quot; quotes"),
            ("some & ampersand", "some &amp; ampersand"),
            ("&quot;", "&amp;quot;"),
        ],
    )
    def test_values(self, value: object, expected: str) -> None:
        result = Publisher().generate_html(SinglePropertyObject(value=value))
        assert result == f'<meta property="og:title" content="{expected}">'

    def test_unsupported_value(self) -> None:
        with pytest.raises(UnsupportedValueException) as excinfo:
            Publisher().generate_html(SinglePropertyObject(value=object()))
        assert excinfo.value.property_name == "og:title"

    def test_xhtml(self) -> None:
        obj = Website(title="T")
        assert Publisher(Doctype.XHTML).serialize(obj) == [
            '<meta property="og:title" content="T" />'
        ]
        assert Publisher("xhtml").doctype is Doctype.XHTML


class TestSerializeOrder:
    def test_scalars_then_arrays(self) -> None:
        obj = Website(
            title="Title",
            type="website",
            locale_alternate=["en_US", "de_AT"],
            rich_attachment=True,
            images=[
                Image(url="A", width=300, height=200),
                Image(url="B", type="image/png"),
            ],
            videos=[Video(url="V", secure_url="https://v")],
            audios=[Audio(url="M")],
        )
        assert Publisher().serialize(obj) == [
            '<meta property="og:type" content="website">',
            '<meta property="og:title" content="Title">',
            '<meta property="og:locale:alternate" content="en_US">',
            '<meta property="og:locale:alternate" content="de_AT">',
            '<meta property="og:rich_attachment" content="1">',
            '<meta property="og:image" content="A">',
            '<meta property="og:image:width" content="300">',
            '<meta property="og:image:height" content="200">',
            '<meta property="og:image" content="B">',
            '<meta property="og:image:type" content="image/png">',
            '<meta property="og:video" content="V">',
            '<meta property="og:video:secure_url" content="https://v">',
            '<meta property="og:audio" content="M">',
        ]

    def test_skips_empty_strings(self) -> None:
        assert Publisher().serialize(Website(title="", site_name="S")) == [
            '<meta property="og:site_name" content="S">'
        ]


class TestRoundTrip:
    def test_load_serialize_load(self) -> None:
        html = """<html><head>
<meta property="og:title" content="Apples &amp; &quot;Pears&quot;">
<meta property="og:url" content="https://example.com/?a=1&amp;b=2">
<meta property="og:rich_attachment" content="true">
<meta property="og:updated_time" content="2014-07-20T17:51:00+02:00">
<meta property="og:locale:alternate" content="en_US">
<meta property="og:see_also" content="https://example.com/more">
<meta property="og:image" content="https://example.com/a.jpg">
<meta property="og:image:width" content="300">
</head></html>"""
        consumer = Consumer()
        publisher = Publisher()
        first = consumer.load_html(html)
        tags = publisher.serialize(first)
        second = consumer.load_html("<html><head>" + "".join(tags) + "</head></html>")
        assert second == first
        assert second.title == 'Apples & "Pears"'
        assert publisher.serialize(second) == tags

    def test_element_without_url_is_not_emitted(self) -> None:
        html = """<html><head>
<meta property="og:image" content="">
<meta property="og:image:width" content="300">
<meta property="og:image" content="https://example.com/b.jpg">
<meta property="og:image:height" content="200">
</head></html>"""
        first = Consumer().load_html(html)
        assert [image.url for image in first.images] == ["", "https://example.com/b.jpg"]

        tags = Publisher().serialize(first)
        assert tags == [
            '<meta property="og:image" content="https://example.com/b.jpg">',
            '<meta property="og:image:height" content="200">',
        ]
        second = Consumer(strict_mode=True).load_html(
            "<html><head>" + "".join(tags) + "</head></html>"
        )
        assert second.images == [Image(url="https://example.com/b.jpg", height=200)]
