"""Tests for href / xlink:href preference."""

import unittest

from svgattrs import Attribute, Href, HrefError, is_href, set_href


class TestHref(unittest.TestCase):
    def test_is_href(self) -> None:
        assert is_href(Attribute.HREF) is True
        assert is_href(Attribute.XLINK_HREF) is True
        assert is_href(Attribute.FILL) is False
        assert is_href(None) is False

    def test_xlink_href_fills_empty_slot(self) -> None:
        assert set_href(Attribute.XLINK_HREF, None, "#a") == "#a"

    def test_href_fills_empty_slot(self) -> None:
        assert set_href(Attribute.HREF, None, "#a") == "#a"

    def test_href_overrides_xlink_href(self) -> None:
        target = set_href(Attribute.XLINK_HREF, None, "#old")
        target = set_href(Attribute.HREF, target, "#new")
        assert target == "#new"

    def test_xlink_href_does_not_override_href(self) -> None:
        target = set_href(Attribute.HREF, None, "#new")
        target = set_href(Attribute.XLINK_HREF, target, "#old")
        assert target == "#new"


class TestHrefParse(unittest.TestCase):
    def test_parse(self) -> None:
        assert Href.parse("uri") == Href(Href.PLAIN_URI, uri="uri")
        assert Href.parse("#fragment") == Href(Href.FRAGMENT_ID, fragment="fragment")
        assert Href.parse("uri#fragment") == Href(Href.URI_WITH_FRAGMENT_ID, uri="uri", fragment="fragment")

    def test_parse_splits_at_last_hash(self) -> None:
        href = Href.parse("a#b#c")
        assert href.uri == "a#b"
        assert href.fragment == "c"

    def test_parse_errors(self) -> None:
        for value in ("", "#", "uri#"):
            with self.assertRaises(HrefError) as ctx:
                Href.parse(value)
            assert ctx.exception.kind == HrefError.PARSE_ERROR
            assert ctx.exception.href == value

    def test_href_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            Href.parse("")

    def test_without_fragment(self) -> None:
        assert Href.without_fragment("uri") == Href(Href.PLAIN_URI, uri="uri")
        for value in ("#foo", "uri#foo"):
            with self.assertRaises(HrefError) as ctx:
                Href.without_fragment(value)
            assert ctx.exception.kind == HrefError.FRAGMENT_FORBIDDEN

    def test_with_fragment(self) -> None:
        assert Href.with_fragment("#foo") == Href(Href.FRAGMENT_ID, fragment="foo")
        assert Href.with_fragment("uri#foo") == Href(Href.URI_WITH_FRAGMENT_ID, uri="uri", fragment="foo")
        with self.assertRaises(HrefError) as ctx:
            Href.with_fragment("uri")
        assert ctx.exception.kind == HrefError.FRAGMENT_REQUIRED

    def test_with_fragment_still_rejects_bad_values(self) -> None:
        with self.assertRaises(HrefError) as ctx:
            Href.with_fragment("uri#")
        assert ctx.exception.kind == HrefError.PARSE_ERROR

    def test_repr(self) -> None:
        assert repr(Href.parse("a.svg#b")) == "Href('a.svg'#'b')"


if __name__ == "__main__":
    unittest.main()
