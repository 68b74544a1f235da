"""Tests for the attribute identifier set."""

import unittest

from svgattrs import Attribute, all_attributes


class TestAttributeSet(unittest.TestCase):
    def test_values_are_dense_and_ordered(self) -> None:
        attrs = all_attributes()
        assert [int(a) for a in attrs] == list(range(len(attrs)))

    def test_all_attributes_matches_enum_order(self) -> None:
        assert all_attributes() == tuple(Attribute)
        assert all_attributes()[0] is Attribute.ALTERNATE
        assert all_attributes()[-1] is Attribute.Z

    def test_set_size(self) -> None:
        assert len(all_attributes()) == 146

    def test_spellings_are_unique(self) -> None:
        spellings = [a.spelling for a in all_attributes()]
        assert len(spellings) == len(set(spellings))

    def test_spellings_are_non_empty_and_unpadded(self) -> None:
        for attr in all_attributes():
            assert attr.spelling
            assert attr.spelling == attr.spelling.strip()

    def test_str_is_spelling(self) -> None:
        assert str(Attribute.STROKE_WIDTH) == "stroke-width"
        assert str(Attribute.VIEW_BOX) == "viewBox"
        assert str(Attribute.XLINK_HREF) == "xlink:href"

    def test_lookup_by_index(self) -> None:
        assert Attribute(int(Attribute.FILL)) is Attribute.FILL

    def test_members_are_ints(self) -> None:
        # Usable directly as indexes into per-attribute dispatch tables
        table = [None] * len(all_attributes())
        table[Attribute.FILL] = "fill handler"
        assert table[Attribute.FILL] == "fill handler"

    def test_member_names_follow_spelling(self) -> None:
        assert Attribute.CLIP_PATH_UNITS.spelling == "clipPathUnits"
        assert Attribute.BASELINE_SHIFT.spelling == "baseline-shift"
        assert Attribute.XML_SPACE.spelling == "xml:space"

    def test_match_dispatch(self) -> None:
        def kind(attr):
            match attr:
                case Attribute.FILL | Attribute.STROKE:
                    return "paint"
                case Attribute.HREF | Attribute.XLINK_HREF:
                    return "link"
                case _:
                    return "other"

        assert kind(Attribute.FILL) == "paint"
        assert kind(Attribute.XLINK_HREF) == "link"
        assert kind(Attribute.D) == "other"


if __name__ == "__main__":
    unittest.main()
