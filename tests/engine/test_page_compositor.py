"""Tests for footer and title compositing."""

import re

import pytest

from textpager.engine.geometry import PageGeometry
from textpager.engine.layout_engine import paginate
from textpager.engine.layout_primitives import FontWeight, LayoutPage, PlacementCommand
from textpager.engine.page_compositor import DEFAULT_TITLE, finalize, footer_text


def make_pages(count):
    return [
        LayoutPage(number=n, commands=[PlacementCommand(page=n, x=20.0, y=20.0, text=f"body {n}")])
        for n in range(1, count + 1)
    ]


FOOTER_RE = re.compile(r"^Page (\d+) of (\d+)$")


class TestFinalize:
    """Test suite for finalize()."""

    def test_footer_text(self):
        assert footer_text(2, 5) == "Page 2 of 5"

    @pytest.mark.parametrize("count", [1, 2, 7])
    def test_exactly_one_footer_per_page(self, count):
        pages = finalize(make_pages(count))

        assert len(pages) == count
        for page in pages:
            footers = [c for c in page.commands if FOOTER_RE.match(c.text)]
            assert len(footers) == 1
            assert footers[0].text == f"Page {page.number} of {count}"

    def test_footer_position_and_style(self, geometry):
        footer = finalize(make_pages(1), geometry)[0].commands[-1]

        assert (footer.x, footer.y) == (170.0, 287.0)
        assert footer.font_size_pt == 9.0
        assert footer.font_weight is FontWeight.NORMAL

    def test_title_only_on_first_page(self):
        pages = finalize(make_pages(3))

        title = pages[0].commands[0]
        assert title.text == DEFAULT_TITLE
        assert (title.x, title.y) == (20.0, 10.0)
        assert title.font_size_pt == 16.0
        assert title.font_weight is FontWeight.BOLD
        for page in pages[1:]:
            assert DEFAULT_TITLE not in page.texts()

    def test_title_sits_above_content_band(self, geometry):
        title = finalize(make_pages(1), geometry, title="Custom")[0].commands[0]

        assert title.text == "Custom"
        assert title.y < geometry.margin_mm

    @pytest.mark.parametrize("title", [None, ""])
    def test_title_can_be_omitted(self, title):
        page = finalize(make_pages(1), title=title)[0]

        assert page.texts() == ["body 1", "Page 1 of 1"]

    def test_empty_page_still_gets_footer(self):
        pages = finalize([LayoutPage(number=1)])

        assert pages[0].texts() == [DEFAULT_TITLE, "Page 1 of 1"]

    def test_inputs_not_mutated(self):
        source = make_pages(2)

        finalize(source)

        assert [len(p.commands) for p in source] == [1, 1]

    def test_custom_geometry(self):
        geometry = PageGeometry(page_width_mm=100.0, page_height_mm=150.0, margin_mm=15.0)

        pages = finalize(make_pages(1), geometry)

        assert (pages[0].commands[0].x, pages[0].commands[0].y) == (15.0, 7.5)
        assert (pages[0].commands[-1].x, pages[0].commands[-1].y) == (65.0, 142.5)

    @pytest.mark.parametrize("margin", [2.0, 5.0, 9.0])
    def test_small_margin_keeps_header_and_footer_outside_content(self, margin):
        geometry = PageGeometry(margin_mm=margin)
        body = [f"line {n}" for n in range(200)]
        pages = paginate("\n".join(body), geometry).pages

        title = pages[0].commands[0]
        assert 0 < title.y < geometry.content_top_mm
        for page in pages:
            footer = page.commands[-1]
            assert FOOTER_RE.match(footer.text)
            assert geometry.content_bottom_mm < footer.y < geometry.page_height_mm
            body_ys = [c.y for c in page.commands if c is not footer and c is not title]
            assert max(body_ys) <= geometry.content_bottom_mm
