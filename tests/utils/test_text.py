"""Tests for text sanitizing utilities."""

import pytest

from wphelpers.utils.text import clean_inline_html, strip_tags


class TestStripTags:
    """Tests for strip_tags()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", ""),
            ("plain", "plain"),
            ("  padded  ", "padded"),
            ("<p>Hello <b>world</b></p>", "Hello world"),
            ('<a href="https://example.com">link</a>', "link"),
            ("before<script>alert('x')</script>after", "beforeafter"),
            ("<STYLE>p {}</STYLE>text", "text"),
            ("Fish &amp; chips", "Fish & chips"),
            ("1 < 2", "1 < 2"),
            ("hi <!-- secret -->", "hi"),
            ("&lt;b&gt;bold&lt;/b&gt; text", "bold text"),
            ("&lt;script&gt;alert(1)&lt;/script&gt;ok", "ok"),
            ("&amp;lt;i&amp;gt;twice&amp;lt;/i&amp;gt;", "twice"),
        ],
    )
    def test_strip_tags(self, text, expected):
        assert strip_tags(text) == expected


class TestCleanInlineHtml:
    """Tests for clean_inline_html()."""

    def test_keeps_allowed_tags_without_attributes(self):
        text = '<em onclick="x()">Hi</em> <div>there</div>'
        assert clean_inline_html(text, ["em"]) == "<em>Hi</em> there"

    def test_allowed_tags_are_case_insensitive(self):
        assert clean_inline_html("<B>bold</B>", ["b"]) == "<b>bold</b>"

    def test_drops_script_content(self):
        assert clean_inline_html("<script>x</script> ok", ["b"]) == "ok"

    def test_empty(self):
        assert clean_inline_html("", ["b"]) == ""

    def test_drops_comments(self):
        assert clean_inline_html("<b>Hi</b><!-- secret --> there", ["b"]) == "<b>Hi</b> there"

    def test_keeps_encoded_markup_escaped(self):
        text = "&lt;script&gt;alert(1)&lt;/script&gt; <b>ok</b>"
        assert clean_inline_html(text, ["b"]) == "&lt;script&gt;alert(1)&lt;/script&gt; <b>ok</b>"

    def test_keeps_empty_allowed_tags(self):
        assert clean_inline_html("<b></b>", ["b"]) == "<b></b>"
