import pytest

from site_audit.parser import parse


class TestParse:
    @pytest.mark.parametrize(
        "html",
        ["", "   ", "<", "<html><head><title>Unclosed", "\x00\x01 binary \xff", "<div><p><span></div>", "<<<>>>"],
    )
    def test_never_raises(self, html):
        doc = parse(html)
        assert doc.find("h1") is None
        assert doc.find_all("img") == []

    def test_none_is_empty_document(self):
        assert parse(None).text("title") == ""

    def test_tag_names_are_case_insensitive(self):
        doc = parse("<HTML><HEAD><TITLE>Hello</TITLE></HEAD><BODY><H1>Hi</H1></BODY></HTML>")

        assert doc.text("title") == "Hello"
        assert len(doc.find_all("h1")) == 1

    def test_attribute_filters(self):
        doc = parse('<meta name="robots" content="noindex"><meta name="viewport" content="width=device-width">')
        assert doc.find("meta", name="robots")["content"] == "noindex"

    def test_select_href_substring(self):
        doc = parse('<a href="https://twitter.com/acme">t</a><a href="/about">a</a>')
        assert len(doc.select('a[href*="twitter.com"]')) == 1

    def test_bad_selector_degrades_to_not_found(self):
        doc = parse("<p>hi</p>")

        assert doc.select("p[[[") == []
        assert doc.select_one("p[[[") is None
        assert doc.attr("p[[[", "id") == ""

    def test_meta_lookup(self):
        doc = parse('<meta name="Description" content="  Spaces around  ">')

        assert doc.meta("description") == "Spaces around"
        assert doc.meta("keywords") == ""

    def test_multi_valued_attribute_joined(self):
        doc = parse('<link rel="shortcut icon" href="/f.ico">')
        assert doc.attr('link[rel~="icon"]', "rel") == "shortcut icon"
