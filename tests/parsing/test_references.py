import pytest
from bs4 import BeautifulSoup

from mcc_mnc_harvest.extraction.base import MissingAttributeError
from mcc_mnc_harvest.parsing.references import strip_references


def _root(html: str):
    return BeautifulSoup(f"<div id='root'>{html}</div>", "lxml").find(id="root")


class TestStripReferences:
    def test_removes_cite_note_links(self):
        root = _root(
            '<table><tr><td>Vodafone<sup class="reference"><a href="#cite_note-12">[12]</a></sup></td></tr></table>'
        )

        strip_references(root)

        assert root.find("a") is None
        assert root.get_text() == "Vodafone"

    def test_keeps_other_links(self):
        root = _root('<p><a href="/wiki/GSM">GSM</a> and <a href="#cite_note-1">[1]</a></p>')

        strip_references(root)

        links = root.find_all("a")
        assert [link["href"] for link in links] == ["/wiki/GSM"]
        assert root.get_text() == "GSM and "

    def test_removes_links_without_visible_text(self):
        root = _root('<p>313<a href="#cite_note-fcc"></a></p>')
        strip_references(root)
        assert root.find("a") is None

    def test_returns_same_root(self):
        root = _root("<p>text</p>")
        assert strip_references(root) is root

    def test_link_without_href_raises(self):
        root = _root('<p><a name="anchor">x</a></p>')

        with pytest.raises(MissingAttributeError):
            strip_references(root)
