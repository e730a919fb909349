# tests/document/test_base.py
"""Tests for the helpers on the Document base class."""

from fakes import FakeDocument

from pdfqa.document.base import OutlineItem


class TestDocumentHelpers:
    def test_page_text_joins_fragments(self):
        document = FakeDocument(["Motor  M1\nstarts"])
        assert document.page_text(1) == "Motor M1 starts"

    def test_has_outline(self):
        assert FakeDocument(["a"], outline=[OutlineItem("A", dest=[0])]).has_outline() is True
        assert FakeDocument(["a"], outline=[]).has_outline() is False
        assert FakeDocument(["a"]).has_outline() is False

    def test_text_based_first_page(self):
        assert FakeDocument(["Some text", ""]).is_text_based() is True
        assert FakeDocument(["   ", "text later"]).is_text_based() is False

    def test_unreadable_first_page_is_not_text_based(self, caplog):
        document = FakeDocument(["text"], broken_pages=[1])

        assert document.is_text_based() is False
        assert "Could not perform text check" in caplog.text

    def test_empty_document(self):
        assert FakeDocument([]).is_text_based() is False
