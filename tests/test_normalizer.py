# tests/test_normalizer.py
"""Tests for Q&A normalization."""

from pdfqa.models import RawPair
from pdfqa.normalizer import context_clause, normalize_pairs, normalize_question


class TestContextClause:
    def test_with_section(self):
        assert (
            context_clause("Setup", "manual.pdf")
            == 'In the section "Setup" of the document "manual.pdf", '
        )

    def test_without_section(self):
        assert context_clause(None, "manual.pdf") == 'In the document "manual.pdf", '
        assert context_clause("", "manual.pdf") == 'In the document "manual.pdf", '


class TestNormalizeQuestion:
    def test_appends_question_mark(self):
        assert normalize_question("  What is it  ") == "What is it?"

    def test_keeps_existing_question_mark(self):
        assert normalize_question("Why?") == "Why?"


class TestNormalizePairs:
    def test_qualifies_question_and_trims_answer(self):
        pairs = normalize_pairs(
            [RawPair(question="What voltage is used", answer=" 24V ")], "Setup", "manual.pdf"
        )

        assert len(pairs) == 1
        assert pairs[0].input_text == (
            'In the section "Setup" of the document "manual.pdf", what voltage is used?'
        )
        assert pairs[0].output_text == "24V"

    def test_only_first_character_is_lowered(self):
        pairs = normalize_pairs(
            [RawPair(question="PLC Input X0 does what?", answer="Starts")], None, "doc.pdf"
        )
        assert pairs[0].input_text == 'In the document "doc.pdf", pLC Input X0 does what?'

    def test_incomplete_pairs_are_dropped(self):
        raw = [
            RawPair(question="Kept?", answer="Yes"),
            RawPair(question=None, answer="orphan"),
            RawPair(question="No answer?", answer=""),
            RawPair(question="   ", answer="blank question"),
            RawPair(question="Blank answer?", answer="  "),
        ]
        pairs = normalize_pairs(raw, None, "doc.pdf")
        assert [p.output_text for p in pairs] == ["Yes"]

    def test_order_is_preserved(self):
        raw = [RawPair(question=f"Q{i}", answer=f"A{i}") for i in range(5)]
        pairs = normalize_pairs(raw, "S", "doc.pdf")
        assert [p.output_text for p in pairs] == ["A0", "A1", "A2", "A3", "A4"]

    def test_every_input_ends_with_question_mark(self):
        raw = [RawPair(question="One", answer="1"), RawPair(question="Two?", answer="2")]
        assert all(p.input_text.endswith("?") for p in normalize_pairs(raw, None, "d"))
