# src/pdfqa/normalizer.py
"""Normalization of raw generator output into export-ready Q&A pairs."""

from __future__ import annotations

from collections.abc import Iterable

from pdfqa.models import QAPair, RawPair


def context_clause(context_title: str | None, document_name: str) -> str:
    """Build the prefix that names the source section or document."""
    if context_title:
        return f'In the section "{context_title}" of the document "{document_name}", '
    return f'In the document "{document_name}", '


def normalize_question(question: str) -> str:
    """Trim a question and make sure it ends with a question mark."""
    question = question.strip()
    if not question.endswith("?"):
        question += "?"
    return question


def normalize_pairs(
    raw_pairs: Iterable[RawPair],
    context_title: str | None,
    document_name: str,
) -> list[QAPair]:
    """Qualify raw pairs with their source context.

    Pairs missing a question or an answer (or holding only whitespace)
    are dropped. The first character of
    the question is lower-cased so that it reads as the continuation of the
    context clause; no other casing is touched.

    Args:
        raw_pairs: Pairs in generation order
        context_title: Section title of the chunk, if any
        document_name: Name of the source document

    Returns:
        Normalized pairs in the same order as the input
    """
    prefix = context_clause(context_title, document_name)
    pairs: list[QAPair] = []
    for raw in raw_pairs:
        if not raw.question or not raw.answer:
            continue
        if not raw.question.strip() or not raw.answer.strip():
            continue
        question = normalize_question(raw.question)
        pairs.append(
            QAPair(
                input_text=prefix + question[:1].lower() + question[1:],
                output_text=raw.answer.strip(),
            )
        )
    return pairs
