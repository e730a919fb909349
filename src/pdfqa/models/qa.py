# src/pdfqa/models/qa.py
"""Question/answer data models."""

from pydantic import BaseModel


class RawPair(BaseModel):
    """A question/answer pair as returned by the generator, before normalization.

    Either field may be missing or empty; such pairs are dropped by the normalizer.
    """

    question: str | None = None
    answer: str | None = None


class QAPair(BaseModel):
    """An export-ready, context-qualified question/answer pair."""

    input_text: str
    output_text: str

    def to_messages(self) -> dict[str, list[dict[str, str]]]:
        """Return the chat-style record used for one line of the dataset."""
        return {
            "messages": [
                {"role": "user", "content": self.input_text},
                {"role": "model", "content": self.output_text},
            ]
        }
