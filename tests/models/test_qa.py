# tests/models/test_qa.py
"""Tests for Q&A and attachment models."""

import base64

from pdfqa.models import Attachment, QAPair, RawPair


class TestRawPair:
    def test_fields_default_to_none(self):
        raw = RawPair()
        assert raw.question is None
        assert raw.answer is None


class TestQAPair:
    def test_to_messages_uses_user_and_model_roles(self):
        pair = QAPair(input_text="What is X?", output_text="Y.")
        assert pair.to_messages() == {
            "messages": [
                {"role": "user", "content": "What is X?"},
                {"role": "model", "content": "Y."},
            ]
        }


class TestAttachment:
    def test_defaults_to_pdf(self):
        attachment = Attachment(data=b"%PDF-1.7")
        assert attachment.mime_type == "application/pdf"
        assert attachment.is_image is False

    def test_data_url(self):
        attachment = Attachment(data=b"abc", mime_type="image/png")
        encoded = base64.b64encode(b"abc").decode("ascii")
        assert attachment.to_data_url() == f"data:image/png;base64,{encoded}"
        assert attachment.is_image is True
