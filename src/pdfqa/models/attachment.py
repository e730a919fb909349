# src/pdfqa/models/attachment.py
"""Attachment data model."""

import base64

from pydantic import BaseModel


class Attachment(BaseModel):
    """Binary content sent inline to the generator alongside the text prompt."""

    data: bytes
    mime_type: str = "application/pdf"

    def to_data_url(self) -> str:
        """Encode the attachment as a base64 ``data:`` URL."""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")
