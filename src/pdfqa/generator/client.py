# src/pdfqa/generator/client.py
"""Client-based Q&A generator with structured output and retries."""

from __future__ import annotations

import asyncio
import json
import re
from collections.abc import Sequence
from typing import Any

from pdfqa.generator.base import QAGenerator
from pdfqa.generator.exceptions import ResponseFormatError
from pdfqa.generator.retry import RetryPolicy, SleepFunc, aretry
from pdfqa.models import Attachment, RawPair
from pdfqa.providers.base import LLMClient

QA_PROMPT = """You are an expert at creating question-and-answer pairs from technical documents for fine-tuning datasets.
Your task is to analyze the provided content, which includes text and may include images (like diagrams, schematics, or flowcharts), and generate a list of questions and their corresponding answers.

RULES:
- Generate as many relevant Q&A pairs as the content supports.
- If the content includes images (like diagrams, flowcharts, or tables embedded as images), analyze the visual information:
    - Extract text from the image (e.g., labels, values, titles).
    - Understand graphical elements (e.g., blocks, arrows, lines, their spatial relationships) to interpret processes, relationships, or sequences.
    - Integrate visual understanding with any accompanying text to form comprehensive Q&A pairs.
- When generating answers for information found in a table (whether text-based or image-based), identify the key attributes (column headers) that describe each row's entry. The answer must concisely summarize ALL relevant information found in the same row, including the values from these identified key attribute columns and the description.
- Questions MUST be specific enough to allow direct retrieval from the provided content. For information originating from a specific section or an element within an image, the question should implicitly or explicitly reference the relevant part (e.g., "According to the timing diagram, what is the speed of the conveyor?").
- While concise, questions should contain sufficient detail to differentiate between similar concepts if they appear in different contexts within the document or image.
- For questions derived from table data or diagrams, ensure the question prompts for the specific data point or relationship.
- For non-table/non-diagram text content, answers must be extracted directly from the provided text and be concise.
- If the content is unsuitable for creating Q&A pairs (e.g., it's just a list of names, irrelevant content, or a blank image), return an empty array.
- Do not create questions about document metadata like page numbers, headers, or footers.
- You must respond in the specified JSON format.

TEXT TO ANALYZE:
---
{text}
---
"""

NO_TEXT_PLACEHOLDER = "(No text provided, analyze images only)"

QA_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "question": {
                "type": "string",
                "description": (
                    "A simple, context-free question generated from the provided "
                    "text and/or images."
                ),
            },
            "answer": {
                "type": "string",
                "description": (
                    "The answer to the question, taken directly from the text and/or images."
                ),
            },
        },
        "required": ["question", "answer"],
    },
}

QA_RESPONSE_FORMAT: dict[str, Any] = {
    "type": "json_schema",
    "json_schema": {"name": "qa_pairs", "schema": QA_RESPONSE_SCHEMA},
}


class ClientQAGenerator(QAGenerator):
    """Q&A generator that uses an LLMClient with a strict output schema.

    One call is made per piece of content. Transient failures are retried
    according to a RetryPolicy; permission and location refusals are not.

    Example:
        from pdfqa.providers.litellm import LiteLLMClient
        from pdfqa.generator import ClientQAGenerator

        client = LiteLLMClient(model="gemini/gemini-2.5-flash")
        generator = ClientQAGenerator(llm_client=client)
        pairs = await generator.agenerate(text, [Attachment(data=pdf_bytes)])
    """

    def __init__(
        self,
        llm_client: LLMClient,
        prompt_template: str | None = None,
        temperature: float | None = 0.0,
        retry_policy: RetryPolicy | None = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        """Initialize the generator.

        Args:
            llm_client: Any LLMClient implementation
            prompt_template: Custom prompt with a {text} placeholder
            temperature: LLM temperature. Default 0.0 (most deterministic).
            retry_policy: Attempt budget and backoff. Default: RetryPolicy()
            sleep: Awaitable sleep used between attempts
        """
        self._client = llm_client
        self.prompt_template = prompt_template or QA_PROMPT
        self.temperature = temperature
        self.retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep

    def _build_prompt(self, text: str) -> str:
        return self.prompt_template.format(text=text or NO_TEXT_PLACEHOLDER)

    def _build_messages(self, text: str, attachments: Sequence[Attachment]) -> list[dict]:
        """Build a single user message with the prompt and every attachment inline."""
        parts: list[dict[str, Any]] = [{"type": "text", "text": self._build_prompt(text)}]
        for attachment in attachments:
            if attachment.is_image:
                parts.append(
                    {"type": "image_url", "image_url": {"url": attachment.to_data_url()}}
                )
            else:
                parts.append({"type": "file", "file": {"file_data": attachment.to_data_url()}})
        return [{"role": "user", "content": parts}]

    def _parse_response(self, response_text: str) -> list[RawPair]:
        """Parse the response into raw pairs, rejecting anything off-schema."""
        response_text = response_text.strip()

        # Handle potential markdown code blocks
        json_match = re.search(r"```(?:json)?\n(.*?)\n```", response_text, re.DOTALL)
        if json_match:
            response_text = json_match.group(1)

        try:
            parsed = json.loads(response_text)
        except json.JSONDecodeError as e:
            raise ResponseFormatError(f"Failed to parse JSON response: {e}") from e

        if not isinstance(parsed, list) or not all(
            isinstance(item, dict) and "question" in item and "answer" in item for item in parsed
        ):
            raise ResponseFormatError("Generated JSON does not match the required Q&A format.")

        return [
            RawPair(
                question=item["question"] if isinstance(item["question"], str) else None,
                answer=item["answer"] if isinstance(item["answer"], str) else None,
            )
            for item in parsed
        ]

    async def _attempt(self, messages: list[dict]) -> list[RawPair]:
        response_text = await self._client.acomplete(
            messages=messages,
            temperature=self.temperature,
            response_format=QA_RESPONSE_FORMAT,
        )
        return self._parse_response(response_text)

    async def agenerate(
        self, text: str, attachments: Sequence[Attachment] = ()
    ) -> list[RawPair]:
        """Generate raw pairs for a chunk's text and attachments.

        Raises:
            AccessDeniedError, LocationUnsupportedError: Immediately, without retry
            RateLimitedError, GenerationFailedError: After all attempts fail
        """
        if not text.strip() and not attachments:
            return []

        messages = self._build_messages(text, attachments)
        return await aretry(lambda: self._attempt(messages), self.retry_policy, self._sleep)
