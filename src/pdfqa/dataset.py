# src/pdfqa/dataset.py
"""Dataset export: cached Q&A pairs to newline-delimited JSON."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from pdfqa.exceptions import EmptyDatasetError
from pdfqa.models import QAPair

DEFAULT_DATASET_FILENAME = "qa_dataset.json"


def ordered_pairs(
    cache: Mapping[int, Sequence[QAPair]],
    chunk_order: Iterable[int] | None = None,
) -> list[QAPair]:
    """Flatten the cache into one list.

    Args:
        cache: Pairs keyed by chunk id
        chunk_order: Chunk ids in the order to export. Ids without cached
                     pairs are skipped. Default: the cache's own order.

    Returns:
        Pairs ordered by chunk, then by generation order within a chunk
    """
    order = list(chunk_order) if chunk_order is not None else list(cache)
    pairs: list[QAPair] = []
    for chunk_id in order:
        pairs.extend(cache.get(chunk_id, ()))
    return pairs


def dataset_lines(
    cache: Mapping[int, Sequence[QAPair]],
    chunk_order: Iterable[int] | None = None,
) -> list[str]:
    """Serialize each pair as a compact ``{"messages": [...]}`` JSON line."""
    return [
        json.dumps(pair.to_messages(), ensure_ascii=False, separators=(",", ":"))
        for pair in ordered_pairs(cache, chunk_order)
    ]


def serialize_dataset(
    cache: Mapping[int, Sequence[QAPair]],
    chunk_order: Iterable[int] | None = None,
) -> str:
    """Join the dataset lines with newlines (no trailing newline)."""
    return "\n".join(dataset_lines(cache, chunk_order))


def write_dataset(
    path: str | Path,
    cache: Mapping[int, Sequence[QAPair]],
    chunk_order: Iterable[int] | None = None,
) -> int:
    """Write the dataset to ``path``.

    The file keeps the ``.json`` name downstream tools expect even though
    its content is newline-delimited JSON.

    Returns:
        Number of pairs written

    Raises:
        EmptyDatasetError: If there are no pairs to write
    """
    lines = dataset_lines(cache, chunk_order)
    if not lines:
        raise EmptyDatasetError()

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))
    return len(lines)
