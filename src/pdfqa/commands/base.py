# src/pdfqa/commands/base.py
"""Base types for the commands layer.

This module defines the data structures used by all commands:
- Progress callbacks for long-running operations
- Result types for each command
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class CommandStage(Enum):
    """Stages of command execution for progress reporting."""

    LOADING = "Loading"
    SPLITTING = "Splitting"
    GENERATING = "Generating"
    EXPORTING = "Exporting"
    COMPLETE = "Complete"


@dataclass
class ProgressUpdate:
    """Progress update for long-running operations.

    Attributes:
        stage: Current stage of the operation
        current: Items completed so far
        total: Total number of items (0 for indeterminate)
        message: Optional status message
    """

    stage: CommandStage
    current: int
    total: int
    message: str | None = None

    @property
    def is_indeterminate(self) -> bool:
        """True if progress is indeterminate (total unknown)."""
        return self.total == 0

    @property
    def percentage(self) -> int:
        """Progress as percentage (0-100). Returns 0 if indeterminate."""
        if self.total == 0:
            return 0
        return int(100 * self.current / self.total)


# Callback type for progress updates
ProgressCallback = Callable[[ProgressUpdate], None]


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class ChunkInfo:
    """A chunk as shown to the user."""

    id: int
    start_page: int
    end_page: int
    context_title: str | None = None
    pairs: int = 0


@dataclass
class InspectResult(CommandResult):
    """Result of the inspect command.

    Attributes:
        name: File name of the document
        page_count: Number of pages
        has_outline: True if the document has a table of contents
        is_text_based: True if the first page has extractable text
    """

    name: str = ""
    page_count: int = 0
    has_outline: bool = False
    is_text_based: bool = False


@dataclass
class SplitResult(CommandResult):
    """Result of the split command."""

    name: str = ""
    page_count: int = 0
    chunks: list[ChunkInfo] = field(default_factory=list)


@dataclass
class GenerateResult(CommandResult):
    """Result of the generate command.

    A halted run is unsuccessful but still reports (and exports) what was
    generated before the failure.

    Attributes:
        chunks_total: Chunks scheduled for generation
        chunks_completed: Chunks that finished before any failure
        failed_chunk_id: Id of the chunk that halted the run, if any
        pairs_written: Pairs written to the dataset file
        output_path: Path of the dataset file, if one was written
        chunks: Per-chunk breakdown
    """

    chunks_total: int = 0
    chunks_completed: int = 0
    failed_chunk_id: int | None = None
    pairs_written: int = 0
    output_path: str | None = None
    chunks: list[ChunkInfo] = field(default_factory=list)


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command."""

    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None
    api_key_set: bool = False
    api_key_source: str | None = None  # "PDFQA_API_KEY" or "provider env var"
    warnings: list[str] = field(default_factory=list)
