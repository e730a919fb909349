# src/pdfqa/commands/__init__.py
"""UI-agnostic command layer for pdfqa.

Commands return data structures, allowing UIs to render results appropriately.

Usage:
    from pdfqa.commands import generate, inspect

    info = inspect.inspect("manual.pdf")
    result = generate.generate("manual.pdf", on_progress=my_callback)
"""

from pdfqa.commands import config_cmd, generate, inspect, split
from pdfqa.commands.base import (
    ChunkInfo,
    CommandResult,
    CommandStage,
    ConfigResult,
    GenerateResult,
    InspectResult,
    ProgressCallback,
    ProgressUpdate,
    SettingInfo,
    SplitResult,
)

__all__ = [
    # Base types
    "CommandStage",
    "ProgressUpdate",
    "ProgressCallback",
    "CommandResult",
    # Result types
    "ChunkInfo",
    "InspectResult",
    "SplitResult",
    "GenerateResult",
    "ConfigResult",
    "SettingInfo",
    # Command modules
    "inspect",
    "split",
    "generate",
    "config_cmd",
]
