"""Minimal utilities for the SpeakerScript MCP server."""

from datetime import datetime
from pathlib import Path
from typing import Any

EXPORT_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def validate_file_path(file_path: str) -> None:
    """
    Validate file path for security and existence.

    Args:
        file_path: Path to validate

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If path is invalid or unsafe
    """
    if not file_path or not isinstance(file_path, str):
        raise ValueError("Invalid file path")

    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    # Basic security: prevent directory traversal
    if ".." in path.parts:
        raise ValueError("Directory traversal not allowed")

    if not (path.is_file() or path.is_dir()):
        raise ValueError("Path must point to a file or directory")


def get_file_info(file_path: str) -> dict[str, Any]:
    """
    Get basic file information.

    Args:
        file_path: Path to the file

    Returns:
        File metadata
    """
    path = Path(file_path)
    stat = path.stat()

    return {
        "filename": path.name,
        "extension": path.suffix.lower(),
        "size_bytes": stat.st_size,
        "size_kb": round(stat.st_size / 1024, 2),
        "modified": stat.st_mtime,
        "absolute_path": str(path.absolute()),
        "is_file": path.is_file(),
        "is_directory": path.is_dir(),
    }


def export_filename(prefix: str, active_count: int, speaker_count: int, now: datetime | None = None) -> str:
    """
    Build an export filename.

    Args:
        prefix: Leading part of the name
        active_count: Number of active speakers
        speaker_count: Number of known speakers
        now: Timestamp to embed, defaults to the current local time

    Returns:
        ``<prefix>_<timestamp>_filtered_<N>speakers.txt`` or ``<prefix>_<timestamp>_full.txt``
    """
    timestamp = (now or datetime.now()).strftime(EXPORT_TIMESTAMP_FORMAT)
    suffix = f"_filtered_{active_count}speakers" if active_count < speaker_count else "_full"
    return f"{prefix}_{timestamp}{suffix}.txt"
