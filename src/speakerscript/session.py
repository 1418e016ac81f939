"""Transcript state and the load/filter/export events applied to it."""

import logging
from datetime import datetime
from pathlib import Path

from . import filtering
from .converter import TranscriptReader
from .stats import TranscriptStats, compute_stats
from .transcript import Segment, parse_transcript
from .utils import export_filename

logger = logging.getLogger(__name__)


class TranscriptSession:
    """
    Holds one loaded transcript and the current speaker selection.

    Callers serialize mutations; filtered text and stats are derived on read.
    """

    def __init__(self) -> None:
        self.original_text = ""
        self.segments: list[Segment] = []
        self.speakers: set[str] = set()
        self.active_speakers: set[str] = set()

    def load(self, text: str) -> None:
        """Replace the current transcript and make every speaker active."""
        self.original_text = text
        self.segments, self.speakers = parse_transcript(text)
        self.active_speakers = filtering.clear_filters(self.speakers)
        logger.info("Loaded transcript: %d segments, %d speakers", len(self.segments), len(self.speakers))

    def load_file(self, file_path: str, reader: TranscriptReader) -> None:
        """
        Read a transcript file and load it.

        Args:
            file_path: Path to the transcript export
            reader: Reader used to turn the file into text

        Raises:
            FileNotFoundError, ValueError, UnicodeDecodeError: If the file cannot be read
            markitdown exceptions: If a rich document cannot be converted
        """
        try:
            text = reader.read(file_path)
        except Exception as e:
            logger.error("Failed to load transcript %s: %s", file_path, e)
            raise
        self.load(text)

    def toggle_speaker(self, speaker: str) -> None:
        """
        Include or exclude one speaker.

        Raises:
            ValueError: If the speaker is not in the loaded transcript
        """
        if speaker not in self.speakers:
            raise ValueError(f"Unknown speaker: {speaker}")
        self.active_speakers = filtering.toggle_speaker(self.active_speakers, speaker)

    def clear_filters(self) -> None:
        self.active_speakers = filtering.clear_filters(self.speakers)

    def clear(self) -> None:
        """Drop the loaded transcript."""
        self.original_text = ""
        self.segments = []
        self.speakers = set()
        self.active_speakers = set()
        logger.info("Transcript cleared")

    @property
    def filtered_text(self) -> str:
        # text without any segments is shown as loaded, there is nothing to filter
        if not self.speakers:
            return self.original_text
        return filtering.render(self.segments, self.speakers, self.active_speakers, self.original_text)

    @property
    def stats(self) -> TranscriptStats:
        return compute_stats(self.filtered_text, self.segments)

    @property
    def is_filtered(self) -> bool:
        return len(self.active_speakers) < len(self.speakers)

    def segment_count(self, speaker: str) -> int:
        return filtering.segment_count(self.segments, speaker)

    def export_filename(self, prefix: str, now: datetime | None = None) -> str:
        return export_filename(prefix, len(self.active_speakers), len(self.speakers), now)

    def export(self, directory: str, prefix: str, now: datetime | None = None) -> Path:
        """
        Write the filtered text to a timestamped file.

        Args:
            directory: Destination directory
            prefix: Filename prefix
            now: Timestamp for the filename, defaults to the current time

        Returns:
            Path of the written file

        Raises:
            ValueError: If there is no content to export
            OSError: If the file cannot be written
        """
        content = self.filtered_text
        if not content:
            raise ValueError("No transcript content to export")

        path = Path(directory) / self.export_filename(prefix, now)
        try:
            path.write_text(content, encoding="utf-8", newline="")
        except OSError as e:
            logger.error("Failed to export transcript to %s: %s", path, e)
            raise

        logger.info("Exported %d characters to %s", len(content), path)
        return path
