"""SpeakerScript MCP Server - speaker-filtered transcripts using FastMCP."""

import warnings
from typing import Any

from markitdown import MarkItDown
from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel

from .config import Settings
from .converter import TranscriptReader
from .session import TranscriptSession
from .stats import TranscriptStats
from .utils import get_file_info, validate_file_path

# Suppress pydub ffmpeg warnings since markitdown imports it for audio we never read
warnings.filterwarnings("ignore", message="Couldn't find ffmpeg or avconv", module="pydub")


class SpeakerInfo(BaseModel):
    name: str
    segment_count: int
    active: bool


class TranscriptSummary(BaseModel):
    segment_count: int
    speakers: list[SpeakerInfo]
    stats: TranscriptStats


class FilterResult(BaseModel):
    active_speakers: list[str]
    is_filtered: bool
    filtered_text: str
    stats: TranscriptStats


class SegmentInfo(BaseModel):
    id: str
    start_time: str
    end_time: str
    speaker: str
    text: str


class ExportResult(BaseModel):
    path: str
    filename: str
    character_count: int


# Initialize FastMCP server
mcp = FastMCP("SpeakerScript")
settings = Settings()
reader = TranscriptReader(MarkItDown())
session = TranscriptSession()


def _summary() -> TranscriptSummary:
    speakers = [
        SpeakerInfo(
            name=name,
            segment_count=session.segment_count(name),
            active=name in session.active_speakers,
        )
        for name in sorted(session.speakers)
    ]
    return TranscriptSummary(segment_count=len(session.segments), speakers=speakers, stats=session.stats)


def _filter_result() -> FilterResult:
    return FilterResult(
        active_speakers=sorted(session.active_speakers),
        is_filtered=session.is_filtered,
        filtered_text=session.filtered_text,
        stats=session.stats,
    )


@mcp.tool()
def load_transcript(file_path: str) -> TranscriptSummary:
    """
    Load a timecoded transcript export, replacing any loaded transcript.

    Args:
        file_path: Path to the transcript file (.txt, .md, .docx, .pdf, .html)

    Returns:
        Segment count, speakers and stats for the loaded transcript
    """
    validate_file_path(file_path)
    session.load_file(file_path, reader)
    return _summary()


@mcp.tool()
def load_transcript_text(content: str) -> TranscriptSummary:
    """
    Load transcript text directly, replacing any loaded transcript.

    Args:
        content: Transcript text with [HH:MM:SS:FF - HH:MM:SS:FF] markers

    Returns:
        Segment count, speakers and stats for the loaded transcript
    """
    session.load(content)
    return _summary()


@mcp.tool()
def toggle_speaker(speaker: str) -> FilterResult:
    """
    Include or exclude one speaker from the filtered transcript.

    Args:
        speaker: Speaker name exactly as it appears in the transcript

    Returns:
        Active speakers, filtered text and stats
    """
    session.toggle_speaker(speaker)
    return _filter_result()


@mcp.tool()
def clear_filters() -> FilterResult:
    """Make every speaker active again."""
    session.clear_filters()
    return _filter_result()


@mcp.tool()
def get_filtered_transcript() -> FilterResult:
    """Get the transcript text for the active speakers with its stats."""
    return _filter_result()


@mcp.tool()
def list_segments(speaker: str | None = None) -> list[SegmentInfo]:
    """
    List parsed segments in document order.

    Args:
        speaker: Only return this speaker's segments

    Returns:
        Segment timecodes, speakers and text
    """
    return [
        SegmentInfo(
            id=segment.id,
            start_time=segment.start_time,
            end_time=segment.end_time,
            speaker=segment.speaker,
            text=segment.text,
        )
        for segment in session.segments
        if speaker is None or segment.speaker == speaker
    ]


@mcp.tool()
def clear_transcript() -> TranscriptSummary:
    """Unload the current transcript."""
    session.clear()
    return _summary()


@mcp.tool()
def export_transcript(directory: str | None = None) -> ExportResult:
    """
    Save the filtered transcript to a timestamped text file.

    Args:
        directory: Destination directory, defaults to SPEAKERSCRIPT_EXPORT_DIR

    Returns:
        Path, filename and size of the exported file
    """
    target = directory or settings.export_dir
    validate_file_path(target)
    path = session.export(target, settings.export_prefix)
    return ExportResult(path=str(path), filename=path.name, character_count=session.stats.character_count)


@mcp.tool()
def get_document_info(file_path: str) -> dict[str, Any]:
    """
    Get information about a transcript file without loading it.

    Args:
        file_path: Path to the file

    Returns:
        File metadata
    """
    validate_file_path(file_path)
    return get_file_info(file_path)


if __name__ == "__main__":
    mcp.run()
