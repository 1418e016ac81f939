"""Timecode-delimited transcript segmentation."""

import logging
import re
import uuid
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# [HH:MM:SS:FF - HH:MM:SS:FF], matched against the whole stripped line
MARKER_PATTERN = re.compile(r"\[(\d{2}:\d{2}:\d{2}:\d{2})\s*-\s*(\d{2}:\d{2}:\d{2}:\d{2})\]")

# CRLF counts as one break; form feeds and file separators are not newlines
NEWLINE_PATTERN = re.compile(r"\r\n|[\n\r\u0085\u2028\u2029]")


class Segment(BaseModel):
    """One speaker turn: marker, speaker name, merged text and its source lines."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    timecode_raw: str
    start_time: str
    end_time: str
    speaker: str
    text: str
    original_lines: list[str]


@dataclass
class _PartialSegment:
    timecode_raw: str
    start_time: str
    end_time: str
    speaker: str = ""
    text: str = ""
    original_lines: list[str] = field(default_factory=list)

    def absorb(self, line: str) -> None:
        """Add a non-marker line to the segment being accumulated."""
        self.original_lines.append(line)
        stripped = line.strip()
        if not stripped:
            return
        if not self.speaker:
            self.speaker = stripped
        elif self.text:
            self.text = f"{self.text} {stripped}"
        else:
            self.text = stripped

    def finalize(self) -> Segment | None:
        """Return the finished segment, or None when speaker or text is missing."""
        if not self.speaker or not self.text:
            return None
        return Segment(
            timecode_raw=self.timecode_raw,
            start_time=self.start_time,
            end_time=self.end_time,
            speaker=self.speaker,
            text=self.text,
            original_lines=list(self.original_lines),
        )


def is_marker_line(line: str) -> bool:
    """Check whether a line is a timecode range marker."""
    return MARKER_PATTERN.fullmatch(line.strip()) is not None


def parse_transcript(raw_text: str) -> tuple[list[Segment], set[str]]:
    """
    Split a bracketed-timecode transcript into speaker segments.

    Lines before the first marker are ignored. A marker that is not followed
    by both a speaker line and at least one text line produces no segment.

    Args:
        raw_text: Transcript text, any newline convention

    Returns:
        Segments in document order and the set of their speakers
    """
    finished: list[Segment | None] = []
    partial: _PartialSegment | None = None

    for line in NEWLINE_PATTERN.split(raw_text):
        stripped = line.strip()
        match = MARKER_PATTERN.fullmatch(stripped)
        if match:
            if partial is not None:
                finished.append(partial.finalize())
            start_time, end_time = match.groups()
            partial = _PartialSegment(
                timecode_raw=stripped,
                start_time=start_time,
                end_time=end_time,
                original_lines=[stripped],
            )
        elif partial is not None:
            partial.absorb(line)

    if partial is not None:
        finished.append(partial.finalize())

    segments = [segment for segment in finished if segment is not None]
    speakers = {segment.speaker for segment in segments}
    logger.debug(
        "Parsed %d segments (%d incomplete dropped), %d speakers",
        len(segments),
        len(finished) - len(segments),
        len(speakers),
    )
    return segments, speakers
