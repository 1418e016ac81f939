"""Character, word and time-span statistics for transcript text."""

from collections.abc import Sequence

from pydantic import BaseModel

from .transcript import Segment

TIME_RANGE_PLACEHOLDER = "--:--:-- - --:--:--"


class TranscriptStats(BaseModel):
    character_count: int
    word_count: int
    time_range: str


def compute_stats(text: str, segments: Sequence[Segment]) -> TranscriptStats:
    """
    Compute stats for the current text.

    The time range spans the first and last segments by position, not by
    timecode value.

    Args:
        text: Filtered or full transcript text
        segments: All parsed segments in document order

    Returns:
        Character count, word count and time range
    """
    if segments:
        time_range = f"{segments[0].start_time} - {segments[-1].end_time}"
    else:
        time_range = TIME_RANGE_PLACEHOLDER

    return TranscriptStats(
        character_count=len(text),
        word_count=len(text.split()),
        time_range=time_range,
    )
