"""Speaker filtering and lossless transcript reconstruction."""

from collections.abc import Iterable, Sequence

from .transcript import Segment


def render(
    segments: Sequence[Segment],
    speakers: set[str],
    active: set[str],
    original_text: str,
) -> str:
    """
    Rebuild transcript text limited to the active speakers.

    With every speaker active the original text is returned untouched, so
    header lines and spacing outside any segment survive.

    Args:
        segments: Parsed segments in document order
        speakers: All known speakers
        active: Speakers to include
        original_text: Text the segments were parsed from

    Returns:
        Filtered transcript text
    """
    if not active:
        return ""

    if len(active) == len(speakers):
        return original_text

    blocks = ["\n".join(segment.original_lines) for segment in segments if segment.speaker in active]
    return "\n\n".join(blocks)


def toggle_speaker(active: Iterable[str], speaker: str) -> set[str]:
    """Return a copy of the active set with one speaker flipped in or out."""
    toggled = set(active)
    if speaker in toggled:
        toggled.remove(speaker)
    else:
        toggled.add(speaker)
    return toggled


def clear_filters(speakers: Iterable[str]) -> set[str]:
    """Make every known speaker active again."""
    return set(speakers)


def segment_count(segments: Iterable[Segment], speaker: str) -> int:
    return sum(1 for segment in segments if segment.speaker == speaker)
