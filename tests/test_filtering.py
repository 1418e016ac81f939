"""Tests for speaker filtering and reconstruction."""

import pytest

from speakerscript.filtering import clear_filters, render, segment_count, toggle_speaker
from speakerscript.transcript import parse_transcript


@pytest.fixture
def parsed(interview):
    segments, speakers = parse_transcript(interview)
    return segments, speakers, interview


class TestRender:
    """Test cases for render."""

    def test_all_speakers_returns_original(self, parsed):
        """Selecting everyone reproduces the text byte for byte, header included."""
        segments, speakers, text = parsed

        assert render(segments, speakers, set(speakers), text) == text

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "header\n[00:00:01:00 - 00:00:02:00]\nA\nx",
            "  leading\r\n[00:00:01:00 - 00:00:02:00]\r\nA\r\nx\r\n\r\n",
        ],
    )
    def test_round_trip_identity(self, text):
        segments, speakers = parse_transcript(text)
        assert render(segments, speakers, speakers, text) == text

    def test_markerless_text_renders_empty(self):
        """With no parsed speakers the active set is empty, so nothing is shown."""
        segments, speakers = parse_transcript("just a title")

        assert render(segments, speakers, speakers, "just a title") == ""

    def test_no_active_speakers_returns_empty(self, parsed):
        segments, speakers, text = parsed

        assert render(segments, speakers, set(), text) == ""

    def test_single_speaker_of_two(self, two_speakers):
        """Deactivating BOB leaves exactly ALICE's three source lines."""
        segments, speakers = parse_transcript(two_speakers)

        result = render(segments, speakers, {"ALICE"}, two_speakers)

        assert result == "[00:00:01:00 - 00:00:05:00]\nALICE\nHello there."

    def test_blocks_joined_with_blank_line(self, parsed):
        """Selected segments keep document order with a blank line between blocks."""
        segments, speakers, text = parsed

        result = render(segments, speakers, {"ALICE"}, text)

        assert result == (
            "[00:00:01:00 - 00:00:04:12]\nALICE\nThanks for coming in today.\n"
            "\n\n"
            "[00:00:12:01 - 00:00:15:20]\nALICE\nYes, first question.\n"
        )
        assert "Interview - Take 3" not in result

    def test_subset_is_subsequence(self, parsed):
        """Narrowing the active set only removes blocks."""
        segments, speakers, text = parsed

        def rendered_ids(active):
            output = render(segments, speakers, active, text)
            return [s.id for s in segments if "\n".join(s.original_lines) in output]

        wide = rendered_ids({"ALICE", "BOB"})
        narrow = rendered_ids({"BOB"})

        assert narrow == [segment_id for segment_id in wide if segment_id in narrow]
        assert len(narrow) == 1
        assert len(wide) == 3


class TestToggleAndClear:
    """Test cases for filter state changes."""

    def test_toggle_removes_and_adds(self):
        assert toggle_speaker({"ALICE", "BOB"}, "BOB") == {"ALICE"}
        assert toggle_speaker({"ALICE"}, "BOB") == {"ALICE", "BOB"}

    def test_toggle_does_not_mutate(self):
        active = {"ALICE", "BOB"}
        toggle_speaker(active, "ALICE")
        assert active == {"ALICE", "BOB"}

    def test_toggle_twice_restores_output(self, parsed):
        segments, speakers, text = parsed
        active = {"ALICE", "CAROL"}
        before = render(segments, speakers, active, text)

        twice = toggle_speaker(toggle_speaker(active, "BOB"), "BOB")

        assert twice == active
        assert render(segments, speakers, twice, text) == before

    def test_clear_filters_activates_everyone(self):
        """Clearing filters shows everything rather than nothing."""
        speakers = {"ALICE", "BOB"}
        active = clear_filters(speakers)

        assert active == speakers
        assert active is not speakers


def test_segment_count(parsed):
    segments, _, _ = parsed

    assert segment_count(segments, "ALICE") == 2
    assert segment_count(segments, "CAROL") == 1
    assert segment_count(segments, "DAVE") == 0
