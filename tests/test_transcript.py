"""Unit tests for the transcript and fenced block extraction."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from asciichat.session import Message, Speaker, Transcript, extract_fenced_block

single_line = st.text(alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\n\r"), max_size=40)


class TestTranscript:
    """Tests for Transcript."""

    def test_messages_keep_insertion_order(self):
        """Test that messages stay in order."""
        transcript = Transcript()
        transcript.append(Speaker.USER, "hello")
        transcript.append(Speaker.ASSISTANT, "hi there")

        assert [(m.role, m.text) for m in transcript] == [
            (Speaker.USER, "hello"),
            (Speaker.ASSISTANT, "hi there"),
        ]
        assert len(transcript) == 2

    def test_flatten_prefixes_role_labels(self):
        """Test the sender labels in flattened text."""
        transcript = Transcript()
        transcript.append(Speaker.USER, "hello")
        transcript.append(Speaker.ASSISTANT, "hi there")
        assert transcript.flatten() == "You: hello\nChatGPT: hi there"

    def test_empty_transcript_flattens_to_empty_string(self):
        """Test flattening an empty transcript."""
        assert Transcript().flatten() == ""

    def test_messages_are_immutable(self):
        """Test that messages cannot be changed."""
        message = Message(role=Speaker.USER, text="hello")
        with pytest.raises(ValueError):
            message.text = "changed"  # type: ignore[misc]

    @given(st.lists(st.tuples(st.sampled_from(list(Speaker)), single_line), max_size=10))
    def test_flatten_split_round_trip(self, turns):
        """Property test: splitting the flattened text gives the rendered lines back."""
        transcript = Transcript()
        for role, text in turns:
            transcript.append(role, text)

        flat = transcript.flatten()
        if not turns:
            assert flat == ""
        else:
            assert flat.split("\n") == transcript.rendered_lines()


class TestExtractFencedBlock:
    """Tests for fenced block extraction."""

    def test_two_markers_give_inclusive_span(self):
        """Test extraction with two markers."""
        text = "Here you go: ```code``` enjoy"
        assert extract_fenced_block(text) == "```code```"

    def test_multiline_art(self):
        """Test extraction of multi-line art."""
        art = "```\n /\\_/\\\n( o.o )\n```"
        assert extract_fenced_block(f"A cat:\n{art}\nDone.") == art

    def test_span_runs_from_first_to_last_marker(self):
        """Test that inner markers are kept."""
        text = "```a``` and ```b```"
        assert extract_fenced_block(text) == text

    @pytest.mark.parametrize("text", ["no art here", "just one ``` marker", ""])
    def test_fewer_than_two_markers(self, text: str):
        """Test that fewer than two markers give None."""
        assert extract_fenced_block(text) is None

    def test_four_backticks_count_as_two_markers(self):
        """Test overlapping markers."""
        assert extract_fenced_block("x````y") == "````"

    @given(st.text(alphabet="ab `\n", max_size=30))
    def test_extracted_block_is_bracketed_by_markers(self, text: str):
        """Property test: any extraction starts and ends with the marker."""
        block = extract_fenced_block(text)
        if block is None:
            assert text.find("```") == text.rfind("```")
        else:
            assert block.startswith("```")
            assert block.endswith("```")
            assert block in text
