"""Tests for prfect.formatters module."""

import json
from datetime import datetime, timezone

import pytest

from prfect.formatters import (
    DEFAULT_BODY,
    DEFAULT_TITLE,
    PRMessageJSON,
    count_reasoning_markers,
    extract_reasoning_contents,
    extract_title_and_body,
    format_content,
    generate_filename,
    has_reasoning_markers,
    limit_lines,
    render_pr_json,
    save_message,
    strip_ansi_codes,
    strip_reasoning,
    validate_file_extension,
)


class TestStripReasoning:
    """Tests for strip_reasoning function."""

    def test_removes_single_line_block(self):
        """Test removing a block on one line."""
        assert strip_reasoning("<think>hmm</think>Final answer") == "Final answer"

    def test_removes_multiline_block(self):
        """Test removing a block that spans lines."""
        text = "<think>\nline one\nline two\n</think>\n\n# Title\nBody"
        assert strip_reasoning(text) == "# Title\nBody"

    def test_removes_each_block_and_keeps_spacing(self):
        """Test several blocks are removed without touching the text between them."""
        text = "A <think>x</think> B <think>y</think> C"
        assert strip_reasoning(text) == "A  B  C"

    def test_is_case_insensitive(self):
        """Test upper case tags are removed too."""
        assert strip_reasoning("<THINK>x</Think>done") == "done"

    def test_non_greedy_matching(self):
        """Test that text between two blocks survives."""
        text = "<think>a</think>keep<think>b</think>"
        assert strip_reasoning(text) == "keep"

    def test_empty_block(self):
        """Test an empty block is removed."""
        assert strip_reasoning("<think></think>Result") == "Result"

    def test_angle_brackets_inside_block(self):
        """Test nested markup inside a block is removed with it."""
        assert strip_reasoning("<think>if a < b and <tag></think>Answer") == "Answer"

    def test_unclosed_tag_is_kept(self):
        """Test an unclosed tag is left alone."""
        assert strip_reasoning("<think>never closed\nText") == "<think>never closed\nText"

    def test_trims_result(self):
        """Test surrounding whitespace is trimmed."""
        assert strip_reasoning("  \n Text \n ") == "Text"

    @pytest.mark.parametrize(
        "text",
        ["", "plain", "<think>x</think>", "  padded  ", "<think>open only"],
    )
    def test_preserve_is_identity(self, text):
        """Test preserve=True returns the input unchanged."""
        assert strip_reasoning(text, preserve=True) == text


class TestReasoningHelpers:
    """Tests for reasoning detection, counting and extraction."""

    def test_detects_markers(self):
        """Test detection of complete blocks only."""
        assert has_reasoning_markers("a <think>b</think> c") is True
        assert has_reasoning_markers("no tags") is False
        assert has_reasoning_markers("<think>unclosed") is False

    def test_counts_markers(self):
        """Test counting blocks, including multiline ones."""
        text = "<think>one</think> mid <think>\ntwo\n</think> end <think>three</think>"
        assert count_reasoning_markers(text) == 3
        assert count_reasoning_markers("nothing here") == 0

    def test_extracts_trimmed_contents(self):
        """Test inner text is returned trimmed and in order."""
        text = "<think>  first </think>x<think>\nsecond\n</think>"
        assert extract_reasoning_contents(text) == ["first", "second"]

    def test_count_matches_extraction(self, sample_llm_response):
        """Test count and extraction agree."""
        assert count_reasoning_markers(sample_llm_response) == len(
            extract_reasoning_contents(sample_llm_response)
        )


class TestLimitLines:
    """Tests for limit_lines function."""

    def test_truncates(self):
        """Test keeping the first lines."""
        assert limit_lines("a\nb\nc\nd", 2) == "a\nb"

    def test_shorter_input_unchanged(self):
        """Test short input is returned as-is."""
        assert limit_lines("a\nb", 5) == "a\nb"

    def test_zero_lines(self):
        """Test a zero limit yields empty text."""
        assert limit_lines("a\nb", 0) == ""

    @pytest.mark.parametrize("limit", [0, 1, 3, 10])
    def test_idempotent(self, limit):
        """Test applying the limit twice changes nothing."""
        text = "\n".join(str(i) for i in range(7))
        once = limit_lines(text, limit)
        assert limit_lines(once, limit) == once
        assert len(once.split("\n")) <= max(limit, 1)


class TestExtractTitleAndBody:
    """Tests for extract_title_and_body function."""

    def test_markdown_heading(self):
        """Test heading markers are stripped from the title."""
        result = extract_title_and_body("# Fix bug\n\nDetails here.")
        assert result.title == "Fix bug"
        assert result.body == "Details here."

    def test_conventional_prefix(self):
        """Test conventional commit prefixes are stripped."""
        assert extract_title_and_body("feat: Add login\nMore text") == ("Add login", "More text")

    def test_conventional_prefix_case_insensitive(self):
        """Test prefixes are matched regardless of case."""
        assert extract_title_and_body("## FIX: Crash on start").title == "Crash on start"

    def test_leading_blank_lines(self):
        """Test blank lines before the title are skipped."""
        result = extract_title_and_body("\n\n   \n### Title\n\n\nLine 1\n\nLine 2")
        assert result.title == "Title"
        assert result.body == "Line 1\n\nLine 2"

    def test_empty_message(self):
        """Test placeholders for an empty message."""
        assert extract_title_and_body("") == (DEFAULT_TITLE, DEFAULT_BODY)

    def test_title_only(self):
        """Test body placeholder when only a title exists."""
        assert extract_title_and_body("# Only title") == ("Only title", DEFAULT_BODY)

    def test_heading_only_marker(self):
        """Test a line of just hashes falls back to the title placeholder."""
        assert extract_title_and_body("###\nBody text").title == DEFAULT_TITLE


class TestRenderPrJson:
    """Tests for JSON rendering."""

    def test_key_order_and_values(self):
        """Test the keys and their order."""
        output = render_pr_json("# Title\n\nBody", "feature/x", "main")
        data = json.loads(output)

        assert list(data.keys()) == ["title", "body", "source_branch", "target_branch"]
        assert data == {
            "title": "Title",
            "body": "Body",
            "source_branch": "feature/x",
            "target_branch": "main",
        }

    def test_model_field_order(self):
        """Test the pydantic model declares fields in output order."""
        assert list(PRMessageJSON.model_fields) == [
            "title",
            "body",
            "source_branch",
            "target_branch",
        ]


class TestFileHelpers:
    """Tests for filename and file helpers."""

    def test_generate_filename_pattern(self):
        """Test the timestamp format."""
        now = datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)
        assert generate_filename(now=now) == "pr_message_2024-05-01T12-30-45.md"

    def test_generate_filename_custom(self):
        """Test prefix and extension overrides."""
        now = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert generate_filename("pr", "txt", now=now) == "pr_2024-01-02T03-04-05.txt"

    def test_generate_filename_has_no_colons(self):
        """Test default filenames are safe on every filesystem."""
        name = generate_filename()
        assert ":" not in name
        assert name.startswith("pr_message_")
        assert name.endswith(".md")

    def test_validate_file_extension(self):
        """Test allowed extensions."""
        assert validate_file_extension("notes.md") is True
        assert validate_file_extension("notes.TXT") is True
        assert validate_file_extension("notes.pdf") is False
        assert validate_file_extension("notes") is False
        assert validate_file_extension("notes.pdf", ("pdf",)) is True

    def test_save_message_with_name(self, temp_dir):
        """Test saving to an explicit filename."""
        path = save_message("# Title", "out.md", directory=temp_dir)

        assert path == temp_dir / "out.md"
        assert path.read_text(encoding="utf-8") == "# Title"

    def test_save_message_generated_name(self, temp_dir):
        """Test saving with a generated filename."""
        path = save_message("# Title", directory=temp_dir)

        assert path.parent == temp_dir
        assert path.name.startswith("pr_message_")


class TestTextCleanup:
    """Tests for format_content and strip_ansi_codes."""

    def test_format_content(self):
        """Test blank line collapsing and trailing space removal."""
        assert format_content("\n\nA  \n\n\n\nB\t\n") == "A\n\nB"

    def test_strip_ansi_codes(self):
        """Test color codes are removed."""
        assert strip_ansi_codes("\x1b[32m[INFO]\x1b[0m ready") == "[INFO] ready"
