"""Tests for the PR description prompt."""

from prfect.git.models import DiffSummary
from prfect.llm.prompts import NO_EMOJIS_INSTRUCTION, compose_prompt


TEMPLATE = "## Summary\n[Description]\n## Changes\n- Change 1\n- Change 2"


class TestComposePrompt:
    """Tests for compose_prompt function."""

    def test_contains_template_and_branches(self, sample_diff_summary):
        """Test template and branch info are embedded."""
        prompt = compose_prompt(TEMPLATE, sample_diff_summary, "feature/test", "main")

        assert "TEMPLATE STRUCTURE TO FOLLOW:\n" + TEMPLATE in prompt
        assert "- Source branch: feature/test" in prompt
        assert "- Target branch: main" in prompt

    def test_sections_in_fixed_order(self, sample_diff_summary):
        """Test the diff fields appear under their headings in order."""
        prompt = compose_prompt(TEMPLATE, sample_diff_summary, "feature/test", "main")

        headings = [
            "TEMPLATE STRUCTURE TO FOLLOW:",
            "BRANCH INFO:",
            "=== COMMIT MESSAGES ===\n" + sample_diff_summary.commit_messages,
            "=== FILE CHANGES SUMMARY ===\n" + sample_diff_summary.file_changes,
            "=== DIFF STATISTICS ===\n" + sample_diff_summary.diff_statistics,
            "=== SAMPLE CODE CHANGES ===\n" + sample_diff_summary.code_sample,
            "INSTRUCTIONS:",
        ]
        positions = [prompt.index(heading) for heading in headings]
        assert positions == sorted(positions)

    def test_instruction_block(self, sample_diff_summary):
        """Test the trailing instructions."""
        prompt = compose_prompt(TEMPLATE, sample_diff_summary, "a", "b")

        assert "- Follow the template structure exactly" in prompt
        assert "- Replace placeholder text with actual content" in prompt
        assert "- Maximum 1000 words total" in prompt
        assert '- Do not use placeholder text like "[Description]"' in prompt
        assert prompt.endswith("Generate the PR description now:")

    def test_emoji_instruction_toggle(self, sample_diff_summary):
        """Test the emoji instruction only appears when requested."""
        with_emojis = compose_prompt(TEMPLATE, sample_diff_summary, "a", "b", no_emojis=False)
        without_emojis = compose_prompt(TEMPLATE, sample_diff_summary, "a", "b", no_emojis=True)

        assert "Do not use any emojis" not in with_emojis
        assert NO_EMOJIS_INSTRUCTION in without_emojis

    def test_additional_context(self, sample_diff_summary):
        """Test context sits between the diff data and the instructions."""
        prompt = compose_prompt(
            TEMPLATE, sample_diff_summary, "a", "b", context="Closes ticket PROJ-42"
        )

        assert "ADDITIONAL CONTEXT:\nCloses ticket PROJ-42" in prompt
        assert (
            prompt.index("=== SAMPLE CODE CHANGES ===")
            < prompt.index("ADDITIONAL CONTEXT:")
            < prompt.index("INSTRUCTIONS:")
        )

    def test_empty_context_is_omitted(self, sample_diff_summary):
        """Test empty or missing context adds no section."""
        assert "ADDITIONAL CONTEXT" not in compose_prompt(TEMPLATE, sample_diff_summary, "a", "b")
        assert "ADDITIONAL CONTEXT" not in compose_prompt(
            TEMPLATE, sample_diff_summary, "a", "b", context=""
        )

    def test_empty_fields_keep_headings(self):
        """Test empty and fallback fields still appear under their headings."""
        diff = DiffSummary(
            commit_messages="- Only commit (Jane, now)",
            file_changes="",
            diff_statistics="No diff statistics available",
            code_sample="",
        )

        prompt = compose_prompt(TEMPLATE, diff, "feature/x", "main")

        assert "=== COMMIT MESSAGES ===\n- Only commit (Jane, now)" in prompt
        assert "=== FILE CHANGES SUMMARY ===\n\n" in prompt
        assert "=== DIFF STATISTICS ===\nNo diff statistics available" in prompt

    def test_braces_are_inserted_verbatim(self):
        """Test format placeholders inside values are not interpreted."""
        diff = DiffSummary("- Add {name} support", "M\tf.py", "", "+x = {'a': 1}")

        prompt = compose_prompt("## Summary {placeholder}", diff, "a", "b")

        assert "- Add {name} support" in prompt
        assert "+x = {'a': 1}" in prompt
        assert "## Summary {placeholder}" in prompt
