"""Prompt for generating a PR description from a template and a diff summary."""

from typing import Optional

from prfect.git.models import DiffSummary


PR_PROMPT_TEMPLATE = """You are a senior software engineer reviewing code changes for a pull request.

Based on the following git information, generate a pull request description using the provided template structure:

TEMPLATE STRUCTURE TO FOLLOW:
{template}

BRANCH INFO:
- Source branch: {source_branch}
- Target branch: {target_branch}

GIT ANALYSIS:
=== COMMIT MESSAGES ===
{commit_messages}

=== FILE CHANGES SUMMARY ===
{file_changes}

=== DIFF STATISTICS ===
{diff_statistics}

=== SAMPLE CODE CHANGES ===
{code_sample}{context_section}

INSTRUCTIONS:
- Follow the template structure exactly
- Replace placeholder text with actual content based on the git analysis
- Fill in checkboxes appropriately based on the changes
- Keep the tone professional but concise
- Focus on the business value and technical changes
- Maximum 1000 words total
- Do not use placeholder text like "[Description]" - write the actual content{emoji_instruction}

Generate the PR description now:"""

CONTEXT_SECTION_TEMPLATE = """

ADDITIONAL CONTEXT:
{context}

Consider this additional context when generating the PR description."""

NO_EMOJIS_INSTRUCTION = "\n- Do not use any emojis in the response"


def compose_prompt(
    template: str,
    diff: DiffSummary,
    source_branch: str,
    target_branch: str,
    no_emojis: bool = False,
    context: Optional[str] = None,
) -> str:
    """Build the generation prompt.

    Values are inserted verbatim; empty diff fields still get their heading.

    Args:
        template: PR template whose structure the model should follow.
        diff: Summary of the branch changes.
        source_branch: Branch with the changes.
        target_branch: Branch the pull request targets.
        no_emojis: Add an instruction forbidding emojis.
        context: Optional free text from the user.

    Returns:
        The prompt string.
    """
    context_section = CONTEXT_SECTION_TEMPLATE.format(context=context) if context else ""

    # str.format does not re-scan substituted values, so braces in diffs are safe
    return PR_PROMPT_TEMPLATE.format(
        template=template,
        source_branch=source_branch,
        target_branch=target_branch,
        commit_messages=diff.commit_messages,
        file_changes=diff.file_changes,
        diff_statistics=diff.diff_statistics,
        code_sample=diff.code_sample,
        context_section=context_section,
        emoji_instruction=NO_EMOJIS_INSTRUCTION if no_emojis else "",
    )
