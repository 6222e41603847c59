"""Prompt templates for PR description generation."""

from prfect.llm.prompts.pr_description import (
    CONTEXT_SECTION_TEMPLATE,
    NO_EMOJIS_INSTRUCTION,
    PR_PROMPT_TEMPLATE,
    compose_prompt,
)

__all__ = [
    "PR_PROMPT_TEMPLATE",
    "CONTEXT_SECTION_TEMPLATE",
    "NO_EMOJIS_INSTRUCTION",
    "compose_prompt",
]
