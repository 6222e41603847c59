"""End-to-end PR description generation.

Runs the steps in order, stopping at the first failure:
repository check, branch resolution, backend check, diff summary,
template resolution, prompt composition, generation and post-processing.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from prfect.config import PrfectConfig
from prfect.formatters import render_pr_json, strip_reasoning
from prfect.git import (
    NoChangesDetectedError,
    RepositoryUnavailableError,
    branch_exists,
    detect_default_branch,
    get_current_branch,
    is_git_repo,
    summarize,
)
from prfect.git.models import DiffSummary
from prfect.llm import (
    BackendTimeoutError,
    BackendUnreachableError,
    BaseGenerationClient,
    EmptyGenerationError,
    compose_prompt,
    get_client,
)
from prfect.template import TemplateSource, resolve_template_source


@dataclass
class PRGenerationResult:
    """Outcome of a successful generation run."""

    message: str
    raw_response: str
    source_branch: str
    target_branch: str
    model: str
    template_source: TemplateSource

    def to_json(self) -> str:
        return render_pr_json(self.message, self.source_branch, self.target_branch)


def _noop(message: str) -> None:
    pass


def resolve_branches(
    config: PrfectConfig,
    source: Optional[str] = None,
    target: Optional[str] = None,
    on_step: Callable[[str], None] = _noop,
) -> tuple[str, str]:
    """Determine and validate the source and target branches.

    Args:
        config: Supplies default branch candidates and the remote name.
        source: Source branch; defaults to the current branch.
        target: Target branch; defaults to the detected default branch.
        on_step: Receives progress messages.

    Returns:
        A (source, target) tuple.

    Raises:
        RepositoryUnavailableError: If not in a repository or a branch is unknown.
    """
    if not is_git_repo():
        raise RepositoryUnavailableError("Not in a git repository")

    if not source:
        source = get_current_branch()
        if not source:
            raise RepositoryUnavailableError("Could not determine current branch")

    if not target:
        target = detect_default_branch(config)
        if not target:
            raise RepositoryUnavailableError(
                "Could not detect default branch. Please specify target branch."
            )
        on_step(f"Auto-detected target branch: {target}")

    if not branch_exists(source, config):
        raise RepositoryUnavailableError(f"Source branch '{source}' does not exist")
    if not branch_exists(target, config):
        raise RepositoryUnavailableError(f"Target branch '{target}' does not exist")

    return source, target


def collect_changes(source: str, target: str, config: PrfectConfig) -> DiffSummary:
    """Summarize the branch changes, refusing to continue when there are none.

    Raises:
        NoChangesDetectedError: If there are neither commits nor file changes.
        GitError: If the branches share no common ancestor.
    """
    diff = summarize(source, target, config)
    if diff.is_empty():
        raise NoChangesDetectedError(f"No commits found between {target} and {source}")
    return diff


def generate_pr_description(
    config: PrfectConfig,
    source: Optional[str] = None,
    target: Optional[str] = None,
    context: Optional[str] = None,
    template_path: Optional[str] = None,
    template_content: Optional[str] = None,
    show_thinking: bool = False,
    client: Optional[BaseGenerationClient] = None,
    on_step: Optional[Callable[[str], None]] = None,
    cwd: Optional[Path] = None,
) -> PRGenerationResult:
    """Generate a PR description for source against target.

    Args:
        config: Effective configuration.
        source: Source branch (default: current branch).
        target: Target branch (default: auto-detected).
        context: Extra free text for the model.
        template_path: Explicit template file (overrides config.template_path).
        template_content: Inline template text.
        show_thinking: Keep <think> blocks in the message.
        client: Generation client to use instead of an OllamaClient.
        on_step: Receives progress messages.
        cwd: Directory used for template discovery.

    Returns:
        The PRGenerationResult.

    Raises:
        GitError: For repository problems, including NoChangesDetectedError.
        TemplateNotFoundError: If an explicit template cannot be read.
        LLMError: For backend problems.
    """
    step = on_step or _noop

    source, target = resolve_branches(config, source, target, step)
    step(f"Source branch: {source}")
    step(f"Target branch: {target}")
    step(f"Model: {config.model}")

    backend = get_client(config, client)
    step("Checking Ollama setup...")
    backend.ensure_model(config.model)

    step(f"Analyzing commits between {target} and {source}...")
    diff = collect_changes(source, target, config)

    # The configured default path only applies when the caller gave no template at all
    if not template_path and not template_content:
        template_path = config.template_path
    template_source = resolve_template_source(template_path, template_content, cwd)
    step(f"Using template: {template_source.describe()}")

    prompt = compose_prompt(
        template_source.text,
        diff,
        source,
        target,
        no_emojis=config.no_emojis,
        context=context,
    )

    step(f"Generating PR message using model: {config.model}")
    try:
        result = backend.generate(prompt, config.model)
    except BackendTimeoutError as e:
        raise BackendTimeoutError(f"Failed to generate PR message: {e}") from e
    except BackendUnreachableError as e:
        raise BackendUnreachableError(f"Failed to generate PR message: {e}") from e
    except EmptyGenerationError as e:
        raise EmptyGenerationError(f"Failed to generate PR message: {e}") from e

    message = strip_reasoning(result.text, preserve=show_thinking)
    if not message.strip():
        raise EmptyGenerationError("Failed to generate PR message: the response was empty after processing")

    return PRGenerationResult(
        message=message,
        raw_response=result.text,
        source_branch=source,
        target_branch=target,
        model=config.model,
        template_source=template_source,
    )
