"""PR message post-processing and rendering."""

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import NamedTuple, Optional

from pydantic import BaseModel


REASONING_OPEN_TAG = "<think>"
REASONING_CLOSE_TAG = "</think>"

# Non-greedy so each pair is matched on its own; DOTALL lets a pair span lines
_REASONING_PATTERN = re.compile(
    re.escape(REASONING_OPEN_TAG) + r"(.*?)" + re.escape(REASONING_CLOSE_TAG),
    re.IGNORECASE | re.DOTALL,
)

_HEADING_PREFIX = re.compile(r"^#+\s*")
_CONVENTIONAL_PREFIX = re.compile(
    r"^(feat|fix|docs|style|refactor|test|chore):\s*", re.IGNORECASE
)
_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

DEFAULT_TITLE = "Auto-generated PR"
DEFAULT_BODY = "No description provided"


class TitleAndBody(NamedTuple):
    """Title and body extracted from a PR message."""

    title: str
    body: str


class PRMessageJSON(BaseModel):
    """Structured PR message emitted for automated consumers.

    Field order is part of the output format.
    """

    title: str
    body: str
    source_branch: str
    target_branch: str


def strip_reasoning(text: str, preserve: bool = False) -> str:
    """Remove <think>...</think> blocks from a model response.

    Args:
        text: The raw model output.
        preserve: Return the text untouched when True.

    Returns:
        The text without reasoning blocks, trimmed. Unclosed tags are kept.
    """
    if preserve:
        return text
    return _REASONING_PATTERN.sub("", text).strip()


def has_reasoning_markers(text: str) -> bool:
    """Check whether the text contains at least one complete reasoning block."""
    return _REASONING_PATTERN.search(text) is not None


def count_reasoning_markers(text: str) -> int:
    """Count complete reasoning blocks in the text."""
    return len(_REASONING_PATTERN.findall(text))


def extract_reasoning_contents(text: str) -> list[str]:
    """Return the trimmed inner text of each reasoning block, in order."""
    return [match.strip() for match in _REASONING_PATTERN.findall(text)]


def limit_lines(content: str, max_lines: int) -> str:
    """Keep only the first max_lines lines of content.

    Args:
        content: Newline separated text.
        max_lines: Maximum number of lines to keep.

    Returns:
        The truncated text, joined with newlines.
    """
    return "\n".join(content.split("\n")[: max(max_lines, 0)])


def extract_title_and_body(message: str) -> TitleAndBody:
    """Split a generated PR message into a title and a body.

    The first non-blank line becomes the title, with markdown heading markers
    and a conventional commit prefix (feat:, fix:, ...) removed. Blank lines
    directly after the title are skipped and the rest forms the body.

    Args:
        message: The processed PR message.

    Returns:
        A TitleAndBody. Placeholders are used for missing parts.
    """
    lines = message.strip().split("\n")

    title = ""
    body_start = len(lines)
    for index, line in enumerate(lines):
        stripped = line.strip()
        if stripped:
            title = _HEADING_PREFIX.sub("", stripped)
            title = _CONVENTIONAL_PREFIX.sub("", title).strip()
            body_start = index + 1
            break

    while body_start < len(lines) and not lines[body_start].strip():
        body_start += 1

    body = "\n".join(lines[body_start:]).strip()

    return TitleAndBody(title or DEFAULT_TITLE, body or DEFAULT_BODY)


def render_pr_json(message: str, source_branch: str, target_branch: str) -> str:
    """Render a PR message as the JSON document used in CI mode.

    Args:
        message: The processed PR message.
        source_branch: Branch with the changes.
        target_branch: Branch the pull request targets.

    Returns:
        Pretty printed JSON with title, body, source_branch and target_branch keys.
    """
    title, body = extract_title_and_body(message)
    data = PRMessageJSON(
        title=title,
        body=body,
        source_branch=source_branch,
        target_branch=target_branch,
    )
    return data.model_dump_json(indent=2)


def generate_filename(
    prefix: str = "pr_message",
    extension: str = "md",
    now: Optional[datetime] = None,
) -> str:
    """Build a timestamped filename such as pr_message_2024-05-01T12-30-45.md.

    Args:
        prefix: Filename prefix.
        extension: File extension without the dot.
        now: Timestamp to use; defaults to the current UTC time.

    Returns:
        The filename.
    """
    now = now or datetime.now(timezone.utc)
    timestamp = now.strftime("%Y-%m-%dT%H-%M-%S")
    return f"{prefix}_{timestamp}.{extension}"


def validate_file_extension(filename: str, allowed_extensions: tuple[str, ...] = ("md", "txt")) -> bool:
    """Check that a filename ends in one of the allowed extensions."""
    if "." not in filename:
        return False
    extension = filename.rsplit(".", 1)[1].lower()
    return extension in allowed_extensions


def format_content(content: str) -> str:
    """Normalize spacing: at most one blank line in a row, no trailing spaces."""
    content = re.sub(r"\n{3,}", "\n\n", content)
    content = content.strip()
    return re.sub(r"[ \t]+$", "", content, flags=re.MULTILINE)


def strip_ansi_codes(content: str) -> str:
    """Remove ANSI color escape sequences."""
    return _ANSI_ESCAPE.sub("", content)


def save_message(content: str, filename: Optional[str] = None, directory: Optional[Path] = None) -> Path:
    """Write a PR message to disk.

    Args:
        content: The message to save.
        filename: Target filename; a timestamped name is generated if omitted.
        directory: Directory for relative filenames; defaults to the working directory.

    Returns:
        Path of the written file.
    """
    path = Path(filename or generate_filename())
    if directory is not None and not path.is_absolute():
        path = directory / path
    path.write_text(content, encoding="utf-8")
    return path
