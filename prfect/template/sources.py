"""Template resolution.

A template comes from exactly one of four sources, tried in priority order:

1. ExplicitPath: a file the user asked for (missing file is an error)
2. InlineContent: template text passed directly
3. DiscoveredFile: a conventional PR template file in the repository
4. BuiltinDefault: the hard-coded DEFAULT_TEMPLATE
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from prfect.template.default import DEFAULT_TEMPLATE
from prfect.template.exceptions import TemplateNotFoundError


REPO_METADATA_DIR = ".git"
MAX_ROOT_SEARCH_LEVELS = 10

# Repository-relative locations checked for a PR template, in order
TEMPLATE_CANDIDATE_PATHS = (
    ".github/pull_request_template.md",
    ".github/PULL_REQUEST_TEMPLATE.md",
    "docs/pull_request_template.md",
    ".github/PULL_REQUEST_TEMPLATE/pull_request_template.md",
)


@dataclass(frozen=True)
class ExplicitPath:
    path: Path
    text: str

    def describe(self) -> str:
        return f"file {self.path}"


@dataclass(frozen=True)
class InlineContent:
    text: str

    def describe(self) -> str:
        return "inline content"


@dataclass(frozen=True)
class DiscoveredFile:
    path: Path
    text: str

    def describe(self) -> str:
        return f"repository template {self.path}"


@dataclass(frozen=True)
class BuiltinDefault:
    text: str = DEFAULT_TEMPLATE

    def describe(self) -> str:
        return "built-in default"


TemplateSource = Union[ExplicitPath, InlineContent, DiscoveredFile, BuiltinDefault]


def find_repository_root(
    start: Optional[Path] = None,
    max_levels: int = MAX_ROOT_SEARCH_LEVELS,
) -> Optional[Path]:
    """Walk up from start looking for a directory containing .git.

    Args:
        start: Directory to start from; defaults to the working directory.
        max_levels: Maximum number of directories to inspect.

    Returns:
        The repository root, or None if not found within max_levels.
    """
    current = (start or Path.cwd()).resolve()

    for _ in range(max_levels):
        if (current / REPO_METADATA_DIR).exists():
            return current
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            break
        current = parent

    return None


def resolve_template_path(template_path: str, cwd: Optional[Path] = None) -> Path:
    """Resolve a template path against the repository root.

    Absolute paths are returned as-is. Relative paths are joined to the
    repository root, or to the working directory when there is no root.
    """
    path = Path(template_path).expanduser()
    if path.is_absolute():
        return path

    base = cwd or Path.cwd()
    repo_root = find_repository_root(base)
    if repo_root is not None:
        return repo_root / path
    return base / path


def _load_explicit(template_path: str, cwd: Optional[Path]) -> ExplicitPath:
    absolute_path = resolve_template_path(template_path, cwd)
    if not absolute_path.is_file():
        raise TemplateNotFoundError(
            f"Failed to load template from {template_path}: "
            f"Template file not found: {absolute_path}"
        )
    try:
        return ExplicitPath(path=absolute_path, text=absolute_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateNotFoundError(f"Failed to load template from {template_path}: {e}")


def find_repository_template(cwd: Optional[Path] = None) -> Optional[DiscoveredFile]:
    """Look for a PR template in the conventional repository locations.

    Returns:
        The first readable candidate, or None when there is no repository
        root or no candidate can be read.
    """
    repo_root = find_repository_root(cwd)
    if repo_root is None:
        return None

    for candidate in TEMPLATE_CANDIDATE_PATHS:
        full_path = repo_root / candidate
        if not full_path.is_file():
            continue
        try:
            return DiscoveredFile(path=full_path, text=full_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            # Unreadable candidate, keep searching
            continue

    return None


def resolve_template_source(
    template_path: Optional[str] = None,
    template_content: Optional[str] = None,
    cwd: Optional[Path] = None,
) -> TemplateSource:
    """Pick the template source by priority.

    Args:
        template_path: Explicit template file.
        template_content: Inline template text.
        cwd: Directory to resolve from; defaults to the working directory.

    Returns:
        The winning TemplateSource.

    Raises:
        TemplateNotFoundError: If template_path is given but cannot be read.
    """
    if template_path:
        return _load_explicit(template_path, cwd)

    if template_content:
        return InlineContent(text=template_content)

    discovered = find_repository_template(cwd)
    if discovered is not None:
        return discovered

    return BuiltinDefault()


def load_template(
    template_path: Optional[str] = None,
    template_content: Optional[str] = None,
    cwd: Optional[Path] = None,
) -> str:
    """Return the text of the template chosen by resolve_template_source."""
    return resolve_template_source(template_path, template_content, cwd).text
