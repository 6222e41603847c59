"""Lightweight sanity checks for PR templates."""

from dataclasses import dataclass, field


MAX_TEMPLATE_LENGTH = 10000
COMMON_SECTIONS = ("summary", "overview", "changes")

EMPTY_TEMPLATE_ISSUE = "Template is empty"
TOO_LONG_ISSUE = "Template is too long (max 10,000 characters)"
MISSING_SECTIONS_ISSUE = "Template should include common sections like Summary, Overview, or Changes"


@dataclass
class TemplateValidation:
    """Outcome of validate_template.

    Attributes:
        issues: Every problem found, in check order.
    """

    issues: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.issues


def validate_template(template: str) -> TemplateValidation:
    """Check a template for emptiness, size and familiar section names.

    All checks run independently, so several issues can be reported at once.

    Args:
        template: Template text.

    Returns:
        A TemplateValidation listing any issues.
    """
    issues = []

    if not template or not template.strip():
        issues.append(EMPTY_TEMPLATE_ISSUE)

    if len(template) > MAX_TEMPLATE_LENGTH:
        issues.append(TOO_LONG_ISSUE)

    lowered = template.lower()
    if not any(section in lowered for section in COMMON_SECTIONS):
        issues.append(MISSING_SECTIONS_ISSUE)

    return TemplateValidation(issues=issues)
