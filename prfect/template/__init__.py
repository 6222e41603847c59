"""PR template resolution and validation for prfect."""

from prfect.template.default import DEFAULT_TEMPLATE
from prfect.template.exceptions import TemplateError, TemplateNotFoundError
from prfect.template.sources import (
    MAX_ROOT_SEARCH_LEVELS,
    TEMPLATE_CANDIDATE_PATHS,
    BuiltinDefault,
    DiscoveredFile,
    ExplicitPath,
    InlineContent,
    TemplateSource,
    find_repository_root,
    find_repository_template,
    load_template,
    resolve_template_path,
    resolve_template_source,
)
from prfect.template.validation import (
    TemplateValidation,
    validate_template,
)


__all__ = [
    "DEFAULT_TEMPLATE",
    "TemplateError",
    "TemplateNotFoundError",
    "MAX_ROOT_SEARCH_LEVELS",
    "TEMPLATE_CANDIDATE_PATHS",
    "BuiltinDefault",
    "DiscoveredFile",
    "ExplicitPath",
    "InlineContent",
    "TemplateSource",
    "find_repository_root",
    "find_repository_template",
    "load_template",
    "resolve_template_path",
    "resolve_template_source",
    "TemplateValidation",
    "validate_template",
]
