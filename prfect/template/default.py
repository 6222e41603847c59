"""Built-in PR description template used when no other template is found."""

DEFAULT_TEMPLATE = """## Summary
[Brief description of what this PR accomplishes]

## Type of Change
- [ ] Bug fix (non-breaking change which fixes an issue)
- [ ] New feature (non-breaking change which adds functionality)
- [ ] Breaking change (fix or feature that would cause existing functionality to not work as expected)
- [ ] Documentation update
- [ ] Configuration change
- [ ] Test improvement
- [ ] Code refactoring

## Overview
[A brief 1-3 sentence synopsis of the work]

## Key Changes
[Maximum 5 bullet points of the most important changes]
- 
- 
- 

## How has this been tested?
- [ ] Unit tests pass
- [ ] Manual testing completed
- [ ] Edge cases considered

## Breaking Changes
[Only include if there are breaking changes]

## Testing
[Include if applicable, describe how the changes were tested, any new tests added, etc.]"""
