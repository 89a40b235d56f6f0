import re
from dataclasses import dataclass, field
from typing import Any, Mapping

# Anything of the form {{...}} left after substitution
UNRESOLVED_PATTERN = re.compile(r"\{\{[^}]+\}\}")


@dataclass(frozen=True)
class RenderedTemplate:
    """Template text after variable substitution."""
    text: str
    unresolved: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.unresolved


def format_value(value: Any) -> str:
    """String form of a template variable (true/false, canonical decimals, null)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render(template: str, variables: Mapping[str, Any] | None) -> RenderedTemplate:
    """
    Substitute {{key}} placeholders in a prompt template.

    Every occurrence of each key's placeholder is replaced in a single pass,
    keys tried in insertion order, so substituted values are never scanned
    again. Placeholders still present afterwards are reported, not raised:
    the text is usable as-is. A value that itself contains {{...}} shows up
    as unresolved.

    Args:
        template: Template text
        variables: Mapping of variable name to scalar value

    Returns:
        RenderedTemplate with the text and any unresolved placeholders
    """
    rendered = template
    if variables:
        replacements = {"{{" + str(key) + "}}": format_value(value) for key, value in variables.items()}
        pattern = re.compile("|".join(re.escape(token) for token in replacements))
        rendered = pattern.sub(lambda m: replacements[m.group(0)], template)

    return RenderedTemplate(text=rendered, unresolved=UNRESOLVED_PATTERN.findall(rendered))
