"""Prompt template rendering.

Templates mark substitution points with ``{{$name}}``. Rendering replaces
every occurrence of a bound name with its value in a single pass, so values
are inserted literally and never scanned again. Placeholders without a bound
value are left in the output as written unless ``strict`` is requested.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass

from chat_samples.core.errors import MissingArgumentError

PLACEHOLDER_PATTERN = re.compile(r"\{\{\$([A-Za-z_][A-Za-z0-9_]*)\}\}")


def find_variables(template: str) -> list[str]:
    """Return placeholder names in order of first appearance."""
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))


def render(template: str, arguments: Mapping[str, str], strict: bool = False) -> str:
    """Substitute bound arguments into a template.

    Args:
        template: Template text containing ``{{$name}}`` placeholders.
        arguments: Values by placeholder name (case-sensitive).
        strict: Raise instead of leaving unbound placeholders in place.

    Returns:
        The rendered prompt.

    Raises:
        MissingArgumentError: In strict mode, if any placeholder is unbound.
    """
    if strict:
        missing = [name for name in find_variables(template) if name not in arguments]
        if missing:
            raise MissingArgumentError(missing)

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in arguments:
            return str(arguments[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(substitute, template)


@dataclass(frozen=True)
class PromptTemplate:
    """An immutable template, bound many times with different arguments."""

    template: str

    def variables(self) -> list[str]:
        return find_variables(self.template)

    def render(self, arguments: Mapping[str, str] | None = None, strict: bool = False) -> str:
        return render(self.template, arguments or {}, strict=strict)

    def __str__(self) -> str:
        return self.template
