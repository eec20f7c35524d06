"""
Capability handlers — the things a tool name maps to.

Every handler exposes invoke(arguments) -> str. No handler does network I/O
or mutates shared state; the only side effect is a template file read.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from templates import TemplateStore
from validation import require_string


@dataclass(frozen=True)
class StaticText:
    """Returns a constant."""
    text: str

    def invoke(self, arguments: Mapping[str, Any]) -> str:
        return self.text


@dataclass(frozen=True)
class TemplateText:
    """Returns one fixed template from the store."""
    store: TemplateStore
    template_name: str

    def invoke(self, arguments: Mapping[str, Any]) -> str:
        return self.store.resolve(self.template_name)


@dataclass(frozen=True)
class TemplateLookup:
    """
    Returns the template named by a caller argument (get_template).

    A missing or non-string argument is a usage error. An unknown template
    name is not: the store answers with the list of valid names.
    """
    store: TemplateStore
    argument: str = "templateName"

    def invoke(self, arguments: Mapping[str, Any]) -> str:
        hint = f"Available templates: {', '.join(self.store.names())}"
        name = require_string(arguments, self.argument, hint)
        return self.store.resolve(name)


@dataclass(frozen=True)
class TemplateCatalog:
    """Markdown listing of every template (list_templates)."""
    store: TemplateStore

    def invoke(self, arguments: Mapping[str, Any]) -> str:
        descriptors = self.store.descriptors()
        if not descriptors:
            return "# Available Templates\n\nNo templates are registered.\n"

        lines = [
            "# Available Templates",
            "",
            "| Name | Format | Description |",
            "|------|--------|-------------|",
        ]
        for d in descriptors:
            fmt = "CSV" if d.media_type == "text/csv" else "Markdown"
            lines.append(f"| `{d.name}` | {fmt} | {d.description} |")
        lines += [
            "",
            f"Usage: get_template(templateName='{descriptors[0].name}')",
            "",
        ]
        return "\n".join(lines)
