"""
Template Store — logical template name → text.

Sources are inline strings or UTF-8 files under templates/assets/.
Files are re-read on every call (no cache): templates only change between
deployments and a read is a single local file.

Failures are data, not exceptions: resolve_result() returns a TemplateFailure
and resolve() turns it into an agent-readable payload listing valid names.
"""

from typing import Iterable

from logging_config import log_template_failure, log_template_read
from models import (
    ConfigurationError,
    ErrorKind,
    ResolvedTemplate,
    TemplateDescriptor,
    TemplateFailure,
    TemplateResult,
)
from validation import is_valid_name


class TemplateStore:
    """
    Read-only mapping of template names to their sources.

    Built once at startup; a malformed or duplicate descriptor raises
    ConfigurationError so the server refuses to start.
    """

    def __init__(self, descriptors: Iterable[TemplateDescriptor]) -> None:
        self._templates: dict[str, TemplateDescriptor] = {}
        for descriptor in descriptors:
            _check_descriptor(descriptor)
            if descriptor.name in self._templates:
                raise ConfigurationError(f"Duplicate template name: {descriptor.name!r}")
            self._templates[descriptor.name] = descriptor

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def names(self) -> list[str]:
        """Registered names, in registration order."""
        return list(self._templates)

    def descriptors(self) -> list[TemplateDescriptor]:
        return list(self._templates.values())

    def get(self, name: str) -> TemplateDescriptor | None:
        return self._templates.get(name)

    def resolve_result(self, name: str) -> TemplateResult:
        """
        Resolve a template name to its content.

        Lookup is a case-sensitive exact match.

        Returns:
            ResolvedTemplate on success
            TemplateFailure(TEMPLATE_NOT_FOUND) for unknown/empty names
            TemplateFailure(TEMPLATE_UNREADABLE) when a file source can't be read
        """
        descriptor = self._templates.get(name) if isinstance(name, str) else None
        if descriptor is None:
            return self._failure(ErrorKind.TEMPLATE_NOT_FOUND, name)

        if descriptor.inline is not None:
            return ResolvedTemplate(descriptor.name, descriptor.inline, descriptor.media_type)

        try:
            with open(descriptor.path, encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            log_template_failure(descriptor.name, descriptor.path, e)
            return self._failure(ErrorKind.TEMPLATE_UNREADABLE, descriptor.name)

        log_template_read(descriptor.name, len(text))
        return ResolvedTemplate(descriptor.name, text, descriptor.media_type)

    def resolve(self, name: str) -> str:
        """
        Resolve a template name to text. Never raises for caller input.

        Unknown or unreadable templates produce a descriptive payload
        enumerating the valid names instead of an error.
        """
        result = self.resolve_result(name)
        if isinstance(result, TemplateFailure):
            return result.describe()
        return result.text

    def _failure(self, kind: ErrorKind, name: object) -> TemplateFailure:
        label = name if isinstance(name, str) else ""
        return TemplateFailure(kind=kind, name=label, available=tuple(self._templates))


def _check_descriptor(descriptor: TemplateDescriptor) -> None:
    """Reject descriptors that can never resolve."""
    if not is_valid_name(descriptor.name):
        raise ConfigurationError(f"Invalid template name: {descriptor.name!r}")
    has_inline = descriptor.inline is not None
    has_path = descriptor.path is not None
    if has_inline == has_path:
        raise ConfigurationError(
            f"Template {descriptor.name!r} needs exactly one source (inline text or file path)"
        )
