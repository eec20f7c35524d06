"""
Shared pytest fixtures for eds-block-analyser tests.

Fixture templates are written to tmp_path so each test owns its files
(tests delete them to exercise the unreadable-template path).
"""

from pathlib import Path

import pytest

from capabilities import CapabilityRegistry, StaticText
from config import ServerConfig, build_components, load_config
from models import CapabilityDescriptor, TemplateDescriptor
from templates import TemplateStore


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    """A markdown template on disk."""
    path = tmp_path / "summary.md"
    path.write_text("# Summary\n\nÜmlaut and → arrows survive UTF-8.\n", encoding="utf-8")
    return path


@pytest.fixture
def store(template_file: Path) -> TemplateStore:
    """Store with one inline and one file-backed template."""
    return TemplateStore([
        TemplateDescriptor.text("alpha", "hello", "Inline greeting"),
        TemplateDescriptor.file("summary", template_file, "Summary skeleton"),
    ])


@pytest.fixture
def ping_registry() -> CapabilityRegistry:
    """Registry with a single ping → pong tool."""
    return CapabilityRegistry([
        CapabilityDescriptor(
            name="ping",
            title="Ping",
            description="Replies pong",
            handler=StaticText("pong"),
        ),
    ])


@pytest.fixture
def default_config() -> ServerConfig:
    """The shipped configuration, reading bundled assets."""
    return load_config()


@pytest.fixture
def default_components(default_config: ServerConfig) -> tuple[TemplateStore, CapabilityRegistry]:
    return build_components(default_config)
