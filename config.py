"""
Server Configuration - Single Source of Truth

The template set and tool contract are defined here. Do not duplicate elsewhere.
One contract version: tool names and their meaning do not change at runtime.
"""

from dataclasses import dataclass
from pathlib import Path

from capabilities import CapabilityRegistry, TemplateCatalog, TemplateLookup, TemplateText
from models import CapabilityDescriptor, TemplateDescriptor
from templates import TemplateStore

# Package root (where this file lives)
_PACKAGE_ROOT = Path(__file__).parent

# Template files shipped with the server
ASSETS_DIR = _PACKAGE_ROOT / "templates" / "assets"

SERVER_NAME = "eds-block-analyser"
SERVER_VERSION = "1.0.0"

# Header row every ui_blocks_analysis.csv must start with
CSV_HEADER = (
    '"Page Title","UI Component Name","Function description","Tshirt Sizing",'
    '"Number of occurrences","Complexity justification","Page URL",'
    '"Source block name","Other remarks"'
)


@dataclass(frozen=True)
class ServerConfig:
    """Immutable startup configuration. Built once, passed to constructors."""
    name: str
    version: str
    templates: tuple[TemplateDescriptor, ...]


def default_templates(assets_dir: Path = ASSETS_DIR) -> tuple[TemplateDescriptor, ...]:
    """The fixed template set. Paths are resolved lazily, at read time."""
    prompts = assets_dir / "prompts"
    artifacts = assets_dir / "artifacts"
    return (
        TemplateDescriptor.file(
            "eds_block_analyser", prompts / "eds_block_analyser.md",
            "UI architect prompt: estimate effort for converting pages/designs into EDS blocks",
        ),
        TemplateDescriptor.file(
            "self_evaluation", prompts / "self_evaluation.md",
            "Six 0-100 quality metrics, passing threshold and iteration protocol",
        ),
        TemplateDescriptor.text(
            "csv_header", CSV_HEADER + "\n",
            "Header row for ui_blocks_analysis.csv", media_type="text/csv",
        ),
        TemplateDescriptor.file(
            "ui_blocks_analysis", artifacts / "ui_blocks_analysis.csv",
            "CSV component breakdown with one example row",
        ),
        TemplateDescriptor.file(
            "analysis_summary", artifacts / "analysis_summary.md",
            "Summary report skeleton: statistics, reusability, risks",
        ),
        TemplateDescriptor.file(
            "evaluation_log", artifacts / "evaluation_log.md",
            "Evaluation log skeleton: per-iteration scores and final verdict",
        ),
    )


def load_config(assets_dir: Path | None = None) -> ServerConfig:
    """
    Build the server configuration.

    Args:
        assets_dir: Directory holding prompts/ and artifacts/ (default: bundled assets)
    """
    return ServerConfig(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        templates=default_templates(assets_dir or ASSETS_DIR),
    )


# StaticText (constant text, no template) is not part of this contract;
# it backs single-tool registries built outside this module.
def default_capabilities(store: TemplateStore) -> tuple[CapabilityDescriptor, ...]:
    """The fixed tool contract, bound to a template store."""
    return (
        CapabilityDescriptor(
            name="eds_block_analyser",
            title="EDS Block Analyser",
            description=(
                "Get a UI architect prompt for analyzing and estimating UI block "
                "conversion from Figma designs or web pages"
            ),
            handler=TemplateText(store, "eds_block_analyser"),
        ),
        CapabilityDescriptor(
            name="self_evaluation_framework",
            title="Self-Evaluation Framework",
            description=(
                "Get the quality metrics (0-100 each), passing threshold and "
                "iteration protocol used to score a block analysis"
            ),
            handler=TemplateText(store, "self_evaluation"),
        ),
        CapabilityDescriptor(
            name="csv_output_format",
            title="CSV Output Format",
            description="Get the exact header row required for ui_blocks_analysis.csv",
            handler=TemplateText(store, "csv_header"),
        ),
        CapabilityDescriptor(
            name="list_templates",
            title="List Templates",
            description="List every template available through get_template",
            handler=TemplateCatalog(store),
        ),
        CapabilityDescriptor(
            name="get_template",
            title="Get Template",
            description=(
                "Get a markdown or CSV template by name. "
                f"Available: {', '.join(store.names())}"
            ),
            handler=TemplateLookup(store),
            input_schema={
                "type": "object",
                "properties": {
                    "templateName": {
                        "type": "string",
                        "description": "Template name, e.g. 'analysis_summary'",
                    },
                },
                "required": ["templateName"],
            },
        ),
    )


def build_components(config: ServerConfig) -> tuple[TemplateStore, CapabilityRegistry]:
    """
    Wire store and registry from config.

    Raises:
        ConfigurationError: On duplicate or malformed descriptors
    """
    store = TemplateStore(config.templates)
    registry = CapabilityRegistry(default_capabilities(store))
    return store, registry
