"""
Capabilities — named tools and the handlers behind them.

Handler variants:
- StaticText: constant text
- TemplateText: one fixed template
- TemplateLookup: template chosen by argument (get_template)
- TemplateCatalog: listing of all templates (list_templates)
"""

from .handlers import StaticText, TemplateText, TemplateLookup, TemplateCatalog
from .registry import CapabilityRegistry

__all__ = [
    "StaticText", "TemplateText", "TemplateLookup", "TemplateCatalog",
    "CapabilityRegistry",
]
