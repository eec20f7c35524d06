"""
Templates — named prompt and artifact templates.

assets/ holds the file-backed sources; config.py decides which names exist.
"""

from .store import TemplateStore

__all__ = ["TemplateStore"]
