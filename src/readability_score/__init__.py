"""
readability_score package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .pipeline import analyze_corpus, analyze_document, analyze_text, build_report
from .selection import InvalidIndexSelectionError, parse_selection

__all__ = [
    "ReadabilityConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "analyze_text",
    "analyze_document",
    "analyze_corpus",
    "build_report",
    "parse_selection",
    "InvalidIndexSelectionError",
]

__version__ = "0.1.0"
