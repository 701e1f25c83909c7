"""Versioned data lookup and template loading.

Submodules:
    paths: Locate the latest patch of a data file
    loader: Parse and cache JSON templates
"""

from __future__ import annotations

from heroes.data.loader import (
    TemplateLoader,
    clear_template_cache,
    get_template_loader,
    select_template,
)
from heroes.data.paths import get_path, list_paths, resolve_data_path


__all__ = [
    "TemplateLoader",
    "clear_template_cache",
    "get_template_loader",
    "select_template",
    "get_path",
    "list_paths",
    "resolve_data_path",
]
