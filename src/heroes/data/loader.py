"""JSON template loading for unit default state.

Parsed documents are cached per resolved file, so every unit of a type
reads its data file once per process. Units take their own deep copy of
the template they select.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from heroes.core.config import get_settings
from heroes.core.exceptions import DataUnavailable
from heroes.core.logging import get_logger


logger = get_logger(__name__)


class TemplateLoader:
    """Parse and cache JSON data files.

    Example:
        >>> loader = TemplateLoader()
        >>> document = loader.load(Path("data/heroes/2.55.0/data/herodata.json"))
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        """Initialize the loader.

        Args:
            encoding: Text encoding of the data files.
        """
        self.encoding = encoding
        self._cache: dict[Path, Any] = {}

    def __contains__(self, path: object) -> bool:
        return isinstance(path, (str, Path)) and Path(path).resolve() in self._cache

    def load(self, path: Path | str) -> Any:
        """Load a JSON document, parsing it only on first request.

        Args:
            path: Path of the data file.

        Returns:
            The parsed document. Shared between callers; do not mutate.

        Raises:
            DataUnavailable: If the file cannot be read or is not valid JSON.
        """
        resolved = Path(path).resolve()
        if resolved in self._cache:
            return self._cache[resolved]

        try:
            with resolved.open(encoding=self.encoding) as handle:
                document = json.load(handle)
        except OSError as exc:
            raise DataUnavailable(
                f"Unable to read data file: {exc}",
                source_file=str(path),
            ) from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DataUnavailable(
                f"Malformed data file: {exc}",
                source_file=str(path),
            ) from exc

        self._cache[resolved] = document
        logger.info("Template document loaded", path=str(resolved))
        return document

    def clear(self) -> None:
        """Forget every parsed document."""
        self._cache.clear()


def select_template(
    document: Any,
    key: str | None,
    *,
    source_file: str | None = None,
) -> Mapping[str, Any]:
    """Pick a unit's template out of a parsed document.

    Args:
        document: Parsed JSON document.
        key: Key of the unit within a multi-unit document, or None to use
            the whole document.
        source_file: Originating file, for error context.

    Returns:
        The template mapping.

    Raises:
        DataUnavailable: If the key is missing or the template is not an object.
    """
    template = document
    if key is not None:
        if not isinstance(document, Mapping) or key not in document:
            raise DataUnavailable(
                f"No template named {key!r} in data file",
                source_file=source_file,
                details={"key": key},
            )
        template = document[key]

    if not isinstance(template, Mapping):
        raise DataUnavailable(
            "Unit template must be a JSON object",
            source_file=source_file,
            details={"key": key, "type": type(template).__name__},
        )
    return template


@lru_cache(maxsize=1)
def get_template_loader() -> TemplateLoader:
    """Get the process-wide template loader."""
    return TemplateLoader(encoding=get_settings().data.encoding)


def clear_template_cache() -> None:
    """Drop the process-wide loader and everything it has parsed."""
    get_template_loader.cache_clear()


__all__ = [
    "TemplateLoader",
    "select_template",
    "get_template_loader",
    "clear_template_cache",
]
