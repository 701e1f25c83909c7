"""Locate the latest patch of a data file under the versioned data root.

The data root holds one directory per game version::

    <root>/2.47.0/data/herodata_2.47.0_enus.json
    <root>/2.55.0/data/herodata_2.55.0_enus.json

Matches are ordered as plain strings and the last one wins. This is a
lexicographic ordering, so ``10.0`` sorts before ``2.0``; callers that
need numeric version ordering must name their directories accordingly.
"""

from __future__ import annotations

from pathlib import Path

from heroes.core.config import get_settings
from heroes.core.exceptions import DataDirectoryMissing, NoMatchingDataFile
from heroes.core.logging import get_logger


logger = get_logger(__name__)


def resolve_data_path(data_path: Path | str | None = None) -> Path:
    """Return the data root, falling back to the configured one."""
    if data_path is None:
        return get_settings().data.path
    return Path(data_path)


def list_paths(pattern: str, *, data_path: Path | str | None = None) -> list[Path]:
    """List every versioned copy of a data file, oldest first.

    Args:
        pattern: Glob of the file name to locate (e.g. ``herodata_*.json``).
        data_path: Data root to search; defaults to the configured root.

    Returns:
        Matching paths sorted by their string form. Empty if nothing matches.

    Raises:
        DataDirectoryMissing: If the data root does not exist.
        NoMatchingDataFile: If the data root cannot be scanned.
    """
    root = resolve_data_path(data_path)

    if not root.is_dir():
        raise DataDirectoryMissing(
            "Unable to locate the heroes data directory",
            data_path=str(root),
        )

    try:
        matches = sorted(str(path) for path in root.glob(f"*/data/{pattern}"))
    except OSError as exc:
        raise NoMatchingDataFile(
            f"Unable to scan the data directory: {exc}",
            pattern=pattern,
            data_path=str(root),
        ) from exc

    return [Path(match) for match in matches]


def get_path(pattern: str, *, data_path: Path | str | None = None) -> Path | None:
    """Locate the latest patch file matching ``pattern``.

    Args:
        pattern: Glob of the file name to locate.
        data_path: Data root to search; defaults to the configured root.

    Returns:
        Path of the last match in string order, or None when nothing matches.

    Raises:
        DataDirectoryMissing: If the data root does not exist.
        NoMatchingDataFile: If the data root cannot be scanned.
    """
    matches = list_paths(pattern, data_path=data_path)
    if not matches:
        logger.warning(
            "No data file matched",
            pattern=pattern,
            data_path=str(resolve_data_path(data_path)),
        )
        return None

    latest = matches[-1]
    logger.debug("Resolved data file", pattern=pattern, path=str(latest), candidates=len(matches))
    return latest


__all__ = [
    "get_path",
    "list_paths",
    "resolve_data_path",
]
