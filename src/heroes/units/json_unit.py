"""Units whose default template comes from a versioned JSON data file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from heroes.core.exceptions import NoMatchingDataFile, UnitStateError
from heroes.core.logging import get_logger
from heroes.data.loader import TemplateLoader, get_template_loader, select_template
from heroes.data.paths import resolve_data_path
from heroes.units.base import BaseUnit


logger = get_logger(__name__)


class JsonUnit(BaseUnit):
    """A unit loaded from the latest patch of a JSON data file.

    Subclasses set ``data_file`` to the file glob and, for documents that
    hold many units, ``data_key`` to the entry to use. ``data_key`` may
    also be given per instance.

    Attributes:
        data_file: Glob of the data file under ``<root>/<version>/data/``.
        data_key: Key of this unit's template in the document, or None.
        source_file: The file the template was loaded from, once loaded.
    """

    data_file: ClassVar[str] = ""
    data_key: str | None = None

    def __init__(
        self,
        data_key: str | None = None,
        *,
        loader: TemplateLoader | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize an unloaded unit.

        Args:
            data_key: Template key overriding the class default.
            loader: Template loader; defaults to the shared one.
            **kwargs: Passed through to ``BaseUnit``.
        """
        super().__init__(**kwargs)
        if data_key is not None:
            self.data_key = data_key
        self._loader = loader
        self.source_file: Path | None = None

    def ensure_data(self) -> None:
        """Load the template from the newest matching data file, once.

        Raises:
            DataDirectoryMissing: If the data root does not exist.
            NoMatchingDataFile: If no data file matches ``data_file``.
            DataUnavailable: If the file cannot be parsed or lacks the template.
        """
        if self._default is not None:
            return

        if not self.data_file:
            raise UnitStateError(
                "Unit class does not declare a data_file",
                unit=type(self).__name__,
            )

        path = self.get_path(self.data_file)
        if path is None:
            raise NoMatchingDataFile(
                "Unable to locate the data file",
                pattern=self.data_file,
                data_path=str(resolve_data_path(self._data_path)),
            )

        loader = self._loader or get_template_loader()
        document = loader.load(path)
        self._load_default(select_template(document, self.data_key, source_file=str(path)))
        self.source_file = path

        logger.info(
            "Unit data loaded",
            unit=type(self).__name__,
            key=self.data_key,
            path=str(path),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data_key!r}, loaded={self.is_loaded})"


__all__ = ["JsonUnit"]
