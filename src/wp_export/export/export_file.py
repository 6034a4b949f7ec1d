"""Base class for translation export files."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Union

from ..utils.logging import get_logger
from .entry import TranslationEntryRef
from .language import LocaleProvider

logger = get_logger(__name__)


class ExportFile(ABC):
    """An export file holding strings to translate from one language to another."""

    def __init__(
        self,
        source_language: LocaleProvider,
        target_language: LocaleProvider,
    ):
        """Initialize the export file.

        Args:
            source_language: Language of the exported content
            target_language: Language the content is to be translated into
        """
        self.source_language = source_language
        self.target_language = target_language

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension, without the leading dot."""

    @abstractmethod
    def add_translation_entry(
        self,
        ref: Union[TranslationEntryRef, Mapping],
        source: str,
        target: str = "",
    ) -> None:
        """Add a source string and optionally an existing translation."""

    @abstractmethod
    def get(self) -> str:
        """Return the exported data."""

    def get_filename(self, basename: str = "export") -> str:
        """Build a file name identifying both languages.

        Args:
            basename: Leading part of the file name

        Returns:
            File name such as ``export_en_US_fr_FR.po``
        """
        return (
            f"{basename}_{self.source_language.get_display_locale()}"
            f"_{self.target_language.get_display_locale()}.{self.extension}"
        )

    def save(self, path: Path) -> Path:
        """Write the exported data to disk.

        Args:
            path: Output file, or a directory to create ``get_filename()`` in

        Returns:
            Path of the written file
        """
        path = Path(path)
        if path.is_dir():
            path = path / self.get_filename()

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.get(), encoding="utf-8")

        logger.info(f"Saved export to {path}")
        return path
