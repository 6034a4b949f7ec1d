"""PO file export of site translations."""

from datetime import datetime, timezone
from typing import Callable, Mapping, Optional, Union

from ..utils.config_loader import ExportConfig
from ..utils.logging import get_logger
from .encoder import Encoder, PolibEncoder
from .entry import TranslationEntry, TranslationEntryRef
from .export_file import ExportFile
from .language import LocaleProvider

logger = get_logger(__name__)

# Matches the gettext header date layout, e.g. "2024-05-01 12:30+0000"
PO_DATE_FORMAT = "%Y-%m-%d %H:%M%z"


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class POExport(ExportFile):
    """Collects strings to translate and renders them as a PO file.

    Headers are written on each call to :meth:`get`, so calling it again
    refreshes both date headers without duplicating entries.
    """

    extension = "po"

    def __init__(
        self,
        source_language: LocaleProvider,
        target_language: LocaleProvider,
        encoder: Optional[Encoder] = None,
        site_url: Union[str, Callable[[], str], None] = None,
        clock: Callable[[], datetime] = utc_now,
        config: Optional[ExportConfig] = None,
    ):
        """Initialize the export.

        Args:
            source_language: Language of the exported content
            target_language: Language the content is to be translated into
            encoder: Catalogue writer (creates a PolibEncoder if None)
            site_url: Site base URL, or a callable returning it
                (falls back to ``config.site_url`` if None)
            clock: Callable returning the current time
            config: Application settings (defaults if None)
        """
        super().__init__(source_language, target_language)
        self.config = config or ExportConfig()
        self.encoder = encoder if encoder is not None else PolibEncoder()
        self.site_url = site_url if site_url is not None else self.config.site_url
        self.clock = clock
        self.entries: list[TranslationEntry] = []

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    def add_translation_entry(
        self,
        ref: Union[TranslationEntryRef, Mapping],
        source: str,
        target: str = "",
    ) -> None:
        """Add a source string and optionally a preexisting translation.

        Empty sources are skipped.

        Args:
            ref: Content type, object ID and optional field ID/comment of the string
            source: The source to be translated
            target: A preexisting translation, if any
        """
        if source == "":
            logger.debug(f"Skipping empty source for {ref}")
            return

        entry = TranslationEntry.from_ref(ref, source, target)
        self.entries.append(entry)
        self.encoder.add_entry(entry)

    add_entry = add_translation_entry

    def get(self) -> str:
        """Return the PO file content.

        Encoder errors are not caught.
        """
        self.encoder.set_comment_before_headers(self._comment_before_headers())
        self._set_file_headers()

        logger.debug(f"Exporting {self.entry_count} entries")
        return self.encoder.export()

    render = get

    def _set_file_headers(self) -> None:
        # https://www.gnu.org/software/trans-coord/manual/gnun/html_node/PO-Header.html
        date = self._current_date()
        headers = [
            ("Language", self.target_language.get_display_locale()),
            ("Project-Id-Version", self.config.project_id_version),
            ("POT-Creation-Date", date),
            ("PO-Revision-Date", date),
            ("MIME-Version", "1.0"),
            ("Content-Type", "text/plain; charset=utf-8"),
            ("Content-Transfer-Encoding", "8bit"),
            ("X-Source-Language", self.source_language.get_display_locale()),
            ("X-Polylang-Site-Reference", self._site_url()),
        ]
        for name, value in headers:
            self.encoder.set_header(name, value)

    def _comment_before_headers(self) -> str:
        return "\n".join(
            [
                f"This file was generated by {self.config.product_name}",
                self.config.product_url,
            ]
        )

    def _current_date(self) -> str:
        return self.clock().astimezone(timezone.utc).strftime(PO_DATE_FORMAT)

    def _site_url(self) -> str:
        if callable(self.site_url):
            return self.site_url()
        return self.site_url
